import logging

from rest_framework import status
from rest_framework.exceptions import APIException, NotFound
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from core.services.headers import failure_alert

logger = logging.getLogger(__name__)


class InvalidRequest(APIException):
    """The client sent an identifier where none is allowed."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'invalid request'
    default_code = 'invalid_request'

    def __init__(self, entity_name, error_key, message):
        super().__init__(detail=message, code=error_key)
        self.entity_name = entity_name
        self.error_key = error_key


class EntityNotFound(NotFound):
    """No entity stored under the requested identifier; answered with an empty 404."""


def api_exception_handler(exc, context):
    if isinstance(exc, EntityNotFound):
        return Response(status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, InvalidRequest):
        return Response(
            {'ok': False, 'error': {'code': exc.error_key, 'message': str(exc.detail), 'entity': exc.entity_name}},
            status=exc.status_code,
            headers=failure_alert(exc.entity_name, exc.error_key),
        )
    resp = drf_exception_handler(exc, context)
    if resp is None:
        request = (context or {}).get('request')
        logger.exception("Unhandled error on %s", getattr(request, 'path', '?'))
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}}, status=500)
    # normalize response
    detail = None
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = str(resp.data)
    return Response({'ok': False, 'error': {'code': 'api_error', 'message': detail}}, status=resp.status_code, headers=_passthrough_headers(resp))


def _passthrough_headers(resp):
    # keep WWW-Authenticate / Allow / Retry-After set by DRF
    return {k: v for k, v in resp.headers.items() if k.lower() not in ('content-type', 'content-length')}
