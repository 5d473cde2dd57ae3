"""
Generic REST resource for a single entity type.

An :class:`EntityResource` is built with the repository it persists to
and the serializer that validates its payloads, then exposes two DRF
views: the collection (``/api/<plural>``: list, create, update) and the
detail (``/api/<plural>/<id>``: get, delete).  Nothing is looked up
globally, so tests can hand a resource any repository implementation.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple, Type

from django.urls import path
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.serializers import ModelSerializer

from ..exceptions import EntityNotFound, InvalidRequest
from ..services.headers import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
    pagination_headers,
)
from ..services.identity import Identity, Saved, Unsaved, identity_from_payload
from ..services.pagination import page_request_from_query
from ..services.repository import Repository, sortable_fields

logger = logging.getLogger(__name__)


class EntityResource:
    def __init__(
        self,
        *,
        entity_name: str,
        repository: Repository,
        serializer_class: Type[ModelSerializer],
        plural: Optional[str] = None,
    ):
        self.entity_name = entity_name
        self.repository = repository
        self.serializer_class = serializer_class
        self.plural = plural or f'{entity_name}s'
        self.base_url = f'/api/{self.plural}'
        self.label = entity_name[:1].upper() + entity_name[1:]

    # -- operations -------------------------------------------------------

    def create(self, request) -> Response:
        logger.debug("REST request to save %s : %s", self.label, request.data)
        if isinstance(identity_from_payload(request.data), Saved):
            raise InvalidRequest(
                self.entity_name, 'idexists', f'A new {self.entity_name} cannot already have an ID'
            )
        result = self._persist(Unsaved(), request.data)
        headers = {'Location': f'{self.base_url}/{result.pk}'}
        headers.update(entity_creation_alert(self.entity_name, str(result.pk)))
        return Response(self._serialize(result), status=status.HTTP_201_CREATED, headers=headers)

    def update(self, request) -> Response:
        logger.debug("REST request to update %s : %s", self.label, request.data)
        identity = identity_from_payload(request.data)
        if isinstance(identity, Unsaved):
            return self.create(request)
        result = self._persist(identity, request.data)
        return Response(
            self._serialize(result),
            status=status.HTTP_200_OK,
            headers=entity_update_alert(self.entity_name, str(identity.id)),
        )

    def list(self, request) -> Response:
        logger.debug("REST request to get a page of %s", self.plural)
        page_request = page_request_from_query(
            request.query_params, sortable_fields(self.repository.model)
        )
        page = self.repository.find_page(page_request)
        data = self.serializer_class(page.items, many=True).data
        return Response(data, headers=pagination_headers(page, self.base_url))

    def retrieve(self, request, pk: int) -> Response:
        logger.debug("REST request to get %s : %s", self.label, pk)
        entity = self.repository.find_one(pk)
        if entity is None:
            raise EntityNotFound()
        return Response(self._serialize(entity))

    def destroy(self, request, pk: int) -> Response:
        logger.debug("REST request to delete %s : %s", self.label, pk)
        self.repository.delete(pk)
        return Response(status=status.HTTP_200_OK, headers=entity_deletion_alert(self.entity_name, str(pk)))

    # -- helpers ----------------------------------------------------------

    def _persist(self, identity: Identity, data):
        serializer = self.serializer_class(data=data)
        serializer.is_valid(raise_exception=True)
        entity = self.repository.model(**serializer.validated_data)
        if isinstance(identity, Saved):
            entity.pk = identity.id
        return self.repository.save(entity)

    def _serialize(self, entity) -> dict:
        return self.serializer_class(entity).data

    # -- wiring -----------------------------------------------------------

    def as_views(self) -> Tuple[Callable, Callable]:
        """Return ``(collection_view, detail_view)`` DRF function views."""
        resource = self

        def collection(request):
            if request.method == 'POST':
                return resource.create(request)
            if request.method == 'PUT':
                return resource.update(request)
            return resource.list(request)

        def detail(request, pk: int):
            if request.method == 'DELETE':
                return resource.destroy(request, pk)
            return resource.retrieve(request, pk)

        collection.__name__ = f'{self.plural}_collection'
        collection.__doc__ = f'List, create or update {self.plural}.'
        detail.__name__ = f'{self.plural}_detail'
        detail.__doc__ = f'Get or delete a single {self.entity_name}.'

        collection_view = permission_classes([AllowAny])(collection)
        collection_view = api_view(['GET', 'POST', 'PUT'])(collection_view)
        detail_view = permission_classes([AllowAny])(detail)
        detail_view = api_view(['GET', 'DELETE'])(detail_view)
        return collection_view, detail_view

    def urls(self) -> List:
        collection_view, detail_view = self.as_views()
        return [
            path(f'api/{self.plural}', collection_view, name=f'{self.entity_name}-list'),
            path(f'api/{self.plural}/<int:pk>', detail_view, name=f'{self.entity_name}-detail'),
        ]
