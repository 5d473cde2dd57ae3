import logging

from django.db import connections
from django.http import JsonResponse

from .entities import RESOURCES

logger = logging.getLogger(__name__)


def healthz(request):
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
    except Exception as e:
        logger.warning("Health check failed: %s", e)
        return JsonResponse({'ok': False, 'error': str(e)}, status=500)
    return JsonResponse({
        'ok': True,
        'db': bool(row and row[0] == 1),
        'resources': [r.plural for r in RESOURCES],
    })
