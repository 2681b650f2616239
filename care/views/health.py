import logging

from django.db import connections
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def healthz(request):
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
        return JsonResponse({'ok': True, 'db': bool(row and row[0] == 1)})
    except Exception:
        logger.exception('health check failed')
        return JsonResponse(
            {'ok': False, 'error': {'code': 'internal_error', 'message': 'Database unavailable'}}, status=500
        )


def not_found(request, exception=None):
    return JsonResponse({'ok': False, 'error': {'code': 'not_found', 'message': 'Not found.'}}, status=404)


def server_error(request):
    return JsonResponse(
        {'ok': False, 'error': {'code': 'internal_error', 'message': 'Internal server error'}}, status=500
    )
