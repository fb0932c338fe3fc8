from django.db import connection
from django.db.utils import OperationalError
from django.http import JsonResponse


def api_root(request):
    """Liveness banner."""
    return JsonResponse({'message': 'API is running...'})


def health_check(request):
    """Report whether the database answers a trivial query."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except OperationalError:
        return JsonResponse({'status': 'unhealthy', 'database': 'unavailable'}, status=503)
    return JsonResponse({'status': 'ok', 'database': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({'message': 'Not found'}, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({'message': 'Server error'}, status=500)
