"""
URL Configuration de Gestión de Empresas.

Estructura:
- /api/empresas... - API de Empresas
- /api/sedes...    - API de Sedes
- /health/         - Health check (incluye la base de datos)
"""

from django.http import JsonResponse
from django.urls import path, include

from gestion.adapters.django_app.shared.database import check_database_connection


def health(request):
    """Health check: 200 si la base de datos responde, 503 si no."""
    database = check_database_connection()
    return JsonResponse(
        {'status': 'ok' if database['healthy'] else 'degraded', 'database': database},
        status=200 if database['healthy'] else 503,
    )


urlpatterns = [
    # Empresas y Sedes
    path('', include('gestion.adapters.django_app.empresas.urls')),

    # Health check
    path('health/', health, name='health'),
]
