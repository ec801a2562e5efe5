"""
Configuración del Django App de Empresas y Sedes.

Conecta el receiver que sustituye LOWER en las conexiones SQLite.
"""

from django.apps import AppConfig
from django.db.backends.signals import connection_created


class EmpresasConfig(AppConfig):
    """Configuración del app Empresas (incluye las Sedes)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'gestion.adapters.django_app.empresas'
    label = 'empresas'
    verbose_name = 'Gestión de Empresas y Sedes'

    def ready(self):
        from ..shared.database import registrar_lower_unicode

        connection_created.connect(
            registrar_lower_unicode,
            dispatch_uid='empresas_lower_unicode',
        )
