"""
WSGI config de Gestión de Empresas.

Expone la variable ``application`` para servidores WSGI (gunicorn, uwsgi).
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'gestion.config.settings')

application = get_wsgi_application()
