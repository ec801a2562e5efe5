"""
Django Settings de Gestión de Empresas.

Usa variables de entorno (cargadas desde .env con python-dotenv)
para la configuración sensible o dependiente del entorno.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from gestion.adapters.django_app.shared.database import DatabaseConfig

# Cargar variables de entorno
load_dotenv()

# =============================================================================
# Rutas Base
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# =============================================================================
# Seguridad
# =============================================================================

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv(
    'SECRET_KEY',
    'django-insecure-dev-key-change-in-production-please'
)

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv('DEBUG', 'True').lower() in ('true', '1', 'yes')

ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

# =============================================================================
# Aplicaciones
# =============================================================================

DJANGO_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
]

LOCAL_APPS = [
    'gestion.adapters.django_app.empresas',
]

INSTALLED_APPS = DJANGO_APPS + LOCAL_APPS

# =============================================================================
# Middleware
# =============================================================================

# API JSON sin sesiones ni autenticación
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'gestion.config.urls'

WSGI_APPLICATION = 'gestion.config.wsgi.application'

# =============================================================================
# Base de Datos
# =============================================================================

# DATABASE_URL (postgresql://... o sqlite:///...) o variables DATABASE_*;
# por defecto SQLite en el directorio del proyecto
DATABASE_CONFIG = DatabaseConfig.from_env(default_sqlite_path=BASE_DIR / 'db.sqlite3')

DATABASES = {
    'default': DATABASE_CONFIG.to_django_config(),
}

# =============================================================================
# Internacionalización
# =============================================================================

LANGUAGE_CODE = 'es-es'
TIME_ZONE = 'Europe/Madrid'
USE_I18N = True
USE_TZ = True

# =============================================================================
# Default Primary Key
# =============================================================================

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose' if not DEBUG else 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'gestion.core': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'gestion.adapters': {
            'handlers': ['console'],
            'level': os.getenv('ADAPTERS_LOG_LEVEL', LOG_LEVEL),
            'propagate': False,
        },
    },
}
