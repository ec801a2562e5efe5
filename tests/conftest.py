"""
Configuración global de Pytest para Gestión de Empresas.

Este archivo configura:
- Settings de Django para tests (SQLite en memoria)
- Fixtures compartidas (repositorios en memoria, Unit of Work, DTOs)
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Añadir la raíz del proyecto al path para los imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def pytest_configure(config):
    """Configura Django antes de los tests."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'django.contrib.auth',
                'gestion.adapters.django_app.empresas',
            ],
            ROOT_URLCONF='gestion.config.urls',
            MIDDLEWARE=[
                'django.middleware.common.CommonMiddleware',
            ],
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='Europe/Madrid',
        )
        django.setup()


@pytest.fixture(scope="session")
def project_root():
    """Devuelve la ruta raíz del proyecto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reinicia el contenedor de DI entre tests.

    Garantiza que cada test empieza con un estado limpio.
    """
    yield
    from gestion.config.container import reset_container
    reset_container()


# =============================================================================
# Core: repositorios y Unit of Work en memoria
# =============================================================================

@pytest.fixture
def sede_repo():
    """Repositorio de sedes en memoria."""
    from gestion.core.sedes.ports import InMemorySedeRepository
    return InMemorySedeRepository()


@pytest.fixture
def empresa_repo(sede_repo):
    """Repositorio de empresas en memoria (borra sus sedes en cascada)."""
    from gestion.core.empresas.ports import InMemoryEmpresaRepository
    return InMemoryEmpresaRepository(sede_repo)


@pytest.fixture
def uow():
    """Unit of Work en memoria."""
    from gestion.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork
    return InMemoryUnitOfWork()


# =============================================================================
# Datos de ejemplo
# =============================================================================

@pytest.fixture
def empresa_dto():
    """Factory de EmpresaDTO con datos válidos."""
    from gestion.core.empresas.dtos import EmpresaDTO

    def crear(**kwargs):
        defaults = {
            'razon_social': 'Acme SA',
            'cif': 'B12345678',
            'email': 'contacto@acme.es',
            'telefono': '910000000',
            'sector': 'Logística',
            'facturacion_anual': 1500000.0,
            'numero_empleados': 25,
        }
        defaults.update(kwargs)
        return EmpresaDTO(**defaults)

    return crear


@pytest.fixture
def sede_dto():
    """Factory de SedeDTO con datos válidos."""
    from gestion.core.sedes.dtos import SedeDTO

    def crear(**kwargs):
        defaults = {
            'nombre': 'HQ',
            'direccion': 'Calle Mayor 1',
            'ciudad': 'Madrid',
            'provincia': 'Madrid',
            'codigo_postal': '28013',
        }
        defaults.update(kwargs)
        return SedeDTO(**defaults)

    return crear


@pytest.fixture
def empresa_guardada(empresa_repo):
    """Empresa ya persistida en el repositorio en memoria."""
    from gestion.core.empresas.entities import EmpresaEntity

    return empresa_repo.save(
        EmpresaEntity.crear(
            razon_social='Acme SA',
            cif='B12345678',
            sector='Logística',
            fecha_alta=date(2020, 1, 15),
            facturacion_anual=1500000.0,
        )
    )
