"""
Dependency Injection Container.

Configura y gestiona las dependencias de la aplicación con
dependency-injector.

Patrones:
- Singleton: una instancia para toda la app (repositorios, sin estado)
- Factory: una instancia nueva por llamada (services, Unit of Work)

Cada petición HTTP obtiene un service nuevo con su propio Unit of Work.
"""

from typing import Optional

from dependency_injector import containers, providers

from gestion.adapters.django_app.empresas.repositories import (
    DjangoEmpresaRepository,
    DjangoSedeRepository,
)
from gestion.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
from gestion.core.empresas import use_cases as empresa_use_cases
from gestion.core.sedes import use_cases as sede_use_cases


class Container(containers.DeclarativeContainer):
    """
    Contenedor principal de Dependency Injection.

    Organización:
    - Repositories: Persistencia
    - Unit of Work: Transacciones
    - Services: Use Cases

    Example:
        from gestion.config.container import get_container

        service = get_container().crear_empresa_service()
        dto = service.execute(input_dto)
    """

    # =========================================================================
    # Repositories (Singleton)
    # =========================================================================

    empresa_repository = providers.Singleton(DjangoEmpresaRepository)

    sede_repository = providers.Singleton(DjangoSedeRepository)

    # =========================================================================
    # Unit of Work (Factory - nueva instancia por operación)
    # =========================================================================

    unit_of_work = providers.Factory(DjangoUnitOfWork)

    # =========================================================================
    # Services de Empresas
    # =========================================================================

    crear_empresa_service = providers.Factory(
        empresa_use_cases.CrearEmpresaService,
        empresa_repo=empresa_repository,
        uow=unit_of_work,
    )

    actualizar_empresa_service = providers.Factory(
        empresa_use_cases.ActualizarEmpresaService,
        empresa_repo=empresa_repository,
        sede_repo=sede_repository,
        uow=unit_of_work,
    )

    eliminar_empresa_service = providers.Factory(
        empresa_use_cases.EliminarEmpresaService,
        empresa_repo=empresa_repository,
        uow=unit_of_work,
    )

    desactivar_empresa_service = providers.Factory(
        empresa_use_cases.DesactivarEmpresaService,
        empresa_repo=empresa_repository,
        uow=unit_of_work,
    )

    activar_empresa_service = providers.Factory(
        empresa_use_cases.ActivarEmpresaService,
        empresa_repo=empresa_repository,
        uow=unit_of_work,
    )

    # Lecturas (sin UoW)
    listar_empresas_service = providers.Factory(
        empresa_use_cases.ListarEmpresasService,
        empresa_repo=empresa_repository,
        sede_repo=sede_repository,
    )

    obtener_empresa_service = providers.Factory(
        empresa_use_cases.ObtenerEmpresaService,
        empresa_repo=empresa_repository,
        sede_repo=sede_repository,
    )

    obtener_empresa_por_cif_service = providers.Factory(
        empresa_use_cases.ObtenerEmpresaPorCifService,
        empresa_repo=empresa_repository,
        sede_repo=sede_repository,
    )

    contar_empresas_activas_service = providers.Factory(
        empresa_use_cases.ContarEmpresasActivasService,
        empresa_repo=empresa_repository,
    )

    # =========================================================================
    # Services de Sedes
    # =========================================================================

    crear_sede_service = providers.Factory(
        sede_use_cases.CrearSedeService,
        sede_repo=sede_repository,
        empresa_repo=empresa_repository,
        uow=unit_of_work,
    )

    actualizar_sede_service = providers.Factory(
        sede_use_cases.ActualizarSedeService,
        sede_repo=sede_repository,
        uow=unit_of_work,
    )

    eliminar_sede_service = providers.Factory(
        sede_use_cases.EliminarSedeService,
        sede_repo=sede_repository,
        uow=unit_of_work,
    )

    # Lecturas (sin UoW)
    listar_sedes_service = providers.Factory(
        sede_use_cases.ListarSedesService,
        sede_repo=sede_repository,
    )

    obtener_sede_service = providers.Factory(
        sede_use_cases.ObtenerSedeService,
        sede_repo=sede_repository,
    )

    obtener_sede_principal_service = providers.Factory(
        sede_use_cases.ObtenerSedePrincipalService,
        sede_repo=sede_repository,
    )

    contar_sedes_por_empresa_service = providers.Factory(
        sede_use_cases.ContarSedesPorEmpresaService,
        sede_repo=sede_repository,
    )


# =============================================================================
# Contenedor global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Devuelve la instancia global del contenedor.

    La crea si no existe (inicialización perezosa).
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def reset_container() -> None:
    """Descarta el contenedor global (para tests)."""
    global _container
    _container = None
