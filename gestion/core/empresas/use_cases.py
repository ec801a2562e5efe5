"""
Use Cases (Application Services) del Dominio de Empresas.

Este módulo contiene los casos de uso que orquestan la lógica de
negocio coordinando entidades, repositorios y transacciones.

Use Cases implementados:
- CrearEmpresaService: Alta de empresa (CIF único)
- ActualizarEmpresaService: Modificación de empresa
- EliminarEmpresaService: Borrado físico (en cascada con sus sedes)
- DesactivarEmpresaService / ActivarEmpresaService: Baja lógica y reactivación
- ListarEmpresasService: Listados y búsquedas
- ObtenerEmpresaService / ObtenerEmpresaPorCifService: Consulta individual
- ContarEmpresasActivasService: Estadística de empresas activas

Principios:
- Un Use Case = Una operación de negocio
- Dependencias inyectadas (DI)
- Las escrituras se ejecutan dentro de un Unit of Work
- Las lecturas no abren transacción
"""

import logging
from typing import List, Optional

from gestion.core.shared.interfaces import UnitOfWork
from gestion.core.shared.exceptions import EntityNotFoundError, ValidationError
from gestion.core.shared.validators import limpiar_texto, validar_filtros
from gestion.core.sedes.ports import SedeRepository

from .dtos import EmpresaDTO
from .entities import EmpresaEntity
from .mappers import EmpresaMapper
from .ports import EmpresaRepository

logger = logging.getLogger(__name__)


def _empresa_no_encontrada(empresa_id: int) -> EntityNotFoundError:
    logger.warning(f"Empresa not found: {empresa_id}")
    return EntityNotFoundError(
        f"Empresa no encontrada con ID: {empresa_id}",
        entity_type="Empresa",
        entity_id=empresa_id,
    )


def _cif_duplicado(cif: str) -> ValidationError:
    logger.warning(f"Duplicate CIF rejected: {cif}")
    return ValidationError(f"Ya existe una empresa con el CIF: {cif}", field="cif")


class CrearEmpresaService:
    """
    Use Case: Alta de una empresa.

    Flujo:
    1. Comprobar que el CIF no existe
    2. Construir la entidad (activa, fecha de alta = hoy salvo indicación)
    3. Persistir vía repositorio
    4. Devolver el DTO con el id asignado

    Example:
        service = CrearEmpresaService(empresa_repo, uow)
        dto = service.execute(EmpresaDTO(razon_social="Acme SA", cif="B12345678"))
        print(dto.id)
    """

    def __init__(self, empresa_repo: EmpresaRepository, uow: UnitOfWork):
        """
        Inicializa el service con sus dependencias.

        Args:
            empresa_repo: Repositorio de empresas
            uow: Unit of Work para la transacción
        """
        self.empresa_repo = empresa_repo
        self.uow = uow

    def execute(self, input_dto: EmpresaDTO) -> EmpresaDTO:
        """
        Ejecuta el alta en una transacción atómica.

        Args:
            input_dto: Datos de la empresa

        Returns:
            DTO de la empresa creada (sin sedes)

        Raises:
            ValidationError: Si el CIF ya existe o algún dato no es válido
        """
        logger.info(f"Creating empresa: {input_dto.razon_social}")

        with self.uow:
            cif = limpiar_texto(input_dto.cif)
            if cif and self.empresa_repo.exists_by_cif(cif):
                raise _cif_duplicado(cif)

            empresa = EmpresaMapper.to_entity(input_dto)
            empresa = self.empresa_repo.save(empresa)

        logger.info(f"Empresa created: {empresa.id}")
        return EmpresaMapper.to_dto(empresa)


class ActualizarEmpresaService:
    """
    Use Case: Modificación de una empresa.

    Sobrescribe todos los campos modificables. La fecha de alta no
    cambia nunca. Si el CIF cambia, el nuevo no puede pertenecer a
    otra empresa.
    """

    def __init__(
        self,
        empresa_repo: EmpresaRepository,
        sede_repo: SedeRepository,
        uow: UnitOfWork,
    ):
        self.empresa_repo = empresa_repo
        self.sede_repo = sede_repo
        self.uow = uow

    def execute(self, empresa_id: int, input_dto: EmpresaDTO) -> EmpresaDTO:
        """
        Raises:
            EntityNotFoundError: Si la empresa no existe
            ValidationError: Si el nuevo CIF ya existe o algún dato no es válido
        """
        logger.info(f"Updating empresa: {empresa_id}")

        with self.uow:
            empresa = self.empresa_repo.get_by_id(empresa_id)
            if not empresa:
                raise _empresa_no_encontrada(empresa_id)

            nuevo_cif = limpiar_texto(input_dto.cif)
            if nuevo_cif != empresa.cif and nuevo_cif and self.empresa_repo.exists_by_cif(nuevo_cif):
                raise _cif_duplicado(nuevo_cif)

            EmpresaMapper.update_entity(input_dto, empresa)
            empresa = self.empresa_repo.save(empresa)
            sedes = self.sede_repo.list_by_empresa(empresa.id)

        return EmpresaMapper.to_dto(empresa, sedes)


class EliminarEmpresaService:
    """
    Use Case: Borrado físico de una empresa.

    Las sedes de la empresa se eliminan en cascada en el almacenamiento.
    """

    def __init__(self, empresa_repo: EmpresaRepository, uow: UnitOfWork):
        self.empresa_repo = empresa_repo
        self.uow = uow

    def execute(self, empresa_id: int) -> None:
        """
        Raises:
            EntityNotFoundError: Si la empresa no existe
        """
        logger.info(f"Deleting empresa: {empresa_id}")

        with self.uow:
            if not self.empresa_repo.exists(empresa_id):
                raise _empresa_no_encontrada(empresa_id)
            self.empresa_repo.delete(empresa_id)


class _CambiarEstadoEmpresaService:
    """Base para activar/desactivar: busca, cambia el estado y persiste."""

    def __init__(self, empresa_repo: EmpresaRepository, uow: UnitOfWork):
        self.empresa_repo = empresa_repo
        self.uow = uow

    def execute(self, empresa_id: int) -> None:
        """
        Raises:
            EntityNotFoundError: Si la empresa no existe
        """
        with self.uow:
            empresa = self.empresa_repo.get_by_id(empresa_id)
            if not empresa:
                raise _empresa_no_encontrada(empresa_id)

            self._aplicar(empresa)
            self.empresa_repo.save(empresa)

        logger.info(f"Empresa {empresa_id} activo={empresa.activo}")

    def _aplicar(self, empresa: EmpresaEntity) -> None:
        raise NotImplementedError


class DesactivarEmpresaService(_CambiarEstadoEmpresaService):
    """Use Case: Baja lógica (activo=False). Idempotente."""

    def _aplicar(self, empresa: EmpresaEntity) -> None:
        empresa.desactivar()


class ActivarEmpresaService(_CambiarEstadoEmpresaService):
    """Use Case: Reactivación (activo=True). Idempotente."""

    def _aplicar(self, empresa: EmpresaEntity) -> None:
        empresa.activar()


class ListarEmpresasService:
    """
    Use Case: Listar empresas con filtros.

    No usa UoW porque es una operación de lectura.
    """

    def __init__(self, empresa_repo: EmpresaRepository, sede_repo: SedeRepository):
        self.empresa_repo = empresa_repo
        self.sede_repo = sede_repo

    def execute(
        self,
        solo_activas: bool = False,
        sector: Optional[str] = None,
        texto: Optional[str] = None,
        facturacion_minima: Optional[float] = None,
    ) -> List[EmpresaDTO]:
        """
        Lista empresas aplicando, como mucho, un criterio.

        Solo sector y solo_activas pueden combinarse; cualquier otra
        combinación se rechaza.

        Args:
            solo_activas: Solo empresas activas
            sector: Sector exacto (sin distinguir mayúsculas)
            texto: Subcadena de la razón social (sin distinguir mayúsculas)
            facturacion_minima: Facturación anual estrictamente mayor

        Returns:
            Lista de DTOs con sus sedes

        Raises:
            ValidationError: Si se combinan filtros no combinables
        """
        validar_filtros(
            {
                "solo_activas": solo_activas,
                "sector": sector or None,
                "texto": texto,
                "facturacion_minima": facturacion_minima,
            },
            combinables=[frozenset({"sector", "solo_activas"})],
        )

        if texto is not None:
            empresas = self.empresa_repo.search_by_razon_social(texto)
        elif facturacion_minima is not None:
            empresas = self.empresa_repo.list_by_facturacion_mayor_que(facturacion_minima)
        elif sector and solo_activas:
            empresas = self.empresa_repo.list_by_sector_activas(sector)
        elif sector:
            empresas = self.empresa_repo.list_by_sector(sector)
        elif solo_activas:
            empresas = self.empresa_repo.list_activas()
        else:
            empresas = self.empresa_repo.list_all()

        return [
            EmpresaMapper.to_dto(e, self.sede_repo.list_by_empresa(e.id))
            for e in empresas
        ]


class ObtenerEmpresaService:
    """Use Case: Obtener una empresa por id (None si no existe)."""

    def __init__(self, empresa_repo: EmpresaRepository, sede_repo: SedeRepository):
        self.empresa_repo = empresa_repo
        self.sede_repo = sede_repo

    def execute(self, empresa_id: int) -> Optional[EmpresaDTO]:
        empresa = self.empresa_repo.get_by_id(empresa_id)
        if not empresa:
            logger.debug(f"Empresa not found: {empresa_id}")
            return None
        return EmpresaMapper.to_dto(empresa, self.sede_repo.list_by_empresa(empresa.id))


class ObtenerEmpresaPorCifService:
    """Use Case: Obtener una empresa por CIF (None si no existe)."""

    def __init__(self, empresa_repo: EmpresaRepository, sede_repo: SedeRepository):
        self.empresa_repo = empresa_repo
        self.sede_repo = sede_repo

    def execute(self, cif: str) -> Optional[EmpresaDTO]:
        empresa = self.empresa_repo.get_by_cif(cif)
        if not empresa:
            logger.debug(f"Empresa not found for CIF: {cif}")
            return None
        return EmpresaMapper.to_dto(empresa, self.sede_repo.list_by_empresa(empresa.id))


class ContarEmpresasActivasService:
    """Use Case: Número de empresas activas."""

    def __init__(self, empresa_repo: EmpresaRepository):
        self.empresa_repo = empresa_repo

    def execute(self) -> int:
        return self.empresa_repo.count_activas()
