"""
Use Cases (Application Services) del Dominio de Sedes.

Use Cases implementados:
- CrearSedeService: Alta de sede para una empresa existente
- ActualizarSedeService: Modificación de sede
- EliminarSedeService: Borrado de una sede (sin cascada)
- ListarSedesService: Listados y búsquedas
- ObtenerSedeService: Consulta por id
- ObtenerSedePrincipalService: Sede principal de una empresa
- ContarSedesPorEmpresaService: Número de sedes de una empresa

Regla de negocio central: como máximo una sede principal por empresa.
La comprobación se hace aquí; la restricción de la base de datos cubre
las carreras entre transacciones concurrentes.
"""

import logging
from typing import List, Optional

from gestion.core.shared.interfaces import UnitOfWork
from gestion.core.shared.exceptions import EntityNotFoundError, ValidationError
from gestion.core.shared.validators import validar_filtros
from gestion.core.empresas.ports import EmpresaRepository

from .dtos import SedeDTO
from .mappers import SedeMapper
from .ports import SedeRepository

logger = logging.getLogger(__name__)


def _sede_principal_duplicada(empresa_id: int) -> ValidationError:
    logger.warning(f"Second principal sede rejected for empresa {empresa_id}")
    return ValidationError(
        "Ya existe una sede principal para esta empresa",
        field="es_principal",
    )


def _sede_no_encontrada(sede_id: int) -> EntityNotFoundError:
    logger.warning(f"Sede not found: {sede_id}")
    return EntityNotFoundError(
        f"Sede no encontrada con ID: {sede_id}",
        entity_type="Sede",
        entity_id=sede_id,
    )


class CrearSedeService:
    """
    Use Case: Alta de una sede.

    Flujo:
    1. Resolver la empresa por empresa_id
    2. Si la sede es principal, comprobar que la empresa no tiene otra
    3. Construir la entidad y vincularla a la empresa resuelta
    4. Persistir y devolver el DTO
    """

    def __init__(
        self,
        sede_repo: SedeRepository,
        empresa_repo: EmpresaRepository,
        uow: UnitOfWork,
    ):
        self.sede_repo = sede_repo
        self.empresa_repo = empresa_repo
        self.uow = uow

    def execute(self, input_dto: SedeDTO) -> SedeDTO:
        """
        Ejecuta el alta en una transacción atómica.

        Raises:
            ValidationError: Si falta empresa_id, ya hay sede principal
                o algún dato no es válido
            EntityNotFoundError: Si la empresa no existe
        """
        logger.info(f"Creating sede: {input_dto.nombre}")

        if input_dto.empresa_id is None:
            raise ValidationError("El campo empresa_id es obligatorio", field="empresa_id")

        with self.uow:
            empresa = self.empresa_repo.get_by_id(input_dto.empresa_id)
            if not empresa:
                raise EntityNotFoundError(
                    f"Empresa no encontrada con ID: {input_dto.empresa_id}",
                    entity_type="Empresa",
                    entity_id=input_dto.empresa_id,
                )

            if input_dto.es_principal and self.sede_repo.exists_principal_for_empresa(empresa.id):
                raise _sede_principal_duplicada(empresa.id)

            sede = SedeMapper.to_entity(input_dto)
            sede.empresa_id = empresa.id
            sede = self.sede_repo.save(sede)

        logger.info(f"Sede created: {sede.id} (empresa {sede.empresa_id})")
        return SedeMapper.to_dto(sede)


class ActualizarSedeService:
    """
    Use Case: Modificación de una sede.

    La empresa propietaria no cambia. Solo se comprueba la regla de
    sede principal cuando la sede pasa de no principal a principal.
    """

    def __init__(self, sede_repo: SedeRepository, uow: UnitOfWork):
        self.sede_repo = sede_repo
        self.uow = uow

    def execute(self, sede_id: int, input_dto: SedeDTO) -> SedeDTO:
        """
        Raises:
            EntityNotFoundError: Si la sede no existe
            ValidationError: Si otra sede de la empresa ya es principal
        """
        logger.info(f"Updating sede: {sede_id}")

        with self.uow:
            sede = self.sede_repo.get_by_id(sede_id)
            if not sede:
                raise _sede_no_encontrada(sede_id)

            if (
                input_dto.es_principal
                and not sede.es_principal
                and self.sede_repo.exists_principal_for_empresa(sede.empresa_id)
            ):
                raise _sede_principal_duplicada(sede.empresa_id)

            SedeMapper.update_entity(input_dto, sede)
            sede = self.sede_repo.save(sede)

        return SedeMapper.to_dto(sede)


class EliminarSedeService:
    """Use Case: Borrado de una sede. No afecta a la empresa ni a otras sedes."""

    def __init__(self, sede_repo: SedeRepository, uow: UnitOfWork):
        self.sede_repo = sede_repo
        self.uow = uow

    def execute(self, sede_id: int) -> None:
        """
        Raises:
            EntityNotFoundError: Si la sede no existe
        """
        logger.info(f"Deleting sede: {sede_id}")

        with self.uow:
            if not self.sede_repo.exists(sede_id):
                raise _sede_no_encontrada(sede_id)
            self.sede_repo.delete(sede_id)


class ListarSedesService:
    """
    Use Case: Listar sedes con filtros.

    No usa UoW porque es una operación de lectura.
    """

    def __init__(self, sede_repo: SedeRepository):
        self.sede_repo = sede_repo

    def execute(
        self,
        empresa_id: Optional[int] = None,
        ciudad: Optional[str] = None,
        provincia: Optional[str] = None,
        texto: Optional[str] = None,
        capacidad_minima: Optional[float] = None,
    ) -> List[SedeDTO]:
        """
        Lista sedes aplicando un criterio.

        Solo empresa_id puede combinarse con ciudad; cualquier otra
        combinación se rechaza.

        Returns:
            Lista de DTOs (vacía si no hay coincidencias)

        Raises:
            ValidationError: Si se combinan filtros no combinables
        """
        validar_filtros(
            {
                "empresa_id": empresa_id,
                "ciudad": ciudad or None,
                "provincia": provincia or None,
                "texto": texto,
                "capacidad_minima": capacidad_minima,
            },
            combinables=[frozenset({"empresa_id", "ciudad"})],
        )

        if empresa_id is not None and ciudad:
            sedes = self.sede_repo.list_by_empresa_y_ciudad(empresa_id, ciudad)
        elif empresa_id is not None:
            sedes = self.sede_repo.list_by_empresa(empresa_id)
        elif ciudad:
            sedes = self.sede_repo.list_by_ciudad(ciudad)
        elif provincia:
            sedes = self.sede_repo.list_by_provincia(provincia)
        elif texto is not None:
            sedes = self.sede_repo.search_by_nombre(texto)
        elif capacidad_minima is not None:
            sedes = self.sede_repo.list_by_capacidad_minima(capacidad_minima)
        else:
            sedes = self.sede_repo.list_all()

        return SedeMapper.to_dto_list(sedes)


class ObtenerSedeService:
    """Use Case: Obtener una sede por id (None si no existe)."""

    def __init__(self, sede_repo: SedeRepository):
        self.sede_repo = sede_repo

    def execute(self, sede_id: int) -> Optional[SedeDTO]:
        sede = self.sede_repo.get_by_id(sede_id)
        return SedeMapper.to_dto(sede) if sede else None


class ObtenerSedePrincipalService:
    """Use Case: Sede principal de una empresa (None si no tiene)."""

    def __init__(self, sede_repo: SedeRepository):
        self.sede_repo = sede_repo

    def execute(self, empresa_id: int) -> Optional[SedeDTO]:
        sede = self.sede_repo.get_principal_by_empresa(empresa_id)
        return SedeMapper.to_dto(sede) if sede else None


class ContarSedesPorEmpresaService:
    def __init__(self, sede_repo: SedeRepository):
        self.sede_repo = sede_repo

    def execute(self, empresa_id: int) -> int:
        return self.sede_repo.count_by_empresa(empresa_id)
