"""
Repositorios Django para la persistencia de Empresas y Sedes.

Implementan las interfaces (Ports) definidas en el Core.
Son DRIVEN ADAPTERS: el Core los invoca para leer y escribir.

Responsabilidades:
- Implementar EmpresaRepository y SedeRepository
- Convertir models en entities mediante los Mappers
- Ejecutar las consultas con el ORM

Las búsquedas de texto comparan LOWER(campo) con el valor en
minúsculas. En SQLite, LOWER se sustituye al abrir la conexión por
una versión Unicode (ver shared/database.py), así "LOGÍSTICA" y
"logística" coinciden igual que en PostgreSQL.
"""

from typing import List, Optional
import logging

from django.db.models import QuerySet
from django.db.models.functions import Lower

from gestion.core.empresas.entities import EmpresaEntity
from gestion.core.sedes.entities import SedeEntity

from ..shared.repository import BaseRepository
from .mappers import EmpresaModelMapper, SedeModelMapper
from .models import EmpresaModel, SedeModel

logger = logging.getLogger(__name__)


def _en_minusculas(queryset: QuerySet, campo: str) -> QuerySet:
    """Anota <campo>_lower = LOWER(campo) para filtrar sin distinguir mayúsculas."""
    return queryset.annotate(**{f"{campo}_lower": Lower(campo)})


class DjangoEmpresaRepository(BaseRepository[EmpresaEntity, EmpresaModel]):
    """
    Implementación Django de EmpresaRepository.

    El borrado de una empresa elimina sus sedes por la FK en cascada.

    Example:
        repo = DjangoEmpresaRepository()
        empresa = repo.save(EmpresaEntity.crear("Acme SA", "B12345678"))
        repo.search_by_razon_social("acm")
    """

    model_class = EmpresaModel
    integrity_error_message = "Ya existe una empresa con ese CIF"
    integrity_error_field = "cif"
    entity_type = "Empresa"

    def __init__(self):
        self._mapper = EmpresaModelMapper()

    def to_entity(self, model: EmpresaModel) -> EmpresaEntity:
        return self._mapper.to_entity(model)

    def to_fields(self, entity: EmpresaEntity) -> dict:
        return self._mapper.to_fields(entity)

    def get_by_cif(self, cif: str) -> Optional[EmpresaEntity]:
        logger.debug(f"Fetching empresa by CIF: {cif}")
        model = EmpresaModel.objects.filter(cif=cif).first()
        return self.to_entity(model) if model else None

    def exists_by_cif(self, cif: str) -> bool:
        return EmpresaModel.objects.filter(cif=cif).exists()

    def list_activas(self) -> List[EmpresaEntity]:
        return self._mapper.to_entity_list(EmpresaModel.objects.filter(activo=True))

    def count_activas(self) -> int:
        return EmpresaModel.objects.filter(activo=True).count()

    def list_by_sector(self, sector: str) -> List[EmpresaEntity]:
        return self._mapper.to_entity_list(
            _en_minusculas(EmpresaModel.objects.all(), "sector").filter(
                sector_lower=sector.lower()
            )
        )

    def list_by_sector_activas(self, sector: str) -> List[EmpresaEntity]:
        return self._mapper.to_entity_list(
            _en_minusculas(EmpresaModel.objects.filter(activo=True), "sector").filter(
                sector_lower=sector.lower()
            )
        )

    def search_by_razon_social(self, texto: str) -> List[EmpresaEntity]:
        logger.debug(f"Searching empresas by razon_social: {texto}")
        return self._mapper.to_entity_list(
            _en_minusculas(EmpresaModel.objects.all(), "razon_social").filter(
                razon_social_lower__contains=texto.lower()
            )
        )

    def list_by_facturacion_mayor_que(self, importe: float) -> List[EmpresaEntity]:
        return self._mapper.to_entity_list(
            EmpresaModel.objects.filter(facturacion_anual__gt=importe)
        )


class DjangoSedeRepository(BaseRepository[SedeEntity, SedeModel]):
    """
    Implementación Django de SedeRepository.

    La restricción uq_sede_principal_por_empresa rechaza una segunda
    sede principal aunque dos transacciones concurrentes hayan pasado
    la comprobación del caso de uso.
    """

    model_class = SedeModel
    integrity_error_message = "Ya existe una sede principal para esta empresa"
    integrity_error_field = "es_principal"
    entity_type = "Sede"

    def __init__(self):
        self._mapper = SedeModelMapper()

    def to_entity(self, model: SedeModel) -> SedeEntity:
        return self._mapper.to_entity(model)

    def to_fields(self, entity: SedeEntity) -> dict:
        return self._mapper.to_fields(entity)

    def list_by_empresa(self, empresa_id: int) -> List[SedeEntity]:
        return self._mapper.to_entity_list(SedeModel.objects.filter(empresa_id=empresa_id))

    def list_by_ciudad(self, ciudad: str) -> List[SedeEntity]:
        return self._mapper.to_entity_list(
            _en_minusculas(SedeModel.objects.all(), "ciudad").filter(ciudad_lower=ciudad.lower())
        )

    def list_by_provincia(self, provincia: str) -> List[SedeEntity]:
        return self._mapper.to_entity_list(
            _en_minusculas(SedeModel.objects.all(), "provincia").filter(
                provincia_lower=provincia.lower()
            )
        )

    def list_by_empresa_y_ciudad(self, empresa_id: int, ciudad: str) -> List[SedeEntity]:
        return self._mapper.to_entity_list(
            _en_minusculas(SedeModel.objects.filter(empresa_id=empresa_id), "ciudad").filter(
                ciudad_lower=ciudad.lower()
            )
        )

    def get_principal_by_empresa(self, empresa_id: int) -> Optional[SedeEntity]:
        model = SedeModel.objects.filter(empresa_id=empresa_id, es_principal=True).first()
        return self.to_entity(model) if model else None

    def exists_principal_for_empresa(self, empresa_id: int) -> bool:
        return SedeModel.objects.filter(empresa_id=empresa_id, es_principal=True).exists()

    def count_by_empresa(self, empresa_id: int) -> int:
        return SedeModel.objects.filter(empresa_id=empresa_id).count()

    def list_by_capacidad_minima(self, capacidad: float) -> List[SedeEntity]:
        return self._mapper.to_entity_list(
            SedeModel.objects.filter(capacidad_almacenamiento__gte=capacidad)
        )

    def search_by_nombre(self, texto: str) -> List[SedeEntity]:
        logger.debug(f"Searching sedes by nombre: {texto}")
        return self._mapper.to_entity_list(
            _en_minusculas(SedeModel.objects.all(), "nombre").filter(
                nombre_lower__contains=texto.lower()
            )
        )
