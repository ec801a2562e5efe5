"""
Mapper entre EmpresaEntity (Core) y EmpresaDTO (representación externa).

Al convertir una empresa a DTO se incluyen sus sedes, cada una en su
forma externa con solo el id de la empresa. Así se corta el ciclo
empresa → sede → empresa en la serialización.
"""

from typing import Iterable

from gestion.core.sedes.entities import SedeEntity
from gestion.core.sedes.mappers import SedeMapper
from gestion.core.shared.validators import limpiar_texto

from .dtos import EmpresaDTO
from .entities import EmpresaEntity


class EmpresaMapper:
    """
    Responsable de:
    - to_dto(): Entity (+ sus sedes) → DTO
    - to_entity(): DTO → Entity nueva
    - update_entity(): aplica un DTO sobre una Entity existente
    """

    @staticmethod
    def to_dto(entity: EmpresaEntity, sedes: Iterable[SedeEntity] = ()) -> EmpresaDTO:
        """
        Convierte una empresa en DTO.

        Args:
            entity: Empresa
            sedes: Sedes de la empresa (consulta derivada por empresa_id)
        """
        return EmpresaDTO(
            id=entity.id,
            razon_social=entity.razon_social,
            cif=entity.cif,
            email=entity.email,
            telefono=entity.telefono,
            sector=entity.sector,
            fecha_alta=entity.fecha_alta,
            activo=entity.activo,
            facturacion_anual=entity.facturacion_anual,
            numero_empleados=entity.numero_empleados,
            sedes=SedeMapper.to_dto_list(sedes),
        )

    @staticmethod
    def to_entity(dto: EmpresaDTO) -> EmpresaEntity:
        """
        Construye una empresa nueva a partir del DTO.

        El id, el indicador activo y las sedes del DTO se ignoran:
        una empresa nueva siempre nace activa y sin sedes.

        Raises:
            ValidationError: Si algún dato no es válido
        """
        return EmpresaEntity.crear(
            razon_social=dto.razon_social,
            cif=dto.cif,
            email=dto.email,
            telefono=dto.telefono,
            sector=dto.sector,
            fecha_alta=dto.fecha_alta,
            facturacion_anual=dto.facturacion_anual,
            numero_empleados=dto.numero_empleados,
        )

    @staticmethod
    def update_entity(dto: EmpresaDTO, entity: EmpresaEntity) -> EmpresaEntity:
        """
        Copia los campos modificables del DTO sobre la entidad.

        id y fecha_alta no se modifican nunca. Si activo no viene
        informado se conserva el valor actual.

        Raises:
            ValidationError: Si el resultado no es válido
        """
        entity.razon_social = limpiar_texto(dto.razon_social)
        entity.cif = limpiar_texto(dto.cif)
        entity.email = limpiar_texto(dto.email)
        entity.telefono = limpiar_texto(dto.telefono)
        entity.sector = limpiar_texto(dto.sector)
        if dto.activo is not None:
            entity.activo = dto.activo
        entity.facturacion_anual = dto.facturacion_anual
        entity.numero_empleados = dto.numero_empleados
        entity.validar()
        return entity
