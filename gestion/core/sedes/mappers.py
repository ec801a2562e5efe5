"""
Mapper entre SedeEntity (Core) y SedeDTO (representación externa).

Principios:
- Los mappers no tienen estado
- No contienen lógica de negocio, solo conversión de datos
- La relación con la empresa nunca se toma del DTO en to_entity():
  la establece el caso de uso tras resolver la empresa por id
"""

from typing import Iterable, List

from gestion.core.shared.validators import limpiar_texto

from .dtos import SedeDTO
from .entities import SedeEntity, PAIS_POR_DEFECTO


class SedeMapper:
    """
    Responsable de:
    - to_dto(): Entity → DTO
    - to_entity(): DTO → Entity nueva
    - update_entity(): aplica un DTO sobre una Entity existente
    """

    @staticmethod
    def to_dto(entity: SedeEntity) -> SedeDTO:
        return SedeDTO(
            id=entity.id,
            nombre=entity.nombre,
            direccion=entity.direccion,
            ciudad=entity.ciudad,
            provincia=entity.provincia,
            codigo_postal=entity.codigo_postal,
            pais=entity.pais,
            telefono=entity.telefono,
            email=entity.email,
            es_principal=entity.es_principal,
            capacidad_almacenamiento=entity.capacidad_almacenamiento,
            horario_recepcion=entity.horario_recepcion,
            empresa_id=entity.empresa_id,
        )

    @staticmethod
    def to_dto_list(entities: Iterable[SedeEntity]) -> List[SedeDTO]:
        return [SedeMapper.to_dto(e) for e in entities]

    @staticmethod
    def to_entity(dto: SedeDTO) -> SedeEntity:
        """
        Construye una sede nueva a partir del DTO.

        El id y el empresa_id del DTO se ignoran.

        Raises:
            ValidationError: Si algún dato no es válido
        """
        return SedeEntity.crear(
            nombre=dto.nombre,
            direccion=dto.direccion,
            ciudad=dto.ciudad,
            provincia=dto.provincia,
            codigo_postal=dto.codigo_postal,
            pais=dto.pais,
            telefono=dto.telefono,
            email=dto.email,
            es_principal=dto.es_principal,
            capacidad_almacenamiento=dto.capacidad_almacenamiento,
            horario_recepcion=dto.horario_recepcion,
        )

    @staticmethod
    def update_entity(dto: SedeDTO, entity: SedeEntity) -> SedeEntity:
        """
        Copia los campos modificables del DTO sobre la entidad.

        No toca id ni empresa_id. Si es_principal no viene informado
        se conserva el valor actual.

        Raises:
            ValidationError: Si el resultado no es válido
        """
        entity.nombre = limpiar_texto(dto.nombre)
        entity.direccion = limpiar_texto(dto.direccion)
        entity.ciudad = limpiar_texto(dto.ciudad)
        entity.provincia = limpiar_texto(dto.provincia)
        entity.codigo_postal = limpiar_texto(dto.codigo_postal)
        entity.pais = limpiar_texto(dto.pais) or PAIS_POR_DEFECTO
        entity.telefono = limpiar_texto(dto.telefono)
        entity.email = limpiar_texto(dto.email)
        if dto.es_principal is not None:
            entity.es_principal = dto.es_principal
        entity.capacidad_almacenamiento = dto.capacidad_almacenamiento
        entity.horario_recepcion = limpiar_texto(dto.horario_recepcion)
        entity.validar()
        return entity
