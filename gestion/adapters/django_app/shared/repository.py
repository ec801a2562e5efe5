"""
Repository Base - Implementación base de repositorios con Django ORM.

Proporciona la funcionalidad común a todos los repositorios:
- CRUD básico (save, get_by_id, delete, exists, list_all)
- Conversión de consultas a entidades
- Traducción de violaciones de integridad a ValidationError

Principios:
- Los repositorios no tienen estado de negocio
- No contienen lógica de negocio
- Solo persistencia y consultas
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterable, List, Optional, Type, TypeVar
import logging

from django.db import IntegrityError, models, transaction

from gestion.core.shared.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Variables de tipo
T = TypeVar("T")  # Tipo de la Entity
M = TypeVar("M", bound=models.Model)  # Tipo del Model


class BaseRepository(ABC, Generic[T, M]):
    """
    Clase base abstracta para repositorios Django.

    Type Parameters:
        T: Tipo de la entidad de dominio
        M: Tipo del Model Django

    Example:
        class DjangoEmpresaRepository(BaseRepository[EmpresaEntity, EmpresaModel]):
            model_class = EmpresaModel

            def to_entity(self, model):
                return EmpresaModelMapper.to_entity(model)

            def to_fields(self, entity):
                return EmpresaModelMapper.to_fields(entity)
    """

    # Clase del model Django (definir en la subclase)
    model_class: Type[M]

    # Mensaje y campo de la ValidationError cuando la base de datos
    # rechaza el guardado por una restricción de unicidad
    integrity_error_message: str = "Violación de restricción de integridad"
    integrity_error_field: Optional[str] = None

    # Nombre de la entidad en los errores de "no encontrada"
    entity_type: str = "Entidad"

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """Convierte un Model Django en Entity de dominio."""
        raise NotImplementedError

    @abstractmethod
    def to_fields(self, entity: T) -> Dict[str, object]:
        """
        Devuelve los valores de columna de la entidad (sin id).

        Args:
            entity: Entity de dominio

        Returns:
            Diccionario campo → valor para create/update
        """
        raise NotImplementedError

    def _queryset(self) -> models.QuerySet:
        return self.model_class.objects.all()

    def _to_entities(self, queryset: Iterable[M]) -> List[T]:
        return [self.to_entity(m) for m in queryset]

    def save(self, entity: T) -> T:
        """
        Persiste la entidad (alta o modificación según tenga id).

        El guardado se hace dentro de un savepoint para que una
        violación de unicidad no deje inutilizable la transacción
        del Unit of Work.

        Returns:
            La misma entidad con el id asignado

        Raises:
            ValidationError: Si la base de datos rechaza el guardado
            EntityNotFoundError: Si la fila a modificar ya no existe
        """
        fields = self.to_fields(entity)
        try:
            with transaction.atomic():
                if entity.id is None:
                    model = self.model_class.objects.create(**fields)
                    entity.id = model.id
                else:
                    updated = self.model_class.objects.filter(id=entity.id).update(**fields)
                    if updated == 0:
                        raise EntityNotFoundError(
                            f"{self.entity_type} no encontrada con ID: {entity.id}",
                            entity_type=self.entity_type,
                            entity_id=entity.id,
                        )
        except IntegrityError as e:
            logger.warning(f"{self.model_class.__name__} integrity error: {e}")
            raise ValidationError(
                self.integrity_error_message,
                field=self.integrity_error_field,
            ) from e

        logger.debug(f"{self.model_class.__name__} saved: {entity.id}")
        return entity

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """
        Busca una entidad por id.

        Returns:
            Entidad encontrada o None
        """
        try:
            return self.to_entity(self._queryset().get(id=entity_id))
        except self.model_class.DoesNotExist:
            return None

    def delete(self, entity_id: int) -> bool:
        """
        Elimina la entidad.

        Returns:
            True si se eliminó, False si no existía
        """
        deleted_count, detalle = self.model_class.objects.filter(id=entity_id).delete()
        logger.debug(f"{self.model_class.__name__} {entity_id} deleted: {detalle}")
        return deleted_count > 0

    def exists(self, entity_id: int) -> bool:
        return self.model_class.objects.filter(id=entity_id).exists()

    def count(self) -> int:
        return self.model_class.objects.count()

    def list_all(self) -> List[T]:
        """Lista todas las entidades ordenadas por id (sin paginación)."""
        return self._to_entities(self._queryset())
