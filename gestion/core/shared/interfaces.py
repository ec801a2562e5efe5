"""
Interfaces (Ports) - Contratos entre Core y Adapters.

Este módulo define las interfaces que los Adapters deben implementar.
Son los "Ports" de la Arquitectura Hexagonal.

Principio: el Core define las interfaces; los Adapters las implementan.
El flujo de dependencias siempre apunta hacia el Core.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TypeVar, Generic, Protocol


# Tipo genérico para entidades
T = TypeVar("T")


class UnitOfWork(ABC):
    """
    Unit of Work - Coordina transacciones atómicas.

    Garantiza que todas las lecturas y escrituras de una operación
    se ejecuten como una única unidad: o se persisten todas o ninguna.

    Pattern: Context Manager
        with uow:
            repo.save(entidad1)
            repo.save(entidad2)
        # Commit automático al salir sin error
        # Rollback automático si hay excepción
    """

    def __enter__(self) -> "UnitOfWork":
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza el contexto de la transacción.

        Returns:
            False para propagar excepciones
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia una nueva transacción."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Persiste todos los cambios de la transacción."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Deshace todos los cambios.

        Se llama automáticamente si ocurre una excepción
        dentro del bloque `with`.
        """
        raise NotImplementedError


class Repository(Protocol, Generic[T]):
    """
    Interfaz genérica para repositorios.

    Define las operaciones básicas de persistencia comunes a
    todos los repositorios. Los identificadores son enteros
    asignados por el almacenamiento.

    Note:
        Se usa Protocol para permitir duck typing.
        Los Adapters no necesitan heredar explícitamente.
    """

    def save(self, entity: T) -> T:
        """
        Persiste la entidad (alta si no tiene id, modificación si lo tiene).

        Returns:
            La entidad con el id asignado
        """
        ...

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """
        Busca una entidad por id.

        Returns:
            Entidad encontrada o None
        """
        ...

    def delete(self, entity_id: int) -> bool:
        """Elimina la entidad. Devuelve True si existía."""
        ...

    def exists(self, entity_id: int) -> bool:
        ...

    def list_all(self) -> List[T]:
        ...
