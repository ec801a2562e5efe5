"""
Unit of Work - Implementación Django.

Gestiona la transacción de una operación de escritura, garantizando
que todas sus lecturas y escrituras se confirmen o se deshagan juntas.

Se apoya en django.db.transaction.atomic(), de modo que anida
correctamente dentro de otros bloques atómicos (por ejemplo,
ATOMIC_REQUESTS o los tests de pytest-django).
"""

from typing import Optional
import logging

from django.db import transaction

from gestion.core.shared.interfaces import UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementación Django del Unit of Work.

    Example:
        with DjangoUnitOfWork() as uow:
            empresa_repo.save(empresa)
            sede_repo.save(sede)
        # Commit automático

    Example con rollback:
        with DjangoUnitOfWork():
            empresa_repo.save(empresa)
            raise ValidationError("...")
        # Rollback automático
    """

    def __init__(self, using: Optional[str] = None):
        """
        Args:
            using: Alias de la base de datos (None = 'default')
        """
        self._using = using
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        self._committed = False
        self._rolled_back = False
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Confirma la transacción.

        Si el bloque atómico es el más externo, Django hace COMMIT;
        si está anidado, libera el savepoint.
        """
        if self._atomic is None:
            logger.warning("Commit without active transaction")
            return

        atomic, self._atomic = self._atomic, None
        atomic.__exit__(None, None, None)
        self._committed = True
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        """Deshace la transacción (o el savepoint, si está anidada)."""
        if self._atomic is None:
            return

        atomic, self._atomic = self._atomic, None
        transaction.set_rollback(True, using=self._using)
        atomic.__exit__(None, None, None)
        self._rolled_back = True
        logger.debug("Transaction rolled back")

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work en memoria para tests.

    No persiste nada; solo registra si hubo commit o rollback.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            ...
        assert uow.committed
    """

    def __init__(self):
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        pass

    def commit(self) -> None:
        self._committed = True

    def rollback(self) -> None:
        self._rolled_back = True

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    def reset(self) -> None:
        """Reinicia el estado para el siguiente test."""
        self._committed = False
        self._rolled_back = False
