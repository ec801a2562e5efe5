"""
Tests del Unit of Work de Django.

Coverage:
- Commit al salir del bloque sin errores
- Rollback de todas las escrituras cuando se lanza una excepción
"""

import pytest

from gestion.adapters.django_app.empresas.models import EmpresaModel
from gestion.adapters.django_app.empresas.repositories import DjangoEmpresaRepository
from gestion.adapters.django_app.shared.unit_of_work import (
    DjangoUnitOfWork,
    InMemoryUnitOfWork,
)
from gestion.core.empresas.entities import EmpresaEntity
from gestion.core.shared.exceptions import ValidationError


@pytest.mark.django_db
class TestDjangoUnitOfWork:

    def test_commit(self):
        """Debe confirmar las escrituras del bloque."""
        uow = DjangoUnitOfWork()
        repo = DjangoEmpresaRepository()

        with uow:
            repo.save(EmpresaEntity.crear("Acme SA", "B12345678"))

        assert uow.is_committed
        assert not uow.is_rolled_back
        assert EmpresaModel.objects.filter(cif="B12345678").exists()

    def test_rollback_ante_excepcion(self):
        """Debe deshacer todas las escrituras y propagar la excepción."""
        uow = DjangoUnitOfWork()
        repo = DjangoEmpresaRepository()

        with pytest.raises(ValidationError):
            with uow:
                repo.save(EmpresaEntity.crear("Acme SA", "B12345678"))
                repo.save(EmpresaEntity.crear("Beta SL", "B87654321"))
                raise ValidationError("fallo", field="cif")

        assert uow.is_rolled_back
        assert not uow.is_committed
        assert EmpresaModel.objects.count() == 0

    def test_rollback_tras_violacion_de_unicidad(self):
        """Un CIF duplicado deshace también las escrituras previas del bloque."""
        repo = DjangoEmpresaRepository()
        repo.save(EmpresaEntity.crear("Existente SA", "A00000001"))

        with pytest.raises(ValidationError):
            with DjangoUnitOfWork():
                repo.save(EmpresaEntity.crear("Nueva SA", "B00000002"))
                repo.save(EmpresaEntity.crear("Duplicada SA", "A00000001"))

        assert list(EmpresaModel.objects.values_list("cif", flat=True)) == ["A00000001"]

    def test_reutilizable(self):
        uow = DjangoUnitOfWork()
        repo = DjangoEmpresaRepository()

        with uow:
            repo.save(EmpresaEntity.crear("A", "A1"))
        with uow:
            repo.save(EmpresaEntity.crear("B", "B1"))

        assert EmpresaModel.objects.count() == 2


class TestInMemoryUnitOfWork:

    def test_registra_commit(self):
        uow = InMemoryUnitOfWork()

        with uow:
            pass

        assert uow.committed
        assert not uow.rolled_back

    def test_registra_rollback(self):
        uow = InMemoryUnitOfWork()

        with pytest.raises(RuntimeError):
            with uow:
                raise RuntimeError("boom")

        assert uow.rolled_back
        assert not uow.committed

        uow.reset()
        assert not uow.rolled_back
