"""
Tests de los repositorios Django contra SQLite en memoria.

Coverage:
- DjangoEmpresaRepository: CRUD, consultas derivadas, CIF único
- DjangoSedeRepository: consultas derivadas, restricción de sede principal
- Borrado en cascada empresa → sedes
- Ids no reutilizados ni resucitados tras un borrado
- Comparación sin mayúsculas con acentos y eñes
"""

import pytest
from datetime import date

from gestion.adapters.django_app.empresas.models import EmpresaModel, SedeModel
from gestion.adapters.django_app.empresas.repositories import (
    DjangoEmpresaRepository,
    DjangoSedeRepository,
)
from gestion.core.empresas.entities import EmpresaEntity
from gestion.core.empresas.ports import EmpresaRepository
from gestion.core.sedes.entities import SedeEntity
from gestion.core.sedes.ports import SedeRepository
from gestion.core.shared.exceptions import EntityNotFoundError, ValidationError


@pytest.fixture
def empresa_repository():
    return DjangoEmpresaRepository()


@pytest.fixture
def sede_repository():
    return DjangoSedeRepository()


def _nueva_sede(empresa_id, nombre="HQ", **kwargs):
    sede = SedeEntity.crear(
        nombre, "Calle Mayor 1", kwargs.pop("ciudad", "Madrid"), **kwargs
    )
    sede.empresa_id = empresa_id
    return sede


def test_implementan_los_ports(empresa_repository, sede_repository):
    assert isinstance(empresa_repository, EmpresaRepository)
    assert isinstance(sede_repository, SedeRepository)


@pytest.mark.django_db
class TestDjangoEmpresaRepository:

    def test_save_asigna_id_y_persiste(self, empresa_repository):
        """Debe crear la fila y devolver la entidad con id."""
        empresa = empresa_repository.save(
            EmpresaEntity.crear("Acme SA", "B12345678", fecha_alta=date(2021, 2, 3))
        )

        assert empresa.id is not None
        model = EmpresaModel.objects.get(id=empresa.id)
        assert model.razon_social == "Acme SA"
        assert model.fecha_alta == date(2021, 2, 3)
        assert model.activo is True

    def test_save_actualiza_existente(self, empresa_repository):
        empresa = empresa_repository.save(EmpresaEntity.crear("Acme SA", "B12345678"))
        empresa.razon_social = "Acme Global SA"
        empresa.desactivar()

        empresa_repository.save(empresa)

        recargada = empresa_repository.get_by_id(empresa.id)
        assert recargada.razon_social == "Acme Global SA"
        assert recargada.activo is False
        assert EmpresaModel.objects.count() == 1

    def test_get_by_id_inexistente(self, empresa_repository):
        assert empresa_repository.get_by_id(999) is None

    def test_cif_duplicado_rechazado_por_la_base_de_datos(self, empresa_repository):
        """La restricción única se traduce a ValidationError y la conexión sigue usable."""
        empresa_repository.save(EmpresaEntity.crear("Acme SA", "B12345678"))

        with pytest.raises(ValidationError) as exc_info:
            empresa_repository.save(EmpresaEntity.crear("Otra SL", "B12345678"))

        assert exc_info.value.field == "cif"
        assert empresa_repository.count() == 1
        assert empresa_repository.exists_by_cif("B12345678")

    def test_get_by_cif(self, empresa_repository, empresa_model_factory):
        model = empresa_model_factory(cif="A11111111")

        assert empresa_repository.get_by_cif("A11111111").id == model.id
        assert empresa_repository.get_by_cif("Z0") is None

    def test_activas(self, empresa_repository, empresa_model_factory):
        activa = empresa_model_factory()
        empresa_model_factory(activo=False)

        assert [e.id for e in empresa_repository.list_activas()] == [activa.id]
        assert empresa_repository.count_activas() == 1

    def test_sector_sin_distinguir_mayusculas(self, empresa_repository, empresa_model_factory):
        a = empresa_model_factory(sector="Retail")
        b = empresa_model_factory(sector="RETAIL", activo=False)
        empresa_model_factory(sector="Banca")

        assert [e.id for e in empresa_repository.list_by_sector("retail")] == [a.id, b.id]
        assert [e.id for e in empresa_repository.list_by_sector_activas("retail")] == [a.id]

    def test_search_by_razon_social(self, empresa_repository, empresa_model_factory):
        acme = empresa_model_factory(razon_social="Acme Logistica SA")
        empresa_model_factory(razon_social="Beta SL")

        resultado = empresa_repository.search_by_razon_social("LOGIST")

        assert [e.id for e in resultado] == [acme.id]

    def test_facturacion_mayor_que(self, empresa_repository, empresa_model_factory):
        grande = empresa_model_factory(facturacion_anual=1000.0)
        empresa_model_factory(facturacion_anual=500.0)
        empresa_model_factory(facturacion_anual=None)

        resultado = empresa_repository.list_by_facturacion_mayor_que(500.0)

        assert [e.id for e in resultado] == [grande.id]

    def test_delete_en_cascada(self, empresa_repository, empresa_model_factory, sede_model_factory):
        """Debe eliminar la empresa y todas sus sedes."""
        empresa = empresa_model_factory()
        otra = empresa_model_factory()
        sede_model_factory(empresa, es_principal=True)
        sede_model_factory(empresa, nombre="Almacén")
        sede_model_factory(otra)

        assert empresa_repository.delete(empresa.id) is True

        assert not empresa_repository.exists(empresa.id)
        assert SedeModel.objects.filter(empresa_id=empresa.id).count() == 0
        assert SedeModel.objects.count() == 1

    def test_delete_inexistente(self, empresa_repository):
        assert empresa_repository.delete(999) is False

    def test_ids_no_se_reutilizan(self, empresa_repository):
        primera = empresa_repository.save(EmpresaEntity.crear("A", "A1"))
        empresa_repository.delete(primera.id)

        segunda = empresa_repository.save(EmpresaEntity.crear("B", "B1"))

        assert segunda.id > primera.id

    def test_save_de_copia_obsoleta_no_resucita_la_empresa(self, empresa_repository):
        """Modificar una empresa ya borrada debe fallar sin volver a insertarla."""
        empresa = empresa_repository.save(EmpresaEntity.crear("Acme SA", "B12345678"))
        obsoleta = empresa_repository.get_by_id(empresa.id)
        empresa_repository.delete(empresa.id)
        obsoleta.razon_social = "Acme Global SA"

        with pytest.raises(EntityNotFoundError) as exc_info:
            empresa_repository.save(obsoleta)

        assert exc_info.value.entity_id == empresa.id
        assert exc_info.value.entity_type == "Empresa"
        assert not EmpresaModel.objects.filter(id=empresa.id).exists()
        assert empresa_repository.count() == 0

    def test_sector_con_acentos_sin_distinguir_mayusculas(
        self, empresa_repository, empresa_model_factory
    ):
        logistica = empresa_model_factory(sector="Logística")
        empresa_model_factory(sector="Logistica")

        assert [e.id for e in empresa_repository.list_by_sector("LOGÍSTICA")] == [logistica.id]
        assert [
            e.id for e in empresa_repository.list_by_sector_activas("logística")
        ] == [logistica.id]

    def test_search_con_enes_y_acentos(self, empresa_repository, empresa_model_factory):
        nandu = empresa_model_factory(razon_social="Ñandú Málaga SL")
        empresa_model_factory(razon_social="Nandu Malaga SL")

        assert [e.id for e in empresa_repository.search_by_razon_social("ÑANDÚ")] == [nandu.id]
        assert [e.id for e in empresa_repository.search_by_razon_social("MÁLAGA")] == [nandu.id]


@pytest.mark.django_db
class TestDjangoSedeRepository:

    @pytest.fixture
    def empresa(self, empresa_model_factory):
        return empresa_model_factory()

    def test_save_y_get(self, sede_repository, empresa):
        sede = sede_repository.save(_nueva_sede(empresa.id, capacidad_almacenamiento=10.0))

        recargada = sede_repository.get_by_id(sede.id)

        assert recargada.empresa_id == empresa.id
        assert recargada.pais == "España"
        assert recargada.capacidad_almacenamiento == 10.0

    def test_segunda_principal_rechazada_por_la_base_de_datos(self, sede_repository, empresa):
        """La restricción parcial única impide dos sedes principales."""
        sede_repository.save(_nueva_sede(empresa.id, es_principal=True))

        with pytest.raises(ValidationError) as exc_info:
            sede_repository.save(_nueva_sede(empresa.id, nombre="Otra", es_principal=True))

        assert exc_info.value.field == "es_principal"
        assert sede_repository.count_by_empresa(empresa.id) == 1

    def test_varias_no_principales(self, sede_repository, empresa):
        sede_repository.save(_nueva_sede(empresa.id, "A"))
        sede_repository.save(_nueva_sede(empresa.id, "B"))

        assert sede_repository.count_by_empresa(empresa.id) == 2
        assert sede_repository.get_principal_by_empresa(empresa.id) is None
        assert not sede_repository.exists_principal_for_empresa(empresa.id)

    def test_principal(self, sede_repository, empresa):
        sede_repository.save(_nueva_sede(empresa.id, "A"))
        principal = sede_repository.save(_nueva_sede(empresa.id, "B", es_principal=True))

        assert sede_repository.get_principal_by_empresa(empresa.id).id == principal.id
        assert sede_repository.exists_principal_for_empresa(empresa.id)

    def test_consultas_por_ubicacion(self, sede_repository, empresa, empresa_model_factory):
        otra = empresa_model_factory()
        madrid = sede_repository.save(_nueva_sede(empresa.id, "A", provincia="Madrid"))
        sevilla = sede_repository.save(
            _nueva_sede(empresa.id, "B", ciudad="Sevilla", provincia="Sevilla")
        )
        ajena = sede_repository.save(_nueva_sede(otra.id, "C", ciudad="MADRID"))

        assert [s.id for s in sede_repository.list_by_ciudad("madrid")] == [madrid.id, ajena.id]
        assert [s.id for s in sede_repository.list_by_provincia("SEVILLA")] == [sevilla.id]
        assert [s.id for s in sede_repository.list_by_empresa(empresa.id)] == [madrid.id, sevilla.id]
        assert [
            s.id for s in sede_repository.list_by_empresa_y_ciudad(otra.id, "Madrid")
        ] == [ajena.id]

    def test_capacidad_minima_y_nombre(self, sede_repository, empresa):
        grande = sede_repository.save(
            _nueva_sede(empresa.id, "Almacén Norte", capacidad_almacenamiento=200.0)
        )
        sede_repository.save(_nueva_sede(empresa.id, "Oficina", capacidad_almacenamiento=20.0))
        sede_repository.save(_nueva_sede(empresa.id, "Tienda"))

        assert [s.id for s in sede_repository.list_by_capacidad_minima(200.0)] == [grande.id]
        assert [s.id for s in sede_repository.search_by_nombre("NORTE")] == [grande.id]

    def test_ciudad_y_nombre_con_acentos(self, sede_repository, empresa):
        malaga = sede_repository.save(
            _nueva_sede(empresa.id, "Almacén Ávila", ciudad="Málaga", provincia="Málaga")
        )
        sede_repository.save(_nueva_sede(empresa.id, "Oficina", ciudad="Malaga"))

        assert [s.id for s in sede_repository.list_by_ciudad("MÁLAGA")] == [malaga.id]
        assert [s.id for s in sede_repository.list_by_provincia("málaga")] == [malaga.id]
        assert [
            s.id for s in sede_repository.list_by_empresa_y_ciudad(empresa.id, "MÁLAGA")
        ] == [malaga.id]
        assert [s.id for s in sede_repository.search_by_nombre("ÁVILA")] == [malaga.id]

    def test_save_de_copia_obsoleta_no_resucita_la_sede(self, sede_repository, empresa):
        sede = sede_repository.save(_nueva_sede(empresa.id))
        obsoleta = sede_repository.get_by_id(sede.id)
        sede_repository.delete(sede.id)

        with pytest.raises(EntityNotFoundError):
            sede_repository.save(obsoleta)

        assert not SedeModel.objects.filter(id=sede.id).exists()

    def test_delete_no_afecta_a_la_empresa(self, sede_repository, empresa):
        sede = sede_repository.save(_nueva_sede(empresa.id))

        assert sede_repository.delete(sede.id) is True

        assert not sede_repository.exists(sede.id)
        assert EmpresaModel.objects.filter(id=empresa.id).exists()
