"""
Tests unitarios de la entidad Empresa.

Coverage:
- EmpresaEntity.crear(): normalización y validaciones de alta
- EmpresaEntity.validar(): longitudes, email y números no negativos
- activar()/desactivar(): baja lógica
- Igualdad por id
"""

import pytest
from datetime import date

from gestion.core.empresas.entities import EmpresaEntity
from gestion.core.shared.exceptions import ValidationError


class TestEmpresaEntityCreacion:
    """Tests de creación de empresas."""

    def test_crear_empresa_valida(self):
        """Debe crear una empresa activa, sin id y con fecha de alta de hoy."""
        empresa = EmpresaEntity.crear(
            razon_social="Acme SA",
            cif="B12345678",
            email="contacto@acme.es",
            sector="Logística",
            facturacion_anual=1000.0,
            numero_empleados=3,
        )

        assert empresa.id is None
        assert empresa.activo is True
        assert empresa.fecha_alta == date.today()
        assert empresa.razon_social == "Acme SA"
        assert empresa.numero_empleados == 3

    def test_crear_respeta_fecha_alta_indicada(self):
        empresa = EmpresaEntity.crear("Acme SA", "B12345678", fecha_alta=date(2019, 5, 1))

        assert empresa.fecha_alta == date(2019, 5, 1)

    def test_crear_elimina_espacios_y_normaliza_vacios(self):
        """Debe recortar textos y convertir cadenas vacías en None."""
        empresa = EmpresaEntity.crear("  Acme SA  ", " B1 ", email="   ", sector="")

        assert empresa.razon_social == "Acme SA"
        assert empresa.cif == "B1"
        assert empresa.email is None
        assert empresa.sector is None

    @pytest.mark.parametrize("razon_social", [None, "", "   "])
    def test_razon_social_obligatoria(self, razon_social):
        with pytest.raises(ValidationError) as exc_info:
            EmpresaEntity.crear(razon_social, "B12345678")

        assert exc_info.value.field == "razon_social"
        assert "obligatorio" in exc_info.value.message

    def test_cif_obligatorio(self):
        with pytest.raises(ValidationError) as exc_info:
            EmpresaEntity.crear("Acme SA", "")

        assert exc_info.value.field == "cif"

    def test_razon_social_demasiado_larga(self):
        """Debe rechazar una razón social de más de 200 caracteres."""
        EmpresaEntity.crear("x" * 200, "B12345678")

        with pytest.raises(ValidationError) as exc_info:
            EmpresaEntity.crear("x" * 201, "B12345678")

        assert exc_info.value.field == "razon_social"
        assert "200" in exc_info.value.message

    def test_cif_demasiado_largo(self):
        with pytest.raises(ValidationError) as exc_info:
            EmpresaEntity.crear("Acme SA", "B" * 21)

        assert exc_info.value.field == "cif"

    def test_email_invalido(self):
        with pytest.raises(ValidationError) as exc_info:
            EmpresaEntity.crear("Acme SA", "B12345678", email="no-es-un-email")

        assert exc_info.value.field == "email"
        assert exc_info.value.message == "El email debe ser válido"

    @pytest.mark.parametrize("campo,valor", [
        ("facturacion_anual", -0.01),
        ("numero_empleados", -1),
    ])
    def test_numeros_negativos(self, campo, valor):
        with pytest.raises(ValidationError) as exc_info:
            EmpresaEntity.crear("Acme SA", "B12345678", **{campo: valor})

        assert exc_info.value.field == campo

    def test_ceros_permitidos(self):
        empresa = EmpresaEntity.crear(
            "Acme SA", "B12345678", facturacion_anual=0, numero_empleados=0
        )

        assert empresa.facturacion_anual == 0
        assert empresa.numero_empleados == 0


class TestEmpresaEntityEstado:
    """Tests de baja lógica y reactivación."""

    def test_desactivar(self):
        empresa = EmpresaEntity.crear("Acme SA", "B12345678")

        empresa.desactivar()

        assert empresa.activo is False

    def test_desactivar_dos_veces_no_tiene_efecto(self):
        """Debe ser idempotente."""
        empresa = EmpresaEntity.crear("Acme SA", "B12345678")

        empresa.desactivar()
        empresa.desactivar()

        assert empresa.activo is False

    def test_activar(self):
        empresa = EmpresaEntity.crear("Acme SA", "B12345678")
        empresa.desactivar()

        empresa.activar()

        assert empresa.activo is True


class TestEmpresaEntityIgualdad:

    def test_misma_id_son_iguales(self):
        a = EmpresaEntity(razon_social="A", cif="1", id=7)
        b = EmpresaEntity(razon_social="B", cif="2", id=7)

        assert a == b
        assert hash(a) == hash(b)

    def test_sin_id_solo_igual_a_si_misma(self):
        a = EmpresaEntity(razon_social="A", cif="1")
        b = EmpresaEntity(razon_social="A", cif="1")

        assert a == a
        assert a != b

    def test_repr(self):
        empresa = EmpresaEntity(razon_social="A", cif="B1", id=3)

        assert repr(empresa) == "<EmpresaEntity(id=3, cif='B1', activo=True)>"
