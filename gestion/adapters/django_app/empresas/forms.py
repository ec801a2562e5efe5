"""
Django Forms para validar la entrada JSON de la API.

Los forms son DRIVING ADAPTERS que validan los datos antes de
pasarlos a los Use Cases.

Responsabilidades:
- Validación estructural (obligatorios, tipos, longitudes, email)
- Lectura de las claves camelCase del JSON
- Conversión a DTO

Principios:
- Los forms NO contienen lógica de negocio (CIF único, sede principal)
- Esa lógica vive en los Use Cases
"""

from typing import Dict

from django import forms

from gestion.core.empresas.dtos import EmpresaDTO
from gestion.core.sedes.dtos import SedeDTO
from gestion.core.shared.exceptions import ValidationError


class JSONForm(forms.Form):
    """
    Form base alimentado con un diccionario JSON.

    Cada campo del form se llama como el atributo del DTO; la clave
    que se lee del JSON se obtiene de CAMPOS_JSON del DTO.
    """

    dto_class = None

    def __init__(self, data: Dict, **kwargs):
        if not isinstance(data, dict):
            raise ValidationError("El cuerpo de la petición debe ser un objeto JSON")
        super().__init__(data, **kwargs)

    def add_prefix(self, field_name: str) -> str:
        return self.dto_class.CAMPOS_JSON.get(field_name, field_name)

    def to_dto(self):
        """
        Valida el form y construye el DTO.

        Raises:
            ValidationError: Con el primer campo inválido
        """
        if not self.is_valid():
            campo, errores = next(iter(self.errors.items()))
            raise ValidationError(errores[0], field=campo)
        return self.dto_class(**self.cleaned_data)


def _texto(max_length: int, obligatorio: bool = False, **kwargs) -> forms.CharField:
    return forms.CharField(
        max_length=max_length,
        required=obligatorio,
        empty_value=None,
        error_messages={
            'required': 'Este campo es obligatorio',
            'max_length': f'No puede superar {max_length} caracteres',
        },
        **kwargs,
    )


def _email() -> forms.EmailField:
    return forms.EmailField(
        max_length=100,
        required=False,
        empty_value=None,
        error_messages={
            'invalid': 'El email debe ser válido',
            'max_length': 'No puede superar 100 caracteres',
        },
    )


def _no_negativo(campo_class=forms.FloatField):
    return campo_class(
        required=False,
        min_value=0,
        error_messages={
            'invalid': 'Debe ser un número válido',
            'min_value': 'Debe ser mayor o igual que 0',
        },
    )


class BooleanoJSONField(forms.Field):
    """
    Booleano opcional que solo admite true, false o null del JSON.

    Cadenas, números, listas u objetos son un error de validación.
    """

    widget = forms.TextInput
    default_error_messages = {
        'invalid': 'Debe ser true o false',
    }

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        super().__init__(**kwargs)

    def to_python(self, value):
        if value is None or value == '':
            return None
        if isinstance(value, bool):
            return value
        raise forms.ValidationError(self.error_messages['invalid'], code='invalid')


class EmpresaForm(JSONForm):
    """
    Form de alta y modificación de empresas.
    """

    dto_class = EmpresaDTO

    razon_social = _texto(200, obligatorio=True)
    cif = _texto(20, obligatorio=True)
    email = _email()
    telefono = _texto(20)
    sector = _texto(100)
    fecha_alta = forms.DateField(
        required=False,
        input_formats=['%Y-%m-%d'],
        error_messages={'invalid': 'La fecha debe tener formato AAAA-MM-DD'},
    )
    activo = BooleanoJSONField()
    facturacion_anual = _no_negativo()
    numero_empleados = _no_negativo(forms.IntegerField)


class SedeForm(JSONForm):
    """
    Form de alta y modificación de sedes.

    empresa_id es obligatorio en el alta; en la modificación se
    ignora porque una sede no cambia de empresa.
    """

    dto_class = SedeDTO

    nombre = _texto(150, obligatorio=True)
    direccion = _texto(255, obligatorio=True)
    ciudad = _texto(100, obligatorio=True)
    provincia = _texto(100)
    codigo_postal = _texto(10)
    pais = _texto(100)
    telefono = _texto(20)
    email = _email()
    es_principal = BooleanoJSONField()
    capacidad_almacenamiento = _no_negativo()
    horario_recepcion = _texto(100)
    empresa_id = forms.IntegerField(
        required=False,
        error_messages={
            'required': 'El id de la empresa es obligatorio',
            'invalid': 'El id de la empresa debe ser un número entero',
        },
    )

    def __init__(self, data: Dict, alta: bool = True, **kwargs):
        super().__init__(data, **kwargs)
        self.fields['empresa_id'].required = alta
