"""
Entidades del Dominio de Sedes.

Una sede es un emplazamiento físico de una empresa. Solo guarda el
identificador de su empresa (empresa_id); nunca el objeto empresa.

Reglas de Negocio Encapsuladas:
- Validación de datos en la creación y en cada modificación
- País por defecto "España"
- Nace como sede no principal salvo que se indique lo contrario
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from gestion.core.shared.validators import (
    limpiar_texto,
    validar_texto,
    validar_email,
    validar_no_negativo,
)


PAIS_POR_DEFECTO = "España"


@dataclass
class SedeEntity:
    """
    Entidad Sede.

    Attributes:
        nombre: Nombre de la sede (obligatorio)
        direccion: Dirección postal (obligatoria)
        ciudad: Ciudad (obligatoria)
        empresa_id: Empresa propietaria; no cambia tras la creación
        es_principal: Sede principal de la empresa (como máximo una)
        capacidad_almacenamiento: Superficie de almacenamiento en m²
        id: Identificador asignado por el almacenamiento
    """

    nombre: str
    direccion: str
    ciudad: str
    empresa_id: Optional[int] = None
    provincia: Optional[str] = None
    codigo_postal: Optional[str] = None
    pais: Optional[str] = PAIS_POR_DEFECTO
    telefono: Optional[str] = None
    email: Optional[str] = None
    es_principal: bool = False
    capacidad_almacenamiento: Optional[float] = None
    horario_recepcion: Optional[str] = None
    id: Optional[int] = None

    NOMBRE_MAX_LENGTH: ClassVar[int] = 150
    DIRECCION_MAX_LENGTH: ClassVar[int] = 255
    CIUDAD_MAX_LENGTH: ClassVar[int] = 100
    PROVINCIA_MAX_LENGTH: ClassVar[int] = 100
    CODIGO_POSTAL_MAX_LENGTH: ClassVar[int] = 10
    PAIS_MAX_LENGTH: ClassVar[int] = 100
    TELEFONO_MAX_LENGTH: ClassVar[int] = 20
    EMAIL_MAX_LENGTH: ClassVar[int] = 100
    HORARIO_MAX_LENGTH: ClassVar[int] = 100

    @classmethod
    def crear(
        cls,
        nombre: str,
        direccion: str,
        ciudad: str,
        empresa_id: Optional[int] = None,
        provincia: Optional[str] = None,
        codigo_postal: Optional[str] = None,
        pais: Optional[str] = None,
        telefono: Optional[str] = None,
        email: Optional[str] = None,
        es_principal: Optional[bool] = False,
        capacidad_almacenamiento: Optional[float] = None,
        horario_recepcion: Optional[str] = None,
    ) -> "SedeEntity":
        """
        Factory method para crear una sede nueva con validaciones.

        El empresa_id puede quedar sin asignar: el caso de uso lo fija
        después de comprobar que la empresa existe.

        Raises:
            ValidationError: Si algún dato no es válido
        """
        sede = cls(
            nombre=limpiar_texto(nombre),
            direccion=limpiar_texto(direccion),
            ciudad=limpiar_texto(ciudad),
            empresa_id=empresa_id,
            provincia=limpiar_texto(provincia),
            codigo_postal=limpiar_texto(codigo_postal),
            pais=limpiar_texto(pais) or PAIS_POR_DEFECTO,
            telefono=limpiar_texto(telefono),
            email=limpiar_texto(email),
            es_principal=bool(es_principal),
            capacidad_almacenamiento=capacidad_almacenamiento,
            horario_recepcion=limpiar_texto(horario_recepcion),
        )
        sede.validar()
        return sede

    def validar(self) -> None:
        """Comprueba las restricciones declaradas de cada campo."""
        validar_texto(self.nombre, "nombre", self.NOMBRE_MAX_LENGTH, obligatorio=True)
        validar_texto(self.direccion, "direccion", self.DIRECCION_MAX_LENGTH, obligatorio=True)
        validar_texto(self.ciudad, "ciudad", self.CIUDAD_MAX_LENGTH, obligatorio=True)
        validar_texto(self.provincia, "provincia", self.PROVINCIA_MAX_LENGTH)
        validar_texto(self.codigo_postal, "codigo_postal", self.CODIGO_POSTAL_MAX_LENGTH)
        validar_texto(self.pais, "pais", self.PAIS_MAX_LENGTH)
        validar_texto(self.telefono, "telefono", self.TELEFONO_MAX_LENGTH)
        validar_email(self.email, "email", self.EMAIL_MAX_LENGTH)
        validar_no_negativo(self.capacidad_almacenamiento, "capacidad_almacenamiento")
        validar_texto(self.horario_recepcion, "horario_recepcion", self.HORARIO_MAX_LENGTH)

    def __repr__(self) -> str:
        return (
            f"<SedeEntity(id={self.id}, nombre='{self.nombre}', "
            f"empresa_id={self.empresa_id}, es_principal={self.es_principal})>"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SedeEntity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((SedeEntity, self.id))
