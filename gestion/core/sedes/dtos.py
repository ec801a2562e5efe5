"""
Data Transfer Objects (DTOs) del Dominio de Sedes.

El DTO es la representación externa (plana) de una sede. Se usa tanto
como entrada validada de la API como de salida hacia el cliente.

Una sede expuesta solo lleva el id de su empresa (empresaId), nunca
la empresa completa, para evitar la serialización cíclica
empresa → sedes → empresa.
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional


@dataclass
class SedeDTO:
    """
    DTO de sede.

    Attributes:
        id: Identificador (None en la entrada)
        empresa_id: Id de la empresa propietaria (obligatorio al crear)
        es_principal: None en la entrada significa "no indicado"
    """

    nombre: Optional[str] = None
    direccion: Optional[str] = None
    ciudad: Optional[str] = None
    provincia: Optional[str] = None
    codigo_postal: Optional[str] = None
    pais: Optional[str] = None
    telefono: Optional[str] = None
    email: Optional[str] = None
    es_principal: Optional[bool] = None
    capacidad_almacenamiento: Optional[float] = None
    horario_recepcion: Optional[str] = None
    empresa_id: Optional[int] = None
    id: Optional[int] = None

    # Atributo → clave JSON
    CAMPOS_JSON: ClassVar[Dict[str, str]] = {
        "id": "id",
        "nombre": "nombre",
        "direccion": "direccion",
        "ciudad": "ciudad",
        "provincia": "provincia",
        "codigo_postal": "codigoPostal",
        "pais": "pais",
        "telefono": "telefono",
        "email": "email",
        "es_principal": "esPrincipal",
        "capacidad_almacenamiento": "capacidadAlmacenamiento",
        "horario_recepcion": "horarioRecepcion",
        "empresa_id": "empresaId",
    }

    def to_dict(self) -> dict:
        """Convierte a diccionario con claves camelCase (serialización JSON)."""
        return {
            "id": self.id,
            "nombre": self.nombre,
            "direccion": self.direccion,
            "ciudad": self.ciudad,
            "provincia": self.provincia,
            "codigoPostal": self.codigo_postal,
            "pais": self.pais,
            "telefono": self.telefono,
            "email": self.email,
            "esPrincipal": self.es_principal,
            "capacidadAlmacenamiento": self.capacidad_almacenamiento,
            "horarioRecepcion": self.horario_recepcion,
            "empresaId": self.empresa_id,
        }
