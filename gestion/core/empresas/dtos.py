"""
Data Transfer Objects (DTOs) del Dominio de Empresas.

El DTO es la representación externa (plana) de una empresa, usada
como entrada validada de la API y como respuesta. En la salida incluye
sus sedes, cada una con solo el id de la empresa.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar, Dict, List, Optional

from gestion.core.sedes.dtos import SedeDTO


@dataclass
class EmpresaDTO:
    """
    DTO de empresa.

    Attributes:
        id: Identificador (None en la entrada)
        fecha_alta: En la entrada, fecha de alta explícita (opcional)
        activo: None en la entrada significa "no indicado"
        sedes: Sedes de la empresa (solo en la salida)
    """

    razon_social: Optional[str] = None
    cif: Optional[str] = None
    email: Optional[str] = None
    telefono: Optional[str] = None
    sector: Optional[str] = None
    fecha_alta: Optional[date] = None
    activo: Optional[bool] = None
    facturacion_anual: Optional[float] = None
    numero_empleados: Optional[int] = None
    id: Optional[int] = None
    sedes: List[SedeDTO] = field(default_factory=list)

    # Atributo → clave JSON
    CAMPOS_JSON: ClassVar[Dict[str, str]] = {
        "id": "id",
        "razon_social": "razonSocial",
        "cif": "cif",
        "email": "email",
        "telefono": "telefono",
        "sector": "sector",
        "fecha_alta": "fechaAlta",
        "activo": "activo",
        "facturacion_anual": "facturacionAnual",
        "numero_empleados": "numeroEmpleados",
    }

    def to_dict(self) -> dict:
        """Convierte a diccionario con claves camelCase (serialización JSON)."""
        return {
            "id": self.id,
            "razonSocial": self.razon_social,
            "cif": self.cif,
            "email": self.email,
            "telefono": self.telefono,
            "sector": self.sector,
            "fechaAlta": self.fecha_alta.isoformat() if self.fecha_alta else None,
            "activo": self.activo,
            "facturacionAnual": self.facturacion_anual,
            "numeroEmpleados": self.numero_empleados,
            "sedes": [sede.to_dict() for sede in self.sedes],
        }
