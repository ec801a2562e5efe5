"""
Entidades del Dominio de Empresas.

Este módulo define la entidad de dominio que encapsula las reglas
de negocio propias de una empresa.

Reglas de Negocio Encapsuladas:
- Validación de datos en la creación y en cada modificación
- Alta con activo=True y fecha de alta = hoy (salvo que se indique otra)
- Baja lógica mediante desactivar()/activar()

Note:
    La entidad no mantiene referencia a sus sedes. La relación vive
    únicamente en la sede (empresa_id) y se consulta mediante
    SedeRepository.list_by_empresa().
"""

from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar, Optional

from gestion.core.shared.validators import (
    limpiar_texto,
    validar_texto,
    validar_email,
    validar_no_negativo,
)


@dataclass
class EmpresaEntity:
    """
    Entidad Empresa.

    Attributes:
        razon_social: Denominación legal (obligatoria)
        cif: Código de identificación fiscal, único en el sistema
        email: Email de contacto
        telefono: Teléfono de contacto
        sector: Sector de actividad
        fecha_alta: Fecha de alta; no cambia tras la creación
        activo: False cuando la empresa está dada de baja lógica
        facturacion_anual: Facturación anual (>= 0)
        numero_empleados: Número de empleados (>= 0)
        id: Identificador asignado por el almacenamiento
    """

    razon_social: str
    cif: str
    email: Optional[str] = None
    telefono: Optional[str] = None
    sector: Optional[str] = None
    fecha_alta: date = field(default_factory=date.today)
    activo: bool = True
    facturacion_anual: Optional[float] = None
    numero_empleados: Optional[int] = None
    id: Optional[int] = None

    RAZON_SOCIAL_MAX_LENGTH: ClassVar[int] = 200
    CIF_MAX_LENGTH: ClassVar[int] = 20
    EMAIL_MAX_LENGTH: ClassVar[int] = 100
    TELEFONO_MAX_LENGTH: ClassVar[int] = 20
    SECTOR_MAX_LENGTH: ClassVar[int] = 100

    @classmethod
    def crear(
        cls,
        razon_social: str,
        cif: str,
        email: Optional[str] = None,
        telefono: Optional[str] = None,
        sector: Optional[str] = None,
        fecha_alta: Optional[date] = None,
        facturacion_anual: Optional[float] = None,
        numero_empleados: Optional[int] = None,
    ) -> "EmpresaEntity":
        """
        Factory method para crear una empresa nueva con validaciones.

        La empresa nace activa y sin id; el id lo asigna el
        repositorio al persistirla.

        Args:
            razon_social: Denominación legal
            cif: Código de identificación fiscal
            fecha_alta: Fecha de alta (por defecto, hoy)

        Returns:
            Nueva instancia de EmpresaEntity

        Raises:
            ValidationError: Si algún dato no es válido
        """
        empresa = cls(
            razon_social=limpiar_texto(razon_social),
            cif=limpiar_texto(cif),
            email=limpiar_texto(email),
            telefono=limpiar_texto(telefono),
            sector=limpiar_texto(sector),
            fecha_alta=fecha_alta or date.today(),
            activo=True,
            facturacion_anual=facturacion_anual,
            numero_empleados=numero_empleados,
        )
        empresa.validar()
        return empresa

    def validar(self) -> None:
        """
        Comprueba las restricciones declaradas de cada campo.

        Raises:
            ValidationError: Con el nombre del primer campo inválido
        """
        validar_texto(self.razon_social, "razon_social", self.RAZON_SOCIAL_MAX_LENGTH, obligatorio=True)
        validar_texto(self.cif, "cif", self.CIF_MAX_LENGTH, obligatorio=True)
        validar_email(self.email, "email", self.EMAIL_MAX_LENGTH)
        validar_texto(self.telefono, "telefono", self.TELEFONO_MAX_LENGTH)
        validar_texto(self.sector, "sector", self.SECTOR_MAX_LENGTH)
        validar_no_negativo(self.facturacion_anual, "facturacion_anual")
        validar_no_negativo(self.numero_empleados, "numero_empleados")

    def activar(self) -> None:
        self.activo = True

    def desactivar(self) -> None:
        """Baja lógica. Desactivar una empresa ya inactiva no tiene efecto."""
        self.activo = False

    def __repr__(self) -> str:
        return f"<EmpresaEntity(id={self.id}, cif='{self.cif}', activo={self.activo})>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmpresaEntity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((EmpresaEntity, self.id))
