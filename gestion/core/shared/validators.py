"""
Validaciones de campos compartidas por las entidades de dominio.

Cada función lanza ValidationError indicando el campo afectado,
de forma que la capa HTTP pueda informar qué dato es incorrecto.
"""

import re
from typing import Dict, FrozenSet, Iterable, Optional

from .exceptions import ValidationError


EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def limpiar_texto(valor: Optional[str]) -> Optional[str]:
    """Elimina espacios sobrantes; una cadena vacía se normaliza a None."""
    if valor is None:
        return None
    valor = str(valor).strip()
    return valor or None


def validar_texto(
    valor: Optional[str],
    campo: str,
    max_length: int,
    obligatorio: bool = False,
) -> None:
    """
    Valida un campo de texto.

    Args:
        valor: Texto ya normalizado con limpiar_texto
        campo: Nombre del campo (para el mensaje de error)
        max_length: Longitud máxima permitida
        obligatorio: Si True, el valor no puede estar vacío

    Raises:
        ValidationError: Si el texto es obligatorio y falta, o es demasiado largo
    """
    if not valor:
        if obligatorio:
            raise ValidationError(f"El campo {campo} es obligatorio", field=campo)
        return

    if len(valor) > max_length:
        raise ValidationError(
            f"El campo {campo} no puede superar {max_length} caracteres",
            field=campo,
        )


def validar_email(valor: Optional[str], campo: str = "email", max_length: int = 100) -> None:
    validar_texto(valor, campo, max_length)
    if valor and not EMAIL_REGEX.match(valor):
        raise ValidationError("El email debe ser válido", field=campo)


def validar_no_negativo(valor, campo: str) -> None:
    """Valida que un número opcional sea mayor o igual que cero."""
    if valor is None:
        return
    if valor < 0:
        raise ValidationError(
            f"El campo {campo} debe ser mayor o igual que 0",
            field=campo,
        )


def validar_filtros(
    filtros: Dict[str, object],
    combinables: Iterable[FrozenSet[str]] = (),
) -> None:
    """
    Rechaza filtros de listado que no se pueden aplicar juntos.

    Un filtro está activo si su valor no es None ni False. Se admite
    un único filtro activo o uno de los conjuntos de `combinables`.
    """
    activos = frozenset(n for n, v in filtros.items() if v is not None and v is not False)
    if len(activos) > 1 and activos not in set(combinables):
        raise ValidationError(
            f"No se pueden combinar los filtros: {', '.join(sorted(activos))}"
        )
