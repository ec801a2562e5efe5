"""
Componentes de dominio compartidos.

Contiene los componentes comunes a todos los dominios:
- Excepciones de dominio
- Interfaces (Ports)
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
)
from .interfaces import UnitOfWork, Repository

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "UnitOfWork",
    "Repository",
]
