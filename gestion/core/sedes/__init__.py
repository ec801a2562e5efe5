"""
Dominio de Sedes - Emplazamientos físicos de las empresas.

Reglas del Dominio:
- Toda sede pertenece a una empresa existente
- Como máximo una sede principal por empresa
- País por defecto: España
"""

from .entities import SedeEntity, PAIS_POR_DEFECTO
from .dtos import SedeDTO
from .mappers import SedeMapper
from .ports import SedeRepository, InMemorySedeRepository

__all__ = [
    "SedeEntity",
    "PAIS_POR_DEFECTO",
    "SedeDTO",
    "SedeMapper",
    "SedeRepository",
    "InMemorySedeRepository",
]
