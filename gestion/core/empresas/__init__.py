"""
Dominio de Empresas.

Contiene la lógica de negocio de las empresas:
- Entidad (EmpresaEntity)
- DTO de transferencia (EmpresaDTO)
- Mapper Entity ⇄ DTO
- Ports (EmpresaRepository)
- Use Cases (alta, modificación, borrado, activar/desactivar, consultas)

Reglas del Dominio:
- El CIF es único
- La baja lógica se modela con activo=False
- Borrar una empresa borra sus sedes
"""

from .entities import EmpresaEntity
from .dtos import EmpresaDTO
from .mappers import EmpresaMapper
from .ports import EmpresaRepository, InMemoryEmpresaRepository

__all__ = [
    "EmpresaEntity",
    "EmpresaDTO",
    "EmpresaMapper",
    "EmpresaRepository",
    "InMemoryEmpresaRepository",
]
