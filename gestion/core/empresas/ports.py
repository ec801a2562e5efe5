"""
Ports (Interfaces) del Dominio de Empresas.

Define el contrato que los Adapters de infraestructura deben implementar
para persistir y consultar empresas.

Principio:
    El Core define las interfaces → los Adapters las implementan.

Example:
    # En el Adapter (Django)
    class DjangoEmpresaRepository(EmpresaRepository):
        def get_by_cif(self, cif: str) -> Optional[EmpresaEntity]:
            ...
"""

from dataclasses import replace
from typing import Dict, List, Optional, Protocol, runtime_checkable

from gestion.core.shared.exceptions import EntityNotFoundError, ValidationError
from gestion.core.shared.interfaces import Repository

from .entities import EmpresaEntity


@runtime_checkable
class EmpresaRepository(Repository[EmpresaEntity], Protocol):
    """
    Interfaz para persistencia de Empresas.

    Implementaciones:
    - DjangoEmpresaRepository (ORM de Django)
    - InMemoryEmpresaRepository (para tests)

    Eliminar una empresa elimina también todas sus sedes.
    """

    def save(self, empresa: EmpresaEntity) -> EmpresaEntity:
        """
        Persiste la empresa (alta si id es None, modificación en otro caso).

        Returns:
            Empresa con el id asignado

        Raises:
            ValidationError: Si el almacenamiento rechaza un CIF duplicado
            EntityNotFoundError: Si la empresa a modificar ya no existe
        """
        ...

    def get_by_id(self, empresa_id: int) -> Optional[EmpresaEntity]:
        """
        Busca una empresa por id.

        Returns:
            Empresa encontrada o None
        """
        ...

    def delete(self, empresa_id: int) -> bool:
        """
        Elimina la empresa y, en cascada, sus sedes.

        Returns:
            True si la empresa existía
        """
        ...

    def exists(self, empresa_id: int) -> bool:
        ...

    def list_all(self) -> List[EmpresaEntity]:
        ...

    def get_by_cif(self, cif: str) -> Optional[EmpresaEntity]:
        ...

    def exists_by_cif(self, cif: str) -> bool:
        ...

    def list_activas(self) -> List[EmpresaEntity]:
        ...

    def count_activas(self) -> int:
        ...

    def list_by_sector(self, sector: str) -> List[EmpresaEntity]:
        """Coincidencia exacta de sector sin distinguir mayúsculas."""
        ...

    def list_by_sector_activas(self, sector: str) -> List[EmpresaEntity]:
        ...

    def search_by_razon_social(self, texto: str) -> List[EmpresaEntity]:
        """Subcadena en cualquier posición de la razón social, sin distinguir mayúsculas."""
        ...

    def list_by_facturacion_mayor_que(self, importe: float) -> List[EmpresaEntity]:
        ...


class InMemoryEmpresaRepository:
    """
    Implementación en memoria de EmpresaRepository.

    Útil para:
    - Tests unitarios
    - Prototipado

    Si recibe un InMemorySedeRepository, delete() elimina también las
    sedes de la empresa, igual que el borrado en cascada de la base
    de datos. El CIF se trata como único igual que en el almacenamiento.

    Example:
        sede_repo = InMemorySedeRepository()
        repo = InMemoryEmpresaRepository(sede_repo)
        empresa = repo.save(EmpresaEntity.crear("Acme SA", "B12345678"))
        encontrada = repo.get_by_cif("B12345678")
    """

    def __init__(self, sede_repo=None):
        self._empresas: Dict[int, EmpresaEntity] = {}
        self._siguiente_id = 1
        self._sede_repo = sede_repo

    def save(self, empresa: EmpresaEntity) -> EmpresaEntity:
        """Guarda la empresa en memoria aplicando la unicidad del CIF."""
        existente = self.get_by_cif(empresa.cif)
        if existente is not None and existente.id != empresa.id:
            raise ValidationError(
                f"Ya existe una empresa con el CIF: {empresa.cif}",
                field="cif",
            )

        if empresa.id is None:
            empresa.id = self._siguiente_id
            self._siguiente_id += 1
        elif empresa.id not in self._empresas:
            raise EntityNotFoundError(
                f"Empresa no encontrada con ID: {empresa.id}",
                entity_type="Empresa",
                entity_id=empresa.id,
            )

        self._empresas[empresa.id] = replace(empresa)
        return replace(empresa)

    def get_by_id(self, empresa_id: int) -> Optional[EmpresaEntity]:
        empresa = self._empresas.get(empresa_id)
        return replace(empresa) if empresa else None

    def delete(self, empresa_id: int) -> bool:
        if self._empresas.pop(empresa_id, None) is None:
            return False
        if self._sede_repo is not None:
            self._sede_repo.delete_by_empresa(empresa_id)
        return True

    def exists(self, empresa_id: int) -> bool:
        return empresa_id in self._empresas

    def list_all(self) -> List[EmpresaEntity]:
        return self._filtrar(lambda e: True)

    def get_by_cif(self, cif: str) -> Optional[EmpresaEntity]:
        encontradas = self._filtrar(lambda e: e.cif == cif)
        return encontradas[0] if encontradas else None

    def exists_by_cif(self, cif: str) -> bool:
        return self.get_by_cif(cif) is not None

    def list_activas(self) -> List[EmpresaEntity]:
        return self._filtrar(lambda e: e.activo)

    def count_activas(self) -> int:
        return len(self.list_activas())

    def list_by_sector(self, sector: str) -> List[EmpresaEntity]:
        return self._filtrar(lambda e: _igual(e.sector, sector))

    def list_by_sector_activas(self, sector: str) -> List[EmpresaEntity]:
        return self._filtrar(lambda e: e.activo and _igual(e.sector, sector))

    def search_by_razon_social(self, texto: str) -> List[EmpresaEntity]:
        return self._filtrar(lambda e: texto.lower() in (e.razon_social or "").lower())

    def list_by_facturacion_mayor_que(self, importe: float) -> List[EmpresaEntity]:
        return self._filtrar(
            lambda e: e.facturacion_anual is not None and e.facturacion_anual > importe
        )

    def clear(self) -> None:
        """Limpia todos los datos (útil para tests)."""
        self._empresas.clear()

    def _filtrar(self, predicado) -> List[EmpresaEntity]:
        return [
            replace(e) for e in sorted(self._empresas.values(), key=lambda e: e.id)
            if predicado(e)
        ]


def _igual(valor: Optional[str], buscado: str) -> bool:
    return valor is not None and valor.lower() == buscado.lower()
