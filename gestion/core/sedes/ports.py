"""
Ports (Interfaces) del Dominio de Sedes.

Define el contrato que los Adapters de infraestructura deben implementar
para persistir y consultar sedes.

Convenciones:
- Las búsquedas de texto no distinguen mayúsculas/minúsculas
- Las consultas sin resultados devuelven listas vacías, nunca errores
- get_by_id / get_principal_by_empresa devuelven None si no hay resultado
"""

from dataclasses import replace
from typing import Dict, List, Optional, Protocol, runtime_checkable

from gestion.core.shared.exceptions import EntityNotFoundError, ValidationError
from gestion.core.shared.interfaces import Repository

from .entities import SedeEntity


@runtime_checkable
class SedeRepository(Repository[SedeEntity], Protocol):
    """
    Interfaz para persistencia de Sedes.

    Implementaciones:
    - DjangoSedeRepository (ORM de Django)
    - InMemorySedeRepository (para tests)
    """

    def save(self, sede: SedeEntity) -> SedeEntity:
        """
        Persiste la sede (alta si id es None, modificación en otro caso).

        Returns:
            Sede con el id asignado

        Raises:
            ValidationError: Si el almacenamiento rechaza una segunda
                sede principal para la misma empresa
            EntityNotFoundError: Si la sede a modificar ya no existe
        """
        ...

    def get_by_id(self, sede_id: int) -> Optional[SedeEntity]:
        ...

    def delete(self, sede_id: int) -> bool:
        ...

    def exists(self, sede_id: int) -> bool:
        ...

    def list_all(self) -> List[SedeEntity]:
        ...

    def list_by_empresa(self, empresa_id: int) -> List[SedeEntity]:
        """Sedes de una empresa (dirección inversa de la relación)."""
        ...

    def list_by_ciudad(self, ciudad: str) -> List[SedeEntity]:
        """Coincidencia exacta sin distinguir mayúsculas."""
        ...

    def list_by_provincia(self, provincia: str) -> List[SedeEntity]:
        """Coincidencia exacta sin distinguir mayúsculas."""
        ...

    def list_by_empresa_y_ciudad(self, empresa_id: int, ciudad: str) -> List[SedeEntity]:
        ...

    def get_principal_by_empresa(self, empresa_id: int) -> Optional[SedeEntity]:
        ...

    def exists_principal_for_empresa(self, empresa_id: int) -> bool:
        ...

    def count_by_empresa(self, empresa_id: int) -> int:
        ...

    def list_by_capacidad_minima(self, capacidad: float) -> List[SedeEntity]:
        """Sedes con capacidad de almacenamiento mayor o igual que la indicada."""
        ...

    def search_by_nombre(self, texto: str) -> List[SedeEntity]:
        """Subcadena en cualquier posición del nombre, sin distinguir mayúsculas."""
        ...


class InMemorySedeRepository:
    """
    Implementación en memoria de SedeRepository.

    Útil para:
    - Tests unitarios
    - Prototipado

    Guarda copias de las entidades: un cambio sobre una entidad devuelta
    no se persiste hasta llamar a save(). Los ids son incrementales y no
    se reutilizan.

    No usar en producción.
    """

    def __init__(self):
        self._sedes: Dict[int, SedeEntity] = {}
        self._siguiente_id = 1

    def save(self, sede: SedeEntity) -> SedeEntity:
        """Guarda la sede en memoria aplicando la restricción de sede principal."""
        if sede.es_principal:
            actual = self.get_principal_by_empresa(sede.empresa_id)
            if actual is not None and actual.id != sede.id:
                raise ValidationError(
                    "Ya existe una sede principal para esta empresa",
                    field="es_principal",
                )

        if sede.id is None:
            sede.id = self._siguiente_id
            self._siguiente_id += 1
        elif sede.id not in self._sedes:
            raise EntityNotFoundError(
                f"Sede no encontrada con ID: {sede.id}",
                entity_type="Sede",
                entity_id=sede.id,
            )

        self._sedes[sede.id] = replace(sede)
        return replace(sede)

    def get_by_id(self, sede_id: int) -> Optional[SedeEntity]:
        sede = self._sedes.get(sede_id)
        return replace(sede) if sede else None

    def delete(self, sede_id: int) -> bool:
        return self._sedes.pop(sede_id, None) is not None

    def delete_by_empresa(self, empresa_id: int) -> int:
        """Elimina todas las sedes de una empresa (borrado en cascada)."""
        ids = [s.id for s in self._sedes.values() if s.empresa_id == empresa_id]
        for sede_id in ids:
            del self._sedes[sede_id]
        return len(ids)

    def exists(self, sede_id: int) -> bool:
        return sede_id in self._sedes

    def list_all(self) -> List[SedeEntity]:
        return self._filtrar(lambda s: True)

    def list_by_empresa(self, empresa_id: int) -> List[SedeEntity]:
        return self._filtrar(lambda s: s.empresa_id == empresa_id)

    def list_by_ciudad(self, ciudad: str) -> List[SedeEntity]:
        return self._filtrar(lambda s: _igual(s.ciudad, ciudad))

    def list_by_provincia(self, provincia: str) -> List[SedeEntity]:
        return self._filtrar(lambda s: _igual(s.provincia, provincia))

    def list_by_empresa_y_ciudad(self, empresa_id: int, ciudad: str) -> List[SedeEntity]:
        return self._filtrar(
            lambda s: s.empresa_id == empresa_id and _igual(s.ciudad, ciudad)
        )

    def get_principal_by_empresa(self, empresa_id: int) -> Optional[SedeEntity]:
        principales = self._filtrar(lambda s: s.empresa_id == empresa_id and s.es_principal)
        return principales[0] if principales else None

    def exists_principal_for_empresa(self, empresa_id: int) -> bool:
        return self.get_principal_by_empresa(empresa_id) is not None

    def count_by_empresa(self, empresa_id: int) -> int:
        return len(self.list_by_empresa(empresa_id))

    def list_by_capacidad_minima(self, capacidad: float) -> List[SedeEntity]:
        return self._filtrar(
            lambda s: s.capacidad_almacenamiento is not None
            and s.capacidad_almacenamiento >= capacidad
        )

    def search_by_nombre(self, texto: str) -> List[SedeEntity]:
        return self._filtrar(lambda s: texto.lower() in (s.nombre or "").lower())

    def clear(self) -> None:
        """Limpia todos los datos (útil para tests)."""
        self._sedes.clear()

    def _filtrar(self, predicado) -> List[SedeEntity]:
        return [
            replace(s) for s in sorted(self._sedes.values(), key=lambda s: s.id)
            if predicado(s)
        ]


def _igual(valor: Optional[str], buscado: str) -> bool:
    return valor is not None and valor.lower() == buscado.lower()
