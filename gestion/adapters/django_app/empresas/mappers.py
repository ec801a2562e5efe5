"""
Mappers para la conversión entre Entities (Core) y Models (Django).

Responsabilidades:
- Convertir EmpresaModel / SedeModel → Entity (para uso en el Core)
- Obtener los valores de columna de una Entity (para persistencia)

Principios:
- Los mappers no tienen estado
- No contienen lógica de negocio
- Solo tratan conversión de datos

Nota: SedeModel → SedeEntity solo copia empresa_id; nunca carga
la empresa relacionada.
"""

from typing import Dict, Iterable, List

from gestion.core.empresas.entities import EmpresaEntity
from gestion.core.sedes.entities import SedeEntity

from .models import EmpresaModel, SedeModel


class EmpresaModelMapper:
    """
    Mapper entre EmpresaEntity y EmpresaModel.
    """

    @staticmethod
    def to_fields(entity: EmpresaEntity) -> Dict[str, object]:
        """
        Valores de columna de la empresa, sin id.

        Args:
            entity: Entidad de dominio

        Returns:
            Diccionario listo para objects.create() / update_or_create()
        """
        return {
            'razon_social': entity.razon_social,
            'cif': entity.cif,
            'email': entity.email,
            'telefono': entity.telefono,
            'sector': entity.sector,
            'fecha_alta': entity.fecha_alta,
            'activo': entity.activo,
            'facturacion_anual': entity.facturacion_anual,
            'numero_empleados': entity.numero_empleados,
        }

    @staticmethod
    def to_entity(model: EmpresaModel) -> EmpresaEntity:
        """
        Convierte EmpresaModel en EmpresaEntity.

        Note:
            No pasa por el factory method .crear(): los datos ya se
            validaron al guardarlos.
        """
        return EmpresaEntity(
            id=model.id,
            razon_social=model.razon_social,
            cif=model.cif,
            email=model.email,
            telefono=model.telefono,
            sector=model.sector,
            fecha_alta=model.fecha_alta,
            activo=model.activo,
            facturacion_anual=model.facturacion_anual,
            numero_empleados=model.numero_empleados,
        )

    @staticmethod
    def to_entity_list(models: Iterable[EmpresaModel]) -> List[EmpresaEntity]:
        return [EmpresaModelMapper.to_entity(m) for m in models]


class SedeModelMapper:
    """
    Mapper entre SedeEntity y SedeModel.
    """

    @staticmethod
    def to_fields(entity: SedeEntity) -> Dict[str, object]:
        return {
            'nombre': entity.nombre,
            'direccion': entity.direccion,
            'ciudad': entity.ciudad,
            'provincia': entity.provincia,
            'codigo_postal': entity.codigo_postal,
            'pais': entity.pais,
            'telefono': entity.telefono,
            'email': entity.email,
            'es_principal': entity.es_principal,
            'capacidad_almacenamiento': entity.capacidad_almacenamiento,
            'horario_recepcion': entity.horario_recepcion,
            'empresa_id': entity.empresa_id,
        }

    @staticmethod
    def to_entity(model: SedeModel) -> SedeEntity:
        return SedeEntity(
            id=model.id,
            nombre=model.nombre,
            direccion=model.direccion,
            ciudad=model.ciudad,
            provincia=model.provincia,
            codigo_postal=model.codigo_postal,
            pais=model.pais,
            telefono=model.telefono,
            email=model.email,
            es_principal=model.es_principal,
            capacidad_almacenamiento=model.capacidad_almacenamiento,
            horario_recepcion=model.horario_recepcion,
            empresa_id=model.empresa_id,
        )

    @staticmethod
    def to_entity_list(models: Iterable[SedeModel]) -> List[SedeEntity]:
        return [SedeModelMapper.to_entity(m) for m in models]
