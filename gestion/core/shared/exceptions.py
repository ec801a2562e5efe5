"""
Excepciones de Dominio de Gestión de Empresas.

Este módulo define las excepciones propias del dominio que permiten
comunicar errores de forma clara y tipada entre las capas.

Jerarquía:
    DomainException (base)
    ├── ValidationError (datos de entrada o regla de unicidad)
    └── EntityNotFoundError (la entidad no existe)

La capa HTTP decide el código de estado según el tipo de excepción:
ValidationError → 400, EntityNotFoundError → 404.
"""


class DomainException(Exception):
    """
    Excepción base para todos los errores de dominio.

    Todas las excepciones específicas del dominio heredan de esta clase,
    lo que permite capturar cualquier error de dominio de forma genérica.

    Example:
        try:
            service.execute(empresa_id)
        except DomainException as e:
            logger.error(f"Error de dominio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa la excepción a diccionario (cuerpo de respuesta de la API)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Error de validación.

    Se lanza cuando los datos recibidos no cumplen las restricciones
    declaradas o violan una regla de unicidad (CIF duplicado,
    segunda sede principal).

    Example:
        if self.empresa_repo.exists_by_cif(dto.cif):
            raise ValidationError("Ya existe una empresa con el CIF: X", field="cif")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidad no encontrada en el repositorio.

    Se lanza cuando una operación de escritura referencia un
    identificador inexistente.
    """

    def __init__(self, message: str, entity_type: str = None, entity_id=None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        return result
