from enum import Enum

from pydantic import BaseModel


class BasePydanticModel(BaseModel):
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "use_enum_values": True,
    }

class SchemaKind(str, Enum):
    """Structural category reported by a validation schema's describe() call."""
    MIXED = "mixed"
    LAZY = "lazy"
    ARRAY = "array"
    OBJECT = "object"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    DATE = "date"

class FieldType(str, Enum):
    """OpenAPI 3 primitive types a converted schema can carry."""
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    OBJECT = "object"
    NULL = "null"
    ARRAY = "array"
