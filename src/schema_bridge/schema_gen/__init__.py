"""
Schema conversion module for Schema Bridge.

Maps validation schema descriptors to OpenAPI 3 Schema Objects: type and
format resolution, constraint extraction, enum/default normalization and
recursive composition of objects and arrays.
"""
from .schema_converter_service import SchemaConverterService, to_openapi

__all__ = [
    "SchemaConverterService",
    "to_openapi",
]
