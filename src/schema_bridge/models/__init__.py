"""
Pydantic models for Schema Bridge.
"""
from .common import BasePydanticModel, FieldType, SchemaKind
from .descriptor import (
    DESCRIPTOR_TYPES,
    ArrayDescriptor,
    BooleanDescriptor,
    DateDescriptor,
    LazyDescriptor,
    MixedDescriptor,
    NumberDescriptor,
    ObjectDescriptor,
    RuleDescription,
    SchemaDescriptor,
    SchemaMeta,
    StringDescriptor,
    describe_node,
)
from .openapi import OpenAPISchema

__all__ = [
    "ArrayDescriptor",
    "BasePydanticModel",
    "BooleanDescriptor",
    "DESCRIPTOR_TYPES",
    "DateDescriptor",
    "FieldType",
    "LazyDescriptor",
    "MixedDescriptor",
    "NumberDescriptor",
    "ObjectDescriptor",
    "OpenAPISchema",
    "RuleDescription",
    "SchemaDescriptor",
    "SchemaKind",
    "SchemaMeta",
    "StringDescriptor",
    "describe_node",
]
