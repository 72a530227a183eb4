"""
Service responsible for converting validation schema nodes into OpenAPI 3
Schema Objects, so a schema written for runtime validation can also document
an API.
"""
from collections.abc import Mapping
from typing import Any, Dict, Optional

import structlog

from ..config import Config
from ..exceptions import SchemaConversionError
from ..models.common import FieldType, SchemaKind
from ..models.descriptor import (
    ArrayDescriptor,
    LazyDescriptor,
    ObjectDescriptor,
    SchemaDescriptor,
    describe_node,
)
from ..models.openapi import OpenAPISchema
from .attributes import NO_DEFAULT, extract_constraints, resolve_default, resolve_enum
from .resolvers import resolve_format, resolve_type

logger = structlog.get_logger(__name__)


class SchemaConverterService:
    """
    Converts schema nodes (descriptors, describe()-shaped mappings, or objects
    exposing ``describe()``) into OpenAPI Schema Objects.

    Objects and arrays are composed recursively. Lazy nodes are never expanded:
    they become ``{"type": "object"}`` so self-referential schemas terminate.
    """

    def __init__(self, app_config: Config):
        self.app_config = app_config
        self.logger = logger.bind(service="SchemaConverterService")

    def _is_lazy(self, node: Any) -> bool:
        """Identify deferred nodes without describing them."""
        if isinstance(node, LazyDescriptor):
            return True
        if isinstance(node, Mapping):
            return node.get("type", node.get("kind")) == SchemaKind.LAZY.value
        return getattr(node, "type", None) == SchemaKind.LAZY.value

    def _lazy_flag(self, node: Any, name: str) -> bool:
        # Flags are read from a ``spec`` holder or the node itself, never by resolving it.
        source = getattr(node, "spec", node)
        if isinstance(source, Mapping):
            return source.get(name) is True
        return getattr(source, name, None) is True

    def _is_required(self, node: Any) -> bool:
        if self._is_lazy(node) and not isinstance(node, (SchemaDescriptor, Mapping)):
            return not self._lazy_flag(node, "nullable") and not self._lazy_flag(node, "optional")
        descriptor = describe_node(node)
        return not descriptor.nullable and not descriptor.optional

    def _parse_object(self, descriptor: ObjectDescriptor) -> Dict[str, Any]:
        meta = descriptor.meta
        properties = {name: self._parse_node(child) for name, child in descriptor.fields.items()}
        required = [name for name, child in descriptor.fields.items() if self._is_required(child)]

        schema: Dict[str, Any] = {
            "type": FieldType.OBJECT.value,
            "properties": properties,
        }
        if meta and meta.title:
            schema["title"] = meta.title
        if meta and meta.description:
            schema["description"] = meta.description
        if required:
            schema["required"] = required
        return schema

    def _parse_array(self, descriptor: ArrayDescriptor) -> Dict[str, Any]:
        meta = descriptor.meta
        schema: Dict[str, Any] = {"type": FieldType.ARRAY.value}
        if meta and meta.title:
            schema["title"] = meta.title
        if meta and meta.description:
            schema["description"] = meta.description
        if descriptor.inner_type is not None:
            schema["items"] = self._parse_node(descriptor.inner_type)

        for key, value in extract_constraints(descriptor, self.app_config.conversion.pattern_style).items():
            schema.setdefault(key, value)
        return schema

    def _parse_primitive(self, descriptor: SchemaDescriptor, field_type: str) -> Dict[str, Any]:
        conversion = self.app_config.conversion
        meta = descriptor.meta

        schema: Dict[str, Any] = {"type": field_type}
        format_ = resolve_format(descriptor)
        if format_:
            schema["format"] = format_
        enum_values = resolve_enum(descriptor)
        if enum_values:
            schema["enum"] = enum_values
        if descriptor.nullable:
            schema["nullable"] = True
        default = resolve_default(descriptor, explicit_presence=conversion.explicit_default_presence)
        if default is not NO_DEFAULT:
            schema["default"] = default
        title = (meta.title if meta else None) or descriptor.label
        if title:
            schema["title"] = title
        if meta and meta.description:
            schema["description"] = meta.description

        # Constraints add fields; they never replace the ones set above.
        for key, value in extract_constraints(descriptor, conversion.pattern_style).items():
            schema.setdefault(key, value)
        return schema

    def _parse_node(self, node: Any) -> Dict[str, Any]:
        if self._is_lazy(node):
            self.logger.debug("Lazy schema node replaced with object placeholder.")
            return {"type": FieldType.OBJECT.value}

        descriptor = describe_node(node)
        field_type = resolve_type(descriptor)
        if field_type == FieldType.OBJECT.value and isinstance(descriptor, ObjectDescriptor):
            return self._parse_object(descriptor)
        if field_type == FieldType.ARRAY.value and isinstance(descriptor, ArrayDescriptor):
            return self._parse_array(descriptor)
        return self._parse_primitive(descriptor, field_type)

    def convert(self, node: Any) -> OpenAPISchema:
        """
        Converts a schema node into an OpenAPISchema.

        Raises:
            UnsupportedKindError: a node's kind is missing from the type table.
            UnsupportedFormatError: a node's kind is missing from the format table.
        """
        log = self.logger.bind(node_type=type(node).__name__)
        log.debug("Starting conversion of schema node.")
        try:
            schema_dict = self._parse_node(node)
        except SchemaConversionError as e:
            log.error("Schema node conversion failed.", error=str(e), kind=getattr(e, "kind", None))
            raise

        schema = OpenAPISchema.model_validate(schema_dict)
        log.debug("Schema node converted.", schema_type=schema.type)
        return schema

    def convert_to_dict(self, node: Any) -> Dict[str, Any]:
        return self.convert(node).to_dict()

    def to_request_body(self, node: Any, content_type: str = "application/json", required: bool = True) -> Dict[str, Any]:
        """Wrap the converted schema in an OpenAPI 3 Request Body Object."""
        return {
            "required": required,
            "content": {
                content_type: {
                    "schema": self.convert_to_dict(node),
                }
            },
        }


def to_openapi(node: Any, config: Optional[Config] = None) -> Dict[str, Any]:
    """Convert a schema node to an OpenAPI Schema Object dict."""
    return SchemaConverterService(app_config=config or Config()).convert_to_dict(node)
