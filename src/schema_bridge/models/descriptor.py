"""Models for the introspected shape of a validation schema node.

A validation library's ``describe()`` call reports a node's kind, applied rules,
allowed literals, metadata, flags and default. Each kind gets its own variant so
that only object descriptors carry ``fields`` and only array descriptors carry
``inner_type``. Aliases follow the JSON that ``describe()`` emits, so a dumped
descriptor tree can be loaded back with ``describe_node``.
"""
from collections.abc import Callable, Mapping
from typing import Any, Literal

from pydantic import Field, field_validator

from .common import BasePydanticModel, SchemaKind

_DESCRIPTOR_CONFIG = {
    "extra": "ignore", # describe() output carries keys we do not map (notOneOf, ...)
    "populate_by_name": True,
    "use_enum_values": True,
}


class RuleDescription(BasePydanticModel):
    """A named, parameterized validation rule, e.g. ``{"name": "min", "params": {"min": 3}}``."""
    model_config = _DESCRIPTOR_CONFIG

    name: str | None = None
    params: dict[str, Any] | None = None

class SchemaMeta(BasePydanticModel):
    model_config = {**_DESCRIPTOR_CONFIG, "extra": "allow"}

    title: str | None = None
    description: str | None = None

class SchemaDescriptor(BasePydanticModel):
    """Fields shared by every descriptor kind.

    Used directly only for kinds that have no dedicated variant; the converter
    rejects those when it looks the kind up in its type table.
    """
    model_config = _DESCRIPTOR_CONFIG

    kind: str = Field(alias="type")
    rules: list[RuleDescription] = Field(default_factory=list, alias="tests")
    literal_set: list[Any] = Field(default_factory=list, alias="oneOf")
    meta: SchemaMeta | None = None
    label: str | None = None
    nullable: bool = False
    optional: bool = False
    # A literal, a zero-argument factory, or a date/datetime value.
    default: Any = None

    def describe(self) -> "SchemaDescriptor":
        """Descriptors are schema nodes too; describing one yields itself."""
        return self

class MixedDescriptor(SchemaDescriptor):
    kind: Literal["mixed"] = Field(default="mixed", alias="type")

class LazyDescriptor(SchemaDescriptor):
    """A deferred, usually self-referential node. The resolver is never called."""
    kind: Literal["lazy"] = Field(default="lazy", alias="type")
    resolver: Callable[..., Any] | None = Field(default=None, exclude=True)

class BooleanDescriptor(SchemaDescriptor):
    kind: Literal["boolean"] = Field(default="boolean", alias="type")

class NumberDescriptor(SchemaDescriptor):
    kind: Literal["number"] = Field(default="number", alias="type")

class StringDescriptor(SchemaDescriptor):
    kind: Literal["string"] = Field(default="string", alias="type")

class DateDescriptor(SchemaDescriptor):
    kind: Literal["date"] = Field(default="date", alias="type")

class ArrayDescriptor(SchemaDescriptor):
    kind: Literal["array"] = Field(default="array", alias="type")
    inner_type: Any = Field(default=None, alias="innerType")

    @field_validator("inner_type")
    @classmethod
    def _coerce_inner_type(cls, value: Any) -> Any:
        return _coerce_child(value)

class ObjectDescriptor(SchemaDescriptor):
    kind: Literal["object"] = Field(default="object", alias="type")
    fields: dict[str, Any] = Field(default_factory=dict)

    @field_validator("fields")
    @classmethod
    def _coerce_fields(cls, value: dict[str, Any]) -> dict[str, Any]:
        return {name: _coerce_child(child) for name, child in value.items()}


DESCRIPTOR_TYPES: Mapping[str, type[SchemaDescriptor]] = {
    SchemaKind.MIXED.value: MixedDescriptor,
    SchemaKind.LAZY.value: LazyDescriptor,
    SchemaKind.ARRAY.value: ArrayDescriptor,
    SchemaKind.OBJECT.value: ObjectDescriptor,
    SchemaKind.BOOLEAN.value: BooleanDescriptor,
    SchemaKind.NUMBER.value: NumberDescriptor,
    SchemaKind.STRING.value: StringDescriptor,
    SchemaKind.DATE.value: DateDescriptor,
}


def _coerce_child(child: Any) -> Any:
    # Only raw mappings are loaded eagerly; foreign nodes are described when converted.
    if isinstance(child, Mapping):
        return describe_node(child)
    return child


def describe_node(node: Any) -> SchemaDescriptor:
    """Return the descriptor for a schema node.

    Accepts a descriptor (returned as is), a mapping shaped like ``describe()``
    output, or any object exposing a ``describe()`` method.
    """
    if isinstance(node, SchemaDescriptor):
        return node
    if isinstance(node, Mapping):
        kind = node.get("type", node.get("kind"))
        descriptor_cls = DESCRIPTOR_TYPES.get(kind, SchemaDescriptor)
        return descriptor_cls.model_validate(dict(node))
    describe = getattr(node, "describe", None)
    if callable(describe):
        return describe_node(describe())
    raise TypeError(f"Cannot describe schema node of type {type(node).__name__!r}.")
