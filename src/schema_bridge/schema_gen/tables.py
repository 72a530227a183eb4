"""
Read-only lookup tables mapping descriptor kinds to OpenAPI types, formats and
constraint rule names. Built once at import time and never mutated.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..models.common import FieldType, SchemaKind


@dataclass(frozen=True)
class TypeEntry:
    candidates: Tuple[FieldType, ...] # Subtypes selected by a rule of the same name
    default: FieldType

@dataclass(frozen=True)
class FormatEntry:
    candidates: Tuple[str, ...] # Format-tag rule names, in priority order
    default: Optional[str] = None


TYPE_TABLE: Mapping[str, TypeEntry] = MappingProxyType({
    SchemaKind.MIXED.value: TypeEntry((), FieldType.OBJECT),
    SchemaKind.LAZY.value: TypeEntry((), FieldType.OBJECT),
    SchemaKind.ARRAY.value: TypeEntry((), FieldType.ARRAY),
    SchemaKind.OBJECT.value: TypeEntry((), FieldType.OBJECT),
    SchemaKind.BOOLEAN.value: TypeEntry((), FieldType.BOOLEAN),
    SchemaKind.NUMBER.value: TypeEntry((FieldType.INTEGER,), FieldType.NUMBER),
    SchemaKind.STRING.value: TypeEntry((), FieldType.STRING),
    SchemaKind.DATE.value: TypeEntry((), FieldType.STRING),
})

FORMAT_TABLE: Mapping[str, FormatEntry] = MappingProxyType({
    SchemaKind.MIXED.value: FormatEntry(()),
    SchemaKind.LAZY.value: FormatEntry(()),
    SchemaKind.ARRAY.value: FormatEntry(()),
    SchemaKind.OBJECT.value: FormatEntry(()),
    SchemaKind.BOOLEAN.value: FormatEntry(()),
    SchemaKind.DATE.value: FormatEntry(("date", "date-time"), "date"),
    SchemaKind.NUMBER.value: FormatEntry(("int32", "int64", "float", "double")),
    SchemaKind.STRING.value: FormatEntry((
        "byte",
        "binary",
        "password",
        "email",
        "hostname",
        "image",
        "ipv4",
        "ipv6",
        "phone-number",
        "uri",
        "url",
        "uuid",
        "video",
    )),
})

# Rule names translated into bound/length/pattern fields. Keyed by kind rather than
# resolved type: a date "min" rule carries a date bound and must not become minLength.
CONSTRAINT_TABLE: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    SchemaKind.ARRAY.value: ("min", "max"),
    SchemaKind.NUMBER.value: ("min", "max"),
    SchemaKind.STRING.value: ("min", "max", "matches"),
})
