"""
Type and format resolution for schema descriptors.
"""
from typing import Optional

from ..exceptions import UnsupportedFormatError, UnsupportedKindError
from ..models.descriptor import SchemaDescriptor
from . import tables
from .rules import find_rules

INTEGER_RULE = "integer"
INTEGER_FORMAT = "int32"


def resolve_type(descriptor: SchemaDescriptor) -> str:
    """Resolve the OpenAPI type for a descriptor.

    A subtype candidate present as a rule (``integer`` on a number) wins over the
    kind's default type.

    Raises:
        UnsupportedKindError: if the kind has no entry in the type table.
    """
    entry = tables.TYPE_TABLE.get(descriptor.kind)
    if entry is None:
        raise UnsupportedKindError(descriptor.kind)

    matches = find_rules(descriptor, [candidate.value for candidate in entry.candidates])
    return matches[0] if matches else entry.default.value


def is_integer(descriptor: SchemaDescriptor) -> bool:
    return len(find_rules(descriptor, (INTEGER_RULE,))) > 0


def resolve_format(descriptor: SchemaDescriptor) -> Optional[str]:
    """Resolve the OpenAPI format for a descriptor.

    Precedence: an ``integer`` rule always yields ``int32``; otherwise the first
    format-tag rule in the table's declared order; otherwise the kind's default.

    Raises:
        UnsupportedFormatError: if the kind has no entry in the format table.
    """
    if is_integer(descriptor):
        return INTEGER_FORMAT

    entry = tables.FORMAT_TABLE.get(descriptor.kind)
    if entry is None:
        raise UnsupportedFormatError(descriptor.kind)

    matches = find_rules(descriptor, entry.candidates)
    return matches[0] if matches else entry.default
