"""
Constraint, enum and default-value extraction for schema descriptors.

Constraint rules are translated per kind into OpenAPI bound, length and pattern
fields. Rules the tables do not list for a kind are ignored.
"""
import datetime
import re
from typing import Any, Dict, List, Optional

import structlog

from ..models.common import SchemaKind
from ..models.descriptor import SchemaDescriptor
from . import tables
from .rules import index_rules

logger = structlog.get_logger(__name__)

# Returned by resolve_default when no default should be emitted.
NO_DEFAULT = object()

_LITERAL_FLAGS = ((re.IGNORECASE, "i"), (re.MULTILINE, "m"), (re.DOTALL, "s"))


def render_pattern(regex: "re.Pattern[str]", style: str = "source") -> str:
    """Render a compiled pattern as its source text, or as a ``/source/flags`` literal."""
    if style == "literal":
        flags = "".join(letter for flag, letter in _LITERAL_FLAGS if regex.flags & flag)
        return f"/{regex.pattern}/{flags}"
    return regex.pattern


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _number_attributes(rule_name: str, params: Dict[str, Any]) -> Dict[str, Any]:
    # Exclusive params ("more"/"less") are checked before inclusive ones.
    if rule_name == "min" and _is_number(params.get("more")):
        return {"minimum": params["more"], "exclusiveMinimum": True}
    if rule_name == "min" and _is_number(params.get("min")):
        return {"minimum": params["min"]}
    if rule_name == "max" and _is_number(params.get("less")):
        return {"maximum": params["less"], "exclusiveMaximum": True}
    if rule_name == "max" and _is_number(params.get("max")):
        return {"maximum": params["max"]}
    return {}


def _string_attributes(rule_name: str, params: Dict[str, Any], pattern_style: str) -> Dict[str, Any]:
    if rule_name == "min" and _is_count(params.get("min")):
        return {"minLength": params["min"]}
    if rule_name == "max" and _is_count(params.get("max")):
        return {"maxLength": params["max"]}
    regex = params.get("regex")
    if rule_name == "matches" and isinstance(regex, re.Pattern) and isinstance(regex.pattern, str):
        return {"pattern": render_pattern(regex, pattern_style)}
    return {}


def _array_attributes(rule_name: str, params: Dict[str, Any]) -> Dict[str, Any]:
    if rule_name == "min" and _is_count(params.get("min")):
        return {"minItems": params["min"]}
    if rule_name == "max" and _is_count(params.get("max")):
        return {"maxItems": params["max"]}
    return {}


def extract_constraints(descriptor: SchemaDescriptor, pattern_style: str = "source") -> Dict[str, Any]:
    """Translate a descriptor's constraint rules into OpenAPI bound/length/pattern fields."""
    params_by_rule = index_rules(descriptor)
    constraint_rules = [name for name in tables.CONSTRAINT_TABLE.get(descriptor.kind, ()) if name in params_by_rule]

    attributes: Dict[str, Any] = {}
    for rule_name in constraint_rules:
        params = params_by_rule[rule_name] or {}
        if descriptor.kind == SchemaKind.NUMBER.value:
            produced = _number_attributes(rule_name, params)
        elif descriptor.kind == SchemaKind.STRING.value:
            produced = _string_attributes(rule_name, params, pattern_style)
        elif descriptor.kind == SchemaKind.ARRAY.value:
            produced = _array_attributes(rule_name, params)
        else:
            produced = {}

        if not produced:
            logger.debug("Constraint rule produced no attributes.", kind=descriptor.kind, rule=rule_name)
        attributes.update(produced)
    return attributes


def resolve_enum(descriptor: SchemaDescriptor) -> Optional[List[Any]]:
    values = list(descriptor.literal_set)
    return values if values else None


def serialize_date(value: datetime.date) -> str:
    """ISO-8601 text for a date default. Datetimes render in UTC with millisecond precision and a ``Z`` suffix."""
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
        return value.isoformat(timespec="milliseconds") + "Z"
    return value.isoformat()


def resolve_default(descriptor: SchemaDescriptor, explicit_presence: bool = False) -> Any:
    """Normalize a descriptor's default, or return NO_DEFAULT.

    Factories are invoked and date values serialized. Unless ``explicit_presence``
    is set, a falsy default (0, "", False) counts as no default.
    """
    value = descriptor.default
    if value is None:
        return NO_DEFAULT
    if not value and not explicit_presence:
        logger.debug("Falsy default dropped.", kind=descriptor.kind, default=repr(value))
        return NO_DEFAULT

    if callable(value):
        value = value()
        if value is None:
            return NO_DEFAULT
    if isinstance(value, datetime.date):
        return serialize_date(value)
    return value
