"""
Unit tests for constraint, enum and default extraction.
"""
import datetime
import re

import pytest

from schema_bridge.models.descriptor import (
    ArrayDescriptor,
    BooleanDescriptor,
    DateDescriptor,
    NumberDescriptor,
    StringDescriptor,
)
from schema_bridge.schema_gen.attributes import (
    NO_DEFAULT,
    extract_constraints,
    render_pattern,
    resolve_default,
    resolve_enum,
    serialize_date,
)


def rule(name, **params):
    return {"name": name, "params": params}


# --- Constraints ---

@pytest.mark.parametrize("rules, expected", [
    ([rule("min", more=5)], {"minimum": 5, "exclusiveMinimum": True}),
    ([rule("min", min=5)], {"minimum": 5}),
    ([rule("max", less=10)], {"maximum": 10, "exclusiveMaximum": True}),
    ([rule("max", max=10)], {"maximum": 10}),
    # Exclusive params are checked first.
    ([rule("min", more=1, min=2)], {"minimum": 1, "exclusiveMinimum": True}),
    ([rule("min", min=0), rule("max", less=1.5)], {"minimum": 0, "maximum": 1.5, "exclusiveMaximum": True}),
    ([rule("positive", more=0)], {}),
])
def test_number_constraints(rules, expected) -> None:
    assert extract_constraints(NumberDescriptor(rules=rules)) == expected


def test_string_constraints() -> None:
    descriptor = StringDescriptor(rules=[
        rule("min", min=3),
        rule("max", max=10),
        rule("matches", regex=re.compile(r"^[a-z]+$")),
        rule("trim"),
    ])
    assert extract_constraints(descriptor) == {"minLength": 3, "maxLength": 10, "pattern": "^[a-z]+$"}


def test_string_matches_requires_compiled_pattern() -> None:
    descriptor = StringDescriptor(rules=[rule("matches", regex="^[a-z]+$")])
    assert extract_constraints(descriptor) == {}


def test_array_constraints() -> None:
    descriptor = ArrayDescriptor(rules=[rule("min", min=1), rule("max", max=4)])
    assert extract_constraints(descriptor) == {"minItems": 1, "maxItems": 4}


def test_constraints_ignored_for_unmapped_kinds() -> None:
    bound = datetime.date(2024, 1, 1)
    assert extract_constraints(DateDescriptor(rules=[rule("min", min=bound)])) == {}
    assert extract_constraints(BooleanDescriptor(rules=[rule("max", max=1)])) == {}


@pytest.mark.parametrize("descriptor", [
    NumberDescriptor(rules=[rule("min", min="abc")]),
    NumberDescriptor(rules=[rule("max", less={"ref": "limit"})]),
    NumberDescriptor(rules=[rule("min", min=True)]),
    StringDescriptor(rules=[rule("min", min="3"), rule("max", max=2.5)]),
    ArrayDescriptor(rules=[rule("min", min=None), rule("max", max="many")]),
])
def test_constraints_ignore_non_numeric_params(descriptor) -> None:
    assert extract_constraints(descriptor) == {}


@pytest.mark.parametrize("regex, style, expected", [
    (re.compile(r"\d+"), "source", r"\d+"),
    (re.compile(r"\d+"), "literal", r"/\d+/"),
    (re.compile(r"^ab$", re.IGNORECASE | re.MULTILINE), "literal", "/^ab$/im"),
])
def test_render_pattern(regex, style, expected) -> None:
    assert render_pattern(regex, style) == expected


# --- Enum ---

def test_resolve_enum() -> None:
    assert resolve_enum(StringDescriptor(literal_set=["a", "b"])) == ["a", "b"]
    assert resolve_enum(StringDescriptor()) is None


# --- Defaults ---

def test_resolve_default_literal() -> None:
    assert resolve_default(StringDescriptor(default="guest")) == "guest"
    assert resolve_default(StringDescriptor()) is NO_DEFAULT


def test_resolve_default_factory() -> None:
    assert resolve_default(ArrayDescriptor(default=lambda: ["x"])) == ["x"]
    assert resolve_default(StringDescriptor(default=lambda: None)) is NO_DEFAULT


def test_resolve_default_factory_returning_datetime() -> None:
    descriptor = DateDescriptor(default=lambda: datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc))
    assert resolve_default(descriptor) == "2024-01-02T03:04:05.000Z"


def test_resolve_default_date_value() -> None:
    assert resolve_default(DateDescriptor(default=datetime.date(2024, 1, 2))) == "2024-01-02"


@pytest.mark.parametrize("value", [0, "", False])
def test_resolve_default_drops_falsy_values(value) -> None:
    assert resolve_default(NumberDescriptor(default=value)) is NO_DEFAULT


@pytest.mark.parametrize("value", [0, "", False])
def test_resolve_default_explicit_presence_keeps_falsy_values(value) -> None:
    assert resolve_default(NumberDescriptor(default=value), explicit_presence=True) == value


@pytest.mark.parametrize("value, expected", [
    (datetime.datetime(2024, 6, 1, 12, 0), "2024-06-01T12:00:00.000Z"),
    (datetime.datetime(2024, 6, 1, 14, 30, 0, 250000, tzinfo=datetime.timezone(datetime.timedelta(hours=2))),
     "2024-06-01T12:30:00.250Z"),
    (datetime.date(2024, 6, 1), "2024-06-01"),
])
def test_serialize_date(value, expected) -> None:
    assert serialize_date(value) == expected
