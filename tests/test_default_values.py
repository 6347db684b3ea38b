"""Tests for default value literals"""

import pytest

from webidlgen.types import IDLType, Generic, DefaultValue
from webidlgen.default_values import DefaultValueMapper, ABSENT


def named(name, nullable=False):
    return IDLType(base_name=name, nullable=nullable)


@pytest.mark.parametrize("idl, literal", [
    ("boolean", "false"),
    ("DOMString", '""'),
    ("ByteString", '""'),
    ("long", "0"),
    ("unsigned long long", "0"),
    ("double", "0.0"),
    ("unrestricted float", "0.0"),
    ("Event", ABSENT),
    ("any", ABSENT),
])
def test_zero_values(idl, literal):
    assert DefaultValueMapper.to_literal(named(idl)) == literal


def test_nullable_uses_zero_value_of_inner_type():
    assert DefaultValueMapper.to_literal(named("boolean", nullable=True)) == "false"


def test_complex_types_are_absent():
    union = IDLType(union=True, members=[named("DOMString"), named("long")])
    seq = IDLType(generic=Generic.SEQUENCE, element_type=named("long"))
    assert DefaultValueMapper.to_literal(union) == ABSENT
    assert DefaultValueMapper.to_literal(seq) == ABSENT
    assert DefaultValueMapper.to_literal(None) == ABSENT


def test_explicit_defaults():
    long = named("long")
    assert DefaultValueMapper.to_literal(long, DefaultValue("number", 5)) == "5"
    assert DefaultValueMapper.to_literal(long, DefaultValue("number", "-1.5")) == "-1.5"
    assert DefaultValueMapper.to_literal(named("boolean"), DefaultValue("boolean", True)) == "true"
    assert DefaultValueMapper.to_literal(named("boolean"), DefaultValue("boolean", False)) == "false"
    assert DefaultValueMapper.to_literal(named("DOMString"), DefaultValue("string", "auto")) == '"auto"'
    assert DefaultValueMapper.to_literal(named("Node", True), DefaultValue("null")) == ABSENT


def test_explicit_default_wins_over_type():
    assert DefaultValueMapper.to_literal(named("long"), DefaultValue("boolean", True)) == "true"


@pytest.mark.parametrize("kind", ["sequence", "dictionary", "Infinity", "NaN", "bogus"])
def test_other_defaults_are_absent(kind):
    assert DefaultValueMapper.to_literal(named("double"), DefaultValue(kind)) == ABSENT
