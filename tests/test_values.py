"""Tests for the value variants and their typed accessors."""

from __future__ import annotations

import pytest

from flatconf.errors import ConfigError, TypeMismatchError
from flatconf.tree import ConfigTree
from flatconf.values import Bool, Number, Str, Table


def test_accessors_return_matching_payload():
	tree = ConfigTree()
	assert Str("x").as_string() == "x"
	assert Bool(False).as_bool() is False
	assert Number(2.5).as_number() == 2.5
	assert Table(tree).as_table() is tree


@pytest.mark.parametrize(
	("value", "accessor"),
	[
		(Str("true"), "as_bool"),
		(Str("1"), "as_number"),
		(Str("x"), "as_table"),
		(Bool(True), "as_string"),
		(Number(1.0), "as_bool"),
		(Table(ConfigTree()), "as_string"),
	],
)
def test_mismatched_accessor_raises(value, accessor):
	with pytest.raises(TypeMismatchError):
		getattr(value, accessor)()


def test_type_mismatch_does_not_echo_value():
	with pytest.raises(TypeMismatchError) as info:
		Str("s3cr3t").as_number()
	assert str(info.value) == "Type mismatch error"
	assert "s3cr3t" not in repr(info.value)
	assert isinstance(info.value, ConfigError)
	assert isinstance(info.value, TypeError)


def test_variants_compare_by_value_and_kind():
	assert Str("a") == Str("a")
	assert Bool(True) != Str("true")
	assert Number(1) == Number(1.0)
	assert isinstance(Number(3).value, float)


def test_to_python_converts_tables_recursively():
	inner = ConfigTree()
	inner["file"] = Str("/tmp/x.log")
	inner["verbose"] = Bool(True)
	assert Table(inner).to_python() == {"file": "/tmp/x.log", "verbose": True}


def test_scalars_are_hashable_tables_are_not():
	assert len({Str("a"), Str("a"), Bool(True), Number(1.0)}) == 3
	with pytest.raises(TypeError):
		hash(Table(ConfigTree()))
