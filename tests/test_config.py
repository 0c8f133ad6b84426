"""Tests for the :class:`flatconf.FlatConfig` facade."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from flatconf import FlatConfig
from flatconf.errors import InvalidBooleanError, ShapeConflictError, TypeMismatchError

FILES = Path(__file__).resolve().parent / "files"


def test_load_and_typed_getters():
	cfg = FlatConfig().load(FILES / "case-1.conf", FILES / "data.schema")
	assert cfg.get_bool("debug") is True
	assert cfg.get_string("log.file") == "/var/log/console.log"
	assert cfg.get_table("log").to_dict() == {"file": "/var/log/console.log"}
	assert cfg.get("log") == {"file": "/var/log/console.log"}
	assert cfg.get("missing.key", "dflt") == "dflt"
	assert "log.file" in cfg
	assert "log.other" not in cfg
	assert cfg.source == FILES / "case-1.conf"


def test_typed_getter_errors():
	cfg = FlatConfig().load_lines(["port = 80", "x.y = 1"], ["port -> number"])
	assert cfg.get_number("port") == 80.0
	with pytest.raises(TypeMismatchError):
		cfg.get_string("port")
	with pytest.raises(TypeMismatchError):
		cfg.get_table("x.y")
	with pytest.raises(KeyError):
		cfg.get_bool("nope")


def test_failed_load_keeps_previous_tree():
	cfg = FlatConfig().load_lines(["debug = false"], ["debug -> bool"])
	with pytest.raises(InvalidBooleanError):
		cfg.load_lines(["debug = maybe"], ["debug -> bool"])
	assert cfg.get_bool("debug") is False


def test_strict_option_is_forwarded():
	cfg = FlatConfig(strict=True)
	with pytest.raises(ShapeConflictError):
		cfg.load_lines(["a = 1", "a.b = 2"])


def test_repr_and_str():
	cfg = FlatConfig()
	assert str(cfg) == "FlatConfig with no entries"
	cfg.load_lines(["endpoint = localhost", "log.file = f"])
	assert repr(cfg) == "FlatConfig(source=None, keys=['endpoint', 'log'])"
	assert "log.file = " in str(cfg)


def test_context_manager_logs_and_propagates(caplog):
	caplog.set_level(logging.ERROR, logger="flatconf.config")
	with pytest.raises(RuntimeError):
		with FlatConfig() as cfg:
			cfg.load_lines(["a = 1"])
			raise RuntimeError("boom")
	assert "Exception inside FlatConfig context" in caplog.text


def test_load_text():
	cfg = FlatConfig().load_text("a.b = 1\r\nc = true\n", "c -> bool\n")
	assert cfg.to_dict() == {"a": {"b": "1"}, "c": True}
