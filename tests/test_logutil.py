"""Tests for :mod:`flatconf.logutil`."""

from __future__ import annotations

import logging

import pytest

from flatconf import parse_lines
from flatconf.logutil import ROOT_LOGGER, configure_logging, get_logger


@pytest.fixture()
def clean_logger():
	log = logging.getLogger(ROOT_LOGGER)
	saved = (list(log.handlers), log.level, log.propagate)
	log.handlers.clear()
	try:
		yield log
	finally:
		for handler in log.handlers:
			if handler not in saved[0]:
				handler.close()
		log.handlers[:] = saved[0]
		log.setLevel(saved[1])
		log.propagate = saved[2]


def test_get_logger_adds_console_handler_once(clean_logger):
	get_logger()
	get_logger()
	assert len(clean_logger.handlers) == 1


def test_configure_logging_writes_parse_messages_to_file(clean_logger, tmp_path):
	log_file = tmp_path / "logs" / "flatconf.log"
	configure_logging(console_level="WARNING", file_path=log_file, file_level="DEBUG")
	configure_logging(console_level="WARNING", file_path=log_file, file_level="DEBUG")
	assert sum(isinstance(h, logging.FileHandler) for h in clean_logger.handlers) == 1

	parse_lines(["a = 1", "a.b = 2"])
	for handler in clean_logger.handlers:
		handler.flush()
	text = log_file.read_text(encoding="utf-8")
	assert "flatconf.tree" in text
	assert "discards scalar at 'a'" in text


def test_configure_logging_rejects_unknown_level(clean_logger):
	with pytest.raises(ValueError):
		configure_logging(console_level="LOUD")  # type: ignore[arg-type]


def test_get_logger_children_share_root_handler(clean_logger):
	child = get_logger("flatconf.parser")
	assert child.name == "flatconf.parser"
	assert not child.handlers
	assert len(clean_logger.handlers) == 1


def test_get_logger_rejects_foreign_names(clean_logger):
	with pytest.raises(ValueError):
		get_logger("flatconfig")
