# src/flatconf/tokenizer.py
"""
Line tokenizers for config and schema sources.

Both tokenizers are lenient: a line that does not have the expected shape
yields ``None`` and is skipped by the caller, it is never an error.
"""
from __future__ import annotations

from typing import Optional, Tuple

KeyValue = Tuple[str, str]

COMMENT_PREFIXES: Tuple[str, ...] = ("#", ";")
ASSIGN = "="
SCHEMA_ARROW = "->"


def _split_pair(text: str, separator: str) -> Optional[KeyValue]:
	"""
	Split *text* on the first *separator* and return the stripped halves.

	:return: ``(key, value)`` or ``None`` when the separator is missing or either half is empty.
	"""
	key, sep, value = text.partition(separator)
	if not sep:
		return None
	key = key.strip()
	value = value.strip()
	if not key or not value:
		return None
	return key, value


def tokenize_line(line: str) -> Optional[KeyValue]:
	"""
	Turn one config line into a ``(key, value)`` pair.

	Blank lines and lines starting with ``#`` or ``;`` (after stripping) are
	ignored. The line is split on the first ``=`` only, so values may contain
	further ``=`` characters.

	:param line: Raw text line (a trailing newline is fine).
	:return: ``(key, value)`` or ``None``.
	"""
	text = line.strip()
	if not text or text.startswith(COMMENT_PREFIXES):
		return None
	return _split_pair(text, ASSIGN)


def tokenize_schema_line(line: str) -> Optional[KeyValue]:
	"""
	Turn one schema line into a ``(fully_qualified_key, type_name)`` pair.

	Schema lines have no comment syntax: ``# a -> string`` declares the key ``# a``.

	:param line: Raw text line.
	:return: ``(key, type_name)`` or ``None``.
	"""
	text = line.strip()
	if not text:
		return None
	return _split_pair(text, SCHEMA_ARROW)


__all__ = ["KeyValue", "COMMENT_PREFIXES", "tokenize_line", "tokenize_schema_line"]
