# src/flatconf/errors.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


def _where(source: Optional[str], line_no: Optional[int]) -> str:
	if source and line_no is not None:
		return f" ({source}:{line_no})"
	if line_no is not None:
		return f" (line {line_no})"
	if source:
		return f" ({source})"
	return ""


class ConfigError(Exception):
	"""Base class for every error raised by flatconf."""


class ConfigIOError(ConfigError):
	"""
	A config or schema source could not be opened or read.

	:param path: Path that failed.
	:param detail: Underlying reason (usually the OS error text).
	"""
	def __init__(self, path: PathLike, detail: str) -> None:
		self.path = Path(path)
		self.detail = detail
		super().__init__(f"Failed reading '{self.path}': {detail}")


class SchemaError(ConfigError):
	"""Problem in a schema source."""


class UnknownSchemaTypeError(SchemaError):
	"""A schema line names a type outside ``string``/``bool``/``number``."""
	def __init__(
			self,
			type_name: str,
			*,
			key: Optional[str] = None,
			line_no: Optional[int] = None,
			source: Optional[str] = None
	) -> None:
		self.type_name = type_name
		self.key = key
		self.line_no = line_no
		self.source = source
		target = f" for key '{key}'" if key else ""
		super().__init__(f"Invalid type: {type_name!r}{target}{_where(source, line_no)}")


class CoercionError(ConfigError, ValueError):
	"""
	A schema-declared value does not match its declared type.

	:param raw: The raw text that failed to coerce.
	:param key: Fully-qualified key, when known.
	:param line_no: 1-based config line number, when known.
	:param source: Name of the config source, when known.
	"""
	expected = "value"

	def __init__(
			self,
			raw: str,
			*,
			key: Optional[str] = None,
			line_no: Optional[int] = None,
			source: Optional[str] = None
	) -> None:
		self.raw = raw
		self.key = key
		self.line_no = line_no
		self.source = source
		target = f" for key '{key}'" if key else ""
		super().__init__(f"Invalid {self.expected} {raw!r}{target}{_where(source, line_no)}")


class InvalidBooleanError(CoercionError):
	expected = "boolean value"


class InvalidNumberError(CoercionError):
	expected = "number value"


class ShapeConflictError(ConfigError):
	"""Raised by strict insertion when a key would change between scalar and table."""
	def __init__(self, key: str, detail: str) -> None:
		self.key = key
		super().__init__(f"Conflicting assignment to '{key}': {detail}")


class TypeMismatchError(ConfigError, TypeError):
	"""A typed accessor was called on a value of another variant. Carries no value."""
	def __init__(self) -> None:
		super().__init__("Type mismatch error")


__all__ = [
	"ConfigError",
	"ConfigIOError",
	"SchemaError",
	"UnknownSchemaTypeError",
	"CoercionError",
	"InvalidBooleanError",
	"InvalidNumberError",
	"ShapeConflictError",
	"TypeMismatchError",
]
