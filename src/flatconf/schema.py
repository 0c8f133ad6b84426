# src/flatconf/schema.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, Optional

from .errors import InvalidBooleanError, InvalidNumberError, UnknownSchemaTypeError
from .tokenizer import tokenize_schema_line
from .values import Bool, ConfigValue, Number, Str

LOG = logging.getLogger(__name__)


class SchemaType(Enum):
	"""Scalar types a schema may declare for a key."""
	STRING = "string"
	BOOL = "bool"
	NUMBER = "number"

	@classmethod
	def from_name(cls, name: str, *, key: Optional[str] = None, line_no: Optional[int] = None,
	              source: Optional[str] = None) -> "SchemaType":
		"""
		Resolve a schema type name. Matching is exact: ``boolean`` or ``String`` are unknown.

		:raises UnknownSchemaTypeError: For any other name.
		"""
		try:
			return cls(name)
		except ValueError:
			raise UnknownSchemaTypeError(name, key=key, line_no=line_no, source=source) from None


SchemaTable = Dict[str, SchemaType]


# ------------------------------- Table build --------------------------------
def load_schema_lines(lines: Iterable[str], *, source: Optional[str] = None) -> SchemaTable:
	"""
	Build a schema table from ``key -> type`` lines.

	Malformed lines are skipped. A later declaration of the same key wins.
	The whole source is rejected on the first unknown type name.

	:param lines: Schema text lines.
	:param source: Name used in error messages (e.g. the file path).
	:return: Mapping ``fully.qualified.key -> SchemaType``.
	:raises UnknownSchemaTypeError: On an unsupported type name.
	"""
	table: SchemaTable = {}
	for line_no, line in enumerate(lines, start=1):
		pair = tokenize_schema_line(line)
		if pair is None:
			continue
		key, type_name = pair
		table[key] = SchemaType.from_name(type_name, key=key, line_no=line_no, source=source)
	LOG.debug("Schema table built with %d key(s)", len(table))
	return table


# -------------------------------- Coercion ----------------------------------
def coerce_value(
		raw: str,
		schema_type: SchemaType,
		*,
		key: Optional[str] = None,
		line_no: Optional[int] = None,
		source: Optional[str] = None
) -> ConfigValue:
	"""
	Convert the raw text of a declared key into a typed value.

	- ``STRING``: the text verbatim.
	- ``BOOL``: exactly ``true`` or ``false``.
	- ``NUMBER``: a decimal float literal (sign, fraction and exponent allowed).

	:param raw: Value text as produced by the tokenizer.
	:param schema_type: Declared type.
	:param key: Key used for error context.
	:param line_no: Line number used for error context.
	:param source: Source name used for error context.
	:return: A :class:`Str`, :class:`Bool` or :class:`Number`.
	:raises InvalidBooleanError: When a BOOL value is not ``true``/``false``.
	:raises InvalidNumberError: When a NUMBER value is not a float literal.
	"""
	if schema_type is SchemaType.STRING:
		return Str(raw)

	if schema_type is SchemaType.BOOL:
		if raw == "true":
			return Bool(True)
		if raw == "false":
			return Bool(False)
		raise InvalidBooleanError(raw, key=key, line_no=line_no, source=source)

	if schema_type is SchemaType.NUMBER:
		# float() also takes digit-group underscores and non-ASCII digits
		if "_" in raw or not raw.isascii():
			raise InvalidNumberError(raw, key=key, line_no=line_no, source=source)
		try:
			return Number(float(raw))
		except ValueError:
			raise InvalidNumberError(raw, key=key, line_no=line_no, source=source) from None

	raise TypeError(f"Unsupported schema type: {schema_type!r}")


__all__ = ["SchemaType", "SchemaTable", "load_schema_lines", "coerce_value"]
