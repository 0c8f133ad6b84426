# src/flatconf/parser.py
from __future__ import annotations

import logging
from typing import Iterable, Optional

from .schema import SchemaTable, coerce_value, load_schema_lines
from .sources import PathLike, read_lines
from .tokenizer import tokenize_line
from .tree import ConfigTree
from .values import ConfigValue, Str

LOG = logging.getLogger(__name__)


def load_schema(path: PathLike, *, encoding: str = "utf-8") -> SchemaTable:
	"""
	Read a schema file into a schema table.

	:param path: Schema file path.
	:param encoding: Text encoding.
	:return: Mapping ``fully.qualified.key -> SchemaType``.
	:raises ConfigIOError: When the file cannot be read.
	:raises UnknownSchemaTypeError: On an unsupported type name.
	"""
	return load_schema_lines(read_lines(path, encoding=encoding), source=str(path))


def build_tree(
		config_lines: Iterable[str],
		schema: Optional[SchemaTable] = None,
		*,
		strict: bool = False,
		source: Optional[str] = None
) -> ConfigTree:
	"""
	Tokenize, coerce and insert every config line into a fresh tree.

	Keys declared in *schema* are coerced to their type; all other keys are kept
	as strings. Lines that do not tokenize are skipped.

	:param config_lines: Config text lines.
	:param schema: Optional schema table (not retained in the result).
	:param strict: Reject scalar/table shape conflicts instead of overwriting.
	:param source: Source name used in error messages.
	:return: The finished tree.
	:raises CoercionError: On the first declared value that fails coercion.
	:raises ShapeConflictError: In strict mode, on a shape conflict.
	"""
	table = schema or {}
	tree = ConfigTree()
	entries = 0
	for line_no, line in enumerate(config_lines, start=1):
		pair = tokenize_line(line)
		if pair is None:
			if line.strip():
				LOG.debug("Skipping line %d: %r", line_no, line)
			continue
		key, raw = pair
		declared = table.get(key)
		value: ConfigValue
		if declared is None:
			value = Str(raw)
		else:
			value = coerce_value(raw, declared, key=key, line_no=line_no, source=source)
		tree.insert_path(key, value, strict=strict)
		entries += 1
	LOG.debug("Inserted %d entr%s from %s", entries, "y" if entries == 1 else "ies", source or "<lines>")
	return tree


def parse_lines(
		config_lines: Iterable[str],
		schema_lines: Optional[Iterable[str]] = None,
		*,
		strict: bool = False,
		source: Optional[str] = None
) -> ConfigTree:
	"""
	Parse in-memory config lines, optionally typed by in-memory schema lines.

	The schema is consumed completely before the first config line is read.

	:param config_lines: Config text lines.
	:param schema_lines: Optional schema text lines.
	:param strict: Reject scalar/table shape conflicts instead of overwriting.
	:param source: Config source name used in error messages.
	:return: The parsed tree.
	"""
	schema = load_schema_lines(schema_lines) if schema_lines is not None else None
	return build_tree(config_lines, schema, strict=strict, source=source)


def parse(
		config_path: PathLike,
		schema_path: Optional[PathLike] = None,
		*,
		encoding: str = "utf-8",
		strict: bool = False
) -> ConfigTree:
	"""
	Parse a config file into a :class:`ConfigTree`.

	Typical use:
		tree = parse("app.conf", "app.schema")
		tree.lookup("log.file").as_string()

	:param config_path: Config file path; it must exist.
	:param schema_path: Optional schema file path. ``None`` keeps every value a string.
	:param encoding: Encoding of both files.
	:param strict: Reject scalar/table shape conflicts instead of overwriting.
	:return: The parsed tree, owned by the caller.
	:raises ConfigIOError: When a given file is missing or unreadable.
	:raises UnknownSchemaTypeError: When the schema names an unsupported type.
	:raises CoercionError: When a declared value does not match its type.
	"""
	schema = load_schema(schema_path, encoding=encoding) if schema_path is not None else None
	tree = build_tree(
		read_lines(config_path, encoding=encoding),
		schema,
		strict=strict,
		source=str(config_path)
	)
	LOG.info("Parsed %s: %d top-level key(s)", config_path, len(tree))
	return tree


__all__ = ["load_schema", "build_tree", "parse_lines", "parse"]
