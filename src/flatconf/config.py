from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import Any, Dict, Iterable, Optional

from . import parser
from .sources import PathLike, text_lines
from .tree import ConfigTree

LOG = logging.getLogger(__name__)

_MISSING = object()


class FlatConfig:
	"""
	High-level API around :func:`flatconf.parser.parse` for application code.

	Typical flow:
		cfg = FlatConfig().load("app.conf", "app.schema")
		cfg.get_bool("debug")
		cfg.get_string("log.file")

	Each ``load*`` call parses into a fresh tree and replaces the previous one;
	on failure the previous tree is kept untouched.
	"""
	def __init__(self, *, encoding: str = "utf-8", strict: bool = False) -> None:
		self.encoding = encoding
		self.strict = strict
		self._tree = ConfigTree()
		self._source: Optional[Path] = None

	def __repr__(self) -> str:
		"""Returns string like ``FlatConfig(source='app.conf', keys=['endpoint', 'log'])``."""
		source = str(self._source) if self._source else None
		return f"{self.__class__.__name__}(source={source!r}, keys={list(self._tree.keys())})"

	def __str__(self) -> str:
		"""Lists every leaf as ``dotted.key = value``; not meant to be re-read."""
		if not len(self._tree):
			return "FlatConfig with no entries"
		return f"FlatConfig ({self._source or '<lines>'}):\n{self._tree}"

	def __enter__(self) -> "FlatConfig":
		return self

	def __exit__(
			self,
			exc_type: Optional[type[BaseException]],
			exc_val: Optional[BaseException],
			exc_tb: Optional[TracebackType]
	) -> bool:
		"""Logs any exception raised inside the ``with`` block and lets it propagate."""
		if exc_type is not None:
			LOG.error("Exception inside FlatConfig context: %s", exc_type, exc_info=(exc_type, exc_val, exc_tb))
		return False

	# --- Load ---
	def load(self, config_path: PathLike, schema_path: Optional[PathLike] = None) -> "FlatConfig":
		"""
		Parse *config_path* (typed by *schema_path* when given) and keep the result.

		:return: self.
		:raises ConfigError: On IO, schema or coercion errors.
		"""
		self._tree = parser.parse(config_path, schema_path, encoding=self.encoding, strict=self.strict)
		self._source = Path(config_path)
		return self

	def load_lines(
			self,
			config_lines: Iterable[str],
			schema_lines: Optional[Iterable[str]] = None
	) -> "FlatConfig":
		"""
		Parse in-memory lines and keep the result.

		:return: self.
		:raises ConfigError: On schema or coercion errors.
		"""
		self._tree = parser.parse_lines(config_lines, schema_lines, strict=self.strict)
		self._source = None
		return self

	def load_text(self, config_text: str, schema_text: Optional[str] = None) -> "FlatConfig":
		"""Parse in-memory documents; see :meth:`load_lines`."""
		schema_lines = text_lines(schema_text) if schema_text is not None else None
		return self.load_lines(text_lines(config_text), schema_lines)

	# --- accessors ---
	@property
	def tree(self) -> ConfigTree:
		return self._tree

	@property
	def source(self) -> Optional[Path]:
		return self._source

	def to_dict(self) -> Dict[str, Any]:
		return self._tree.to_dict()

	def __contains__(self, dotted_key: object) -> bool:
		return isinstance(dotted_key, str) and self._tree.has_path(dotted_key)

	def get(self, dotted_key: str, default: Any = None) -> Any:
		"""Return the plain Python value at *dotted_key*, or *default* when absent."""
		found = self._tree.get_path(dotted_key, _MISSING)
		if found is _MISSING:
			return default
		return found.to_python()

	def _require(self, dotted_key: str):
		try:
			return self._tree.lookup(dotted_key)
		except KeyError:
			raise KeyError(f"Unknown key: {dotted_key}") from None

	def get_string(self, dotted_key: str) -> str:
		"""
		:raises KeyError: When the key is absent.
		:raises TypeMismatchError: When the value is not a string.
		"""
		return self._require(dotted_key).as_string()

	def get_bool(self, dotted_key: str) -> bool:
		return self._require(dotted_key).as_bool()

	def get_number(self, dotted_key: str) -> float:
		return self._require(dotted_key).as_number()

	def get_table(self, dotted_key: str) -> ConfigTree:
		return self._require(dotted_key).as_table()
