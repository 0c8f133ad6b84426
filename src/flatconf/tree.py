# src/flatconf/tree.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .errors import ShapeConflictError
from .values import ConfigValue, Table

LOG = logging.getLogger(__name__)

SEPARATOR = "."

_MISSING = object()


class ConfigTree:
	"""
	Ordered mapping from key segment to :class:`~flatconf.values.ConfigValue`.

	A plain ``dict`` backs the tree, so segments are unique per level, lookups are
	O(1) and iteration follows first-insertion order. Replacing the value of an
	existing segment keeps its position.

	Dotted keys are materialized into nested :class:`~flatconf.values.Table` values
	by :meth:`insert_path`; the shape of the tree comes only from the keys seen.
	"""
	def __init__(self) -> None:
		self._entries: Dict[str, ConfigValue] = {}

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}({self.to_dict()!r})"

	def __str__(self) -> str:
		"""Renders one ``dotted.key = value`` line per leaf, for diagnostics."""
		if not self._entries:
			return "<empty ConfigTree>"
		return "\n".join(f"{key} = {value!r}" for key, value in self.walk())

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, ConfigTree):
			return NotImplemented
		return list(self._entries.items()) == list(other._entries.items())

	__hash__ = None  # type: ignore[assignment]

	# --- mapping protocol ---
	def __len__(self) -> int:
		return len(self._entries)

	def __iter__(self) -> Iterator[str]:
		return iter(self._entries)

	def __contains__(self, segment: object) -> bool:
		return segment in self._entries

	def __getitem__(self, segment: str) -> ConfigValue:
		return self._entries[segment]

	def __setitem__(self, segment: str, value: ConfigValue) -> None:
		if not isinstance(value, ConfigValue):
			raise TypeError(f"ConfigTree values must be ConfigValue, got {type(value).__name__}")
		self._entries[segment] = value

	def contains_key(self, segment: str) -> bool:
		"""Return whether *segment* exists at this level (no dotted traversal)."""
		return segment in self._entries

	def get(self, segment: str, default: Optional[ConfigValue] = None) -> Optional[ConfigValue]:
		return self._entries.get(segment, default)

	def keys(self):
		return self._entries.keys()

	def items(self):
		return self._entries.items()

	# --- insertion ---
	def insert_path(self, dotted_key: str, value: ConfigValue, *, strict: bool = False) -> None:
		"""
		Insert *value* under *dotted_key*, creating nested tables as needed.

		Shape conflicts are resolved as "last write wins":
			- a leaf assignment replaces whatever the segment held, tables included;
			- a nested assignment through a segment holding a scalar discards the
			  scalar and replaces it with a fresh table.

		:param dotted_key: Non-empty key such as ``"log.file"``.
		:param value: Value to store at the leaf.
		:param strict: Raise :class:`ShapeConflictError` instead of discarding data
					   when a segment would change between scalar and table.
		:raises ValueError: When *dotted_key* is empty.
		:raises ShapeConflictError: In strict mode, on a shape conflict.
		"""
		if not dotted_key:
			raise ValueError("Cannot insert an empty key.")
		self._insert(dotted_key, value, strict=strict, prefix="")

	def _insert(self, key: str, value: ConfigValue, *, strict: bool, prefix: str) -> None:
		head, sep, rest = key.partition(SEPARATOR)
		path = prefix + head
		current = self._entries.get(head)

		if not sep:
			if isinstance(current, Table) and value.is_scalar:
				if strict:
					raise ShapeConflictError(path, "a scalar would replace an existing table")
				LOG.debug("Scalar assignment replaces table at '%s'", path)
			self._entries[head] = value
			return

		if isinstance(current, Table):
			current.tree._insert(rest, value, strict=strict, prefix=path + SEPARATOR)
			return

		if current is not None:
			if strict:
				raise ShapeConflictError(path, "a nested key would discard an existing scalar")
			LOG.debug("Nested assignment discards scalar at '%s'", path)

		child = ConfigTree()
		child._insert(rest, value, strict=strict, prefix=path + SEPARATOR)
		self._entries[head] = Table(child)

	# --- lookup ---
	def lookup(self, dotted_key: str) -> ConfigValue:
		"""
		Follow *dotted_key* through nested tables and return the value found.

		:raises KeyError: When a segment is missing or an intermediate value is not a table.
		"""
		head, sep, rest = dotted_key.partition(SEPARATOR)
		if head not in self._entries:
			raise KeyError(dotted_key)
		found = self._entries[head]
		if not sep:
			return found
		if not isinstance(found, Table):
			raise KeyError(dotted_key)
		try:
			return found.tree.lookup(rest)
		except KeyError:
			raise KeyError(dotted_key) from None

	def get_path(self, dotted_key: str, default: Any = None) -> Any:
		"""Like :meth:`lookup` but returns *default* instead of raising ``KeyError``."""
		try:
			return self.lookup(dotted_key)
		except KeyError:
			return default

	def has_path(self, dotted_key: str) -> bool:
		return self.get_path(dotted_key, _MISSING) is not _MISSING

	# --- views ---
	def walk(self, prefix: str = "") -> Iterator[Tuple[str, ConfigValue]]:
		"""Yield ``(dotted_key, scalar)`` for every leaf, depth-first in insertion order."""
		for key, value in self._entries.items():
			if isinstance(value, Table):
				yield from value.tree.walk(prefix + key + SEPARATOR)
			else:
				yield prefix + key, value

	def to_dict(self) -> Dict[str, Any]:
		"""Return a nested plain ``dict`` (tables become dicts, scalars their payloads)."""
		return {key: value.to_python() for key, value in self._entries.items()}

	def to_list(self) -> List[Tuple[str, Any]]:
		"""Return ordered ``(key, payload)`` pairs; tables become nested lists of pairs."""
		out: List[Tuple[str, Any]] = []
		for key, value in self._entries.items():
			if isinstance(value, Table):
				out.append((key, value.tree.to_list()))
			else:
				out.append((key, value.to_python()))
		return out


def insert_path(tree: ConfigTree, dotted_key: str, value: ConfigValue, *, strict: bool = False) -> None:
	"""Functional alias of :meth:`ConfigTree.insert_path`."""
	tree.insert_path(dotted_key, value, strict=strict)


__all__ = ["SEPARATOR", "ConfigTree", "insert_path"]
