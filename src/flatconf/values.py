# src/flatconf/values.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .errors import TypeMismatchError

if TYPE_CHECKING:
	from .tree import ConfigTree


class ConfigValue:
	"""
	Closed set of values stored in a :class:`~flatconf.tree.ConfigTree`.

	Exactly four variants exist: :class:`Str`, :class:`Bool`, :class:`Number`
	and :class:`Table`. Each typed accessor succeeds only on its own variant and
	raises :class:`~flatconf.errors.TypeMismatchError` otherwise.
	"""
	__slots__ = ()

	is_scalar = True

	def as_string(self) -> str:
		raise TypeMismatchError()

	def as_bool(self) -> bool:
		raise TypeMismatchError()

	def as_number(self) -> float:
		raise TypeMismatchError()

	def as_table(self) -> "ConfigTree":
		raise TypeMismatchError()

	def to_python(self) -> Any:
		"""Return the plain Python payload (tables become nested dicts)."""
		raise NotImplementedError


@dataclass(frozen=True)
class Str(ConfigValue):
	value: str

	def as_string(self) -> str:
		return self.value

	def to_python(self) -> str:
		return self.value


@dataclass(frozen=True)
class Bool(ConfigValue):
	value: bool

	def as_bool(self) -> bool:
		return self.value

	def to_python(self) -> bool:
		return self.value


@dataclass(frozen=True)
class Number(ConfigValue):
	value: float

	def __post_init__(self) -> None:
		object.__setattr__(self, "value", float(self.value))

	def as_number(self) -> float:
		return self.value

	def to_python(self) -> float:
		return self.value


@dataclass(frozen=True, eq=True)
class Table(ConfigValue):
	"""Nested scope; owns its tree exclusively."""
	tree: "ConfigTree"

	is_scalar = False
	# trees are mutable, so tables are unhashable like ConfigTree itself
	__hash__ = None  # type: ignore[assignment]

	def as_table(self) -> "ConfigTree":
		return self.tree

	def to_python(self) -> dict:
		return self.tree.to_dict()


__all__ = ["ConfigValue", "Str", "Bool", "Number", "Table"]
