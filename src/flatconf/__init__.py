"""
flatconf: dotted-key flat config files parsed into typed nested trees.

    from flatconf import parse
    tree = parse("app.conf", "app.schema")
    tree.lookup("log.file").as_string()

    from flatconf import FlatConfig
    cfg = FlatConfig().load("app.conf")
    cfg.get("log.file")

Top-level names are resolved lazily.
"""

from importlib import import_module
from importlib.metadata import version, PackageNotFoundError as _PNF
from typing import TYPE_CHECKING

try:
	__version__ = version("flatconf")
except _PNF:
	__version__ = "0.0.0+local"

__all__ = [
	"__version__",
	# entry points
	"parse", "parse_lines", "load_schema", "FlatConfig",
	# model
	"ConfigTree", "insert_path", "ConfigValue", "Str", "Bool", "Number", "Table",
	"SchemaType", "coerce_value", "tokenize_line", "tokenize_schema_line",
	# errors
	"ConfigError", "ConfigIOError", "SchemaError", "UnknownSchemaTypeError",
	"CoercionError", "InvalidBooleanError", "InvalidNumberError",
	"ShapeConflictError", "TypeMismatchError",
	# logging
	"configure_logging",
]

_EXPORTS = {
	"parse": "parser",
	"parse_lines": "parser",
	"load_schema": "parser",
	"FlatConfig": "config",
	"ConfigTree": "tree",
	"insert_path": "tree",
	"ConfigValue": "values",
	"Str": "values",
	"Bool": "values",
	"Number": "values",
	"Table": "values",
	"SchemaType": "schema",
	"coerce_value": "schema",
	"tokenize_line": "tokenizer",
	"tokenize_schema_line": "tokenizer",
	"ConfigError": "errors",
	"ConfigIOError": "errors",
	"SchemaError": "errors",
	"UnknownSchemaTypeError": "errors",
	"CoercionError": "errors",
	"InvalidBooleanError": "errors",
	"InvalidNumberError": "errors",
	"ShapeConflictError": "errors",
	"TypeMismatchError": "errors",
	"configure_logging": "logutil",
}


def __getattr__(name: str):
	module = _EXPORTS.get(name)
	if module is not None:
		return getattr(import_module(f"flatconf.{module}"), name)
	raise AttributeError(f"module 'flatconf' has no attribute {name!r}")


# Help type-checkers without eager imports
if TYPE_CHECKING:
	from .config import FlatConfig  # noqa: F401
	from .errors import (  # noqa: F401
		ConfigError, ConfigIOError, SchemaError, UnknownSchemaTypeError,
		CoercionError, InvalidBooleanError, InvalidNumberError,
		ShapeConflictError, TypeMismatchError,
	)
	from .logutil import configure_logging  # noqa: F401
	from .parser import parse, parse_lines, load_schema  # noqa: F401
	from .schema import SchemaType, coerce_value  # noqa: F401
	from .tokenizer import tokenize_line, tokenize_schema_line  # noqa: F401
	from .tree import ConfigTree, insert_path  # noqa: F401
	from .values import ConfigValue, Str, Bool, Number, Table  # noqa: F401
