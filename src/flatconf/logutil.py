# src/flatconf/logutil.py

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal, Optional, Union

PathLike = Union[str, Path]

LevelName = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]
LevelLike = Union[int, LevelName]

ROOT_LOGGER = "flatconf"
_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _level(value: LevelLike, what: str) -> int:
	level = logging.getLevelName(value.upper()) if isinstance(value, str) else value
	if not isinstance(level, int):
		raise ValueError(f"Unknown {what}: {value!r}")
	return level


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
	"""
	Return a logger under the ``flatconf`` tree.

	Only the ``flatconf`` logger itself gets a console handler (once); child
	loggers such as ``flatconf.parser`` reach it by propagation.

	:param name: ``"flatconf"`` or a dotted child of it.
	:return: The logger.
	:raises ValueError: When *name* is outside the ``flatconf`` tree.
	"""
	if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
		raise ValueError(f"Logger {name!r} is not part of {ROOT_LOGGER!r}")
	root = logging.getLogger(ROOT_LOGGER)
	if not root.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
		root.addHandler(handler)
	return logging.getLogger(name)


def configure_logging(
		*,
		console_level: LevelLike = "INFO",
		file_path: Optional[PathLike] = None,
		file_level: Optional[LevelLike] = None,
		rotate: bool = False,
		max_bytes: int = 1_000_000,
		backup_count: int = 3,
		formatter: Optional[logging.Formatter] = None,
		propagate: bool = False
) -> logging.Logger:
	"""
	Configure the ``flatconf`` logger tree in one call.

	:param console_level: Console handler level (int or level name).
	:param file_path: Optional log file; adds a file handler once per path.
	:param file_level: File handler level, defaults to *console_level*.
	:param rotate: Use a RotatingFileHandler for *file_path*.
	:param max_bytes: Rotation threshold per file.
	:param backup_count: Number of rotated backups.
	:param formatter: Custom formatter; default includes timestamp and logger name.
	:param propagate: Whether records also reach the root logger.
	:return: The configured ``flatconf`` logger.
	"""
	console_value = _level(console_level, "console_level")
	file_value = (
		_level(file_level, "file_level")
		if file_level is not None
		else console_value
	)

	log = get_logger(ROOT_LOGGER)
	log.setLevel(min(console_value, file_value) if file_path else console_value)
	log.propagate = propagate

	fmt = formatter or logging.Formatter(_DEFAULT_FORMAT)
	for handler in log.handlers:
		if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
			handler.setLevel(console_value)
			handler.setFormatter(fmt)

	if file_path:
		path = Path(file_path)
		if not any(getattr(h, "baseFilename", None) == os.path.abspath(path) for h in log.handlers):
			path.parent.mkdir(parents=True, exist_ok=True)
			file_handler: logging.Handler
			if rotate:
				file_handler = RotatingFileHandler(
					path,
					maxBytes=max_bytes,
					backupCount=backup_count,
					encoding="utf-8"
				)
			else:
				file_handler = logging.FileHandler(path, encoding="utf-8")
			file_handler.setLevel(file_value)
			file_handler.setFormatter(fmt)
			log.addHandler(file_handler)

	return log


__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]
