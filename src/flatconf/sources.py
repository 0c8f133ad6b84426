# src/flatconf/sources.py
"""
Line sources handed to the parser.

A source is any iterable of text lines. Files are read eagerly and closed
before the lines are handed out, so a failed parse never leaves a handle open.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from .errors import ConfigIOError

LOG = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _split_lines(text: str) -> List[str]:
	"""
	Split *text* on ``\\n`` only and drop one trailing ``\\r`` per line.

	Other Unicode line boundaries (form feed, ``\\u2028`` ...) stay inside the
	line, so a value runs verbatim up to the end of its line. A final line
	terminator does not produce an extra empty line.
	"""
	lines = text.split("\n")
	if lines[-1] == "":
		lines.pop()
	return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(path: PathLike, *, encoding: str = "utf-8") -> List[str]:
	"""
	Read a text file and return its lines without line terminators.

	:param path: File path.
	:param encoding: Text encoding.
	:return: List of lines.
	:raises ConfigIOError: When the file is missing, is not a regular file, or cannot be decoded.
	"""
	p = Path(path).expanduser()
	if not p.exists():
		raise ConfigIOError(p, "no such file")
	if not p.is_file():
		raise ConfigIOError(p, "not a regular file")
	try:
		with p.open("r", encoding=encoding, newline="") as fh:
			lines = _split_lines(fh.read())
	except (OSError, UnicodeDecodeError) as exc:
		raise ConfigIOError(p, str(exc)) from exc
	LOG.info("Loaded %s (%d line(s))", p, len(lines))
	return lines


def text_lines(text: str) -> List[str]:
	"""Split an in-memory document into lines (``\\n`` or ``\\r\\n`` endings)."""
	return _split_lines(text)


__all__ = ["PathLike", "read_lines", "text_lines"]
