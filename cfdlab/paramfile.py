"""Reading named values from simple ``name value`` parameter files.

Each non-empty line holds a name made of letters, digits and underscores,
one separator character, and a value. Everything after ``#`` is a comment.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Union

__all__ = ["ParameterError", "find_value", "read_string", "read_int", "read_double"]

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class ParameterError(ValueError):
    """A parameter file is missing, malformed, or lacks a requested value."""


def _error(message: str, path: PathLike, name: str, line: int = 0) -> ParameterError:
    text = f"{message}  File: {os.fspath(path)}   Variable: {name}"
    if line:
        text += f"  Line: {line}"
    return ParameterError(text)


def _split_name(line: str) -> tuple[str, str]:
    end = 0
    while end < len(line) and (
        (line[end].isascii() and line[end].isalnum()) or line[end] == "_"
    ):
        end += 1
    return line[:end], line[end:]


def find_value(path: PathLike, name: str) -> str:
    """Return the raw value text given for ``name`` in the file at ``path``.

    A leading ``*`` on ``name`` is ignored. Raises :class:`ParameterError`
    when the file cannot be opened, a line before the match is malformed,
    or the name does not appear.
    """
    wanted = name[1:] if name.startswith("*") else name
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise _error("Could not open file", path, wanted) from exc

    line_number = 0
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].lstrip()
        if not line:
            continue
        line_name, rest = _split_name(line)
        if not rest:
            raise _error("wrong format", path, line_name, line_number)
        if line_name != wanted:
            continue
        value = rest[1:].lstrip()
        if not value:
            raise _error("wrong format", path, line_name, line_number)
        return value.rstrip()

    raise _error("variable not found", path, wanted, line_number)


def _report(path: PathLike, name: str, shown: str) -> None:
    padding = " " * max(0, 15 - len(name))
    log.info("File: %s\t\t%s%s= %s", os.fspath(path), name, padding, shown)


def read_string(path: PathLike, name: str) -> str:
    """Return the first whitespace-delimited word of the value of ``name``."""
    value = find_value(path, name)
    words = value.split()
    if not words:
        raise _error("wrong format", path, name)
    result = words[0]
    _report(path, name, result)
    return result


def read_int(path: PathLike, name: str) -> int:
    """Return the integer at the start of the value of ``name``."""
    value = find_value(path, name)
    match = _INT_RE.match(value)
    if match is None:
        raise _error("wrong format", path, name)
    result = int(match.group(1))
    _report(path, name, str(result))
    return result


def read_double(path: PathLike, name: str) -> float:
    """Return the floating-point number at the start of the value of ``name``."""
    value = find_value(path, name)
    match = _FLOAT_RE.match(value)
    if match is None:
        raise _error("wrong format", path, name)
    result = float(match.group(1))
    _report(path, name, f"{result:f}")
    return result