"""Streaming INI parser that reports every key/value pair with its line number.

Rules:

* Lines starting with ``;`` or ``#`` are comments; a ``;`` or ``#`` that
  follows a space starts a trailing comment.
* ``[name]`` starts a section; the name ends at the first ``]``.
* ``key = value`` and ``key : value`` define items; the key ends at the
  first ``=`` or ``:``.
* An indented line that follows an item continues it: it is reported as
  another value of the same key.
* A UTF-8 byte order mark at the start of the first line is ignored.
* Lines longer than ``MAX_LINE_LEN - 1`` characters are truncated silently;
  section and key names longer than 255 characters are truncated too.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, Union

MAX_LINE_LEN = 1024
"""Lines are cut to one character less than this."""

_NAME_MAX = 255
_WS = " \t\n\v\f\r"
_BOM = "\ufeff"


@dataclass(frozen=True)
class IniItem:
    """One value found in the input."""

    line: int
    section: str
    key: str
    value: str


class IniError(Exception):
    """Base class for parser errors; ``line`` is the 1-based line number."""

    def __init__(self, line: int, message: str) -> None:
        super().__init__(message)
        self.line = line


class IniParseError(IniError):
    """A line could not be parsed."""

    def __init__(self, line: int) -> None:
        super().__init__(line, f"syntax error on line {line}")


class IniAbortError(IniError):
    """The item callback asked to stop; ``result`` is what it returned."""

    def __init__(self, line: int, result: Any) -> None:
        super().__init__(line, f"parsing stopped by callback on line {line}")
        self.result = result


OnItem = Callable[[IniItem], Any]


def _trim_comment(line: str) -> str:
    if not line or line[0] in ";#":
        return ""
    cuts = [i for i in (line.find(" ;"), line.find(" #")) if i >= 0]
    if cuts:
        return line[: min(cuts) + 1]
    return line


def _find_separator(text: str) -> int:
    for index, ch in enumerate(text):
        if ch in "=:":
            return index
    return -1


def iter_items(lines: Iterable[str]) -> Iterator[IniItem]:
    """Yield the items of ``lines`` in order.

    Raises :class:`IniParseError` at the first line that cannot be parsed;
    items before it have already been yielded.
    """
    section = ""
    key = ""
    for number, raw in enumerate(lines, start=1):
        line = raw[: MAX_LINE_LEN - 1]
        if number == 1 and line.startswith(_BOM):
            line = line[len(_BOM):]
        indented = bool(line) and line[0] in _WS

        body = _trim_comment(line).strip(_WS)
        if not body:
            continue

        if indented and key:
            yield IniItem(number, section, key, body)
        elif body.startswith("["):
            end = body.find("]")
            if end < 0:
                raise IniParseError(number)
            key = ""
            section = body[1:end][:_NAME_MAX]
        else:
            sep = _find_separator(body)
            if sep < 0:
                raise IniParseError(number)
            name = body[:sep].strip(_WS)
            key = name[:_NAME_MAX]
            yield IniItem(number, section, name, body[sep + 1:].strip(_WS))


def parse(lines: Iterable[str], on_item: OnItem) -> int:
    """Call ``on_item`` for every item of ``lines``; return how many were handled.

    A truthy return value from ``on_item`` stops parsing with
    :class:`IniAbortError`.
    """
    count = 0
    for item in iter_items(lines):
        result = on_item(item)
        if result:
            raise IniAbortError(item.line, result)
        count += 1
    return count


def _string_lines(text: Optional[str]) -> list[str]:
    if text is None:
        return []
    text = text.split("\0", 1)[0]
    if not text:
        return []
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    return pieces


def parse_string(text: Optional[str], on_item: OnItem) -> int:
    """Parse INI ``text``; ``None`` is treated as empty input."""
    return parse(_string_lines(text), on_item)


def parse_file(path: Union[str, "os.PathLike[str]"], on_item: OnItem) -> int:
    """Parse the INI file at ``path``; I/O errors propagate as :class:`OSError`."""
    with open(
        path, encoding="utf-8", errors="surrogateescape", newline="\n"
    ) as handle:
        return parse(handle, on_item)