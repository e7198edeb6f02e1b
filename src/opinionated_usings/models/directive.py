"""Using directives as delivered by the source front end."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SEGMENT_SEPARATOR_RE = re.compile(r"::|\.")


def _strip_type_arguments(name: str) -> str:
    """Drop every ``<...>`` type argument list, including nested ones."""
    depth = 0
    kept: list[str] = []
    for char in name:
        if char == "<":
            depth += 1
        elif char == ">":
            depth = max(depth - 1, 0)
        elif depth == 0:
            kept.append(char)
    return "".join(kept)


@dataclass(frozen=True)
class ImportDirective:
    """A single ``using`` directive in source order.

    ``text`` is the directive itself (``using`` up to and including ``;``)
    and ``trailing_trivia`` holds the raw whitespace and comment pieces that
    follow it on the directive's start line.
    """

    text: str
    name: str
    line: int  # indexed at 0
    column: int  # indexed at 0
    alias: str | None = None
    trailing_trivia: tuple[str, ...] = ()

    @property
    def is_aliased(self) -> bool:
        return self.alias is not None

    @property
    def terminal_name(self) -> str:
        """Last component of the dotted name, e.g. ``File`` for ``System.IO.File``."""
        segments = _SEGMENT_SEPARATOR_RE.split(_strip_type_arguments(self.name))
        return segments[-1].strip()

    @property
    def display_line(self) -> int:
        """Line number for humans (indexed at 1)."""
        return self.line + 1
