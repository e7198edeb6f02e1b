"""Marking comments and the shapes of using directives they must agree with."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class MarkingKind(StrEnum):
    UNKNOWN = "unknown"
    CANT_ALIAS = "can't alias"
    RENAMED = "renamed"


@dataclass(frozen=True)
class Marking:
    """Parsed marking after the using directive such as ``// can't alias``.

    ``text`` keeps the raw trailing trivia so that diagnostics can quote it.
    """

    kind: MarkingKind
    text: str


@dataclass(frozen=True)
class NonAliased:
    """``using System.Linq;``"""


@dataclass(frozen=True)
class PlainAliased:
    """``using File = System.IO.File;`` -- the alias repeats the terminal name."""

    alias: str


@dataclass(frozen=True)
class RenamingAliased:
    """``using SysFile = System.IO.File;`` -- the alias differs from the terminal name."""

    alias: str
    terminal_name: str


Classification = NonAliased | PlainAliased | RenamingAliased
