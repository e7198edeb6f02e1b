"""Parse the marking comment trailing a using directive."""

from __future__ import annotations

from collections.abc import Sequence

from opinionated_usings.models.marking import Marking, MarkingKind

_KEYWORDS: dict[str, MarkingKind] = {
    "can't alias": MarkingKind.CANT_ALIAS,
    "renamed": MarkingKind.RENAMED,
}


def parse_marking_kind(same_line_trivia: Sequence[str]) -> MarkingKind | None:
    """Classify the first non-whitespace trivia; ``None`` if there is none."""
    for text in same_line_trivia:
        if text.strip() == "":
            continue

        if not text.startswith("//") or len(text) == 2:
            return MarkingKind.UNKNOWN

        return _KEYWORDS.get(text[2:].strip(), MarkingKind.UNKNOWN)

    return None


def parse_marking(same_line_trivia: Sequence[str]) -> Marking | None:
    kind = parse_marking_kind(same_line_trivia)
    if kind is None:
        return None
    return Marking(kind=kind, text="".join(same_line_trivia).rstrip())
