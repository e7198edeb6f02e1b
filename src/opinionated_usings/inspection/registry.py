"""Collect error messages per source position of a file."""

from __future__ import annotations

from dataclasses import dataclass, field

from opinionated_usings.models.errors import InspectionPreconditionError, Record


@dataclass
class FindingRegistry:
    """Keeps track of errors in a file, keyed by zero-indexed (line, column)."""

    _content: dict[tuple[int, int], list[str]] = field(default_factory=dict)

    def add(self, line: int, column: int, message: str) -> None:
        if line < 0:
            raise InspectionPreconditionError(f"Negative line: {line}")
        if column < 0:
            raise InspectionPreconditionError(f"Negative column: {column}")
        self._content.setdefault((line, column), []).append(message)

    def records(self) -> list[Record]:
        """Records sorted by line, then column; messages in the order they were added."""
        return [
            Record(line=line, column=column, errors=list(messages))
            for (line, column), messages in sorted(self._content.items())
        ]

    def __len__(self) -> int:
        return len(self._content)
