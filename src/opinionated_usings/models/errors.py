"""Inspection records and errors with zero-indexed source positions."""

from __future__ import annotations

from pydantic import BaseModel, NonNegativeInt


class InspectionPreconditionError(ValueError):
    """Raised when an internal invariant of the inspection is violated.

    Distinct from findings: these indicate a bug in the caller or in the
    front end (e.g., negative positions), never a problem in the inspected code.
    """


class Record(BaseModel):
    """All error messages reported at one source position."""

    line: NonNegativeInt  # indexed at 0
    column: NonNegativeInt  # indexed at 0
    errors: list[str] = []


class FileReport(BaseModel):
    """Result of inspecting a single file."""

    path: str
    records: list[Record] = []

    @property
    def passed(self) -> bool:
        return all(not record.errors for record in self.records)

    @property
    def failed_records(self) -> list[Record]:
        return [record for record in self.records if record.errors]
