"""Domain models for the using-directive inspection."""

from opinionated_usings.models.directive import ImportDirective
from opinionated_usings.models.errors import FileReport, InspectionPreconditionError, Record
from opinionated_usings.models.marking import (
    Classification,
    Marking,
    MarkingKind,
    NonAliased,
    PlainAliased,
    RenamingAliased,
)

__all__ = [
    "Classification",
    "FileReport",
    "ImportDirective",
    "InspectionPreconditionError",
    "Marking",
    "MarkingKind",
    "NonAliased",
    "PlainAliased",
    "Record",
    "RenamingAliased",
]
