"""Tell non-aliased, plainly aliased and renaming using directives apart."""

from __future__ import annotations

from opinionated_usings.models.directive import ImportDirective
from opinionated_usings.models.marking import (
    Classification,
    NonAliased,
    PlainAliased,
    RenamingAliased,
)


def classify(directive: ImportDirective) -> Classification:
    if directive.alias is None:
        return NonAliased()

    terminal_name = directive.terminal_name
    if directive.alias == terminal_name:
        return PlainAliased(alias=directive.alias)
    return RenamingAliased(alias=directive.alias, terminal_name=terminal_name)
