"""Marking and ordering rules for using directives."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import assert_never

from opinionated_usings.inspection.classifier import classify
from opinionated_usings.inspection.quoting import quote
from opinionated_usings.models.directive import ImportDirective
from opinionated_usings.models.errors import InspectionPreconditionError
from opinionated_usings.models.marking import (
    Marking,
    MarkingKind,
    NonAliased,
    PlainAliased,
    RenamingAliased,
)


class SortKey(StrEnum):
    """What aliased using directives are sorted by."""

    NAME = "name"
    ALIAS = "alias"


def check_marking(directive: ImportDirective, marking: Marking | None) -> str | None:
    """Locally inspect the marking of the directive.

    Returns the error message, if any.
    """
    code = quote(directive.text.rstrip())

    if marking is not None and marking.kind is MarkingKind.UNKNOWN:
        return (
            f"Unrecognized marking comment for the using directive {code}: "
            f"{quote(marking.text)}"
        )

    match classify(directive):
        case NonAliased():
            if marking is None:
                return (
                    f"Expected a non-aliased using directive {code} "
                    f"to be explicitly marked with `// can't alias` comment, "
                    f"but found no marking."
                )
            if marking.kind is not MarkingKind.CANT_ALIAS:
                return (
                    f"Expected a non-aliased using directive {code} "
                    f"to be explicitly marked with `// can't alias` comment, "
                    f"but found the marking: {quote(marking.text)}"
                )

        case PlainAliased():
            if marking is not None:
                return (
                    f"Expected an aliased using directive {code} "
                    f"to have no marking comments since there was no renaming involved, "
                    f"but found the marking comment: {quote(marking.text)}"
                )

        case RenamingAliased():
            if marking is None:
                return (
                    f"Expected an aliased using directive {code} "
                    f"with the alias different from the name "
                    f"to have the marking comment `// renamed`, "
                    f"but found no marking comment."
                )
            if marking.kind is not MarkingKind.RENAMED:
                return (
                    f"Expected an aliased using directive {code} "
                    f"with the alias different from the name "
                    f"to have the marking comment `// renamed`, "
                    f"but found the marking comment: {quote(marking.text)}."
                )

        case unexpected:
            assert_never(unexpected)

    return None


@dataclass(frozen=True)
class OrderState:
    """Most recent aliased and non-aliased directives seen so far in a file."""

    previous_aliased: ImportDirective | None = None
    previous_non_aliased: ImportDirective | None = None

    def advance(self, directive: ImportDirective) -> OrderState:
        if directive.alias is None:
            return replace(self, previous_non_aliased=directive)
        return replace(self, previous_aliased=directive)


def check_order(
    directive: ImportDirective,
    state: OrderState,
    sort_key: SortKey = SortKey.NAME,
) -> list[str]:
    """Check that the directive fits the expected order compared to previous ones.

    Aliased directives come first, sorted by ordinal comparison of their
    names (or aliases), followed by the non-aliased ones in any order.
    """
    previous_aliased = state.previous_aliased
    previous_non_aliased = state.previous_non_aliased
    previous_alias = previous_aliased.alias if previous_aliased is not None else None

    if previous_aliased is not None and previous_alias is None:
        raise InspectionPreconditionError("Unexpected previous_aliased.alias None")
    if previous_non_aliased is not None and previous_non_aliased.alias is not None:
        raise InspectionPreconditionError("Unexpected previous_non_aliased.alias not None")

    errors: list[str] = []

    # Order among non-aliased using directives is not enforced.
    if directive.alias is None:
        return errors

    code = quote(directive.text.rstrip())

    if previous_non_aliased is not None:
        errors.append(
            f"Expected aliased using directive {code} "
            f"before the non-aliased using directive "
            f"{quote(previous_non_aliased.text.rstrip())} "
            f"at line {previous_non_aliased.display_line}."
        )

    if previous_aliased is not None and previous_alias is not None:
        if sort_key is SortKey.ALIAS:
            if previous_alias > directive.alias:
                errors.append(
                    f"Expected the alias {quote(directive.alias)} "
                    f"from the using directive {code} "
                    f"before the previous alias {quote(previous_alias)} "
                    f"from the using directive {quote(previous_aliased.text.rstrip())} "
                    f"at line {previous_aliased.display_line} (by alphabetical order)."
                )
        elif previous_aliased.name > directive.name:
            errors.append(
                f"Expected aliased using directive {code} "
                f"before the previous aliased using directive "
                f"{quote(previous_aliased.text.rstrip())} "
                f"at line {previous_aliased.display_line} (by alphabetical order)."
            )

    return errors
