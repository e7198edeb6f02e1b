"""Inspect the using directives of one source unit: markings, then order."""

from __future__ import annotations

from collections.abc import Iterable

from opinionated_usings.inspection.checks import OrderState, SortKey, check_marking, check_order
from opinionated_usings.inspection.marking import parse_marking
from opinionated_usings.inspection.registry import FindingRegistry
from opinionated_usings.models.directive import ImportDirective
from opinionated_usings.models.errors import Record
from opinionated_usings.parser.scanner import UsingScanner


def inspect(
    directives: Iterable[ImportDirective],
    sort_key: SortKey = SortKey.NAME,
) -> list[Record]:
    """Report the unexpected using directives.

    ``directives`` must come in source order. The result is sorted by
    position and holds only positions with at least one error.
    """
    registry = FindingRegistry()
    state = OrderState()

    for directive in directives:
        marking = parse_marking(directive.trailing_trivia)

        error = check_marking(directive, marking)
        if error is not None:
            registry.add(directive.line, directive.column, error)

        for error in check_order(directive, state, sort_key):
            registry.add(directive.line, directive.column, error)

        state = state.advance(directive)

    return registry.records()


def inspect_text(
    text: str,
    sort_key: SortKey = SortKey.NAME,
    scanner: UsingScanner | None = None,
) -> list[Record]:
    """Scan C# source text and inspect its using directives."""
    scanner = scanner or UsingScanner()
    return inspect(scanner.scan(text), sort_key)
