"""Inspection of using directives: markings, order and the resulting records."""

from opinionated_usings.inspection.checks import OrderState, SortKey, check_marking, check_order
from opinionated_usings.inspection.classifier import classify
from opinionated_usings.inspection.marking import parse_marking, parse_marking_kind
from opinionated_usings.inspection.pipeline import inspect, inspect_text
from opinionated_usings.inspection.quoting import quote
from opinionated_usings.inspection.registry import FindingRegistry

__all__ = [
    "FindingRegistry",
    "OrderState",
    "SortKey",
    "check_marking",
    "check_order",
    "classify",
    "inspect",
    "inspect_text",
    "parse_marking",
    "parse_marking_kind",
    "quote",
]
