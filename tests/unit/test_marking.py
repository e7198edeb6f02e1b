"""Tests for parsing marking comments and classifying directives."""

from __future__ import annotations

import pytest

from opinionated_usings.inspection.classifier import classify
from opinionated_usings.inspection.marking import parse_marking, parse_marking_kind
from opinionated_usings.models.directive import ImportDirective
from opinionated_usings.models.marking import (
    Marking,
    MarkingKind,
    NonAliased,
    PlainAliased,
    RenamingAliased,
)


class TestParseMarking:
    def test_no_trivia_is_absent(self) -> None:
        assert parse_marking_kind([]) is None
        assert parse_marking([]) is None

    def test_whitespace_only_is_absent(self) -> None:
        assert parse_marking_kind(["   ", "\t"]) is None

    @pytest.mark.parametrize(
        "trivia, expected",
        [
            (["  ", "// can't alias"], MarkingKind.CANT_ALIAS),
            (["//can't alias"], MarkingKind.CANT_ALIAS),
            (["//   renamed  "], MarkingKind.RENAMED),
            (["// Renamed"], MarkingKind.UNKNOWN),
            (["// cannot alias"], MarkingKind.UNKNOWN),
            (["//"], MarkingKind.UNKNOWN),
            (["//   "], MarkingKind.UNKNOWN),
            (["/* renamed */"], MarkingKind.UNKNOWN),
            (["/// renamed"], MarkingKind.UNKNOWN),
        ],
    )
    def test_kinds(self, trivia: list[str], expected: MarkingKind) -> None:
        assert parse_marking_kind(trivia) is expected

    def test_only_first_comment_counts(self) -> None:
        assert parse_marking_kind(["/* x */", "// renamed"]) is MarkingKind.UNKNOWN
        assert parse_marking_kind([" ", "// renamed", "/* x */"]) is MarkingKind.RENAMED

    def test_marking_keeps_raw_text(self) -> None:
        assert parse_marking(["  ", "// renamed  "]) == Marking(
            kind=MarkingKind.RENAMED, text="  // renamed"
        )

    def test_marking_kind_values(self) -> None:
        assert MarkingKind.CANT_ALIAS == "can't alias"
        assert MarkingKind.RENAMED == "renamed"


def _directive(name: str, alias: str | None = None) -> ImportDirective:
    text = f"using {alias} = {name};" if alias else f"using {name};"
    return ImportDirective(text=text, name=name, line=0, column=0, alias=alias)


class TestClassify:
    def test_non_aliased(self) -> None:
        assert classify(_directive("System.IO")) == NonAliased()

    def test_plain_aliased(self) -> None:
        assert classify(_directive("System.IO.File", "File")) == PlainAliased(alias="File")

    def test_renaming_aliased(self) -> None:
        assert classify(_directive("System.IO.File", "SysFile")) == RenamingAliased(
            alias="SysFile", terminal_name="File"
        )

    def test_single_segment_name(self) -> None:
        assert classify(_directive("File", "File")) == PlainAliased(alias="File")

    def test_comparison_is_case_sensitive(self) -> None:
        assert isinstance(classify(_directive("System.IO.File", "file")), RenamingAliased)

    def test_generic_terminal_name(self) -> None:
        directive = _directive("System.Collections.Generic.List<System.Int32>", "List")
        assert directive.terminal_name == "List"
        assert classify(directive) == PlainAliased(alias="List")

    def test_alias_qualified_terminal_name(self) -> None:
        assert _directive("global::System").terminal_name == "System"
        assert _directive("global::System.IO").terminal_name == "IO"
