"""Command-line entry point: examines the using directives in your C# code."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, TextIO

from pydantic import TypeAdapter, ValidationError

from opinionated_usings import __version__
from opinionated_usings.inspection.checks import SortKey
from opinionated_usings.models.errors import FileReport
from opinionated_usings.service.file_scan import FileScanner, match_files
from opinionated_usings.settings import Settings

logger = logging.getLogger("opinionated_usings.cli")

FAILURE_SUMMARY = (
    "One or more using directives in your code base do not conform "
    "to the expected style. Please see above."
)

_REPORTS_ADAPTER = TypeAdapter(list[FileReport])


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that fails with exit code 1 instead of 2."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="opinionated-usings",
        description="Examines the using directives in your C# code.",
    )
    parser.add_argument(
        "-i", "--inputs", nargs="+", required=True, metavar="PATTERN",
        help="Glob patterns of the files to be inspected",
    )
    parser.add_argument(
        "-e", "--excludes", nargs="+", default=[], metavar="PATTERN",
        help="Glob patterns of the files to be excluded",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="If set, makes the console output more verbose",
    )
    parser.add_argument(
        "--format", choices=["text", "json"], default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--sort-key", choices=[key.value for key in SortKey], default=None,
        help="Sort aliased using directives by name or by alias (default: from settings)",
    )
    parser.add_argument(
        "--workers", type=int, default=None,
        help="Number of files inspected in parallel (default: from settings)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def render_text(
    reports: Sequence[FileReport], verbose: bool, out: TextIO, err: TextIO
) -> None:
    """Print failures to ``err`` and, if verbose, passes to ``out``."""
    for report in reports:
        if report.passed:
            if verbose:
                print(f"PASSED: {report.path}", file=out)
            continue

        print(f"FAILED: {report.path}", file=err)
        for record in report.failed_records:
            print(f" * Line {record.line + 1}, column {record.column + 1}:", file=err)
            for error in record.errors:
                print(f"   * {error}", file=err)

    if any(not report.passed for report in reports):
        print(file=err)
        print(FAILURE_SUMMARY, file=err)


def render_json(reports: Sequence[FileReport], out: TextIO) -> None:
    print(_REPORTS_ADAPTER.dump_json(list(reports), indent=2).decode("utf-8"), file=out)


def main_with_code(argv: Sequence[str] | None = None, cwd: Path | None = None) -> int:
    """Run the checker and return the process exit code."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    try:
        settings = Settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        print(f"{parser.prog}: error: invalid settings: {problems}", file=sys.stderr)
        return 1
    logging.basicConfig(level=settings.log_level)

    workers = args.workers if args.workers is not None else settings.workers
    if workers < 1:
        print(f"{parser.prog}: error: --workers must be at least 1", file=sys.stderr)
        return 1
    sort_key = SortKey(args.sort_key) if args.sort_key is not None else settings.sort_key

    root = cwd if cwd is not None else Path.cwd()
    paths = match_files(root, args.inputs, args.excludes)
    logger.info(
        "Inspecting %d file(s) (sort_key=%s, workers=%d)", len(paths), sort_key, workers
    )

    scanner = FileScanner(sort_key=sort_key, encoding=settings.encoding, workers=workers)
    try:
        reports = scanner.scan_paths(paths)
    except (OSError, LookupError) as exc:
        logger.error("Failed to read input: %s", exc)
        print(f"Failed to read input: {exc}", file=sys.stderr)
        return 1

    if args.format == "json":
        render_json(reports, sys.stdout)
    else:
        render_text(reports, args.verbose, sys.stdout, sys.stderr)

    return 0 if all(report.passed for report in reports) else 1


def main() -> None:
    sys.exit(main_with_code())


if __name__ == "__main__":
    main()
