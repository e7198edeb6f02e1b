"""Resolve glob patterns to files and inspect each file independently."""

from __future__ import annotations

import glob
import logging
import os
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from opinionated_usings.inspection.checks import SortKey
from opinionated_usings.inspection.pipeline import inspect
from opinionated_usings.models.errors import FileReport
from opinionated_usings.parser.scanner import UsingScanner

logger = logging.getLogger("opinionated_usings.scan")


def _expand(root: Path, patterns: Iterable[str]) -> set[Path]:
    matched: set[Path] = set()
    for pattern in patterns:
        # Absolute patterns ignore the root (os.path.join keeps them as they are).
        for hit in glob.glob(os.path.join(glob.escape(str(root)), pattern), recursive=True):
            path = Path(hit)
            if path.is_file():
                matched.add(path)
    return matched


def match_files(root: Path, includes: Sequence[str], excludes: Sequence[str] = ()) -> list[Path]:
    """Files matching any of ``includes`` and none of ``excludes``, sorted.

    Relative patterns are resolved against ``root``; ``**`` matches any
    number of directories.
    """
    included = _expand(root, includes)
    excluded = {path.resolve() for path in _expand(root, excludes)}
    paths = sorted(path for path in included if path.resolve() not in excluded)
    logger.debug(
        "Matched %d file(s) (%d included, %d excluded)",
        len(paths), len(included), len(included) - len(paths),
    )
    return paths


class FileScanner:
    """Inspects files one by one or fanned out over a thread pool.

    Each file is inspected independently, so no state is shared between
    workers.
    """

    def __init__(
        self,
        sort_key: SortKey = SortKey.NAME,
        encoding: str = "utf-8-sig",
        workers: int = 1,
    ) -> None:
        if workers < 1:
            raise ValueError(f"Expected at least one worker, got: {workers}")
        self._scanner = UsingScanner()
        self._sort_key = sort_key
        self._encoding = encoding
        self._workers = workers

    def scan_file(self, path: Path) -> FileReport:
        """Inspect a single file. Raises ``OSError`` if it cannot be read."""
        text = path.read_text(encoding=self._encoding, errors="replace")
        directives = self._scanner.scan(text)
        logger.debug("%s: %d using directive(s)", path, len(directives))
        return FileReport(path=str(path), records=inspect(directives, self._sort_key))

    def scan_paths(self, paths: Sequence[Path]) -> list[FileReport]:
        """Inspect all ``paths``; reports come back in the order of ``paths``."""
        if self._workers == 1 or len(paths) < 2:
            return [self.scan_file(path) for path in paths]
        with ThreadPoolExecutor(max_workers=self._workers) as pool:
            return list(pool.map(self.scan_file, paths))
