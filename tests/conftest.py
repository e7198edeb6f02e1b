"""Shared test fixtures for opinionated-usings."""

from __future__ import annotations

from pathlib import Path

import pytest

from opinionated_usings.parser.scanner import UsingScanner

FIXTURES_DIR = Path(__file__).parent / "fixtures"
FAILS_DIR = FIXTURES_DIR / "fails"


@pytest.fixture
def scanner() -> UsingScanner:
    return UsingScanner()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's environment and .env file out of the tests."""
    for name in ("LOG_LEVEL", "WORKERS", "ENCODING", "SORT_KEY"):
        monkeypatch.delenv(f"OPINIONATED_USINGS_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


COMMON_CASE_CODE = """\
using File = System.IO.File;
using Path = System.IO.Path;
using SystemUri = System.Uri;  // renamed

using System.Linq;   // can't alias
using System.Collections.Generic;  // can't alias
"""
