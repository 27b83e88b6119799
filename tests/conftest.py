"""Pytest configuration shared by the ``ach_entry`` tests.

Logging is configured once per process by the CLI root callback. To keep
tests hermetic, the package logger is reset after each test and the log-level
environment variable is cleared so a developer's shell (or ``.env``) cannot
change behavior.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from ach_entry import EntryDetail
from ach_entry.logging_setup import reset_logging
from tests.helpers.records import ENTRY_LINE


@pytest.fixture(autouse=True)
def _isolate_logging(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Clear log-level overrides and run each test from an empty directory."""

    monkeypatch.delenv("ACH_ENTRY_LOG_LEVEL", raising=False)
    # The CLI loads ``.env`` from the CWD; keep the repo's own out of reach.
    monkeypatch.chdir(tmp_path)
    yield
    # load_dotenv() writes straight to os.environ.
    os.environ.pop("ACH_ENTRY_LOG_LEVEL", None)
    reset_logging()


@pytest.fixture
def entry_line() -> str:
    return ENTRY_LINE


@pytest.fixture
def entry() -> EntryDetail:
    record = EntryDetail(
        transaction_code=22,
        dfi_account_number="12345678",
        amount=100000000,
        identification_number="ID-0001",
        individual_name="Wade Arnold",
    )
    record.set_rdfi("231380104")
    record.set_trace_number("12104288", 1)
    return record
