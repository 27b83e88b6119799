"""Read Entry Detail records (with their addenda) out of raw NACHA lines.

Only record types ``6`` (entry detail) and ``7`` (addenda) are interpreted;
every other line (file/batch headers and controls, ``9`` padding) is skipped.
An addenda line attaches to the closest preceding entry.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path
from typing import NamedTuple

from .addenda import ADDENDA_RECORD_TYPE, parse_addenda
from .entry_detail import ENTRY_DETAIL_RECORD_TYPE, EntryDetail
from .errors import FieldError
from .logging_setup import get_logger

_logger = get_logger("ach_entry.ingest")


class ParsedEntry(NamedTuple):
    """One entry read from the input, or the error that stopped it."""

    lineno: int
    """1-based line number of the entry detail line."""

    entry: EntryDetail | None
    error: FieldError | None


def iter_entries(lines: Iterable[str]) -> Iterator[ParsedEntry]:
    """Yield every entry detail record in ``lines`` in input order.

    A parse failure on an entry line or on one of its addenda lines is
    reported on that entry's :class:`ParsedEntry`; reading continues with the
    next entry.
    """

    current: ParsedEntry | None = None
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue
        tag = line[0]
        if tag == ENTRY_DETAIL_RECORD_TYPE:
            if current is not None:
                yield current
            try:
                current = ParsedEntry(lineno, EntryDetail.parse(line), None)
            except FieldError as e:
                current = ParsedEntry(lineno, None, e)
        elif tag == ADDENDA_RECORD_TYPE:
            if current is None:
                _logger.warning("line %d: addenda without a preceding entry; skipped", lineno)
                continue
            if current.entry is None:
                continue
            try:
                current.entry.add_addenda(parse_addenda(line))
            except FieldError as e:
                current = ParsedEntry(current.lineno, None, e)
    if current is not None:
        yield current


def load_entries(path: str | PathLike[str]) -> list[ParsedEntry]:
    """Read ``path`` (ASCII text, one record per line) and parse its entries."""

    p = Path(path)
    with p.open(encoding="ascii", newline="") as f:
        return list(iter_entries(f))


__all__ = ["ParsedEntry", "iter_entries", "load_entries"]
