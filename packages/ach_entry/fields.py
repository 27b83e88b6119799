"""Fixed-width field codec shared by every NACHA record kind.

Numeric fields are right-justified and zero-filled; alphanumeric fields are
left-justified and space-filled. Routing-number style text fields (RDFI/ODFI
identifiers) are zero-filled on the left like numerics but stay strings so
that leading zeros survive.

Layout
------
``ENTRY_DETAIL_LAYOUT`` lists the Entry Detail columns as half-open
``[start, end)`` ranges over the 94-character line:

==========================  =========  ============
field                       columns    kind
==========================  =========  ============
recordType                  0-1        alphanumeric
transactionCode             1-3        numeric
rdfiIdentification          3-11       routing
checkDigit                  11-12      alphanumeric
dfiAccountNumber            12-29      alphanumeric
amount                      29-39      numeric
identificationNumber        39-54      alphanumeric
individualName              54-76      alphanumeric
discretionaryData           76-78      alphanumeric
addendaRecordIndicator      78-79      numeric
traceNumber                 79-94      numeric
==========================  =========  ============
"""

from __future__ import annotations

from typing import Literal, NamedTuple

from .errors import FieldOverflow, MalformedNumericField

RECORD_LENGTH: int = 94

FieldKind = Literal["numeric", "alphanumeric", "routing"]


class Field(NamedTuple):
    """A fixed column range within a record line."""

    name: str
    start: int
    end: int
    kind: FieldKind

    @property
    def width(self) -> int:
        return self.end - self.start

    def slice(self, line: str) -> str:
        return line[self.start : self.end]


ENTRY_DETAIL_LAYOUT: tuple[Field, ...] = (
    Field("recordType", 0, 1, "alphanumeric"),
    Field("transactionCode", 1, 3, "numeric"),
    Field("rdfiIdentification", 3, 11, "routing"),
    Field("checkDigit", 11, 12, "alphanumeric"),
    Field("dfiAccountNumber", 12, 29, "alphanumeric"),
    Field("amount", 29, 39, "numeric"),
    Field("identificationNumber", 39, 54, "alphanumeric"),
    Field("individualName", 54, 76, "alphanumeric"),
    Field("discretionaryData", 76, 78, "alphanumeric"),
    Field("addendaRecordIndicator", 78, 79, "numeric"),
    Field("traceNumber", 79, 94, "numeric"),
)

_DIGITS = frozenset("0123456789")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_numeric(text: str, field_name: str = "numeric") -> int:
    """Interpret a fixed-width column as a base-10 integer.

    Spaces (anywhere in the column) and leading zeros are padding. A blank
    column is ``0``.
    Anything else that is not an ASCII digit raises
    :class:`~ach_entry.errors.MalformedNumericField`.
    """

    s = text.replace(" ", "")
    if not s:
        return 0
    if not _DIGITS.issuperset(s):
        raise MalformedNumericField(field_name, text)
    return int(s)


def parse_alphanumeric(text: str) -> str:
    # Verbatim; character-set legality is the validator's job.
    return text


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_numeric(value: int, width: int, field_name: str = "numeric") -> str:
    """Render ``value`` zero-filled to exactly ``width`` digits.

    Raises :class:`~ach_entry.errors.FieldOverflow` when the decimal form is
    wider than the column or the value is negative.
    """

    if value < 0:
        raise FieldOverflow(field_name, value, width)
    s = str(value)
    if len(s) > width:
        raise FieldOverflow(field_name, value, width)
    return s.zfill(width)


def render_alphanumeric(value: str, width: int) -> str:
    """Left-justify ``value`` and space-fill to exactly ``width`` characters.

    Values longer than ``width`` are truncated to the first ``width``
    characters. This matches how existing fixed-width producers behave and is
    kept for byte compatibility.
    """

    return value[:width].ljust(width)


def pad_routing(value: str, width: int) -> str:
    """Zero-fill a routing-style text field on the left to ``width``.

    Longer values are truncated to their first ``width`` characters.
    """

    return value[:width].rjust(width, "0")


def split_routing_number(raw: str, width: int = 8) -> tuple[str, str]:
    """Split a routing number into ``(identifier, check_digit)``.

    ``raw`` is first padded to ``width + 1`` characters with
    :func:`pad_routing`; the first ``width`` characters are the identifier and
    the last one is the check digit.
    """

    s = pad_routing(raw, width + 1)
    return s[:width], s[width:]


__all__ = [
    "RECORD_LENGTH",
    "ENTRY_DETAIL_LAYOUT",
    "Field",
    "FieldKind",
    "parse_numeric",
    "parse_alphanumeric",
    "render_numeric",
    "render_alphanumeric",
    "pad_routing",
    "split_routing_number",
]
