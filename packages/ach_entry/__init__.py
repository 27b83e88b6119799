"""Public interface for the ``ach_entry`` package.

NACHA Entry Detail records: fixed-width parse/render, format validation,
routing check digits, and addenda composition. This module only re-exports
symbols.
"""

from .addenda import Addenda, ForwardAddenda, NocAddenda, ReturnAddenda, parse_addenda
from .check_digit import calculate_check_digit, is_valid_routing_number
from .entry_detail import (
    CATEGORY_FORWARD,
    CATEGORY_NOC,
    CATEGORY_RETURN,
    Category,
    EntryDetail,
)
from .errors import (
    CheckDigitMismatch,
    FieldError,
    FieldOverflow,
    InvalidCharacterSet,
    InvalidEnumValue,
    MalformedNumericField,
    MissingRequiredField,
    RecordLengthMismatch,
    WrongRecordType,
)
from .fields import (
    parse_alphanumeric,
    parse_numeric,
    render_alphanumeric,
    render_numeric,
    split_routing_number,
)
from .ingest import ParsedEntry, iter_entries, load_entries
from .models import EntryDetailPayload

__all__ = [
    # Record
    "EntryDetail",
    "Category",
    "CATEGORY_FORWARD",
    "CATEGORY_RETURN",
    "CATEGORY_NOC",
    "EntryDetailPayload",
    # Addenda
    "Addenda",
    "ForwardAddenda",
    "NocAddenda",
    "ReturnAddenda",
    "parse_addenda",
    # Codec / check digit
    "parse_numeric",
    "parse_alphanumeric",
    "render_numeric",
    "render_alphanumeric",
    "split_routing_number",
    "calculate_check_digit",
    "is_valid_routing_number",
    # Ingest
    "ParsedEntry",
    "iter_entries",
    "load_entries",
    # Errors
    "FieldError",
    "MissingRequiredField",
    "WrongRecordType",
    "InvalidEnumValue",
    "InvalidCharacterSet",
    "CheckDigitMismatch",
    "MalformedNumericField",
    "FieldOverflow",
    "RecordLengthMismatch",
]
