"""Stateless field predicates shared across record kinds."""

from __future__ import annotations

import string
from typing import Any

# Checking: 22 credit, 23 credit prenote, 27 debit, 28 debit prenote.
# Savings:  32 credit, 33 credit prenote, 37 debit, 38 debit prenote.
TRANSACTION_CODES: frozenset[int] = frozenset({22, 23, 27, 28, 32, 33, 37, 38})

# Printable ASCII letters, digits, space and the format's punctuation set.
# The backtick is the only printable ASCII character left out.
ALPHANUMERIC_CHARACTERS: frozenset[str] = frozenset(
    string.ascii_letters + string.digits + " " + "!\"#$%&'()*+,-./:;<=>?@[\\]^_{|}~"
)


def is_alphanumeric_legal(value: str) -> bool:
    return ALPHANUMERIC_CHARACTERS.issuperset(value)


def is_transaction_code_legal(code: int) -> bool:
    return code in TRANSACTION_CODES


def is_field_present(value: Any) -> bool:
    """Return ``False`` for a field still holding its zero/empty default.

    ``None``, ``0`` and empty or whitespace-only strings count as absent;
    parsed records always carry full-width (possibly blank) text columns.
    """

    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return value != 0


__all__ = [
    "TRANSACTION_CODES",
    "ALPHANUMERIC_CHARACTERS",
    "is_alphanumeric_legal",
    "is_transaction_code_legal",
    "is_field_present",
]
