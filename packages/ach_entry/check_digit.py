"""ABA routing-number check digit.

The check digit is the ninth digit of a routing number. It is computed from
the first eight digits with weights ``3, 7, 1`` repeating: the weighted sum is
taken modulo 10 and subtracted from 10 (a result of 10 becomes 0).
"""

from __future__ import annotations

_WEIGHTS: tuple[int, ...] = (3, 7, 1, 3, 7, 1, 3, 7)


def _is_digits(value: str, length: int) -> bool:
    return len(value) == length and value.isascii() and value.isdigit()


def calculate_check_digit(identifier: str) -> int:
    """Return the check digit for an 8-digit routing identifier.

    Callers are expected to pass exactly eight ASCII digits; anything else
    raises ``ValueError``.
    """

    if not _is_digits(identifier, len(_WEIGHTS)):
        raise ValueError(f"routing identifier must be 8 digits: {identifier!r}")
    total = sum(int(d) * w for d, w in zip(identifier, _WEIGHTS, strict=True))
    return (10 - total % 10) % 10


def is_valid_routing_number(routing: str) -> bool:
    """True when ``routing`` is 9 digits and its last digit checks out."""

    if not _is_digits(routing, 9):
        return False
    return calculate_check_digit(routing[:8]) == int(routing[8])


__all__ = ["calculate_check_digit", "is_valid_routing_number"]
