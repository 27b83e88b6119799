"""Error taxonomy for Entry Detail parsing, rendering, and validation.

Every failure raised by this package is a :class:`FieldError` subclass naming
the offending field (using the wire/JSON field name, e.g. ``"traceNumber"``),
the offending value, and a human-readable message. Enclosing batch/file
validators can catch ``FieldError`` once and aggregate across records.
"""

from __future__ import annotations

from typing import Any

# Message templates shared across record kinds.
MSG_FIELD_INCLUSION = "is a mandatory field and has a default value"
MSG_RECORD_TYPE = "received expecting {expected}"
MSG_TRANSACTION_CODE = "invalid transaction code"
MSG_ALPHANUMERIC = "has non alphanumeric characters"
MSG_CHECK_DIGIT = "does not match calculated check digit {expected}"
MSG_NUMERIC = "is not a valid numeric field"
MSG_OVERFLOW = "does not fit in {width} digits"
MSG_RECORD_LENGTH = "must be {expected} characters and found {found}"


class FieldError(ValueError):
    """A structured, field-scoped error.

    Attributes
    ----------
    field_name:
        Wire/JSON name of the field that failed (e.g. ``"dfiAccountNumber"``).
    value:
        The offending value as it was seen by the check.
    msg:
        Human-readable description of the failure.
    """

    def __init__(self, field_name: str, value: Any, msg: str) -> None:
        self.field_name = field_name
        self.value = value
        self.msg = msg
        super().__init__(f"{field_name} {value!r} {msg}")


class MissingRequiredField(FieldError):
    def __init__(self, field_name: str, value: Any) -> None:
        super().__init__(field_name, value, MSG_FIELD_INCLUSION)


class WrongRecordType(FieldError):
    def __init__(self, value: Any, expected: str) -> None:
        self.expected = expected
        super().__init__("recordType", value, MSG_RECORD_TYPE.format(expected=expected))


class InvalidEnumValue(FieldError):
    def __init__(self, field_name: str, value: Any, msg: str = MSG_TRANSACTION_CODE) -> None:
        super().__init__(field_name, value, msg)


class InvalidCharacterSet(FieldError):
    def __init__(self, field_name: str, value: Any) -> None:
        super().__init__(field_name, value, MSG_ALPHANUMERIC)


class CheckDigitMismatch(FieldError):
    """Raised when a stored check digit disagrees with the computed one."""

    def __init__(self, field_name: str, value: Any, expected: int) -> None:
        self.expected = expected
        super().__init__(field_name, value, MSG_CHECK_DIGIT.format(expected=expected))


class MalformedNumericField(FieldError):
    def __init__(self, field_name: str, value: Any) -> None:
        super().__init__(field_name, value, MSG_NUMERIC)


class FieldOverflow(FieldError):
    def __init__(self, field_name: str, value: Any, width: int) -> None:
        self.width = width
        super().__init__(field_name, value, MSG_OVERFLOW.format(width=width))


class RecordLengthMismatch(FieldError):
    def __init__(self, value: str, expected: int) -> None:
        self.expected = expected
        super().__init__(
            "record", value, MSG_RECORD_LENGTH.format(expected=expected, found=len(value))
        )


__all__ = [
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
