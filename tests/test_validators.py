import pytest

from ach_entry.validators import (
    is_alphanumeric_legal,
    is_field_present,
    is_transaction_code_legal,
)


@pytest.mark.parametrize("code", [22, 23, 27, 28, 32, 33, 37, 38])
def test_legal_transaction_codes(code):
    assert is_transaction_code_legal(code)


@pytest.mark.parametrize("code", [0, 21, 24, 29, 31, 99, 220])
def test_illegal_transaction_codes(code):
    assert not is_transaction_code_legal(code)


@pytest.mark.parametrize(
    "value",
    ["", "Wade Arnold", "ACME CO. #42", "A&B/C-D (E)", "x@y.com", "[]{}|~^_\\"],
)
def test_alphanumeric_legal(value):
    assert is_alphanumeric_legal(value)


@pytest.mark.parametrize("value", ["José", "tab\there", "back`tick", "line\nbreak", "©"])
def test_alphanumeric_illegal(value):
    assert not is_alphanumeric_legal(value)


@pytest.mark.parametrize(
    ("value", "present"),
    [
        (None, False),
        (0, False),
        ("", False),
        ("   ", False),
        (1, True),
        ("0", True),
        (" x ", True),
    ],
)
def test_is_field_present(value, present):
    assert is_field_present(value) is present
