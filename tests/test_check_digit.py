import pytest

from ach_entry import calculate_check_digit, is_valid_routing_number


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        # 3+14+3+12+35+6+21+56 = 150 -> (10 - 0) % 10
        ("12345678", 0),
        ("02100002", 1),
        ("01100001", 5),
        ("12104288", 2),
        ("23138010", 4),
        ("00000000", 0),
    ],
)
def test_calculate_check_digit(identifier, expected):
    assert calculate_check_digit(identifier) == expected


@pytest.mark.parametrize("identifier", ["1234567", "123456789", "1234567a", ""])
def test_calculate_check_digit_rejects_malformed_input(identifier):
    with pytest.raises(ValueError):
        calculate_check_digit(identifier)


@pytest.mark.parametrize(
    ("routing", "valid"),
    [
        ("021000021", True),
        ("011000015", True),
        ("121042882", True),
        ("231380104", True),
        ("231380105", False),
        ("23138010", False),
        ("23138010x", False),
    ],
)
def test_is_valid_routing_number(routing, valid):
    assert is_valid_routing_number(routing) is valid
