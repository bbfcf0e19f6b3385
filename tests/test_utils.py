import pytest

from api.shared.utils import int_or_default, normalize_currency_code, parse_int


@pytest.mark.parametrize(
    "value, expected",
    [
        ("42", 42),
        ("  7 ", 7),
        ("12abc", 12),
        ("-3", -3),
        ("3.9", 3),
        (5, 5),
        (2.7, 2),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
        (float("nan"), None),
    ],
)
def test_parse_int(value, expected):
    assert parse_int(value) == expected


def test_int_or_default():
    assert int_or_default("4", 10) == 4
    assert int_or_default("nope", 10) == 10
    assert int_or_default("0", 10) == 10
    assert int_or_default("-2", 1) == 1
    assert int_or_default("0", 10, minimum=0) == 0


@pytest.mark.parametrize(
    "code, expected",
    [("eur", "EUR"), (" gbp ", "GBP"), ("", "USD"), (None, "USD")],
)
def test_normalize_currency_code(code, expected):
    assert normalize_currency_code(code) == expected


def test_int_or_default_clamps_to_maximum():
    assert int_or_default("250", 10, maximum=100) == 100
    assert int_or_default("99999999999999999999", 10, maximum=100) == 100
    assert int_or_default("100", 10, maximum=100) == 100
    assert int_or_default("abc", 10, maximum=100) == 10
