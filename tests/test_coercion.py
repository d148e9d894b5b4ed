import math

import pytest

from services.coercion import INVALID, coerce_column, coerce_numeric, is_invalid


@pytest.mark.parametrize("raw, expected", [
    ("42", 42.0),
    ("-3.5", -3.5),
    ("+7", 7.0),
    ("0.25", 0.25),
    (".5", 0.5),
    ("5.", 5.0),
    ("1e3", 1000.0),
    ("2.5E-2", 0.025),
    ("  12", 12.0),
])
def test_coerce_numeric_parses_decimal_numbers(raw, expected):
    assert coerce_numeric(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["", "   ", "abc", "n/a", "-", ".", "NaN", "e5", None, "\u0663", "\uff11\uff12"])
def test_coerce_numeric_rejects_non_numbers(raw):
    assert is_invalid(coerce_numeric(raw))


def test_coerce_numeric_uses_leading_numeric_portion():
    assert coerce_numeric("12.5 kg") == 12.5
    assert coerce_numeric("3px") == 3.0
    assert coerce_numeric("1e") == 1.0


def test_coerce_numeric_ignores_thousands_separators():
    assert coerce_numeric("1,234") == 1.0


def test_coerce_numeric_accepts_infinity_literal():
    assert coerce_numeric("Infinity") == math.inf
    assert coerce_numeric("-Infinity") == -math.inf
    assert is_invalid(coerce_numeric("inf"))


def test_is_invalid():
    assert is_invalid(INVALID)
    assert is_invalid(None)
    assert not is_invalid(0.0)
    assert not is_invalid(3)


def test_coerce_column_counts_failures():
    series = coerce_column(["1", "x", "", "4"])
    assert series.invalid_count == 2
    assert series.valid_count == 2
    assert series.values[0] == 1.0
    assert math.isnan(series.values[1])
    assert series.values[3] == 4.0


def test_non_ascii_digits_after_ascii_ones_are_ignored():
    assert coerce_numeric("7\u0663") == 7.0
