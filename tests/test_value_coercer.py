import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from value_coercer import coerce_value, is_empty_value


def test_coercion_order():
    assert coerce_value("42") == 42 and isinstance(coerce_value("42"), int)
    assert coerce_value("42.5") == 42.5 and isinstance(coerce_value("42.5"), float)
    assert coerce_value("true") is True
    assert coerce_value("TRUE") is True
    assert coerce_value("False") is False
    assert coerce_value("hello") == "hello"
    assert coerce_value("") == ""


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("-7", -7),
        (" 12 ", 12),
        ("+3", 3),
        ("10.5", 10.5),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("-2.5E-1", -0.25),
    ],
)
def test_numbers(raw, expected):
    value = coerce_value(raw)
    assert value == expected
    assert type(value) is type(expected)


@pytest.mark.parametrize("raw", ["1,000", "1_000", "10,5", "nan", "inf", "1e999", "0x1F", "12abc", "yes"])
def test_not_numbers_stay_strings(raw):
    assert coerce_value(raw) == raw


def test_non_string_cells_go_through_text():
    assert coerce_value(None) == ""
    assert coerce_value(7) == 7
    assert coerce_value(2.5) == 2.5
    assert coerce_value(True) is True


def test_is_empty_value():
    assert is_empty_value(None)
    assert is_empty_value("")
    assert is_empty_value([])
    assert is_empty_value({})
    assert not is_empty_value(0)
    assert not is_empty_value(False)
    assert not is_empty_value(" ")
    assert not is_empty_value([0])
