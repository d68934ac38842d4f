"""
Tests for serialization of numbers and conversion records.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `digitcode.serialization`.
"""

import pytest
from digitcode.codes import parse_decimal
from digitcode.conversion import convert
from digitcode.errors import InvalidDigit
from digitcode.serialization import (
    conversion_from_dict,
    conversion_to_dict,
    conversion_to_json,
    conversion_to_yaml,
    number_from_dict,
    number_from_json,
    number_from_yaml,
    number_to_dict,
    number_to_json,
    number_to_yaml,
)


def test_number_to_dict():
    assert number_to_dict(parse_decimal("042.50")) == {"integer": "042", "fractional": "50"}


def test_number_json_roundtrip():
    number = parse_decimal("42.35")
    assert number_from_json(number_to_json(number)) == number


def test_number_yaml_roundtrip():
    """Digit strings survive YAML without turning into ints."""
    number = parse_decimal("007.0")
    assert number_from_yaml(number_to_yaml(number)) == number


def test_number_from_dict_defaults():
    assert number_from_dict({}) == parse_decimal("")


def test_number_from_dict_rejects_bad_digits():
    with pytest.raises(InvalidDigit):
        number_from_dict({"integer": "4x"})


def test_conversion_dict_roundtrip():
    conversion = convert(parse_decimal("44.51"))
    assert conversion_from_dict(conversion_to_dict(conversion)) == conversion


def test_conversion_json_is_sorted():
    text = conversion_to_json(convert(parse_decimal("5")))
    assert text == '{"aiken": "1011", "bcd": "0101", "decimal": "5", "stibitz": "1000"}'


def test_conversion_yaml():
    text = conversion_to_yaml(convert(parse_decimal("5")))
    assert "aiken: '1011'" in text
    assert "decimal: '5'" in text


@pytest.mark.parametrize("text", ["integer: 42\n", "fractional: 5\n"])
def test_number_from_yaml_rejects_unquoted_ints(text):
    """Unquoted YAML numbers are ints, not digit strings."""
    with pytest.raises(TypeError, match="digit string"):
        number_from_yaml(text)
