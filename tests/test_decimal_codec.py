import pytest

from modules.byte_convert.core import decimal_codec
from modules.byte_convert.core.errors import (
    CharacterError,
    RangeError,
    StructuralError,
)


@pytest.mark.parametrize(
    "tokens",
    [["12312389123912"], ["123", "0"], ["000000000000128", "255"], ["+5", "1"]],
)
def test_accepts_valid_tokens(tokens):
    decimal_codec.validate_string(tokens)


@pytest.mark.parametrize(
    "tokens, error",
    [
        (["1111111111111111111111111111111", "0"], RangeError),
        (["256", "0"], RangeError),
        (["-1", "0"], RangeError),
        (["-10"], CharacterError),
        (["0b0"], CharacterError),
        (["0x1", "2"], CharacterError),
        ([""], StructuralError),
        (["", "1"], StructuralError),
        (["+", "1"], CharacterError),
        (["+-1", "1"], CharacterError),
        (["+5"], CharacterError),
    ],
)
def test_rejects_invalid_tokens(tokens, error):
    with pytest.raises(error):
        decimal_codec.validate_string(tokens)


@pytest.mark.parametrize(
    "tokens, expected",
    [
        (["0"], [0]),
        (["1"], [1]),
        (["999"], [3, 231]),
        (["28391287459812749"], [100, 221, 185, 187, 194, 21, 141]),
        (["0", "1"], [0, 1]),
        (["000000000000128", "255"], [128, 255]),
        (["181", "80", "246", "251", "7"], [181, 80, 246, 251, 7]),
        (["+5", "+255"], [5, 255]),
    ],
)
def test_decode(tokens, expected):
    assert decimal_codec.decode(tokens) == bytes(expected)


@pytest.mark.parametrize(
    "data, concat, expected",
    [
        ([0], True, ["0"]),
        ([12], True, ["12"]),
        ([255], True, ["255"]),
        ([255, 0], True, ["65280"]),
        ([0, 255], True, ["255"]),
        ([12, 30], True, ["3102"]),
        ([11, 85, 15, 111, 183], True, ["48671715255"]),
        ([0, 255], False, ["0", "255"]),
        ([11, 85, 15, 111, 183], False, ["11", "85", "15", "111", "183"]),
    ],
)
def test_encode(data, concat, expected):
    assert decimal_codec.encode(data, concat) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("10", "5"), ("1", "0"), ("0", "0"), ("1000", "500"), ("123456789", "61728394")],
)
def test_divide_by_two(value, expected):
    assert decimal_codec.divide_by_two(value) == expected


@pytest.mark.parametrize(
    "helper",
    [decimal_codec.divide_by_two, decimal_codec.multiply_by_two, decimal_codec.add_one],
)
def test_helpers_reject_non_digits(helper):
    with pytest.raises(CharacterError):
        helper("1a")


@pytest.mark.parametrize(
    "value, expected",
    [("5", "10"), ("0", "0"), ("499", "998"), ("99999999999999999999", "199999999999999999998")],
)
def test_multiply_by_two(value, expected):
    assert decimal_codec.multiply_by_two(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("0", "1"), ("9", "10"), ("199", "200"), ("", "1")],
)
def test_add_one(value, expected):
    assert decimal_codec.add_one(value) == expected


def test_binary_decimal_helpers():
    assert decimal_codec.decimal_to_binary("0") == "00000000"
    assert decimal_codec.decimal_to_binary("000") == "00000000"
    assert decimal_codec.decimal_to_binary("6") == "110"
    assert decimal_codec.binary_to_decimal("0000") == "0"
    assert decimal_codec.binary_to_decimal("110") == "6"


def test_wide_value_survives_both_directions():
    value = "340282366920938463463374607431768211455"
    data = decimal_codec.decode([value])
    assert data == bytes([255] * 16)
    assert decimal_codec.encode(data, True) == [value]
