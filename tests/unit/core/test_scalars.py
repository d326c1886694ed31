"""
Test suite for the scalar codec

Covers string-wrapped integers and string-array integer lists, including
the strictness rules that set them apart from int().
"""

import pytest
from hypothesis import given, strategies as st

from tezwire.core.exceptions import MalformedNumber
from tezwire.core.scalars import (
    format_int_string,
    format_int_string_list,
    parse_int_string,
    parse_int_string_list,
)


@given(st.integers())
def test_int_string_round_trip(value):
    """Decoding an encoded integer gives the same value back"""
    assert parse_int_string(format_int_string(value)) == value


@given(st.integers(min_value=0), st.integers(min_value=1, max_value=5))
def test_leading_zeros_preserve_value(value, zeros):
    assert parse_int_string("0" * zeros + str(value)) == value


def test_parse_int_string_values():
    assert parse_int_string("0") == 0
    assert parse_int_string("-42") == -42
    assert parse_int_string("+7") == 7
    assert parse_int_string("70368744177663") == 70368744177663
    # Beyond int64: still decoded exactly
    assert parse_int_string("9" * 40) == int("9" * 40)


@pytest.mark.parametrize("literal", [
    "", "abc", "1.5", " 1", "1 ", "1_000", "0x10", "+", "-", "1e3", "١٢",
])
def test_parse_int_string_rejects_non_decimal(literal):
    with pytest.raises(MalformedNumber) as exc_info:
        parse_int_string(literal)

    assert exc_info.value.literal == literal
    assert exc_info.value.raw == literal


@pytest.mark.parametrize("token", [5, None, 1.0, ["1"], True])
def test_parse_int_string_rejects_non_string_tokens(token):
    with pytest.raises(MalformedNumber):
        parse_int_string(token)


def test_parse_int_string_reports_field_name():
    with pytest.raises(MalformedNumber) as exc_info:
        parse_int_string("ten", field_name="tokens_per_roll")

    assert exc_info.value.field_name == "tokens_per_roll"
    assert "ten" in str(exc_info.value)


def test_parse_int_string_list_keeps_order():
    assert parse_int_string_list(["60", "40"]) == [60, 40]
    assert parse_int_string_list([]) == []


@given(st.lists(st.integers()))
def test_int_string_list_round_trip(values):
    assert parse_int_string_list(format_int_string_list(values)) == values


def test_parse_int_string_list_stops_at_first_bad_element():
    with pytest.raises(MalformedNumber) as exc_info:
        parse_int_string_list(["60", "abc", "xyz"])

    assert exc_info.value.literal == "abc"
    assert exc_info.value.index == 1


def test_parse_int_string_list_rejects_non_string_element():
    with pytest.raises(MalformedNumber) as exc_info:
        parse_int_string_list(["60", 40])

    assert exc_info.value.literal == 40
    assert exc_info.value.index == 1


@pytest.mark.parametrize("value", ["60", None, {"a": "1"}, 60])
def test_parse_int_string_list_rejects_non_array(value):
    with pytest.raises(MalformedNumber):
        parse_int_string_list(value)


def test_parse_int_string_benchmark(benchmark):
    """Benchmark decoding of a large reward table"""
    table = [str(i * 1250000) for i in range(1000)]
    result = benchmark(parse_int_string_list, table)
    assert result[-1] == 999 * 1250000
