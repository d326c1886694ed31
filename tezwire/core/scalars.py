"""
Scalar codec for numeric fields the node wraps in JSON strings.

Amounts, gas limits and deposits can exceed the 53-bit integer range that
JSON consumers agree on, so the node sends them as decimal strings
("4000000") or arrays of decimal strings (["60", "40"]). This module turns
them into Python ints and back.

Parsing is strict: an optional sign followed by ASCII digits. Whitespace,
underscores, decimal points and other bases are rejected, unlike int().
"""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer
from pydantic_core import PydanticCustomError

from tezwire.core.exceptions import MalformedNumber

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Pydantic error type for a malformed string-wrapped number
MALFORMED_NUMBER = "malformed_number"


def parse_int_string(value: Any, field_name: str | None = None) -> int:
    """
    Decode a string-wrapped base-10 integer.

    Args:
        value: JSON token, expected to be a str such as "-42"
        field_name: Field name reported in errors

    Returns:
        The integer value

    Raises:
        MalformedNumber: If value is not a str holding a base-10 integer
    """
    if not isinstance(value, str) or not _INT_PATTERN.fullmatch(value):
        raise MalformedNumber(value, field_name=field_name)
    return int(value)


def parse_int_string_list(values: Any, field_name: str | None = None) -> list[int]:
    """
    Decode an array of string-wrapped integers, preserving order.

    Elements are checked left to right and decoding stops at the first bad
    one; no partial list is returned.

    Raises:
        MalformedNumber: On a non-array input or the first malformed element
    """
    if not isinstance(values, list):
        raise MalformedNumber(values, field_name=field_name)

    result = []
    for index, item in enumerate(values):
        if not isinstance(item, str) or not _INT_PATTERN.fullmatch(item):
            raise MalformedNumber(item, field_name=field_name, index=index)
        result.append(int(item))
    return result


def format_int_string(value: int) -> str:
    """Encode an integer the way the node does: plain base-10 digits."""
    return str(int(value))


def format_int_string_list(values: list[int]) -> list[str]:
    """Encode a list of integers as a list of decimal strings."""
    return [format_int_string(v) for v in values]


def _as_validation_error(error: MalformedNumber) -> PydanticCustomError:
    return PydanticCustomError(
        MALFORMED_NUMBER,
        "{message}",
        {"message": error.message, "literal": error.literal, "index": error.index},
    )


def _validate_int_string(value: Any) -> int:
    try:
        return parse_int_string(value)
    except MalformedNumber as e:
        raise _as_validation_error(e)


def _validate_int_string_list(values: Any) -> list[int]:
    try:
        return parse_int_string_list(values)
    except MalformedNumber as e:
        raise _as_validation_error(e)


# Pydantic field types. WireModel.decode turns their errors back into
# MalformedNumber, located by the pydantic error path.
Int64String = Annotated[
    int,
    BeforeValidator(_validate_int_string),
    PlainSerializer(format_int_string, return_type=str, when_used="json"),
]

Int64StringList = Annotated[
    list[int],
    BeforeValidator(_validate_int_string_list),
    PlainSerializer(format_int_string_list, return_type=list[str], when_used="json"),
]
