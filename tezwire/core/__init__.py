"""
Core decoding primitives: error hierarchy, raw-span JSON scanner and
scalar codec.
"""

from tezwire.core.exceptions import (
    DecodeError,
    MalformedPayload,
    MalformedNumber,
    MissingDiscriminant,
    InvalidShape,
    UnknownKind,
)
from tezwire.core.rawjson import RawValue, load, split_array, split_object
from tezwire.core.scalars import (
    Int64String,
    Int64StringList,
    format_int_string,
    parse_int_string,
    parse_int_string_list,
)

__all__ = [
    'DecodeError',
    'MalformedPayload',
    'MalformedNumber',
    'MissingDiscriminant',
    'InvalidShape',
    'UnknownKind',
    'RawValue',
    'load',
    'split_array',
    'split_object',
    'Int64String',
    'Int64StringList',
    'format_int_string',
    'parse_int_string',
    'parse_int_string_list',
]
