"""
Raw-span JSON splitting for TezWire.

Operation bodies are hashed and signed byte-for-byte, so an envelope must
keep the exact text it was parsed from, not a re-serialization. msgspec.Raw
holds an undecoded JSON value as a view of the input buffer; decoding the
top level of an array or object into Raw elements gives each element's
exact source span, which is then decoded on its own for the parsed value.
"""

import logging
from typing import Any, NamedTuple

import msgspec

from tezwire.core.exceptions import MalformedPayload

logger = logging.getLogger(__name__)

RawInput = bytes | bytearray | memoryview | str

_JSON_WHITESPACE = b" \t\n\r"

# Pre-compiled decoders
_value_decoder = msgspec.json.Decoder()
_array_decoder = msgspec.json.Decoder(list[msgspec.Raw])
_object_decoder = msgspec.json.Decoder(dict[str, msgspec.Raw])


class RawValue(NamedTuple):
    """A parsed JSON value together with the exact bytes it was parsed from."""
    value: Any
    raw: bytes

    @property
    def text(self) -> str:
        """Source span as text."""
        return self.raw.decode("utf-8")


def json_type(value: Any) -> str:
    """Name of the JSON type a parsed value came from."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def to_bytes(raw: RawInput, stage: str | None = None) -> bytes:
    """Raw payload as bytes, failing on text that cannot be UTF-8 encoded."""
    if isinstance(raw, str):
        try:
            return raw.encode("utf-8")
        except UnicodeEncodeError as e:
            raise MalformedPayload(
                "Payload text is not encodable as UTF-8",
                stage=stage,
                raw=raw,
                original_error=e,
            )
    return bytes(raw)


def to_text(raw: RawInput, stage: str | None = None) -> str:
    """Decode a raw payload to text, failing on invalid UTF-8."""
    if isinstance(raw, str):
        return raw
    data = bytes(raw)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedPayload(
            "Payload is not valid UTF-8",
            stage=stage,
            raw=data,
            original_error=e,
        )


def _prepare(raw: RawInput, stage: str | None) -> bytes:
    data = to_bytes(raw, stage)
    if not isinstance(raw, str):
        # Validate up front so every span decodes to text later
        to_text(data, stage)
    return data


def _decode(decoder: msgspec.json.Decoder, data: bytes, stage: str | None) -> Any:
    try:
        return decoder.decode(data)
    except msgspec.ValidationError as e:
        raise MalformedPayload(
            f"Unexpected JSON shape: {e}",
            stage=stage,
            raw=data,
            original_error=e,
        )
    except msgspec.DecodeError as e:
        raise MalformedPayload(
            f"Invalid JSON: {e}",
            stage=stage,
            raw=data,
            original_error=e,
        )
    except RecursionError as e:
        raise MalformedPayload(
            "Invalid JSON: nesting too deep",
            stage=stage,
            raw=data,
            original_error=e,
        )


def _raw_value(span: msgspec.Raw, stage: str | None) -> RawValue:
    raw = bytes(span)
    return RawValue(_decode(_value_decoder, raw, stage), raw)


def load(raw: RawInput, stage: str | None = None) -> RawValue:
    """
    Parse a complete JSON document.

    Args:
        raw: Payload bytes or text
        stage: Decoder stage name used in error context

    Returns:
        RawValue holding the parsed value and the exact value span
    """
    data = _prepare(raw, stage)
    value = _decode(_value_decoder, data, stage)
    return RawValue(value, data.strip(_JSON_WHITESPACE))


def split_array(raw: RawInput, stage: str | None = None) -> list[RawValue]:
    """
    Split a JSON array into its elements, keeping each element's source span.

    Args:
        raw: Payload bytes or text holding a JSON array
        stage: Decoder stage name used in error context

    Returns:
        List of RawValue, in array order

    Raises:
        MalformedPayload: If the payload is not a well-formed JSON array
    """
    data = _prepare(raw, stage)
    spans = _decode(_array_decoder, data, stage)
    return [_raw_value(span, stage) for span in spans]


def split_object(raw: RawInput, stage: str | None = None) -> dict[str, RawValue]:
    """
    Split a JSON object into its members, keeping each value's source span.

    Duplicate keys resolve to the last occurrence.

    Args:
        raw: Payload bytes or text holding a JSON object
        stage: Decoder stage name used in error context

    Returns:
        Mapping of member name to RawValue, in document order

    Raises:
        MalformedPayload: If the payload is not a well-formed JSON object
    """
    data = _prepare(raw, stage)
    spans = _decode(_object_decoder, data, stage)
    members = {key: _raw_value(span, stage) for key, span in spans.items()}
    logger.debug(f"Split object with {len(members)} members")
    return members
