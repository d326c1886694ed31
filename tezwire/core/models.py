"""
Pydantic base for wire-facing records.

Records decoded straight from node JSON (constants, headers, operation
bodies) derive from WireModel. Validation runs in strict mode, so a JSON
string is never silently coerced into an int field; fields the node wraps in
strings use the scalar codec types instead. Pydantic errors are mapped onto
the TezWire error hierarchy so callers only ever handle DecodeError.
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from tezwire.core.exceptions import MalformedNumber, MalformedPayload
from tezwire.core.rawjson import RawInput, to_bytes
from tezwire.core.scalars import MALFORMED_NUMBER

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="WireModel")


def _location(error: dict[str, Any]) -> str:
    """Render a pydantic error location as a path, e.g. balance_updates[1].change"""
    path = ""
    for part in error.get("loc", ()):
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


class WireModel(BaseModel):
    """Immutable record decoded from a node JSON payload."""
    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    @classmethod
    def decode(cls: type[M], raw: RawInput, stage: str | None = None) -> M:
        """
        Decode raw JSON into this model.

        Args:
            raw: JSON object bytes or text
            stage: Decoder stage name used in error context

        Raises:
            MalformedNumber: If a string-wrapped numeric field is malformed
            MalformedPayload: On invalid JSON or any other schema mismatch
        """
        stage = stage or cls.__name__.lower()
        data = to_bytes(raw, stage)
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            errors = e.errors()

            numbers = [error for error in errors if error["type"] == MALFORMED_NUMBER]
            if numbers:
                context = numbers[0].get("ctx", {})
                error = MalformedNumber(
                    context.get("literal"),
                    field_name=_location(numbers[0]) or None,
                    index=context.get("index"),
                    stage=stage,
                )
                error.original_error = e
                raise error

            first = errors[0] if errors else {}
            raise MalformedPayload(
                f"{cls.__name__} payload does not match schema: "
                f"{first.get('msg', 'invalid')} ({e.error_count()} error(s))",
                stage=stage,
                raw=data,
                field_name=_location(first) or None,
                original_error=e,
            )

    def to_wire(self) -> dict[str, Any]:
        """Encode back to the node's JSON shape, string-wrapped fields included."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
