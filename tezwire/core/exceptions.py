"""
Decode error hierarchy for TezWire.

Every error carries enough context to diagnose a failure without fetching
the payload from the node again: the decoding stage, the offending raw
fragment (kept verbatim) and, where known, the field name.
"""

from typing import Any, Optional

from tezwire.core.log_utils import sanitize_for_log


class DecodeError(Exception):
    """Base exception for all payload decoding errors."""

    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        raw: Optional[str | bytes] = None,
        field_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.stage = stage
        self.raw = raw
        self.field_name = field_name
        self.original_error = original_error

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "stage": self.stage,
            "field_name": self.field_name,
            "raw": sanitize_for_log(self.raw) if self.raw is not None else None,
            "original_error": str(self.original_error) if self.original_error else None,
        }

    def __str__(self) -> str:
        parts = [self.message]
        if self.stage:
            parts.append(f"[stage={self.stage}]")
        if self.field_name:
            parts.append(f"[field={self.field_name}]")
        if self.original_error:
            parts.append(f"(caused by: {self.original_error})")
        return " ".join(parts)


class MalformedPayload(DecodeError):
    """Payload is not valid JSON or a structural field has the wrong JSON type."""
    pass


class MalformedNumber(DecodeError):
    """A numeric field's textual form does not parse as a base-10 integer."""

    def __init__(
        self,
        literal: Any,
        field_name: Optional[str] = None,
        index: Optional[int] = None,
        stage: Optional[str] = "scalar",
    ) -> None:
        position = f" at index {index}" if index is not None else ""
        super().__init__(
            f"Malformed number {literal!r}{position}",
            stage=stage,
            raw=literal if isinstance(literal, str) else repr(literal),
            field_name=field_name,
        )
        self.literal = literal
        self.index = index

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = super().to_dict()
        data.update({
            "literal": sanitize_for_log(self.literal),
            "index": self.index,
        })
        return data


class MissingDiscriminant(DecodeError):
    """Operation object has no usable string `kind` field."""
    pass


class InvalidShape(DecodeError):
    """A fixed-size wire array has the wrong number of elements."""

    def __init__(
        self,
        message: str,
        raw: str | bytes,
        expected: int,
        actual: int,
        stage: Optional[str] = None,
    ) -> None:
        super().__init__(message, stage=stage, raw=raw)
        self.expected = expected
        self.actual = actual

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = super().to_dict()
        data.update({
            "expected": self.expected,
            "actual": self.actual,
        })
        return data


class UnknownKind(DecodeError):
    """Kind-specific decoding was requested for an unrecognized kind."""

    def __init__(self, kind: str, raw: Optional[str | bytes] = None) -> None:
        super().__init__(
            f"Unknown operation kind {kind!r}",
            stage="operation",
            raw=raw,
            field_name="kind",
        )
        self.kind = kind

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = super().to_dict()
        data["kind"] = self.kind
        return data
