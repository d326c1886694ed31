"""
Tagged envelope decoder for operation contents.

An operation content is a JSON object whose shape depends on its `kind`.
Decoding happens in two passes. The first pass, here, reads only the `kind`
discriminant and keeps the exact source bytes as the envelope body. The
kind-specific second pass (tezwire.node.operations) re-parses the body on
demand.

The first pass never fails because a kind is new: unrecognized kinds still
produce an envelope, and only the second pass rejects them.
"""

import json
import logging
from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING, Any, Iterable

from tezwire.config.settings import settings
from tezwire.core.exceptions import MalformedPayload, MissingDiscriminant
from tezwire.core.log_utils import sanitize_for_log
from tezwire.core.rawjson import RawInput, RawValue, json_type, load, split_array, to_bytes
from tezwire.node.kinds import is_known, is_manager

if TYPE_CHECKING:
    from tezwire.node.operations import OperationBody

logger = logging.getLogger(__name__)

STAGE = "content"


@dataclass(frozen=True)
class OperationContent:
    """
    One operation content of unknown-until-decoded type.

    Attributes:
        kind: Discriminant string, matched exactly against the known kinds
        body: Exact source bytes of the JSON object, never re-serialized
    """
    kind: str
    body: bytes = field(repr=False)

    @property
    def is_known(self) -> bool:
        """Whether kind is in the recognized set."""
        return is_known(self.kind)

    @property
    def is_manager(self) -> bool:
        """Whether kind is a manager operation."""
        return is_manager(self.kind)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    def payload(self) -> dict[str, Any]:
        """Parse the body into a plain dict."""
        return json.loads(self.body)

    @cached_property
    def operation(self) -> "OperationBody":
        """Kind-specific model, decoded on first access."""
        from tezwire.node.operations import decode_operation
        return decode_operation(self)

    def decode(self) -> "OperationBody":
        """
        Run the kind-specific second pass.

        Raises:
            UnknownKind: If kind has no registered model
            MalformedNumber: If a string-wrapped numeric field is malformed
            MalformedPayload: If the body does not match the kind's model
        """
        return self.operation


def _build(value: Any, body: bytes, path: str | None = None) -> OperationContent:
    if not isinstance(value, dict):
        raise MalformedPayload(
            f"Operation content must be a JSON object, got {json_type(value)}",
            stage=STAGE,
            raw=body,
            field_name=path,
        )

    kind = value.get("kind")
    if not isinstance(kind, str):
        reason = "missing" if "kind" not in value else f"a {json_type(kind)}"
        raise MissingDiscriminant(
            f"Operation content 'kind' is {reason}, expected a string",
            stage=STAGE,
            raw=body,
            field_name=f"{path}.kind" if path else "kind",
        )

    if settings.WARN_ON_UNKNOWN_KIND and not is_known(kind):
        logger.warning(f"Unrecognized operation kind {sanitize_for_log(kind)}")

    return OperationContent(kind=kind, body=body)


def decode_content(raw: RawInput) -> OperationContent:
    """
    Decode a single operation content.

    The envelope body is the entire input, byte for byte.

    Args:
        raw: JSON object bytes or text

    Returns:
        OperationContent envelope

    Raises:
        MalformedPayload: If raw is not valid JSON or not an object
        MissingDiscriminant: If `kind` is absent or not a string
    """
    parsed = load(raw, stage=STAGE)
    return _build(parsed.value, to_bytes(raw))


def contents_from_values(items: Iterable[RawValue], path: str = "contents") -> tuple[OperationContent, ...]:
    """Build envelopes from already-split array elements."""
    return tuple(
        _build(item.value, item.raw, f"{path}[{index}]")
        for index, item in enumerate(items)
    )


def decode_contents(raw: RawInput) -> tuple[OperationContent, ...]:
    """
    Decode a JSON array of operation contents, keeping each element's span.

    Raises:
        MalformedPayload: If raw is not a JSON array or an element is not an object
        MissingDiscriminant: If an element lacks a string `kind`
    """
    return contents_from_values(split_array(raw, stage=STAGE))
