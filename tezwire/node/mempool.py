"""
Mempool snapshot decoding.

The node's pending-operations RPC classifies every operation it knows about
into one of four sets. Applied operations are plain objects carrying their own
hash. Refused, branch-refused and branch-delayed operations are positional
pairs `[hash, {protocol, branch, contents, signature, error?}]` and need a
manual two-phase decode: the hash comes from the array, the rest from the
object.

Every group keeps its raw bytes. Rejected groups keep two spans: the whole
pair and the inner operation object, since consumers need one or the other.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, TypeVar

from tezwire.core.exceptions import DecodeError, InvalidShape, MalformedPayload
from tezwire.core.rawjson import (
    RawInput,
    RawValue,
    json_type,
    split_array,
    split_object,
    to_bytes,
    to_text,
)
from tezwire.node.content import OperationContent, contents_from_values

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Classification(str, Enum):
    """Mempool classification of an operation."""
    APPLIED = "applied"
    REFUSED = "refused"
    BRANCH_REFUSED = "branch_refused"
    BRANCH_DELAYED = "branch_delayed"


@dataclass(frozen=True)
class AppliedOperation:
    """An operation the mempool accepted."""
    hash: str
    branch: str
    signature: str
    contents: tuple[OperationContent, ...]
    raw: bytes = field(repr=False)


@dataclass(frozen=True)
class FailedOperation:
    """
    An operation the mempool did not accept.

    The hash is taken from the outer wire pair; a `hash` member inside the
    operation object, if any, is ignored.
    """
    hash: str
    protocol: str
    branch: str
    contents: tuple[OperationContent, ...]
    signature: str
    error: bytes | None = field(default=None, repr=False)
    raw: bytes = field(default=b"", repr=False)
    operation_raw: bytes = field(default=b"", repr=False)

    def errors(self) -> list[dict[str, Any]]:
        """Parse the node's error blob; empty when the node sent none."""
        if self.error is None:
            return []
        parsed = json.loads(self.error)
        return parsed if isinstance(parsed, list) else [parsed]


@dataclass(frozen=True)
class MempoolResponse:
    """Pending operations grouped by mempool classification. Not deduplicated."""
    applied: tuple[AppliedOperation, ...] = ()
    refused: tuple[FailedOperation, ...] = ()
    branch_refused: tuple[FailedOperation, ...] = ()
    branch_delayed: tuple[FailedOperation, ...] = ()

    def iter_failed(self) -> Iterator[tuple[Classification, FailedOperation]]:
        """Yield every rejected operation with its classification."""
        for op in self.refused:
            yield Classification.REFUSED, op
        for op in self.branch_refused:
            yield Classification.BRANCH_REFUSED, op
        for op in self.branch_delayed:
            yield Classification.BRANCH_DELAYED, op

    def counts(self) -> dict[str, int]:
        """Number of operations per classification."""
        return {
            Classification.APPLIED.value: len(self.applied),
            Classification.REFUSED.value: len(self.refused),
            Classification.BRANCH_REFUSED.value: len(self.branch_refused),
            Classification.BRANCH_DELAYED.value: len(self.branch_delayed),
        }

    def __len__(self) -> int:
        return sum(self.counts().values())


def _string_field(members: dict[str, RawValue], name: str, stage: str) -> str:
    item = members.get(name)
    if item is None or item.value is None:
        return ""
    if not isinstance(item.value, str):
        raise MalformedPayload(
            f"Field '{name}' must be a string, got {json_type(item.value)}",
            stage=stage,
            raw=item.text,
            field_name=name,
        )
    return item.value


def _array_field(members: dict[str, RawValue], name: str, stage: str) -> list[RawValue]:
    item = members.get(name)
    if item is None or item.value is None:
        return []
    if not isinstance(item.value, list):
        raise MalformedPayload(
            f"Field '{name}' must be an array, got {json_type(item.value)}",
            stage=stage,
            raw=item.text,
            field_name=name,
        )
    return split_array(item.raw, stage=stage)


def decode_applied(raw: RawInput) -> AppliedOperation:
    """
    Decode an applied operation object `{hash, branch, signature, contents}`.

    Raises:
        MalformedPayload: On invalid JSON or a field of the wrong JSON type
        MissingDiscriminant: If a content lacks a string `kind`
    """
    stage = Classification.APPLIED.value
    members = split_object(raw, stage=stage)
    return AppliedOperation(
        hash=_string_field(members, "hash", stage),
        branch=_string_field(members, "branch", stage),
        signature=_string_field(members, "signature", stage),
        contents=contents_from_values(_array_field(members, "contents", stage)),
        raw=to_bytes(raw),
    )


def decode_failed(raw: RawInput) -> FailedOperation:
    """
    Decode a rejected operation wire pair `[hash, {...}]`.

    Args:
        raw: JSON array bytes or text

    Returns:
        FailedOperation with hash from element 0 and fields from element 1

    Raises:
        InvalidShape: If the array does not have exactly two elements
        MalformedPayload: On invalid JSON, a non-array, a non-string hash or
            a non-object operation
        MissingDiscriminant: If a content lacks a string `kind`
    """
    stage = "failed"
    text = to_text(raw, stage)
    items = split_array(text, stage=stage)
    if len(items) != 2:
        raise InvalidShape(
            f"Invalid failed operation body {text}",
            raw=text,
            expected=2,
            actual=len(items),
            stage=stage,
        )

    hash_item, op_item = items
    if not isinstance(hash_item.value, str):
        raise MalformedPayload(
            f"Failed operation hash must be a string, got {json_type(hash_item.value)}",
            stage=stage,
            raw=text,
            field_name="hash",
        )
    if not isinstance(op_item.value, dict):
        raise MalformedPayload(
            f"Failed operation body must be an object, got {json_type(op_item.value)}",
            stage=stage,
            raw=text,
            field_name="operation",
        )

    members = split_object(op_item.raw, stage=stage)
    if "hash" in members:
        logger.debug(f"Ignoring inner hash of failed operation {hash_item.value}")

    error = members.get("error")
    return FailedOperation(
        hash=hash_item.value,
        protocol=_string_field(members, "protocol", stage),
        branch=_string_field(members, "branch", stage),
        contents=contents_from_values(_array_field(members, "contents", stage)),
        signature=_string_field(members, "signature", stage),
        error=error.raw if error is not None and error.value is not None else None,
        raw=to_bytes(raw),
        operation_raw=op_item.raw,
    )


def _decode_each(items: list[RawValue], decoder: Callable[[RawInput], T], path: str) -> tuple[T, ...]:
    result = []
    for index, item in enumerate(items):
        try:
            result.append(decoder(item.raw))
        except DecodeError as e:
            location = f"{path}[{index}]"
            e.field_name = f"{location}.{e.field_name}" if e.field_name else location
            raise
    return tuple(result)


def decode_mempool(raw: RawInput) -> MempoolResponse:
    """
    Decode a pending-operations response.

    Absent or null classification keys decode as empty sequences. Any nested
    failure fails the whole snapshot; the error's field_name locates the
    offending operation, e.g. `branch_refused[2].contents[0].kind`.

    Raises:
        MalformedPayload, InvalidShape, MissingDiscriminant
    """
    stage = "mempool"
    members = split_object(raw, stage=stage)

    response = MempoolResponse(
        applied=_decode_each(
            _array_field(members, Classification.APPLIED.value, stage),
            decode_applied,
            Classification.APPLIED.value,
        ),
        refused=_decode_each(
            _array_field(members, Classification.REFUSED.value, stage),
            decode_failed,
            Classification.REFUSED.value,
        ),
        branch_refused=_decode_each(
            _array_field(members, Classification.BRANCH_REFUSED.value, stage),
            decode_failed,
            Classification.BRANCH_REFUSED.value,
        ),
        branch_delayed=_decode_each(
            _array_field(members, Classification.BRANCH_DELAYED.value, stage),
            decode_failed,
            Classification.BRANCH_DELAYED.value,
        ),
    )

    logger.debug(f"Decoded mempool snapshot: {response.counts()}")
    return response
