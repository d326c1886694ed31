"""
Test suite for kind-specific operation decoding
"""

from typing import get_args

import pytest

from tezwire.core.exceptions import MalformedNumber, MalformedPayload, UnknownKind
from tezwire.node.content import decode_content
from tezwire.node.kinds import KNOWN_KINDS
from tezwire.node.operations import (
    OPERATION_MODELS,
    OperationBody,
    Ballot,
    Delegation,
    EndorsementWithSlot,
    ManagerOperation,
    Transaction,
    decode_operation,
)


def test_every_known_kind_has_a_model():
    assert set(OPERATION_MODELS) == KNOWN_KINDS


def test_operation_body_covers_every_model():
    assert set(get_args(OperationBody)) == set(OPERATION_MODELS.values())


def test_transaction_decoding(transaction_content):
    content = decode_content(transaction_content)
    op = content.decode()

    assert isinstance(op, Transaction)
    assert isinstance(op, ManagerOperation)
    assert op.fee == 1420
    assert op.counter == 2265917
    assert op.gas_limit == 10307
    assert op.storage_limit == 0
    assert op.amount == 1000000
    assert op.destination == "tz1gjaF81ZRRvdzjobyfVNsAeSC6PScjfQwN"


def test_decode_is_cached(transaction_content):
    content = decode_content(transaction_content)
    assert content.decode() is content.decode()


def test_unknown_members_are_kept():
    content = decode_content(
        b'{"kind": "delegation", "source": "tz1a", "fee": "1257", "counter": "1", '
        b'"gas_limit": "10000", "storage_limit": "0", "delegate": "tz1b", '
        b'"metadata": {"balance_updates": []}}'
    )
    op = content.decode()

    assert isinstance(op, Delegation)
    assert op.delegate == "tz1b"
    assert op.model_extra["metadata"] == {"balance_updates": []}


def test_unknown_kind_fails_only_on_second_pass():
    content = decode_content(b'{"kind": "smart_rollup_publish", "rollup": "sr1"}')

    with pytest.raises(UnknownKind) as exc_info:
        content.decode()

    assert exc_info.value.kind == "smart_rollup_publish"
    assert exc_info.value.raw == content.body


def test_case_variant_kind_is_unknown():
    with pytest.raises(UnknownKind):
        decode_operation(decode_content(b'{"kind": "Transaction"}'))


def test_malformed_fee_reports_field_and_stage():
    content = decode_content(b'{"kind": "transaction", "fee": "14.20"}')

    with pytest.raises(MalformedNumber) as exc_info:
        content.decode()

    assert exc_info.value.field_name == "fee"
    assert exc_info.value.literal == "14.20"
    assert exc_info.value.stage == "operation:transaction"


def test_numeric_fee_is_malformed():
    with pytest.raises(MalformedNumber):
        decode_content(b'{"kind": "reveal", "fee": 1420}').decode()


def test_endorsement_with_slot():
    content = decode_content(
        b'{"kind": "endorsement_with_slot", "endorsement": {"branch": "BL1", '
        b'"operations": {"kind": "endorsement", "level": 1024}, "signature": "sig"}, "slot": 7}'
    )
    op = content.decode()

    assert isinstance(op, EndorsementWithSlot)
    assert op.level == 1024
    assert op.slot == 7
    assert op.endorsement.branch == "BL1"


def test_endorsement_without_level():
    op = decode_content(b'{"kind": "endorsement"}').decode()
    assert op.level == 0


@pytest.mark.parametrize("raw", [
    b'{"kind": "endorsement", "level": "5"}',
    b'{"kind": "ballot", "source": "tz1", "period": 3, "proposal": "Pt", "ballot": "maybe"}',
    b'{"kind": "proposals", "proposals": "Pt"}',
    b'{"kind": "endorsement_with_slot", "slot": 1}',
])
def test_body_schema_mismatch(raw):
    with pytest.raises(MalformedPayload):
        decode_content(raw).decode()


def test_ballot():
    op = decode_content(
        b'{"kind": "ballot", "source": "tz1", "period": 3, "proposal": "PtEdo", "ballot": "yay"}'
    ).decode()

    assert isinstance(op, Ballot)
    assert op.ballot == "yay"
    assert op.period == 3


def test_to_wire_round_trips_string_fields(transaction_content):
    wire = decode_content(transaction_content).decode().to_wire()

    assert wire["kind"] == "transaction"
    assert wire["fee"] == "1420"
    assert wire["amount"] == "1000000"
