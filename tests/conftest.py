"""
Pytest configuration for TezWire.

Ensures the project root is on sys.path and selects the testing settings
before any tezwire module is imported.
"""

import os
import sys

import pytest

os.environ.setdefault("TZW_ENV", "testing")

# Compute project root (parent of this tests directory)
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)


TRANSACTION_CONTENT = (
    '{"kind": "transaction", "source": "tz1KqTpEZ7Yob7QbPE4Hy4Wo8fHG8LhKxZSx", '
    '"fee": "1420", "counter": "2265917", "gas_limit": "10307", "storage_limit": "0", '
    '"amount": "1000000", "destination": "tz1gjaF81ZRRvdzjobyfVNsAeSC6PScjfQwN"}'
)

BRANCH_REFUSED_PAIR = (
    '["opHash123", {"protocol":"P","branch":"B",'
    '"contents":[{"kind":"endorsement"}],"signature":"sig"}]'
)

APPLIED_GROUP = (
    '{"hash": "oo5xHnNyD7ozTNpXYnUcJ5gNmwEcRHE5JaQfxEtL3EKmW8oLBvg", '
    '"branch": "BLockGenesisGenesisGenesisGenesisGenesisf79b5d1CoW2", '
    '"signature": "sigTAzhy1HsZDLNETmuf9RuinhXRb5jvmscjCoPPBujWZgFmCFLffku7JXYtu8aYQFVHnCUghmd4t39RuR6ANV76bCCYTR9u", '
    '"contents": [' + TRANSACTION_CONTENT + ']}'
)

MEMPOOL_PAYLOAD = (
    '{"applied": [' + APPLIED_GROUP + '], '
    '"refused": [], '
    '"branch_refused": [' + BRANCH_REFUSED_PAIR + '], '
    '"branch_delayed": []}'
).encode("utf-8")

CONSTANTS_PAYLOAD = (
    b'{"proof_of_work_nonce_size":8,"nonce_length":32,"max_anon_ops_per_block":132,'
    b'"max_operation_data_length":16384,"max_proposals_per_delegate":20,"preserved_cycles":5,'
    b'"blocks_per_cycle":4096,"blocks_per_commitment":32,"blocks_per_roll_snapshot":256,'
    b'"blocks_per_voting_period":32768,"time_between_blocks":["60","40"],"endorsers_per_block":32,'
    b'"hard_gas_limit_per_operation":"1040000","hard_gas_limit_per_block":"10400000",'
    b'"proof_of_work_threshold":"70368744177663","tokens_per_roll":"8000000000",'
    b'"michelson_maximum_type_size":1000,"seed_nonce_revelation_tip":"125000","origination_size":257,'
    b'"block_security_deposit":"512000000","endorsement_security_deposit":"64000000",'
    b'"baking_reward_per_endorsement":["1250000","187500"],"endorsement_reward":["1250000","833333"],'
    b'"cost_per_byte":"1000","hard_storage_limit_per_operation":"60000","test_chain_duration":"1966080",'
    b'"quorum_min":2000,"quorum_max":7000,"min_proposal_quorum":500,"initial_endorsers":24,'
    b'"delay_per_missing_endorsement":"8"}'
)


@pytest.fixture
def mempool_payload() -> bytes:
    """Mempool response with one applied transaction and one branch-refused endorsement"""
    return MEMPOOL_PAYLOAD


@pytest.fixture
def constants_payload() -> bytes:
    """Constants response as returned by a Carthage node"""
    return CONSTANTS_PAYLOAD


@pytest.fixture
def transaction_content() -> bytes:
    return TRANSACTION_CONTENT.encode("utf-8")
