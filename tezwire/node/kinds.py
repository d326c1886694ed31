"""
Operation kind table for Tezos node payloads.
"""

from enum import Enum


class OperationKind(str, Enum):
    """Operation kinds the decoder recognizes."""
    ACTIVATION = "activate_account"
    BALLOT = "ballot"
    DELEGATION = "delegation"
    DOUBLE_BAKING = "double_baking_evidence"
    DOUBLE_ENDORSING = "double_endorsement_evidence"
    ENDORSEMENT = "endorsement"
    ENDORSEMENT_WITH_SLOT = "endorsement_with_slot"
    ORIGINATION = "origination"
    PROPOSAL = "proposals"
    REVEAL = "reveal"
    NONCE_REVELATION = "seed_nonce_revelation"
    TRANSACTION = "transaction"


KNOWN_KINDS: frozenset[str] = frozenset(kind.value for kind in OperationKind)

# Kinds that debit/credit a balance and consume gas and storage
MANAGER_KINDS: frozenset[str] = frozenset({
    OperationKind.DELEGATION.value,
    OperationKind.ORIGINATION.value,
    OperationKind.REVEAL.value,
    OperationKind.TRANSACTION.value,
})


def is_known(kind: str) -> bool:
    """Check if kind is in the recognized set. Matching is exact and case-sensitive."""
    return kind in KNOWN_KINDS


def is_manager(kind: str) -> bool:
    """Check if kind is a manager operation (fee and gas accounting applies)."""
    return kind in MANAGER_KINDS
