"""
Kind-specific decoding of operation contents.

This is the second, lazy pass over an OperationContent envelope: the body is
re-parsed against the model registered for the envelope's kind. It is the
only place an unrecognized kind becomes an error (UnknownKind); the envelope
decoder itself accepts any kind.

Manager operations carry fee, counter and limits as decimal strings and go
through the scalar codec. Members a model does not declare (metadata,
parameters, scripts) are kept as extra fields.
"""

import logging
from typing import Any, Literal, Optional, Union

from pydantic import ConfigDict, Field

from tezwire.core.exceptions import UnknownKind
from tezwire.core.models import WireModel
from tezwire.core.scalars import Int64String
from tezwire.node.content import OperationContent
from tezwire.node.kinds import OperationKind

logger = logging.getLogger(__name__)


class OperationModel(WireModel):
    """Base for kind-specific operation bodies."""
    model_config = ConfigDict(extra="allow")

    kind: str


class ManagerOperation(OperationModel):
    """Operation that pays fees and consumes gas and storage."""
    source: str = Field("", description="Implicit account paying the fee")
    fee: Int64String = Field(0, description="Fee, in mutez")
    counter: Int64String = Field(0, description="Source account counter")
    gas_limit: Int64String = Field(0, description="Gas limit")
    storage_limit: Int64String = Field(0, description="Storage limit, in bytes")


class Transaction(ManagerOperation):
    kind: Literal["transaction"]
    amount: Int64String = Field(0, description="Amount transferred, in mutez")
    destination: str = ""
    parameters: Optional[dict[str, Any]] = None


class Origination(ManagerOperation):
    kind: Literal["origination"]
    balance: Int64String = Field(0, description="Initial balance, in mutez")
    delegate: Optional[str] = None
    script: Optional[dict[str, Any]] = None


class Delegation(ManagerOperation):
    kind: Literal["delegation"]
    delegate: Optional[str] = Field(None, description="New delegate; absent to withdraw")


class Reveal(ManagerOperation):
    kind: Literal["reveal"]
    public_key: str = ""


class Endorsement(OperationModel):
    kind: Literal["endorsement"]
    level: int = Field(0, ge=0)


class InlinedEndorsement(WireModel):
    """Endorsement wrapped by endorsement_with_slot."""
    model_config = ConfigDict(extra="allow")

    branch: str = ""
    operations: Endorsement
    signature: str = ""


class EndorsementWithSlot(OperationModel):
    kind: Literal["endorsement_with_slot"]
    endorsement: InlinedEndorsement
    slot: int = Field(0, ge=0)

    @property
    def level(self) -> int:
        return self.endorsement.operations.level


class SeedNonceRevelation(OperationModel):
    kind: Literal["seed_nonce_revelation"]
    level: int = Field(0, ge=0)
    nonce: str = ""


class ActivateAccount(OperationModel):
    kind: Literal["activate_account"]
    pkh: str = ""
    secret: str = ""


class Ballot(OperationModel):
    kind: Literal["ballot"]
    source: str = ""
    period: int = 0
    proposal: str = ""
    ballot: Literal["yay", "nay", "pass"]


class Proposals(OperationModel):
    kind: Literal["proposals"]
    source: str = ""
    period: int = 0
    proposals: list[str] = Field(default_factory=list)


class DoubleBakingEvidence(OperationModel):
    kind: Literal["double_baking_evidence"]
    bh1: dict[str, Any] = Field(default_factory=dict)
    bh2: dict[str, Any] = Field(default_factory=dict)


class DoubleEndorsementEvidence(OperationModel):
    kind: Literal["double_endorsement_evidence"]
    op1: dict[str, Any] = Field(default_factory=dict)
    op2: dict[str, Any] = Field(default_factory=dict)
    slot: Optional[int] = None


OperationBody = Union[
    Transaction,
    Origination,
    Delegation,
    Reveal,
    Endorsement,
    EndorsementWithSlot,
    SeedNonceRevelation,
    ActivateAccount,
    Ballot,
    Proposals,
    DoubleBakingEvidence,
    DoubleEndorsementEvidence,
]

OPERATION_MODELS: dict[str, type[OperationModel]] = {
    OperationKind.TRANSACTION.value: Transaction,
    OperationKind.ORIGINATION.value: Origination,
    OperationKind.DELEGATION.value: Delegation,
    OperationKind.REVEAL.value: Reveal,
    OperationKind.ENDORSEMENT.value: Endorsement,
    OperationKind.ENDORSEMENT_WITH_SLOT.value: EndorsementWithSlot,
    OperationKind.NONCE_REVELATION.value: SeedNonceRevelation,
    OperationKind.ACTIVATION.value: ActivateAccount,
    OperationKind.BALLOT.value: Ballot,
    OperationKind.PROPOSAL.value: Proposals,
    OperationKind.DOUBLE_BAKING.value: DoubleBakingEvidence,
    OperationKind.DOUBLE_ENDORSING.value: DoubleEndorsementEvidence,
}


def decode_operation(content: OperationContent) -> OperationBody:
    """
    Decode an envelope's body against the model for its kind.

    Args:
        content: Envelope from the first decoding pass

    Returns:
        Kind-specific model instance

    Raises:
        UnknownKind: If no model is registered for content.kind
        MalformedNumber: If a string-wrapped numeric field is malformed
        MalformedPayload: If the body does not match the model
    """
    model = OPERATION_MODELS.get(content.kind)
    if model is None:
        raise UnknownKind(content.kind, raw=content.body)

    logger.debug(f"Decoding {content.kind} body ({len(content.body)} bytes)")
    return model.decode(content.body, stage=f"operation:{content.kind}")
