"""
Block header and block metadata decoding.
"""

import logging
from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from tezwire.core.models import WireModel
from tezwire.core.rawjson import RawInput
from tezwire.core.scalars import Int64String

logger = logging.getLogger(__name__)


class Header(WireModel):
    """Shell and protocol header of a block."""

    protocol: str = Field("", description="Protocol hash")
    chain_id: str = Field("", description="Chain identifier")
    hash: str = Field("", description="Block hash")
    level: int = Field(0, ge=0, description="Block level")
    proto: int = Field(0, description="Protocol index")
    predecessor: str = Field("", description="Predecessor block hash")
    timestamp: Optional[datetime] = Field(None, description="Block timestamp")
    validation_pass: int = Field(0, description="Number of validation passes")
    operations_hash: str = Field("", description="Hash of the operation lists")
    fitness: list[str] = Field(default_factory=list, description="Fitness components, hex encoded")
    context: str = Field("", description="Context hash")
    priority: int = Field(0, description="Baking priority")
    proof_of_work_nonce: str = Field("", description="Proof-of-work nonce, hex encoded")
    signature: str = Field("", description="Baker signature")


class ChainTestStatus(WireModel):
    status: str = ""


class MaxOperationListLength(WireModel):
    max_size: int = 0
    max_op: Optional[int] = None


class LevelDetails(WireModel):
    level: int = 0
    level_position: int = 0
    cycle: int = 0
    cycle_position: int = 0
    voting_period: Optional[int] = None
    voting_period_position: Optional[int] = None
    expected_commitment: bool = False


class VotingPeriod(WireModel):
    index: int = 0
    kind: str = ""
    start_position: int = 0


class VotingPeriodInfo(WireModel):
    voting_period: VotingPeriod = Field(default_factory=VotingPeriod)
    position: int = 0
    remaining: int = 0


class BalanceUpdate(WireModel):
    """A balance change caused by baking, endorsing or fees."""
    kind: str = ""
    contract: Optional[str] = None
    change: Int64String = Field(0, description="Signed amount, in mutez")
    origin: str = ""
    category: Optional[str] = None
    delegate: Optional[str] = None
    cycle: Optional[int] = None


class HeadMetadata(WireModel):
    """Protocol metadata attached to a block."""

    protocol: str = ""
    next_protocol: str = ""
    test_chain_status: ChainTestStatus = Field(default_factory=ChainTestStatus)
    max_operations_ttl: int = 0
    max_operation_data_length: int = 0
    max_block_header_length: int = 0
    max_operation_list_length: list[MaxOperationListLength] = Field(default_factory=list)
    baker: str = ""
    level: Optional[LevelDetails] = None
    level_info: Optional[LevelDetails] = None
    voting_period_kind: str = ""
    voting_period_info: Optional[VotingPeriodInfo] = None
    nonce_hash: Optional[str] = None
    consumed_gas: Int64String = Field(0, description="Gas consumed by the block")
    deactivated: list[Any] = Field(default_factory=list)
    balance_updates: list[BalanceUpdate] = Field(default_factory=list)

    @property
    def cycle(self) -> Optional[int]:
        """Cycle of the block, from whichever level record the protocol sends."""
        details = self.level_info or self.level
        return details.cycle if details else None


def decode_header(raw: RawInput) -> Header:
    """
    Decode a block header response.

    Raises:
        MalformedPayload: On invalid JSON or a field of the wrong type
    """
    header = Header.decode(raw, stage="header")
    logger.debug(f"Decoded header at level {header.level}")
    return header


def decode_head_metadata(raw: RawInput) -> HeadMetadata:
    """
    Decode a block metadata response.

    Raises:
        MalformedNumber: If consumed_gas or a balance change is malformed
        MalformedPayload: On invalid JSON or a field of the wrong type
    """
    return HeadMetadata.decode(raw, stage="metadata")
