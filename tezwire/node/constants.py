"""
Network constants decoding.

The constants RPC returns protocol tunables. Most are JSON integers; the ones
that can grow beyond 53 bits (deposits, gas limits, thresholds) are decimal
strings, and per-slot tables are arrays of decimal strings. A single bad
field fails the whole record: fee and reward computations downstream need
every value to be trustworthy.
"""

import logging

from pydantic import Field

from tezwire.core.models import WireModel
from tezwire.core.rawjson import RawInput
from tezwire.core.scalars import Int64String, Int64StringList

logger = logging.getLogger(__name__)

# Fields the node encodes as decimal strings
STRING_INT_FIELDS = (
    "hard_gas_limit_per_operation",
    "hard_gas_limit_per_block",
    "proof_of_work_threshold",
    "tokens_per_roll",
    "seed_nonce_revelation_tip",
    "block_security_deposit",
    "endorsement_security_deposit",
    "cost_per_byte",
    "hard_storage_limit_per_operation",
    "test_chain_duration",
    "delay_per_missing_endorsement",
)

# Fields the node encodes as arrays of decimal strings; order is significant
STRING_INT_LIST_FIELDS = (
    "time_between_blocks",
    "baking_reward_per_endorsement",
    "endorsement_reward",
)


class Constants(WireModel):
    """Protocol constants of the chain the node runs."""

    proof_of_work_nonce_size: int = Field(0, description="Size of the proof-of-work nonce in bytes")
    nonce_length: int = Field(0, description="Length of seed nonces in bytes")
    max_anon_ops_per_block: int = Field(0, description="Maximum anonymous operations per block")
    max_operation_data_length: int = Field(0, description="Maximum serialized operation size in bytes")
    max_proposals_per_delegate: int = Field(0, description="Maximum proposals a delegate may submit per period")
    preserved_cycles: int = Field(0, ge=0, description="Cycles during which deposits are frozen")
    blocks_per_cycle: int = Field(0, ge=0, description="Blocks in one cycle")
    blocks_per_commitment: int = Field(0, description="Blocks between seed nonce commitments")
    blocks_per_roll_snapshot: int = Field(0, description="Blocks between roll snapshots")
    blocks_per_voting_period: int = Field(0, description="Blocks in one voting period")
    time_between_blocks: Int64StringList = Field(
        default_factory=list, description="Minimal delay between blocks per priority, in seconds"
    )
    endorsers_per_block: int = Field(0, description="Endorsement slots per block")
    hard_gas_limit_per_operation: Int64String = Field(0, description="Gas limit of a single operation")
    hard_gas_limit_per_block: Int64String = Field(0, description="Gas limit of a block")
    proof_of_work_threshold: Int64String = Field(0, description="Proof-of-work threshold")
    tokens_per_roll: Int64String = Field(0, description="Mutez per roll")
    michelson_maximum_type_size: int = Field(0, description="Maximum size of a Michelson type")
    seed_nonce_revelation_tip: Int64String = Field(0, description="Reward for revealing a seed nonce, in mutez")
    origination_size: int = Field(0, description="Storage bytes burnt by an origination")
    block_security_deposit: Int64String = Field(0, description="Baker deposit per block, in mutez")
    endorsement_security_deposit: Int64String = Field(0, description="Endorser deposit per slot, in mutez")
    baking_reward_per_endorsement: Int64StringList = Field(
        default_factory=list, description="Baking reward per included endorsement, by priority tier"
    )
    endorsement_reward: Int64StringList = Field(
        default_factory=list, description="Endorsement reward per slot, by priority tier"
    )
    cost_per_byte: Int64String = Field(0, description="Storage cost per byte, in mutez")
    hard_storage_limit_per_operation: Int64String = Field(0, description="Storage limit of a single operation")
    test_chain_duration: Int64String = Field(0, description="Lifetime of a test chain, in seconds")
    quorum_min: int = Field(0, description="Minimum quorum, in centile")
    quorum_max: int = Field(0, description="Maximum quorum, in centile")
    min_proposal_quorum: int = Field(0, description="Minimum proposal quorum, in centile")
    initial_endorsers: int = Field(0, description="Endorsements needed for the minimal block delay")
    delay_per_missing_endorsement: Int64String = Field(
        0, description="Extra delay per missing endorsement, in seconds"
    )

    def block_delay(self, priority: int = 0) -> int:
        """
        Minimal delay for a block baked at priority.

        Priorities past the end of time_between_blocks use the last entry.
        """
        if not self.time_between_blocks:
            return 0
        index = min(max(priority, 0), len(self.time_between_blocks) - 1)
        return self.time_between_blocks[index]


def decode_constants(raw: RawInput) -> Constants:
    """
    Decode a constants response.

    Missing fields take their zero value; unknown fields are ignored.

    Raises:
        MalformedNumber: If a string-wrapped field does not parse
        MalformedPayload: On invalid JSON or a plain field of the wrong type
    """
    constants = Constants.decode(raw, stage="constants")
    logger.debug(f"Decoded constants: blocks_per_cycle={constants.blocks_per_cycle}")
    return constants
