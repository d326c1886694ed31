"""
Decoders for Tezos node RPC payloads.
"""

from tezwire.node.kinds import (
    OperationKind,
    KNOWN_KINDS,
    MANAGER_KINDS,
    is_known,
    is_manager,
)
from tezwire.node.content import OperationContent, decode_content, decode_contents
from tezwire.node.mempool import (
    AppliedOperation,
    Classification,
    FailedOperation,
    MempoolResponse,
    decode_applied,
    decode_failed,
    decode_mempool,
)
from tezwire.node.constants import Constants, decode_constants
from tezwire.node.header import Header, HeadMetadata, decode_header, decode_head_metadata
from tezwire.node.operations import OPERATION_MODELS, OperationBody, OperationModel, decode_operation

__all__ = [
    'OperationKind',
    'KNOWN_KINDS',
    'MANAGER_KINDS',
    'is_known',
    'is_manager',
    'OperationContent',
    'decode_content',
    'decode_contents',
    'AppliedOperation',
    'Classification',
    'FailedOperation',
    'MempoolResponse',
    'decode_applied',
    'decode_failed',
    'decode_mempool',
    'Constants',
    'decode_constants',
    'Header',
    'HeadMetadata',
    'decode_header',
    'decode_head_metadata',
    'OPERATION_MODELS',
    'OperationBody',
    'OperationModel',
    'decode_operation',
]
