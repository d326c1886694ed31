"""
TezWire
=======

Typed decoding of Tezos node RPC payloads: mempool snapshots, operation
envelopes, network constants and block headers.
"""

VERSION = (0, 3, 0, "final", 0)

from tezwire.units.version import get_version  # noqa: E402

__version__ = get_version(VERSION)

__all__ = ["VERSION", "__version__"]
