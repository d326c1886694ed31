"""
Version utility functions for TezWire.

Turns the package VERSION tuple into a PEP 440 version string.
"""

from typing import Tuple, Optional


def get_version(version: Optional[Tuple[int, int, int, str, int]] = None) -> str:
    """
    Return a PEP 440-compliant version number from VERSION.

    Args:
        version: Version tuple (major, minor, micro, releaselevel, serial)
                If not provided, uses the package VERSION tuple

    Returns:
        PEP 440-compliant version string
    """
    if version is None:
        from tezwire import VERSION
        version = VERSION

    major, minor, micro, releaselevel, serial = version

    version_str = f"{major}.{minor}"
    if micro is not None:
        version_str += f".{micro}"

    if releaselevel != "final":
        if releaselevel == "dev":
            version_str += ".dev"
        else:
            # PEP 440 pre-release segments: a, b, rc
            version_str += {"alpha": "a", "beta": "b"}.get(releaselevel, releaselevel)
        if serial > 0:
            version_str += str(serial)

    return version_str
