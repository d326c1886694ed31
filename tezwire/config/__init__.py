"""
Configuration package for TezWire.
"""

from tezwire.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
