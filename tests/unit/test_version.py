"""
Test version helpers for TezWire.
"""

import unittest
from tezwire.units.version import get_version
from tezwire import VERSION, __version__


class TestVersion(unittest.TestCase):
    """Test version functions."""

    def test_get_version(self):
        """Test get_version function."""
        self.assertEqual(get_version(), __version__)
        self.assertEqual(get_version(VERSION), "0.3.0")
        self.assertEqual(get_version((1, 0, 0, "final", 0)), "1.0.0")
        self.assertEqual(get_version((2, 1, 3, "alpha", 0)), "2.1.3a")
        self.assertEqual(get_version((3, 2, 0, "beta", 1)), "3.2.0b1")
        self.assertEqual(get_version((4, 0, 0, "rc", 2)), "4.0.0rc2")
        self.assertEqual(get_version((5, 0, 0, "dev", 0)), "5.0.0.dev")


if __name__ == '__main__':
    unittest.main()
