"""
TezWire: typed decoding of Tezos node RPC payloads

TezWire turns the loosely-typed JSON a Tezos node returns (mempool snapshots,
operation contents, protocol constants, block headers) into typed records,
while keeping the exact source bytes of every operation for hashing and
forwarding.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh.readlines() if line.strip() and not line.startswith("#")]

# Get version from the package
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '.'))
from tezwire.units.version import get_version
from tezwire import VERSION

setup(
    name="TezWire",
    version=get_version(VERSION),
    author="Nguyễn Lê Văn Dũng",
    description="Typed decoding of Tezos node RPC payloads",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=['tezwire', 'tezwire.*'], exclude=['tests*']),
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-benchmark>=4.0",
            "hypothesis>=6.100",
        ],
    },
    entry_points={
        "console_scripts": [
            "tzw=tezwire.cli:tzw",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    keywords="tezos, blockchain, rpc, json, decoder, mempool",
)
