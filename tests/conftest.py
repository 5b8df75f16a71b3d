"""
pytest configuration and fixtures for the calldata codec tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE)
- Sample addresses and a helper for 32-byte ABI words
- An isolated working directory for config lookups
"""

import os

import pytest
from hypothesis import Verbosity, settings

settings.register_profile("default", max_examples=100, deadline=None)
settings.register_profile("ci", max_examples=500, deadline=None)
settings.register_profile("dev", max_examples=10, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose, deadline=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))

# Digit-only addresses are already in checksum form.
ADDRESS_A = "0x" + "11" * 20
ADDRESS_B = "0x" + "22" * 20
ADDRESS_C = "0x" + "33" * 20
ADDRESS_D = "0x" + "44" * 20

THRESHOLD_CALLDATA = "0x97d048e5000000000000000000000000000000000000000000000000000000000000000a"


def word(value: int) -> bytes:
    """A uint256 ABI word."""
    return value.to_bytes(32, "big")


def address_word(address: str) -> bytes:
    return bytes(12) + bytes.fromhex(address[2:])


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory with no config override in the environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GOVCALLDATA_CONFIG", raising=False)
    return tmp_path
