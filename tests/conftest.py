"""Pytest configuration and shared fixtures."""

import pytest

V4_STRING = "9e472052-a654-4693-9a8b-3ce57ada3d6c"
V4_HEX = "9e472052a65446939a8b3ce57ada3d6c"
NIL_STRING = "00000000-0000-0000-0000-000000000000"
MAX_STRING = "ffffffff-ffff-ffff-ffff-ffffffffffff"


@pytest.fixture
def v4_string() -> str:
    """Canonical string of a known version 4 UUID."""
    return V4_STRING


@pytest.fixture
def v4_hex() -> str:
    """Hex form of the same UUID."""
    return V4_HEX


@pytest.fixture
def v4_bytes() -> bytes:
    """Raw bytes of the same UUID."""
    return bytes.fromhex(V4_HEX)
