"""Hex string <-> byte conversion."""

import re

from rfc_uuid.exceptions import FormatError

BYTE_LENGTH = 16
HEX_LENGTH = 32

_HEX_REGEX = re.compile(r"[0-9a-fA-F]{32}")


def hex_to_bytes(text: str) -> bytes:
    """Decode 32 hex digits into 16 bytes.

    Args:
        text: Hex digits, either case, no separators

    Returns:
        The decoded bytes

    Raises:
        FormatError: If text is not exactly 32 hex digits
    """
    if len(text) != HEX_LENGTH:
        raise FormatError(
            f"Invalid hex length: expected {HEX_LENGTH}, got {len(text)}", text
        )
    if not _HEX_REGEX.fullmatch(text):
        raise FormatError(f"Invalid hex digits: {text!r}", text)
    return bytes.fromhex(text)


def bytes_to_hex(raw: bytes) -> str:
    """Encode bytes as lowercase hex, two digits per byte."""
    return raw.hex()
