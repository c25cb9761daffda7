"""Compact 32-digit hex UUID form."""

import re

from rfc_uuid.codec import HEX_LENGTH, bytes_to_hex, hex_to_bytes
from rfc_uuid.exceptions import FormatError
from rfc_uuid.patterns.base import Pattern


class HexPattern(Pattern):
    """Hex form without hyphens: XXXXXXXXXXXXVXXXNXXXXXXXXXXXXXXX

    Components:
        X: Hex digit (either case)
        V: Version nibble (1-5)
        N: Variant nibble (8, 9, a or b)

    Example:
        9e472052a65446939a8b3ce57ada3d6c
    """

    name = "hex"
    length = HEX_LENGTH

    PATTERN_REGEX = re.compile(
        r"^[0-9a-fA-F]{8}[0-9a-fA-F]{4}[1-5][0-9a-fA-F]{3}[89abAB][0-9a-fA-F]{3}[0-9a-fA-F]{12}$"
    )
    LOOSE_REGEX = re.compile(r"^[0-9a-fA-F]{32}$")

    def decode(self, text: str) -> bytes:
        """Decode hex form UUID."""
        if not self.validate_format(text):
            raise FormatError(f"Invalid hex UUID string: {text!r}", text)
        return hex_to_bytes(text)

    def encode(self, raw: bytes) -> str:
        """Encode hex form UUID."""
        return bytes_to_hex(raw)
