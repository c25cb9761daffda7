"""Canonical hyphenated RFC 4122 UUID form."""

import re

from rfc_uuid.codec import bytes_to_hex, hex_to_bytes
from rfc_uuid.exceptions import FormatError
from rfc_uuid.patterns.base import Pattern


class RFC4122Pattern(Pattern):
    """RFC 4122 canonical form: XXXXXXXX-XXXX-VXXX-NXXX-XXXXXXXXXXXX

    Components:
        X: Hex digit (either case)
        V: Version nibble (1-5)
        N: Variant nibble (8, 9, a or b)

    Example:
        9e472052-a654-4693-9a8b-3ce57ada3d6c
        └time_low┘└mid┘└ver┘└var┘└──node────┘
    """

    name = "rfc4122"
    length = 36

    PATTERN_REGEX = re.compile(
        r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[1-5][0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}$"
    )
    LOOSE_REGEX = re.compile(
        r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
    )

    def decode(self, text: str) -> bytes:
        """Decode RFC 4122 UUID string."""
        if not self.validate_format(text):
            raise FormatError(f"Invalid RFC-4122 string: {text!r}", text)
        return hex_to_bytes(self.strip_hyphens(text))

    def encode(self, raw: bytes) -> str:
        """Encode RFC 4122 UUID string."""
        return self.format_hex(bytes_to_hex(raw))

    @staticmethod
    def strip_hyphens(text: str) -> str:
        """Remove all hyphens from a UUID string."""
        return text.replace("-", "")

    @staticmethod
    def format_hex(hex_text: str) -> str:
        """Insert hyphens into a 32-digit hex string.

        Example:
            >>> RFC4122Pattern.format_hex('9e472052a65446939a8b3ce57ada3d6c')
            '9e472052-a654-4693-9a8b-3ce57ada3d6c'
        """
        # Segments: time_low, time_mid, time_hi_and_version, clock_seq, node
        return (
            f"{hex_text[0:8]}-{hex_text[8:12]}-{hex_text[12:16]}-"
            f"{hex_text[16:20]}-{hex_text[20:32]}"
        )
