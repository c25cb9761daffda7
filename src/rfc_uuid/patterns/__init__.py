"""UUID textual forms and registry."""

from rfc_uuid.patterns.base import Pattern, UUIDComponents
from rfc_uuid.patterns.hex import HexPattern
from rfc_uuid.patterns.registry import UUIDPatternRegistry
from rfc_uuid.patterns.rfc4122 import RFC4122Pattern

__all__ = [
    "Pattern",
    "HexPattern",
    "RFC4122Pattern",
    "UUIDComponents",
    "UUIDPatternRegistry",
]
