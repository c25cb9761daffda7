"""
rfc-uuid - RFC 4122 UUID value type

Provides an immutable 128-bit UUID value with parsing from hyphenated,
hex and raw byte forms, RFC 4122 validation, canonical formatting,
equality and byte-order comparison.
"""

from rfc_uuid.codec import bytes_to_hex, hex_to_bytes
from rfc_uuid.decoder import UUIDDecoder
from rfc_uuid.exceptions import (
    FormatError,
    InvalidArgumentError,
    InvalidInputError,
    UUIDError,
)
from rfc_uuid.generator import UUIDGenerator
from rfc_uuid.patterns import (
    HexPattern,
    Pattern,
    RFC4122Pattern,
    UUIDComponents,
    UUIDPatternRegistry,
)
from rfc_uuid.validator import UUIDValidator, ValidationResult
from rfc_uuid.value import (
    UUID,
    UUIDInput,
    compare,
    equals,
    is_valid,
    is_valid_byte_form,
    is_valid_hex_form,
    is_valid_rfc4122_form,
    parse,
    version,
)

__version__ = "0.1.0"

__all__ = [
    "UUID",
    "UUIDInput",
    "UUIDDecoder",
    "UUIDGenerator",
    "UUIDPatternRegistry",
    "UUIDValidator",
    "ValidationResult",
    "UUIDComponents",
    "Pattern",
    "HexPattern",
    "RFC4122Pattern",
    "UUIDError",
    "FormatError",
    "InvalidInputError",
    "InvalidArgumentError",
    "bytes_to_hex",
    "hex_to_bytes",
    "compare",
    "equals",
    "is_valid",
    "is_valid_byte_form",
    "is_valid_hex_form",
    "is_valid_rfc4122_form",
    "parse",
    "version",
]
