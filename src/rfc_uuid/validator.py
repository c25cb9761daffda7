"""UUID validator."""

import logging
from dataclasses import dataclass
from typing import Any

from rfc_uuid.codec import BYTE_LENGTH, hex_to_bytes
from rfc_uuid.exceptions import describe
from rfc_uuid.patterns.registry import UUIDPatternRegistry
from rfc_uuid.value import (
    RFC4122_VARIANT,
    UUID,
    VERSION_MAX,
    VERSION_MIN,
    is_valid,
)

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """UUID validation result."""

    valid: bool
    error: str | None = None
    warnings: list[str] | None = None

    def __post_init__(self) -> None:
        """Initialize warnings list."""
        if self.warnings is None:
            self.warnings = []


class UUIDValidator:
    """UUID validator with strict and layout-only modes."""

    def __init__(self, strict: bool = True):
        """Initialize validator.

        Args:
            strict: Reject non-RFC 4122 version or variant. When False such
                values are valid and reported as warnings instead.
        """
        self.strict = strict

    def validate(self, value: Any) -> ValidationResult:
        """Validate a UUID.

        Args:
            value: String, bytes-like or UUID to validate

        Returns:
            Validation result
        """
        if self.strict:
            if is_valid(value):
                return ValidationResult(valid=True)
            return self._reject(f"Invalid UUID: {describe(value)}")

        raw = self._layout_bytes(value)
        if raw is None:
            return self._reject(f"Invalid UUID layout: {describe(value)}")

        warnings = []

        version = raw[6] >> 4
        if not VERSION_MIN <= version <= VERSION_MAX:
            warnings.append(f"Version {version} is outside {VERSION_MIN}-{VERSION_MAX}")

        if (raw[8] & 0xC0) >> 6 != RFC4122_VARIANT:
            warnings.append("Variant is not RFC 4122")

        return ValidationResult(valid=True, warnings=warnings)

    def _layout_bytes(self, value: Any) -> bytes | None:
        """Decode value checking only its layout, or None if malformed."""
        if isinstance(value, UUID):
            return value.bytes

        if isinstance(value, (bytes, bytearray, memoryview)):
            try:
                raw = bytes(value)
            except ValueError:
                return None
            return raw if len(raw) == BYTE_LENGTH else None

        if isinstance(value, str):
            pattern = UUIDPatternRegistry.for_length(len(value))
            if pattern is None or not pattern.matches_layout(value):
                return None
            return hex_to_bytes(value.replace("-", ""))

        return None

    def _reject(self, error: str) -> ValidationResult:
        logger.debug(error)
        return ValidationResult(valid=False, error=error)
