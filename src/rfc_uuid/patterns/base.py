"""Base pattern interface and models."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass
class UUIDComponents:
    """Decoded UUID components."""

    raw_uuid: str
    components: dict[str, Any]

    def __getitem__(self, key: str) -> Any:
        """Get component by name."""
        return self.components[key]

    def get(self, key: str, default: Any = None) -> Any:
        """Get component with default."""
        return self.components.get(key, default)


class Pattern(ABC):
    """Base class for the textual forms of a UUID.

    Subclasses define two regexes: PATTERN_REGEX, which also pins the
    version nibble to 1-5 and the variant to RFC 4122, and LOOSE_REGEX,
    which only checks the layout.
    """

    name: ClassVar[str]
    length: ClassVar[int]
    PATTERN_REGEX: ClassVar[re.Pattern[str]]
    LOOSE_REGEX: ClassVar[re.Pattern[str]]

    def validate_format(self, text: str) -> bool:
        """Validate text against the strict pattern.

        Args:
            text: String to validate

        Returns:
            True if valid format
        """
        return bool(self.PATTERN_REGEX.fullmatch(text))

    def matches_layout(self, text: str) -> bool:
        """Validate text against the layout-only pattern."""
        return bool(self.LOOSE_REGEX.fullmatch(text))

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """Decode text into 16 bytes.

        Args:
            text: String in this form

        Returns:
            The raw UUID bytes

        Raises:
            FormatError: If text does not match the strict pattern
        """
        pass

    @abstractmethod
    def encode(self, raw: bytes) -> str:
        """Encode 16 bytes into this form (lowercase).

        Args:
            raw: The raw UUID bytes

        Returns:
            Formatted string
        """
        pass
