"""UUID form registry."""

from rfc_uuid.patterns.base import Pattern
from rfc_uuid.patterns.hex import HexPattern
from rfc_uuid.patterns.rfc4122 import RFC4122Pattern


class UUIDPatternRegistry:
    """Registry for the textual UUID forms.

    Forms are keyed by name and, since both built-in forms have distinct
    lengths, can also be looked up by the length of an input string.
    """

    BUILTIN_PATTERNS: dict[str, type[Pattern]] = {
        "rfc4122": RFC4122Pattern,
        "hex": HexPattern,
    }

    _instances: dict[str, Pattern] = {}

    @classmethod
    def load(cls, pattern_name: str) -> Pattern:
        """Load a form by name.

        Args:
            pattern_name: Name of form ('rfc4122' or 'hex')

        Returns:
            Shared Pattern instance

        Raises:
            ValueError: If pattern name is not recognized

        Example:
            >>> pattern = UUIDPatternRegistry.load('hex')
            >>> pattern.encode(bytes(16))
            '00000000000000000000000000000000'
        """
        if pattern_name not in cls.BUILTIN_PATTERNS:
            raise ValueError(
                f"Unknown pattern: {pattern_name}. "
                f"Available: {', '.join(cls.BUILTIN_PATTERNS.keys())}"
            )

        pattern = cls._instances.get(pattern_name)
        if pattern is None:
            pattern = cls.BUILTIN_PATTERNS[pattern_name]()
            cls._instances[pattern_name] = pattern
        return pattern

    @classmethod
    def for_length(cls, length: int) -> Pattern | None:
        """Find the form whose strings have the given length.

        Returns:
            Pattern instance, or None if no form has that length
        """
        for name, pattern_class in cls.BUILTIN_PATTERNS.items():
            if pattern_class.length == length:
                return cls.load(name)
        return None

    @classmethod
    def lengths(cls) -> list[int]:
        """Return the string lengths of all registered forms."""
        return [pattern_class.length for pattern_class in cls.BUILTIN_PATTERNS.values()]
