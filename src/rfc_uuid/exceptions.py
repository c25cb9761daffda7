"""Custom exceptions with helpful error messages."""

from typing import Any


def describe(value: Any) -> str:
    """Describe a value by type and content for error messages."""
    if value is None:
        return "None"
    return f"[{type(value).__name__}] {value!r}"


class UUIDError(Exception):
    """Base exception for rfc-uuid errors."""

    pass


class FormatError(UUIDError, ValueError):
    """Input has a supported type but the wrong length or layout."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidInputError(UUIDError, TypeError):
    """Input is not a string, a bytes-like object or a UUID."""

    def __init__(self, value: Any):
        super().__init__(f"Not expected invalid input received: {describe(value)}")
        self.value = value


class InvalidArgumentError(UUIDError, ValueError):
    """API misuse that does not depend on the shape of any single UUID."""

    pass
