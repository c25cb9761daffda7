"""
UUID value type.

Holds the canonical 16 bytes of a UUID and provides parsing from the
supported input shapes, RFC 4122 validation predicates, formatting with
memoized string forms, equality and ordering.

String parsing is strict: the version nibble must be 1-5 and the variant
must be RFC 4122. Construction from 16 raw bytes checks only the length, so
any 16 bytes can be held (see is_valid_byte_form for the semantic check).
"""

from __future__ import annotations

import uuid as _stdlib_uuid
from functools import total_ordering
from typing import TYPE_CHECKING, Any, TypeVar, Union

from rfc_uuid.codec import BYTE_LENGTH
from rfc_uuid.exceptions import (
    FormatError,
    InvalidArgumentError,
    InvalidInputError,
    UUIDError,
)
from rfc_uuid.patterns.registry import UUIDPatternRegistry

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue
    from pydantic_core import CoreSchema

BytesLike = Union[bytes, bytearray, memoryview]
UUIDInput = Union[str, BytesLike, "UUID"]

T = TypeVar("T", bound="UUID")

_BYTES_TYPES = (bytes, bytearray, memoryview)

VERSION_MIN = 1
VERSION_MAX = 5
RFC4122_VARIANT = 0b10


def _as_bytes(value: Any) -> bytes | None:
    """Copy a bytes-like value into immutable bytes, or None if not bytes-like.

    Raises:
        FormatError: If the buffer cannot be read (e.g. a released memoryview)
    """
    if not isinstance(value, _BYTES_TYPES):
        return None
    try:
        return bytes(value)
    except ValueError as e:
        raise FormatError(f"Unreadable byte buffer: {e}", value) from e


def _parse_string(text: str) -> bytes:
    pattern = UUIDPatternRegistry.for_length(len(text))
    if pattern is None:
        expected = " or ".join(str(length) for length in UUIDPatternRegistry.lengths())
        raise FormatError(
            f"Invalid input string length {len(text)}, expected {expected}", text
        )
    return pattern.decode(text)


def _parse_bytes(raw: bytes) -> bytes:
    if len(raw) != BYTE_LENGTH:
        raise FormatError(
            f"Invalid UUID byte length: expected {BYTE_LENGTH}, got {len(raw)}", raw
        )
    return raw


def parse(value: UUIDInput) -> bytes:
    """Parse any supported input into the 16 UUID bytes.

    Args:
        value: RFC 4122 string (36 chars), hex string (32 chars),
            16-byte bytes-like object, or UUID

    Returns:
        A new bytes object of length 16

    Raises:
        FormatError: If a string or bytes input has the wrong length or layout
        InvalidInputError: If value is None or of an unsupported type
    """
    if isinstance(value, str):
        return _parse_string(value)

    raw = _as_bytes(value)
    if raw is not None:
        return _parse_bytes(raw)

    if isinstance(value, UUID):
        return value.bytes

    raise InvalidInputError(value)


# ----------------------------------------------------------------------------
# Validation predicates
# ----------------------------------------------------------------------------


def is_valid_hex_form(text: Any) -> bool:
    """Check if text is a 32-digit hex UUID with RFC 4122 version and variant."""
    if not isinstance(text, str):
        return False
    return UUIDPatternRegistry.load("hex").validate_format(text)


def is_valid_rfc4122_form(text: Any) -> bool:
    """Check if text is a hyphenated RFC 4122 UUID string."""
    if not isinstance(text, str):
        return False
    return UUIDPatternRegistry.load("rfc4122").validate_format(text)


def is_valid_byte_form(raw: Any) -> bool:
    """Check if raw is 16 bytes with version 1-5 and the RFC 4122 variant."""
    try:
        data = _as_bytes(raw)
    except FormatError:
        return False
    if data is None or len(data) != BYTE_LENGTH:
        return False

    if not VERSION_MIN <= data[6] >> 4 <= VERSION_MAX:
        return False

    return (data[8] & 0xC0) >> 6 == RFC4122_VARIANT


def is_valid(value: Any) -> bool:
    """Check whether value is a valid UUID in any supported shape.

    Never raises: every unsupported shape, including None, is reported as
    False.
    """
    if value is None:
        return False

    if isinstance(value, str):
        if len(value) == UUIDPatternRegistry.load("rfc4122").length:
            return is_valid_rfc4122_form(value)
        if len(value) == UUIDPatternRegistry.load("hex").length:
            return is_valid_hex_form(value)
        return False

    if isinstance(value, UUID):
        return is_valid_byte_form(value.bytes)

    if isinstance(value, _BYTES_TYPES):
        return is_valid_byte_form(value)

    return False


# ----------------------------------------------------------------------------
# Version, equality, ordering
# ----------------------------------------------------------------------------


def version(value: UUIDInput) -> int:
    """Read the version nibble (high 4 bits of byte 6).

    This is a raw read in the range 0-15; use is_valid to check that the
    version is one RFC 4122 defines.

    Raises:
        FormatError: If bytes input is not 16 bytes long, or a string
            does not parse
        InvalidInputError: If value is of an unsupported type
    """
    raw = _as_bytes(value)
    if raw is None:
        return version(parse(value))
    return _parse_bytes(raw)[6] >> 4


def equals(*inputs: UUIDInput | None) -> bool:
    """Compare two or more UUIDs for equality.

    Returns False as soon as an input is None or differs from the first
    input. Inputs after the first mismatch are not parsed.

    Raises:
        InvalidArgumentError: If fewer than two inputs are given
        FormatError: If an input does not parse
        InvalidInputError: If an input is of an unsupported type
    """
    if len(inputs) < 2:
        raise InvalidArgumentError("At least two UUIDs required for comparison")

    if inputs[0] is None:
        return False

    reference = parse(inputs[0])
    for value in inputs[1:]:
        if value is None:
            return False
        if parse(value) != reference:
            return False
    return True


def compare(first: UUIDInput, second: UUIDInput) -> int:
    """Compare two UUIDs in unsigned byte order.

    Returns:
        -1 if first < second, 1 if first > second, 0 if equal
    """
    a = parse(first)
    b = parse(second)
    return (a > b) - (a < b)


# ----------------------------------------------------------------------------
# Value type
# ----------------------------------------------------------------------------


@total_ordering
class UUID:
    """
    Immutable 128-bit UUID value.

    Factories are classmethods, so a subclass inherits them and gets
    instances of itself back.

    Example:
        >>> u = UUID("9e472052-a654-4693-9a8b-3ce57ada3d6c")
        >>> u.to_hex()
        '9e472052a65446939a8b3ce57ada3d6c'
        >>> u.version
        4
    """

    __slots__ = ("_bytes", "_hex", "_str")

    def __init__(self, value: UUIDInput):
        """
        Initialize from any supported input.

        Args:
            value: RFC 4122 string, hex string, 16 bytes, or UUID

        Raises:
            FormatError: If value has the wrong length or layout
            InvalidInputError: If value is of an unsupported type
        """
        self._bytes: bytes = parse(value)
        self._hex: str | None = None
        self._str: str | None = None

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_hex(cls: type[T], text: str) -> T:
        """Create from a 32-digit hex string with RFC 4122 version and variant."""
        if not isinstance(text, str):
            raise InvalidInputError(text)
        return cls(UUIDPatternRegistry.load("hex").decode(text))

    @classmethod
    def from_string(cls: type[T], text: str) -> T:
        """Create from a hyphenated RFC 4122 string."""
        if not isinstance(text, str):
            raise InvalidInputError(text)
        return cls(UUIDPatternRegistry.load("rfc4122").decode(text))

    @classmethod
    def from_bytes(cls: type[T], data: BytesLike) -> T:
        """Create from exactly 16 bytes.

        No version or variant check is made: any 16 bytes are accepted.
        """
        if _as_bytes(data) is None:
            raise InvalidInputError(data)
        return cls(data)

    @classmethod
    def from_any(cls: type[T], value: UUIDInput) -> T:
        """Create from any supported input."""
        return cls(value)

    @classmethod
    def from_stdlib(cls: type[T], value: _stdlib_uuid.UUID) -> T:
        """Create from a standard library uuid.UUID."""
        if not isinstance(value, _stdlib_uuid.UUID):
            raise InvalidInputError(value)
        return cls(value.bytes)

    @classmethod
    def nil(cls: type[T]) -> T:
        """Return the nil UUID (all zero bytes)."""
        return cls(bytes(BYTE_LENGTH))

    @classmethod
    def max(cls: type[T]) -> T:
        """Return the max UUID (all 0xFF bytes)."""
        return cls(b"\xff" * BYTE_LENGTH)

    @classmethod
    def v4(cls: type[T]) -> T:
        """Generate a random version 4 UUID.

        The platform generator's canonical string goes through the same
        strict parser as any external string.
        """
        return cls.from_string(str(_stdlib_uuid.uuid4()))

    # ------------------------------------------------------------------
    # Accessors and formatting
    # ------------------------------------------------------------------

    @property
    def bytes(self) -> bytes:
        """The 16 raw bytes."""
        return self._bytes

    @property
    def version(self) -> int:
        """The version nibble (0-15)."""
        return self._bytes[6] >> 4

    def to_hex(self) -> str:
        """Return the 32-digit lowercase hex form (cached)."""
        if self._hex is None:
            self._hex = UUIDPatternRegistry.load("hex").encode(self._bytes)
        return self._hex

    def to_string(self) -> str:
        """Return the hyphenated RFC 4122 form (cached)."""
        if self._str is None:
            self._str = UUIDPatternRegistry.load("rfc4122").format_hex(self.to_hex())
        return self._str

    def to_bytes(self) -> bytes:
        """Return the 16 raw bytes.

        bytes objects are immutable, so the value cannot be changed
        through the result.
        """
        return self._bytes

    def to_json(self) -> str:
        """Return the form used in structured serialization."""
        return self.to_string()

    def to_stdlib(self) -> _stdlib_uuid.UUID:
        """Convert to a standard library uuid.UUID."""
        return _stdlib_uuid.UUID(bytes=self._bytes)

    def is_valid(self) -> bool:
        """Check version and variant of this value."""
        return is_valid_byte_form(self._bytes)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def equals(self, *others: UUIDInput | None) -> bool:
        """Check that every other input equals this UUID."""
        return equals(self, *others)

    def compare(self, other: UUIDInput) -> int:
        """Compare with another UUID in byte order (-1, 0 or 1)."""
        return compare(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.to_string()}')"

    def __bytes__(self) -> bytes:
        return self._bytes

    def __getstate__(self) -> bytes:
        return self._bytes

    def __setstate__(self, state: bytes) -> None:
        raw = _as_bytes(state)
        if raw is None:
            raise InvalidInputError(state)
        self._bytes = _parse_bytes(raw)
        self._hex = None
        self._str = None

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        """Let pydantic models use UUID fields.

        Any supported input validates; values serialize to the canonical
        hyphenated string.
        """
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=False, when_used="always"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe UUID fields as canonical UUID strings in JSON schema."""
        return {"type": "string", "format": "uuid"}

    @staticmethod
    def _serialize(value: UUID) -> str:
        return value.to_string()

    @classmethod
    def _validate(cls, value: Any) -> UUID:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except UUIDError as e:
            raise ValueError(str(e)) from e
