"""Tests for equals(), compare() and version()."""

import random

import pytest
from rfc_uuid import (
    UUID,
    FormatError,
    InvalidArgumentError,
    InvalidInputError,
    compare,
    equals,
    is_valid_byte_form,
    version,
)

V4_STRING = "9e472052-a654-4693-9a8b-3ce57ada3d6c"
V4_HEX = "9e472052a65446939a8b3ce57ada3d6c"
V4_BYTES = bytes.fromhex(V4_HEX)


def random_valid_bytes(rng: random.Random) -> bytes:
    """Random 16 bytes with version 1-5 and the RFC 4122 variant."""
    data = bytearray(rng.getrandbits(8) for _ in range(16))
    data[6] = (data[6] & 0x0F) | (rng.randint(1, 5) << 4)
    data[8] = (data[8] & 0x3F) | 0x80
    return bytes(data)


def sign(value: int) -> int:
    return (value > 0) - (value < 0)


class TestEquals:
    """Tests for equals()."""

    def test_all_shapes_equal(self) -> None:
        """Test that every input shape of the same value is equal."""
        assert equals(V4_STRING, V4_HEX, V4_BYTES, UUID(V4_STRING), V4_STRING.upper()) is True

    def test_two_different(self) -> None:
        """Test that different values are not equal."""
        assert equals(UUID.nil(), UUID.max()) is False

    def test_requires_two_inputs(self) -> None:
        """Test that fewer than two inputs raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="At least two UUIDs required"):
            equals(V4_STRING)

        with pytest.raises(InvalidArgumentError):
            equals()

    def test_first_none(self) -> None:
        """Test that a None first input returns False."""
        assert equals(None, V4_STRING) is False
        assert equals(None, None) is False

    def test_later_none(self) -> None:
        """Test that a None later input returns False."""
        assert equals(V4_STRING, None) is False
        assert equals(V4_STRING, V4_HEX, None) is False

    def test_first_none_skips_parsing(self) -> None:
        """Test that a None first input returns before parsing the rest."""
        assert equals(None, "not-a-uuid") is False

    def test_mismatch_skips_remaining(self) -> None:
        """Test that parsing stops at the first mismatch."""
        assert equals(V4_STRING, UUID.nil(), "not-a-uuid") is False

    def test_malformed_input_raises(self) -> None:
        """Test that malformed input raises like parsing."""
        with pytest.raises(FormatError):
            equals(V4_STRING, "not-a-uuid")

    def test_unsupported_input_raises(self) -> None:
        """Test that unsupported types raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            equals(V4_STRING, 42)

    def test_instance_method(self) -> None:
        """Test UUID.equals() compares against self."""
        uuid = UUID(V4_STRING)

        assert uuid.equals(V4_HEX) is True
        assert uuid.equals(V4_HEX, V4_BYTES) is True
        assert uuid.equals(UUID.nil()) is False
        assert uuid.equals(None) is False

    def test_instance_method_requires_one_other(self) -> None:
        """Test UUID.equals() with no arguments raises."""
        with pytest.raises(InvalidArgumentError):
            UUID(V4_STRING).equals()


class TestCompare:
    """Tests for compare()."""

    def test_nil_max(self) -> None:
        """Test nil sorts before max."""
        assert compare(UUID.nil(), UUID.max()) == -1
        assert compare(UUID.max(), UUID.nil()) == 1

    def test_equal(self) -> None:
        """Test equal values across shapes."""
        assert compare(V4_STRING, V4_HEX) == 0
        assert compare(V4_BYTES, UUID(V4_STRING)) == 0

    def test_unsigned_bytes(self) -> None:
        """Test that bytes compare unsigned."""
        low = bytes([0x7F]) + bytes(15)
        high = bytes([0x80]) + bytes(15)

        assert compare(low, high) == -1

    def test_last_byte_decides(self) -> None:
        """Test that a difference in the last byte is found."""
        assert compare(bytes(16), bytes(15) + b"\x01") == -1

    def test_instance_method(self) -> None:
        """Test UUID.compare()."""
        assert UUID.nil().compare(V4_STRING) == -1
        assert UUID(V4_STRING).compare(V4_HEX) == 0

    def test_invalid_input(self) -> None:
        """Test that invalid inputs raise."""
        with pytest.raises(InvalidInputError):
            compare(V4_STRING, None)  # type: ignore[arg-type]

        with pytest.raises(FormatError):
            compare("bad", V4_STRING)


class TestVersion:
    """Tests for version()."""

    def test_example(self) -> None:
        """Test the version of a known v4 UUID."""
        assert version(UUID.from_string(V4_STRING)) == 4

    def test_shapes(self) -> None:
        """Test version() on each input shape."""
        assert version(V4_STRING) == 4
        assert version(V4_HEX) == 4
        assert version(V4_BYTES) == 4
        assert version(bytearray(V4_BYTES)) == 4

    def test_raw_read(self) -> None:
        """Test that bytes outside 1-5 are read without restriction."""
        assert version(bytes(16)) == 0
        assert version(b"\x01" * 16) == 0
        assert version(b"\xff" * 16) == 15

    def test_wrong_byte_length(self) -> None:
        """Test that bytes of another length raise FormatError."""
        with pytest.raises(FormatError, match="expected 16, got 15"):
            version(bytes(15))

    def test_unsupported_input(self) -> None:
        """Test that None raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            version(None)  # type: ignore[arg-type]


class TestProperties:
    """Randomized checks of round-trip and ordering properties."""

    def test_byte_round_trip(self) -> None:
        """Test from_bytes(b).to_bytes() == b for valid bytes."""
        rng = random.Random(1234)

        for _ in range(200):
            raw = random_valid_bytes(rng)

            assert UUID.from_bytes(raw).to_bytes() == raw
            assert is_valid_byte_form(raw) is True

    def test_string_round_trip(self) -> None:
        """Test string and hex round trips normalize to lowercase."""
        rng = random.Random(5678)

        for _ in range(200):
            text = str(UUID.from_bytes(random_valid_bytes(rng)))
            mixed = "".join(c.upper() if rng.random() < 0.5 else c for c in text)
            hex_text = mixed.replace("-", "")

            assert UUID.from_string(mixed).to_string() == text
            assert UUID.from_hex(hex_text).to_hex() == hex_text.lower()
            assert UUID.from_string(mixed).to_hex() == mixed.replace("-", "").lower()

    def test_compare_order(self) -> None:
        """Test reflexivity, antisymmetry and transitivity."""
        rng = random.Random(91011)
        values = [UUID.from_bytes(random_valid_bytes(rng)) for _ in range(60)]

        for a in values:
            assert compare(a, a) == 0

        for a, b in zip(values, values[1:]):
            assert compare(a, b) == -compare(b, a)
            assert equals(a, b) == (compare(a, b) == 0)

        for a, b, c in zip(values, values[1:], values[2:]):
            if compare(a, b) <= 0 and compare(b, c) <= 0:
                assert compare(a, c) <= 0

    def test_transitivity_on_sorted(self) -> None:
        """Test that sorting by compare gives pairwise ordered values."""
        rng = random.Random(1213)
        values = sorted(UUID.from_bytes(random_valid_bytes(rng)) for _ in range(60))

        for i, a in enumerate(values):
            for b in values[i:]:
                assert compare(a, b) <= 0

    def test_byte_order_matches_string_order(self) -> None:
        """Test that byte order and canonical string order agree."""
        rng = random.Random(1415)

        for _ in range(200):
            a = UUID.from_bytes(random_valid_bytes(rng))
            b = UUID.from_bytes(random_valid_bytes(rng))
            string_order = sign((str(a) > str(b)) - (str(a) < str(b)))

            assert compare(a, b) == string_order
            assert compare(a.to_hex(), b.to_hex()) == string_order
