"""UUID decoder."""

from rfc_uuid.patterns.base import UUIDComponents
from rfc_uuid.value import UUID, UUIDInput, is_valid_byte_form


def variant_name(raw: bytes) -> str:
    """Name the variant encoded in the top bits of byte 8."""
    octet = raw[8]
    if octet & 0x80 == 0x00:
        return "ncs"
    if octet & 0xC0 == 0x80:
        return "rfc4122"
    if octet & 0xE0 == 0xC0:
        return "microsoft"
    return "future"


class UUIDDecoder:
    """Decode a UUID into the fields this library interprets.

    Only the version nibble and the variant bits are read; v1 time and
    node fields are left encoded.
    """

    def decode(self, value: UUIDInput) -> UUIDComponents:
        """Decode a UUID.

        Args:
            value: Any supported UUID input

        Returns:
            Decoded UUID components

        Example:
            >>> UUIDDecoder().decode('9e472052-a654-4693-9a8b-3ce57ada3d6c')['version']
            4
        """
        uuid = UUID(value)
        raw = uuid.bytes

        return UUIDComponents(
            raw_uuid=uuid.to_string(),
            components={
                "version": uuid.version,
                "variant": variant_name(raw),
                "hex": uuid.to_hex(),
                "valid": is_valid_byte_form(raw),
            },
        )
