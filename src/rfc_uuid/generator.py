"""UUID generator."""

import logging

from rfc_uuid.exceptions import InvalidArgumentError
from rfc_uuid.value import UUID

logger = logging.getLogger(__name__)


class UUIDGenerator:
    """Random (version 4) UUID generator."""

    def __init__(self, uuid_class: type[UUID] = UUID):
        """Initialize generator.

        Args:
            uuid_class: UUID class (or subclass) to instantiate
        """
        self.uuid_class = uuid_class

    def generate(self) -> UUID:
        """Generate a UUID.

        Returns:
            New random version 4 UUID
        """
        return self.uuid_class.v4()

    def generate_batch(self, count: int) -> list[UUID]:
        """Generate batch of UUIDs.

        Args:
            count: Number of UUIDs to generate

        Returns:
            List of generated UUIDs

        Raises:
            InvalidArgumentError: If count is negative
        """
        if count < 0:
            raise InvalidArgumentError(f"count must be non-negative, got {count}")

        logger.debug(f"Generating {count} UUIDs with {self.uuid_class.__name__}")
        return [self.generate() for _ in range(count)]
