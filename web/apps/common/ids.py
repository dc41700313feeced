"""Identifier generation and parsing for entity ids."""

import uuid


class UuidGenerator:
    """Produces a fresh random UUID for every new product or order."""

    def generate(self) -> uuid.UUID:
        return uuid.uuid4()


def parse_uuid(raw: str) -> uuid.UUID | None:
    """Parse a path segment as a UUID, returning None when malformed."""
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        return None
