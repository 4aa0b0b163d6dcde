"""Helpers shared by use cases."""

from uuid import UUID

from lounge.domain.error import ValidationError


def parse_uuid(value: str, field: str) -> UUID:
    """Parse an identifier supplied by a client.

    Args:
        value: Raw identifier string
        field: Field name for the error message

    Returns:
        Parsed UUID

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}: {value!r}")
