"""
UUID helpers for the application.

Provides consistent UUID generation across all models and validation of
UUIDs received in paths and request bodies.
"""
import uuid

from exceptions import ValidationError


def generate_uuid() -> str:
    """
    Generate a new UUID string.

    Returns:
        str: A new UUID4 string
    """
    return str(uuid.uuid4())


def canonical_uuid(value) -> str:
    """
    Return value as a canonical lowercase UUID string.

    Raises:
        ValueError: If value is not a valid UUID (usable inside pydantic validators)
    """
    try:
        return str(uuid.UUID(str(value)))
    except (ValueError, TypeError, AttributeError):
        raise ValueError(f"'{value}' is not a valid UUID")


def parse_uuid(value: str, field_name: str = "id") -> str:
    """
    Validate a UUID taken from a request path.

    Args:
        value: Raw UUID text
        field_name: Name used in the error message

    Returns:
        str: Canonical UUID string

    Raises:
        ValidationError: If value is not a valid UUID
    """
    try:
        return canonical_uuid(value)
    except ValueError:
        raise ValidationError(f"Invalid {field_name}: '{value}' is not a valid UUID",
                              invalid_fields={field_name: value})
