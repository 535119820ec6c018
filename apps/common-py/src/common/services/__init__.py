"""Common services package."""

from common.services.user_directory import InMemoryUserDirectory, UserDirectory, validate_fields

__all__ = [
    "InMemoryUserDirectory",
    "UserDirectory",
    "validate_fields",
]
