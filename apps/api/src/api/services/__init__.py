"""Service initialization and dependency injection."""

import logging

from common.services.user_directory import InMemoryUserDirectory, UserDirectory

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache: dict[str, UserDirectory] = {}


def get_user_directory() -> UserDirectory:
    """Get the user directory instance.

    The directory is created on first use and shared by every request
    for the lifetime of the process.

    Returns:
        UserDirectory instance
    """
    if "user_directory" not in _services_cache:
        _services_cache["user_directory"] = InMemoryUserDirectory()
        logger.info("Initialized InMemoryUserDirectory")

    return _services_cache["user_directory"]
