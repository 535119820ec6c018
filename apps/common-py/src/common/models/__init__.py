"""Common models package."""

from common.models.user import PublicUser, UserRecord

__all__ = [
    "PublicUser",
    "UserRecord",
]
