"""User directory with an in-memory implementation."""

import logging
import re
import threading
from abc import ABC, abstractmethod

from common.exceptions import (
    EmailTaken,
    InvalidCredentials,
    UsernameTaken,
    UserNotFound,
    ValidationFailed,
)
from common.models.user import PublicUser, UserRecord

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
MIN_PASSWORD_LENGTH = 6
MIN_USERNAME_LENGTH = 3


def validate_fields(username: str | None, email: str | None, password: str | None) -> str | None:
    """Validate user fields for registration and update.

    Rules are checked in order and the first failure wins.

    Args:
        username: Username to check
        email: Email address to check
        password: Password to check

    Returns:
        Error message of the first failing rule, or None if all rules pass
    """
    if not username or not email or not password:
        return "Username, email, and password are required."
    if not EMAIL_PATTERN.search(email):
        return "Invalid email format."
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
    if len(username) < MIN_USERNAME_LENGTH:
        return f"Username must be at least {MIN_USERNAME_LENGTH} characters long."
    return None


class UserDirectory(ABC):
    """Abstract interface for the user directory.

    Records are keyed by email and additionally unique by username.
    Every operation returns copies; callers never hold references into the store.
    """

    @abstractmethod
    def register(self, username: str | None, email: str | None, password: str | None) -> UserRecord:
        """Register a new user.

        Raises:
            ValidationFailed: If a field fails validation
            EmailTaken: If the email is already registered
            UsernameTaken: If the username is already taken
        """
        pass

    @abstractmethod
    def authenticate(self, email: str | None, password: str | None) -> UserRecord:
        """Check credentials.

        Raises:
            InvalidCredentials: If the email is unknown or the password does not match
        """
        pass

    @abstractmethod
    def find_by_username(self, username: str) -> UserRecord:
        """Get a user by username, password included."""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> UserRecord:
        """Get a user by email, password included."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored users."""
        pass

    @abstractmethod
    def list_all(self) -> list[PublicUser]:
        """List all users in store order, without passwords."""
        pass

    @abstractmethod
    def update(
        self,
        username: str,
        new_username: str | None,
        new_email: str | None,
        new_password: str | None,
    ) -> UserRecord:
        """Replace the username, email and password of an existing user.

        Raises:
            UserNotFound: If no user has the given username
            ValidationFailed: If the new fields fail validation
            EmailTaken: If the new email belongs to another user
            UsernameTaken: If the new username belongs to another user
        """
        pass

    @abstractmethod
    def delete_by_username(self, username: str) -> UserRecord:
        """Delete a user and return the removed record."""
        pass


class InMemoryUserDirectory(UserDirectory):
    """In-memory implementation of UserDirectory.

    Two maps are kept in step: records by email (the primary key, whose
    insertion order is the store order) and emails by username.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._records: dict[str, UserRecord] = {}
        self._emails_by_username: dict[str, str] = {}

    def register(self, username: str | None, email: str | None, password: str | None) -> UserRecord:
        error = validate_fields(username, email, password)
        if error:
            raise ValidationFailed(error)

        with self._lock:
            if email in self._records:
                raise EmailTaken()
            if username in self._emails_by_username:
                raise UsernameTaken()

            record = UserRecord(username=username, email=email, password=password)
            self._records[email] = record
            self._emails_by_username[username] = email
            created = record.model_copy()

        logger.info("Registered user %s <%s>", username, email)
        return created

    def authenticate(self, email: str | None, password: str | None) -> UserRecord:
        with self._lock:
            record = self._records.get(email)
            if record is None or record.password != password:
                logger.debug("Rejected login for %s", email)
                raise InvalidCredentials()
            return record.model_copy()

    def find_by_username(self, username: str) -> UserRecord:
        with self._lock:
            email = self._emails_by_username.get(username)
            if email is None:
                raise UserNotFound()
            return self._records[email].model_copy()

    def find_by_email(self, email: str) -> UserRecord:
        with self._lock:
            record = self._records.get(email)
            if record is None:
                raise UserNotFound()
            return record.model_copy()

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def list_all(self) -> list[PublicUser]:
        with self._lock:
            return [record.to_public() for record in self._records.values()]

    def update(
        self,
        username: str,
        new_username: str | None,
        new_email: str | None,
        new_password: str | None,
    ) -> UserRecord:
        with self._lock:
            current_email = self._emails_by_username.get(username)
            if current_email is None:
                raise UserNotFound()

            error = validate_fields(new_username, new_email, new_password)
            if error:
                raise ValidationFailed(error)

            # All checks run before the first write so a failure leaves the store untouched.
            if new_email != current_email and new_email in self._records:
                raise EmailTaken()
            owner_email = self._emails_by_username.get(new_username)
            if owner_email is not None and owner_email != current_email:
                raise UsernameTaken()

            record = self._records[current_email]
            if new_email != current_email:
                del self._records[current_email]
                record.email = new_email
                self._records[new_email] = record
            del self._emails_by_username[username]
            record.username = new_username
            record.password = new_password
            self._emails_by_username[new_username] = new_email
            updated = record.model_copy()

        if new_email != current_email:
            logger.info("Moved user %s from <%s> to <%s>", new_username, current_email, new_email)
        logger.info("Updated user %s (was %s)", new_username, username)
        return updated

    def delete_by_username(self, username: str) -> UserRecord:
        with self._lock:
            email = self._emails_by_username.pop(username, None)
            if email is None:
                raise UserNotFound()
            record = self._records.pop(email)

        logger.info("Deleted user %s <%s>", username, email)
        return record
