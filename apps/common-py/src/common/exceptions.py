"""User directory exceptions."""


class UserDirectoryError(Exception):
    """Base user directory exception."""

    message = "User directory error."

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationFailed(UserDirectoryError):
    """Submitted fields did not pass validation."""


class EmailTaken(UserDirectoryError):
    message = "Email is already registered."


class UsernameTaken(UserDirectoryError):
    message = "Username is already taken."


class UserNotFound(UserDirectoryError):
    message = "User not found."


class InvalidCredentials(UserDirectoryError):
    message = "Invalid email or password."
