"""Request and response models for the user routes."""

from typing import ClassVar

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Registration request body.

    Fields are optional so missing values are reported by the directory's
    own validation instead of a schema error.
    """

    username: str | None = None
    email: str | None = None
    password: str | None = None

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "username": "jane",
                "email": "jane.doe@example.com",
                "password": "secret1",
            }
        }


class LoginRequest(BaseModel):
    """Login request body."""

    email: str | None = None
    password: str | None = None


class UpdateUserRequest(BaseModel):
    """User update request body, using camelCase keys on the wire."""

    new_username: str | None = Field(default=None, alias="newUsername")
    new_email: str | None = Field(default=None, alias="newEmail")
    new_password: str | None = Field(default=None, alias="newPassword")

    class Config:
        """Pydantic config."""

        populate_by_name = True


class MessageResponse(BaseModel):
    """Confirmation message."""

    message: str


class ErrorResponse(BaseModel):
    """Error message."""

    error: str
