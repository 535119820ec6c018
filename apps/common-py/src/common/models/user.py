"""User models for the user directory."""

from typing import ClassVar

from pydantic import BaseModel, Field


class PublicUser(BaseModel):
    """User projection without credentials."""

    username: str = Field(..., description="Unique username of the user")
    email: str = Field(..., description="Unique email address of the user")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "username": "jane",
                "email": "jane.doe@example.com",
            }
        }


class UserRecord(PublicUser):
    """Stored user entity, including the plaintext password."""

    password: str = Field(..., description="Password exactly as registered")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "username": "jane",
                "email": "jane.doe@example.com",
                "password": "secret1",
            }
        }

    def to_public(self) -> PublicUser:
        return PublicUser(username=self.username, email=self.email)
