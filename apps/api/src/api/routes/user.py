"""User directory routes."""

from api.models.user import LoginRequest, MessageResponse, RegisterRequest, UpdateUserRequest
from api.services import get_user_directory
from common.models.user import PublicUser, UserRecord
from common.services.user_directory import UserDirectory
from fastapi import APIRouter, Depends, status

router = APIRouter(tags=["users"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest | None = None, directory: UserDirectory = Depends(get_user_directory)
) -> MessageResponse:
    """Register a new user.

    A missing body is treated as empty so the directory reports the missing fields.
    """
    body = body or RegisterRequest()
    directory.register(body.username, body.email, body.password)
    return MessageResponse(message="User registered successfully.")


@router.post("/login", response_model=MessageResponse)
async def login(
    body: LoginRequest | None = None, directory: UserDirectory = Depends(get_user_directory)
) -> MessageResponse:
    """Check an email and password pair."""
    body = body or LoginRequest()
    directory.authenticate(body.email, body.password)
    return MessageResponse(message="Login successful.")


@router.get("/user/username/{username}", response_model=UserRecord)
async def find_by_username(username: str, directory: UserDirectory = Depends(get_user_directory)) -> UserRecord:
    """Get a user by username."""
    return directory.find_by_username(username)


@router.get("/user/email/{email}", response_model=UserRecord)
async def find_by_email(email: str, directory: UserDirectory = Depends(get_user_directory)) -> UserRecord:
    """Get a user by email."""
    return directory.find_by_email(email)


@router.get("/users", response_model=list[PublicUser])
async def list_users(directory: UserDirectory = Depends(get_user_directory)) -> list[PublicUser]:
    """List all users without their passwords."""
    return directory.list_all()


@router.put("/user/{username}", response_model=MessageResponse)
async def update_user(
    username: str,
    body: UpdateUserRequest | None = None,
    directory: UserDirectory = Depends(get_user_directory),
) -> MessageResponse:
    """Replace the username, email and password of a user.

    Args:
        username: Current username of the user to update
        body: New username, email and password, all required
        directory: User directory

    Returns:
        Confirmation message
    """
    body = body or UpdateUserRequest()
    directory.update(username, body.new_username, body.new_email, body.new_password)
    return MessageResponse(message="User details updated successfully.")


@router.delete("/user/{username}", response_model=MessageResponse)
async def delete_user(username: str, directory: UserDirectory = Depends(get_user_directory)) -> MessageResponse:
    """Delete a user by username."""
    deleted = directory.delete_by_username(username)
    return MessageResponse(message=f"Oh no, you've deleted '{deleted.username}'!")
