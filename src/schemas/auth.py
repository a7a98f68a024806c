"""Authentication schemas."""

from pydantic import BaseModel, Field

from src.schemas.user import UserResponse


class UserLogin(BaseModel):
    """User login request."""

    username: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
    user: UserResponse
