"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.post import PostSummary


class UserCreate(BaseModel):
    """User registration request."""

    username: str = Field(..., min_length=3, max_length=255)
    name: str | None = Field(None, max_length=255)
    password: str = Field(..., max_length=128)


class UserUpdate(UserCreate):
    """Replace username, display name and password."""


class UserResponse(BaseModel):
    """User information response. The password hash is never included."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str | None
    posts: list[PostSummary] = []
    created_at: datetime
