"""Post schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# Upper bound of the 32-bit integer column
MAX_LIKES = 2**31 - 1


class PostCreate(BaseModel):
    """Create a new post."""

    title: str = Field(..., min_length=1, max_length=500)
    author: str | None = Field(None, max_length=255)
    url: str = Field(..., min_length=1)
    likes: int = Field(0, ge=0, le=MAX_LIKES)


class PostUpdate(PostCreate):
    """Replace every editable field of a post."""


class PostOwner(BaseModel):
    """The user a post belongs to."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str | None


class PostSummary(BaseModel):
    """Post as listed under its owner."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str | None
    url: str
    likes: int


class PostResponse(PostSummary):
    """Post response."""

    user: PostOwner | None
    created_at: datetime
    updated_at: datetime
