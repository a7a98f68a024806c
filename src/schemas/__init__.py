"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthResponse, UserLogin
from src.schemas.post import PostCreate, PostOwner, PostResponse, PostSummary, PostUpdate
from src.schemas.statistics import AuthorLikes, AuthorPosts, StatsResponse
from src.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "UserLogin",
    "AuthResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "PostCreate",
    "PostUpdate",
    "PostOwner",
    "PostSummary",
    "PostResponse",
    "AuthorPosts",
    "AuthorLikes",
    "StatsResponse",
]
