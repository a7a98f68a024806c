"""Statistics schemas."""

from pydantic import BaseModel

from src.schemas.post import PostResponse


class AuthorPosts(BaseModel):
    """Author with the highest number of posts."""

    author: str | None
    posts: int


class AuthorLikes(BaseModel):
    """Author with the highest total of likes."""

    author: str | None
    likes: int


class StatsResponse(BaseModel):
    """Aggregate statistics over all posts."""

    total_likes: int
    favorite_post: PostResponse | None
    most_posts: AuthorPosts | None
    most_likes: AuthorLikes | None
