"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_current_user, get_post_service
from src.models.user import User
from src.schemas.post import PostCreate, PostResponse, PostUpdate
from src.services.post_service import PostService

router = APIRouter(prefix="/api/v1/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
def get_posts(
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Get all posts."""
    return service.list_posts()


@router.get("/{post_id}", response_model=PostResponse)
def get_post(
    post_id: int,
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Get a specific post."""
    return service.get_post(post_id)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Create a new post owned by the current user."""
    return service.create_post(post_data, current_user)


@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: int,
    post_data: PostUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Replace a post. Only its owner may do this."""
    return service.update_post(post_id, post_data, current_user)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Delete a post. Only its owner may do this."""
    service.delete_post(post_id, current_user)
