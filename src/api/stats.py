"""Statistics API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_post_service
from src.schemas.statistics import StatsResponse
from src.services.post_service import PostService

router = APIRouter(prefix="/api/v1/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
def get_stats(
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Get like and author statistics over all posts."""
    return service.get_statistics()
