"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.database import get_db
from src.exceptions import Unauthorized
from src.schemas.auth import AuthResponse, UserLogin
from src.schemas.user import UserResponse
from src.services.auth import authenticate_user, create_access_token

router = APIRouter(prefix="/api/v1", tags=["auth"])


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with username and password."""
    user = authenticate_user(db, credentials.username, credentials.password)

    if not user:
        raise Unauthorized("invalid username or password")

    access_token = create_access_token(user.id, user.username)

    return AuthResponse(
        access_token=access_token,
        user=UserResponse.model_validate(user),
    )
