"""FastAPI dependencies for authentication, storage and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.exceptions import InvalidToken, Unauthorized
from src.models.user import User
from src.services.auth import decode_access_token
from src.services.post_service import PostService
from src.services.user_service import UserService
from src.store import RecordStore

# auto_error is off so a missing header gets the same 401 body as a bad token
security = HTTPBearer(auto_error=False)


def get_store(db: Annotated[Session, Depends(get_db)]) -> RecordStore:
    """Get a record store bound to the request's session."""
    return RecordStore(db)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    store: Annotated[RecordStore, Depends(get_store)],
) -> User:
    """Get the current authenticated user from JWT token."""
    if credentials is None:
        raise Unauthorized("token invalid")

    try:
        user_id = decode_access_token(credentials.credentials)
    except InvalidToken as e:
        raise Unauthorized("token invalid") from e

    user = store.find_by_id(User, user_id)
    if user is None:
        raise Unauthorized("token invalid")

    return user


def get_user_service(
    store: Annotated[RecordStore, Depends(get_store)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(store)


def get_post_service(
    store: Annotated[RecordStore, Depends(get_store)],
) -> PostService:
    """Get post service with dependencies."""
    return PostService(store)
