"""User account operations."""

import logging

from src.config import get_settings
from src.exceptions import NotFound, Unauthorized, ValidationError
from src.models.user import User
from src.schemas.user import UserCreate, UserUpdate
from src.services.auth import get_password_hash
from src.store import RecordStore

logger = logging.getLogger(__name__)


class UserService:
    """Service for registering and managing user accounts."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.password_min_length = get_settings().password_min_length

    def list_users(self) -> list[User]:
        return self.store.find_all(User)

    def get_user(self, user_id: int) -> User:
        user = self.store.find_by_id(User, user_id)
        if user is None:
            raise NotFound(f"user {user_id} not found")
        return user

    def create_user(self, user_data: UserCreate) -> User:
        """Register a new user. Raises UniqueConstraintViolation for a taken username."""
        self._check_password(user_data.password)

        user = User(
            username=user_data.username,
            name=user_data.name,
            password_hash=get_password_hash(user_data.password),
        )
        user = self.store.create(user)
        logger.info(f"Created user {user.id} ({user.username})")
        return user

    def update_user(self, user_id: int, user_data: UserUpdate, current_user: User) -> User:
        """Replace a user's username, name and password. Users may only update themselves."""
        self._check_self(user_id, current_user)
        self._check_password(user_data.password)

        user = self.store.update_by_id(
            User,
            user_id,
            {
                "username": user_data.username,
                "name": user_data.name,
                "password_hash": get_password_hash(user_data.password),
            },
        )
        if user is None:
            raise NotFound(f"user {user_id} not found")
        return user

    def delete_user(self, user_id: int, current_user: User) -> None:
        """Delete a user account. Posts owned by the user are kept."""
        self._check_self(user_id, current_user)
        self.store.delete_by_id(User, user_id)
        logger.info(f"Deleted user {user_id}")

    def _check_password(self, password: str) -> None:
        if len(password) < self.password_min_length:
            raise ValidationError(
                f"password must be at least {self.password_min_length} characters long"
            )

    def _check_self(self, user_id: int, current_user: User) -> None:
        if current_user.id != user_id:
            logger.warning(f"User {current_user.id} tried to modify user {user_id}")
            raise Unauthorized("you can only modify your own account")
