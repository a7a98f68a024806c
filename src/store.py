"""Record store: CRUD over the User and Post tables.

Every operation commits on its own. Lookups return ``None`` (or ``False`` for
deletes) when the record does not exist, so callers branch before use.
"""

import logging
from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.exceptions import UniqueConstraintViolation

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class RecordStore:
    """Generic CRUD over SQLAlchemy models, bound to one session."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self, model: type[ModelT]) -> list[ModelT]:
        return self.db.query(model).order_by(model.id).all()

    def find_by_id(self, model: type[ModelT], record_id: int) -> ModelT | None:
        return self.db.get(model, record_id)

    def create(self, record: ModelT) -> ModelT:
        """Persist a new record and return it with its assigned id."""
        self.db.add(record)
        self._commit()
        self.db.refresh(record)
        return record

    def update_by_id(
        self, model: type[ModelT], record_id: int, patch: dict[str, Any]
    ) -> ModelT | None:
        """Apply ``patch`` to the record. Returns None if it does not exist."""
        record = self.find_by_id(model, record_id)
        if record is None:
            return None

        for field, value in patch.items():
            setattr(record, field, value)

        self._commit()
        self.db.refresh(record)
        return record

    def delete_by_id(self, model: type[ModelT], record_id: int) -> bool:
        record = self.find_by_id(model, record_id)
        if record is None:
            return False

        self.db.delete(record)
        self._commit()
        return True

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if not _is_unique_username_violation(e):
                raise
            logger.info(f"Unique constraint violated on commit: {e.orig}")
            raise UniqueConstraintViolation("username") from e


def _is_unique_username_violation(error: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed: users.username"
    # PostgreSQL: duplicate key value violates unique constraint "ix_users_username"
    message = str(error.orig).lower()
    return "unique" in message and "username" in message
