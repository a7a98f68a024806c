"""Tests for the record store."""

import pytest
from sqlalchemy.exc import IntegrityError

from src.exceptions import UniqueConstraintViolation
from src.models.post import Post
from src.models.user import User
from src.store import RecordStore


@pytest.fixture
def store(db):
    return RecordStore(db)


def make_user(username: str = "root") -> User:
    return User(username=username, name="Superuser", password_hash="not-a-real-hash")


def test_create_assigns_id(store):
    """Test created records get an id."""
    user = store.create(make_user())
    assert user.id is not None
    assert store.find_by_id(User, user.id) is user


def test_create_duplicate_username(store):
    """Test a duplicate username raises and leaves the store unchanged."""
    store.create(make_user())

    with pytest.raises(UniqueConstraintViolation) as exc_info:
        store.create(make_user())

    assert exc_info.value.message == "expected username to be unique"
    assert len(store.find_all(User)) == 1


def test_find_all_ordered_by_id(store):
    """Test find_all returns records in creation order."""
    for username in ("carol", "alice", "bob"):
        store.create(make_user(username))

    assert [u.username for u in store.find_all(User)] == ["carol", "alice", "bob"]


def test_find_by_id_missing(store):
    """Test find_by_id returns None for an unknown id."""
    assert store.find_by_id(Post, 12345) is None


def test_update_by_id(store):
    """Test patching a record."""
    user = store.create(make_user())

    updated = store.update_by_id(User, user.id, {"name": "Renamed"})

    assert updated.name == "Renamed"
    assert updated.username == "root"


def test_update_by_id_missing(store):
    """Test updating an unknown id returns None."""
    assert store.update_by_id(User, 12345, {"name": "Nobody"}) is None


def test_delete_by_id(store):
    """Test deleting a record."""
    user = store.create(make_user())

    assert store.delete_by_id(User, user.id) is True
    assert store.find_by_id(User, user.id) is None


def test_delete_by_id_missing(store):
    """Test deleting an unknown id returns False."""
    assert store.delete_by_id(User, 12345) is False


def test_delete_user_does_not_cascade(store):
    """Test posts outlive their owner with the owner reference cleared."""
    user = store.create(make_user())
    post = Post(title="Kept", url="http://example.com", likes=1)
    user.posts.append(post)
    store.create(post)

    store.delete_by_id(User, user.id)

    remaining = store.find_all(Post)
    assert [p.title for p in remaining] == ["Kept"]
    assert remaining[0].user_id is None


def test_create_other_integrity_error_is_not_a_unique_violation(store):
    """Test non-unique constraint failures propagate unchanged and roll back."""
    with pytest.raises(IntegrityError) as exc_info:
        store.create(Post(title=None, url="http://example.com", likes=0))

    assert not isinstance(exc_info.value, UniqueConstraintViolation)
    assert store.find_all(Post) == []

    # The session is still usable after the rollback
    user = store.create(make_user())
    assert store.find_by_id(User, user.id) is user
