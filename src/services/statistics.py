"""Aggregate statistics over a sequence of posts.

The functions only read ``likes`` and ``author`` from each post, so they work
on ORM rows and response models alike. Ties go to whichever post or author
appears first in the input.
"""

from collections.abc import Sequence
from typing import Any

from src.schemas.statistics import AuthorLikes, AuthorPosts


def total_likes(posts: Sequence[Any]) -> int:
    """Sum of like counts, 0 for no posts."""
    return sum(post.likes for post in posts)


def favorite_post(posts: Sequence[Any]) -> Any | None:
    """The most liked post, or None if there are no posts or no likes at all."""
    if not posts:
        return None

    max_likes = max(post.likes for post in posts)
    if max_likes == 0:
        return None

    return next(post for post in posts if post.likes == max_likes)


def most_prolific_author(posts: Sequence[Any]) -> AuthorPosts | None:
    """The author with the most posts and their post count."""
    counts: dict[str | None, int] = {}
    for post in posts:
        counts[post.author] = counts.get(post.author, 0) + 1

    best = _first_max(counts)
    if best is None:
        return None
    return AuthorPosts(author=best[0], posts=best[1])


def most_liked_author(posts: Sequence[Any]) -> AuthorLikes | None:
    """The author whose posts have the most likes in total, and that total."""
    likes: dict[str | None, int] = {}
    for post in posts:
        likes[post.author] = likes.get(post.author, 0) + post.likes

    best = _first_max(likes)
    if best is None:
        return None
    return AuthorLikes(author=best[0], likes=best[1])


def _first_max(totals: dict[str | None, int]) -> tuple[str | None, int] | None:
    # dicts keep insertion order, so max() returns the earliest author on ties
    if not totals:
        return None

    author, value = max(totals.items(), key=lambda item: item[1])
    if value == 0:
        return None
    return author, value
