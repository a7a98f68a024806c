"""Post operations and ownership checks."""

import logging

from src.exceptions import NotFound, Unauthorized
from src.models.post import Post
from src.models.user import User
from src.schemas.post import PostCreate, PostResponse, PostUpdate
from src.schemas.statistics import StatsResponse
from src.services import statistics
from src.store import RecordStore

logger = logging.getLogger(__name__)


class PostService:
    """Service for post CRUD. Only a post's owner may change or delete it."""

    def __init__(self, store: RecordStore):
        self.store = store

    def list_posts(self) -> list[Post]:
        return self.store.find_all(Post)

    def get_post(self, post_id: int) -> Post:
        post = self.store.find_by_id(Post, post_id)
        if post is None:
            raise NotFound(f"post {post_id} not found")
        return post

    def create_post(self, post_data: PostCreate, owner: User) -> Post:
        """Create a post owned by ``owner`` and add it to the owner's posts."""
        post = Post(
            title=post_data.title,
            author=post_data.author,
            url=post_data.url,
            likes=post_data.likes,
        )
        owner.posts.append(post)
        post = self.store.create(post)
        logger.info(f"User {owner.id} created post {post.id}")
        return post

    def update_post(self, post_id: int, post_data: PostUpdate, current_user: User) -> Post:
        """Replace title, author, url and likes of a post owned by ``current_user``."""
        self._get_owned_post(post_id, current_user)

        post = self.store.update_by_id(Post, post_id, post_data.model_dump())
        if post is None:
            raise NotFound(f"post {post_id} not found")
        return post

    def delete_post(self, post_id: int, current_user: User) -> None:
        """Delete a post owned by ``current_user``."""
        self._get_owned_post(post_id, current_user)
        self.store.delete_by_id(Post, post_id)
        logger.info(f"User {current_user.id} deleted post {post_id}")

    def get_statistics(self) -> StatsResponse:
        posts = self.list_posts()
        favorite = statistics.favorite_post(posts)
        return StatsResponse(
            total_likes=statistics.total_likes(posts),
            favorite_post=PostResponse.model_validate(favorite) if favorite else None,
            most_posts=statistics.most_prolific_author(posts),
            most_likes=statistics.most_liked_author(posts),
        )

    def _get_owned_post(self, post_id: int, user: User) -> Post:
        post = self.get_post(post_id)
        if post.user_id != user.id:
            logger.warning(f"User {user.id} is not the owner of post {post_id}")
            raise Unauthorized("you are not the author")
        return post
