"""In-memory PostStore double: records calls and fails on demand.

Used where a test needs a store failure at a specific step, or needs to
assert which store calls a route made.
"""

from datetime import datetime, timezone

from posts_api.core.domain_types import CommentId, PostId
from posts_api.core.errors import StoreError
from posts_api.schemas.comment import CommentInput, CommentRead
from posts_api.schemas.post import PostInput, PostRead


class InMemoryPostStore:
    """Dict-backed PostStore. Methods named in fail_on raise StoreError."""

    def __init__(self, fail_on: set[str] | None = None):
        self.fail_on = fail_on or set()
        self.calls: list[str] = []
        self.posts: dict[int, PostRead] = {}
        self.comments: dict[int, CommentRead] = {}
        self._next_post_id = 1
        self._next_comment_id = 1

    def _enter(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail_on:
            raise StoreError("simulated failure", name)

    def seed_post(self, title: str = "Seeded", contents: str = "Body") -> PostRead:
        now = datetime.now(timezone.utc)
        post = PostRead(
            id=self._next_post_id, title=title, contents=contents,
            created_at=now, updated_at=now,
        )
        self.posts[post.id] = post
        self._next_post_id += 1
        return post

    async def find(self, filters) -> list[PostRead]:
        self._enter("find")
        return [
            p for p in self.posts.values()
            if all(str(getattr(p, k)) == v for k, v in filters.items())
        ]

    async def find_by_id(self, post_id: PostId) -> PostRead | None:
        self._enter("find_by_id")
        return self.posts.get(post_id)

    async def insert(self, post: PostInput) -> PostId:
        self._enter("insert")
        return PostId(self.seed_post(post.title, post.contents).id)

    async def update(self, post_id: PostId, changes: PostInput) -> int:
        self._enter("update")
        if post_id not in self.posts:
            return 0
        self.posts[post_id] = self.posts[post_id].model_copy(
            update={"title": changes.title, "contents": changes.contents},
        )
        return 1

    async def remove(self, post_id: PostId) -> int:
        self._enter("remove")
        return 1 if self.posts.pop(post_id, None) else 0

    async def find_post_comments(self, post_id: PostId) -> list[CommentRead] | None:
        self._enter("find_post_comments")
        if post_id not in self.posts:
            return None
        return [c for c in self.comments.values() if c.post_id == post_id]

    async def insert_comment(
        self, post_id: PostId, comment: CommentInput,
    ) -> CommentId:
        self._enter("insert_comment")
        now = datetime.now(timezone.utc)
        row = CommentRead(
            id=self._next_comment_id, text=comment.text, post_id=post_id,
            created_at=now, updated_at=now,
        )
        self.comments[row.id] = row
        self._next_comment_id += 1
        return CommentId(row.id)

    async def find_comment_by_id(self, comment_id: CommentId) -> CommentRead | None:
        self._enter("find_comment_by_id")
        return self.comments.get(comment_id)
