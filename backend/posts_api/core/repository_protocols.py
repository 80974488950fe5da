"""Boundary Protocols: contract between the route handlers and the data store.

Invariants:
    - Routes depend on PostStore only, never on a concrete store or the ORM
    - Every method is async and may raise StoreError
    - Reads return pydantic read models; writes return ids or affected-row counts

Design Decisions:
    - Protocol over ABC: structural subtyping, so a test double needs no base class
    - insert/insert_comment return the new id only; callers re-read the canonical record
"""

from typing import Mapping, Protocol

from posts_api.core.domain_types import CommentId, PostId
from posts_api.schemas.comment import CommentInput, CommentRead
from posts_api.schemas.post import PostInput, PostRead


class PostStore(Protocol):
    """Contract for post and comment persistence, implemented by the shell."""
    async def find(self, filters: Mapping[str, str]) -> list[PostRead]: ...
    async def find_by_id(self, post_id: PostId) -> PostRead | None: ...
    async def insert(self, post: PostInput) -> PostId: ...
    async def update(self, post_id: PostId, changes: PostInput) -> int: ...
    async def remove(self, post_id: PostId) -> int: ...
    async def find_post_comments(self, post_id: PostId) -> list[CommentRead] | None: ...
    async def insert_comment(
        self, post_id: PostId, comment: CommentInput,
    ) -> CommentId: ...
    async def find_comment_by_id(self, comment_id: CommentId) -> CommentRead | None: ...
