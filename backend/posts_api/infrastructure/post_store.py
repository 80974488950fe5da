"""SQL Post Store: PostStore implementation over an async SQLAlchemy session.

Invariants:
    - Returns PostRead / CommentRead, never ORM rows
    - Every write commits before returning; every failure rolls back
    - Every SQLAlchemy failure is re-raised as StoreError naming the operation
    - find_post_comments returns None (not []) when the post does not exist

Design Decisions:
    - Re-reads use populate_existing so a record updated earlier in the same
      session is loaded from the database, not the identity map
    - remove deletes comments explicitly: SQLite enforces ON DELETE CASCADE only
      with the foreign_keys pragma enabled
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Mapping

from sqlalchemy import Column, DateTime, delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from posts_api.core.domain_types import CommentId, PostId
from posts_api.core.errors import StoreError
from posts_api.models.comment import Comment
from posts_api.models.post import Post
from posts_api.schemas.comment import CommentInput, CommentRead
from posts_api.schemas.post import PostInput, PostRead

logger = logging.getLogger(__name__)


def _coerce_filter_value(column: Column, raw: str) -> object:
    """Convert a query-string value to the column's Python type."""
    if isinstance(column.type, DateTime):
        return datetime.fromisoformat(raw)
    python_type = column.type.python_type
    if python_type is str:
        return raw
    return python_type(raw)


class SqlPostStore:
    """Posts and comments persisted through SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _translate_errors(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except IntegrityError as e:
            await self._db.rollback()
            logger.error(f"Store integrity error: {e}", extra={"operation": operation})
            raise StoreError("Integrity constraint violated", operation) from e
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"Store error: {e}", extra={"operation": operation})
            raise StoreError("Database operation failed", operation) from e

    async def _select_post(self, post_id: int) -> Post | None:
        result = await self._db.execute(
            select(Post)
            .where(Post.id == post_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    # ─── Posts ───────────────────────────────────────────────────

    async def find(self, filters: Mapping[str, str]) -> list[PostRead]:
        """All posts matching every key=value filter, ordered by id."""
        query = select(Post).order_by(Post.id)
        columns = Post.__table__.c
        for key, raw in filters.items():
            if key not in columns:
                raise StoreError(f"Unknown filter field '{key}'", "find")
            try:
                value = _coerce_filter_value(columns[key], raw)
            except (TypeError, ValueError) as e:
                raise StoreError(f"Invalid value for '{key}'", "find") from e
            query = query.where(columns[key] == value)

        async with self._translate_errors("find"):
            result = await self._db.execute(query)
            return [PostRead.model_validate(p) for p in result.scalars().all()]

    async def find_by_id(self, post_id: PostId) -> PostRead | None:
        async with self._translate_errors("find_by_id"):
            post = await self._select_post(post_id)
        return PostRead.model_validate(post) if post else None

    async def insert(self, post: PostInput) -> PostId:
        async with self._translate_errors("insert"):
            row = Post(title=post.title, contents=post.contents)
            self._db.add(row)
            await self._db.commit()
            return PostId(row.id)

    async def update(self, post_id: PostId, changes: PostInput) -> int:
        """Replace title and contents. Returns the number of rows updated."""
        async with self._translate_errors("update"):
            result = await self._db.execute(
                update(Post)
                .where(Post.id == post_id)
                .values(
                    title=changes.title,
                    contents=changes.contents,
                    updated_at=datetime.now(timezone.utc),
                ),
            )
            await self._db.commit()
            return result.rowcount

    async def remove(self, post_id: PostId) -> int:
        """Delete a post and its comments. Returns the number of posts deleted."""
        async with self._translate_errors("remove"):
            await self._db.execute(
                delete(Comment).where(Comment.post_id == post_id),
            )
            result = await self._db.execute(
                delete(Post).where(Post.id == post_id),
            )
            await self._db.commit()
            return result.rowcount

    # ─── Comments ────────────────────────────────────────────────

    async def find_post_comments(self, post_id: PostId) -> list[CommentRead] | None:
        async with self._translate_errors("find_post_comments"):
            exists = await self._db.execute(
                select(Post.id).where(Post.id == post_id),
            )
            if exists.scalar_one_or_none() is None:
                return None
            result = await self._db.execute(
                select(Comment)
                .where(Comment.post_id == post_id)
                .order_by(Comment.id),
            )
            return [CommentRead.model_validate(c) for c in result.scalars().all()]

    async def insert_comment(
        self, post_id: PostId, comment: CommentInput,
    ) -> CommentId:
        async with self._translate_errors("insert_comment"):
            row = Comment(text=comment.text, post_id=post_id)
            self._db.add(row)
            await self._db.commit()
            return CommentId(row.id)

    async def find_comment_by_id(self, comment_id: CommentId) -> CommentRead | None:
        async with self._translate_errors("find_comment_by_id"):
            result = await self._db.execute(
                select(Comment)
                .where(Comment.id == comment_id)
                .execution_options(populate_existing=True),
            )
            comment = result.scalar_one_or_none()
        return CommentRead.model_validate(comment) if comment else None
