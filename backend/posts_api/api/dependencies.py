"""Request-scoped dependencies shared by route modules."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from posts_api.core.repository_protocols import PostStore
from posts_api.infrastructure.database import get_db
from posts_api.infrastructure.post_store import SqlPostStore


async def get_store(db: AsyncSession = Depends(get_db)) -> PostStore:
    """PostStore bound to this request's database session."""
    return SqlPostStore(db)
