"""ORM Models: SQLAlchemy declarative models for posts and comments.

Invariants:
    - All models inherit from Base (db/base.py)
    - Post is the aggregate root; comments are scoped by post_id

Design Decisions:
    - All models imported here so string-based relationship() references resolve
      before any query runs
"""

from posts_api.models.post import Post  # noqa: F401
from posts_api.models.comment import Comment  # noqa: F401
