"""Input Validation: presence checks on request bodies before any store call.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Raise MissingFieldsError on violation, return None on success
    - A field is present when it is a non-empty string; whitespace counts as content
"""

from pydantic import BaseModel

from posts_api.core.domain_types import COMMENT_FIELDS_REQUIRED, POST_FIELDS_REQUIRED
from posts_api.core.errors import MissingFieldsError


def missing_fields(body: BaseModel | None, required: tuple[str, ...]) -> list[str]:
    """Names of required fields that are absent or empty, in declaration order."""
    if body is None:
        return list(required)
    return [name for name in required if not getattr(body, name, None)]


def check_post_fields(body: BaseModel | None) -> None:
    """Post create/update requires both title and contents."""
    missing = missing_fields(body, ("title", "contents"))
    if missing:
        raise MissingFieldsError(POST_FIELDS_REQUIRED, missing)


def check_comment_fields(body: BaseModel | None) -> None:
    """Comment create requires text."""
    missing = missing_fields(body, ("text",))
    if missing:
        raise MissingFieldsError(COMMENT_FIELDS_REQUIRED, missing)
