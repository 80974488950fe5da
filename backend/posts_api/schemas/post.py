"""Post Schemas: request body and read model for posts.

Invariants:
    - PostInput fields are optional so a missing field reaches the 400 path with
      the fixed message instead of a generic validation error
    - Unknown body keys are ignored (id, created_at are never client-supplied)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from posts_api.schemas.base import TextInput, coerce_text


class PostInput(TextInput):
    """Body of POST /api/posts and PUT /api/posts/{id}."""
    title: str | None = None
    contents: str | None = None

    @field_validator("title", "contents", mode="before")
    @classmethod
    def normalise_text(cls, v):
        return coerce_text(v)


class PostRead(BaseModel):
    """Canonical post as stored."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    contents: str
    created_at: datetime
    updated_at: datetime


class PostDeleted(BaseModel):
    """Body of a successful DELETE."""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    deleted_post: PostRead | None = Field(None, alias="deletedPost")
