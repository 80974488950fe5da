"""Comment Schemas: request body and read model for comments."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from posts_api.schemas.base import TextInput, coerce_text


class CommentInput(TextInput):
    """Body of POST /api/posts/{id}/comments. post_id comes from the path."""
    text: str | None = None

    @field_validator("text", mode="before")
    @classmethod
    def normalise_text(cls, v):
        return coerce_text(v)


class CommentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    post_id: int
    created_at: datetime
    updated_at: datetime
