"""Lenient Body Base: request bodies parsed without rejecting odd JSON.

Invariants:
    - A body that is not a JSON object parses to None (every field missing)
    - Falsy field values (null, "", 0, false, [], {}) become None
    - Other non-string values are stored as their JSON text ("5", "true")
"""

import json
from typing import Any

from pydantic import BaseModel


def coerce_text(value: Any) -> str | None:
    """Normalise a raw JSON field value to text, or None when absent."""
    if not value:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


class TextInput(BaseModel):
    """Base for bodies whose fields are free text."""

    @classmethod
    def from_payload(cls, payload: Any):
        """Instance for a JSON object payload, None for anything else."""
        if not isinstance(payload, dict):
            return None
        return cls.model_validate(payload)
