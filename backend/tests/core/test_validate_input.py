"""Input Validation: pure presence checks on post and comment bodies.

Tests cover:
    - missing_fields reports absent and empty fields in order
    - check_post_fields / check_comment_fields raise MissingFieldsError with fixed text
    - whitespace-only values count as present
"""

import pytest

from posts_api.core.domain_types import COMMENT_FIELDS_REQUIRED, POST_FIELDS_REQUIRED
from posts_api.core.errors import MissingFieldsError
from posts_api.core.validate_input import (
    check_comment_fields, check_post_fields, missing_fields,
)
from posts_api.schemas.comment import CommentInput
from posts_api.schemas.post import PostInput


def test_missing_fields_none_body_reports_all():
    assert missing_fields(None, ("title", "contents")) == ["title", "contents"]


def test_missing_fields_reports_empty_strings():
    body = PostInput(title="", contents="x")
    assert missing_fields(body, ("title", "contents")) == ["title"]


def test_check_post_fields_accepts_complete_body():
    assert check_post_fields(PostInput(title="A", contents="B")) is None


def test_check_post_fields_accepts_whitespace():
    assert check_post_fields(PostInput(title=" ", contents=" ")) is None


@pytest.mark.parametrize("body", [
    None,
    PostInput(),
    PostInput(title="A"),
    PostInput(contents="B"),
    PostInput(title="", contents=""),
])
def test_check_post_fields_rejects_incomplete(body):
    with pytest.raises(MissingFieldsError) as exc_info:
        check_post_fields(body)
    assert exc_info.value.message == POST_FIELDS_REQUIRED
    assert exc_info.value.http_status == 400


def test_check_post_fields_lists_missing_fields():
    with pytest.raises(MissingFieldsError) as exc_info:
        check_post_fields(PostInput(title="A"))
    assert exc_info.value.fields == ["contents"]


def test_check_comment_fields_accepts_text():
    assert check_comment_fields(CommentInput(text="hi")) is None


@pytest.mark.parametrize("body", [None, CommentInput(), CommentInput(text="")])
def test_check_comment_fields_rejects_missing_text(body):
    with pytest.raises(MissingFieldsError) as exc_info:
        check_comment_fields(body)
    assert exc_info.value.to_response() == {"errorMessage": COMMENT_FIELDS_REQUIRED}
