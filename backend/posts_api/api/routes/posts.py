"""Posts Resource: CRUD over posts and creation/listing of their comments.

Invariants:
    - Presence checks run before any write; the store never sees an invalid body
    - Update and comment creation check the post exists BEFORE validating or writing
    - Created/updated records are re-read from the store, never echoed from the body
    - Delete reports 404 from the remove count, not from the pre-read
    - StoreError is logged here and surfaces only as the operation's fixed 500 body
    - A path id that is not a decimal integer is a post that does not exist
    - Bodies that are not JSON objects are treated as having no fields

Design Decisions:
    - Every step is awaited in sequence: one response per request, no racing writers
    - get_post_or_404 takes the operation so a failed lookup reports that
      operation's message
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status

from posts_api.api.dependencies import get_store
from posts_api.core.domain_types import POST_DELETED, CommentId, Operation, PostId
from posts_api.core.errors import (
    ErrorContext, OperationFailedError, PostNotFoundError, StoreError,
)
from posts_api.core.repository_protocols import PostStore
from posts_api.core.validate_input import check_comment_fields, check_post_fields
from posts_api.schemas.comment import CommentInput, CommentRead
from posts_api.schemas.post import PostDeleted, PostInput, PostRead

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/posts", tags=["posts"])


def _store_failure(
    operation: Operation, exc: StoreError, post_id: int | None = None,
) -> OperationFailedError:
    """Log a store failure and build the client-facing error for it."""
    logger.error(
        f"{operation.value} failed: {exc.message}",
        exc_info=exc,
        extra={"operation": operation.value, "post_id": post_id},
    )
    return OperationFailedError(operation, ErrorContext(post_id=post_id))


def parse_post_id(raw: str) -> PostId:
    """Integer id from the path, or PostNotFoundError when it cannot name a post."""
    if not (raw.isascii() and raw.isdigit()):
        raise PostNotFoundError(raw)
    return PostId(int(raw))


async def get_post_or_404(
    post_id: int, store: PostStore, operation: Operation,
) -> PostRead:
    """Fetch a post or raise PostNotFoundError."""
    try:
        post = await store.find_by_id(PostId(post_id))
    except StoreError as e:
        raise _store_failure(operation, e, post_id) from e
    if post is None:
        raise PostNotFoundError(post_id)
    return post


@router.get("", response_model=list[PostRead])
async def list_posts(request: Request, store: PostStore = Depends(get_store)):
    """All posts; query parameters are passed to the store as equality filters."""
    filters = dict(request.query_params)
    try:
        return await store.find(filters)
    except StoreError as e:
        raise _store_failure(Operation.LIST_POSTS, e) from e


@router.get("/{post_id}", response_model=PostRead)
async def get_post(post_id: str, store: PostStore = Depends(get_store)):
    return await get_post_or_404(parse_post_id(post_id), store, Operation.GET_POST)


@router.post(
    "", response_model=PostRead, status_code=status.HTTP_201_CREATED,
)
async def create_post(
    payload: Any = Body(None), store: PostStore = Depends(get_store),
):
    """Create a post and return it as stored."""
    body = PostInput.from_payload(payload)
    check_post_fields(body)
    try:
        new_id = await store.insert(body)
        post = await store.find_by_id(new_id)
    except StoreError as e:
        raise _store_failure(Operation.CREATE_POST, e) from e
    if post is None:
        raise OperationFailedError(Operation.CREATE_POST)
    logger.info("Post created", extra={"post_id": post.id})
    return post


@router.put("/{post_id}", response_model=PostRead)
async def update_post(
    post_id: str,
    payload: Any = Body(None),
    store: PostStore = Depends(get_store),
):
    """Replace a post's title and contents; returns the modified post."""
    post_id = parse_post_id(post_id)
    await get_post_or_404(post_id, store, Operation.UPDATE_POST)
    body = PostInput.from_payload(payload)
    check_post_fields(body)
    try:
        updated = await store.update(PostId(post_id), body)
        post = await store.find_by_id(PostId(post_id)) if updated else None
    except StoreError as e:
        raise _store_failure(Operation.UPDATE_POST, e, post_id) from e
    if post is None:
        raise PostNotFoundError(post_id)
    logger.info("Post updated", extra={"post_id": post_id})
    return post


@router.delete("/{post_id}", response_model=PostDeleted)
async def delete_post(post_id: str, store: PostStore = Depends(get_store)):
    """Delete a post and return its last state."""
    post_id = parse_post_id(post_id)
    try:
        deleted_post = await store.find_by_id(PostId(post_id))
        count = await store.remove(PostId(post_id))
    except StoreError as e:
        raise _store_failure(Operation.DELETE_POST, e, post_id) from e
    if count == 0:
        raise PostNotFoundError(post_id)
    logger.info("Post deleted", extra={"post_id": post_id})
    return PostDeleted(message=POST_DELETED, deleted_post=deleted_post)


# ─── Comments ────────────────────────────────────────────────────

@router.get("/{post_id}/comments", response_model=list[CommentRead])
async def list_comments(post_id: str, store: PostStore = Depends(get_store)):
    post_id = parse_post_id(post_id)
    try:
        comments = await store.find_post_comments(PostId(post_id))
    except StoreError as e:
        raise _store_failure(Operation.LIST_COMMENTS, e, post_id) from e
    if comments is None:
        raise PostNotFoundError(post_id)
    return comments


@router.post(
    "/{post_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    payload: Any = Body(None),
    store: PostStore = Depends(get_store),
):
    """Attach a comment to an existing post and return it as stored."""
    post_id = parse_post_id(post_id)
    await get_post_or_404(post_id, store, Operation.CREATE_COMMENT)
    body = CommentInput.from_payload(payload)
    check_comment_fields(body)
    try:
        comment_id = await store.insert_comment(PostId(post_id), body)
        comment = await store.find_comment_by_id(CommentId(comment_id))
    except StoreError as e:
        raise _store_failure(Operation.CREATE_COMMENT, e, post_id) from e
    if comment is None:
        raise OperationFailedError(
            Operation.CREATE_COMMENT, ErrorContext(post_id=post_id),
        )
    logger.info(
        "Comment created", extra={"post_id": post_id, "comment_id": comment.id},
    )
    return comment
