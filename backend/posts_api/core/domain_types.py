"""Domain Types: identity types and fixed response texts shared by routes and tests.

Invariants:
    - PostId, CommentId wrap the store-assigned integer keys
    - Every client-visible message is defined once, here
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)


# ─── Operations ──────────────────────────────────────────────────

class Operation(str, Enum):
    """Handler operations, used as the `operation` log field."""
    LIST_POSTS = "list_posts"
    GET_POST = "get_post"
    CREATE_POST = "create_post"
    UPDATE_POST = "update_post"
    DELETE_POST = "delete_post"
    LIST_COMMENTS = "list_comments"
    CREATE_COMMENT = "create_comment"


# ─── Response Texts ──────────────────────────────────────────────

POST_NOT_FOUND = "The post with the specified ID does not exist."
POST_DELETED = "The post has been deleted."
POST_FIELDS_REQUIRED = "Please provide title and contents for the post."
COMMENT_FIELDS_REQUIRED = "Please provide text for the comment."

# 500 bodies, one per operation. Clients match these strings verbatim,
# trailing punctuation included.
FAILURE_MESSAGES: dict[Operation, str] = {
    Operation.LIST_POSTS: "The posts information could not be retrieved.",
    Operation.GET_POST: "The post information could not be retrieved.",
    Operation.CREATE_POST: "There was an error while saving the post to the database",
    Operation.UPDATE_POST: "The post information could not be modified.",
    Operation.DELETE_POST: "The post could not be removed",
    Operation.LIST_COMMENTS: "The comments information could not be retrieved.",
    Operation.CREATE_COMMENT: "There was an error while saving the comment to the database.",
}
