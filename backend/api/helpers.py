"""Shared helpers for API routes (result mapping, response views)."""

from fastapi import HTTPException

from errors import Result, WallErrorKind
from formatting import format_post_date
from models import Post

ERROR_STATUS = {
    WallErrorKind.DUPLICATE_USERNAME: 409,
    WallErrorKind.INVALID_CREDENTIALS: 401,
    WallErrorKind.NOT_AUTHENTICATED: 401,
    WallErrorKind.INVALID_INPUT: 400,
    WallErrorKind.STORAGE_UNAVAILABLE: 503,
}


def unwrap(result: Result):
    """Return the success value or raise the HTTPException matching the error kind."""
    if result.ok:
        return result.value
    raise HTTPException(ERROR_STATUS.get(result.error, 500), result.message)


def post_view(post: Post) -> dict:
    """Build post dict for API responses."""
    return {
        "id": post.id,
        "content": post.content,
        "author_id": post.author_id,
        "author": post.author_display_name,
        "username": post.author_username,
        "created_at": post.created_at.isoformat(),
        "display_date": format_post_date(post.created_at),
    }
