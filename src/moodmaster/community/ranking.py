"""
Community feed ordering and updates.

All functions take the caller's post collection read-only and return a new
list; nothing here mutates its input.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timezone
from enum import StrEnum

from loguru import logger

from ..core.exceptions import InvalidFieldError
from .models import Post


class RankMode(StrEnum):
    LATEST = "latest"
    POPULAR = "popular"


def rank(posts: Sequence[Post], mode: RankMode | str = RankMode.LATEST) -> list[Post]:
    """Order posts newest-first (``latest``) or most-liked-first (``popular``).

    The sort is stable: posts that tie keep their input order.

    Raises:
        InvalidFieldError: for an unknown mode.
    """
    try:
        mode = RankMode(mode)
    except ValueError:
        raise InvalidFieldError({"mode": f"must be latest or popular, got {mode!r}"}) from None

    if mode is RankMode.LATEST:
        return sorted(posts, key=lambda p: p.created_at, reverse=True)
    return sorted(posts, key=lambda p: p.likes, reverse=True)


def like(posts: Sequence[Post], post_id: int) -> list[Post]:
    """Return a copy of ``posts`` with one more like on ``post_id``.

    A missing id is not an error: the post may have been removed while the
    like was in flight, so the collection comes back unchanged.
    """
    if not any(p.id == post_id for p in posts):
        logger.debug(f"Ignoring like for missing post {post_id}")
        return list(posts)
    return [replace(p, likes=p.likes + 1) if p.id == post_id else p for p in posts]


def next_post_id(posts: Sequence[Post]) -> int:
    return max((p.id for p in posts), default=0) + 1


def add_post(
    posts: Sequence[Post],
    author: str,
    title: str,
    body: str,
    now: datetime | None = None,
) -> list[Post]:
    """Prepend a new post with the next id.

    ``now`` defaults to the current UTC time.

    Raises:
        InvalidFieldError: if author, title or body is blank (all reported together).
    """
    errors = {}
    if not author or not author.strip():
        errors["author"] = "Author is required"
    if not title or not title.strip():
        errors["title"] = "Title is required"
    if not body or not body.strip():
        errors["body"] = "Content is required"
    if errors:
        raise InvalidFieldError(errors)

    post = Post(
        id=next_post_id(posts),
        author=author.strip(),
        title=title.strip(),
        body=body.strip(),
        created_at=now or datetime.now(timezone.utc),
    )
    logger.debug(f"Created post {post.id} by {post.author}")
    return [post, *posts]
