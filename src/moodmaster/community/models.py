"""Community feed data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..core.exceptions import InvalidFieldError


@dataclass(frozen=True)
class Post:
    """A community post.

    Posts never change after creation except for their like count, and that
    only through ``ranking.like``, which returns a new Post.

    Attributes:
        id: Unique, assigned in increasing order.
        author: Display handle of the poster (e.g. "Anonymous12").
        title: Headline shown in the feed.
        body: Post text.
        likes: Like count, never negative.
        comments: Comment count.
        created_at: When the post was made.  Stored timezone-aware in UTC;
            a naive value is taken to be UTC already, so naive and aware
            posts can be ranked together.
    """

    id: int
    author: str
    title: str
    body: str
    created_at: datetime
    likes: int = 0
    comments: int = 0

    def __post_init__(self):
        errors = {}
        if self.likes < 0:
            errors["likes"] = f"must not be negative, got {self.likes}"
        if self.comments < 0:
            errors["comments"] = f"must not be negative, got {self.comments}"
        if errors:
            raise InvalidFieldError(errors)

        if self.created_at.tzinfo is None:
            object.__setattr__(self, "created_at", self.created_at.replace(tzinfo=timezone.utc))
        else:
            object.__setattr__(self, "created_at", self.created_at.astimezone(timezone.utc))


@dataclass
class UserStats:
    """Per-author profile counters, derived from posts and records.

    Not authoritative: recompute rather than edit.

    Attributes:
        author: Display handle.
        posts_count: Posts authored.
        likes_received: Likes summed over those posts.
        mood_breakdown: Percentages for "happy", "neutral" and "sad" days.
        exercise_days: Days with any exercise logged.
        meditation_days: Days with a meditation self-care entry.
        average_sleep: Mean hours over days with sleep logged, None if none.
    """

    author: str
    posts_count: int = 0
    likes_received: int = 0
    mood_breakdown: dict[str, int] = field(default_factory=lambda: {"happy": 0, "neutral": 0, "sad": 0})
    exercise_days: int = 0
    meditation_days: int = 0
    average_sleep: float | None = None
