"""Community feed: posts, ranking and likes."""

from .models import Post, UserStats
from .ranking import RankMode, add_post, like, rank

__all__ = [
    "Post",
    "RankMode",
    "UserStats",
    "add_post",
    "like",
    "rank",
]
