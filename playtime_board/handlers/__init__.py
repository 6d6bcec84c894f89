"""Public read API request handlers."""

from .base import PublicApiHandler
from .leaderboard import LeaderboardHandler
from .activity import ActivitySessionsHandler, MembersHandler

__all__ = [
    "PublicApiHandler",
    "LeaderboardHandler",
    "ActivitySessionsHandler",
    "MembersHandler",
]
