"""Activity leaderboard aggregation service."""

__version__ = "1.0.0"

from .errors import AggregationError, InvalidGroupError, PlaytimeBoardError, parse_group_id
from .settings import Settings
from .activity import ActivityStore, LeaderboardService, resolve_window
from .app import make_app

__all__ = [
    "AggregationError",
    "InvalidGroupError",
    "PlaytimeBoardError",
    "parse_group_id",
    "Settings",
    "ActivityStore",
    "LeaderboardService",
    "resolve_window",
    "make_app",
]
