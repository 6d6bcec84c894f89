"""Activity leaderboard subsystem."""

from .model import (
    ActivityAdjustment,
    ActivityBase,
    ActivityConfig,
    ActivityReset,
    ActivitySession,
    GroupMember,
)
from .window import DEFAULT_EPOCH, resolve_window
from .engine import (
    TOP_N,
    accumulate_playtime,
    apply_active_overlay,
    build_leaderboard,
    find_entry,
    session_count_entries,
    top_entries,
)
from .store import ActivityStore
from .service import LeaderboardService

__all__ = [
    "ActivityAdjustment",
    "ActivityBase",
    "ActivityConfig",
    "ActivityReset",
    "ActivitySession",
    "GroupMember",
    "DEFAULT_EPOCH",
    "resolve_window",
    "TOP_N",
    "accumulate_playtime",
    "apply_active_overlay",
    "build_leaderboard",
    "find_entry",
    "session_count_entries",
    "top_entries",
    "ActivityStore",
    "LeaderboardService",
]
