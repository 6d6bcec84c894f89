"""Leaderboard computation - pure transforms over records already fetched.

Usage:
    playtime = accumulate_playtime(sessions, adjustments, idle_time_enabled)
    entries = build_leaderboard(members, playtime, rank_threshold)
    apply_active_overlay(entries, active_user_ids)
    top_three = top_entries(entries)
    you = find_entry(entries, user_id)
    sessions_top_three = session_count_entries(top_three, counts)

Entries are plain dicts shaped like the public response:
    {"id": "123", "position": 1, "total": 4200, "in_game": False}
"""

from datetime import timedelta

from .window import as_utc

TOP_N = 3
MS_PER_MINUTE = 60000
_ONE_MS = timedelta(milliseconds=1)


def session_effective_ms(session, idle_time_enabled):
    """Session duration minus idle time, in milliseconds. Not clamped at zero."""
    duration_ms = (as_utc(session.end_time) - as_utc(session.start_time)) // _ONE_MS
    idle_ms = (session.idle_minutes or 0) * MS_PER_MINUTE if idle_time_enabled else 0
    return duration_ms - idle_ms


def accumulate_playtime(sessions, adjustments, idle_time_enabled=True):
    """Sum effective session time and adjustments per user. Returns {user_id: ms}."""
    playtime = {}

    for session in sessions:
        if session.end_time is None or getattr(session, 'archived', False):
            continue
        playtime[session.user_id] = (
            playtime.get(session.user_id, 0) + session_effective_ms(session, idle_time_enabled)
        )

    for adjustment in adjustments:
        if getattr(adjustment, 'archived', False):
            continue
        playtime[adjustment.user_id] = (
            playtime.get(adjustment.user_id, 0) + adjustment.minutes * MS_PER_MINUTE
        )

    return playtime


def is_rank_eligible(rank, rank_threshold):
    """Whether a member passes rank gating. A falsy threshold disables gating."""
    if not rank_threshold:
        return True
    if rank is None:
        return False
    try:
        return float(rank) >= float(rank_threshold)
    except (ValueError, TypeError):
        return False


def build_leaderboard(members, playtime, rank_threshold=None):
    """Rank every eligible member by total seconds, descending.

    Members with no sessions or adjustments appear with a total of 0. Totals
    are floored to whole seconds, so -1500 ms becomes -2. Equal totals are
    ordered by ascending user id and still receive distinct positions.
    """
    ranked = []
    for member in members:
        if not is_rank_eligible(getattr(member, 'rank', None), rank_threshold):
            continue
        total_seconds = playtime.get(member.user_id, 0) // 1000
        ranked.append((member.user_id, total_seconds))

    ranked.sort(key=lambda item: (-item[1], item[0]))

    return [
        {
            "id": str(user_id),
            "position": index + 1,
            "total": total_seconds,
            "in_game": False,
        }
        for index, (user_id, total_seconds) in enumerate(ranked)
    ]


def apply_active_overlay(entries, active_user_ids):
    """Mark entries whose user currently has a live session. Mutates and returns entries."""
    active = {str(user_id) for user_id in active_user_ids}
    for entry in entries:
        entry["in_game"] = entry["id"] in active
    return entries


def top_entries(entries, n=TOP_N):
    return entries[:n]


def find_entry(entries, user_id):
    """Locate a user's entry anywhere in the ranked list, or None."""
    if user_id is None or user_id == "":
        return None
    wanted = str(user_id)
    for entry in entries:
        if entry["id"] == wanted:
            return entry
    return None


def session_count_entries(top, session_counts):
    """Pair each top entry's time-based position with its session count.

    The list keeps the playtime order and positions; it is not re-sorted by count.
    """
    counts = {str(user_id): count for user_id, count in session_counts.items()}
    return [
        {
            "id": entry["id"],
            "position": entry["position"],
            "total": counts.get(entry["id"], 0),
        }
        for entry in top
    ]
