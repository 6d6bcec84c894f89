"""Aggregation window resolution from the latest reset marker."""

from datetime import datetime, timezone

DEFAULT_EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)


def as_utc(value):
    """Treat naive datetimes (as returned by SQLite) as UTC; convert aware ones to UTC."""
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value.astimezone(timezone.utc)


def resolve_window(store, group_id, now=None):
    """Return (start, end) for the group's current aggregation window.

    start is the reset_at of the most recent reset marker, or DEFAULT_EPOCH
    when the group has never been reset. end is the wall clock at call time.
    """
    end = as_utc(now) if now is not None else datetime.now(timezone.utc)
    reset = store.latest_reset(group_id)
    start = as_utc(reset.reset_at) if reset is not None else DEFAULT_EPOCH
    return start, end
