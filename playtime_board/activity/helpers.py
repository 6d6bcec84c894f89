"""Formatting helpers for the public session and member listings."""

from datetime import datetime, timedelta

from .window import as_utc


def parse_query_datetime(value):
    """Parse an ISO-8601 query value ('Z' suffix allowed). Returns aware UTC or None."""
    if not value:
        return None
    return as_utc(datetime.fromisoformat(value.replace('Z', '+00:00')))


def session_duration_seconds(session):
    """Whole seconds between start and end, or None while the session is open."""
    if session.end_time is None:
        return None
    return (as_utc(session.end_time) - as_utc(session.start_time)) // timedelta(seconds=1)


def _isoformat(value):
    value = as_utc(value)
    return value.isoformat() if value is not None else None


def format_session(session, username=None, picture=None):
    return {
        "id": session.id,
        "userId": session.user_id,
        "username": username,
        "thumbnail": picture,
        "active": bool(session.active),
        "startTime": _isoformat(session.start_time),
        "endTime": _isoformat(session.end_time),
        "duration": session_duration_seconds(session),
        "messages": session.messages,
    }


def format_member(member):
    return {
        "userId": member.user_id,
        "username": member.username,
        "thumbnail": member.picture,
        "rank": member.rank_id,
    }
