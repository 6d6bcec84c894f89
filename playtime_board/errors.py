"""Exceptions raised by the leaderboard service."""


class PlaytimeBoardError(Exception):
    """Base class for playtime_board errors."""


class InvalidGroupError(PlaytimeBoardError, ValueError):
    """Group identifier is missing or not a positive integer."""


class AggregationError(PlaytimeBoardError):
    """A store read or the leaderboard computation failed."""


def parse_group_id(value):
    """Parse a group id from a path or query value. Raises InvalidGroupError."""
    if value is None or isinstance(value, bool):
        raise InvalidGroupError("Missing workspace ID")
    try:
        group_id = int(str(value).strip())
    except (ValueError, TypeError):
        raise InvalidGroupError(f"Invalid workspace ID: {value!r}") from None
    if group_id <= 0:
        raise InvalidGroupError(f"Invalid workspace ID: {value!r}")
    return group_id
