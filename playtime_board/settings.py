"""Environment configuration for the leaderboard service."""

import logging
import os

log = logging.getLogger('playtime_board.settings')


def get_env_int(name, default, min_val, max_val):
    """Get integer from environment with validation."""
    try:
        value = int(os.environ.get(name, default))
        if value < min_val or value > max_val:
            log.info(f"[Settings] {name}={value} out of range ({min_val}-{max_val}), using default {default}")
            return default
        return value
    except (ValueError, TypeError):
        log.info(f"[Settings] {name} invalid, using default {default}")
        return default


class Settings:
    """Process-wide settings read once from the environment."""

    DEFAULT_DB_URL = 'sqlite:////data/activity.sqlite'
    DEFAULT_PORT = 8000
    DEFAULT_READ_WORKERS = 4
    DEFAULT_SESSION_LIST_LIMIT = 100

    def __init__(self):
        self.db_url = os.environ.get('PLAYTIME_DB_URL') or self.DEFAULT_DB_URL
        self.port = get_env_int('PLAYTIME_PORT', self.DEFAULT_PORT, 1, 65535)
        self.read_workers = get_env_int('PLAYTIME_READ_WORKERS', self.DEFAULT_READ_WORKERS, 1, 64)
        self.session_list_limit = get_env_int(
            'PLAYTIME_SESSION_LIST_LIMIT', self.DEFAULT_SESSION_LIST_LIMIT, 1, 1000)

        log.info(
            f"[Settings] Config: port={self.port}, read_workers={self.read_workers}, "
            f"session_list_limit={self.session_list_limit}"
        )
