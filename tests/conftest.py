"""Shared fixtures for playtime_board functional tests."""

import os
from datetime import datetime, timedelta, timezone

import pytest

from playtime_board.activity.model import (
    ActivityAdjustment,
    ActivityConfig,
    ActivityReset,
    ActivitySession,
    GroupMember,
)
from playtime_board.activity.service import LeaderboardService
from playtime_board.activity.store import ActivityStore

GROUP_ID = 42
NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Strip PLAYTIME_* env vars for test isolation."""
    for key in list(os.environ):
        if key.startswith("PLAYTIME_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def store(tmp_path):
    """ActivityStore on a file-backed SQLite database with tables created."""
    store = ActivityStore.from_url(f"sqlite:///{tmp_path / 'activity.sqlite'}")
    store.create_all()
    yield store
    store.engine.dispose()


@pytest.fixture
def service(store):
    service = LeaderboardService(store, max_workers=2)
    yield service
    service.shutdown()


class Seeder:
    """Inserts records into a store for a single group."""

    def __init__(self, store, group_id=GROUP_ID):
        self.store = store
        self.group_id = group_id

    def _add(self, *rows):
        with self.store.session() as db:
            db.add_all(rows)
            db.commit()

    def member(self, user_id, username=None, rank=None, picture=None):
        self._add(GroupMember(
            group_id=self.group_id, user_id=user_id,
            username=username or f"user{user_id}", picture=picture, rank_id=rank,
        ))

    def session(self, user_id, start, minutes=None, idle=0, active=False, archived=False, messages=None):
        """Closed session of `minutes` length, or an open one when minutes is None."""
        end = start + timedelta(minutes=minutes) if minutes is not None else None
        self._add(ActivitySession(
            group_id=self.group_id, user_id=user_id, start_time=start, end_time=end,
            idle_minutes=idle, active=active, archived=archived, messages=messages,
        ))

    def adjustment(self, user_id, minutes, created_at, archived=False):
        self._add(ActivityAdjustment(
            group_id=self.group_id, user_id=user_id, minutes=minutes,
            created_at=created_at, archived=archived,
        ))

    def reset(self, reset_at):
        self._add(ActivityReset(group_id=self.group_id, reset_at=reset_at))

    def config(self, leaderboard_rank=None, idle_time_enabled=True):
        self._add(ActivityConfig(
            group_id=self.group_id, leaderboard_rank=leaderboard_rank,
            idle_time_enabled=idle_time_enabled,
        ))


@pytest.fixture
def seed(store):
    return Seeder(store)
