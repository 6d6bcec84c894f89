"""Functional tests for aggregation window resolution."""

from datetime import datetime, timedelta, timezone

from playtime_board.activity.window import DEFAULT_EPOCH, as_utc, resolve_window

from conftest import GROUP_ID, NOW, Seeder


class TestResolveWindow:
    def test_default_epoch_without_reset(self, store):
        start, end = resolve_window(store, GROUP_ID, now=NOW)
        assert start == DEFAULT_EPOCH
        assert end == NOW

    def test_latest_reset_wins(self, store, seed):
        seed.reset(NOW - timedelta(days=10))
        seed.reset(NOW - timedelta(days=2))
        seed.reset(NOW - timedelta(days=5))

        start, _ = resolve_window(store, GROUP_ID, now=NOW)
        assert start == NOW - timedelta(days=2)

    def test_other_group_reset_ignored(self, store):
        Seeder(store, group_id=GROUP_ID + 1).reset(NOW - timedelta(days=1))
        start, _ = resolve_window(store, GROUP_ID, now=NOW)
        assert start == DEFAULT_EPOCH

    def test_end_defaults_to_wall_clock(self, store):
        before = datetime.now(timezone.utc)
        _, end = resolve_window(store, GROUP_ID)
        assert before <= end <= datetime.now(timezone.utc)


class TestAsUtc:
    def test_naive_assumed_utc(self):
        assert as_utc(datetime(2026, 1, 1)).tzinfo is timezone.utc

    def test_aware_converted_to_utc(self):
        """+02:00 wall clock becomes the UTC instant two hours earlier."""
        value = datetime(2026, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        converted = as_utc(value)
        assert converted.tzinfo is timezone.utc
        assert converted == value
        assert converted.replace(tzinfo=None) == datetime(2026, 1, 1, 10, 0)

    def test_aware_utc_unchanged(self):
        value = datetime(2026, 1, 1, tzinfo=timezone.utc)
        assert as_utc(value) == value

    def test_none(self):
        assert as_utc(None) is None


class TestOffsetWindow:
    def test_offset_now_normalised(self, store):
        now = datetime(2026, 3, 10, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        _, end = resolve_window(store, GROUP_ID, now=now)
        assert end.tzinfo is timezone.utc
        assert end == datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)

