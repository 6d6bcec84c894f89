"""Import tests for playtime_board package.

Verifies that all modules and public API can be imported without errors.
"""

import importlib

import pytest


def test_package_has_version():
    from playtime_board import __version__
    assert isinstance(__version__, str)
    assert len(__version__) > 0


def test_top_level_imports():
    from playtime_board import ActivityStore, LeaderboardService, make_app, resolve_window
    from playtime_board import AggregationError, InvalidGroupError, parse_group_id
    assert callable(make_app)
    assert callable(resolve_window)
    assert issubclass(AggregationError, Exception)


@pytest.mark.parametrize("module", [
    "playtime_board.app",
    "playtime_board.errors",
    "playtime_board.settings",
    "playtime_board.activity.engine",
    "playtime_board.activity.helpers",
    "playtime_board.activity.model",
    "playtime_board.activity.service",
    "playtime_board.activity.store",
    "playtime_board.activity.window",
    "playtime_board.handlers",
])
def test_module_imports(module):
    assert importlib.import_module(module) is not None


def test_activity_exports():
    from playtime_board import activity
    for name in activity.__all__:
        assert hasattr(activity, name), name
