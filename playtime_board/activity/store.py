"""ActivityStore - SQLAlchemy-backed reads for the leaderboard.

Every read opens its own ORM session so reads can run concurrently from a
thread pool. Errors propagate to the caller.
"""

import logging

from sqlalchemy import and_, create_engine, func, null
from sqlalchemy.orm import sessionmaker

from .model import (
    ActivityAdjustment,
    ActivityBase,
    ActivityConfig,
    ActivityReset,
    ActivitySession,
    GroupMember,
)
from .window import as_utc

log = logging.getLogger('playtime_board.store')


class ActivityStore:
    """Read access to sessions, adjustments, reset markers, members and config.

    Usage:
        store = ActivityStore.from_url('sqlite:////data/activity.sqlite')
        start, end = resolve_window(store, group_id)
        sessions = store.list_ended_sessions(group_id, (start, end))
    """

    def __init__(self, engine):
        self._engine = engine
        self._session_factory = sessionmaker(bind=engine)

    @classmethod
    def from_url(cls, db_url):
        store = cls(create_engine(db_url))
        log.info(f"[ActivityStore] Database engine created: {db_url}")
        return store

    @property
    def engine(self):
        return self._engine

    def session(self):
        """Open a new ORM session (context manager)."""
        return self._session_factory()

    def create_all(self):
        ActivityBase.metadata.create_all(self._engine)

    # ------------------------------------------------------------------
    # Window and config
    # ------------------------------------------------------------------

    def latest_reset(self, group_id):
        with self.session() as db:
            return db.query(ActivityReset).filter(
                ActivityReset.group_id == group_id,
            ).order_by(ActivityReset.reset_at.desc()).first()

    def get_config(self, group_id):
        """Return {'rank_threshold': int|None, 'idle_time_enabled': bool}."""
        with self.session() as db:
            row = db.get(ActivityConfig, group_id)

        if row is None:
            return {'rank_threshold': None, 'idle_time_enabled': True}
        return {
            'rank_threshold': row.leaderboard_rank,
            'idle_time_enabled': True if row.idle_time_enabled is None else bool(row.idle_time_enabled),
        }

    # ------------------------------------------------------------------
    # Leaderboard reads
    # ------------------------------------------------------------------

    def _window_session_filters(self, group_id, window):
        start, end = map(as_utc, window)
        return [
            ActivitySession.group_id == group_id,
            ActivitySession.start_time >= start,
            ActivitySession.start_time <= end,
            ActivitySession.archived.isnot(True),
            ActivitySession.end_time.isnot(None),
        ]

    def list_ended_sessions(self, group_id, window):
        """Closed, unarchived sessions that started inside the window."""
        with self.session() as db:
            return db.query(ActivitySession).filter(
                *self._window_session_filters(group_id, window)
            ).all()

    def list_adjustments(self, group_id, window):
        start, end = map(as_utc, window)
        with self.session() as db:
            return db.query(ActivityAdjustment).filter(
                ActivityAdjustment.group_id == group_id,
                ActivityAdjustment.created_at >= start,
                ActivityAdjustment.created_at <= end,
                ActivityAdjustment.archived.isnot(True),
            ).all()

    def list_members(self, group_id, needs_rank=False):
        """Members as rows with user_id, username and rank (None unless needs_rank)."""
        rank_column = GroupMember.rank_id if needs_rank else null()
        with self.session() as db:
            return db.query(
                GroupMember.user_id,
                GroupMember.username,
                rank_column.label('rank'),
            ).filter(GroupMember.group_id == group_id).all()

    def list_active_user_ids(self, group_id):
        """Users with an unarchived session currently flagged active, regardless of window."""
        with self.session() as db:
            rows = db.query(func.distinct(ActivitySession.user_id)).filter(
                ActivitySession.group_id == group_id,
                ActivitySession.active.is_(True),
                ActivitySession.archived.isnot(True),
            ).all()
        return {r[0] for r in rows}

    def count_sessions_for_users(self, group_id, window, user_ids):
        """Count closed, unarchived in-window sessions per user. Returns {user_id: count}."""
        user_ids = list(user_ids)
        if not user_ids:
            return {}

        with self.session() as db:
            rows = db.query(ActivitySession.user_id, func.count(ActivitySession.id)).filter(
                *self._window_session_filters(group_id, window),
                ActivitySession.user_id.in_(user_ids),
            ).group_by(ActivitySession.user_id).all()
        return {user_id: count for user_id, count in rows}

    # ------------------------------------------------------------------
    # Public listings
    # ------------------------------------------------------------------

    def list_recent_sessions(self, group_id, user_id=None, start=None, end=None, limit=100):
        """Unarchived sessions newest first, with member username/picture when known."""
        with self.session() as db:
            query = db.query(ActivitySession, GroupMember.username, GroupMember.picture).outerjoin(
                GroupMember,
                and_(
                    GroupMember.group_id == ActivitySession.group_id,
                    GroupMember.user_id == ActivitySession.user_id,
                ),
            ).filter(
                ActivitySession.group_id == group_id,
                ActivitySession.archived.isnot(True),
            )
            if user_id is not None:
                query = query.filter(ActivitySession.user_id == user_id)
            if start is not None:
                query = query.filter(ActivitySession.start_time >= as_utc(start))
            if end is not None:
                query = query.filter(ActivitySession.start_time <= as_utc(end))

            return query.order_by(ActivitySession.start_time.desc()).limit(limit).all()

    def list_group_members(self, group_id):
        with self.session() as db:
            return db.query(GroupMember).filter(
                GroupMember.group_id == group_id,
            ).order_by(GroupMember.user_id).all()
