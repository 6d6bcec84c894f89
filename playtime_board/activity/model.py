"""Activity ORM models - sessions, adjustments, reset markers, members and group config."""

from sqlalchemy import BigInteger, Boolean, Column, DateTime, Index, Integer, String
from sqlalchemy.orm import declarative_base

ActivityBase = declarative_base()


class ActivitySession(ActivityBase):
    """A timed record of a user's activity. end_time is NULL while the session is open."""
    __tablename__ = 'activity_sessions'

    id = Column(Integer, primary_key=True, autoincrement=True)
    group_id = Column(Integer, nullable=False, index=True)
    user_id = Column(BigInteger, nullable=False, index=True)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=True)
    idle_minutes = Column(Integer, nullable=True)
    active = Column(Boolean, default=False)
    archived = Column(Boolean, nullable=True, default=False)
    messages = Column(Integer, nullable=True)

    __table_args__ = (
        Index('ix_session_group_start', 'group_id', 'start_time'),
    )


class ActivityAdjustment(ActivityBase):
    """Manual signed correction (in minutes) to a user's aggregated time."""
    __tablename__ = 'activity_adjustments'

    id = Column(Integer, primary_key=True, autoincrement=True)
    group_id = Column(Integer, nullable=False, index=True)
    user_id = Column(BigInteger, nullable=False)
    minutes = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False)
    archived = Column(Boolean, nullable=True, default=False)


class ActivityReset(ActivityBase):
    """Reset marker. The most recent one per group starts the aggregation window."""
    __tablename__ = 'activity_resets'

    id = Column(Integer, primary_key=True, autoincrement=True)
    group_id = Column(Integer, nullable=False, index=True)
    reset_at = Column(DateTime, nullable=False)


class GroupMember(ActivityBase):
    __tablename__ = 'group_members'

    group_id = Column(Integer, primary_key=True)
    user_id = Column(BigInteger, primary_key=True)
    username = Column(String(255), nullable=True)
    picture = Column(String(1024), nullable=True)
    rank_id = Column(Integer, nullable=True)


class ActivityConfig(ActivityBase):
    """Per-group activity settings. A missing row means defaults."""
    __tablename__ = 'activity_configs'

    group_id = Column(Integer, primary_key=True)
    leaderboard_rank = Column(Integer, nullable=True)
    idle_time_enabled = Column(Boolean, nullable=True)
