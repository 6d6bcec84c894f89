"""LeaderboardService - resolve window, fetch records concurrently, rank, assemble response."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor

from ..errors import AggregationError, parse_group_id
from .engine import (
    accumulate_playtime,
    apply_active_overlay,
    build_leaderboard,
    find_entry,
    session_count_entries,
    top_entries,
)
from .window import resolve_window

log = logging.getLogger('playtime_board.leaderboard')


class LeaderboardService:
    """Builds the public leaderboard response for a group.

    Usage:
        service = LeaderboardService(store)
        response = await service.get_leaderboard(group_id, user_id="123")

    Blocking store reads run on a thread pool. Any failed read aborts the
    request with AggregationError; no partial leaderboard is returned.
    """

    DEFAULT_MAX_WORKERS = 4

    def __init__(self, store, executor=None, max_workers=DEFAULT_MAX_WORKERS):
        self.store = store
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="leaderboard-reads")

    async def read(self, func, *args):
        """Run a blocking store call on the read pool."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(self._executor, func, *args)

    async def get_leaderboard(self, group_id, user_id=None, now=None):
        """Compute {playtime: {top_three}, you?, sessions: {top_three}} for a group.

        Raises InvalidGroupError before any read when group_id is unusable,
        AggregationError when a read or the computation fails.
        """
        group_id = parse_group_id(group_id)

        try:
            window, config = await asyncio.gather(
                self.read(resolve_window, self.store, group_id, now),
                self.read(self.store.get_config, group_id),
            )
            rank_threshold = config['rank_threshold']
            idle_time_enabled = config['idle_time_enabled']

            sessions, adjustments, members, active_user_ids = await asyncio.gather(
                self.read(self.store.list_ended_sessions, group_id, window),
                self.read(self.store.list_adjustments, group_id, window),
                self.read(self.store.list_members, group_id, bool(rank_threshold)),
                self.read(self.store.list_active_user_ids, group_id),
            )

            playtime = accumulate_playtime(sessions, adjustments, idle_time_enabled)
            leaderboard = build_leaderboard(members, playtime, rank_threshold)
            apply_active_overlay(leaderboard, active_user_ids)

            top_three = top_entries(leaderboard)
            you = find_entry(leaderboard, user_id)

            counts = await self.read(
                self.store.count_sessions_for_users,
                group_id, window, [int(entry["id"]) for entry in top_three],
            )
            sessions_top_three = session_count_entries(top_three, counts)
        except Exception as e:
            log.error(f"[Leaderboard] Aggregation failed for group {group_id}: {e}")
            raise AggregationError(f"Leaderboard aggregation failed for group {group_id}") from e

        log.info(
            f"[Leaderboard] Group {group_id}: {len(leaderboard)} ranked of {len(members)} members, "
            f"{len(sessions)} sessions, {len(adjustments)} adjustments, {len(active_user_ids)} in game"
        )

        response = {"playtime": {"top_three": top_three}}
        if you is not None:
            response["you"] = you
        response["sessions"] = {"top_three": sessions_top_three}
        return response

    def shutdown(self):
        self._executor.shutdown(wait=False)
