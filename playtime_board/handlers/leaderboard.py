"""Handler for the public playtime leaderboard."""

from .base import PublicApiHandler


class LeaderboardHandler(PublicApiHandler):

    async def get(self, group_id):
        """Top three by playtime and by session count, plus the caller's own entry."""
        group_id = self.get_group_id(group_id)
        user_id = self.get_argument("userId", None) or None

        response = await self.service.get_leaderboard(group_id, user_id=user_id)
        self.finish(response)
