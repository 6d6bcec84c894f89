"""Handlers for the public session and member listings."""

import logging

from tornado import web

from ..activity.helpers import format_member, format_session, parse_query_datetime
from .base import PublicApiHandler

log = logging.getLogger('playtime_board.handlers')


class ActivitySessionsHandler(PublicApiHandler):
    """Most recent unarchived sessions for a group."""

    async def get(self, group_id):
        group_id = self.get_group_id(group_id)
        user_id = self.get_int_argument("userId")
        try:
            start = parse_query_datetime(self.get_argument("startDate", None))
            end = parse_query_datetime(self.get_argument("endDate", None))
        except ValueError:
            raise web.HTTPError(400, reason="Invalid date range")

        limit = self.settings.get('session_list_limit', 100)
        rows = await self.service.read(
            self.service.store.list_recent_sessions, group_id, user_id, start, end, limit)

        sessions = [format_session(session, username, picture) for session, username, picture in rows]
        log.info(f"[Activity] Group {group_id}: returning {len(sessions)} session(s)")
        self.finish({"success": True, "sessions": sessions, "total": len(sessions)})


class MembersHandler(PublicApiHandler):
    """All members of a group with their rank."""

    async def get(self, group_id):
        group_id = self.get_group_id(group_id)
        rows = await self.service.read(self.service.store.list_group_members, group_id)

        members = [format_member(member) for member in rows]
        self.finish({"success": True, "members": members, "total": len(members)})
