"""Shared JSON error handling for the public API handlers."""

from tornado import web

from ..errors import InvalidGroupError, parse_group_id


class PublicApiHandler(web.RequestHandler):
    """JSON handler; every error response is {"success": false, "error": ...}."""

    @property
    def service(self):
        return self.settings['leaderboard_service']

    def set_default_headers(self):
        self.set_header("Content-Type", "application/json; charset=UTF-8")

    def get_group_id(self, raw):
        try:
            return parse_group_id(raw)
        except InvalidGroupError:
            raise web.HTTPError(400, reason="Missing workspace ID")

    def get_int_argument(self, name):
        value = self.get_argument(name, None)
        if value in (None, ""):
            return None
        try:
            return int(value)
        except ValueError:
            raise web.HTTPError(400, reason=f"Invalid {name}")

    def write_error(self, status_code, **kwargs):
        if status_code >= 500:
            message = "Internal server error"
        else:
            message = self._reason
        self.finish({"success": False, "error": message})
