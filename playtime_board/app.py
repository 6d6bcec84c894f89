"""Tornado application for the public leaderboard API."""

import logging
import sys

from tornado import web
from tornado.ioloop import IOLoop

from .activity.service import LeaderboardService
from .activity.store import ActivityStore
from .handlers import ActivitySessionsHandler, LeaderboardHandler, MembersHandler
from .settings import Settings

log = logging.getLogger('playtime_board')

WORKSPACE_PREFIX = r"/api/public/v1/workspace/([^/]+)"


def make_app(service, session_list_limit=Settings.DEFAULT_SESSION_LIST_LIMIT, **settings):
    """Build the route table around a LeaderboardService."""
    return web.Application(
        [
            (WORKSPACE_PREFIX + r"/leaderboard", LeaderboardHandler),
            (WORKSPACE_PREFIX + r"/activity", ActivitySessionsHandler),
            (WORKSPACE_PREFIX + r"/members", MembersHandler),
        ],
        leaderboard_service=service,
        session_list_limit=session_list_limit,
        **settings,
    )


def main():
    """Entry point for the standalone API process."""
    logging.basicConfig(
        level=logging.INFO,
        format='[%(levelname)1.1s %(asctime)s.%(msecs)03d %(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )
    settings = Settings()
    store = ActivityStore.from_url(settings.db_url)
    store.create_all()
    service = LeaderboardService(store, max_workers=settings.read_workers)

    app = make_app(service, session_list_limit=settings.session_list_limit)
    app.listen(settings.port)
    log.info(f"Listening on port {settings.port}")
    try:
        IOLoop.current().start()
    except KeyboardInterrupt:
        log.info("Shutting down")
        service.shutdown()
        sys.exit(0)


if __name__ == '__main__':
    main()
