"""Application Lifespan — startup installs logging, repeated startups don't stack handlers."""

import logging

from moodtunes.infrastructure.observability import HANDLER_NAME
from moodtunes.main import app


def _own_handlers():
    return [h for h in logging.root.handlers if h.get_name() == HANDLER_NAME]


async def test_lifespan_installs_logging(clean_root_logger):
    async with app.router.lifespan_context(app):
        assert len(_own_handlers()) == 1


async def test_lifespan_restart_keeps_one_handler(clean_root_logger):
    async with app.router.lifespan_context(app):
        pass
    async with app.router.lifespan_context(app):
        pass
    assert len(_own_handlers()) == 1
