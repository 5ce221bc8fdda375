from aiohttp import web

from adapters.web.handlers import auth, cms, dashboards, public


def setup_routes(app: web.Application) -> None:
    """Register every route module."""
    for module in (public, auth, dashboards, cms):
        module.setup_routes(app)
