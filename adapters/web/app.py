"""
Web application factory - wires services, templates, middlewares and routes.
"""

import logging
from pathlib import Path

from aiohttp import web

from adapters.web.keys import FEATURES_KEY, SERVICES_KEY, SETTINGS_KEY, SiteServices
from adapters.web.middleware import error_middleware, session_middleware
from adapters.web.rendering import setup_templates
from adapters.web.handlers import setup_routes

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def create_app(services: SiteServices, site_settings, feature_flags) -> web.Application:
    """Create the aiohttp app. Settings and features are injected so tests can override them."""
    app = web.Application(middlewares=[error_middleware, session_middleware])
    app[SERVICES_KEY] = services
    app[SETTINGS_KEY] = site_settings
    app[FEATURES_KEY] = feature_flags

    setup_templates(app)
    setup_routes(app)
    app.router.add_static("/static/", STATIC_DIR, name="static")

    logger.debug(f"Web app created with {len(app.router.routes())} routes")
    return app
