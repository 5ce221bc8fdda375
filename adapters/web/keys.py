"""
Typed application keys and the service bundle handed to the web layer.
"""

from aiohttp import web
from jinja2 import Environment

from core.services import AuthService, CMSService, ContentService, DashboardService, RoleService


class SiteServices:
    """Everything a request handler may call"""

    def __init__(
        self,
        auth: AuthService,
        roles: RoleService,
        content: ContentService,
        cms: CMSService,
        dashboard: DashboardService,
    ):
        self.auth = auth
        self.roles = roles
        self.content = content
        self.cms = cms
        self.dashboard = dashboard


SERVICES_KEY = web.AppKey("services", SiteServices)
SETTINGS_KEY = web.AppKey("settings", object)
FEATURES_KEY = web.AppKey("features", object)
JINJA_KEY = web.AppKey("jinja_env", Environment)
