from core.services.role_service import RoleService
from core.services.auth_service import AuthService
from core.services.content_service import ContentService, LandingPage, LandingSection
from core.services.cms_service import CMSService
from core.services.dashboard_service import DashboardService

__all__ = [
    "RoleService",
    "AuthService",
    "ContentService",
    "LandingPage",
    "LandingSection",
    "CMSService",
    "DashboardService",
]
