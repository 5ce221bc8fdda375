"""
Web loader - initializes repositories and services.
The Supabase client itself is created on first use.
"""

from config.features import features
from config.settings import settings

# Infrastructure
from infrastructure.auth import SupabaseAuthProvider
from infrastructure.database import (
    SupabaseBlogRepository,
    SupabaseFAQRepository,
    SupabaseMediaRepository,
    SupabaseMessageRepository,
    SupabasePageRepository,
    SupabasePartnerRepository,
    SupabasePlayerRepository,
    SupabaseProfileRepository,
    SupabaseRoleRepository,
    SupabaseSectionRepository,
    SupabaseStatisticsRepository,
)

# Core services
from core.services import AuthService, CMSService, ContentService, DashboardService, RoleService

from adapters.web.keys import SiteServices


# === REPOSITORIES ===
section_repo = SupabaseSectionRepository()
page_repo = SupabasePageRepository()
blog_repo = SupabaseBlogRepository()
player_repo = SupabasePlayerRepository()
partner_repo = SupabasePartnerRepository()
faq_repo = SupabaseFAQRepository()
message_repo = SupabaseMessageRepository()
media_repo = SupabaseMediaRepository()
role_repo = SupabaseRoleRepository()
profile_repo = SupabaseProfileRepository()
stats_repo = SupabaseStatisticsRepository()


# === AUTH PROVIDER ===
auth_provider = SupabaseAuthProvider()


# === BUSINESS SERVICES ===
role_service = RoleService(role_repo=role_repo)
auth_service = AuthService(
    provider=auth_provider,
    role_service=role_service,
    profile_repo=profile_repo,
    redirect_url=settings.site_url,
    first_user_admin=features.FIRST_USER_ADMIN,
)
content_service = ContentService(
    section_repo=section_repo,
    player_repo=player_repo,
    faq_repo=faq_repo,
    page_repo=page_repo,
    blog_repo=blog_repo,
    message_repo=message_repo,
    news_limit=features.NEWS_ON_HOMEPAGE,
)
cms_service = CMSService(
    section_repo=section_repo,
    page_repo=page_repo,
    player_repo=player_repo,
    partner_repo=partner_repo,
    faq_repo=faq_repo,
    blog_repo=blog_repo,
    message_repo=message_repo,
    media_repo=media_repo,
)
dashboard_service = DashboardService(
    role_repo=role_repo,
    profile_repo=profile_repo,
    stats_repo=stats_repo,
    blog_repo=blog_repo,
)

services = SiteServices(
    auth=auth_service,
    roles=role_service,
    content=content_service,
    cms=cms_service,
    dashboard=dashboard_service,
)
