"""
Shared fixtures: in-memory repositories, a fake auth provider, and the web app.
"""

import itertools
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

import pytest

from adapters.web import SiteServices, create_app
from config.features import Features
from config.settings import Settings
from core.domain.models import (
    AppRole,
    AuthSession,
    AuthUser,
    BlogPost,
    ContactMessage,
    FAQ,
    MediaItem,
    Page,
    Partner,
    Player,
    Section,
    SiteStatistic,
    UserRoleRow,
)
from core.interfaces.auth import AuthProviderError, IAuthProvider
from core.interfaces.repositories import (
    IBlogRepository,
    IFAQRepository,
    IPageRepository,
    IPlayerRepository,
    IProfileRepository,
    IRoleRepository,
    ISectionRepository,
    IStatisticsRepository,
    ITableRepository,
)
from core.services import AuthService, CMSService, ContentService, DashboardService, RoleService


# === IN-MEMORY REPOSITORIES ===

class FakeTable(ITableRepository):
    """Dict-backed table; rows are stored JSON-style like the backend returns them"""

    model = None
    default_order = "created_at"
    default_ascending = False

    def __init__(self):
        self.rows: Dict[str, Dict[str, Any]] = {}
        self.fail = False

    def _check(self):
        if self.fail:
            raise RuntimeError("backend unavailable")

    def seed(self, **data) -> Any:
        row = {"id": str(uuid4()), "created_at": datetime.now(timezone.utc).isoformat(), **data}
        self.rows[row["id"]] = row
        return self.model.model_validate(row)

    async def list_all(self, filters=None, order_by=None, ascending=None, limit=None) -> List[Any]:
        self._check()
        order_by = order_by or self.default_order
        ascending = self.default_ascending if ascending is None else ascending
        rows = [r for r in self.rows.values() if all(r.get(k) == v for k, v in (filters or {}).items())]
        rows.sort(key=lambda r: (r.get(order_by) is None, r.get(order_by) or 0), reverse=not ascending)
        if limit:
            rows = rows[:limit]
        return [self.model.model_validate(r) for r in rows]

    async def get_by_id(self, row_id: UUID) -> Optional[Any]:
        self._check()
        row = self.rows.get(str(row_id))
        return self.model.model_validate(row) if row else None

    async def create(self, data: Dict[str, Any]) -> Any:
        self._check()
        return self.seed(**data)

    async def update(self, row_id: UUID, data: Dict[str, Any]) -> Optional[Any]:
        self._check()
        row = self.rows.get(str(row_id))
        if row is None:
            return None
        row.update(data)
        return self.model.model_validate(row)

    async def delete(self, row_id: UUID) -> None:
        self._check()
        self.rows.pop(str(row_id), None)

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        self._check()
        return len([r for r in self.rows.values() if all(r.get(k) == v for k, v in (filters or {}).items())])


class FakeSectionRepo(FakeTable, ISectionRepository):
    model = Section
    default_order = "sort_order"
    default_ascending = True

    async def get_active(self) -> List[Section]:
        return await self.list_all(filters={"is_active": True})


class FakePageRepo(FakeTable, IPageRepository):
    model = Page

    async def get_published_by_slug(self, slug: str) -> Optional[Page]:
        pages = await self.list_all(filters={"slug": slug, "is_published": True})
        return pages[0] if pages else None


class FakeBlogRepo(FakeTable, IBlogRepository):
    model = BlogPost

    async def get_published(self, limit: Optional[int] = None) -> List[BlogPost]:
        return await self.list_all(filters={"is_published": True}, order_by="published_at", limit=limit)

    async def get_published_by_slug(self, slug: str) -> Optional[BlogPost]:
        posts = await self.list_all(filters={"slug": slug, "is_published": True})
        return posts[0] if posts else None


class FakePlayerRepo(FakeTable, IPlayerRepository):
    model = Player

    async def get_homepage_players(self) -> List[Player]:
        players = await self.list_all(filters={"is_visible_homepage": True})
        return sorted(players, key=lambda p: not p.is_featured)


class FakePartnerRepo(FakeTable):
    model = Partner


class FakeFAQRepo(FakeTable, IFAQRepository):
    model = FAQ
    default_order = "sort_order"
    default_ascending = True

    async def get_active(self) -> List[FAQ]:
        return await self.list_all(filters={"is_active": True})


class FakeMessageRepo(FakeTable):
    model = ContactMessage


class FakeMediaRepo(FakeTable):
    model = MediaItem


class FakeRoleRepo(IRoleRepository):

    def __init__(self):
        self.rows: List[UserRoleRow] = []
        self.fail = False

    async def get_roles(self, user_id: UUID) -> List[UserRoleRow]:
        if self.fail:
            raise RuntimeError("backend unavailable")
        return [r for r in self.rows if r.user_id == UUID(str(user_id))]

    async def add_role(self, user_id: UUID, role: AppRole) -> UserRoleRow:
        row = UserRoleRow(id=uuid4(), user_id=user_id, role=role)
        self.rows.append(row)
        return row

    async def remove_role(self, user_id: UUID, role: AppRole) -> None:
        self.rows = [r for r in self.rows if not (r.user_id == UUID(str(user_id)) and r.role == role)]

    async def count_by_role(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for r in self.rows:
            counts[r.role.value] = counts.get(r.role.value, 0) + 1
        return counts

    async def any_with_role(self, role: AppRole) -> bool:
        return any(r.role == role for r in self.rows)


class FakeProfileRepo(IProfileRepository):

    def __init__(self, total: int = 0):
        self.total = total
        self.fail = False

    async def count(self) -> int:
        return self.total

    async def probe(self) -> bool:
        if self.fail:
            raise RuntimeError("connection refused")
        return True


class FakeStatsRepo(IStatisticsRepository):

    def __init__(self):
        self.rows: List[SiteStatistic] = []

    async def get_latest(self) -> List[SiteStatistic]:
        return list(self.rows)


# === AUTH PROVIDER ===

class FakeAuthProvider(IAuthProvider):
    """Accounts and tokens kept in memory"""

    def __init__(self):
        self.accounts: Dict[str, Dict[str, Any]] = {}
        self.access_tokens: Dict[str, AuthUser] = {}
        self.refresh_tokens: Dict[str, AuthUser] = {}
        self.signed_out: List[str] = []
        self.resent: List[str] = []
        self._counter = itertools.count(1)

    def add_user(self, email: str, password: str = "secret123", first_name: str = "Test",
                 last_name: str = "User", confirmed: bool = True) -> AuthUser:
        user = AuthUser(id=uuid4(), email=email, first_name=first_name, last_name=last_name,
                        email_confirmed=confirmed)
        self.accounts[email] = {"password": password, "user": user}
        return user

    def issue_session(self, user: AuthUser) -> AuthSession:
        n = next(self._counter)
        session = AuthSession(access_token=f"access-{n}", refresh_token=f"refresh-{n}", expires_in=3600, user=user)
        self.access_tokens[session.access_token] = user
        self.refresh_tokens[session.refresh_token] = user
        return session

    def expire(self, access_token: str) -> None:
        self.access_tokens.pop(access_token, None)

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        account = self.accounts.get(email)
        if account is None or account["password"] != password:
            raise AuthProviderError("Invalid login credentials", 400)
        if not account["user"].email_confirmed:
            raise AuthProviderError("Email not confirmed", 400)
        return self.issue_session(account["user"])

    async def sign_up(self, email, password, metadata, redirect_to=None) -> Optional[AuthUser]:
        if email in self.accounts:
            raise AuthProviderError("User already registered", 422)
        self.last_redirect = redirect_to
        return self.add_user(email, password, metadata.get("first_name"), metadata.get("last_name"), confirmed=False)

    async def sign_out(self, access_token: str) -> None:
        self.signed_out.append(access_token)
        self.access_tokens.pop(access_token, None)

    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        return self.access_tokens.get(access_token)

    async def refresh_session(self, refresh_token: str) -> Optional[AuthSession]:
        user = self.refresh_tokens.pop(refresh_token, None)
        return self.issue_session(user) if user else None

    async def resend_confirmation(self, email: str) -> None:
        if email not in self.accounts:
            raise AuthProviderError("User not found", 404)
        self.resent.append(email)

    async def list_user_emails(self) -> List[str]:
        return list(self.accounts)


# === FIXTURES ===

@pytest.fixture
def repos():
    return SimpleNamespace(
        sections=FakeSectionRepo(),
        pages=FakePageRepo(),
        blog=FakeBlogRepo(),
        players=FakePlayerRepo(),
        partners=FakePartnerRepo(),
        faqs=FakeFAQRepo(),
        messages=FakeMessageRepo(),
        media=FakeMediaRepo(),
        roles=FakeRoleRepo(),
        profiles=FakeProfileRepo(total=0),
        stats=FakeStatsRepo(),
    )


@pytest.fixture
def auth_provider():
    return FakeAuthProvider()


@pytest.fixture
def role_service(repos):
    return RoleService(role_repo=repos.roles)


@pytest.fixture
def services(repos, auth_provider, role_service):
    return SiteServices(
        auth=AuthService(
            provider=auth_provider,
            role_service=role_service,
            profile_repo=repos.profiles,
            redirect_url="http://testserver",
            first_user_admin=True,
        ),
        roles=role_service,
        content=ContentService(
            section_repo=repos.sections,
            player_repo=repos.players,
            faq_repo=repos.faqs,
            page_repo=repos.pages,
            blog_repo=repos.blog,
            message_repo=repos.messages,
        ),
        cms=CMSService(
            section_repo=repos.sections,
            page_repo=repos.pages,
            player_repo=repos.players,
            partner_repo=repos.partners,
            faq_repo=repos.faqs,
            blog_repo=repos.blog,
            message_repo=repos.messages,
            media_repo=repos.media,
        ),
        dashboard=DashboardService(
            role_repo=repos.roles,
            profile_repo=repos.profiles,
            stats_repo=repos.stats,
            blog_repo=repos.blog,
        ),
    )


@pytest.fixture
def site_settings():
    return Settings(site_url="http://testserver", cookie_secure=False, hero_interval_seconds=6)


@pytest.fixture
def site_features():
    flags = Features()
    flags.SIGNUP_ENABLED = True
    flags.FIRST_USER_ADMIN = True
    flags.DEMO_ACCOUNTS_ENABLED = False
    flags.CONTACT_FORM_ENABLED = True
    flags.BLOG_ENABLED = True
    return flags


@pytest.fixture
def app(services, site_settings, site_features):
    return create_app(services, site_settings, site_features)


@pytest.fixture
async def client(aiohttp_client, app):
    return await aiohttp_client(app)


@pytest.fixture
def sign_in_as(client, auth_provider, repos, site_settings):
    """Create a confirmed user with the given roles and put its session cookies on the client"""

    def _sign_in(*roles: AppRole, email: str = "member@example.com") -> AuthUser:
        user = auth_provider.add_user(email)
        for role in roles:
            repos.roles.rows.append(UserRoleRow(id=uuid4(), user_id=user.id, role=role))
        session = auth_provider.issue_session(user)
        client.session.cookie_jar.update_cookies({
            site_settings.access_cookie_name: session.access_token,
            site_settings.refresh_cookie_name: session.refresh_token,
        })
        return user

    return _sign_in
