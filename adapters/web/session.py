"""
Session cookies and route protection.

The access token lives in one cookie and the refresh token in another.
Handlers that need a signed-in user are wrapped with require_role().
"""

import functools
import logging
from typing import Awaitable, Callable, Optional
from urllib.parse import urlencode, urlsplit

from aiohttp import web

from adapters.web.keys import SETTINGS_KEY
from adapters.web.rendering import redirect, redirect_with_flash
from core.domain.exceptions import AccessDeniedError
from core.domain.models import AppRole, AuthSession

logger = logging.getLogger(__name__)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]

# Handlers set this when they wrote or cleared the session cookies themselves
SESSION_HANDLED = "session_handled"


def set_session_cookies(response: web.StreamResponse, session: AuthSession, cfg) -> None:
    options = dict(path="/", httponly=True, samesite="Lax", secure=cfg.cookie_secure)
    response.set_cookie(
        cfg.access_cookie_name, session.access_token,
        max_age=session.expires_in or cfg.cookie_max_age, **options,
    )
    response.set_cookie(cfg.refresh_cookie_name, session.refresh_token, max_age=cfg.cookie_max_age, **options)


def clear_session_cookies(response: web.StreamResponse, cfg) -> None:
    response.del_cookie(cfg.access_cookie_name, path="/")
    response.del_cookie(cfg.refresh_cookie_name, path="/")


def safe_next_path(value: Optional[str]) -> Optional[str]:
    """Accept only same-site absolute paths as a post-login target"""
    if not value or not value.startswith("/") or "\\" in value:
        return None
    # Browsers drop tabs and newlines, so "/\t/host" would become "//host"
    if any(ord(c) < 0x20 or ord(c) == 0x7f for c in value):
        return None
    parts = urlsplit(value)
    if parts.scheme or parts.netloc:
        return None
    return value


def login_redirect(request: web.Request) -> web.Response:
    return redirect(f"/auth?{urlencode({'next': request.path_qs})}")


def require_role(role: Optional[AppRole] = None) -> Callable[[Handler], Handler]:
    """Protect a handler.

    No user: redirect to the login page with ?next=.
    Missing role: redirect home with an access-denied flash.
    """

    def decorator(handler: Handler) -> Handler:
        @functools.wraps(handler)
        async def wrapper(request: web.Request) -> web.StreamResponse:
            user = request.get("user")
            if user is None:
                return login_redirect(request)
            if role is not None and role not in request.get("roles", set()):
                logger.info(f"User {user.id} denied {request.path}: missing role {role.value}")
                return redirect_with_flash("/", AccessDeniedError().message, "error")
            return await handler(request)

        return wrapper

    return decorator


async def resolve_session(request: web.Request, auth_service):
    """Resolve the user from the cookies, refreshing an expired access token.

    Returns (user, refreshed_session, clear_cookies).
    """
    cfg = request.app[SETTINGS_KEY]
    access = request.cookies.get(cfg.access_cookie_name)
    refresh = request.cookies.get(cfg.refresh_cookie_name)
    if not access and not refresh:
        return None, None, False

    try:
        user = await auth_service.get_user(access)
        if user is not None:
            return user, None, False
        session = await auth_service.refresh(refresh)
    except Exception as e:
        # Backend unreachable: serve the request anonymously, keep the cookies
        logger.error(f"Session lookup failed: {e}")
        return None, None, False

    if session is not None:
        logger.debug(f"Refreshed session for user {session.user.id}")
        return session.user, session, False
    return None, None, True
