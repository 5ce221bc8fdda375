"""
Login / signup / logout routes.
"""

import logging

from aiohttp import web

from adapters.web.keys import FEATURES_KEY, SERVICES_KEY, SETTINGS_KEY
from adapters.web.rendering import parse_form, read_form, redirect, redirect_with_flash, render
from adapters.web.session import SESSION_HANDLED, clear_session_cookies, safe_next_path, set_session_cookies
from core.domain import constants
from core.domain.exceptions import AuthenticationError, RegistrationError, ValidationFailed
from core.domain.models import SignUpForm
from core.interfaces.auth import AuthProviderError
from core.services.role_service import RoleService
from locales import t

logger = logging.getLogger(__name__)


def _render_auth(request: web.Request, mode: str = "login", status: int = 200, **context) -> web.Response:
    features = request.app[FEATURES_KEY]
    context.setdefault("values", {})
    context.setdefault("errors", {})
    return render(
        request, "auth.html", status=status,
        mode=mode,
        next_path=context.pop("next_path", None) or safe_next_path(request.query.get("next")) or "",
        signup_enabled=features.SIGNUP_ENABLED,
        demo_accounts=constants.DEMO_ACCOUNTS if features.DEMO_ACCOUNTS_ENABLED else {},
        min_password_length=constants.MIN_PASSWORD_LENGTH,
        **context,
    )


async def auth_page(request: web.Request) -> web.Response:
    if request.get("user") is not None:
        return redirect("/")
    mode = "signup" if request.query.get("mode") == "signup" else "login"
    return _render_auth(request, mode)


async def login(request: web.Request) -> web.Response:
    services = request.app[SERVICES_KEY]
    form = await read_form(request)
    email = form.get("email", "").strip()
    password = form.get("password", "")
    next_path = safe_next_path(form.get("next"))

    if not email or not password:
        return _render_auth(request, status=400, error=t("login_missing"), values={"email": email}, next_path=next_path)
    try:
        session = await services.auth.sign_in(email, password)
    except AuthenticationError as e:
        return _render_auth(request, status=400, error=e.message, values={"email": email}, next_path=next_path)

    roles = await services.roles.get_roles(session.user.id)
    response = redirect_with_flash(next_path or RoleService.landing_path(roles), t("login_welcome"))
    set_session_cookies(response, session, request.app[SETTINGS_KEY])
    request[SESSION_HANDLED] = True
    return response


async def signup(request: web.Request) -> web.Response:
    if not request.app[FEATURES_KEY].SIGNUP_ENABLED:
        return _render_auth(request, status=403, error=t("signup_disabled"))

    form = await read_form(request)
    values = {k: form.get(k, "") for k in ("first_name", "last_name", "email")}
    try:
        data = parse_form(SignUpForm, form)
    except ValidationFailed as e:
        return _render_auth(request, "signup", status=400, errors=e.errors, values=values)

    try:
        result = await request.app[SERVICES_KEY].auth.sign_up(
            data.email, data.password, data.first_name, data.last_name,
        )
    except RegistrationError as e:
        return _render_auth(request, "signup", status=400, error=e.message, values=values)
    return _render_auth(request, notice=result.message, resend_email=data.email, values={"email": data.email})


async def logout(request: web.Request) -> web.Response:
    cfg = request.app[SETTINGS_KEY]
    token = request.cookies.get(cfg.access_cookie_name)
    if token:
        try:
            await request.app[SERVICES_KEY].auth.sign_out(token)
        except AuthProviderError as e:
            # The local session is dropped regardless
            logger.warning(f"Remote sign-out failed, clearing cookies anyway: {e.message}")
    response = redirect_with_flash("/", t("logout_done"))
    clear_session_cookies(response, cfg)
    request[SESSION_HANDLED] = True
    return response


async def resend(request: web.Request) -> web.Response:
    form = await read_form(request)
    email = form.get("email", "").strip()
    if not email:
        return _render_auth(request, status=400, error=t("resend_missing"))
    ok, message = await request.app[SERVICES_KEY].auth.resend_confirmation_email(email)
    if ok:
        return _render_auth(request, notice=message, resend_email=email, values={"email": email})
    return _render_auth(request, status=400, error=message, resend_email=email, values={"email": email})


def setup_routes(app: web.Application) -> None:
    app.router.add_get("/auth", auth_page, name="auth")
    app.router.add_post("/auth/login", login)
    app.router.add_post("/auth/signup", signup)
    app.router.add_post("/auth/logout", logout)
    app.router.add_post("/auth/resend", resend)
