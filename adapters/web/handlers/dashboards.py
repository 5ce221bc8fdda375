"""
Role dashboards. Each route requires its own role.
"""

import logging
from uuid import UUID

from aiohttp import web

from adapters.web.keys import SERVICES_KEY
from adapters.web.rendering import read_form, redirect, redirect_with_flash, render
from adapters.web.session import require_role
from core.domain import constants
from core.domain.models import AppRole
from core.services.role_service import RoleService
from locales import t

logger = logging.getLogger(__name__)

# Placeholder dashboards: role -> (title, subtitle, stat cards, actions)
ROLE_PAGES = {
    AppRole.INVESTOR: (
        "Investor Dashboard", "Track your investments and player progress",
        constants.INVESTOR_STATS, constants.INVESTOR_ACTIONS,
    ),
    AppRole.PLAYER: (
        "Player Dashboard", "Your training, matches and performance",
        constants.PLAYER_STATS, constants.PLAYER_ACTIONS,
    ),
    AppRole.PARTNER: (
        "Partner Dashboard", "Manage your partnership with the academy",
        constants.PARTNER_STATS, constants.PARTNER_ACTIONS,
    ),
}


@require_role()
async def dashboard_redirect(request: web.Request) -> web.Response:
    target = RoleService.landing_path(request["roles"])
    if target == "/":
        return redirect_with_flash("/", t("no_dashboard"), "error")
    return redirect(target)


@require_role(AppRole.ADMIN)
async def admin_dashboard(request: web.Request) -> web.Response:
    stats = await request.app[SERVICES_KEY].dashboard.admin_stats()
    role_rows = [(role, constants.DASHBOARD_LABELS[role.value], stats.role_count(role)) for role in AppRole]
    metrics = [(label, stats.statistics.get(name)) for name, label in constants.ADMIN_METRICS]
    return render(request, "dashboard_admin.html", stats=stats, role_rows=role_rows, metrics=metrics)


def _role_dashboard(role: AppRole):
    title, subtitle, stat_cards, actions = ROLE_PAGES[role]

    @require_role(role)
    async def handler(request: web.Request) -> web.Response:
        return render(
            request, "dashboard_role.html",
            role=role, title=title, subtitle=subtitle, stat_cards=stat_cards, actions=actions,
        )

    handler.__name__ = f"{role.value}_dashboard"
    return handler


@require_role(AppRole.ADMIN)
async def manage_roles(request: web.Request) -> web.Response:
    """Grant or revoke a role for a user id (admin only)"""
    roles = request.app[SERVICES_KEY].roles
    form = await read_form(request)
    try:
        role = AppRole(form.get("role", ""))
        user_id = UUID(form.get("user_id", "").strip())
        if form.get("action") == "revoke":
            await roles.revoke_role(user_id, role)
            message = t("role_revoked", role=role.value)
        else:
            await roles.assign_role(user_id, role)
            message = t("role_assigned", role=role.value)
    except Exception as e:
        logger.error(f"Error updating roles: {e}")
        return redirect_with_flash("/admin-dashboard", t("role_failed"), "error")
    logger.info(f"Admin {request['user'].id}: {message} for {user_id}")
    return redirect_with_flash("/admin-dashboard", message)


def setup_routes(app: web.Application) -> None:
    app.router.add_get("/dashboard", dashboard_redirect, name="dashboard")
    app.router.add_get("/admin-dashboard", admin_dashboard, name="admin_dashboard")
    for role in ROLE_PAGES:
        app.router.add_get(RoleService.dashboard_path(role), _role_dashboard(role), name=f"{role.value}_dashboard")
    app.router.add_post("/admin/roles", manage_roles)
