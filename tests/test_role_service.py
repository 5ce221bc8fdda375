# test_role_service.py

from uuid import uuid4

import pytest
from unittest.mock import AsyncMock, MagicMock

from core.domain.models import AppRole, UserRoleRow
from core.services.role_service import RoleService


def _rows(user_id, *roles):
    return [UserRoleRow(user_id=user_id, role=role) for role in roles]


@pytest.mark.asyncio
async def test_get_roles_returns_set(role_service, repos):
    user_id = uuid4()
    repos.roles.rows.extend(_rows(user_id, AppRole.PLAYER, AppRole.INVESTOR))
    repos.roles.rows.extend(_rows(uuid4(), AppRole.ADMIN))

    assert await role_service.get_roles(user_id) == {AppRole.PLAYER, AppRole.INVESTOR}


@pytest.mark.asyncio
async def test_get_roles_fails_closed():
    repo = MagicMock()
    repo.get_roles = AsyncMock(side_effect=RuntimeError("timeout"))
    service = RoleService(repo)

    assert await service.get_roles(uuid4()) == set()
    assert await service.has_role(uuid4(), AppRole.ADMIN) is False


@pytest.mark.asyncio
async def test_role_flags(role_service, repos):
    user_id = uuid4()
    repos.roles.rows.extend(_rows(user_id, AppRole.PARTNER))

    flags = await role_service.role_flags(user_id)
    assert flags == {"admin": False, "investor": False, "player": False, "partner": True}
    assert RoleService.flags_for([AppRole.ADMIN]) == {"admin": True, "investor": False, "player": False, "partner": False}


@pytest.mark.parametrize("roles, expected", [
    ({AppRole.PLAYER, AppRole.ADMIN}, AppRole.ADMIN),
    ({AppRole.PARTNER, AppRole.INVESTOR}, AppRole.INVESTOR),
    ({AppRole.PARTNER, AppRole.PLAYER}, AppRole.PLAYER),
    ({AppRole.PARTNER}, AppRole.PARTNER),
    (set(), None),
])
def test_primary_role_priority(roles, expected):
    assert RoleService.primary_role(roles) == expected


def test_dashboard_paths():
    assert RoleService.dashboard_path(AppRole.ADMIN) == "/admin-dashboard"
    assert RoleService.dashboard_path(AppRole.PARTNER) == "/partner-dashboard"
    assert RoleService.landing_path({AppRole.PLAYER}) == "/player-dashboard"
    assert RoleService.landing_path(set()) == "/"


def test_dashboard_links_follow_priority():
    links = RoleService.dashboard_links({AppRole.PARTNER, AppRole.ADMIN})
    assert [link["href"] for link in links] == ["/admin-dashboard", "/partner-dashboard"]
    assert links[0]["label"] == "Admin Dashboard"


@pytest.mark.asyncio
async def test_first_user_becomes_admin(role_service, repos):
    first, second = uuid4(), uuid4()

    assert await role_service.ensure_first_user_admin(first) is True
    assert await role_service.ensure_first_user_admin(second) is False
    assert await role_service.get_roles(first) == {AppRole.ADMIN}
    assert await role_service.get_roles(second) == set()


@pytest.mark.asyncio
async def test_first_user_admin_swallows_backend_error():
    repo = MagicMock()
    repo.any_with_role = AsyncMock(return_value=False)
    repo.add_role = AsyncMock(side_effect=RuntimeError("permission denied"))

    assert await RoleService(repo).ensure_first_user_admin(uuid4()) is False


@pytest.mark.asyncio
async def test_assign_role_is_idempotent(role_service, repos):
    user_id = uuid4()
    await role_service.assign_role(user_id, AppRole.INVESTOR)
    await role_service.assign_role(user_id, AppRole.INVESTOR)

    assert len(repos.roles.rows) == 1

    await role_service.revoke_role(user_id, AppRole.INVESTOR)
    assert await role_service.get_roles(user_id) == set()
