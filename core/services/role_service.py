"""
Role service - resolves a user's roles and decides which dashboards they may see.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set
from uuid import UUID

from core.domain.constants import DASHBOARD_LABELS
from core.domain.models import AppRole
from core.interfaces.repositories import IRoleRepository

logger = logging.getLogger(__name__)

# Priority when a user holds several roles
ROLE_PRIORITY: List[AppRole] = [AppRole.ADMIN, AppRole.INVESTOR, AppRole.PLAYER, AppRole.PARTNER]


class RoleService:
    """Service for role lookups and assignment"""

    def __init__(self, role_repo: IRoleRepository):
        self.role_repo = role_repo

    async def get_roles(self, user_id: UUID) -> Set[AppRole]:
        """Roles held by the user. Lookup failures resolve to no roles."""
        try:
            rows = await self.role_repo.get_roles(user_id)
        except Exception as e:
            logger.error(f"Error fetching roles for user {user_id}: {e}")
            return set()
        return {row.role for row in rows}

    async def has_role(self, user_id: UUID, role: AppRole) -> bool:
        return role in await self.get_roles(user_id)

    async def role_flags(self, user_id: UUID) -> Dict[str, bool]:
        return self.flags_for(await self.get_roles(user_id))

    @staticmethod
    def flags_for(roles: Iterable[AppRole]) -> Dict[str, bool]:
        """One flag per role, e.g. {"admin": True, "player": False, ...}"""
        roles = set(roles)
        return {role.value: role in roles for role in AppRole}

    @staticmethod
    def primary_role(roles: Iterable[AppRole]) -> Optional[AppRole]:
        roles = set(roles)
        for role in ROLE_PRIORITY:
            if role in roles:
                return role
        return None

    @staticmethod
    def dashboard_path(role: AppRole) -> str:
        return f"/{role.value}-dashboard"

    @classmethod
    def landing_path(cls, roles: Iterable[AppRole]) -> str:
        """Where to send a user after login: primary dashboard, or home without a role"""
        role = cls.primary_role(roles)
        return cls.dashboard_path(role) if role else "/"

    @classmethod
    def dashboard_links(cls, roles: Iterable[AppRole]) -> List[Dict[str, str]]:
        roles = set(roles)
        return [
            {"href": cls.dashboard_path(role), "label": DASHBOARD_LABELS[role.value]}
            for role in ROLE_PRIORITY
            if role in roles
        ]

    async def ensure_first_user_admin(self, user_id: UUID) -> bool:
        """Grant admin to user_id when nobody holds admin yet.

        Sequential check-then-insert; two simultaneous first sign-ups can both win.
        """
        try:
            if await self.role_repo.any_with_role(AppRole.ADMIN):
                return False
            await self.role_repo.add_role(user_id, AppRole.ADMIN)
        except Exception as e:
            logger.error(f"Error assigning first-user admin role to {user_id}: {e}")
            return False
        logger.info(f"User {user_id} is the first account and was made admin")
        return True

    async def assign_role(self, user_id: UUID, role: AppRole) -> None:
        if await self.has_role(user_id, role):
            return
        await self.role_repo.add_role(user_id, role)

    async def revoke_role(self, user_id: UUID, role: AppRole) -> None:
        await self.role_repo.remove_role(user_id, role)
