"""
Supabase implementation of the user_roles, profiles and site_statistics access.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional
from uuid import UUID

from supabase import Client

from core.domain.models import AppRole, SiteStatistic, UserRoleRow
from core.interfaces.repositories import IProfileRepository, IRoleRepository, IStatisticsRepository
from infrastructure.database.supabase_client import get_supabase, run_sync

logger = logging.getLogger(__name__)


class _ClientMixin:

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase()
        return self._client


class SupabaseRoleRepository(_ClientMixin, IRoleRepository):
    """Per-user roles; a user may hold several"""

    def _to_model(self, data: dict) -> Optional[UserRoleRow]:
        try:
            role = AppRole(data.get("role"))
        except ValueError:
            logger.warning(f"Ignoring unknown role {data.get('role')!r} for user {data.get('user_id')}")
            return None
        return UserRoleRow(
            id=data.get("id"),
            user_id=data["user_id"],
            role=role,
            created_at=data.get("created_at"),
        )

    @run_sync
    def _get_roles_sync(self, user_id: UUID) -> List[dict]:
        response = self.client.table("user_roles").select("*").eq("user_id", str(user_id)).execute()
        return response.data or []

    async def get_roles(self, user_id: UUID) -> List[UserRoleRow]:
        data = await self._get_roles_sync(user_id)
        rows = [self._to_model(d) for d in data]
        return [r for r in rows if r is not None]

    @run_sync
    def _add_role_sync(self, user_id: UUID, role: AppRole) -> dict:
        response = self.client.table("user_roles").insert({
            "user_id": str(user_id),
            "role": role.value,
        }).execute()
        return response.data[0]

    async def add_role(self, user_id: UUID, role: AppRole) -> UserRoleRow:
        data = await self._add_role_sync(user_id, role)
        logger.info(f"Granted role {role.value} to user {user_id}")
        return self._to_model(data)

    @run_sync
    def _remove_role_sync(self, user_id: UUID, role: AppRole) -> None:
        self.client.table("user_roles").delete()\
            .eq("user_id", str(user_id))\
            .eq("role", role.value)\
            .execute()

    async def remove_role(self, user_id: UUID, role: AppRole) -> None:
        await self._remove_role_sync(user_id, role)
        logger.info(f"Revoked role {role.value} from user {user_id}")

    @run_sync
    def _all_roles_sync(self) -> List[dict]:
        response = self.client.table("user_roles").select("role").execute()
        return response.data or []

    async def count_by_role(self) -> Dict[str, int]:
        data = await self._all_roles_sync()
        return dict(Counter(d["role"] for d in data if d.get("role")))

    @run_sync
    def _any_with_role_sync(self, role: AppRole) -> bool:
        response = self.client.table("user_roles").select("id")\
            .eq("role", role.value)\
            .limit(1)\
            .execute()
        return bool(response.data)

    async def any_with_role(self, role: AppRole) -> bool:
        return await self._any_with_role_sync(role)


class SupabaseProfileRepository(_ClientMixin, IProfileRepository):

    @run_sync
    def _count_sync(self) -> int:
        response = self.client.table("profiles").select("id", count="exact").execute()
        return response.count or 0

    async def count(self) -> int:
        return await self._count_sync()

    @run_sync
    def _probe_sync(self) -> bool:
        self.client.table("profiles").select("*").limit(1).execute()
        return True

    async def probe(self) -> bool:
        return await self._probe_sync()


class SupabaseStatisticsRepository(_ClientMixin, IStatisticsRepository):

    @run_sync
    def _get_latest_sync(self) -> List[dict]:
        response = self.client.table("site_statistics").select("*")\
            .order("created_at", desc=True)\
            .execute()
        return response.data or []

    async def get_latest(self) -> List[SiteStatistic]:
        data = await self._get_latest_sync()
        return [SiteStatistic.model_validate(d) for d in data]
