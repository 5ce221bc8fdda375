"""
Generic Supabase table repository.

Each CMS table is plain CRUD; subclasses set the table name, the row model and
the default ordering, and add their own specialised queries.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel
from supabase import Client

from infrastructure.database.supabase_client import get_supabase, run_sync

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class SupabaseTableRepository(Generic[M]):
    """CRUD over one table; rows are converted to `model`"""

    table: str = ""
    model: Type[M]
    default_order: str = "created_at"
    default_ascending: bool = False
    # Tables without an updated_at column (messages, user_roles, ...) set this False
    touch_updated_at: bool = True

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase()
        return self._client

    def _to_model(self, data: dict) -> M:
        return self.model.model_validate(data)

    def _query(self, filters: Optional[Dict[str, Any]] = None):
        query = self.client.table(self.table).select("*")
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        return query

    @run_sync
    def _list_sync(self, filters, order_by, ascending, limit) -> List[dict]:
        query = self._query(filters).order(order_by, desc=not ascending)
        if limit:
            query = query.limit(limit)
        response = query.execute()
        return response.data or []

    async def list_all(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        ascending: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> List[M]:
        order_by = order_by or self.default_order
        ascending = self.default_ascending if ascending is None else ascending
        data = await self._list_sync(filters, order_by, ascending, limit)
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_by_id_sync(self, row_id: UUID) -> Optional[dict]:
        response = self.client.table(self.table).select("*").eq("id", str(row_id)).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, row_id: UUID) -> Optional[M]:
        data = await self._get_by_id_sync(row_id)
        return self._to_model(data) if data else None

    @run_sync
    def _create_sync(self, data: Dict[str, Any]) -> dict:
        response = self.client.table(self.table).insert(data).execute()
        return response.data[0]

    async def create(self, data: Dict[str, Any]) -> M:
        row = await self._create_sync(data)
        logger.info(f"Created {self.table} row {row.get('id')}")
        return self._to_model(row)

    @run_sync
    def _update_sync(self, row_id: UUID, data: Dict[str, Any]) -> Optional[dict]:
        if self.touch_updated_at:
            data = {**data, "updated_at": utc_now_iso()}
        response = self.client.table(self.table).update(data).eq("id", str(row_id)).execute()
        return response.data[0] if response.data else None

    async def update(self, row_id: UUID, data: Dict[str, Any]) -> Optional[M]:
        if not data:
            return await self.get_by_id(row_id)
        row = await self._update_sync(row_id, data)
        return self._to_model(row) if row else None

    @run_sync
    def _delete_sync(self, row_id: UUID) -> None:
        self.client.table(self.table).delete().eq("id", str(row_id)).execute()

    async def delete(self, row_id: UUID) -> None:
        await self._delete_sync(row_id)
        logger.info(f"Deleted {self.table} row {row_id}")

    @run_sync
    def _count_sync(self, filters: Optional[Dict[str, Any]]) -> int:
        query = self.client.table(self.table).select("id", count="exact")
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        response = query.execute()
        return response.count or 0

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        return await self._count_sync(filters)
