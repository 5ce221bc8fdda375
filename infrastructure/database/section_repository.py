"""
Supabase implementation of Section repository.
"""

from typing import List

from core.domain.models import Section
from core.interfaces.repositories import ISectionRepository
from infrastructure.database.table_repository import SupabaseTableRepository


class SupabaseSectionRepository(SupabaseTableRepository[Section], ISectionRepository):
    """Landing page sections, ordered by sort_order"""

    table = "sections"
    model = Section
    default_order = "sort_order"
    default_ascending = True

    async def get_active(self) -> List[Section]:
        return await self.list_all(filters={"is_active": True})
