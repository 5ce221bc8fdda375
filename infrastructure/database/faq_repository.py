"""
Supabase implementation of FAQ repository.
"""

from typing import List

from core.domain.models import FAQ
from core.interfaces.repositories import IFAQRepository
from infrastructure.database.table_repository import SupabaseTableRepository


class SupabaseFAQRepository(SupabaseTableRepository[FAQ], IFAQRepository):

    table = "faqs"
    model = FAQ
    default_order = "sort_order"
    default_ascending = True

    async def get_active(self) -> List[FAQ]:
        return await self.list_all(filters={"is_active": True})
