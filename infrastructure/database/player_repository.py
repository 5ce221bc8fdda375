"""
Supabase implementation of Player and Partner repositories.
"""

from typing import List

from core.domain.models import Partner, Player
from core.interfaces.repositories import IPlayerRepository, ITableRepository
from infrastructure.database.table_repository import SupabaseTableRepository


class SupabasePlayerRepository(SupabaseTableRepository[Player], IPlayerRepository):

    table = "players"
    model = Player

    async def get_homepage_players(self) -> List[Player]:
        players = await self.list_all(filters={"is_visible_homepage": True})
        # Featured first; sorted() is stable so newest-first order holds within each group
        return sorted(players, key=lambda p: not p.is_featured)


class SupabasePartnerRepository(SupabaseTableRepository[Partner], ITableRepository[Partner]):

    table = "partners"
    model = Partner
