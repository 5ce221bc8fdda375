from infrastructure.database.section_repository import SupabaseSectionRepository
from infrastructure.database.page_repository import SupabasePageRepository, SupabaseBlogRepository
from infrastructure.database.player_repository import SupabasePlayerRepository, SupabasePartnerRepository
from infrastructure.database.faq_repository import SupabaseFAQRepository
from infrastructure.database.message_repository import SupabaseMessageRepository, SupabaseMediaRepository
from infrastructure.database.role_repository import (
    SupabaseRoleRepository,
    SupabaseProfileRepository,
    SupabaseStatisticsRepository,
)

__all__ = [
    "SupabaseSectionRepository",
    "SupabasePageRepository",
    "SupabaseBlogRepository",
    "SupabasePlayerRepository",
    "SupabasePartnerRepository",
    "SupabaseFAQRepository",
    "SupabaseMessageRepository",
    "SupabaseMediaRepository",
    "SupabaseRoleRepository",
    "SupabaseProfileRepository",
    "SupabaseStatisticsRepository",
]
