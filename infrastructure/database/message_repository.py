"""
Supabase implementation of contact messages and media library repositories.
"""

from core.domain.models import ContactMessage, MediaItem
from core.interfaces.repositories import ITableRepository
from infrastructure.database.table_repository import SupabaseTableRepository


class SupabaseMessageRepository(SupabaseTableRepository[ContactMessage], ITableRepository[ContactMessage]):

    table = "messages"
    model = ContactMessage
    touch_updated_at = False


class SupabaseMediaRepository(SupabaseTableRepository[MediaItem], ITableRepository[MediaItem]):
    """Read-only use for now: the CMS media tab only counts items"""

    table = "media_library"
    model = MediaItem
    touch_updated_at = False
