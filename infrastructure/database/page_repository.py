"""
Supabase implementation of Page and Blog post repositories.
"""

from typing import List, Optional

from core.domain.models import BlogPost, Page
from core.interfaces.repositories import IBlogRepository, IPageRepository
from infrastructure.database.table_repository import SupabaseTableRepository


class SupabasePageRepository(SupabaseTableRepository[Page], IPageRepository):

    table = "pages"
    model = Page

    async def get_published_by_slug(self, slug: str) -> Optional[Page]:
        pages = await self.list_all(filters={"slug": slug, "is_published": True}, limit=1)
        return pages[0] if pages else None


class SupabaseBlogRepository(SupabaseTableRepository[BlogPost], IBlogRepository):

    table = "blog_posts"
    model = BlogPost

    async def get_published(self, limit: Optional[int] = None) -> List[BlogPost]:
        return await self.list_all(
            filters={"is_published": True},
            order_by="published_at",
            ascending=False,
            limit=limit,
        )

    async def get_published_by_slug(self, slug: str) -> Optional[BlogPost]:
        posts = await self.list_all(filters={"slug": slug, "is_published": True}, limit=1)
        return posts[0] if posts else None
