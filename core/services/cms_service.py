"""
CMS service - admin write side for sections, pages, players, partners, FAQs,
blog posts and contact messages.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID

from core.domain import constants
from core.domain.exceptions import NotFoundError, ValidationFailed
from core.domain.models import (
    BlogPost,
    BlogPostInput,
    ContactMessage,
    ContentStats,
    FAQ,
    FAQInput,
    MediaItem,
    MessageStatus,
    Page,
    PageInput,
    Partner,
    PartnerInput,
    Player,
    PlayerInput,
    Section,
    SectionUpdate,
    row_to_dict,
)
from core.interfaces.repositories import (
    IBlogRepository,
    IFAQRepository,
    IPageRepository,
    IPlayerRepository,
    ISectionRepository,
    ITableRepository,
)
from core.utils.slug import slugify

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class CMSService:
    """Service for admin content management"""

    def __init__(
        self,
        section_repo: ISectionRepository,
        page_repo: IPageRepository,
        player_repo: IPlayerRepository,
        partner_repo: ITableRepository[Partner],
        faq_repo: IFAQRepository,
        blog_repo: IBlogRepository,
        message_repo: ITableRepository[ContactMessage],
        media_repo: Optional[ITableRepository[MediaItem]] = None,
    ):
        self.section_repo = section_repo
        self.page_repo = page_repo
        self.player_repo = player_repo
        self.partner_repo = partner_repo
        self.faq_repo = faq_repo
        self.blog_repo = blog_repo
        self.message_repo = message_repo
        self.media_repo = media_repo

    async def _require(self, repo: ITableRepository, row_id: UUID, label: str):
        row = await repo.get_by_id(row_id)
        if row is None:
            raise NotFoundError(f"{label} not found")
        return row

    async def content_stats(self) -> ContentStats:
        return ContentStats(
            total_sections=await self.section_repo.count(),
            active_sections=await self.section_repo.count({"is_active": True}),
            total_pages=await self.page_repo.count(),
            published_pages=await self.page_repo.count({"is_published": True}),
            total_players=await self.player_repo.count(),
            featured_players=await self.player_repo.count({"is_featured": True}),
            total_partners=await self.partner_repo.count(),
            active_partners=await self.partner_repo.count({"is_active": True}),
        )

    # === SECTIONS ===

    async def list_sections(self) -> List[Section]:
        return await self.section_repo.list_all()

    async def get_section(self, section_id: UUID) -> Section:
        return await self._require(self.section_repo, section_id, "Section")

    async def update_section(self, section_id: UUID, data: SectionUpdate) -> Section:
        section = await self.section_repo.update(section_id, row_to_dict(data))
        if section is None:
            raise NotFoundError("Section not found")
        return section

    async def toggle_section(self, section_id: UUID) -> Section:
        section = await self._require(self.section_repo, section_id, "Section")
        return await self.section_repo.update(section_id, {"is_active": not section.is_active})

    async def seed_default_sections(self) -> List[Section]:
        """Insert a row for every default section type that has none yet"""
        existing = {s.name for s in await self.section_repo.list_all()}
        created = []
        for sort_order, key in enumerate(constants.DEFAULT_SECTION_ORDER):
            if key in existing:
                continue
            default = constants.DEFAULT_SECTIONS[key]
            created.append(await self.section_repo.create({
                "name": key,
                "section_type": key,
                "title": default["title"],
                "content": default["content"],
                "is_active": True,
                "sort_order": sort_order,
            }))
        logger.info(f"Seeded {len(created)} default sections")
        return created

    # === PAGES ===

    async def list_pages(self) -> List[Page]:
        return await self.page_repo.list_all()

    async def get_page(self, page_id: UUID) -> Page:
        return await self._require(self.page_repo, page_id, "Page")

    async def save_page(self, data: PageInput, page_id: Optional[UUID] = None) -> Page:
        payload = row_to_dict(data)
        payload["slug"] = slugify(data.slug or data.title)
        if not payload["slug"]:
            raise ValidationFailed({"slug": "Slug must contain letters or numbers"})
        if page_id is None:
            return await self.page_repo.create(payload)
        page = await self.page_repo.update(page_id, payload)
        if page is None:
            raise NotFoundError("Page not found")
        return page

    async def toggle_page_published(self, page_id: UUID) -> Page:
        page = await self._require(self.page_repo, page_id, "Page")
        return await self.page_repo.update(page_id, {"is_published": not page.is_published})

    async def delete_page(self, page_id: UUID) -> None:
        await self.page_repo.delete(page_id)

    # === PLAYERS ===

    async def list_players(self) -> List[Player]:
        return await self.player_repo.list_all()

    async def get_player(self, player_id: UUID) -> Player:
        return await self._require(self.player_repo, player_id, "Player")

    async def save_player(self, data: PlayerInput, player_id: Optional[UUID] = None) -> Player:
        payload = row_to_dict(data)
        if player_id is None:
            return await self.player_repo.create(payload)
        player = await self.player_repo.update(player_id, payload)
        if player is None:
            raise NotFoundError("Player not found")
        return player

    async def delete_player(self, player_id: UUID) -> None:
        await self.player_repo.delete(player_id)

    # === PARTNERS ===

    async def list_partners(self) -> List[Partner]:
        return await self.partner_repo.list_all()

    async def get_partner(self, partner_id: UUID) -> Partner:
        return await self._require(self.partner_repo, partner_id, "Partner")

    async def save_partner(self, data: PartnerInput, partner_id: Optional[UUID] = None) -> Partner:
        payload = row_to_dict(data)
        if partner_id is None:
            return await self.partner_repo.create(payload)
        partner = await self.partner_repo.update(partner_id, payload)
        if partner is None:
            raise NotFoundError("Partner not found")
        return partner

    async def delete_partner(self, partner_id: UUID) -> None:
        await self.partner_repo.delete(partner_id)

    # === FAQS ===

    async def list_faqs(self) -> List[FAQ]:
        return await self.faq_repo.list_all()

    async def get_faq(self, faq_id: UUID) -> FAQ:
        return await self._require(self.faq_repo, faq_id, "FAQ")

    async def create_faq(self, data: FAQInput, author_id: UUID) -> FAQ:
        payload = row_to_dict(data)
        payload["created_by"] = str(author_id)
        return await self.faq_repo.create(payload)

    async def update_faq(self, faq_id: UUID, data: Dict[str, Any], editor_id: UUID) -> FAQ:
        faq = await self.faq_repo.update(faq_id, {**data, "updated_by": str(editor_id)})
        if faq is None:
            raise NotFoundError("FAQ not found")
        return faq

    async def toggle_faq(self, faq_id: UUID, editor_id: UUID) -> FAQ:
        faq = await self.get_faq(faq_id)
        return await self.update_faq(faq_id, {"is_active": not faq.is_active}, editor_id)

    async def delete_faq(self, faq_id: UUID) -> None:
        await self.faq_repo.delete(faq_id)

    # === BLOG ===

    async def list_posts(self) -> List[BlogPost]:
        return await self.blog_repo.list_all()

    async def get_post(self, post_id: UUID) -> BlogPost:
        return await self._require(self.blog_repo, post_id, "Post")

    async def save_post(self, data: BlogPostInput, post_id: Optional[UUID] = None) -> BlogPost:
        payload = row_to_dict(data)
        payload["slug"] = slugify(data.slug or data.title)
        if not payload["slug"]:
            raise ValidationFailed({"slug": "Slug must contain letters or numbers"})
        payload["published_at"] = _now_iso() if data.is_published else None
        if post_id is None:
            return await self.blog_repo.create(payload)
        post = await self.blog_repo.update(post_id, payload)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    async def delete_post(self, post_id: UUID) -> None:
        await self.blog_repo.delete(post_id)

    # === MESSAGES ===

    async def list_messages(self) -> List[ContactMessage]:
        return await self.message_repo.list_all()

    async def mark_message_read(self, message_id: UUID) -> ContactMessage:
        message = await self._require(self.message_repo, message_id, "Message")
        if message.status == MessageStatus.NEW.value:
            message = await self.message_repo.update(message_id, {"status": MessageStatus.READ.value})
        return message

    async def reply_to_message(self, message_id: UUID, reply: str) -> ContactMessage:
        reply = (reply or "").strip()
        if not reply:
            raise ValidationFailed({"admin_reply": "Reply cannot be empty"})
        message = await self.message_repo.update(message_id, {
            "admin_reply": reply,
            "replied_at": _now_iso(),
            "status": MessageStatus.REPLIED.value,
        })
        if message is None:
            raise NotFoundError("Message not found")
        return message

    async def delete_message(self, message_id: UUID) -> None:
        await self.message_repo.delete(message_id)

    # === MEDIA ===

    async def media_count(self) -> int:
        if self.media_repo is None:
            return 0
        return await self.media_repo.count()
