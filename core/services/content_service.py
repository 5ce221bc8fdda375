"""
Content service - assembles the public landing page and public CMS pages.
Backend failures fall back to the static defaults so the site always renders.
"""

import logging
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from core.domain import constants
from core.domain.exceptions import NotFoundError, ValidationFailed
from core.domain.models import (
    BlogPost,
    ContactMessage,
    ContactMessageCreate,
    DonationForm,
    Page,
    Section,
    WaitlistForm,
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
from core.utils.rich_text import render_preview

logger = logging.getLogger(__name__)


class LandingSection(BaseModel):
    name: str
    section_type: str
    title: str
    content_html: str = ""


class LandingPage(BaseModel):
    sections: List[LandingSection] = Field(default_factory=list)
    players: List[Dict[str, Any]] = Field(default_factory=list)
    faqs: List[Dict[str, Any]] = Field(default_factory=list)
    news: List[Dict[str, Any]] = Field(default_factory=list)
    upcoming_matches: List[Dict[str, Any]] = Field(default_factory=list)
    recent_results: List[Dict[str, Any]] = Field(default_factory=list)


def match_outcome(result: Dict[str, Any]) -> Dict[str, Any]:
    """Annotate a played match with the academy's score, the opponent's, and W/D/L."""
    if result["is_home"]:
        ours, theirs = result["home_score"], result["away_score"]
    else:
        ours, theirs = result["away_score"], result["home_score"]
    if ours > theirs:
        outcome = "win"
    elif ours == theirs:
        outcome = "draw"
    else:
        outcome = "loss"
    return {**result, "our_score": ours, "their_score": theirs, "outcome": outcome}


class ContentService:
    """Read side of the CMS for the public site"""

    def __init__(
        self,
        section_repo: ISectionRepository,
        player_repo: IPlayerRepository,
        faq_repo: IFAQRepository,
        page_repo: IPageRepository,
        blog_repo: IBlogRepository,
        message_repo: ITableRepository[ContactMessage],
        news_limit: int = 3,
    ):
        self.section_repo = section_repo
        self.player_repo = player_repo
        self.faq_repo = faq_repo
        self.page_repo = page_repo
        self.blog_repo = blog_repo
        self.message_repo = message_repo
        self.news_limit = news_limit

    # --- Landing page ---

    async def _load_sections(self) -> List[LandingSection]:
        try:
            stored = await self.section_repo.list_all()
        except Exception as e:
            logger.error(f"Error fetching sections, using defaults: {e}")
            stored = []
        return build_sections(stored)

    async def _load_players(self) -> List[Dict[str, Any]]:
        try:
            players = await self.player_repo.get_homepage_players()
        except Exception as e:
            logger.error(f"Error fetching players, using defaults: {e}")
            players = []
        if not players:
            return list(constants.DEFAULT_PLAYERS)
        cards = []
        for p in players:
            if (p.position or "").lower() == "goalkeeper":
                stats = {"Saves": p.saves or 0, "Apps": p.appearances or 0}
            else:
                stats = {"Goals": p.goals or 0, "Assists": p.assists or 0, "Apps": p.appearances or 0}
            cards.append({
                "name": p.name,
                "position": p.position,
                "age": p.age(),
                "nationality": p.nationality,
                "photo_url": p.photo_url,
                "is_featured": bool(p.is_featured),
                "stats": stats,
            })
        return cards

    async def _load_faqs(self) -> List[Dict[str, Any]]:
        try:
            faqs = await self.faq_repo.get_active()
        except Exception as e:
            logger.error(f"Error fetching FAQs, using defaults: {e}")
            faqs = []
        if not faqs:
            return list(constants.DEFAULT_FAQS)
        return [{"question": f.question, "answer": f.answer, "category": f.category} for f in faqs]

    async def _load_news(self) -> List[Dict[str, Any]]:
        try:
            posts = await self.blog_repo.get_published(limit=self.news_limit)
        except Exception as e:
            logger.error(f"Error fetching news, using defaults: {e}")
            posts = []
        if not posts:
            return list(constants.DEFAULT_NEWS)
        news = []
        for p in posts:
            stamp = p.published_at or p.created_at
            news.append({
                "title": p.title,
                "excerpt": p.excerpt,
                "image": p.featured_image,
                "date": stamp.date().isoformat() if stamp else "",
                "slug": p.slug,
            })
        return news

    async def get_landing_page(self) -> LandingPage:
        return LandingPage(
            sections=await self._load_sections(),
            players=await self._load_players(),
            faqs=await self._load_faqs(),
            news=await self._load_news(),
            upcoming_matches=list(constants.UPCOMING_MATCHES),
            recent_results=[match_outcome(r) for r in constants.RECENT_RESULTS],
        )

    # --- Public CMS pages ---

    async def get_page(self, slug: str) -> Page:
        page = await self.page_repo.get_published_by_slug(slug)
        if not page:
            raise NotFoundError("Page not found")
        return page

    async def get_post(self, slug: str) -> BlogPost:
        post = await self.blog_repo.get_published_by_slug(slug)
        if not post:
            raise NotFoundError("Article not found")
        return post

    # --- Public forms ---

    async def submit_contact(self, form: ContactMessageCreate) -> ContactMessage:
        data = row_to_dict(form)
        data["status"] = "new"
        message = await self.message_repo.create(data)
        logger.info(f"Contact message {message.id} received from {form.sender_email}")
        return message

    def acknowledge_donation(self, form: DonationForm) -> str:
        """No payment is taken; returns the thank-you text."""
        amount = f"{form.amount:,.2f}".rstrip("0").rstrip(".")
        logger.info(f"Donation pledge of ${amount} from {form.donor_email}")
        return f"Thank you {form.donor_name}! Your donation of ${amount} will make a difference."

    def join_waitlist(self, form: WaitlistForm) -> str:
        valid = {o["id"] for o in constants.INVESTMENT_OPTIONS}
        if form.investment_option not in valid:
            raise ValidationFailed({"investment_option": "Choose one of the investment options"})
        logger.info(f"Investment waitlist: {form.email} ({form.investment_option})")
        return "Added to investment waitlist!"


def build_sections(stored: List[Section]) -> List[LandingSection]:
    """Merge stored sections with defaults.

    Stored rows win and keep their sort_order; inactive rows hide their type.
    Types with no stored row are appended in the default order.
    """
    result: List[LandingSection] = []
    seen = set()
    for section in sorted(stored, key=lambda s: s.sort_order):
        key = section.section_type or section.name
        seen.add(key)
        seen.add(section.name)
        if not section.is_active:
            continue
        result.append(LandingSection(
            name=section.name,
            section_type=key,
            title=section.title,
            content_html=render_preview(section.content or ""),
        ))
    for key in constants.DEFAULT_SECTION_ORDER:
        if key in seen:
            continue
        default = constants.DEFAULT_SECTIONS[key]
        result.append(LandingSection(
            name=key,
            section_type=key,
            title=default["title"],
            content_html=render_preview(default["content"] or ""),
        ))
    return result
