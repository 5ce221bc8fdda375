"""
Domain models - the core of business logic.
Each model mirrors one backend table row; *Create / *Update models carry form input.
"""

from pydantic import AfterValidator, BaseModel, BeforeValidator, EmailStr, Field, field_validator
from typing import Annotated, Optional, List, Dict, Any
from datetime import datetime, date
from uuid import UUID
from enum import Enum


def _required_text(value: Optional[str], field: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError(f"{field} is required")
    return value


def _optional_text(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


# Validated by email-validator, stored lowercase
FormEmail = Annotated[
    EmailStr,
    BeforeValidator(lambda v: v.strip() if isinstance(v, str) else v),
    AfterValidator(str.lower),
]


# === ENUMS ===

class AppRole(str, Enum):
    """Roles stored in user_roles. Declaration order is the dashboard priority."""
    ADMIN = "admin"
    INVESTOR = "investor"
    PLAYER = "player"
    PARTNER = "partner"


class SectionType(str, Enum):
    HERO = "hero"
    ABOUT = "about"
    PLAYERS = "players"
    INVESTMENT = "investment"
    DONATIONS = "donations"
    MATCHES = "matches"
    NEWS = "news"
    FAQ = "faq"
    CONTACT = "contact"
    CUSTOM = "custom"


class MessageStatus(str, Enum):
    NEW = "new"
    READ = "read"
    REPLIED = "replied"


# === AUTH ===

class AuthUser(BaseModel):
    """Authenticated identity as reported by the auth provider"""
    id: UUID
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_confirmed: bool = False

    @property
    def display_name(self) -> str:
        name = " ".join(p for p in (self.first_name, self.last_name) if p)
        return name or (self.email or "")


class AuthSession(BaseModel):
    access_token: str
    refresh_token: str
    expires_in: Optional[int] = None
    user: AuthUser


class SignUpResult(BaseModel):
    user: Optional[AuthUser] = None
    message: str
    needs_confirmation: bool = True


class UserRoleRow(BaseModel):
    id: Optional[UUID] = None
    user_id: UUID
    role: AppRole
    created_at: Optional[datetime] = None


class Profile(BaseModel):
    id: UUID
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# === SECTION ===

class Section(BaseModel):
    """Named, orderable, toggle-able block of landing page copy"""
    id: UUID
    name: str
    title: str
    content: Optional[str] = None
    section_type: str = SectionType.CUSTOM.value
    is_active: bool = True
    sort_order: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SectionUpdate(BaseModel):
    title: str
    content: Optional[str] = None
    is_active: bool = False

    @field_validator("title", mode="before")
    @classmethod
    def check_title(cls, v):
        return _required_text(v, "Title")


# === PAGE ===

class Page(BaseModel):
    id: UUID
    title: str
    slug: str
    content: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    is_published: Optional[bool] = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PageInput(BaseModel):
    """Create/update form for a custom page. Empty slug is derived from the title."""
    title: str
    slug: Optional[str] = None
    content: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    is_published: bool = False

    @field_validator("title", mode="before")
    @classmethod
    def check_title(cls, v):
        return _required_text(v, "Title")

    @field_validator("slug", "content", "meta_title", "meta_description", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        return _optional_text(v)


# === BLOG ===

class BlogPost(BaseModel):
    id: UUID
    title: str
    slug: str
    excerpt: Optional[str] = None
    content: Optional[str] = None
    featured_image: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None
    is_published: bool = False
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BlogPostInput(BaseModel):
    title: str
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    featured_image: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None
    is_published: bool = False

    @field_validator("title", mode="before")
    @classmethod
    def check_title(cls, v):
        return _required_text(v, "Title")

    @field_validator(
        "slug", "excerpt", "content", "featured_image",
        "meta_title", "meta_description", "meta_keywords",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v):
        return _optional_text(v)


# === PLAYER ===

class PlayerBase(BaseModel):
    name: str
    position: Optional[str] = None
    nationality: Optional[str] = None
    date_of_birth: Optional[date] = None
    height_cm: Optional[int] = Field(default=None, ge=0)
    weight_kg: Optional[int] = Field(default=None, ge=0)
    photo_url: Optional[str] = None
    cv_url: Optional[str] = None
    highlight_video_url: Optional[str] = None
    bio: Optional[str] = None
    goals: Optional[int] = Field(default=None, ge=0)
    assists: Optional[int] = Field(default=None, ge=0)
    appearances: Optional[int] = Field(default=None, ge=0)
    saves: Optional[int] = Field(default=None, ge=0)
    is_featured: Optional[bool] = False
    is_visible_homepage: Optional[bool] = True
    season: Optional[str] = None
    squad: Optional[str] = None


class PlayerInput(PlayerBase):
    """Player form data"""

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        return _required_text(v, "Name")

    @field_validator(
        "position", "nationality", "date_of_birth", "photo_url", "cv_url",
        "highlight_video_url", "bio", "season", "squad",
        "height_cm", "weight_kg", "goals", "assists", "appearances", "saves",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v):
        return _optional_text(v)


class Player(PlayerBase):
    id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    def age(self, today: Optional[date] = None) -> Optional[int]:
        """Age in whole years, None without a date of birth"""
        if not self.date_of_birth:
            return None
        today = today or date.today()
        dob = self.date_of_birth
        return today.year - dob.year - ((today.month, today.day) < (dob.month, dob.day))


# === PARTNER ===

class PartnerBase(BaseModel):
    name: str
    company_name: Optional[str] = None
    email: str
    phone: Optional[str] = None
    partner_type: str
    tier: Optional[str] = None
    logo_url: Optional[str] = None
    description: Optional[str] = None
    investment_amount: Optional[float] = Field(default=None, ge=0)
    contact_person: Optional[str] = None
    is_featured: Optional[bool] = False
    is_active: Optional[bool] = True


class PartnerInput(PartnerBase):
    email: FormEmail

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        return _required_text(v, "Name")

    @field_validator("partner_type", mode="before")
    @classmethod
    def check_type(cls, v):
        return _required_text(v, "Partner type")

    @field_validator(
        "company_name", "phone", "tier", "logo_url", "description",
        "investment_amount", "contact_person",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v):
        return _optional_text(v)


class Partner(PartnerBase):
    id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# === FAQ ===

class FAQ(BaseModel):
    id: UUID
    question: str
    answer: str
    category: str = "general"
    is_active: bool = True
    sort_order: int = 0
    created_by: Optional[UUID] = None
    updated_by: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FAQInput(BaseModel):
    question: str
    answer: str
    category: str = "general"
    is_active: bool = True
    sort_order: int = 0

    @field_validator("question", mode="before")
    @classmethod
    def check_question(cls, v):
        return _required_text(v, "Question")

    @field_validator("answer", mode="before")
    @classmethod
    def check_answer(cls, v):
        return _required_text(v, "Answer")

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v):
        return _optional_text(v) or "general"

    @field_validator("sort_order", mode="before")
    @classmethod
    def default_sort(cls, v):
        return _optional_text(v) or 0


# === CONTACT MESSAGES ===

class ContactMessage(BaseModel):
    id: UUID
    sender_name: str
    sender_email: str
    sender_phone: Optional[str] = None
    subject: Optional[str] = None
    message: str
    message_type: Optional[str] = "contact"
    status: Optional[str] = MessageStatus.NEW.value
    admin_reply: Optional[str] = None
    replied_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class ContactMessageCreate(BaseModel):
    sender_name: str
    sender_email: FormEmail
    sender_phone: Optional[str] = None
    subject: Optional[str] = None
    message: str
    message_type: str = "contact"

    @field_validator("sender_name", mode="before")
    @classmethod
    def check_name(cls, v):
        return _required_text(v, "Name")

    @field_validator("message", mode="before")
    @classmethod
    def check_message(cls, v):
        return _required_text(v, "Message")

    @field_validator("sender_phone", "subject", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        return _optional_text(v)


# === MEDIA / STATS ===

class MediaItem(BaseModel):
    id: UUID
    filename: str
    original_name: str
    url: str
    mime_type: str
    file_type: str
    file_size: int
    folder: Optional[str] = None
    alt_text: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    uploaded_by: Optional[UUID] = None
    created_at: Optional[datetime] = None


class SiteStatistic(BaseModel):
    id: UUID
    metric_name: str
    metric_value: float
    metric_date: Optional[date] = None
    created_at: Optional[datetime] = None


# === PUBLIC FORMS ===

class DonationForm(BaseModel):
    donor_name: str
    donor_email: FormEmail
    amount: float = Field(gt=0)

    @field_validator("donor_name", mode="before")
    @classmethod
    def check_name(cls, v):
        return _required_text(v, "Name")


class WaitlistForm(BaseModel):
    email: FormEmail
    investment_option: str

    @field_validator("investment_option", mode="before")
    @classmethod
    def check_option(cls, v):
        return _required_text(v, "Investment option")


class SignUpForm(BaseModel):
    first_name: str
    last_name: str
    email: FormEmail
    password: str = Field(min_length=6)

    @field_validator("first_name", mode="before")
    @classmethod
    def check_first(cls, v):
        return _required_text(v, "First name")

    @field_validator("last_name", mode="before")
    @classmethod
    def check_last(cls, v):
        return _required_text(v, "Last name")


class DashboardStats(BaseModel):
    """Numbers shown on the admin dashboard"""
    total_users: int = 0
    role_counts: Dict[str, int] = Field(default_factory=dict)
    statistics: Dict[str, float] = Field(default_factory=dict)
    recent_posts: List[BlogPost] = Field(default_factory=list)

    def role_count(self, role: AppRole) -> int:
        return self.role_counts.get(role.value, 0)


class ContentStats(BaseModel):
    total_sections: int = 0
    active_sections: int = 0
    total_pages: int = 0
    published_pages: int = 0
    total_players: int = 0
    featured_players: int = 0
    total_partners: int = 0
    active_partners: int = 0


def row_to_dict(model: BaseModel) -> Dict[str, Any]:
    """JSON-safe dict for inserts/updates (UUIDs, dates as strings)."""
    return model.model_dump(mode="json")
