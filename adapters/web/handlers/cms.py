"""
Admin CMS under /admin/cms.

One page with tabs. Each editable tab is described by a CMSTab: its input model,
checkbox fields, form layout and the CMSService calls behind it. Every action
redirects back to its tab with a flash; validation errors re-render the form.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple
from uuid import UUID

from aiohttp import web

from adapters.web.keys import SERVICES_KEY
from adapters.web.rendering import parse_form, read_form, redirect_with_flash, render
from adapters.web.session import require_role
from core.domain import constants
from core.domain.exceptions import SiteError, ValidationFailed
from core.domain.models import (
    AppRole,
    BlogPostInput,
    ContentStats,
    FAQInput,
    PageInput,
    PartnerInput,
    PlayerInput,
    SectionUpdate,
    row_to_dict,
)
from core.utils.rich_text import FORMATS, apply_format, render_preview
from locales import t

logger = logging.getLogger(__name__)


def field(name: str, label: str, kind: str = "text", options: Optional[List[str]] = None,
          required: bool = False, help_text: Optional[str] = None) -> Dict[str, Any]:
    return {"name": name, "label": label, "kind": kind, "options": options or [],
            "required": required, "help": help_text}


class CMSTab:
    """An editable CMS tab"""

    def __init__(
        self,
        name: str,
        noun: str,
        model,
        fields: List[Dict[str, Any]],
        lister: str,
        getter: str,
        saver: Callable,
        deleter: Optional[str] = None,
        toggler: Optional[Callable] = None,
        toggle_field: Optional[str] = None,
        defaults: Optional[Dict[str, Any]] = None,
        creatable: bool = True,
        title: Optional[str] = None,
        columns: Tuple[str, ...] = ("title",),
    ):
        self.name = name
        self.noun = noun
        self.title = title or noun.capitalize()
        self.model = model
        self.fields = fields
        self.booleans = tuple(f["name"] for f in fields if f["kind"] == "checkbox")
        self.lister = lister
        self.getter = getter
        self.saver = saver
        self.deleter = deleter
        self.toggler = toggler
        self.toggle_field = toggle_field
        self.defaults = defaults or {}
        self.creatable = creatable
        self.columns = columns


TABS: Dict[str, CMSTab] = {
    "sections": CMSTab(
        "sections", "section", SectionUpdate,
        [
            field("title", "Title", required=True),
            field("content", "Content", "richtext"),
            field("is_active", "Active", "checkbox"),
        ],
        lister="list_sections", getter="get_section",
        saver=lambda cms, data, item_id, user: cms.update_section(item_id, data),
        toggler=lambda cms, item_id, user: cms.toggle_section(item_id),
        toggle_field="is_active",
        creatable=False,
        columns=("name", "title", "sort_order"),
    ),
    "pages": CMSTab(
        "pages", "page", PageInput,
        [
            field("title", "Title", required=True),
            field("slug", "Slug", help_text="Leave empty to generate from the title"),
            field("content", "Content", "richtext"),
            field("meta_title", "Meta title"),
            field("meta_description", "Meta description", "textarea"),
            field("is_published", "Published", "checkbox"),
        ],
        lister="list_pages", getter="get_page",
        saver=lambda cms, data, item_id, user: cms.save_page(data, item_id),
        deleter="delete_page",
        toggler=lambda cms, item_id, user: cms.toggle_page_published(item_id),
        toggle_field="is_published",
        columns=("title", "slug"),
    ),
    "players": CMSTab(
        "players", "player", PlayerInput,
        [
            field("name", "Name", required=True),
            field("position", "Position", "select", constants.PLAYER_POSITIONS),
            field("nationality", "Nationality"),
            field("date_of_birth", "Date of birth", "date"),
            field("height_cm", "Height (cm)", "number"),
            field("weight_kg", "Weight (kg)", "number"),
            field("photo_url", "Photo URL", "url"),
            field("cv_url", "CV URL", "url"),
            field("highlight_video_url", "Highlight video URL", "url"),
            field("bio", "Bio", "textarea"),
            field("goals", "Goals", "number"),
            field("assists", "Assists", "number"),
            field("appearances", "Appearances", "number"),
            field("saves", "Saves", "number"),
            field("season", "Season"),
            field("squad", "Squad"),
            field("is_featured", "Featured", "checkbox"),
            field("is_visible_homepage", "Show on homepage", "checkbox"),
        ],
        lister="list_players", getter="get_player",
        saver=lambda cms, data, item_id, user: cms.save_player(data, item_id),
        deleter="delete_player",
        defaults={"is_visible_homepage": True},
        columns=("name", "position", "squad"),
    ),
    "partners": CMSTab(
        "partners", "partner", PartnerInput,
        [
            field("name", "Name", required=True),
            field("company_name", "Company"),
            field("email", "Email", "email", required=True),
            field("phone", "Phone"),
            field("partner_type", "Type", "select", constants.PARTNER_TYPES, required=True),
            field("tier", "Tier", "select", constants.PARTNER_TIERS),
            field("logo_url", "Logo URL", "url"),
            field("description", "Description", "textarea"),
            field("investment_amount", "Investment amount", "number"),
            field("contact_person", "Contact person"),
            field("is_featured", "Featured", "checkbox"),
            field("is_active", "Active", "checkbox"),
        ],
        lister="list_partners", getter="get_partner",
        saver=lambda cms, data, item_id, user: cms.save_partner(data, item_id),
        deleter="delete_partner",
        defaults={"is_active": True},
        columns=("name", "partner_type", "tier"),
    ),
    "faqs": CMSTab(
        "faqs", "faq", FAQInput,
        [
            field("question", "Question", required=True),
            field("answer", "Answer", "richtext", required=True),
            field("category", "Category", "select", constants.FAQ_CATEGORIES),
            field("sort_order", "Sort order", "number"),
            field("is_active", "Active", "checkbox"),
        ],
        lister="list_faqs", getter="get_faq",
        saver=lambda cms, data, item_id, user: (
            cms.create_faq(data, user.id) if item_id is None
            else cms.update_faq(item_id, row_to_dict(data), user.id)
        ),
        deleter="delete_faq",
        toggler=lambda cms, item_id, user: cms.toggle_faq(item_id, user.id),
        toggle_field="is_active",
        defaults={"is_active": True, "category": "general", "sort_order": 0},
        title="FAQ",
        columns=("question", "category", "sort_order"),
    ),
    "blog": CMSTab(
        "blog", "post", BlogPostInput,
        [
            field("title", "Title", required=True),
            field("slug", "Slug", help_text="Leave empty to generate from the title"),
            field("excerpt", "Excerpt", "textarea"),
            field("content", "Content", "richtext"),
            field("featured_image", "Featured image URL", "url"),
            field("meta_title", "Meta title"),
            field("meta_description", "Meta description", "textarea"),
            field("meta_keywords", "Meta keywords"),
            field("is_published", "Published", "checkbox"),
        ],
        lister="list_posts", getter="get_post",
        saver=lambda cms, data, item_id, user: cms.save_post(data, item_id),
        deleter="delete_post",
        columns=("title", "slug", "is_published"),
    ),
}

TAB_IDS = [tab["id"] for tab in constants.CMS_TABS]


def _tab_url(tab: str) -> str:
    return f"/admin/cms?tab={tab}"


def _item_id(request: web.Request) -> UUID:
    try:
        return UUID(request.match_info["item_id"])
    except ValueError:
        raise web.HTTPNotFound()


def _tab(request: web.Request) -> CMSTab:
    tab = TABS.get(request.match_info["tab"])
    if tab is None:
        raise web.HTTPNotFound()
    return tab


async def _render_cms(
    request: web.Request,
    tab_id: str,
    values: Optional[Dict[str, Any]] = None,
    errors: Optional[Dict[str, str]] = None,
    form_action: Optional[str] = None,
    status: int = 200,
) -> web.Response:
    cms = request.app[SERVICES_KEY].cms
    load_error = None

    try:
        stats = await cms.content_stats()
    except Exception as e:
        logger.error(f"Error loading content stats: {e}")
        stats = ContentStats()

    items: List[Any] = []
    tab = TABS.get(tab_id)
    try:
        if tab is not None:
            items = await getattr(cms, tab.lister)()
        elif tab_id == "messages":
            items = await cms.list_messages()
    except Exception as e:
        logger.error(f"Error loading {tab_id}: {e}")
        load_error = t("load_failed", what=tab_id)

    media_count = 0
    if tab_id == "media":
        try:
            media_count = await cms.media_count()
        except Exception as e:
            logger.error(f"Error counting media: {e}")

    return render(
        request, "cms.html", status=status,
        tabs=constants.CMS_TABS,
        tab_id=tab_id,
        tab=tab,
        items=items,
        stats=stats,
        values=values,
        errors=errors or {},
        form_action=form_action,
        load_error=load_error,
        media_count=media_count,
        formats=list(FORMATS),
    )


@require_role(AppRole.ADMIN)
async def cms_index(request: web.Request) -> web.Response:
    tab_id = request.query.get("tab", "sections")
    if tab_id not in TAB_IDS:
        tab_id = "sections"
    tab = TABS.get(tab_id)
    values = None
    form_action = None

    if tab is not None and request.query.get("edit"):
        try:
            item_id = UUID(request.query["edit"])
            item = await getattr(request.app[SERVICES_KEY].cms, tab.getter)(item_id)
        except (ValueError, SiteError):
            return redirect_with_flash(_tab_url(tab_id), t("load_failed", what=tab.noun), "error")
        values = item.model_dump(mode="json")
        form_action = f"/admin/cms/{tab_id}/{item_id}"
    elif tab is not None and tab.creatable and "new" in request.query:
        values = dict(tab.defaults)
        form_action = f"/admin/cms/{tab_id}"

    return await _render_cms(request, tab_id, values=values, form_action=form_action)


async def _save(request: web.Request, item_id: Optional[UUID]) -> web.Response:
    tab = _tab(request)
    if item_id is None and not tab.creatable:
        raise web.HTTPNotFound()
    form = await read_form(request)
    action = "created" if item_id is None else "updated"
    form_action = f"/admin/cms/{tab.name}" + (f"/{item_id}" if item_id else "")
    try:
        data = parse_form(tab.model, form, tab.booleans)
        await tab.saver(request.app[SERVICES_KEY].cms, data, item_id, request["user"])
    except ValidationFailed as e:
        values = dict(form)
        for name in tab.booleans:
            values[name] = name in form
        return await _render_cms(request, tab.name, values=values, errors=e.errors,
                                 form_action=form_action, status=400)
    except Exception as e:
        logger.error(f"Error saving {tab.noun}: {e}")
        return redirect_with_flash(_tab_url(tab.name), t(f"{tab.noun}_save_failed"), "error")
    logger.info(f"Admin {request['user'].id} {action} {tab.noun} {item_id or ''}".rstrip())
    return redirect_with_flash(_tab_url(tab.name), t(f"{tab.noun}_saved", action=action))


@require_role(AppRole.ADMIN)
async def create_item(request: web.Request) -> web.Response:
    return await _save(request, None)


@require_role(AppRole.ADMIN)
async def update_item(request: web.Request) -> web.Response:
    return await _save(request, _item_id(request))


@require_role(AppRole.ADMIN)
async def toggle_item(request: web.Request) -> web.Response:
    tab = _tab(request)
    if tab.toggler is None:
        raise web.HTTPNotFound()
    try:
        item = await tab.toggler(request.app[SERVICES_KEY].cms, _item_id(request), request["user"])
    except web.HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error toggling {tab.noun}: {e}")
        return redirect_with_flash(_tab_url(tab.name), t("toggle_failed", noun=tab.noun), "error")
    state = _toggle_state(tab.toggle_field, getattr(item, tab.toggle_field))
    return redirect_with_flash(_tab_url(tab.name), t("toggled", noun=tab.title, state=state))


def _toggle_state(flag: str, value: bool) -> str:
    if flag == "is_published":
        return "published" if value else "unpublished"
    return "activated" if value else "deactivated"


@require_role(AppRole.ADMIN)
async def delete_item(request: web.Request) -> web.Response:
    tab = _tab(request)
    if tab.deleter is None:
        raise web.HTTPNotFound()
    item_id = _item_id(request)
    try:
        await getattr(request.app[SERVICES_KEY].cms, tab.deleter)(item_id)
    except Exception as e:
        logger.error(f"Error deleting {tab.noun} {item_id}: {e}")
        return redirect_with_flash(_tab_url(tab.name), t(f"{tab.noun}_delete_failed"), "error")
    logger.info(f"Admin {request['user'].id} deleted {tab.noun} {item_id}")
    return redirect_with_flash(_tab_url(tab.name), t(f"{tab.noun}_deleted"))


# === MESSAGES ===

@require_role(AppRole.ADMIN)
async def message_read(request: web.Request) -> web.Response:
    try:
        await request.app[SERVICES_KEY].cms.mark_message_read(_item_id(request))
    except web.HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error marking message read: {e}")
        return redirect_with_flash(_tab_url("messages"), t("message_failed"), "error")
    return redirect_with_flash(_tab_url("messages"), t("message_read"))


@require_role(AppRole.ADMIN)
async def message_reply(request: web.Request) -> web.Response:
    form = await read_form(request)
    try:
        await request.app[SERVICES_KEY].cms.reply_to_message(_item_id(request), form.get("admin_reply", ""))
    except ValidationFailed as e:
        return redirect_with_flash(_tab_url("messages"), e.errors.get("admin_reply", e.message), "error")
    except web.HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error replying to message: {e}")
        return redirect_with_flash(_tab_url("messages"), t("message_failed"), "error")
    return redirect_with_flash(_tab_url("messages"), t("message_replied"))


@require_role(AppRole.ADMIN)
async def message_delete(request: web.Request) -> web.Response:
    try:
        await request.app[SERVICES_KEY].cms.delete_message(_item_id(request))
    except web.HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting message: {e}")
        return redirect_with_flash(_tab_url("messages"), t("message_delete_failed"), "error")
    return redirect_with_flash(_tab_url("messages"), t("message_deleted"))


# === EDITOR ===

async def _payload(request: web.Request) -> Dict[str, Any]:
    if request.content_type == "application/json":
        data = await request.json()
        if not isinstance(data, dict):
            raise ValueError("Expected a JSON object")
        return data
    return await read_form(request)


@require_role(AppRole.ADMIN)
async def editor_preview(request: web.Request) -> web.Response:
    try:
        data = await _payload(request)
    except ValueError:
        return web.Response(text="", status=400, content_type="text/html")
    return web.Response(text=render_preview(str(data.get("text") or "")), content_type="text/html")


@require_role(AppRole.ADMIN)
async def editor_format(request: web.Request) -> web.Response:
    try:
        data = await _payload(request)
        text, start, end = _format_args(data)
        new_text, sel_start, sel_end = apply_format(text, start, end, str(data.get("format", "")))
    except (ValueError, TypeError) as e:
        return web.json_response({"error": str(e)}, status=400)
    return web.json_response({"text": new_text, "start": sel_start, "end": sel_end})


def _format_args(data: Dict[str, Any]) -> Tuple[str, int, int]:
    text = str(data.get("text") or "")
    start = int(data.get("start", len(text)))
    end = int(data.get("end", start))
    return text, start, end


def setup_routes(app: web.Application) -> None:
    app.router.add_get("/admin/cms", cms_index, name="cms")
    app.router.add_post("/admin/cms/preview", editor_preview)
    app.router.add_post("/admin/cms/format", editor_format)
    app.router.add_post("/admin/cms/messages/{item_id}/read", message_read)
    app.router.add_post("/admin/cms/messages/{item_id}/reply", message_reply)
    app.router.add_post("/admin/cms/messages/{item_id}/delete", message_delete)
    app.router.add_post("/admin/cms/{tab}", create_item)
    app.router.add_post("/admin/cms/{tab}/{item_id}", update_item)
    app.router.add_post("/admin/cms/{tab}/{item_id}/toggle", toggle_item)
    app.router.add_post("/admin/cms/{tab}/{item_id}/delete", delete_item)
