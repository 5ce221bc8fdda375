"""
Public site: landing page, CMS pages, news articles and the landing forms.
"""

import logging

from aiohttp import web

from adapters.web.keys import FEATURES_KEY, SERVICES_KEY
from adapters.web.rendering import parse_form, read_form, redirect_with_flash, render
from core.domain import constants
from core.domain.exceptions import ValidationFailed
from core.domain.models import ContactMessageCreate, DonationForm, WaitlistForm
from core.utils.rich_text import render_preview
from locales import t

logger = logging.getLogger(__name__)


def _first_error(e: ValidationFailed) -> str:
    return next(iter(e.errors.values()), e.message)


async def index(request: web.Request) -> web.Response:
    content = request.app[SERVICES_KEY].content
    landing = await content.get_landing_page()
    return render(
        request, "index.html",
        landing=landing,
        hero_slides=constants.HERO_SLIDES,
        about_values=constants.ABOUT_VALUES,
        donation_amounts=constants.DONATION_AMOUNTS,
        impact_areas=constants.DONATION_IMPACT_AREAS,
        investment_options=constants.INVESTMENT_OPTIONS,
        contact_phones=constants.CONTACT_PHONES,
        contact_address=constants.CONTACT_ADDRESS,
        contact_hours=constants.CONTACT_HOURS,
    )


async def show_page(request: web.Request) -> web.Response:
    page = await request.app[SERVICES_KEY].content.get_page(request.match_info["slug"])
    return render(request, "page.html", page=page, page_html=render_preview(page.content or ""))


async def show_post(request: web.Request) -> web.Response:
    if not request.app[FEATURES_KEY].BLOG_ENABLED:
        raise web.HTTPNotFound()
    post = await request.app[SERVICES_KEY].content.get_post(request.match_info["slug"])
    return render(request, "post.html", post=post, post_html=render_preview(post.content or ""))


async def donate(request: web.Request) -> web.Response:
    form = await read_form(request)
    # A typed custom amount wins over the preset buttons
    form["amount"] = form.get("custom_amount") or form.get("amount") or ""
    try:
        donation = parse_form(DonationForm, form)
    except ValidationFailed as e:
        logger.debug(f"Donation form rejected: {e.errors}")
        return redirect_with_flash("/#donations", t("fill_all_fields"), "error")
    message = request.app[SERVICES_KEY].content.acknowledge_donation(donation)
    return redirect_with_flash("/#donations", message)


async def join_waitlist(request: web.Request) -> web.Response:
    form = await read_form(request)
    try:
        entry = parse_form(WaitlistForm, form)
        message = request.app[SERVICES_KEY].content.join_waitlist(entry)
    except ValidationFailed as e:
        return redirect_with_flash("/#investment", _first_error(e), "error")
    return redirect_with_flash("/#investment", message)


async def contact(request: web.Request) -> web.Response:
    if not request.app[FEATURES_KEY].CONTACT_FORM_ENABLED:
        return redirect_with_flash("/#contact", t("contact_disabled"), "error")
    form = await read_form(request)
    form.setdefault("sender_name", form.get("name", ""))
    form.setdefault("sender_email", form.get("email", ""))
    form.setdefault("sender_phone", form.get("phone", ""))
    try:
        message = parse_form(ContactMessageCreate, form)
    except ValidationFailed as e:
        return redirect_with_flash("/#contact", _first_error(e), "error")
    try:
        await request.app[SERVICES_KEY].content.submit_contact(message)
    except Exception as e:
        logger.error(f"Error saving contact message: {e}")
        return redirect_with_flash("/#contact", t("contact_failed"), "error")
    return redirect_with_flash("/#contact", t("contact_sent"))


def setup_routes(app: web.Application) -> None:
    app.router.add_get("/", index, name="index")
    app.router.add_get("/pages/{slug}", show_page, name="page")
    app.router.add_get("/news/{slug}", show_post, name="post")
    app.router.add_post("/donate", donate)
    app.router.add_post("/investment/waitlist", join_waitlist)
    app.router.add_post("/contact", contact)
