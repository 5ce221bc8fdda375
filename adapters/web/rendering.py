"""
Template rendering, redirects, flash messages and form parsing for the web layer.
"""

import base64
import binascii
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Type, TypeVar

from aiohttp import web
from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import BaseModel, ValidationError

from adapters.web.keys import FEATURES_KEY, JINJA_KEY, SETTINGS_KEY
from core.domain import constants
from core.domain.exceptions import ValidationFailed
from core.domain.models import AppRole
from core.services.role_service import RoleService

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
FLASH_COOKIE = "ma_flash"

M = TypeVar("M", bound=BaseModel)


def setup_templates(app: web.Application) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals.update(
        nav_items=constants.NAV_ITEMS,
        site=app[SETTINGS_KEY],
        features=app[FEATURES_KEY],
    )
    app[JINJA_KEY] = env
    return env


def base_context(request: web.Request) -> Dict[str, Any]:
    """Header/user-menu state shared by every page"""
    user = request.get("user")
    roles = request.get("roles") or set()
    flags = RoleService.flags_for(roles)
    return {
        "request": request,
        "user": user,
        "roles": roles,
        "role_flags": flags,
        "is_admin": flags[AppRole.ADMIN.value],
        "dashboard_links": RoleService.dashboard_links(roles),
        "flash": request.get("flash"),
    }


def render(request: web.Request, template: str, status: int = 200, **context) -> web.Response:
    env = request.app[JINJA_KEY]
    ctx = base_context(request)
    ctx.update(context)
    html = env.get_template(template).render(**ctx)
    return web.Response(text=html, status=status, content_type="text/html")


def redirect(location: str) -> web.Response:
    return web.Response(status=302, headers={"Location": location})


# === FLASH ===

def set_flash(response: web.StreamResponse, message: str, kind: str = "success") -> None:
    payload = json.dumps({"kind": kind, "message": message}).encode("utf-8")
    # Unpadded urlsafe base64 needs no cookie quoting
    value = base64.urlsafe_b64encode(payload).decode("ascii").rstrip("=")
    response.set_cookie(FLASH_COOKIE, value, max_age=60, path="/", httponly=True, samesite="Lax")


def read_flash(request: web.Request) -> Optional[Dict[str, str]]:
    raw = request.cookies.get(FLASH_COOKIE)
    if not raw:
        return None
    try:
        padded = raw + "=" * (-len(raw) % 4)
        data = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
    except (binascii.Error, ValueError) as e:
        logger.warning(f"Dropping unreadable flash cookie: {e}")
        return None
    if not isinstance(data, dict) or "message" not in data:
        return None
    return {"kind": str(data.get("kind", "success")), "message": str(data["message"])}


def redirect_with_flash(location: str, message: str, kind: str = "success") -> web.Response:
    response = redirect(location)
    set_flash(response, message, kind)
    return response


# === FORMS ===

async def read_form(request: web.Request) -> Dict[str, str]:
    """Text fields of a posted form; file parts are ignored"""
    data = await request.post()
    return {k: v for k, v in data.items() if isinstance(v, str)}


def validation_errors(exc: ValidationError) -> Dict[str, str]:
    """First message per field, without pydantic's 'Value error, ' prefix"""
    errors: Dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else "__all__"
        msg = err.get("msg", "Invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        elif msg.startswith("value is not a valid email address"):
            msg = "Enter a valid email address"
        errors.setdefault(field, msg)
    return errors


def parse_form(model: Type[M], form: Dict[str, Any], booleans: Iterable[str] = ()) -> M:
    """Validate form data into model.

    Checkbox fields listed in booleans are True only when present in the form,
    so an unticked box never falls back to the model default.
    """
    data = dict(form)
    for name in booleans:
        data[name] = name in form and form[name] not in ("", "false", "off", "0")
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ValidationFailed(validation_errors(e)) from e
