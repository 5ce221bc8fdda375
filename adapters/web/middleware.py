"""
Middlewares for the web app.

- error_middleware: renders 404/500 pages, never leaks tracebacks
- session_middleware: resolves the signed-in user and roles, rotates cookies, consumes flash
"""

import logging

from aiohttp import web

from adapters.web.keys import SERVICES_KEY, SETTINGS_KEY
from adapters.web.rendering import FLASH_COOKIE, read_flash, render
from adapters.web.session import SESSION_HANDLED, clear_session_cookies, resolve_session, set_session_cookies
from core.domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


@web.middleware
async def error_middleware(request: web.Request, handler):
    try:
        return await handler(request)
    except NotFoundError as e:
        return render(request, "404.html", status=404, message=e.message)
    except web.HTTPNotFound:
        return render(request, "404.html", status=404, message=None)
    except web.HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unhandled error on {request.method} {request.path}: {e}")
        return render(request, "500.html", status=500)


@web.middleware
async def session_middleware(request: web.Request, handler):
    if request.path.startswith("/static/"):
        return await handler(request)

    services = request.app[SERVICES_KEY]
    cfg = request.app[SETTINGS_KEY]

    user, refreshed, clear = await resolve_session(request, services.auth)
    request["user"] = user
    request["roles"] = await services.roles.get_roles(user.id) if user else set()
    request["flash"] = read_flash(request)

    response = await handler(request)

    if not request.get(SESSION_HANDLED):
        if refreshed is not None:
            set_session_cookies(response, refreshed, cfg)
        elif clear:
            clear_session_cookies(response, cfg)
    if request["flash"] and FLASH_COOKIE not in response.cookies:
        response.del_cookie(FLASH_COOKIE, path="/")
    return response
