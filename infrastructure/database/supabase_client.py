"""
Supabase client initialization.
Single point of database connection.
"""

from supabase import create_client, Client
from supabase.lib.client_options import ClientOptions
import asyncio
import concurrent.futures
import logging
from functools import wraps
from typing import Optional

from config.settings import settings

logger = logging.getLogger(__name__)

_service_client: Optional[Client] = None


def _require_credentials(key: str) -> None:
    if not settings.supabase_url or not key:
        logger.error(
            "Supabase credentials not configured! "
            f"SUPABASE_URL: {'set' if settings.supabase_url else 'MISSING'}, "
            f"key: {'set' if key else 'MISSING'}"
        )
        raise RuntimeError("Supabase credentials not configured (SUPABASE_URL / SUPABASE_SERVICE_KEY)")


def get_supabase() -> Client:
    """Shared service-role client for table access and admin auth calls."""
    global _service_client
    if _service_client is None:
        key = settings.supabase_service_key or settings.supabase_key
        _require_credentials(key)
        # Schema isolation: staging can point at a separate schema
        options = ClientOptions(
            schema=settings.db_schema,
            auto_refresh_token=False,
            persist_session=False,
        )
        _service_client = create_client(settings.supabase_url, key, options=options)
    return _service_client


def create_auth_client() -> Client:
    """Fresh anon-key client for one sign-in / sign-up / refresh.

    The SDK keeps the signed-in session on the client object, so end-user auth
    calls never touch the shared service client.
    """
    key = settings.supabase_key or settings.supabase_service_key
    _require_credentials(key)
    options = ClientOptions(auto_refresh_token=False, persist_session=False)
    return create_client(settings.supabase_url, key, options=options)


# Dedicated bounded thread pool for DB operations - prevents exhausting the
# default executor when many Supabase calls run concurrently.
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="supabase-db",
)


def run_sync(func):
    """
    Decorator to run synchronous Supabase operations in async context.
    Supabase Python SDK is synchronous, so we need this wrapper.
    Uses a dedicated bounded thread pool instead of the default executor.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_db_executor, lambda: func(*args, **kwargs))
    return wrapper
