"""
Mafarah Ayew Football Academy site - Main entry point.

Public landing page, role dashboards and the admin CMS, served by aiohttp.
Content, accounts and roles live in Supabase.
"""

import asyncio
import logging
import sys

from aiohttp import web

from adapters.web import create_app
from adapters.web.loader import auth_service, services
from config.features import features
from config.settings import settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("site.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if features.DEBUG_MODE or settings.debug:
    for name in ['adapters', 'core', 'infrastructure', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
    # Silence noisy HTTP debug logs
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('hpack').setLevel(logging.WARNING)


async def main():
    """Main function - starts the web server and serves until interrupted."""

    # Log feature status
    logger.info(f"=== {settings.site_name} Starting ===")
    logger.info(f"Environment: {settings.env}")
    logger.info("Feature Flags:")
    for key, value in features.to_dict().items():
        logger.info(f"  {key}: {value}")

    # The site still renders its default content when the backend is down
    if not await auth_service.check_connection():
        logger.warning("Backend unreachable at startup - serving default content until it recovers")

    app = create_app(services, settings, features)
    runner = web.AppRunner(app, access_log=logger if settings.debug else None)
    await runner.setup()
    site = web.TCPSite(runner, settings.host, settings.port)
    await site.start()
    logger.info(f"Site running on http://{settings.host}:{settings.port}")

    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()
        logger.info("Web server stopped.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Site stopped by user (Ctrl+C)")
    except SystemExit as e:
        sys.exit(e.code)
