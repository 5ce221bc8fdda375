#!/usr/bin/env python3
"""
Script to create the default landing page sections in a fresh backend.
Existing sections are left untouched.
Run: python scripts/seed_sections.py
"""

import asyncio
import sys
import os

# Add parent dir to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load env
from dotenv import load_dotenv
load_dotenv()

from adapters.web.loader import auth_service, cms_service


async def seed_sections():
    """Create missing default sections"""
    print("🔌 Checking backend connection...")
    if not await auth_service.check_connection():
        print("❌ Backend unreachable, check SUPABASE_URL / SUPABASE_SERVICE_KEY")
        sys.exit(1)

    created = await cms_service.seed_default_sections()
    if not created:
        print("✅ All default sections already exist")
        return

    print(f"✅ Created {len(created)} sections:")
    for section in created:
        print(f"   {section.sort_order}. {section.name}: {section.title}")


if __name__ == "__main__":
    asyncio.run(seed_sections())
