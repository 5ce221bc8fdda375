#!/usr/bin/env python3
"""
Auth diagnostics against the configured backend.

Usage:
    python scripts/auth_check.py connection
    python scripts/auth_check.py exists coach@example.com
    python scripts/auth_check.py signin coach@example.com secret123
    python scripts/auth_check.py resend coach@example.com
    python scripts/auth_check.py grant <user_id> admin
"""

import argparse
import asyncio
import sys
import os
from uuid import UUID

# Add parent dir to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load environment variables
from dotenv import load_dotenv
load_dotenv()

from adapters.web.loader import auth_service, role_service
from core.domain.exceptions import AuthenticationError
from core.domain.models import AppRole


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Check sign-in, sign-up and roles against the backend")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("connection", help="Probe the backend")

    exists = commands.add_parser("exists", help="Check whether an account exists")
    exists.add_argument("email")

    signin = commands.add_parser("signin", help="Sign in and show the user's roles")
    signin.add_argument("email")
    signin.add_argument("password")

    resend = commands.add_parser("resend", help="Resend the confirmation email")
    resend.add_argument("email")

    grant = commands.add_parser("grant", help="Grant a role to a user id")
    grant.add_argument("user_id", type=UUID)
    grant.add_argument("role", choices=[r.value for r in AppRole])

    return parser.parse_args()


async def main():
    args = parse_args()

    if args.command == "connection":
        ok = await auth_service.check_connection()
        print("✅ Connected" if ok else "❌ Backend unreachable")

    elif args.command == "exists":
        exists = await auth_service.check_user_exists(args.email)
        print("✅ User exists!" if exists else "❌ User does not exist")

    elif args.command == "signin":
        try:
            session = await auth_service.sign_in(args.email, args.password)
        except AuthenticationError as e:
            print(f"❌ Sign in failed: {e.message}")
            sys.exit(1)
        print(f"✅ Signed in as {session.user.display_name} ({session.user.id})")
        flags = await role_service.role_flags(session.user.id)
        for name, held in flags.items():
            print(f"   {name}: {'yes' if held else 'no'}")
        roles = {AppRole(name) for name, held in flags.items() if held}
        print(f"   Lands on: {role_service.landing_path(roles)}")
        await auth_service.sign_out(session.access_token)

    elif args.command == "resend":
        ok, message = await auth_service.resend_confirmation_email(args.email)
        print(f"{'✅' if ok else '❌'} {message}")

    elif args.command == "grant":
        role = AppRole(args.role)
        await role_service.assign_role(args.user_id, role)
        print(f"✅ Granted {role.value} to {args.user_id}")


if __name__ == "__main__":
    asyncio.run(main())
