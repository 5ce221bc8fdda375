"""
Supabase implementation of the auth provider.

End-user calls (sign-in, sign-up, refresh, resend) run on a throwaway anon
client; token validation and admin calls use the shared service client.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from supabase import AuthError, Client

from core.domain.models import AuthSession, AuthUser
from core.interfaces.auth import AuthProviderError, IAuthProvider
from infrastructure.database.supabase_client import create_auth_client, get_supabase, run_sync

logger = logging.getLogger(__name__)


def _to_user(user) -> Optional[AuthUser]:
    """Convert SDK user object to AuthUser"""
    if user is None:
        return None
    metadata = getattr(user, "user_metadata", None) or {}
    return AuthUser(
        id=user.id,
        email=getattr(user, "email", None),
        first_name=metadata.get("first_name"),
        last_name=metadata.get("last_name"),
        email_confirmed=bool(getattr(user, "email_confirmed_at", None)),
    )


def _to_session(session) -> AuthSession:
    return AuthSession(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_in=getattr(session, "expires_in", None),
        user=_to_user(session.user),
    )


class SupabaseAuthProvider(IAuthProvider):
    # Admin user listing page size
    users_per_page = 1000

    def __init__(
        self,
        service_client: Optional[Client] = None,
        auth_client_factory: Callable[[], Client] = create_auth_client,
    ):
        self._service_client = service_client
        self._auth_client_factory = auth_client_factory

    @property
    def service_client(self) -> Client:
        if self._service_client is None:
            self._service_client = get_supabase()
        return self._service_client

    @run_sync
    def _sign_in_sync(self, email: str, password: str) -> AuthSession:
        try:
            response = self._auth_client_factory().auth.sign_in_with_password({
                "email": email,
                "password": password,
            })
        except AuthError as e:
            raise AuthProviderError(e.message, getattr(e, "status", None)) from e
        if not response.session:
            raise AuthProviderError("Email not confirmed")
        return _to_session(response.session)

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        return await self._sign_in_sync(email, password)

    @run_sync
    def _sign_up_sync(self, email: str, password: str, metadata: Dict[str, Any],
                      redirect_to: Optional[str]) -> Optional[AuthUser]:
        options: Dict[str, Any] = {"data": metadata}
        if redirect_to:
            options["email_redirect_to"] = redirect_to
        try:
            response = self._auth_client_factory().auth.sign_up({
                "email": email,
                "password": password,
                "options": options,
            })
        except AuthError as e:
            raise AuthProviderError(e.message, getattr(e, "status", None)) from e
        return _to_user(response.user)

    async def sign_up(self, email: str, password: str, metadata: Dict[str, Any],
                      redirect_to: Optional[str] = None) -> Optional[AuthUser]:
        return await self._sign_up_sync(email, password, metadata, redirect_to)

    @run_sync
    def _sign_out_sync(self, access_token: str) -> None:
        try:
            self.service_client.auth.admin.sign_out(access_token)
        except AuthError as e:
            raise AuthProviderError(e.message, getattr(e, "status", None)) from e

    async def sign_out(self, access_token: str) -> None:
        await self._sign_out_sync(access_token)

    @run_sync
    def _get_user_sync(self, access_token: str) -> Optional[AuthUser]:
        try:
            response = self.service_client.auth.get_user(access_token)
        except AuthError as e:
            logger.debug(f"Access token rejected: {e.message}")
            return None
        return _to_user(response.user) if response else None

    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        return await self._get_user_sync(access_token)

    @run_sync
    def _refresh_sync(self, refresh_token: str) -> Optional[AuthSession]:
        try:
            response = self._auth_client_factory().auth.refresh_session(refresh_token)
        except AuthError as e:
            logger.debug(f"Refresh token rejected: {e.message}")
            return None
        return _to_session(response.session) if response.session else None

    async def refresh_session(self, refresh_token: str) -> Optional[AuthSession]:
        return await self._refresh_sync(refresh_token)

    @run_sync
    def _resend_sync(self, email: str) -> None:
        try:
            self._auth_client_factory().auth.resend({"type": "signup", "email": email})
        except AuthError as e:
            raise AuthProviderError(e.message, getattr(e, "status", None)) from e

    async def resend_confirmation(self, email: str) -> None:
        await self._resend_sync(email)

    @run_sync
    def _list_user_emails_sync(self) -> List[str]:
        emails: List[str] = []
        page = 1
        while True:
            try:
                users = self.service_client.auth.admin.list_users(page=page, per_page=self.users_per_page)
            except AuthError as e:
                raise AuthProviderError(e.message, getattr(e, "status", None)) from e
            emails.extend(u.email for u in users if getattr(u, "email", None))
            if len(users) < self.users_per_page:
                return emails
            page += 1

    async def list_user_emails(self) -> List[str]:
        return await self._list_user_emails_sync()
