"""
Auth service - sign-in, sign-up and session handling.
Wraps the hosted auth provider and turns its raw errors into user-facing messages.
"""

import logging
from typing import Optional, Tuple

from core.domain.exceptions import AuthenticationError, RegistrationError
from core.domain.models import AuthSession, AuthUser, SignUpResult
from core.interfaces.auth import AuthProviderError, IAuthProvider
from core.interfaces.repositories import IProfileRepository
from core.services.role_service import RoleService

logger = logging.getLogger(__name__)

SIGNUP_SUCCESS = "Account created successfully! Please check your email to confirm your account."
SIGNUP_DUPLICATE = "This email is already registered. Please sign in instead."
SIGNUP_FAILED = "Failed to create account. Please try again."
SIGNUP_UNEXPECTED = "An unexpected error occurred during signup"
LOGIN_INVALID = "Invalid email or password. Please try again."
LOGIN_UNCONFIRMED = "Please confirm your email before logging in."
LOGIN_UNEXPECTED = "An unexpected error occurred during login"
RESEND_OK = "Confirmation email resent. Please check your inbox."
RESEND_FAILED = "Failed to resend confirmation email. Please try again."


class AuthService:
    """Service for authentication; the injected replacement for a global auth context"""

    def __init__(
        self,
        provider: IAuthProvider,
        role_service: RoleService,
        profile_repo: Optional[IProfileRepository] = None,
        redirect_url: Optional[str] = None,
        first_user_admin: bool = True,
    ):
        self.provider = provider
        self.role_service = role_service
        self.profile_repo = profile_repo
        self.redirect_url = redirect_url
        self.first_user_admin = first_user_admin

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign in with email/password. Raises AuthenticationError with a friendly message."""
        try:
            session = await self.provider.sign_in_with_password(email.strip().lower(), password)
        except AuthProviderError as e:
            logger.error(f"Login error: {e.message}")
            if "Invalid login credentials" in e.message:
                raise AuthenticationError(LOGIN_INVALID) from e
            if "Email not confirmed" in e.message:
                raise AuthenticationError(LOGIN_UNCONFIRMED) from e
            raise AuthenticationError(e.message) from e
        except Exception as e:
            logger.error(f"Unexpected login error: {e}")
            raise AuthenticationError(LOGIN_UNEXPECTED) from e
        logger.info(f"Login successful for user {session.user.id}")
        return session

    async def sign_up(
        self,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> SignUpResult:
        """Register a new account; the first account becomes admin when enabled."""
        metadata = {"first_name": first_name, "last_name": last_name}
        try:
            user = await self.provider.sign_up(
                email.strip().lower(), password, metadata,
                redirect_to=f"{self.redirect_url}/" if self.redirect_url else None,
            )
        except AuthProviderError as e:
            logger.error(f"Signup error: {e.message}")
            if "already registered" in e.message:
                raise RegistrationError(SIGNUP_DUPLICATE) from e
            raise RegistrationError(SIGNUP_FAILED) from e
        except Exception as e:
            logger.error(f"Unexpected signup error: {e}")
            raise RegistrationError(SIGNUP_UNEXPECTED) from e

        if user and self.first_user_admin:
            await self.role_service.ensure_first_user_admin(user.id)

        logger.info(f"Signup successful for {email}")
        return SignUpResult(user=user, message=SIGNUP_SUCCESS, needs_confirmation=not (user and user.email_confirmed))

    async def sign_out(self, access_token: str) -> None:
        try:
            await self.provider.sign_out(access_token)
        except AuthProviderError as e:
            logger.error(f"Error signing out: {e.message}")
            raise

    async def get_user(self, access_token: Optional[str]) -> Optional[AuthUser]:
        if not access_token:
            return None
        return await self.provider.get_user(access_token)

    async def refresh(self, refresh_token: Optional[str]) -> Optional[AuthSession]:
        if not refresh_token:
            return None
        return await self.provider.refresh_session(refresh_token)

    async def check_user_exists(self, email: str) -> bool:
        try:
            emails = await self.provider.list_user_emails()
        except Exception as e:
            logger.error(f"Error checking user existence: {e}")
            return False
        email = email.strip().lower()
        return any(e.lower() == email for e in emails)

    async def resend_confirmation_email(self, email: str) -> Tuple[bool, str]:
        try:
            await self.provider.resend_confirmation(email.strip().lower())
        except Exception as e:
            logger.error(f"Error resending confirmation email: {e}")
            return False, RESEND_FAILED
        return True, RESEND_OK

    async def check_connection(self) -> bool:
        """Probe the backend once; logs the outcome."""
        if self.profile_repo is None:
            return False
        try:
            await self.profile_repo.probe()
        except Exception as e:
            logger.error(f"Failed to connect to Supabase: {e}")
            return False
        logger.info("Successfully connected to Supabase")
        return True
