"""
Auth provider interface - what the hosted auth backend must offer.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from core.domain.models import AuthSession, AuthUser


class AuthProviderError(Exception):
    """Raised by providers; message is the backend's raw error text"""

    def __init__(self, message: str, status: Optional[int] = None):
        self.message = message
        self.status = status
        super().__init__(message)


class IAuthProvider(ABC):

    @abstractmethod
    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        pass

    @abstractmethod
    async def sign_up(
        self,
        email: str,
        password: str,
        metadata: Dict[str, Any],
        redirect_to: Optional[str] = None,
    ) -> Optional[AuthUser]:
        """Register an account. Returns the created user (unconfirmed)"""
        pass

    @abstractmethod
    async def sign_out(self, access_token: str) -> None:
        pass

    @abstractmethod
    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        """Validate an access token; None when invalid or expired"""
        pass

    @abstractmethod
    async def refresh_session(self, refresh_token: str) -> Optional[AuthSession]:
        pass

    @abstractmethod
    async def resend_confirmation(self, email: str) -> None:
        pass

    @abstractmethod
    async def list_user_emails(self) -> List[str]:
        pass
