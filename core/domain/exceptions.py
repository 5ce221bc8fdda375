"""
Domain exceptions. Each carries a message that is safe to show to the user.
"""

from typing import Dict, Optional


class SiteError(Exception):
    """Base class for errors surfaced to the user"""

    default_message = "Something went wrong. Please try again."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationError(SiteError):
    default_message = "Invalid email or password. Please try again."


class RegistrationError(SiteError):
    default_message = "Failed to create account. Please try again."


class AccessDeniedError(SiteError):
    default_message = "You do not have access to that page."


class NotFoundError(SiteError):
    default_message = "The requested item was not found."


class ValidationFailed(SiteError):
    """Form input rejected; errors maps field name -> message"""

    default_message = "Please correct the highlighted fields."

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = errors
        super().__init__(message)
