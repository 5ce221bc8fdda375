"""
Feature Flags - Easy on/off toggle for features.
Change values here to enable/disable functionality.
"""

import os


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === AUTH ===
    SIGNUP_ENABLED: bool = os.getenv("SIGNUP_ENABLED", "true").lower() == "true"
    # First account to sign up becomes admin when no admin exists yet
    FIRST_USER_ADMIN: bool = os.getenv("FIRST_USER_ADMIN", "true").lower() == "true"
    DEMO_ACCOUNTS_ENABLED: bool = os.getenv("DEMO_ACCOUNTS_ENABLED", "false").lower() == "true"

    # === PUBLIC SITE ===
    CONTACT_FORM_ENABLED: bool = os.getenv("CONTACT_FORM_ENABLED", "true").lower() == "true"
    BLOG_ENABLED: bool = os.getenv("BLOG_ENABLED", "true").lower() == "true"
    NEWS_ON_HOMEPAGE: int = int(os.getenv("NEWS_ON_HOMEPAGE", "3"))

    # === DEBUG ===
    DEBUG_MODE: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "signup_enabled": cls.SIGNUP_ENABLED,
            "first_user_admin": cls.FIRST_USER_ADMIN,
            "demo_accounts_enabled": cls.DEMO_ACCOUNTS_ENABLED,
            "contact_form_enabled": cls.CONTACT_FORM_ENABLED,
            "blog_enabled": cls.BLOG_ENABLED,
            "news_on_homepage": cls.NEWS_ON_HOMEPAGE,
            "debug_mode": cls.DEBUG_MODE,
        }


# Shortcut
features = Features()
