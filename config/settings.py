from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import List
import os
from pathlib import Path


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""           # anon key, used for sign-in / sign-up
    supabase_service_key: str = ""   # service key, used for table access and admin auth calls
    db_schema: str = "public"

    # Site
    site_name: str = "Mafarah Ayew Football Academy"
    site_url: str = "http://localhost:8080"
    contact_emails: str = "info@mafarahayew.com,academy@mafarahayew.org"
    hero_interval_seconds: int = 6

    # Web server
    host: str = "0.0.0.0"
    port: int = 8080

    # Session cookies
    access_cookie_name: str = "ma_access_token"
    refresh_cookie_name: str = "ma_refresh_token"
    cookie_secure: bool = False
    cookie_max_age: int = 60 * 60 * 24 * 7

    # Environment
    env: str = "development"
    debug: bool = False

    @field_validator('site_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def contact_email_list(self) -> List[str]:
        return [x.strip() for x in self.contact_emails.split(",") if x.strip()]

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SUPABASE_URL == supabase_url
    )


# Create settings instance
settings = Settings()

if os.getenv("DEBUG", "").lower() == "true":
    print("Settings loaded:")
    print(f"  SUPABASE_URL: {'set' if settings.supabase_url else 'MISSING'}")
    print(f"  SUPABASE_KEY: {'set' if settings.supabase_key else 'MISSING'}")
    print(f"  SUPABASE_SERVICE_KEY: {'set' if settings.supabase_service_key else 'MISSING'}")
