"""Storefront Configuration"""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Fix EV Garage"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Client-side cart slot
    cart_storage_key: str = "fixev_cart"
    cart_cookie_max_age: int = 60 * 60 * 24 * 30  # 30 days
    cookie_secure: bool = False

    # Submissions kept in memory by the logging submitters
    recent_submissions_limit: int = 50

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
