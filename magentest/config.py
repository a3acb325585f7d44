"""Configuration for the MagenTest chat client."""

import logging
from functools import lru_cache

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from magentest.models import Language, RequestEncoding

# Automatically load values from a .env file when present so that local
# development "just works" without exporting variables manually.
load_dotenv()

DEFAULT_API_BASE_URL = "https://magentest-production.up.railway.app"


class Settings(BaseSettings):
    """
    Pydantic-based settings management for the application.
    Reads MAGENTEST_* environment variables and provides them as typed attributes.
    """

    model_config = SettingsConfigDict(env_prefix="MAGENTEST_")

    # Remote service
    api_base_url: str = DEFAULT_API_BASE_URL
    request_encoding: RequestEncoding = RequestEncoding.JSON
    request_timeout: float = 30.0

    # Request defaults
    default_language: Language = Language.PT
    output_format: str = "Procedural"
    code_target: str = "Robotframework"

    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(level=None) -> int:
    """Configure root logging once and return the numeric level applied."""
    name = (level or get_settings().log_level).upper()
    numeric = getattr(logging, name, None)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(numeric)
    return numeric
