"""
Configuration management for the Smart Kitchen Recipe Finder.

This module centralizes environment variable loading from the .env file at project root.
It should be imported early by the Streamlit entry point so that .env is loaded before
any other code reads environment variables.

When no .env exists (e.g. in a hosted deployment), load_dotenv() is a no-op and the
platform environment is used instead.

Environment Variables:
- MEALDB_BASE_URL: Optional, defaults to "https://www.themealdb.com/api/json/v1"
- MEALDB_API_KEY: Optional, defaults to "1" (TheMealDB public test key)
- MEALDB_TIMEOUT_SECONDS: Optional, request timeout in seconds (default: 10)
- SEARCH_DEBOUNCE_MS: Optional, quiet interval before a search fires (default: 400)
- GALLERY_SEED_QUERY: Optional, name search used to load the gallery (default: "a")
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MEALDB_BASE_URL = "https://www.themealdb.com/api/json/v1"
DEFAULT_MEALDB_API_KEY = "1"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_DEBOUNCE_MS = 400
DEFAULT_GALLERY_SEED_QUERY = "a"


def load_env_file() -> None:
    """
    Load environment variables from the .env file at project root.

    The project root is located relative to this file (finder/config.py -> project root).
    Existing environment variables take precedence (override=False).
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid value for %s=%r, using default %s", name, raw, default)
        return default
    if value < 0:
        logger.warning("Negative value for %s=%r, using default %s", name, raw, default)
        return default
    return value


class MealDBConfig:
    """Configuration for the TheMealDB gateway."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the TheMealDB API base URL (without the API key segment).

        Returns:
            Base URL with trailing slash removed.
        """
        return os.getenv("MEALDB_BASE_URL", DEFAULT_MEALDB_BASE_URL).rstrip("/")

    @staticmethod
    def get_api_key() -> str:
        """Get the TheMealDB API key (default: the public test key "1")."""
        return os.getenv("MEALDB_API_KEY") or DEFAULT_MEALDB_API_KEY

    @staticmethod
    def get_api_root() -> str:
        """Full API root including the key segment, e.g. .../json/v1/1"""
        return f"{MealDBConfig.get_base_url()}/{MealDBConfig.get_api_key()}"

    @staticmethod
    def get_timeout() -> float:
        return _get_float("MEALDB_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)


class FinderConfig:
    """Configuration for the list views (search and gallery)."""

    @staticmethod
    def get_debounce_seconds() -> float:
        """
        Get the search debounce quiet interval.

        Returns:
            Interval in seconds, read from SEARCH_DEBOUNCE_MS (default: 0.4)
        """
        return _get_float("SEARCH_DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS) / 1000.0

    @staticmethod
    def get_gallery_seed_query() -> str:
        """
        Get the name search used to load the gallery's base collection.

        TheMealDB has no "list all" endpoint, so the gallery loads everything
        matching a single broad letter.
        """
        return os.getenv("GALLERY_SEED_QUERY") or DEFAULT_GALLERY_SEED_QUERY
