"""Configuration management for SmartPlates."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Load .env file
load_dotenv(PROJECT_ROOT / ".env")

# DATA_DIR can be overridden for container deployments
DATA_DIR = Path(os.getenv("DATA_DIR", str(PROJECT_ROOT / "data")))
LOCAL_DIR = DATA_DIR / "local"
DB_PATH = LOCAL_DIR / "smartplates.db"


class SpoonacularConfig:
    """Spoonacular recipe API configuration."""

    API_KEY: str = os.getenv("SPOONACULAR_API_KEY", "")
    BASE_URL: str = os.getenv("SPOONACULAR_BASE_URL", "https://api.spoonacular.com")
    TIMEOUT: int = int(os.getenv("SPOONACULAR_TIMEOUT", "15"))
    # Results are cached for one hour, bounded to CACHE_MAX_ENTRIES queries
    CACHE_TTL_SECONDS: int = int(os.getenv("SPOONACULAR_CACHE_TTL", "3600"))
    CACHE_MAX_ENTRIES: int = int(os.getenv("SPOONACULAR_CACHE_MAX_ENTRIES", "256"))
    RATE_LIMIT_REQUESTS: int = int(os.getenv("SPOONACULAR_RATE_LIMIT", "60"))
    RATE_LIMIT_WINDOW_SECONDS: int = int(os.getenv("SPOONACULAR_RATE_WINDOW", "60"))

    @classmethod
    def is_configured(cls) -> bool:
        """Check if a Spoonacular API key is configured."""
        return bool(cls.API_KEY)

