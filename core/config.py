"""
Configuration settings

Values come from the environment (a local .env file is loaded first).
The ID codec itself is pure and never reads these; only the API client,
the CLI and the logger do.
"""
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


class Config:
    """Application configuration"""

    # Home Affairs verification service
    HOME_AFFAIRS_API_URL = os.getenv(
        "HOME_AFFAIRS_API_URL", "https://cash-dnr-api.onrender.com"
    ).rstrip("/")
    HOME_AFFAIRS_TIMEOUT = _env_int("HOME_AFFAIRS_TIMEOUT", 30)  # seconds
    HOME_AFFAIRS_DEMO_FALLBACK = _env_bool("HOME_AFFAIRS_DEMO_FALLBACK", False)

    # ID generation / validation defaults
    ID_DEFAULT_FILLER_DIGIT = _env_int("ID_DEFAULT_FILLER_DIGIT", 8)
    ID_STRICT_DATES = _env_bool("ID_STRICT_DATES", False)

    # Logging
    LOG_FILE = os.getenv("LOG_FILE", "id_codec.log")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# Create global config instance
config = Config()
