import os
from pathlib import Path

from dotenv import load_dotenv

from insight_sentiment.config.logging_config import get_logger

logger = get_logger(__name__)


def load_env_variables(env_path: Path | str) -> None:
    logger.info("Looking for .env at: %s", env_path)
    if Path(env_path).exists():
        load_dotenv(env_path)
        logger.info("Loaded environment variables from .env")
    else:
        logger.warning(".env file not found at specified path. Trying find_dotenv...")
        found = load_dotenv()
        if not found:
            logger.warning("No .env file found, relying on process environment")


def get_env_variable(key: str, default: str | None = None) -> str:
    """Get environment variable with optional default value."""
    value = os.getenv(key, default)
    if value is None:
        raise ValueError(f"{key} not found in environment variables.")
    return value


def get_optional_env_variable(key: str) -> str | None:
    """Get a stripped environment variable, or None when unset or blank."""
    value = os.getenv(key)
    if value is None or not value.strip():
        return None
    return value.strip()


def get_env_int(key: str, default: int) -> int:
    """Get environment variable as integer with default value."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got: {value}")


def get_env_float(key: str, default: float) -> float:
    """Get environment variable as float with default value."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{key} must be a number, got: {value}")
