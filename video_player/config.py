"""Configuration from environment variables (an optional .env in the working directory is loaded first)."""

import logging
import os

from dotenv import find_dotenv, load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


def default_log_dir() -> str:
    return os.path.join(os.environ.get("TEMP", os.path.expanduser("~")), "VideoPlayer")


def _parse_seed(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def load_config(env_file: str | None = None) -> dict:
    """Load settings: log_level, log_dir, random_seed. Bad values fall back to defaults."""
    load_dotenv(env_file or find_dotenv(usecwd=True))
    level = os.getenv("VIDEO_PLAYER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    return {
        "log_level": level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL,
        "log_dir": os.getenv("VIDEO_PLAYER_LOG_DIR") or default_log_dir(),
        "random_seed": _parse_seed(os.getenv("VIDEO_PLAYER_RANDOM_SEED")),
    }


def validate_config(env: dict | None = None) -> list[str]:
    """Errors for environment values that load_config would replace with defaults."""
    env = os.environ if env is None else env
    errors = []
    level = env.get("VIDEO_PLAYER_LOG_LEVEL")
    if level is not None and level.upper() not in LOG_LEVELS:
        errors.append(f"VIDEO_PLAYER_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
    seed = env.get("VIDEO_PLAYER_RANDOM_SEED")
    if seed and seed.strip() and _parse_seed(seed) is None:
        errors.append("VIDEO_PLAYER_RANDOM_SEED must be an integer")
    return errors


def log_level(config: dict) -> int:
    return getattr(logging, config["log_level"])
