# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env
#   file and hand a typed config object to the CLI.
#
# CLASSES:
# --------
# - AppConfig (dataclass)
#     data_file: str            (default "./data/employees.csv")
#     atomic_save: bool         (default True)
#     prompt_max_attempts: int  (default 10, 0 = unbounded)
#     log_level: str            (default "WARNING")
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# USAGE:
# ------
#   from roster.config import get_config
#   config = get_config()
#   print(config.data_file)
#
# ==============================================

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class AppConfig:
    """Main application configuration."""
    data_file: str = "./data/employees.csv"
    atomic_save: bool = True
    prompt_max_attempts: int = 10
    log_level: str = "WARNING"


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Singleton instance
_config_instance: Optional[AppConfig] = None


def _bool(value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration

    Raises:
        ValueError: if ROSTER_PROMPT_ATTEMPTS is not a non-negative integer,
            or ROSTER_LOG_LEVEL is not one of LOG_LEVELS
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    raw_attempts = os.getenv("ROSTER_PROMPT_ATTEMPTS", "10")
    try:
        prompt_max_attempts = int(raw_attempts)
    except ValueError:
        raise ValueError(
            f"ROSTER_PROMPT_ATTEMPTS must be a whole number, got {raw_attempts!r}"
        ) from None
    if prompt_max_attempts < 0:
        raise ValueError("ROSTER_PROMPT_ATTEMPTS must be 0 or greater")

    log_level = os.getenv("ROSTER_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"ROSTER_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
        )

    _config_instance = AppConfig(
        data_file=os.getenv("ROSTER_DATA_FILE", "./data/employees.csv"),
        atomic_save=_bool(os.getenv("ROSTER_ATOMIC_SAVE"), True),
        prompt_max_attempts=prompt_max_attempts,
        log_level=log_level,
    )

    return _config_instance
