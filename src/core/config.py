from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Any, Callable, Optional

from dotenv import find_dotenv, load_dotenv

# Load environment variables from .env file
load_dotenv(find_dotenv())


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"expected one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return level


def env(name: str, default: Any = None, cast: Optional[Callable[[str], Any]] = None) -> Any:
    """Read an env var, casting it when set. Bad values raise ValueError naming the var."""
    val = os.getenv(name)
    if val is None or val == "":
        return default
    if cast is None:
        return val
    try:
        return cast(val)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid value for {name}: {exc}") from exc


@dataclass(frozen=True)
class Settings:
    webhook_url: str = ""
    use_mock_data: bool = False
    timeout_seconds: float = 120.0
    mock_delay_seconds: float = 0.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            webhook_url=env("ANALYSIS_WEBHOOK_URL", default=""),
            use_mock_data=env("USE_MOCK_DATA", default=False, cast=_as_bool),
            timeout_seconds=env("ANALYSIS_TIMEOUT_SECONDS", default=120.0, cast=float),
            mock_delay_seconds=env("MOCK_DELAY_SECONDS", default=0.0, cast=float),
            log_level=env("LOG_LEVEL", default="INFO", cast=_log_level),
        )

    @property
    def serves_sample(self) -> bool:
        return self.use_mock_data or not self.webhook_url


def get_settings() -> Settings:
    return Settings.from_env()
