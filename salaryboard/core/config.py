"""Environment-driven configuration for the salary insights engine."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _get_env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _get_int(name: str, default: int) -> int:
    raw_value = _get_env(name, str(default)).strip()
    try:
        return int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw_value!r}") from exc


_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _get_flag(name: str, default: str) -> bool:
    return _get_env(name, default).strip().lower() not in _FALSE_WORDS


@dataclass(slots=True)
class AppSettings:
    """Tunable parameters of the aggregation and trust scoring engine."""

    app_name: str = "salaryboard"
    approval_threshold: int = 10
    default_currency: str = "USD"
    role_group_limit: int = 8
    mock_entry_count: int = 60
    mock_seed: int = 42


@dataclass(slots=True)
class AuthSettings:
    """Settings used to verify bearer tokens issued by the auth service."""

    secret_key: str
    algorithm: str = "HS256"
    enabled: bool = True


@dataclass(slots=True)
class LogSettings:
    level: str = "INFO"
    log_dir: Path | None = None


@dataclass(slots=True)
class Settings:
    """Top-level application configuration container."""

    app: AppSettings
    auth: AuthSettings
    log: LogSettings

    @classmethod
    def from_env(cls) -> "Settings":
        """Load configuration values from environment variables."""

        defaults = AppSettings()
        app = AppSettings(
            app_name=_get_env("APP_NAME", defaults.app_name),
            approval_threshold=_get_int("APPROVAL_THRESHOLD", defaults.approval_threshold),
            default_currency=_get_env("DEFAULT_CURRENCY", defaults.default_currency).upper(),
            role_group_limit=_get_int("ROLE_GROUP_LIMIT", defaults.role_group_limit),
            mock_entry_count=_get_int("MOCK_ENTRY_COUNT", defaults.mock_entry_count),
            mock_seed=_get_int("MOCK_SEED", defaults.mock_seed),
        )
        if app.role_group_limit <= 0:
            raise ValueError("ROLE_GROUP_LIMIT must be a positive integer.")
        if app.mock_entry_count < 0:
            raise ValueError("MOCK_ENTRY_COUNT must not be negative.")

        auth = AuthSettings(
            secret_key=_get_env("JWT_SECRET_KEY", "change-me"),
            algorithm=_get_env("JWT_ALGORITHM", "HS256"),
            enabled=_get_flag("AUTH_ENABLED", "1"),
        )

        raw_log_dir = _get_env("LOG_DIR", "").strip()
        log = LogSettings(
            level=_get_env("LOG_LEVEL", "INFO"),
            log_dir=Path(raw_log_dir) if raw_log_dir else None,
        )
        return cls(app=app, auth=auth, log=log)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    settings = Settings.from_env()

    # Import locally to avoid circular dependencies during module import time.
    from .logger import get_logger

    logger = get_logger(__name__)
    logger.debug(
        "Settings initialised",
        extra={
            "app": {
                "approval_threshold": settings.app.approval_threshold,
                "default_currency": settings.app.default_currency,
                "role_group_limit": settings.app.role_group_limit,
            },
            "auth": {
                "algorithm": settings.auth.algorithm,
                "enabled": settings.auth.enabled,
            },
        },
    )
    return settings
