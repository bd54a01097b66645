"""Tests for environment-driven settings."""
from __future__ import annotations

from pathlib import Path

import pytest

from salaryboard.core.config import get_settings

_ENV_VARS = (
    "APPROVAL_THRESHOLD",
    "DEFAULT_CURRENCY",
    "ROLE_GROUP_LIMIT",
    "MOCK_ENTRY_COUNT",
    "MOCK_SEED",
    "JWT_SECRET_KEY",
    "JWT_ALGORITHM",
    "AUTH_ENABLED",
    "LOG_LEVEL",
    "LOG_DIR",
)


@pytest.fixture()
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_get_settings_uses_default_configuration(clean_env) -> None:
    settings = get_settings()

    assert settings.app.approval_threshold == 10
    assert settings.app.default_currency == "USD"
    assert settings.app.role_group_limit == 8
    assert settings.auth.algorithm == "HS256"
    assert settings.auth.enabled is True
    assert settings.log.log_dir is None


def test_get_settings_reads_environment_overrides(clean_env) -> None:
    clean_env.setenv("APPROVAL_THRESHOLD", "3")
    clean_env.setenv("DEFAULT_CURRENCY", "eur")
    clean_env.setenv("ROLE_GROUP_LIMIT", "5")
    clean_env.setenv("AUTH_ENABLED", "false")
    clean_env.setenv("LOG_DIR", "var/logs")

    settings = get_settings()

    assert settings.app.approval_threshold == 3
    assert settings.app.default_currency == "EUR"
    assert settings.app.role_group_limit == 5
    assert settings.auth.enabled is False
    assert settings.log.log_dir == Path("var/logs")


def test_invalid_integer_setting_is_rejected(clean_env) -> None:
    clean_env.setenv("APPROVAL_THRESHOLD", "ten")

    with pytest.raises(ValueError, match="APPROVAL_THRESHOLD"):
        get_settings()


def test_role_group_limit_must_be_positive(clean_env) -> None:
    clean_env.setenv("ROLE_GROUP_LIMIT", "0")

    with pytest.raises(ValueError):
        get_settings()


@pytest.mark.parametrize("raw", ["0", "false", "FALSE", "no", "Off", " off "])
def test_auth_flag_accepts_common_false_words(clean_env, raw) -> None:
    clean_env.setenv("AUTH_ENABLED", raw)

    assert get_settings().auth.enabled is False


@pytest.mark.parametrize("raw", ["1", "true", "yes", "on"])
def test_auth_flag_true_words_enable_auth(clean_env, raw) -> None:
    clean_env.setenv("AUTH_ENABLED", raw)

    assert get_settings().auth.enabled is True
