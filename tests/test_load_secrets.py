from pathlib import Path

import pytest
from pydantic import ValidationError

from leaderboard.load_secrets import load_settings

ENV_VARS = [
    "LEADERBOARD_BACKEND",
    "REDIS_SSL",
    "REDIS_HOST",
    "REDIS_PORT",
    "REDIS_USERNAME",
    "REDIS_PASSWORD",
    "REDIS_TIMEOUT",
    "PLAYER_PROFILE_PATH",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()

    assert settings.backend == "redis"
    assert settings.redis_host is None
    assert settings.redis_port == 6379
    assert settings.redis_ssl is False


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("LEADERBOARD_BACKEND", "Memory")
    monkeypatch.setenv("REDIS_SSL", "true")
    monkeypatch.setenv("REDIS_HOST", "cache")
    monkeypatch.setenv("REDIS_PORT", "6380")
    monkeypatch.setenv("REDIS_PASSWORD", "secret123")
    monkeypatch.setenv("REDIS_TIMEOUT", "0.5")
    monkeypatch.setenv("PLAYER_PROFILE_PATH", str(tmp_path / "me.json"))

    settings = load_settings()

    assert settings.backend == "memory"
    assert settings.redis_ssl is True
    assert settings.redis_port == 6380
    assert settings.redis_timeout == 0.5
    assert settings.redis_password.get_secret_value() == "secret123"
    assert "secret123" not in repr(settings)
    assert settings.profile_path == Path(tmp_path / "me.json")


def test_bad_port_fails_loudly(monkeypatch):
    monkeypatch.setenv("REDIS_PORT", "not-a-port")

    with pytest.raises(ValidationError):
        load_settings()


def test_unknown_backend_fails_loudly(monkeypatch):
    monkeypatch.setenv("LEADERBOARD_BACKEND", "postgres")

    with pytest.raises(ValidationError):
        load_settings()
