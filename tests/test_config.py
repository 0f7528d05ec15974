"""Tests for environment-driven settings."""

from __future__ import annotations

from poke_sets.config import DEFAULT_BASE_URL, Settings


def test_defaults_without_environment(monkeypatch) -> None:
    for name in (
        "POKEAPI_BASE_URL",
        "POKEAPI_CACHE_TTL",
        "POKEAPI_TIMEOUT",
        "POKE_SETS_MOVE_LIMIT",
        "POKE_SETS_MIN_SCORE",
        "POKE_SETS_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.move_limit == 0


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("POKEAPI_BASE_URL", "http://localhost:9000/api/v2")
    monkeypatch.setenv("POKE_SETS_MIN_SCORE", "45")
    monkeypatch.setenv("POKE_SETS_LEVEL", "100")
    monkeypatch.setenv("POKEAPI_TIMEOUT", "not-a-number")

    settings = Settings.from_env()
    assert settings.base_url == "http://localhost:9000/api/v2"
    assert settings.min_score == 45
    assert settings.level == 100
    assert settings.timeout == 10
