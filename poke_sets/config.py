"""Environment-driven settings for the client, service and servers."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load default .env first, then overlay .env.local so user-specific values win.
load_dotenv()
load_dotenv(".env.local", override=True)

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    cache_ttl: int = 600
    timeout: int = 10
    move_limit: int = 0  # 0 fetches the whole learnset
    min_score: int = 30
    level: int = 50

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            base_url=os.getenv("POKEAPI_BASE_URL") or DEFAULT_BASE_URL,
            cache_ttl=_env_int("POKEAPI_CACHE_TTL", cls.cache_ttl),
            timeout=_env_int("POKEAPI_TIMEOUT", cls.timeout),
            move_limit=_env_int("POKE_SETS_MOVE_LIMIT", cls.move_limit),
            min_score=_env_int("POKE_SETS_MIN_SCORE", cls.min_score),
            level=_env_int("POKE_SETS_LEVEL", cls.level),
        )
