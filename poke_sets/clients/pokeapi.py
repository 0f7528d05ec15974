"""Lightweight wrapper around PokéAPI for fetching creature, species and move data."""

from __future__ import annotations

import re
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import requests

from ..config import Settings
from ..models import MoveData, PokemonData, SpeciesData
from ..parsers.pokeapi import parse_move, parse_pokemon, parse_species

_SEPARATORS = re.compile(r"[\s\.]+")
_DISALLOWED = re.compile(r"[^a-z0-9\-]")


def slugify(name: str) -> str:
    """PokeAPI resource slug: ``"Mr. Mime"`` -> ``"mr-mime"``."""

    slug = _SEPARATORS.sub("-", name.strip().lower())
    return _DISALLOWED.sub("", slug)


class PokeAPIClientError(RuntimeError):
    """Raised when the PokeAPI request fails."""


class PokeAPIClient:
    """Small helper client with naive in-memory caching."""

    BASE_URL = "https://pokeapi.co/api/v2"

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        cache_ttl: int = 600,
        timeout: int = 10,
        user_agent: str = "poke-sets/0.1 (+https://github.com/)",
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.session = session or requests.Session()
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.cache_ttl = cache_ttl
        self.timeout = timeout
        self.user_agent = user_agent
        self._debug_logger = debug_logger
        self._responses: Dict[str, Tuple[float, Optional[Dict[str, Any]]]] = {}

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "PokeAPIClient":
        return cls(
            base_url=settings.base_url,
            cache_ttl=settings.cache_ttl,
            timeout=settings.timeout,
            **kwargs,
        )

    def _debug(self, message: str) -> None:
        if self._debug_logger:
            self._debug_logger(message)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_pokemon(self, name: str) -> Dict[str, Any]:
        return self._fetch(f"pokemon/{slugify(name)}")

    def get_pokemon_data(self, name: str) -> PokemonData:
        return parse_pokemon(self.get_pokemon(name))

    def get_pokemon_types(self, name: str) -> List[str]:
        return self.get_pokemon_data(name).type_names

    def get_species(self, name: str) -> SpeciesData:
        return parse_species(self._fetch(f"pokemon-species/{slugify(name)}"))

    def get_move(self, move_name: str) -> Optional[MoveData]:
        """Fetch a move; ``None`` when PokeAPI does not know it."""

        payload = self._fetch(f"move/{slugify(move_name)}", missing_ok=True)
        return parse_move(payload) if payload is not None else None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _fetch(self, endpoint: str, *, missing_ok: bool = False) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        now = time.time()
        cached = self._responses.get(url)
        if cached is not None and now - cached[0] < self.cache_ttl:
            return cached[1]

        self._debug(f"GET {url}")
        try:
            response = self.session.get(
                url,
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
            if missing_ok and response.status_code == 404:
                # 404s are cached as None.
                payload = None
            else:
                response.raise_for_status()
                payload = response.json()
        except requests.RequestException as exc:  # pragma: no cover - network
            raise PokeAPIClientError(str(exc)) from exc

        self._responses[url] = (now, payload)
        return payload
