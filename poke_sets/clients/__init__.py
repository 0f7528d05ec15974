"""External data clients used by the competitive set service."""

from .pokeapi import PokeAPIClient, PokeAPIClientError

__all__ = [
    "PokeAPIClient",
    "PokeAPIClientError",
]
