"""Parsers turning raw PokeAPI payloads into typed records."""

from .pokeapi import (
    extract_description,
    extract_genus,
    extract_localized_name,
    format_move_label,
    format_pokemon_id,
    format_pokemon_name,
    parse_move,
    parse_pokemon,
    parse_species,
    stats_to_mapping,
)

__all__ = [
    "extract_description",
    "extract_genus",
    "extract_localized_name",
    "format_move_label",
    "format_pokemon_id",
    "format_pokemon_name",
    "parse_move",
    "parse_pokemon",
    "parse_species",
    "stats_to_mapping",
]
