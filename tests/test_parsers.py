"""Tests for PokeAPI payload parsing and display helpers."""

from __future__ import annotations

from poke_sets.parsers import (
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
from poke_sets.parsers.pokeapi import format_stat_label

from .payloads import GARCHOMP, GARCHOMP_SPECIES, MOVES


def test_parse_pokemon_basic_fields() -> None:
    pokemon = parse_pokemon(GARCHOMP)

    assert pokemon.id == 445
    assert pokemon.name == "garchomp"
    assert pokemon.type_names == ["dragon", "ground"]
    assert pokemon.sprites["front_default"] == "artwork.png"
    assert pokemon.sprites["front_shiny"] == "shiny.png"
    assert [a.name for a in pokemon.abilities] == ["sand-veil", "rough-skin"]
    assert pokemon.abilities[1].is_hidden
    assert stats_to_mapping(pokemon.stats)["attack"] == 130
    assert pokemon.moves[0].name == "swords-dance"
    assert pokemon.moves[0].details[0].method == "machine"


def test_parse_pokemon_tolerates_missing_sections() -> None:
    pokemon = parse_pokemon({"id": 1, "name": "missingno"})
    assert pokemon.types == []
    assert pokemon.stats == []
    assert pokemon.sprites == {"front_default": None, "front_shiny": None}


def test_parse_move_with_meta() -> None:
    move = parse_move(MOVES["drain-punch"])

    assert move.name == "drain-punch"
    assert move.type == "fighting"
    assert move.damage_class == "physical"
    assert move.power == 75
    assert move.meta is not None
    assert move.meta.drain == 50
    assert move.meta.category == "damage+heal"
    assert move.effect_entries[0].language == "en"
    assert move.target == "selected-pokemon"


def test_parse_status_move_has_no_power() -> None:
    move = parse_move(MOVES["stealth-rock"])
    assert move.power is None
    assert move.accuracy is None
    assert move.meta is None
    assert move.priority == 0


def test_species_localization() -> None:
    species = parse_species(GARCHOMP_SPECIES)

    assert species.color == "blue"
    assert species.varieties == ["garchomp", "garchomp-mega"]
    assert extract_description(species) == "It flies at the speed of sound."
    assert extract_description(species, "es") == "Vuela a la velocidad del sonido."
    assert extract_genus(species, "ja") == "マッハポケモン"
    assert extract_genus(species, "es") == "Mach Pokémon"
    assert extract_description(None) == ""


def test_localized_name_falls_back_to_formatted_name() -> None:
    pokemon = parse_pokemon(GARCHOMP)
    species = parse_species(GARCHOMP_SPECIES)
    assert extract_localized_name(pokemon, species, "ja") == "ガブリアス"
    assert extract_localized_name(pokemon, None) == "Garchomp"


def test_display_formatting() -> None:
    assert format_pokemon_name("garchomp") == "Garchomp"
    assert format_pokemon_name("") == ""
    assert format_pokemon_id(25) == "#025"
    assert format_pokemon_id(1008) == "#1008"
    assert format_move_label("swords-dance") == "Swords Dance"
    assert format_stat_label("special-attack") == "SP. ATK"
    assert format_stat_label("accuracy") == "ACCURACY"
