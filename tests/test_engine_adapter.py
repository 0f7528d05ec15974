"""Tests for the battle state scaffolding."""

from __future__ import annotations

from poke_sets.battle import (
    BattleState,
    StatBoosts,
    apply_boost,
    clamp_boost,
    create_battle_pokemon,
    create_initial_battle_state,
)
from poke_sets.parsers import parse_pokemon

from .payloads import BLISSEY, GARCHOMP


def test_create_battle_pokemon_uses_level_stats() -> None:
    pokemon = create_battle_pokemon(parse_pokemon(GARCHOMP))

    assert pokemon.species == "garchomp"
    assert pokemon.id.startswith("garchomp-")
    assert pokemon.level == 50
    assert pokemon.types == ["dragon", "ground"]
    assert pokemon.stats.hp == 183
    assert pokemon.stats.attack == 150
    assert pokemon.current_hp == pokemon.stats.hp
    assert pokemon.ability == "sand-veil"
    assert pokemon.moves == ["swords-dance", "outrage", "earthquake", "stone-edge"]
    assert pokemon.boosts == StatBoosts()


def test_battle_pokemon_ids_are_unique() -> None:
    data = parse_pokemon(BLISSEY)
    assert create_battle_pokemon(data).id != create_battle_pokemon(data).id


def test_initial_state_sets_lead_pokemon() -> None:
    team1 = [create_battle_pokemon(parse_pokemon(GARCHOMP))]
    team2 = [create_battle_pokemon(parse_pokemon(BLISSEY))]
    state = create_initial_battle_state(team1, team2)

    assert state.turn == 0
    assert state.weather is None
    assert state.player1.active is team1[0]
    assert state.player2.active is team2[0]

    empty = create_initial_battle_state([], [])
    assert empty.player1.active is None
    assert isinstance(empty, BattleState)


def test_boost_stages_are_clamped() -> None:
    assert clamp_boost(9) == 6
    assert clamp_boost(-8) == -6
    assert apply_boost(100, 0) == 100
    assert apply_boost(100, 2) == 200
    assert apply_boost(100, -1) == 66
    assert apply_boost(100, 9) == 400
    assert apply_boost(100, -8) == 25
