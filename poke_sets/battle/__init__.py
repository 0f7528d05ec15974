"""Battle state scaffolding and the engine adapter boundary."""

from .engine_adapter import (
    BattleAction,
    BattleEngineAdapter,
    BattleEvent,
    BattlePokemon,
    BattleSide,
    BattleState,
    BattleStats,
    StatBoosts,
    apply_boost,
    clamp_boost,
    create_battle_pokemon,
    create_initial_battle_state,
)

__all__ = [
    "BattleAction",
    "BattleEngineAdapter",
    "BattleEvent",
    "BattlePokemon",
    "BattleSide",
    "BattleState",
    "BattleStats",
    "StatBoosts",
    "apply_boost",
    "clamp_boost",
    "create_battle_pokemon",
    "create_initial_battle_state",
]
