"""Shared dataclasses for Pokemon payloads and competitive sets."""

from .moves import (
    CompetitiveSets,
    MoveRecommendation,
    MoveRoleTag,
    MoveScore,
    OffensiveBias,
    ScoringContext,
)
from .pokemon import (
    EffectEntry,
    LocalizedText,
    MoveData,
    MoveLearnDetail,
    MoveMeta,
    PokemonAbility,
    PokemonData,
    PokemonMoveEntry,
    PokemonStat,
    PokemonType,
    SpeciesData,
)

__all__ = [
    "CompetitiveSets",
    "EffectEntry",
    "LocalizedText",
    "MoveData",
    "MoveLearnDetail",
    "MoveMeta",
    "MoveRecommendation",
    "MoveRoleTag",
    "MoveScore",
    "OffensiveBias",
    "PokemonAbility",
    "PokemonData",
    "PokemonMoveEntry",
    "PokemonStat",
    "PokemonType",
    "ScoringContext",
    "SpeciesData",
]
