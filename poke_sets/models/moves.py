"""Dataclasses shared by the move scorer, selectors and set builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Tuple

from .pokemon import MoveData

OffensiveBias = Literal["physical", "special", "mixed"]

MoveRoleTag = Literal[
    "stab",
    "coverage",
    "priority",
    "setup",
    "recovery",
    "drain",
    "hazard",
    "removal",
    "taunt",
    "status",
    "screen",
    "utility",
]


@dataclass(frozen=True, slots=True)
class ScoringContext:
    """Owner-specific inputs to the move scorer."""

    pokemon_types: Tuple[str, ...] = ()
    offensive_bias: OffensiveBias = "mixed"
    weakness_coverage: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class MoveScore:
    """A move scored for one owner; only viable moves (score > 0) exist."""

    move: MoveData
    score: float
    tags: Tuple[str, ...] = ()
    is_damaging: bool = False
    is_stab: bool = False
    power: int = 0
    coverage_targets: Tuple[str, ...] = ()
    english_effect: str = ""

    @property
    def name(self) -> str:
        return self.move.name

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags


@dataclass(slots=True)
class MoveRecommendation:
    name: str
    type: str
    role_tag: str
    reason: str


@dataclass(slots=True)
class CompetitiveSets:
    """One 4-move set per archetype; an empty list means no viable set."""

    sweeper: List[MoveRecommendation] = field(default_factory=list)
    wallbreaker: List[MoveRecommendation] = field(default_factory=list)
    tank: List[MoveRecommendation] = field(default_factory=list)
    support: List[MoveRecommendation] = field(default_factory=list)
