"""Typed records for the PokeAPI payloads consumed by the library."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(slots=True)
class EffectEntry:
    effect: str
    short_effect: str
    language: str


@dataclass(slots=True)
class MoveMeta:
    """Secondary move data; every field is optional in the API."""

    ailment: Optional[str] = None
    category: Optional[str] = None
    min_hits: Optional[int] = None
    max_hits: Optional[int] = None
    min_turns: Optional[int] = None
    max_turns: Optional[int] = None
    drain: Optional[int] = None
    healing: Optional[int] = None
    crit_rate: Optional[int] = None
    ailment_chance: Optional[int] = None
    flinch_chance: Optional[int] = None
    stat_chance: Optional[int] = None


@dataclass(slots=True)
class MoveData:
    """A single move as returned by ``move/{name}``."""

    name: str
    id: int = 0
    accuracy: Optional[int] = None
    power: Optional[int] = None
    pp: Optional[int] = None
    priority: int = 0
    damage_class: Optional[str] = None
    type: Optional[str] = None
    effect_entries: List[EffectEntry] = field(default_factory=list)
    meta: Optional[MoveMeta] = None
    target: Optional[str] = None


@dataclass(slots=True)
class PokemonStat:
    name: str
    base_stat: int
    effort: int = 0


@dataclass(slots=True)
class PokemonType:
    name: str
    slot: int = 1


@dataclass(slots=True)
class PokemonAbility:
    name: str
    is_hidden: bool = False
    slot: int = 1


@dataclass(slots=True)
class MoveLearnDetail:
    level_learned_at: int = 0
    method: Optional[str] = None
    version_group: Optional[str] = None


@dataclass(slots=True)
class PokemonMoveEntry:
    """A learnable move reference; the full move must be fetched separately."""

    name: str
    details: List[MoveLearnDetail] = field(default_factory=list)


@dataclass(slots=True)
class PokemonData:
    """A creature as returned by ``pokemon/{name}``."""

    id: int
    name: str
    height: int = 0
    weight: int = 0
    sprites: Dict[str, Optional[str]] = field(default_factory=dict)
    abilities: List[PokemonAbility] = field(default_factory=list)
    types: List[PokemonType] = field(default_factory=list)
    stats: List[PokemonStat] = field(default_factory=list)
    moves: List[PokemonMoveEntry] = field(default_factory=list)

    @property
    def type_names(self) -> List[str]:
        return [t.name for t in sorted(self.types, key=lambda t: t.slot)]


@dataclass(slots=True)
class LocalizedText:
    text: str
    language: str
    version: Optional[str] = None


@dataclass(slots=True)
class SpeciesData:
    """Locale-aware species record from ``pokemon-species/{name}``."""

    id: int
    name: Optional[str] = None
    color: Optional[str] = None
    flavor_text_entries: List[LocalizedText] = field(default_factory=list)
    genera: List[LocalizedText] = field(default_factory=list)
    names: List[LocalizedText] = field(default_factory=list)
    varieties: List[str] = field(default_factory=list)
