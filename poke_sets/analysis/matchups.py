"""Defensive matchups and offensive coverage for a creature's typing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..data.type_chart import TYPE_CHART, TYPE_ORDER, effectiveness_multiplier


@dataclass(slots=True)
class TypeMatchup:
    type: str
    multiplier: float


@dataclass(slots=True)
class TypeMatchups:
    weaknesses: List[TypeMatchup] = field(default_factory=list)
    resistances: List[TypeMatchup] = field(default_factory=list)
    immunities: List[TypeMatchup] = field(default_factory=list)


@dataclass(slots=True)
class OffensiveCoverageEntry:
    type: str
    sources: List[str] = field(default_factory=list)
    multiplier: float = 2.0


def type_multipliers(pokemon_types: Iterable[str]) -> Dict[str, float]:
    """Multiplier of every attacking type against the given defending types."""

    defenders = [t.lower() for t in pokemon_types]
    return {attack: effectiveness_multiplier(attack, defenders) for attack in TYPE_ORDER}


def get_type_weaknesses(pokemon_types: Iterable[str]) -> List[str]:
    return [attack for attack, value in type_multipliers(pokemon_types).items() if value > 1]


def get_type_matchups(pokemon_types: Iterable[str]) -> TypeMatchups:
    entries = [
        TypeMatchup(type=attack, multiplier=value)
        for attack, value in type_multipliers(pokemon_types).items()
    ]
    return TypeMatchups(
        weaknesses=sorted(
            (e for e in entries if e.multiplier > 1),
            key=lambda e: e.multiplier,
            reverse=True,
        ),
        resistances=sorted(
            (e for e in entries if 0 < e.multiplier < 1),
            key=lambda e: e.multiplier,
        ),
        immunities=[e for e in entries if e.multiplier == 0],
    )


def get_offensive_coverage(pokemon_types: Iterable[str]) -> List[OffensiveCoverageEntry]:
    """Defending types hit super-effectively by at least one of ``pokemon_types``."""

    coverage: Dict[str, List[str]] = {}
    for attack in (t.lower() for t in pokemon_types):
        chart = TYPE_CHART.get(attack)
        if chart is None:
            continue
        for target in chart.strong_against:
            sources = coverage.setdefault(target, [])
            if attack not in sources:
                sources.append(attack)

    entries = [OffensiveCoverageEntry(type=target, sources=sources) for target, sources in coverage.items()]
    entries.sort(key=lambda e: (-len(e.sources), e.type))
    return entries
