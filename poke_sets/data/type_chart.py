"""Static type chart utilities for Pokemon battle calculations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple


@dataclass(frozen=True, slots=True)
class TypeChartEntry:
    """How one attacking type interacts with each defending type."""

    strong_against: Tuple[str, ...] = ()
    weak_against: Tuple[str, ...] = ()
    immune_to: Tuple[str, ...] = ()


TYPE_CHART: Dict[str, TypeChartEntry] = {
    "normal": TypeChartEntry(
        strong_against=(),
        weak_against=("rock", "steel"),
        immune_to=("ghost",),
    ),
    "fire": TypeChartEntry(
        strong_against=("grass", "ice", "bug", "steel"),
        weak_against=("fire", "water", "rock", "dragon"),
    ),
    "water": TypeChartEntry(
        strong_against=("fire", "ground", "rock"),
        weak_against=("water", "grass", "dragon"),
    ),
    "electric": TypeChartEntry(
        strong_against=("water", "flying"),
        weak_against=("electric", "grass", "dragon"),
        immune_to=("ground",),
    ),
    "grass": TypeChartEntry(
        strong_against=("water", "ground", "rock"),
        weak_against=("fire", "grass", "poison", "flying", "bug", "dragon", "steel"),
    ),
    "ice": TypeChartEntry(
        strong_against=("grass", "ground", "flying", "dragon"),
        weak_against=("fire", "water", "ice", "steel"),
    ),
    "fighting": TypeChartEntry(
        strong_against=("normal", "ice", "rock", "dark", "steel"),
        weak_against=("poison", "flying", "psychic", "bug", "fairy"),
        immune_to=("ghost",),
    ),
    "poison": TypeChartEntry(
        strong_against=("grass", "fairy"),
        weak_against=("poison", "ground", "rock", "ghost"),
        immune_to=("steel",),
    ),
    "ground": TypeChartEntry(
        strong_against=("fire", "electric", "poison", "rock", "steel"),
        weak_against=("grass", "bug"),
        immune_to=("flying",),
    ),
    "flying": TypeChartEntry(
        strong_against=("grass", "fighting", "bug"),
        weak_against=("electric", "rock", "steel"),
    ),
    "psychic": TypeChartEntry(
        strong_against=("fighting", "poison"),
        weak_against=("psychic", "steel"),
        immune_to=("dark",),
    ),
    "bug": TypeChartEntry(
        strong_against=("grass", "psychic", "dark"),
        weak_against=("fire", "fighting", "poison", "flying", "ghost", "steel", "fairy"),
    ),
    "rock": TypeChartEntry(
        strong_against=("fire", "ice", "flying", "bug"),
        weak_against=("fighting", "ground", "steel"),
    ),
    "ghost": TypeChartEntry(
        strong_against=("psychic", "ghost"),
        weak_against=("dark",),
        immune_to=("normal",),
    ),
    "dragon": TypeChartEntry(
        strong_against=("dragon",),
        weak_against=("steel",),
        immune_to=("fairy",),
    ),
    "dark": TypeChartEntry(
        strong_against=("psychic", "ghost"),
        weak_against=("fighting", "dark", "fairy"),
    ),
    "steel": TypeChartEntry(
        strong_against=("ice", "rock", "fairy"),
        weak_against=("fire", "water", "electric", "steel"),
    ),
    "fairy": TypeChartEntry(
        strong_against=("fighting", "dragon", "dark"),
        weak_against=("fire", "poison", "steel"),
    ),
}

TYPE_ORDER: Tuple[str, ...] = tuple(TYPE_CHART)


def effectiveness_multiplier(attack_type: str, defender_types: Iterable[str]) -> float:
    """Compute damage multiplier for an attack hitting defender types.

    An immunity on any defending type zeroes the result regardless of the
    remaining types. Unknown attacking types are neutral.
    """

    chart = TYPE_CHART.get((attack_type or "").lower())
    if chart is None:
        return 1.0

    multiplier = 1.0
    for defender in defender_types:
        d = defender.lower()
        if d in chart.strong_against:
            multiplier *= 2.0
        elif d in chart.weak_against:
            multiplier *= 0.5
        elif d in chart.immune_to:
            multiplier = 0.0
            break
    return multiplier


def coverage_targets(attack_type: str) -> List[str]:
    """Defending types an attack of ``attack_type`` hits super-effectively."""

    chart = TYPE_CHART.get((attack_type or "").lower())
    if chart is None:
        return []
    return list(chart.strong_against)
