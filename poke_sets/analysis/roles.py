"""Battle profile and role inference from base stats."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from typing import List, Mapping, Sequence, Tuple, Union

from ..models import OffensiveBias, PokemonStat

StatsInput = Union[Mapping[str, int], Sequence[PokemonStat]]

ROLE_ORDER: Tuple[str, ...] = ("sweeper", "wallbreaker", "tank", "support")

BULK_THRESHOLD = 335
SWEEPER_SPEED_THRESHOLD = 100
WALLBREAKER_ATTACK_THRESHOLD = 120
SUPPORT_BULK_THRESHOLD = 300
BIAS_MARGIN = 15


@dataclass(frozen=True, slots=True)
class BattleProfile:
    offensive_bias: OffensiveBias
    speed: int
    is_sweeper: bool
    is_tank: bool
    is_wallbreaker: bool
    is_support: bool


@dataclass(frozen=True, slots=True)
class RoleWeights:
    """Integer percentages; they sum to roughly 100 unless all are zero."""

    sweeper: int = 0
    wallbreaker: int = 0
    tank: int = 0
    support: int = 0

    def items(self) -> List[Tuple[str, int]]:
        return list(zip(ROLE_ORDER, astuple(self)))


def stat_value(stats: StatsInput, name: str) -> int:
    """Base value of ``name``; 0 when the stat is missing."""

    if isinstance(stats, Mapping):
        return int(stats.get(name) or 0)
    for stat in stats:
        if stat.name == name:
            return stat.base_stat
    return 0


def calculate_bulk(stats: StatsInput) -> int:
    return stat_value(stats, "hp") + stat_value(stats, "defense") + stat_value(stats, "special-defense")


def determine_offensive_bias(attack: int, special_attack: int) -> OffensiveBias:
    difference = attack - special_attack
    if difference > BIAS_MARGIN:
        return "physical"
    if difference < -BIAS_MARGIN:
        return "special"
    return "mixed"


def determine_battle_profile(stats: StatsInput) -> BattleProfile:
    attack = stat_value(stats, "attack")
    special_attack = stat_value(stats, "special-attack")
    speed = stat_value(stats, "speed")
    bulk = calculate_bulk(stats)
    max_offense = max(attack, special_attack)

    return BattleProfile(
        offensive_bias=determine_offensive_bias(attack, special_attack),
        speed=speed,
        is_sweeper=speed >= SWEEPER_SPEED_THRESHOLD,
        is_tank=bulk >= BULK_THRESHOLD,
        is_wallbreaker=max_offense >= WALLBREAKER_ATTACK_THRESHOLD,
        is_support=bulk >= SUPPORT_BULK_THRESHOLD and speed < SWEEPER_SPEED_THRESHOLD,
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def infer_role_weights(stats: StatsInput) -> RoleWeights:
    """Finer-grained role signal.

    Breakpoints differ from the boolean thresholds used by
    :func:`determine_battle_profile`; the two must not be unified.
    """

    attack = stat_value(stats, "attack")
    special_attack = stat_value(stats, "special-attack")
    speed = stat_value(stats, "speed")
    bulk = calculate_bulk(stats)
    max_offense = max(attack, special_attack)

    sweeper = 0.0
    wallbreaker = 0.0
    tank = 0.0
    support = 0.0

    if speed >= 90:
        sweeper += (speed - 90) * 1.5
        sweeper += max(0, max_offense - 80) * 0.8

    if max_offense >= 100:
        wallbreaker += (max_offense - 100) * 2
        if speed < 80:
            wallbreaker += 20

    if bulk >= 280:
        tank += (bulk - 280) * 0.8
        if max_offense >= 70:
            tank += 15

    if bulk >= 260 and max_offense < 110:
        support += (bulk - 260) * 0.6
        if speed < 70:
            support += 10

    total = (sweeper + wallbreaker + tank + support) or 1
    return RoleWeights(
        sweeper=_round_half_up(sweeper / total * 100),
        wallbreaker=_round_half_up(wallbreaker / total * 100),
        tank=_round_half_up(tank / total * 100),
        support=_round_half_up(support / total * 100),
    )


def _ranked_roles(weights: RoleWeights) -> List[Tuple[str, int]]:
    # sorted() is stable, so equal weights keep ROLE_ORDER.
    return sorted(weights.items(), key=lambda item: item[1], reverse=True)


def get_primary_role(stats: StatsInput) -> str:
    return _ranked_roles(infer_role_weights(stats))[0][0]


def get_viable_roles(stats: StatsInput, threshold: int = 20) -> List[str]:
    return [role for role, weight in _ranked_roles(infer_role_weights(stats)) if weight >= threshold]
