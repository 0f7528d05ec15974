"""Damage calculation module using the standard Pokemon damage formula."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..data.type_chart import effectiveness_multiplier
from ..models import MoveData
from .roles import StatsInput, stat_value

DEFAULT_IV = 31
DEFAULT_EV = 0
MIN_ROLL = 0.85

# Weather -> move type -> multiplier
WEATHER_MODIFIERS = {
    "sun": {"fire": 1.5, "water": 0.5},
    "rain": {"water": 1.5, "fire": 0.5},
}


@dataclass
class DamageContext:
    """Inputs for a single attack; ``None`` overrides are derived from the data."""

    level: int
    attacker_stats: StatsInput
    defender_stats: StatsInput
    move: MoveData
    attacker_types: List[str] = field(default_factory=list)
    defender_types: List[str] = field(default_factory=list)
    weather: Optional[str] = None  # "sun", "rain", "sand", "hail", "snow"
    terrain: Optional[str] = None  # accepted but not applied
    is_critical: bool = False
    is_stab: Optional[bool] = None
    effectiveness: Optional[float] = None
    other_modifiers: Optional[float] = None


@dataclass
class DamageResult:
    """Result of a damage calculation."""

    min: int
    max: int
    average: int
    is_critical: bool
    effectiveness: float
    is_stab: bool


@dataclass
class KOChance:
    """Rough percent chances to KO in one, two or three hits."""

    ohko: int
    twohko: int
    threehko: int


def calculate_stat_at_level(
    base: int, level: int, iv: int = DEFAULT_IV, ev: int = DEFAULT_EV, nature: float = 1
) -> float:
    return math.floor((2 * base + iv + ev // 4) * level / 100 + 5) * nature


def calculate_hp_at_level(base: int, level: int, iv: int = DEFAULT_IV, ev: int = DEFAULT_EV) -> int:
    return math.floor((2 * base + iv + ev // 4) * level / 100 + level + 10)


class DamageCalculator:
    """Calculates damage ranges and KO chances for one attack."""

    def calculate_base_damage(self, context: DamageContext) -> int:
        is_physical = context.move.damage_class == "physical"
        attack_stat = "attack" if is_physical else "special-attack"
        defense_stat = "defense" if is_physical else "special-defense"

        attack = calculate_stat_at_level(stat_value(context.attacker_stats, attack_stat), context.level)
        defense = calculate_stat_at_level(stat_value(context.defender_stats, defense_stat), context.level)
        power = context.move.power or 0

        if power == 0 or defense == 0:
            return 0

        # ((2 * Level / 5 + 2) * Power * A / D) / 50 + 2
        level_factor = math.floor(2 * context.level / 5 + 2)
        return math.floor(level_factor * power * attack / defense / 50 + 2)

    def is_stab(self, context: DamageContext) -> bool:
        if context.is_stab is not None:
            return context.is_stab
        move_type = (context.move.type or "").lower()
        return any(t.lower() == move_type for t in context.attacker_types)

    def effectiveness(self, context: DamageContext) -> float:
        if context.effectiveness is not None:
            return context.effectiveness
        return effectiveness_multiplier(context.move.type or "", context.defender_types)

    def apply_modifiers(self, base_damage: int, context: DamageContext) -> Tuple[int, int]:
        """Apply modifiers in order, truncating after each; returns (min, max)."""

        damage = base_damage

        if self.is_stab(context):
            damage = math.floor(damage * 1.5)

        damage = math.floor(damage * self.effectiveness(context))

        if context.weather:
            move_type = (context.move.type or "").lower()
            weather = context.weather.strip().lower()
            weather_multiplier = WEATHER_MODIFIERS.get(weather, {}).get(move_type, 1.0)
            damage = math.floor(damage * weather_multiplier)

        if context.is_critical:
            damage = math.floor(damage * 1.5)

        if context.other_modifiers:
            damage = math.floor(damage * context.other_modifiers)

        # Random roll spans 85-100%; only the lower bound is discounted.
        return math.floor(damage * MIN_ROLL), damage

    def calculate_damage(self, context: DamageContext) -> DamageResult:
        base_damage = self.calculate_base_damage(context)
        min_damage, max_damage = self.apply_modifiers(base_damage, context)
        return DamageResult(
            min=min_damage,
            max=max_damage,
            average=(min_damage + max_damage) // 2,
            is_critical=context.is_critical,
            effectiveness=self.effectiveness(context),
            is_stab=self.is_stab(context),
        )

    def calculate_ko_chance(self, damage: DamageResult, defender_hp: int) -> KOChance:
        if defender_hp <= 0:
            return KOChance(ohko=100, twohko=100, threehko=100)

        def _chance(hits: int, possible: int) -> int:
            if damage.min * hits >= defender_hp:
                return 100
            if damage.max * hits >= defender_hp:
                return possible
            return 0

        return KOChance(ohko=_chance(1, 50), twohko=_chance(2, 75), threehko=_chance(3, 85))
