"""Type matchups, role inference and damage estimation."""

from .damage_calc import DamageCalculator, DamageContext, DamageResult, KOChance
from .roles import (
    BattleProfile,
    RoleWeights,
    determine_battle_profile,
    get_primary_role,
    get_viable_roles,
    infer_role_weights,
)

__all__ = [
    "BattleProfile",
    "DamageCalculator",
    "DamageContext",
    "DamageResult",
    "KOChance",
    "RoleWeights",
    "determine_battle_profile",
    "get_primary_role",
    "get_viable_roles",
    "infer_role_weights",
]
