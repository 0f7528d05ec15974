"""Per-move bonus tables used by the move scorer."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple


class UtilityEntry(NamedTuple):
    score: int
    role_tag: str


SETUP_BONUS: Mapping[str, int] = MappingProxyType(
    {
        "swords-dance": 60,
        "dragon-dance": 60,
        "nasty-plot": 60,
        "calm-mind": 45,
        "bulk-up": 45,
        "quiver-dance": 65,
        "shell-smash": 70,
        "shift-gear": 55,
        "coil": 50,
        "iron-defense": 35,
        "amnesia": 35,
        "agility": 40,
        "rock-polish": 40,
        "autotomize": 40,
        "growth": 35,
        "work-up": 30,
        "hone-claws": 35,
    }
)

UTILITY_MOVES: Mapping[str, UtilityEntry] = MappingProxyType(
    {
        # Entry hazards
        "stealth-rock": UtilityEntry(70, "hazard"),
        "spikes": UtilityEntry(50, "hazard"),
        "toxic-spikes": UtilityEntry(45, "hazard"),
        "sticky-web": UtilityEntry(55, "hazard"),
        # Hazard control
        "defog": UtilityEntry(40, "removal"),
        "rapid-spin": UtilityEntry(40, "removal"),
        "court-change": UtilityEntry(35, "removal"),
        "taunt": UtilityEntry(30, "taunt"),
        "encore": UtilityEntry(35, "taunt"),
        # Status spreaders
        "will-o-wisp": UtilityEntry(30, "status"),
        "toxic": UtilityEntry(30, "status"),
        "thunder-wave": UtilityEntry(25, "status"),
        "glare": UtilityEntry(28, "status"),
        "spore": UtilityEntry(50, "status"),
        "sleep-powder": UtilityEntry(35, "status"),
        "light-screen": UtilityEntry(35, "screen"),
        "reflect": UtilityEntry(35, "screen"),
        "aurora-veil": UtilityEntry(50, "screen"),
        # Pivots and item control
        "u-turn": UtilityEntry(25, "utility"),
        "volt-switch": UtilityEntry(25, "utility"),
        "flip-turn": UtilityEntry(25, "utility"),
        "parting-shot": UtilityEntry(30, "utility"),
        "teleport": UtilityEntry(20, "utility"),
        "trick": UtilityEntry(25, "utility"),
        "switcheroo": UtilityEntry(25, "utility"),
        "knock-off": UtilityEntry(35, "utility"),
    }
)

# Draining attacks are listed on purpose; their recovery bonus stacks with
# the drain bonus.
RELIABLE_RECOVERY_MOVES = frozenset(
    {
        "recover",
        "roost",
        "soft-boiled",
        "slack-off",
        "milk-drink",
        "wish",
        "synthesis",
        "moonlight",
        "morning-sun",
        "shore-up",
        "strength-sap",
        "heal-order",
        "oblivion-wing",
        "purify",
        "pollen-puff",
        "rest",
        "giga-drain",
        "drain-punch",
        "leech-life",
        "horn-leech",
        "draining-kiss",
        "parabolic-charge",
    }
)

LEECH_SEED = "leech-seed"
LEECH_SEED_BONUS = 35
