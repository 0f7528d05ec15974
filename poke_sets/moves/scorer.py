"""Move viability scoring for a given owner and coverage context."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..data.move_tables import (
    LEECH_SEED,
    LEECH_SEED_BONUS,
    RELIABLE_RECOVERY_MOVES,
    SETUP_BONUS,
    UTILITY_MOVES,
)
from ..data.type_chart import coverage_targets as type_coverage_targets
from ..models import MoveData, MoveScore, ScoringContext

STRONG_STAB_THRESHOLD = 70
DEFAULT_ACCURACY_FACTOR = 0.85
STAB_BONUS = 25
BIAS_BONUS = 10
PRIORITY_BONUS = 25
DRAIN_BONUS = 15
RECOIL_PENALTY = 10
RECOVERY_BONUS = 50

ROLE_TAG_PRECEDENCE = (
    "setup",
    "recovery",
    "hazard",
    "removal",
    "taunt",
    "status",
    "screen",
    "coverage",
    "priority",
    "stab",
)


def extract_english_effect(move: MoveData) -> str:
    for entry in move.effect_entries:
        if entry.language == "en":
            return entry.short_effect or ""
    return ""


def score_move(move: MoveData, context: ScoringContext) -> Optional[MoveScore]:
    """Score ``move`` for the owner described by ``context``.

    Returns ``None`` when the move is not viable (score <= 0). Tags are
    attached in a fixed order since :func:`get_move_role_tag` and the set
    builders read them.
    """

    type_name = move.type or "normal"
    power = move.power or 0
    is_stab = type_name in context.pokemon_types
    is_damaging = move.damage_class != "status" and power > 0
    meta = move.meta
    total = 0.0
    tags: List[str] = []

    if is_damaging:
        accuracy_factor = move.accuracy / 100 if move.accuracy else DEFAULT_ACCURACY_FACTOR
        total += power * accuracy_factor

        if is_stab:
            total += STAB_BONUS
            tags.append("stab")

        if context.offensive_bias != "mixed" and move.damage_class == context.offensive_bias:
            total += BIAS_BONUS

        if move.priority > 0:
            total += PRIORITY_BONUS
            tags.append("priority")

        drain = meta.drain if meta else None
        if drain:
            if drain > 0:
                total += DRAIN_BONUS
                tags.append("drain")
            else:
                total -= RECOIL_PENALTY

    setup_bonus = SETUP_BONUS.get(move.name)
    if setup_bonus:
        total += setup_bonus
        tags.append("setup")

    utility = UTILITY_MOVES.get(move.name)
    if utility:
        total += utility.score
        tags.append(utility.role_tag)
        if utility.role_tag != "utility":
            tags.append("utility")

    healing = meta.healing if meta else None
    if move.name in RELIABLE_RECOVERY_MOVES or (healing and healing > 0):
        total += RECOVERY_BONUS
        if "recovery" not in tags:
            tags.append("recovery")

    if move.name == LEECH_SEED:
        total += LEECH_SEED_BONUS
        for tag in ("recovery", "status"):
            if tag not in tags:
                tags.append(tag)

    targets = tuple(
        target for target in type_coverage_targets(type_name) if target in context.weakness_coverage
    )
    if targets and is_damaging and not is_stab:
        total += 15 + 5 * len(targets)
        tags.append("coverage")

    if total <= 0:
        return None

    return MoveScore(
        move=move,
        score=total,
        tags=tuple(tags),
        is_damaging=is_damaging,
        is_stab=is_stab,
        power=power,
        coverage_targets=targets,
        english_effect=extract_english_effect(move),
    )


def score_moves(moves: Iterable[MoveData], context: ScoringContext) -> List[MoveScore]:
    """Score every move, keeping the viable ones in input order."""

    scored = (score_move(move, context) for move in moves)
    return [entry for entry in scored if entry is not None]


def filter_viable_moves(scored: Iterable[Optional[MoveScore]], min_score: float = 30) -> List[MoveScore]:
    viable = [entry for entry in scored if entry is not None and entry.score >= min_score]
    return sorted(viable, key=lambda entry: entry.score, reverse=True)


def get_move_role_tag(move: MoveScore) -> str:
    """Single representative tag for display."""

    for tag in ROLE_TAG_PRECEDENCE:
        if tag in move.tags:
            return tag
    return "utility"


def is_strong_stab(move: MoveScore) -> bool:
    return move.is_damaging and move.is_stab and move.power >= STRONG_STAB_THRESHOLD
