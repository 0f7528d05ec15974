"""Competitive 4-move set builders for each role archetype.

Each builder runs an ordered greedy pipeline over one fresh exclusion set and
returns exactly ``SET_SIZE`` recommendations, or an empty list when the
archetype is not feasible with the given pool.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Set

from ..analysis.roles import BattleProfile
from ..models import CompetitiveSets, MoveRecommendation, MoveScore
from .filters import (
    exclude_move,
    exclude_moves,
    pick_best_damaging_move,
    pick_by_tag,
    pick_coverage_moves,
    pick_recovery_move,
    pick_setup_move,
    pick_status_move,
    pick_strong_stab,
    pick_utility_move,
)
from .scorer import get_move_role_tag

SET_SIZE = 4
SUPPORT_TAG_PRIORITY = ("hazard", "removal", "taunt", "screen")
EFFECT_FALLBACK_LENGTH = 60


def build_reason(move: MoveScore, role_tag: str) -> str:
    parts: List[str] = []

    if move.is_damaging:
        accuracy = f"{move.move.accuracy}%" if move.move.accuracy else "variable"
        parts.append(f"BP {move.power} ({accuracy} acc)")

    if move.has_tag("setup"):
        parts.append("Immediate setup")
    if move.has_tag("priority"):
        parts.append("Priority move")
    if move.has_tag("stab"):
        parts.append("STAB bonus")
    if move.coverage_targets:
        parts.append(f"Covers: {', '.join(move.coverage_targets[:3])}")

    if move.has_tag("recovery"):
        parts.append("Reliable recovery")
    elif move.has_tag("drain"):
        parts.append("HP drain")

    if move.has_tag("hazard"):
        parts.append("Entry hazard")
    if move.has_tag("removal"):
        parts.append("Hazard removal")
    if move.has_tag("taunt"):
        parts.append("Blocks setup")
    if move.has_tag("status"):
        parts.append("Status condition")

    if not parts and move.english_effect:
        parts.append(move.english_effect[:EFFECT_FALLBACK_LENGTH])

    parts.append(f"Role: {role_tag}")
    return ". ".join(parts)


def to_recommendation(move: MoveScore, role_tag: Optional[str] = None) -> MoveRecommendation:
    tag = role_tag or get_move_role_tag(move)
    return MoveRecommendation(
        name=move.name,
        type=move.move.type or "normal",
        role_tag=tag,
        reason=build_reason(move, tag),
    )


def _complete(selection: List[MoveRecommendation]) -> List[MoveRecommendation]:
    return selection if len(selection) == SET_SIZE else []


def _fill_with_damaging(
    moves: Sequence[MoveScore],
    excluded: Set[str],
    selection: List[MoveRecommendation],
    slots: int,
) -> bool:
    """Append up to ``slots`` best damaging moves; False if the pool runs dry."""

    for _ in range(slots):
        filler = pick_best_damaging_move(moves, excluded=excluded)
        if filler is None:
            return False
        exclude_move(excluded, filler)
        selection.append(to_recommendation(filler))
    return True


def build_sweeper_set(moves: Sequence[MoveScore], profile: BattleProfile) -> List[MoveRecommendation]:
    selection: List[MoveRecommendation] = []
    excluded: Set[str] = set()

    setup = pick_setup_move(moves, excluded=excluded)
    if setup is not None:
        exclude_move(excluded, setup)
        selection.append(to_recommendation(setup, "setup"))

    stab_moves = pick_strong_stab(moves, profile.offensive_bias, excluded=excluded, count=2)
    if len(stab_moves) < 2:
        return []
    exclude_moves(excluded, stab_moves)
    selection.extend(to_recommendation(move, "stab") for move in stab_moves)

    remaining = SET_SIZE - len(selection)
    if remaining > 0:
        coverage = pick_coverage_moves(moves, excluded=excluded, count=remaining)
        exclude_moves(excluded, coverage)
        selection.extend(to_recommendation(move, "coverage") for move in coverage)

    _fill_with_damaging(moves, excluded, selection, SET_SIZE - len(selection))
    return _complete(selection)


def build_wallbreaker_set(moves: Sequence[MoveScore], profile: BattleProfile) -> List[MoveRecommendation]:
    selection: List[MoveRecommendation] = []
    excluded: Set[str] = set()

    stab_moves = pick_strong_stab(moves, profile.offensive_bias, excluded=excluded, count=2)
    if len(stab_moves) < 2:
        return []
    exclude_moves(excluded, stab_moves)
    selection.extend(to_recommendation(move, "stab") for move in stab_moves)

    coverage = pick_coverage_moves(moves, excluded=excluded, count=2)
    exclude_moves(excluded, coverage)
    selection.extend(to_recommendation(move, "coverage") for move in coverage)

    if not _fill_with_damaging(moves, excluded, selection, 2 - len(coverage)):
        return []
    return _complete(selection)


def build_tank_set(moves: Sequence[MoveScore]) -> List[MoveRecommendation]:
    selection: List[MoveRecommendation] = []
    excluded: Set[str] = set()

    stab_candidates = sorted(
        (move for move in moves if move.is_damaging and move.is_stab),
        key=lambda move: move.score,
        reverse=True,
    )
    if not stab_candidates:
        return []
    stab = stab_candidates[0]
    exclude_move(excluded, stab)
    selection.append(to_recommendation(stab, "stab"))

    recovery = pick_recovery_move(moves, excluded=excluded)
    if recovery is None:
        return []
    exclude_move(excluded, recovery)
    selection.append(to_recommendation(recovery, "recovery"))

    status = pick_status_move(moves, excluded=excluded)
    if status is None:
        return []
    exclude_move(excluded, status)
    selection.append(to_recommendation(status, "status"))

    utility = pick_utility_move(moves, excluded=excluded)
    if utility is not None:
        exclude_move(excluded, utility)
        selection.append(to_recommendation(utility, get_move_role_tag(utility)))
    elif not _fill_with_damaging(moves, excluded, selection, 1):
        return []

    return _complete(selection)


def build_support_set(moves: Sequence[MoveScore]) -> List[MoveRecommendation]:
    selection: List[MoveRecommendation] = []
    excluded: Set[str] = set()

    for tag in SUPPORT_TAG_PRIORITY:
        if len(selection) >= SET_SIZE:
            break
        picked = pick_by_tag(moves, tag, excluded=excluded, count=1)
        exclude_moves(excluded, picked)
        selection.extend(to_recommendation(move, tag) for move in picked)

    if len(selection) < SET_SIZE:
        utility_moves = sorted(
            (
                move
                for move in moves
                if move.name not in excluded and (move.has_tag("utility") or move.has_tag("status"))
            ),
            key=lambda move: move.score,
            reverse=True,
        )[: SET_SIZE - len(selection)]
        exclude_moves(excluded, utility_moves)
        selection.extend(to_recommendation(move) for move in utility_moves)

    if len(selection) < SET_SIZE:
        stab_moves = sorted(
            (move for move in moves if move.is_stab and move.name not in excluded),
            key=lambda move: move.score,
            reverse=True,
        )[: SET_SIZE - len(selection)]
        exclude_moves(excluded, stab_moves)
        selection.extend(to_recommendation(move, "stab") for move in stab_moves)

    return _complete(selection)


def build_all_sets(moves: Sequence[MoveScore], profile: BattleProfile) -> CompetitiveSets:
    """Run every archetype independently; the tank set needs a tank profile."""

    return CompetitiveSets(
        sweeper=build_sweeper_set(moves, profile),
        wallbreaker=build_wallbreaker_set(moves, profile),
        tank=build_tank_set(moves) if profile.is_tank else [],
        support=build_support_set(moves),
    )
