"""Reusable move pickers for competitive set building.

Every picker ranks by descending score with a stable sort, so equal scores
keep the pool's order. Pickers never mutate the pool; callers record their
picks in a shared exclusion set with :func:`exclude_move` /
:func:`exclude_moves` before the next pick of the same pass.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Set

from ..models import MoveScore, OffensiveBias

Predicate = Callable[[MoveScore], bool]


def _ranked(
    moves: Iterable[MoveScore],
    predicate: Predicate,
    excluded: Optional[Set[str]] = None,
) -> List[MoveScore]:
    excluded = excluded if excluded is not None else set()
    candidates = [move for move in moves if move.name not in excluded and predicate(move)]
    return sorted(candidates, key=lambda move: move.score, reverse=True)


def _best(
    moves: Iterable[MoveScore],
    predicate: Predicate,
    excluded: Optional[Set[str]] = None,
) -> Optional[MoveScore]:
    ranked = _ranked(moves, predicate, excluded)
    return ranked[0] if ranked else None


def pick_by_tag(
    moves: Iterable[MoveScore],
    tag: str,
    *,
    excluded: Optional[Set[str]] = None,
    count: int = 1,
) -> List[MoveScore]:
    return _ranked(moves, lambda move: tag in move.tags, excluded)[:count]


def pick_strong_stab(
    moves: Iterable[MoveScore],
    offensive_bias: OffensiveBias,
    *,
    excluded: Optional[Set[str]] = None,
    count: int = 2,
    min_power: int = 70,
) -> List[MoveScore]:
    preferred_class = None if offensive_bias == "mixed" else offensive_bias

    def _matches(move: MoveScore) -> bool:
        if not move.is_damaging or not move.is_stab or move.power < min_power:
            return False
        return preferred_class is None or move.move.damage_class == preferred_class

    return _ranked(moves, _matches, excluded)[:count]


def pick_coverage_moves(
    moves: Iterable[MoveScore],
    *,
    excluded: Optional[Set[str]] = None,
    count: int = 2,
    min_power: int = 70,
) -> List[MoveScore]:
    def _matches(move: MoveScore) -> bool:
        if not move.is_damaging or move.is_stab:
            return False
        return "coverage" in move.tags or move.power >= min_power

    return _ranked(moves, _matches, excluded)[:count]


def pick_recovery_move(
    moves: Iterable[MoveScore], *, excluded: Optional[Set[str]] = None
) -> Optional[MoveScore]:
    return _best(moves, lambda move: "recovery" in move.tags, excluded)


def pick_status_move(
    moves: Iterable[MoveScore], *, excluded: Optional[Set[str]] = None
) -> Optional[MoveScore]:
    return _best(moves, lambda move: "status" in move.tags, excluded)


def pick_utility_move(
    moves: Iterable[MoveScore], *, excluded: Optional[Set[str]] = None
) -> Optional[MoveScore]:
    return _best(moves, lambda move: "utility" in move.tags, excluded)


def pick_setup_move(
    moves: Iterable[MoveScore], *, excluded: Optional[Set[str]] = None
) -> Optional[MoveScore]:
    return _best(moves, lambda move: "setup" in move.tags, excluded)


def pick_priority_move(
    moves: Iterable[MoveScore], *, excluded: Optional[Set[str]] = None
) -> Optional[MoveScore]:
    return _best(moves, lambda move: "priority" in move.tags, excluded)


def pick_best_damaging_move(
    moves: Iterable[MoveScore], *, excluded: Optional[Set[str]] = None
) -> Optional[MoveScore]:
    """Universal filler: the best damaging move regardless of tags."""

    return _best(moves, lambda move: move.is_damaging, excluded)


def exclude_move(excluded: Set[str], move: Optional[MoveScore]) -> None:
    if move is not None:
        excluded.add(move.name)


def exclude_moves(excluded: Set[str], moves: Iterable[MoveScore]) -> None:
    for move in moves:
        excluded.add(move.name)
