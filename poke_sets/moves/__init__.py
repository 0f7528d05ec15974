"""Move scoring, selection and competitive set building."""

from .scorer import (
    extract_english_effect,
    filter_viable_moves,
    get_move_role_tag,
    is_strong_stab,
    score_move,
    score_moves,
)
from .sets import (
    build_all_sets,
    build_support_set,
    build_sweeper_set,
    build_tank_set,
    build_wallbreaker_set,
)

__all__ = [
    "build_all_sets",
    "build_support_set",
    "build_sweeper_set",
    "build_tank_set",
    "build_wallbreaker_set",
    "extract_english_effect",
    "filter_viable_moves",
    "get_move_role_tag",
    "is_strong_stab",
    "score_move",
    "score_moves",
]
