"""Competitive move-set builder utilities."""

from .analysis.damage_calc import DamageCalculator
from .moves import build_all_sets, score_moves
from .services import CompetitiveSetService

__all__ = [
    "CompetitiveSetService",
    "DamageCalculator",
    "build_all_sets",
    "score_moves",
]
