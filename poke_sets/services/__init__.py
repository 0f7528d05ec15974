"""Services combining the PokeAPI client with the scoring core."""

from .competitive_sets import (
    CompetitiveAnalysis,
    CompetitiveSetService,
    DamageEstimate,
    SpeciesProfile,
    analysis_to_dict,
)

__all__ = [
    "CompetitiveAnalysis",
    "CompetitiveSetService",
    "DamageEstimate",
    "SpeciesProfile",
    "analysis_to_dict",
]
