"""FastMCP server exposing competitive set and damage tools."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated, Any, Dict, List, Optional

from fastmcp import FastMCP

from .clients import PokeAPIClientError
from .data.type_chart import effectiveness_multiplier
from .services import CompetitiveSetService, analysis_to_dict

app = FastMCP("poke-sets", version="0.1.0")
_service = CompetitiveSetService()


@app.tool()
def get_competitive_sets(
    species: Annotated[str, "Species name (e.g., 'Garchomp')"],
    weakness_coverage: Annotated[
        Optional[List[str]], "Types the coverage moves should hit; defaults to the species' weaknesses"
    ] = None,
) -> Dict[str, Any] | str:
    """Score a species' learnable moves and build sweeper/wallbreaker/tank/support sets."""

    try:
        analysis = _service.analyze(species, weakness_coverage)
    except PokeAPIClientError as exc:  # pragma: no cover - network failure
        return f"Error fetching {species}: {exc}"
    return analysis_to_dict(analysis)


@app.tool()
def get_battle_profile(
    species: Annotated[str, "Species name (e.g., 'Blissey')"],
    locale: Annotated[str, "Language for name, genus and description: en, es or ja"] = "en",
) -> Dict[str, Any] | str:
    """Return the localized species header, stat-derived battle profile and role weights."""

    try:
        profile = _service.battle_profile(species, locale)
    except PokeAPIClientError as exc:  # pragma: no cover - network failure
        return f"Error fetching {species}: {exc}"
    return asdict(profile)


@app.tool()
def calculate_type_matchup(
    attacker_type: Annotated[str, "Attacking type"],
    defender_types: Annotated[List[str], "One or two defending types"],
) -> str:
    """Return the effectiveness multiplier of an attacking type against a defender typing."""

    multiplier = effectiveness_multiplier(attacker_type.strip(), [t.strip() for t in defender_types])
    defenders = "/".join(t.strip().title() for t in defender_types)
    return f"{attacker_type.strip().title()} vs {defenders} -> {multiplier}x"


@app.tool()
def estimate_damage(
    attacker: Annotated[str, "Attacking species"],
    defender: Annotated[str, "Defending species"],
    move: Annotated[str, "Move name (e.g., 'earthquake')"],
    level: Annotated[int, "Level of both creatures"] = 50,
    weather: Annotated[Optional[str], "sun, rain, sand, hail or snow"] = None,
    critical: Annotated[bool, "Whether the hit is critical"] = False,
) -> Dict[str, Any] | str:
    """Estimate one attack's damage range and KO chances."""

    try:
        estimate = _service.estimate_damage(
            attacker, defender, move, level=level, weather=weather, critical=critical
        )
    except (PokeAPIClientError, ValueError) as exc:
        return f"Error estimating damage: {exc}"
    return asdict(estimate)


def run() -> None:
    """Entry point for `python -m poke_sets.server` or console script."""

    print("[poke-sets] Starting MCP server. Press Ctrl+C to stop.")
    app.run()


if __name__ == "__main__":
    run()
