"""FastAPI web server exposing competitive set tools via REST API."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from .clients import PokeAPIClientError
from .data.type_chart import effectiveness_multiplier
from .services import CompetitiveSetService, analysis_to_dict

app = FastAPI(
    title="Poke-Sets Web API",
    description="REST API for competitive move sets and damage estimates",
    version="0.1.0",
)

_service = CompetitiveSetService()


def get_service() -> CompetitiveSetService:
    return _service


# Pydantic models for request/response
class CompetitiveSetsResponse(BaseModel):
    """Response model for competitive set analysis."""

    result: Dict[str, Any]


class BattleProfileResponse(BaseModel):
    """Response model for a species battle profile."""

    result: Dict[str, Any]


class TypeMatchupResponse(BaseModel):
    """Response model for type matchup calculation."""

    attacker_type: str
    defender_types: List[str]
    multiplier: float


class DamageRequest(BaseModel):
    """Request model for a damage estimate."""

    attacker: str
    defender: str
    move: str
    level: int = 50
    weather: Optional[str] = None
    critical: bool = False


class DamageResponse(BaseModel):
    """Response model for a damage estimate."""

    result: Dict[str, Any]


@app.get("/api/competitive_sets", response_model=CompetitiveSetsResponse)
async def competitive_sets(
    species: str = Query(..., description="Species name (e.g., 'Garchomp')"),
    weakness: Optional[List[str]] = Query(None, description="Coverage target types"),
) -> CompetitiveSetsResponse:
    """Score a species' moves and build the four archetype sets."""
    try:
        analysis = get_service().analyze(species, weakness)
    except PokeAPIClientError as exc:
        raise HTTPException(status_code=502, detail=f"Error fetching {species}: {exc}")
    return CompetitiveSetsResponse(result=analysis_to_dict(analysis))


@app.get("/api/battle_profile", response_model=BattleProfileResponse)
async def battle_profile(
    species: str = Query(..., description="Species name (e.g., 'Blissey')"),
    locale: str = Query("en", description="Language for name, genus and description"),
) -> BattleProfileResponse:
    """Return the localized species header and stat-derived battle profile."""
    try:
        profile = get_service().battle_profile(species, locale)
    except PokeAPIClientError as exc:
        raise HTTPException(status_code=502, detail=f"Error fetching {species}: {exc}")
    return BattleProfileResponse(result=asdict(profile))


@app.get("/api/calculate_type_matchup", response_model=TypeMatchupResponse)
async def calculate_type_matchup(
    attacker_type: str = Query(..., description="Attacking type"),
    defender_type: List[str] = Query(..., description="Defending type(s)"),
) -> TypeMatchupResponse:
    """Return the effectiveness multiplier of an attacking type against a defender typing."""
    attack = attacker_type.strip().lower()
    defenders = [t.strip().lower() for t in defender_type]
    return TypeMatchupResponse(
        attacker_type=attack,
        defender_types=defenders,
        multiplier=effectiveness_multiplier(attack, defenders),
    )


@app.post("/api/estimate_damage", response_model=DamageResponse)
async def estimate_damage(request: DamageRequest) -> DamageResponse:
    """Estimate one attack's damage range and KO chances."""
    try:
        estimate = get_service().estimate_damage(
            request.attacker,
            request.defender,
            request.move,
            level=request.level,
            weather=request.weather,
            critical=request.critical,
        )
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except PokeAPIClientError as exc:
        raise HTTPException(status_code=502, detail=f"Error fetching data: {exc}")
    return DamageResponse(result=asdict(estimate))


def run(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Entry point for running the web server."""
    import uvicorn

    print(f"[poke-sets-web] Starting web server at http://{host}:{port}")
    print("[poke-sets-web] Press Ctrl+C to stop.")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
