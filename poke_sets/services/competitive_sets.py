"""High-level service: fetch a creature, score its moves and build competitive sets."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from ..analysis.damage_calc import (
    DamageCalculator,
    DamageContext,
    DamageResult,
    KOChance,
    calculate_hp_at_level,
)
from ..analysis.matchups import get_type_weaknesses
from ..analysis.roles import (
    BattleProfile,
    RoleWeights,
    determine_battle_profile,
    get_primary_role,
    get_viable_roles,
    infer_role_weights,
)
from ..clients import PokeAPIClient, PokeAPIClientError
from ..config import Settings
from ..models import CompetitiveSets, MoveData, MoveScore, PokemonData, ScoringContext, SpeciesData
from ..moves import build_all_sets, filter_viable_moves, score_moves
from ..parsers.pokeapi import (
    extract_description,
    extract_genus,
    extract_localized_name,
    format_pokemon_id,
    format_stat_label,
    stats_to_mapping,
)


@dataclass
class CompetitiveAnalysis:
    """Everything derived for one creature in a single pass."""

    pokemon: str
    types: List[str]
    stats: Dict[str, int]
    profile: BattleProfile
    role_weights: RoleWeights
    primary_role: str
    viable_roles: List[str]
    weakness_coverage: List[str]
    scored_moves: List[MoveScore] = field(default_factory=list)
    sets: CompetitiveSets = field(default_factory=CompetitiveSets)


@dataclass
class SpeciesProfile:
    """Localized species header plus the stat-derived battle profile."""

    pokemon: str
    display_name: str
    dex_number: str
    genus: str
    description: str
    types: List[str]
    base_stats: Dict[str, int]
    profile: BattleProfile
    role_weights: RoleWeights
    primary_role: str
    viable_roles: List[str]


@dataclass
class DamageEstimate:
    attacker: str
    defender: str
    move: str
    defender_hp: int
    damage: DamageResult
    ko_chance: KOChance


class CompetitiveSetService:
    """Coordinates the PokeAPI client with the pure scoring and set-building core."""

    def __init__(
        self,
        *,
        pokeapi_client: Optional[PokeAPIClient] = None,
        settings: Optional[Settings] = None,
        damage_calculator: Optional[DamageCalculator] = None,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.settings = settings or Settings.from_env()
        self.pokeapi = pokeapi_client or PokeAPIClient.from_settings(
            self.settings, debug_logger=debug_logger
        )
        self.damage_calculator = damage_calculator or DamageCalculator()
        self._debug_logger = debug_logger

    def _debug(self, message: str) -> None:
        if self._debug_logger:
            self._debug_logger(message)

    def analyze(
        self, species: str, weakness_coverage: Optional[Iterable[str]] = None
    ) -> CompetitiveAnalysis:
        pokemon = self.pokeapi.get_pokemon_data(species)
        types = pokemon.type_names
        stats = stats_to_mapping(pokemon.stats)
        profile = determine_battle_profile(stats)
        self._debug(f"{pokemon.name}: types={types} bias={profile.offensive_bias}")

        if weakness_coverage is None:
            coverage = get_type_weaknesses(types)
        else:
            coverage = [t.strip().lower() for t in weakness_coverage if t.strip()]
        self._debug(f"Coverage targets: {', '.join(coverage) or 'none'}")

        context = ScoringContext(
            pokemon_types=tuple(types),
            offensive_bias=profile.offensive_bias,
            weakness_coverage=tuple(coverage),
        )
        candidates = self._fetch_moves(pokemon)
        scored = filter_viable_moves(score_moves(candidates, context), self.settings.min_score)
        self._debug(
            f"{len(scored)} viable of {len(candidates)} fetched "
            f"({len(pokemon.moves)} learnable) moves"
        )

        return CompetitiveAnalysis(
            pokemon=pokemon.name,
            types=types,
            stats=stats,
            profile=profile,
            role_weights=infer_role_weights(stats),
            primary_role=get_primary_role(stats),
            viable_roles=get_viable_roles(stats),
            weakness_coverage=coverage,
            scored_moves=scored,
            sets=build_all_sets(scored, profile),
        )

    def estimate_damage(
        self,
        attacker: str,
        defender: str,
        move: str,
        *,
        level: Optional[int] = None,
        weather: Optional[str] = None,
        critical: bool = False,
    ) -> DamageEstimate:
        if level is None:
            level = self.settings.level
        attacker_data = self.pokeapi.get_pokemon_data(attacker)
        defender_data = self.pokeapi.get_pokemon_data(defender)
        move_data = self.pokeapi.get_move(move)
        if move_data is None:
            raise ValueError(f"Unknown move: {move}")

        context = DamageContext(
            level=level,
            attacker_stats=attacker_data.stats,
            defender_stats=defender_data.stats,
            move=move_data,
            attacker_types=attacker_data.type_names,
            defender_types=defender_data.type_names,
            weather=weather,
            is_critical=critical,
        )
        damage = self.damage_calculator.calculate_damage(context)
        defender_hp = calculate_hp_at_level(stats_to_mapping(defender_data.stats).get("hp", 0), level)
        self._debug(f"{move_data.name}: {damage.min}-{damage.max} vs {defender_hp} HP")
        return DamageEstimate(
            attacker=attacker_data.name,
            defender=defender_data.name,
            move=move_data.name,
            defender_hp=defender_hp,
            damage=damage,
            ko_chance=self.damage_calculator.calculate_ko_chance(damage, defender_hp),
        )

    def battle_profile(self, species: str, locale: str = "en") -> SpeciesProfile:
        pokemon = self.pokeapi.get_pokemon_data(species)
        species_data: Optional[SpeciesData]
        try:
            species_data = self.pokeapi.get_species(species)
        except PokeAPIClientError as exc:
            self._debug(f"Species lookup for {species} failed: {exc}")
            species_data = None

        stats = stats_to_mapping(pokemon.stats)
        return SpeciesProfile(
            pokemon=pokemon.name,
            display_name=extract_localized_name(pokemon, species_data, locale),
            dex_number=format_pokemon_id(pokemon.id),
            genus=extract_genus(species_data, locale),
            description=extract_description(species_data, locale),
            types=pokemon.type_names,
            base_stats={format_stat_label(name): value for name, value in stats.items()},
            profile=determine_battle_profile(stats),
            role_weights=infer_role_weights(stats),
            primary_role=get_primary_role(stats),
            viable_roles=get_viable_roles(stats),
        )

    def _fetch_moves(self, pokemon: PokemonData) -> List[MoveData]:
        entries = pokemon.moves
        limit = self.settings.move_limit
        if limit and len(entries) > limit:
            self._debug(f"Fetching {limit} of {len(entries)} learnable moves")
            entries = entries[:limit]

        moves: List[MoveData] = []
        for entry in entries:
            try:
                data = self.pokeapi.get_move(entry.name)
            except PokeAPIClientError as exc:
                self._debug(f"Skipping {entry.name}: {exc}")
                continue
            if data is None:
                self._debug(f"Skipping {entry.name}: not found")
                continue
            moves.append(data)
        return moves


def analysis_to_dict(analysis: CompetitiveAnalysis, *, top_moves: int = 10) -> Dict[str, object]:
    """JSON-friendly view of an analysis; only the top scored moves are kept."""

    return {
        "pokemon": analysis.pokemon,
        "types": analysis.types,
        "stats": analysis.stats,
        "profile": asdict(analysis.profile),
        "role_weights": asdict(analysis.role_weights),
        "primary_role": analysis.primary_role,
        "viable_roles": analysis.viable_roles,
        "weakness_coverage": analysis.weakness_coverage,
        "top_moves": [
            {"name": move.name, "score": round(move.score, 2), "tags": list(move.tags)}
            for move in analysis.scored_moves[:top_moves]
        ],
        "sets": asdict(analysis.sets),
    }
