"""Battle engine boundary: state records and the adapter protocol.

No engine ships with this package; these types describe what an engine
plugged in behind :class:`BattleEngineAdapter` consumes and produces.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Protocol, Tuple

from ..analysis.damage_calc import DamageResult, calculate_hp_at_level, calculate_stat_at_level
from ..analysis.roles import stat_value
from ..models import MoveData, PokemonData

Player = Literal["player1", "player2"]

MAX_BOOST = 6
# Stage -6 .. +6
BOOST_MULTIPLIERS: Tuple[float, ...] = (
    2 / 8,
    2 / 7,
    2 / 6,
    2 / 5,
    2 / 4,
    2 / 3,
    2 / 2,
    3 / 2,
    4 / 2,
    5 / 2,
    6 / 2,
    7 / 2,
    8 / 2,
)


@dataclass(slots=True)
class BattleStats:
    hp: int
    attack: int
    defense: int
    special_attack: int
    special_defense: int
    speed: int


@dataclass(slots=True)
class StatBoosts:
    attack: int = 0
    defense: int = 0
    special_attack: int = 0
    special_defense: int = 0
    speed: int = 0
    accuracy: int = 0
    evasion: int = 0


@dataclass(slots=True)
class BattlePokemon:
    id: str
    species: str
    level: int
    types: List[str]
    stats: BattleStats
    current_hp: int
    ability: str = ""
    status: Optional[str] = None
    item: Optional[str] = None
    moves: List[str] = field(default_factory=list)
    boosts: StatBoosts = field(default_factory=StatBoosts)


@dataclass(slots=True)
class BattleSide:
    active: Optional[BattlePokemon] = None
    team: List[BattlePokemon] = field(default_factory=list)


@dataclass(slots=True)
class BattleState:
    turn: int = 0
    weather: Optional[str] = None
    weather_turns: int = 0
    terrain: Optional[str] = None
    terrain_turns: int = 0
    player1: BattleSide = field(default_factory=BattleSide)
    player2: BattleSide = field(default_factory=BattleSide)


@dataclass(slots=True)
class BattleAction:
    type: Literal["move", "switch", "item"]
    player: Player
    move_index: Optional[int] = None
    switch_index: Optional[int] = None
    item_id: Optional[str] = None


@dataclass(slots=True)
class BattleEvent:
    type: Literal["damage", "heal", "status", "boost", "weather", "terrain", "switch", "faint"]
    target: Player
    data: Dict[str, Any] = field(default_factory=dict)


class BattleEngineAdapter(Protocol):
    def initialize(self, team1: List[PokemonData], team2: List[PokemonData]) -> BattleState: ...

    def execute_action(
        self, state: BattleState, action: BattleAction
    ) -> Tuple[BattleState, List[BattleEvent]]: ...

    def calculate_damage(
        self,
        attacker: BattlePokemon,
        defender: BattlePokemon,
        move: MoveData,
        state: BattleState,
    ) -> DamageResult: ...

    def get_valid_actions(self, state: BattleState, player: Player) -> List[BattleAction]: ...

    def is_game_over(self, state: BattleState) -> Tuple[bool, Optional[str]]:
        """Return ``(over, winner)``; winner is a player, ``"draw"`` or ``None``."""
        ...


def create_battle_pokemon(data: PokemonData, level: int = 50) -> BattlePokemon:
    """Level-scaled battle copy of ``data`` with neutral IVs/EVs and no boosts."""

    def _stat(name: str) -> int:
        return int(calculate_stat_at_level(stat_value(data.stats, name), level))

    hp = calculate_hp_at_level(stat_value(data.stats, "hp"), level)
    return BattlePokemon(
        id=f"{data.name}-{uuid.uuid4().hex}",
        species=data.name,
        level=level,
        types=data.type_names,
        stats=BattleStats(
            hp=hp,
            attack=_stat("attack"),
            defense=_stat("defense"),
            special_attack=_stat("special-attack"),
            special_defense=_stat("special-defense"),
            speed=_stat("speed"),
        ),
        current_hp=hp,
        ability=data.abilities[0].name if data.abilities else "",
        moves=[entry.name for entry in data.moves[:4]],
    )


def create_initial_battle_state(team1: List[BattlePokemon], team2: List[BattlePokemon]) -> BattleState:
    return BattleState(
        player1=BattleSide(active=team1[0] if team1 else None, team=team1),
        player2=BattleSide(active=team2[0] if team2 else None, team=team2),
    )


def clamp_boost(boost: int) -> int:
    return max(-MAX_BOOST, min(MAX_BOOST, boost))


def apply_boost(current: int, stages: int) -> int:
    return math.floor(current * BOOST_MULTIPLIERS[clamp_boost(stages) + MAX_BOOST])
