"""Tests for move pickers and the competitive set builders."""

from __future__ import annotations

from poke_sets.analysis.roles import BattleProfile
from poke_sets.models import MoveData, MoveScore
from poke_sets.moves import (
    build_all_sets,
    build_support_set,
    build_sweeper_set,
    build_tank_set,
    build_wallbreaker_set,
)
from poke_sets.moves.filters import (
    exclude_moves,
    pick_best_damaging_move,
    pick_by_tag,
    pick_coverage_moves,
    pick_priority_move,
    pick_strong_stab,
)
from poke_sets.moves.sets import build_reason, to_recommendation

PHYSICAL_SWEEPER = BattleProfile(
    offensive_bias="physical",
    speed=102,
    is_sweeper=True,
    is_tank=False,
    is_wallbreaker=True,
    is_support=False,
)

SPECIAL_TANK = BattleProfile(
    offensive_bias="special",
    speed=30,
    is_sweeper=False,
    is_tank=True,
    is_wallbreaker=False,
    is_support=True,
)


def _scored(
    name,
    score,
    *,
    type_name="normal",
    damage_class="status",
    power=0,
    accuracy=100,
    tags=(),
    stab=False,
    coverage=(),
    effect="",
) -> MoveScore:
    move = MoveData(
        name=name,
        type=type_name,
        power=power or None,
        accuracy=accuracy,
        damage_class=damage_class,
    )
    return MoveScore(
        move=move,
        score=score,
        tags=tuple(tags),
        is_damaging=damage_class != "status" and power > 0,
        is_stab=stab,
        power=power,
        coverage_targets=tuple(coverage),
        english_effect=effect,
    )


def _dragon_pool() -> list[MoveScore]:
    return [
        _scored("outrage", 155, type_name="dragon", damage_class="physical", power=120, tags=["stab"], stab=True),
        _scored("draco-meteor", 142, type_name="dragon", damage_class="special", power=130, accuracy=90, tags=["stab"], stab=True),
        _scored("earthquake", 135, type_name="ground", damage_class="physical", power=100, tags=["stab"], stab=True),
        _scored("stone-edge", 110, type_name="rock", damage_class="physical", power=100, accuracy=80, tags=["coverage"], coverage=["ice"]),
        _scored("fire-fang", 91.75, type_name="fire", damage_class="physical", power=65, accuracy=95, tags=["coverage"], coverage=["ice"]),
        _scored("stealth-rock", 70, type_name="rock", tags=["hazard", "utility"]),
        _scored("swords-dance", 60, tags=["setup"]),
    ]


def _bulky_water_pool() -> list[MoveScore]:
    return [
        _scored("scald", 105, type_name="water", damage_class="special", power=80, tags=["stab"], stab=True),
        _scored("recover", 50, type_name="normal", tags=["recovery"]),
        _scored("toxic", 30, type_name="poison", tags=["status", "utility"]),
        _scored("knock-off", 65, type_name="dark", damage_class="physical", power=65, tags=["utility"]),
    ]


# ----------------------------------------------------------------------
# Pickers
# ----------------------------------------------------------------------
def test_pick_by_tag_keeps_pool_order_on_ties() -> None:
    pool = [
        _scored("spikes", 50, tags=["hazard"]),
        _scored("sticky-web", 50, tags=["hazard"]),
    ]
    assert [m.name for m in pick_by_tag(pool, "hazard", count=2)] == ["spikes", "sticky-web"]
    assert [m.name for m in pick_by_tag(pool, "hazard", excluded={"spikes"})] == ["sticky-web"]


def test_pick_strong_stab_respects_bias_and_power() -> None:
    pool = _dragon_pool() + [
        _scored("dragon-tail", 85, type_name="dragon", damage_class="physical", power=60, tags=["stab"], stab=True)
    ]
    physical = pick_strong_stab(pool, "physical")
    assert [m.name for m in physical] == ["outrage", "earthquake"]
    mixed = pick_strong_stab(pool, "mixed", count=3)
    assert [m.name for m in mixed] == ["outrage", "draco-meteor", "earthquake"]


def test_pick_coverage_moves_skips_stab() -> None:
    picked = pick_coverage_moves(_dragon_pool(), count=3)
    assert [m.name for m in picked] == ["stone-edge", "fire-fang"]


def test_exclusions_are_honoured() -> None:
    pool = _dragon_pool()
    excluded: set[str] = set()
    exclude_moves(excluded, pool[:5])
    assert pick_best_damaging_move(pool, excluded=excluded) is None


# ----------------------------------------------------------------------
# Set builders
# ----------------------------------------------------------------------
def test_sweeper_set_leads_with_setup() -> None:
    sweeper = build_sweeper_set(_dragon_pool(), PHYSICAL_SWEEPER)
    assert [r.name for r in sweeper] == ["swords-dance", "outrage", "earthquake", "stone-edge"]
    assert [r.role_tag for r in sweeper] == ["setup", "stab", "stab", "coverage"]


def test_sweeper_set_fills_with_best_damaging_moves() -> None:
    pool = [
        _scored("outrage", 155, type_name="dragon", damage_class="physical", power=120, tags=["stab"], stab=True),
        _scored("earthquake", 135, type_name="ground", damage_class="physical", power=100, tags=["stab"], stab=True),
        _scored("mud-shot", 60, type_name="ground", damage_class="special", power=55, accuracy=95, tags=["stab"], stab=True),
        _scored("tackle", 40, damage_class="physical", power=40),
    ]
    sweeper = build_sweeper_set(pool, PHYSICAL_SWEEPER)
    assert [r.name for r in sweeper] == ["outrage", "earthquake", "mud-shot", "tackle"]


def test_sweeper_set_requires_two_strong_stab_moves() -> None:
    pool = [m for m in _dragon_pool() if m.name != "earthquake"]
    assert build_sweeper_set(pool, PHYSICAL_SWEEPER) == []


def test_wallbreaker_set_is_stab_plus_coverage() -> None:
    wallbreaker = build_wallbreaker_set(_dragon_pool(), PHYSICAL_SWEEPER)
    assert [r.name for r in wallbreaker] == ["outrage", "earthquake", "stone-edge", "fire-fang"]


def _wallbreaker_pool() -> list[MoveScore]:
    return [
        _scored("outrage", 155, type_name="dragon", damage_class="physical", power=120, tags=["stab"], stab=True),
        _scored("earthquake", 135, type_name="ground", damage_class="physical", power=100, tags=["stab"], stab=True),
        _scored("stone-edge", 110, type_name="rock", damage_class="physical", power=100, accuracy=80, tags=["coverage"], coverage=["ice"]),
        _scored("swords-dance", 60, tags=["setup"]),
    ]


def test_wallbreaker_backfills_missing_coverage() -> None:
    pool = _wallbreaker_pool() + [_scored("tackle", 40, damage_class="physical", power=40)]
    wallbreaker = build_wallbreaker_set(pool, PHYSICAL_SWEEPER)

    assert [r.name for r in wallbreaker] == ["outrage", "earthquake", "stone-edge", "tackle"]
    assert [r.role_tag for r in wallbreaker] == ["stab", "stab", "coverage", "utility"]


def test_wallbreaker_aborts_without_backfill_candidate() -> None:
    assert build_wallbreaker_set(_wallbreaker_pool(), PHYSICAL_SWEEPER) == []


def test_sweeper_aborts_when_no_filler_is_left() -> None:
    pool = [m for m in _wallbreaker_pool() if m.name != "stone-edge"]
    assert build_sweeper_set(pool, PHYSICAL_SWEEPER) == []


def test_tank_set_needs_recovery() -> None:
    pool = [m for m in _bulky_water_pool() if m.name != "recover"]
    assert build_tank_set(pool) == []


def test_tank_set_order_and_roles() -> None:
    tank = build_tank_set(_bulky_water_pool())
    assert [r.name for r in tank] == ["scald", "recover", "toxic", "knock-off"]
    assert [r.role_tag for r in tank] == ["stab", "recovery", "status", "utility"]


def test_tank_set_falls_back_to_damaging_move() -> None:
    pool = [m for m in _bulky_water_pool() if m.name != "knock-off"] + [
        _scored("ice-beam", 90, type_name="ice", damage_class="special", power=90)
    ]
    tank = build_tank_set(pool)
    assert [r.name for r in tank] == ["scald", "recover", "toxic", "ice-beam"]


def test_support_set_walks_tag_priority_then_stab() -> None:
    support = build_support_set(_dragon_pool())
    assert [r.name for r in support] == ["stealth-rock", "outrage", "draco-meteor", "earthquake"]
    assert support[0].role_tag == "hazard"


def test_support_set_is_all_or_nothing() -> None:
    pool = [_scored("stealth-rock", 70, type_name="rock", tags=["hazard", "utility"])]
    assert build_support_set(pool) == []


def test_tank_set_only_for_tank_profiles() -> None:
    pool = _bulky_water_pool()
    assert build_all_sets(pool, PHYSICAL_SWEEPER).tank == []
    assert len(build_all_sets(pool, SPECIAL_TANK).tank) == 4


def test_build_all_sets_is_deterministic() -> None:
    pool = _dragon_pool()
    first = build_all_sets(pool, PHYSICAL_SWEEPER)
    second = build_all_sets(pool, PHYSICAL_SWEEPER)
    assert first == second
    for moves in (first.sweeper, first.wallbreaker, first.tank, first.support):
        assert len(moves) in (0, 4)
        assert len({r.name for r in moves}) == len(moves)


# ----------------------------------------------------------------------
# Reasons
# ----------------------------------------------------------------------
def test_reason_for_stab_attack() -> None:
    move = _dragon_pool()[2]
    assert build_reason(move, "stab") == "BP 100 (100% acc). STAB bonus. Role: stab"


def test_reason_lists_three_coverage_targets_and_variable_accuracy() -> None:
    move = _scored(
        "blizzard-like",
        80,
        type_name="ice",
        damage_class="special",
        power=110,
        accuracy=None,
        tags=["coverage"],
        coverage=["grass", "ground", "flying", "dragon"],
    )
    assert build_reason(move, "coverage") == (
        "BP 110 (variable acc). Covers: grass, ground, flying. Role: coverage"
    )


def test_reason_prefers_recovery_over_drain() -> None:
    move = _scored(
        "drain-punch",
        165,
        type_name="fighting",
        damage_class="physical",
        power=75,
        tags=["stab", "drain", "recovery"],
        stab=True,
    )
    assert build_reason(move, "recovery") == "BP 75 (100% acc). STAB bonus. Reliable recovery. Role: recovery"


def test_reason_falls_back_to_effect_text() -> None:
    effect = "Raises the user's Attack and Defense by one stage each, permanently."
    move = _scored("mystery", 40, effect=effect)
    assert build_reason(move, "utility") == f"{effect[:60]}. Role: utility"


def test_recommendation_uses_placement_tag() -> None:
    rec = to_recommendation(_dragon_pool()[5], "support")
    assert rec.name == "stealth-rock"
    assert rec.type == "rock"
    assert rec.role_tag == "support"
    assert rec.reason == "Entry hazard. Role: support"


def test_pick_priority_move() -> None:
    pool = _dragon_pool() + [
        _scored("extreme-speed", 95, damage_class="physical", power=80, tags=["priority"]),
        _scored("quick-attack", 75, damage_class="physical", power=40, tags=["priority"]),
    ]
    assert pick_priority_move(pool).name == "extreme-speed"
    assert pick_priority_move(pool, excluded={"extreme-speed"}).name == "quick-attack"
    assert pick_priority_move(_dragon_pool()) is None
