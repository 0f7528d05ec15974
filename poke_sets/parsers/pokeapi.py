"""Mapping of raw PokeAPI JSON payloads into the library's dataclasses."""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..models import (
    EffectEntry,
    LocalizedText,
    MoveData,
    MoveLearnDetail,
    MoveMeta,
    PokemonAbility,
    PokemonData,
    PokemonMoveEntry,
    PokemonStat,
    PokemonType,
    SpeciesData,
)

LANGUAGE_PREFERENCE: Dict[str, List[str]] = {
    "en": ["en"],
    "es": ["es", "es-la"],
    "ja": ["ja-Hrkt", "ja"],
}

STAT_LABELS = {
    "hp": "HP",
    "attack": "ATK",
    "defense": "DEF",
    "special-attack": "SP. ATK",
    "special-defense": "SP. DEF",
    "speed": "SPD",
}


def _name_of(value: Any) -> Optional[str]:
    """``{"name": ...}`` references are everywhere in PokeAPI payloads."""

    if isinstance(value, dict):
        return value.get("name")
    return None


def parse_move(payload: Dict[str, Any]) -> MoveData:
    meta_payload = payload.get("meta") or None
    meta = None
    if meta_payload:
        meta = MoveMeta(
            ailment=_name_of(meta_payload.get("ailment")),
            category=_name_of(meta_payload.get("category")),
            min_hits=meta_payload.get("min_hits"),
            max_hits=meta_payload.get("max_hits"),
            min_turns=meta_payload.get("min_turns"),
            max_turns=meta_payload.get("max_turns"),
            drain=meta_payload.get("drain"),
            healing=meta_payload.get("healing"),
            crit_rate=meta_payload.get("crit_rate"),
            ailment_chance=meta_payload.get("ailment_chance"),
            flinch_chance=meta_payload.get("flinch_chance"),
            stat_chance=meta_payload.get("stat_chance"),
        )

    return MoveData(
        id=payload.get("id", 0),
        name=payload.get("name", ""),
        accuracy=payload.get("accuracy"),
        power=payload.get("power"),
        pp=payload.get("pp"),
        priority=payload.get("priority") or 0,
        damage_class=_name_of(payload.get("damage_class")),
        type=_name_of(payload.get("type")),
        effect_entries=[
            EffectEntry(
                effect=entry.get("effect", ""),
                short_effect=entry.get("short_effect", ""),
                language=_name_of(entry.get("language")) or "",
            )
            for entry in payload.get("effect_entries") or []
        ],
        meta=meta,
        target=_name_of(payload.get("target")),
    )


def parse_pokemon(payload: Dict[str, Any]) -> PokemonData:
    sprites = payload.get("sprites") or {}
    other = sprites.get("other") or {}
    artwork = other.get("official-artwork") or {}
    return PokemonData(
        id=payload.get("id", 0),
        name=payload.get("name", ""),
        height=payload.get("height") or 0,
        weight=payload.get("weight") or 0,
        sprites={
            "front_default": artwork.get("front_default") or sprites.get("front_default"),
            "front_shiny": artwork.get("front_shiny") or sprites.get("front_shiny"),
        },
        abilities=[
            PokemonAbility(
                name=_name_of(entry.get("ability")) or "",
                is_hidden=bool(entry.get("is_hidden")),
                slot=entry.get("slot", 1),
            )
            for entry in payload.get("abilities") or []
        ],
        types=[
            PokemonType(name=_name_of(entry.get("type")) or "", slot=entry.get("slot", 1))
            for entry in payload.get("types") or []
        ],
        stats=[
            PokemonStat(
                name=_name_of(entry.get("stat")) or "",
                base_stat=entry.get("base_stat", 0),
                effort=entry.get("effort", 0),
            )
            for entry in payload.get("stats") or []
        ],
        moves=[
            PokemonMoveEntry(
                name=_name_of(entry.get("move")) or "",
                details=[
                    MoveLearnDetail(
                        level_learned_at=detail.get("level_learned_at") or 0,
                        method=_name_of(detail.get("move_learn_method")),
                        version_group=_name_of(detail.get("version_group")),
                    )
                    for detail in entry.get("version_group_details") or []
                ],
            )
            for entry in payload.get("moves") or []
        ],
    )


def _localized(entries: Iterable[Dict[str, Any]], key: str, with_version: bool = False) -> List[LocalizedText]:
    parsed = []
    for entry in entries or []:
        parsed.append(
            LocalizedText(
                text=entry.get(key, ""),
                language=_name_of(entry.get("language")) or "",
                version=_name_of(entry.get("version")) if with_version else None,
            )
        )
    return parsed


def parse_species(payload: Dict[str, Any]) -> SpeciesData:
    return SpeciesData(
        id=payload.get("id", 0),
        name=payload.get("name"),
        color=_name_of(payload.get("color")),
        flavor_text_entries=_localized(payload.get("flavor_text_entries"), "flavor_text", with_version=True),
        genera=_localized(payload.get("genera"), "genus"),
        names=_localized(payload.get("names"), "name"),
        varieties=[
            _name_of(entry.get("pokemon")) or ""
            for entry in payload.get("varieties") or []
        ],
    )


def stats_to_mapping(stats: Sequence[PokemonStat]) -> Dict[str, int]:
    return {stat.name: stat.base_stat for stat in stats}


# ----------------------------------------------------------------------
# Localization
# ----------------------------------------------------------------------
def _language_priority(locale: str) -> List[str]:
    primary = LANGUAGE_PREFERENCE.get(locale, LANGUAGE_PREFERENCE["en"])
    return list(dict.fromkeys(primary + LANGUAGE_PREFERENCE["en"]))


def find_by_language(entries: Sequence[LocalizedText], locale: str = "en") -> Optional[LocalizedText]:
    for code in _language_priority(locale):
        for entry in entries:
            if entry.language == code:
                return entry
    return None


def extract_description(species: Optional[SpeciesData], locale: str = "en") -> str:
    if species is None:
        return ""
    entry = find_by_language(species.flavor_text_entries, locale)
    if entry is None:
        return ""
    return re.sub(r"[\f\n\r]", " ", entry.text).strip()


def extract_genus(species: Optional[SpeciesData], locale: str = "en") -> str:
    if species is None:
        return ""
    entry = find_by_language(species.genera, locale)
    return entry.text if entry else ""


def extract_localized_name(pokemon: PokemonData, species: Optional[SpeciesData], locale: str = "en") -> str:
    entry = find_by_language(species.names, locale) if species else None
    if entry and entry.text:
        return entry.text
    return format_pokemon_name(pokemon.name)


# ----------------------------------------------------------------------
# Display formatting
# ----------------------------------------------------------------------
def format_pokemon_name(name: str) -> str:
    if not name:
        return ""
    return name[0].upper() + name[1:]


def format_pokemon_id(pokemon_id: int) -> str:
    return f"#{pokemon_id:03d}"


def format_move_label(name: str) -> str:
    return " ".join(segment[:1].upper() + segment[1:] for segment in name.split("-"))


def format_stat_label(name: str) -> str:
    return STAT_LABELS.get(name, name.upper())
