"""Command-line interface for building competitive move sets."""

from __future__ import annotations

import argparse
import json
import sys

from poke_sets.clients import PokeAPIClientError
from poke_sets.parsers import format_move_label, format_pokemon_name
from poke_sets.services import CompetitiveSetService, analysis_to_dict


def _humanize_report(report: dict[str, object]) -> str:
    species = report.get("species") or {}
    name = species.get("display_name") or format_pokemon_name(str(report.get("pokemon", "")))
    types = "/".join(t.title() for t in report.get("types", []) or [])
    dex = f" {species['dex_number']}" if species.get("dex_number") else ""
    lines: list[str] = [f"{name}{dex} ({types})"]
    if species.get("genus"):
        lines.append(str(species["genus"]))
    if species.get("description"):
        lines.append(str(species["description"]))
    lines.append("")

    profile = report.get("profile") or {}
    lines.append(
        f"Primary role: {report.get('primary_role')}"
        f" | offensive bias: {profile.get('offensive_bias', 'mixed')}"
    )
    viable = report.get("viable_roles") or []
    if viable:
        lines.append(f"Viable roles: {', '.join(viable)}")
    coverage = report.get("weakness_coverage") or []
    if coverage:
        lines.append(f"Coverage targets: {', '.join(coverage)}")
    lines.append("")

    top = report.get("top_moves") or []
    if top:
        lines.append("Top moves:")
        for move in top:
            tags = ", ".join(move.get("tags", [])) or "no tags"
            lines.append(f"  - {format_move_label(move['name'])} ({move['score']}) :: {tags}")
        lines.append("")

    sets = report.get("sets") or {}
    for archetype, moves in sets.items():
        if not moves:
            continue
        lines.append(f"{archetype.title()}:")
        for rec in moves:
            lines.append(f"  - {format_move_label(rec['name'])} [{rec['type']}] {rec['reason']}")
        lines.append("")

    if not any(sets.values()):
        lines.append("No complete sets could be built from the viable moves.")

    return "\n".join(lines).strip()


def _debug_print(enabled: bool, message: str) -> None:
    if enabled:
        sys.stderr.write(f"[debug] {message}\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build competitive move sets for a species")
    parser.add_argument("species", help="Species name, e.g. 'garchomp'")
    parser.add_argument(
        "--weakness",
        action="append",
        metavar="TYPE",
        help="Type the coverage moves should hit (repeatable; defaults to the species' weaknesses)",
    )
    parser.add_argument(
        "--locale",
        default="en",
        help="Language for the species name, genus and description (en, es, ja)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the analysis as JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug progress information to stderr",
    )
    args = parser.parse_args(argv)

    _debug_print(args.debug, f"Arguments parsed: {args}")
    service = CompetitiveSetService(debug_logger=(lambda msg: _debug_print(args.debug, msg)))
    try:
        analysis = service.analyze(args.species, args.weakness)
        profile = service.battle_profile(args.species, args.locale)
    except PokeAPIClientError as exc:
        raise SystemExit(f"Failed to fetch {args.species}: {exc}")
    _debug_print(args.debug, "Analysis finished")
    payload = analysis_to_dict(analysis)
    payload["species"] = {
        "display_name": profile.display_name,
        "dex_number": profile.dex_number,
        "genus": profile.genus,
        "description": profile.description,
        "base_stats": profile.base_stats,
    }

    if args.json:
        json.dump(payload, sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        print(_humanize_report(payload))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
