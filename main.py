#!/usr/bin/env python3
"""
hexmap - Entry Point
═══════════════════════════════════════════════════════════════════════════

Buduje mapę ze scenariusza (data/scenarios.yaml) i szuka najtańszej
ścieżki między startem a celem. Koszt ruchu = koszt kafelka docelowego.

Użycie:
    python main.py                          # Domyślny scenariusz
    python main.py --scenario lake          # Konkretny scenariusz
    python main.py --list                   # Lista scenariuszy
    python main.py --verbose                # Statystyki wyszukiwania
    python main.py --save-log out/s.json    # Zapis przebiegu do JSON

Kod wyjścia:
    0 - ścieżka znaleziona
    1 - cel nieosiągalny
    2 - błąd konfiguracji (nieznany scenariusz / kafelek)
"""

import argparse
import sys
from pathlib import Path

# Dodaj katalog projektu do path
sys.path.insert(0, str(Path(__file__).parent))

from hexmap.core.config_loader import ConfigLoader
from hexmap.core.hex_coord import coord_from_list
from hexmap.core.hex_map import tile_cost
from hexmap.core.pathfinding import find_path, path_cost
from hexmap.events.event_logger import SearchEventType, SearchLogger


def build_parser() -> argparse.ArgumentParser:
    """Tworzy parser argumentów."""
    parser = argparse.ArgumentParser(
        description="hexmap - pathfinding na mapie hexagonalnej",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--data",
        default=str(Path(__file__).parent / "data"),
        help="Folder z plikami YAML (domyślnie: data/)"
    )
    parser.add_argument(
        "--scenario", "-s",
        default=None,
        help="ID scenariusza (domyślnie: pathfinding.default_scenario z defaults.yaml)"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Wypisz dostępne scenariusze i zakończ"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Szczegółowy output"
    )
    parser.add_argument(
        "--save-log",
        default=None,
        metavar="PATH",
        help="Zapisz przebieg wyszukiwania do pliku JSON"
    )
    return parser


def main(argv=None):
    """Główna funkcja."""
    args = build_parser().parse_args(argv)

    loader = ConfigLoader(args.data)

    if args.list:
        for scenario_id in loader.get_scenario_ids():
            scenario = loader.load_scenario(scenario_id)
            print(f"  {scenario_id:<12} {scenario['name']}")
        return 0

    scenario_id = args.scenario or loader.get_pathfinding_config().get("default_scenario")
    try:
        scenario = loader.load_scenario(scenario_id)
        hex_map = loader.build_map(scenario)
    except (KeyError, ValueError) as e:
        print(f"Błąd konfiguracji: {e}", file=sys.stderr)
        return 2

    start = coord_from_list(scenario["start"])
    destination = coord_from_list(scenario["destination"])

    print("=" * 60)
    print(f"SCENARIUSZ: {scenario['name']} ({scenario_id})")
    print("=" * 60)
    print(f"Start: {start}   Cel: {destination}   Kafelki: {len(hex_map)}")
    print()

    logger = SearchLogger(label=scenario_id)
    path = find_path(hex_map, start, destination, tile_cost, logger=logger)

    if path is None:
        print("Brak ścieżki - cel nieosiągalny.")
    else:
        cost = path_cost(hex_map, start, path, tile_cost)
        steps = " -> ".join(str(c) for c in [start] + path)
        print(f"Ścieżka ({len(path)} kroków, koszt {cost:.2f}):")
        print(f"  {steps}")

    if args.save_log:
        logger.save(args.save_log)
        print()
        print(f"Log zapisany: {args.save_log}")

    # Verbose: pokaż statystyki
    if args.verbose:
        print()
        print("-" * 60)
        print("STATYSTYKI ZDARZEŃ")
        print("-" * 60)
        for event_type in SearchEventType:
            count = len(logger.get_events_by_type(event_type))
            if count > 0:
                print(f"  {event_type.name}: {count}")

    return 0 if path is not None else 1


if __name__ == "__main__":
    sys.exit(main())
