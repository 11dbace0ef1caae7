from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from flight_graph import SourceNotFoundError
from instance import (
    FlightInstance,
    InvalidInstanceError,
    build_graph,
    load_instance,
    positive_number,
    prompt_instance,
)
from report import build_report, format_report
from shortest_paths import compute_routes


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Cheapest cost and shortest distance from a source city to every other city."
    )
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--config",
        type=Path,
        default=Path("flight_network.yaml"),
        help="Path to the YAML flight network instance.",
    )
    source_group.add_argument(
        "--interactive",
        action="store_true",
        help="Enter cities and flights at the terminal instead of reading a file.",
    )
    parser.add_argument("--source", help="Source city (overrides the instance file).")
    parser.add_argument(
        "--fuel-rate",
        type=float,
        help="Fuel cost per km (overrides the instance file).",
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Draw the flight network annotated with the cheapest costs.",
    )
    parser.add_argument(
        "--figure-out",
        type=Path,
        help="Save the network drawing to this path instead of showing it.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.interactive:
            instance: FlightInstance = prompt_instance()
        else:
            instance = load_instance(args.config)
    except InvalidInstanceError as exc:
        print(f"Error: {exc}")
        return 2
    except EOFError:
        print("Error: input ended before the instance was complete.")
        return 2
    except FileNotFoundError:
        print(f"Error: instance file not found: {args.config}")
        return 2
    except yaml.YAMLError as exc:
        print(f"Error: could not parse {args.config}: {exc}")
        return 2

    if args.source:
        instance.source = args.source
    if args.fuel_rate is not None:
        try:
            instance.fuel_rate = positive_number(args.fuel_rate, "Fuel rate")
        except InvalidInstanceError as exc:
            print(f"Error: {exc}")
            return 2

    graph, skipped = build_graph(instance)
    for origin, target, *_ in skipped:
        print(f"Error: One or both cities not found ({origin}, {target}).")

    try:
        cost_table, distance_table = compute_routes(graph, instance.source)
    except SourceNotFoundError:
        print("Error: Source city not found.")
        return 1

    rows = build_report(graph, cost_table, distance_table, instance.fuel_rate)
    print()
    print(format_report(rows, instance.source))

    if args.visualize or args.figure_out:
        from visualize import draw_routes

        draw_routes(
            graph,
            cost_table,
            distance_table,
            output=args.figure_out,
            show=args.figure_out is None,
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
