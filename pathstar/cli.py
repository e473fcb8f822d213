"""Command-line interface for pathstar."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from pathstar.config import ELEVATION_CONFIG, VALVE_CONFIG
from pathstar.domains.elevation import ElevationMap
from pathstar.domains.valves import ValveNetwork, ValvePlanner
from pathstar.errors import PathstarError
from pathstar.lib.algorithms.astar import SearchStats
from pathstar.logging import enable_debug_logging, get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a compact human-readable duration."""
    if seconds < 1.0:
        return f"{seconds * 1000:.1f} ms"
    return f"{seconds:.2f} s"


def _read_input(path: Path) -> str:
    logger.info(f"Loading puzzle input from: {path}")
    return path.read_text(encoding="utf-8")


def _run_hill(path: Path, render: bool, max_climb: Optional[int]) -> None:
    """Solve an elevation map and print the step count.

    Args:
        path: Grid text file.
        render: Whether to print the map with the path drawn on it.
        max_climb: Optional override of the climb limit.
    """
    start_time = perf_counter()
    try:
        config = ELEVATION_CONFIG
        if max_climb is not None:
            config = replace(config, max_climb=max_climb)
        hill = ElevationMap.parse(_read_input(path), config)

        stats = SearchStats()
        route = hill.shortest_path(stats=stats)
        logger.debug(
            f"Search expanded {stats.expanded} cells, "
            f"discarded {stats.stale_discarded} stale entries"
        )

        if render:
            print(hill.render(route))
            print()

        if route is None:
            print("no path")
            sys.exit(1)

        print(f"{len(route) - 1} steps")
        elapsed = _format_duration(perf_counter() - start_time)
        logger.info(f"Elevation search completed in {elapsed}")

    except FileNotFoundError:
        logger.error(f"Input file not found: {path}")
        sys.exit(1)
    except PathstarError as e:
        logger.error(f"Failed to parse input: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to solve elevation map: {type(e).__name__}: {e}")
        sys.exit(1)


def _run_valves(
    path: Path, time_limit: Optional[int], start: Optional[str], pair: bool
) -> None:
    """Plan valve openings and print the plan and total pressure released.

    Args:
        path: Valve scan file.
        time_limit: Optional override of the minutes available.
        start: Optional override of the start valve label.
        pair: Split the valves between two participants.
    """
    start_time = perf_counter()
    try:
        config = VALVE_CONFIG
        if time_limit is not None:
            field = "pair_time_limit" if pair else "time_limit"
            config = replace(config, **{field: time_limit})
        if start is not None:
            config = replace(config, start_label=start)
        network = ValveNetwork.parse(_read_input(path).splitlines(), config)

        if pair:
            planner = ValvePlanner.for_pair(network)
            first, second = planner.find_pair()
            print(f"Participant 1: {planner.format_plan(first)}")
            print(f"Participant 2: {planner.format_plan(second)}")
            total = planner.score(first) + planner.score(second)
        else:
            planner = ValvePlanner(network)
            plan = planner.find_plan()
            print(planner.format_plan(plan))
            total = planner.score(plan)

        print(f"Total released: {total}")
        elapsed = _format_duration(perf_counter() - start_time)
        logger.info(f"Valve planning completed in {elapsed}")

    except FileNotFoundError:
        logger.error(f"Input file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to plan valves: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathstar`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathstar",
        description="Solve path-finding puzzles with a generic best-first search.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{hill,valves}",
        help="Available commands",
    )

    hill_parser = subparsers.add_parser(
        "hill", help="Fewest steps across an elevation map"
    )
    hill_parser.add_argument("input", type=Path, help="Path to the grid text file")
    hill_parser.add_argument(
        "--render",
        action="store_true",
        help="Print the map with the path drawn as arrows",
    )
    hill_parser.add_argument(
        "--max-climb",
        type=int,
        default=None,
        help=f"Levels a single step may climb (default: {ELEVATION_CONFIG.max_climb})",
    )

    valves_parser = subparsers.add_parser(
        "valves", help="Valve opening order that releases the most pressure"
    )
    valves_parser.add_argument("input", type=Path, help="Path to the valve scan file")
    valves_parser.add_argument(
        "--time-limit",
        type=int,
        default=None,
        help=(
            f"Minutes available (default: {VALVE_CONFIG.time_limit}, "
            f"or {VALVE_CONFIG.pair_time_limit} with --pair)"
        ),
    )
    valves_parser.add_argument(
        "--start",
        default=None,
        help=f"Start valve label (default: {VALVE_CONFIG.start_label})",
    )
    valves_parser.add_argument(
        "--pair",
        action="store_true",
        help="Split the valves between two participants working at once",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "hill":
        _run_hill(args.input, args.render, args.max_climb)
    elif args.command == "valves":
        _run_valves(args.input, args.time_limit, args.start, args.pair)


if __name__ == "__main__":
    main()
