#!/usr/bin/env python3
"""Generate a batch of mazes, validate each one and print a JSON summary."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mazeworks.grid import GRID_ALGORITHMS, GridMazeGenerator
from mazeworks.logging_config import setup_logging
from mazeworks.organic import OrganicMazeGenerator
from mazeworks.presets import DEFAULT_QUANTITY, DIFFICULTY_PRESETS
from mazeworks.solver import is_perfect_maze, registered_solver_ids, solve_maze


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--age-range",
        type=str,
        default="9-11",
        help=f"Difficulty preset key ({', '.join(DIFFICULTY_PRESETS)})",
    )
    parser.add_argument("--quantity", type=int, default=DEFAULT_QUANTITY)
    parser.add_argument(
        "--base-seed",
        type=int,
        default=None,
        help="Seed of the first maze; later mazes use consecutive seeds",
    )
    parser.add_argument(
        "--layout",
        choices=("grid", "organic"),
        default="grid",
    )
    parser.add_argument(
        "--algorithm",
        choices=sorted(GRID_ALGORITHMS),
        default=None,
        help="Grid algorithm (defaults to the preset's)",
    )
    parser.add_argument(
        "--randomize-algorithms",
        action="store_true",
        help="Vary the grid algorithm after the first maze for older age ranges",
    )
    parser.add_argument("--solver", choices=registered_solver_ids(), default="bfs")
    parser.add_argument("--verbose", action="store_true", help="Log generation details")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.layout == "organic":
        generator = OrganicMazeGenerator(age_range=args.age_range)
        batch = generator.generate_batch(args.quantity, base_seed=args.base_seed)
    else:
        generator = GridMazeGenerator(age_range=args.age_range, algorithm=args.algorithm)
        batch = generator.generate_batch(
            args.quantity,
            base_seed=args.base_seed,
            randomize_algorithms=args.randomize_algorithms,
        )

    summaries: List[dict] = []
    failures = 0
    for index, maze in enumerate(batch.mazes, start=1):
        solution = solve_maze(maze, args.solver)
        report = is_perfect_maze(maze)
        valid = solution is not None and report.is_perfect
        failures += 0 if valid else 1
        summaries.append(
            {
                "seed": maze.seed,
                "layout": maze.layout,
                "algorithm": maze.algorithm,
                "solutionLength": solution.length if solution is not None else None,
                "perfect": report.to_dict(),
            }
        )
        print(
            f"[{index}/{batch.quantity}] seed={maze.seed} {maze.layout}/{maze.algorithm} "
            f"{'ok' if valid else 'INVALID'}",
            file=sys.stderr,
        )

    print(json.dumps({"baseSeed": batch.base_seed, "ageRange": batch.age_range, "mazes": summaries}, indent=2))
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
