"""Command line entry: run the swarm several times on one instance."""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

from .problem import StewProblem
from .pso import solve_pso

DEFAULT_INSTANCE = "instances/ep10.dat"
DEFAULT_RUNS = 30


def selected_indices(solution: Sequence[bool]) -> list[int]:
    """Indices of the selected ingredients."""
    return [index for index, selected in enumerate(solution) if selected]


@contextmanager
def _progress_to_stdout() -> Iterator[None]:
    logger = logging.getLogger("stewpso")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        yield
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stewpso", description="Solve a stew instance with a particle swarm."
    )
    parser.add_argument("instance", nargs="?", default=DEFAULT_INSTANCE)
    parser.add_argument("-n", "--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        problem = StewProblem.load(args.instance)
    except (OSError, ValueError) as exc:
        print(f"stewpso: cannot load {args.instance}: {exc}", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    print(Path(args.instance).stem)
    with _progress_to_stdout():
        for run in range(1, args.runs + 1):
            start = time.perf_counter()
            result = solve_pso(problem, rng)
            elapsed = time.perf_counter() - start
            print(" ----------------------- ")
            print(f"Iteração {run}:")
            print(f"- Solução inicial \n{selected_indices(result.initial_solution)}")
            print(f"- Resultado inicial: {result.initial_fitness!r}")
            print(f"- Solução final \n{selected_indices(result.solution)}")
            print(f"- Resultado final: {result.flavor!r}")
            print(f"- Tempo: {elapsed:.6f}s")
    return 0