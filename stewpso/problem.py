"""Stew problem instances and the particle record used by the swarm."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


@dataclass(frozen=True)
class Ingredient:
    """One ingredient: how much flavour it adds and how much it weighs."""

    flavor: float = 0.0
    weight: float = 0.0


def _read_floats(line: str) -> list[float]:
    values = []
    for token in line.split():
        try:
            values.append(float(token))
        except ValueError:
            continue
    return values


def _as_count(value: float) -> int:
    """Truncate a float to a non-negative integer, saturating at zero."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        raise ValueError("count must be finite")
    return int(value)


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise ValueError("unexpected end of instance data") from None


def _read_values(lines: Iterator[str], count: int, what: str) -> list[float]:
    values: list[float] = []
    while len(values) < count:
        values.extend(_read_floats(_next_line(lines)))
    if len(values) > count:
        raise ValueError(f"more {what} values than the {count} ingredients declared")
    return values


@dataclass
class StewProblem:
    """Ingredients, pairs that must not be combined, and the weight limit."""

    ingredients: list[Ingredient] = field(default_factory=list)
    incompatible_pairs: set[tuple[int, int]] = field(default_factory=set)
    max_weight: float = 0.0

    @classmethod
    def parse(cls, text: str) -> StewProblem:
        """Parse an instance from its text form.

        The first line holds the ingredient count, the number of incompatible
        pairs and the weight limit. After a separating line come the flavours,
        then the weights, then one 1-based pair per line.
        """
        lines = iter(text.splitlines())
        header = _read_floats(_next_line(lines))
        if len(header) < 3:
            raise ValueError("header needs ingredient count, pair count and max weight")
        count = _as_count(header[0])
        pair_count = _as_count(header[1])
        max_weight = header[2]

        next(lines, None)
        flavors = _read_values(lines, count, "flavour")
        next(lines, None)
        weights = _read_values(lines, count, "weight")
        next(lines, None)

        pairs: set[tuple[int, int]] = set()
        for _ in range(pair_count):
            pair = _read_floats(_next_line(lines))
            if len(pair) < 2:
                raise ValueError("an incompatibility line needs two ingredient numbers")
            first, second = _as_count(pair[0]), _as_count(pair[1])
            if first == 0 or second == 0:
                raise ValueError("ingredient numbers in pairs start at 1")
            pairs.add((first - 1, second - 1))

        ingredients = [Ingredient(f, w) for f, w in zip(flavors, weights)]
        return cls(ingredients, pairs, max_weight)

    @classmethod
    def load(cls, path: str | Path) -> StewProblem:
        """Read and parse an instance file."""
        return cls.parse(Path(path).read_text())


@dataclass
class Particle:
    """A swarm member: continuous position, velocity and its personal best."""

    position: list[float] = field(default_factory=list)
    velocity: list[float] = field(default_factory=list)
    best_position: list[float] = field(default_factory=list)
    best_fitness: float = 0.0

    @classmethod
    def random(cls, dimensions: int, rng: random.Random) -> Particle:
        """A particle placed uniformly in the unit cube with a small velocity."""
        return cls(
            position=[rng.random() for _ in range(dimensions)],
            velocity=[rng.uniform(-0.1, 0.1) for _ in range(dimensions)],
            best_position=[0.0] * dimensions,
            best_fitness=-1.0,
        )