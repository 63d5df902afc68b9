"""Binary particle swarm optimisation for the stew problem."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from .local_search import exhaustive_local_search
from .problem import Particle, StewProblem

STAGNATION_LIMIT = 15
PARTICLES = 100
ITERATIONS = 50
THRESHOLD = 0.5
W_MAX = 0.9
W_MIN = 0.4
C1 = 2.0
C2 = 2.0
V_MAX = 1.0
MIN_FITNESS = 0.00001
WEIGHT_PENALTY = 100.0


@dataclass
class PsoResult:
    """Best selection found, its flavour, and the best selection of the initial swarm."""

    solution: list[bool]
    flavor: float
    initial_solution: list[bool]
    initial_fitness: float


def to_binary(position: Sequence[float], threshold: float) -> list[bool]:
    """An ingredient is selected when its coordinate is strictly above the threshold."""
    return [value > threshold for value in position]


def fitness(position: Sequence[float], problem: StewProblem, threshold: float) -> float:
    """Swarm fitness: flavour, a tiny floor for broken pairs, penalised excess weight."""
    solution = to_binary(position, threshold)
    for first, second in problem.incompatible_pairs:
        if solution[first] and solution[second]:
            return MIN_FITNESS
    chosen = [ing for ing, included in zip(problem.ingredients, solution) if included]
    total_flavor = sum(ing.flavor for ing in chosen)
    total_weight = sum(ing.weight for ing in chosen)
    if total_weight > problem.max_weight:
        penalty = WEIGHT_PENALTY * (total_weight - problem.max_weight)
        return max(total_flavor - penalty, MIN_FITNESS)
    return total_flavor


def _conflicts(problem: StewProblem, solution: Sequence[bool], index: int) -> bool:
    pairs = problem.incompatible_pairs
    return any(
        included and ((other, index) in pairs or (index, other) in pairs)
        for other, included in enumerate(solution)
    )


def random_valid_solution(problem: StewProblem, rng: random.Random) -> list[bool]:
    """Greedy fill in random order, skipping anything too heavy or incompatible."""
    solution = [False] * len(problem.ingredients)
    weight = 0.0
    candidates = list(range(len(problem.ingredients)))
    rng.shuffle(candidates)
    for index in candidates:
        potential = weight + problem.ingredients[index].weight
        if potential > problem.max_weight or _conflicts(problem, solution, index):
            continue
        solution[index] = True
        weight = potential
    return solution


def position_from_solution(solution: Sequence[bool], rng: random.Random) -> list[float]:
    """A continuous position that maps back to the given selection."""
    return [rng.uniform(0.7, 1.0) if selected else rng.uniform(0.0, 0.3) for selected in solution]


def _is_feasible(solution: Sequence[bool], problem: StewProblem) -> bool:
    if any(solution[a] and solution[b] for a, b in problem.incompatible_pairs):
        return False
    weight = sum(ing.weight for ing, sel in zip(problem.ingredients, solution) if sel)
    return weight <= problem.max_weight


def _initial_swarm(problem: StewProblem, rng: random.Random) -> list[Particle]:
    dimensions = len(problem.ingredients)
    swarm = []
    for _ in range(PARTICLES):
        position = position_from_solution(random_valid_solution(problem, rng), rng)
        swarm.append(
            Particle(
                position=position,
                velocity=[rng.uniform(-0.1, 0.1) for _ in range(dimensions)],
                best_position=position.copy(),
                best_fitness=float("-inf"),
            )
        )
    return swarm


def _move(
    particle: Particle,
    global_best: Sequence[float],
    inertia: float,
    social: float,
    rng: random.Random,
) -> None:
    velocity, position = [], []
    for pos, vel, own_best, best in zip(
        particle.position, particle.velocity, particle.best_position, global_best
    ):
        r1, r2 = rng.random(), rng.random()
        new_velocity = inertia * vel + C1 * r1 * (own_best - pos) + social * r2 * (best - pos)
        new_velocity = min(max(new_velocity, -V_MAX), V_MAX)
        velocity.append(new_velocity)
        position.append(min(max(pos + new_velocity, 0.0), 1.0))
    particle.velocity, particle.position = velocity, position


def solve_pso(problem: StewProblem, rng: random.Random | None = None) -> PsoResult:
    """Run the swarm and return the best feasible selection it found."""
    rng = rng if rng is not None else random.Random()
    dimensions = len(problem.ingredients)
    swarm = _initial_swarm(problem, rng)

    best_position = [0.0] * dimensions
    best_fitness = float("-inf")
    initial_position: list[float] = []
    initial_fitness = 0.0

    for particle in swarm:
        score = fitness(particle.position, problem, THRESHOLD)
        particle.best_fitness = score
        particle.best_position = position_from_solution(
            to_binary(particle.position, THRESHOLD), rng
        )
        if score > best_fitness:
            best_fitness = score
            best_position = position_from_solution(to_binary(particle.position, THRESHOLD), rng)
            initial_fitness = score
            initial_position = best_position.copy()

    stagnant = 0
    for iteration in range(ITERATIONS):
        previous_best = best_fitness
        inertia = W_MAX - (iteration / ITERATIONS) * (W_MAX - W_MIN)
        for particle in swarm:
            social = C2
            if stagnant > STAGNATION_LIMIT:
                social = -C2
                if stagnant > STAGNATION_LIMIT + 5:
                    stagnant = 0
            _move(particle, best_position, inertia, social, rng)

            score = fitness(particle.position, problem, THRESHOLD)
            if score == best_fitness:
                improved, _ = exhaustive_local_search(
                    to_binary(particle.position, THRESHOLD), problem
                )
                particle.position = position_from_solution(improved, rng)
                score = fitness(particle.position, problem, THRESHOLD)

            if score > particle.best_fitness:
                particle.best_fitness = score
                particle.best_position = position_from_solution(
                    to_binary(particle.position, THRESHOLD), rng
                )
            if score > best_fitness:
                best_fitness = score
                best_position = position_from_solution(
                    to_binary(particle.position, THRESHOLD), rng
                )

        stagnant = 0 if best_fitness > previous_best else stagnant + 1

    final = to_binary(best_position, THRESHOLD)
    if not _is_feasible(final, problem):
        return PsoResult([False] * dimensions, 0.0, [False] * dimensions, 0.0)
    flavor = sum(ing.flavor for ing, sel in zip(problem.ingredients, final) if sel)
    return PsoResult(final, flavor, to_binary(initial_position, THRESHOLD), initial_fitness)