import itertools
import random

import pytest

from stewpso.local_search import binary_fitness
from stewpso.problem import Ingredient, StewProblem
from stewpso.pso import (
    MIN_FITNESS,
    PsoResult,
    fitness,
    position_from_solution,
    random_valid_solution,
    solve_pso,
    to_binary,
)


@pytest.fixture
def problem():
    flavors = [4.0, 3.0, 5.0, 2.0, 6.0, 1.0]
    weights = [2.0, 3.0, 4.0, 1.0, 5.0, 2.0]
    return StewProblem(
        [Ingredient(f, w) for f, w in zip(flavors, weights)],
        {(0, 2), (1, 4)},
        8.0,
    )


def _optimum(problem):
    n = len(problem.ingredients)
    return max(
        binary_fitness(list(bits), problem)
        for bits in itertools.product([False, True], repeat=n)
    )


def test_to_binary_is_strict():
    assert to_binary([0.5, 0.6, 0.4], 0.5) == [False, True, False]


def test_fitness_incompatible_gets_floor(problem):
    position = [0.9, 0.1, 0.9, 0.1, 0.1, 0.1]
    assert fitness(position, problem, 0.5) == 0.00001


def test_fitness_heavy_overweight_is_floored(problem):
    position = [0.9] * 6
    assert fitness(position, problem, 0.5) == MIN_FITNESS


@pytest.mark.parametrize("bits", [[True, True, False, True, False, False], [False] * 6])
def test_fitness_of_feasible_matches_binary_fitness(problem, bits):
    position = [0.9 if b else 0.1 for b in bits]
    assert fitness(position, problem, 0.5) == binary_fitness(bits, problem)


@pytest.mark.parametrize("seed", range(20))
def test_random_valid_solution_is_feasible(problem, seed):
    solution = random_valid_solution(problem, random.Random(seed))
    assert len(solution) == len(problem.ingredients)
    assert binary_fitness(solution, problem) >= 0.0


def test_random_valid_solution_is_maximal(problem):
    solution = random_valid_solution(problem, random.Random(5))
    for index, selected in enumerate(solution):
        if not selected:
            grown = solution.copy()
            grown[index] = True
            assert binary_fitness(grown, problem) < 0.0


def test_position_from_solution_round_trips():
    rng = random.Random(11)
    solution = [True, False, True, True, False]
    position = position_from_solution(solution, rng)
    assert to_binary(position, 0.5) == solution
    assert all(0.7 <= x <= 1.0 for x, s in zip(position, solution) if s)
    assert all(0.0 <= x <= 0.3 for x, s in zip(position, solution) if not s)


def test_solve_pso_returns_feasible_best(problem):
    result = solve_pso(problem, random.Random(1))
    assert binary_fitness(result.solution, problem) == result.flavor
    assert result.flavor >= result.initial_fitness
    assert result.flavor <= _optimum(problem)
    assert binary_fitness(result.initial_solution, problem) == result.initial_fitness


def test_solve_pso_is_reproducible_with_seed(problem):
    first = solve_pso(problem, random.Random(7))
    second = solve_pso(problem, random.Random(7))
    assert first == second


def test_solve_pso_when_nothing_fits():
    problem = StewProblem([Ingredient(5.0, 10.0), Ingredient(3.0, 12.0)], set(), 4.0)
    result = solve_pso(problem, random.Random(2))
    assert result == PsoResult([False, False], 0.0, [False, False], 0.0)