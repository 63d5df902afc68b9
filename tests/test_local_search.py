import logging

import pytest

from stewpso.local_search import binary_fitness, exhaustive_local_search
from stewpso.problem import Ingredient, StewProblem


@pytest.fixture
def problem():
    return StewProblem(
        ingredients=[
            Ingredient(1.5, 4.0),
            Ingredient(2.5, 5.0),
            Ingredient(3.0, 1.0),
            Ingredient(0.5, 2.0),
        ],
        incompatible_pairs={(0, 2)},
        max_weight=6.0,
    )


def test_incompatible_selection_scores_minus_one(problem):
    assert binary_fitness([True, False, True, False], problem) == -1.0


def test_overweight_selection_scores_negative_excess(problem):
    assert binary_fitness([True, True, False, False], problem) == -3.0


def test_feasible_selection_scores_flavor(problem):
    assert binary_fitness([False, True, True, False], problem) == 5.5


def test_empty_selection_scores_zero(problem):
    assert binary_fitness([False] * 4, problem) == 0.0


@pytest.mark.parametrize(
    "start",
    [
        [False, False, False, False],
        [True, False, True, False],
        [True, True, True, True],
        [False, True, False, True],
    ],
)
def test_search_ends_in_local_optimum(problem, start):
    solution, fitness = exhaustive_local_search(start, problem)
    assert fitness == binary_fitness(solution, problem)
    assert fitness >= binary_fitness(start, problem)
    for index in range(len(solution)):
        flipped = solution.copy()
        flipped[index] = not flipped[index]
        assert binary_fitness(flipped, problem) <= fitness


def test_search_does_not_mutate_input(problem):
    start = [True, True, True, True]
    exhaustive_local_search(start, problem)
    assert start == [True, True, True, True]


def test_search_logs_improvement_and_stop(problem, caplog):
    caplog.set_level(logging.INFO, logger="stewpso.local_search")
    exhaustive_local_search([False] * 4, problem)
    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Busca Local encontrou melhora:") for m in messages)
    assert messages[-1] == "Nenhuma melhora encontrada na vizinhança. Busca Local terminada."