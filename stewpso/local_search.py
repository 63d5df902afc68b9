"""Best-improvement hill climbing over the one-flip neighbourhood."""

from __future__ import annotations

import logging
from typing import Sequence

from .problem import StewProblem

logger = logging.getLogger(__name__)


def binary_fitness(solution: Sequence[bool], problem: StewProblem) -> float:
    """Flavour of a selection; -1 if it breaks a pair, minus the excess if too heavy."""
    for first, second in problem.incompatible_pairs:
        if solution[first] and solution[second]:
            return -1.0
    chosen = [ing for ing, included in zip(problem.ingredients, solution) if included]
    total_weight = sum(ing.weight for ing in chosen)
    total_flavor = sum(ing.flavor for ing in chosen)
    if total_weight > problem.max_weight:
        return -(total_weight - problem.max_weight)
    return total_flavor


def _neighbours(solution: list[bool]):
    for index in range(len(solution)):
        neighbour = solution.copy()
        neighbour[index] = not neighbour[index]
        yield neighbour


def exhaustive_local_search(
    initial: Sequence[bool], problem: StewProblem
) -> tuple[list[bool], float]:
    """Move to the best one-flip neighbour until none improves; return it and its fitness."""
    current = list(initial)
    current_fitness = binary_fitness(current, problem)

    while True:
        best, best_fitness = current, current_fitness
        for neighbour in _neighbours(current):
            candidate_fitness = binary_fitness(neighbour, problem)
            if candidate_fitness > best_fitness:
                best, best_fitness = neighbour, candidate_fitness

        if best_fitness > current_fitness:
            logger.info(
                "Busca Local encontrou melhora: %.2f -> %.2f", current_fitness, best_fitness
            )
            current, current_fitness = best, best_fitness
        else:
            logger.info("Nenhuma melhora encontrada na vizinhança. Busca Local terminada.")
            return current, current_fitness