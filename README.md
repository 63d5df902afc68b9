# stewpso

Solves the *stew problem* with a binary particle swarm optimiser that is
refined by an exhaustive one-flip hill climb.

The problem: pick a set of ingredients that maximises total flavour, keeps
the total weight within a limit, and never contains both ingredients of an
incompatible pair.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library.

## Instance files

An instance is a plain text file laid out as follows:

```
N I W

<N flavour values, over as many lines as needed>

<N weight values, over as many lines as needed>

<I lines, each holding a 1-based pair "j k" of incompatible ingredients>
```

`N` is the number of ingredients, `I` the number of incompatible pairs and
`W` the maximum total weight. The single line after the header, after the
flavours and after the weights is skipped as a separator. Tokens that are not
numbers are ignored.

`StewProblem.parse` raises `ValueError` when the header has fewer than three
numbers, when the data ends early, when a block holds more values than `N`,
when a pair line has fewer than two numbers, or when a pair uses ingredient
number 0.

## Command line

```
stewpso [instance] [-n RUNS] [--seed SEED]
```

- `instance` — path of the instance file; defaults to `instances/ep10.dat`.
- `-n`, `--runs` — how many times to run the optimiser (default 30).
- `--seed` — seed for the random generator, for repeatable runs.

The command first prints the file name of the instance without its
extension. For every run it then prints the indices of the ingredients in the
best solution of the initial swarm and that solution's fitness, the indices in
the final solution and its total flavour, and the time taken in seconds. The
hill climb's progress messages are printed along the way.

If the instance cannot be read or parsed, the command prints a message to
standard error and exits with status 1.

## Library use

```python
import random

from stewpso.problem import StewProblem
from stewpso.pso import solve_pso
from stewpso.cli import selected_indices

problem = StewProblem.load("instances/ep10.dat")
result = solve_pso(problem, random.Random(42))
print(selected_indices(result.solution), result.flavor)
```

`solve_pso(problem, rng=None)` runs 50 iterations of a 100-particle swarm and
returns a `PsoResult` with:

- `solution` — the best selection found, as a list of booleans;
- `flavor` — its total flavour;
- `initial_solution` — the best selection of the initial swarm;
- `initial_fitness` — that selection's swarm fitness.

If the best selection is still infeasible, `solve_pso` reports empty
selections with a flavour and fitness of zero.

Other building blocks:

- `stewpso.problem`
  - `StewProblem.parse(text)` and `StewProblem.load(path)` build a problem
    with `ingredients` (a list of `Ingredient(flavor, weight)`),
    `incompatible_pairs` (0-based index pairs) and `max_weight`.
  - `Particle.random(dimensions, rng)` makes a particle placed uniformly in
    the unit cube with velocities in [-0.1, 0.1].
- `stewpso.pso`
  - `to_binary(position, threshold)` selects every coordinate strictly above
    the threshold.
  - `fitness(position, problem, threshold)` scores a continuous position:
    a selection holding an incompatible pair scores 0.00001, and an
    overweight one loses 100 flavour per unit of excess weight, with
    0.00001 as the floor.
  - `random_valid_solution(problem, rng)` greedily builds a feasible
    selection from a shuffled order of ingredients.
  - `position_from_solution(solution, rng)` draws a position that maps back
    to the selection: 0.7–1.0 for chosen ingredients, 0.0–0.3 for the rest.
- `stewpso.local_search`
  - `binary_fitness(solution, problem)` scores a selection: its flavour,
    -1 if it holds an incompatible pair, or minus the excess weight if it is
    too heavy.
  - `exhaustive_local_search(initial, problem)` moves to the best one-flip
    neighbour until none improves and returns the selection and its fitness.
    Progress is logged at INFO level on the `stewpso.local_search` logger.
- `stewpso.cli`
  - `selected_indices(solution)` lists the indices of the chosen ingredients.
  - `main(argv=None)` is the command described above.

## Tests

```
pip install ".[test]"
pytest
```