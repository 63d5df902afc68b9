"""Particle swarm optimisation with one-flip local search for the stew problem."""

__version__ = "0.1.0"
__all__ = ["cli", "local_search", "problem", "pso"]