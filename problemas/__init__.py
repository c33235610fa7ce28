"""Solvers for knapsack, name-pair counting and ligature queries, with a shared toolkit."""

__version__ = "0.1.0"
__all__ = ["toolkit", "knapsack", "nafnatalning", "ligatures"]