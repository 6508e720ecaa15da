"""Symmetric TSP heuristics: graphs, solvers, a benchmarking harness and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["graph", "solver", "analyzer", "cli"]