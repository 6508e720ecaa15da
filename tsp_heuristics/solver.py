"""Constructive and local-search heuristics for the symmetric TSP."""

from __future__ import annotations

import math
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from tsp_heuristics.graph import Graph

_MAX_TWO_OPT_ITERATIONS = 100
_TOLERANCE = 1e-9


@dataclass
class TSPResult:
    """A tour, its total length and the time taken to build it in milliseconds."""

    tour: list[int] = field(default_factory=list)
    total_distance: float = 0.0
    execution_time: float = 0.0


def _timed(build: Callable[[], list[int]]) -> tuple[list[int], float]:
    start = time.perf_counter_ns()
    tour = build()
    elapsed_us = (time.perf_counter_ns() - start) // 1000
    return tour, elapsed_us / 1000.0


class TSPSolver:
    """Heuristic solver bound to one graph."""

    def __init__(self, graph: Graph) -> None:
        if graph.num_vertices < 3:
            raise ValueError("TSP requires at least 3 vertices")
        self.graph = graph

    def nearest_neighbor(self, start: int = 0) -> list[int]:
        """Build a tour by always moving to the closest unvisited vertex."""
        dist = self.graph.distance
        n = self.graph.num_vertices
        dist(start, start)  # validates the start vertex
        tour = [start]
        unvisited = [v for v in range(n) if v != start]
        current = start
        while unvisited:
            nxt = min(unvisited, key=lambda v: dist(current, v))
            unvisited.remove(nxt)
            tour.append(nxt)
            current = nxt
        return tour

    def cheapest_insertion(self) -> list[int]:
        """Start from the cheapest edge and repeatedly insert the cheapest vertex."""
        dist = self.graph.distance
        n = self.graph.num_vertices

        best = math.inf
        u, v = 0, 1
        for i in range(n):
            for j in range(i + 1, n):
                if dist(i, j) < best:
                    best = dist(i, j)
                    u, v = i, j

        tour = [u, v]
        in_tour = {u, v}
        while len(tour) < n:
            best_cost = math.inf
            best_vertex = -1
            best_position = -1
            for k in range(n):
                if k in in_tour:
                    continue
                for pos, (a, b) in enumerate(zip(tour, tour[1:] + tour[:1])):
                    cost = dist(a, k) + dist(k, b) - dist(a, b)
                    if cost < best_cost:
                        best_cost = cost
                        best_vertex = k
                        best_position = pos + 1
            tour.insert(best_position, best_vertex)
            in_tour.add(best_vertex)
        return tour

    def two_opt(self, tour: Sequence[int]) -> list[int]:
        """Improve a tour with first-improvement 2-opt moves, at most 100 passes."""
        dist = self.graph.distance
        tour = list(tour)
        size = len(tour)
        if size < 4:
            return tour

        for _ in range(_MAX_TWO_OPT_ITERATIONS):
            if not self._apply_first_improvement(tour, size, dist):
                break
        return tour

    @staticmethod
    def _apply_first_improvement(
        tour: list[int], size: int, dist: Callable[[int, int], float]
    ) -> bool:
        for i in range(1, size - 2):
            for j in range(i + 2, size):
                after = tour[(j + 1) % size]
                current = dist(tour[i - 1], tour[i]) + dist(tour[j], after)
                candidate = dist(tour[i - 1], tour[j]) + dist(tour[i], after)
                if candidate < current - _TOLERANCE:
                    tour[i : j + 1] = tour[i : j + 1][::-1]
                    return True
        return False

    def _result(self, build: Callable[[], list[int]]) -> TSPResult:
        tour, elapsed = _timed(build)
        return TSPResult(tour, self.tour_distance(tour), elapsed)

    def solve_nearest_neighbor(self) -> TSPResult:
        """Nearest-neighbour tour starting at vertex 0."""
        return self._result(self.nearest_neighbor)

    def solve_nearest_neighbor_two_opt(self) -> TSPResult:
        """Nearest-neighbour tour improved with 2-opt."""
        return self._result(lambda: self.two_opt(self.nearest_neighbor()))

    def solve_cheapest_insertion(self) -> TSPResult:
        """Cheapest-insertion tour."""
        return self._result(self.cheapest_insertion)

    def solve_cheapest_insertion_two_opt(self) -> TSPResult:
        """Cheapest-insertion tour improved with 2-opt."""
        return self._result(lambda: self.two_opt(self.cheapest_insertion()))

    def tour_distance(self, tour: Sequence[int]) -> float:
        """Length of the closed tour, returning to the first vertex."""
        if not tour:
            return 0.0
        closing = list(tour[1:]) + [tour[0]]
        return sum(self.graph.distance(a, b) for a, b in zip(tour, closing))