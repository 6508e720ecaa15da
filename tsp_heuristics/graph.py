"""Complete weighted undirected graphs stored as a dense distance matrix."""

from __future__ import annotations

import random
from collections.abc import Sequence


class Graph:
    """A symmetric graph on ``vertices`` nodes with a dense distance matrix."""

    def __init__(self, vertices: int) -> None:
        if vertices <= 0:
            raise ValueError("number of vertices must be positive")
        self._size = vertices
        self._matrix: list[list[float]] = [[0.0] * vertices for _ in range(vertices)]

    @property
    def num_vertices(self) -> int:
        """Number of vertices in the graph."""
        return self._size

    @property
    def matrix(self) -> list[list[float]]:
        """A copy of the distance matrix."""
        return [row[:] for row in self._matrix]

    def _check(self, source: int, target: int) -> None:
        if not (0 <= source < self._size and 0 <= target < self._size):
            raise IndexError("invalid vertex indices")

    def distance(self, source: int, target: int) -> float:
        """Return the weight of the edge between ``source`` and ``target``."""
        self._check(source, target)
        return self._matrix[source][target]

    def set_distance(self, source: int, target: int, weight: float) -> None:
        """Set the weight of the edge in both directions."""
        self._check(source, target)
        self._matrix[source][target] = float(weight)
        self._matrix[target][source] = float(weight)

    def generate_random_complete(
        self,
        min_weight: float = 1.0,
        max_weight: float = 100.0,
        rng: random.Random | None = None,
    ) -> None:
        """Fill the matrix with uniformly random symmetric weights; the diagonal is zero."""
        rng = rng if rng is not None else random.Random()
        for i in range(self._size):
            self._matrix[i][i] = 0.0
            for j in range(i + 1, self._size):
                weight = rng.uniform(min_weight, max_weight)
                self._matrix[i][j] = weight
                self._matrix[j][i] = weight

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[float]]) -> Graph:
        """Build a graph from a square distance matrix."""
        size = len(matrix)
        if any(len(row) != size for row in matrix):
            raise ValueError("distance matrix must be square")
        graph = cls(size)
        graph._matrix = [[float(value) for value in row] for row in matrix]
        return graph