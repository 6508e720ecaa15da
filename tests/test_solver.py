import random

import pytest

from tsp_heuristics.graph import Graph
from tsp_heuristics.solver import TSPSolver

SQUARE = [
    [0, 1, 2, 1],
    [1, 0, 1, 2],
    [2, 1, 0, 1],
    [1, 2, 1, 0],
]


def _random_graph(size, seed):
    graph = Graph(size)
    graph.generate_random_complete(rng=random.Random(seed))
    return graph


def _is_permutation(tour, size):
    return sorted(tour) == list(range(size))


@pytest.mark.parametrize("size", [1, 2])
def test_too_small_graph_rejected(size):
    with pytest.raises(ValueError):
        TSPSolver(Graph(size))


def test_nearest_neighbor_on_square():
    solver = TSPSolver(Graph.from_matrix(SQUARE))
    assert solver.nearest_neighbor() == [0, 1, 2, 3]


@pytest.mark.parametrize("start", [0, 3, 7])
def test_nearest_neighbor_is_permutation_from_start(start):
    solver = TSPSolver(_random_graph(10, start))
    tour = solver.nearest_neighbor(start)
    assert tour[0] == start
    assert _is_permutation(tour, 10)


def test_nearest_neighbor_invalid_start():
    solver = TSPSolver(_random_graph(5, 0))
    with pytest.raises(IndexError):
        solver.nearest_neighbor(5)


@pytest.mark.parametrize("seed", range(5))
def test_cheapest_insertion_is_permutation(seed):
    solver = TSPSolver(_random_graph(12, seed))
    tour = solver.cheapest_insertion()
    assert len(tour) == 12
    assert sorted(tour) == list(range(12))


def test_two_opt_does_not_mutate_input():
    solver = TSPSolver(Graph.from_matrix(SQUARE))
    original = [0, 2, 1, 3]
    solver.two_opt(original)
    assert original == [0, 2, 1, 3]


@pytest.mark.parametrize("seed", range(5))
def test_two_opt_never_worsens_and_keeps_start(seed):
    solver = TSPSolver(_random_graph(15, seed))
    tour = solver.nearest_neighbor()
    improved = solver.two_opt(tour)
    assert improved[0] == tour[0]
    assert _is_permutation(improved, 15)
    assert solver.tour_distance(improved) <= solver.tour_distance(tour) + 1e-9


def test_two_opt_on_triangle_is_identity():
    solver = TSPSolver(_random_graph(3, 2))
    assert solver.two_opt([2, 0, 1]) == [2, 0, 1]


def test_tour_distance_empty():
    solver = TSPSolver(_random_graph(4, 0))
    assert solver.tour_distance([]) == 0.0


def test_tour_distance_is_rotation_invariant():
    solver = TSPSolver(_random_graph(6, 4))
    tour = [0, 3, 1, 5, 2, 4]
    rotated = tour[2:] + tour[:2]
    assert solver.tour_distance(tour) == pytest.approx(solver.tour_distance(rotated))


def test_tour_distance_on_square():
    solver = TSPSolver(Graph.from_matrix(SQUARE))
    assert solver.tour_distance([0, 1, 2, 3]) == 4.0


@pytest.mark.parametrize(
    "method",
    [
        "solve_nearest_neighbor",
        "solve_nearest_neighbor_two_opt",
        "solve_cheapest_insertion",
        "solve_cheapest_insertion_two_opt",
    ],
)
def test_solve_results_are_consistent(method):
    solver = TSPSolver(_random_graph(20, 5))
    result = getattr(solver, method)()
    assert _is_permutation(result.tour, 20)
    assert result.total_distance == pytest.approx(solver.tour_distance(result.tour))
    assert result.execution_time >= 0.0


def test_two_opt_variants_not_worse_than_constructions():
    solver = TSPSolver(_random_graph(25, 9))
    nn = solver.solve_nearest_neighbor()
    nn_opt = solver.solve_nearest_neighbor_two_opt()
    ci = solver.solve_cheapest_insertion()
    ci_opt = solver.solve_cheapest_insertion_two_opt()
    assert nn_opt.total_distance <= nn.total_distance + 1e-9
    assert ci_opt.total_distance <= ci.total_distance + 1e-9