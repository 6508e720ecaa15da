# tsp-heuristics

Heuristics for the symmetric travelling salesman problem on complete graphs.
The package has two construction methods and one local-search improvement. It
also has a small harness that benchmarks them on random instances.

- **Nearest neighbour** (`TSPSolver.nearest_neighbor`) starts at a vertex, vertex 0 by default. At each step it moves to the closest unvisited vertex.
- **Cheapest insertion** (`TSPSolver.cheapest_insertion`) starts from the cheapest edge. It then repeatedly inserts the vertex and position that add the least length.
- **2-opt** (`TSPSolver.two_opt`) reverses a tour segment whenever that shortens the tour, taking the first improving move it finds. It stops when no move improves the tour or after at most 100 passes.

The package has no dependencies beyond the Python standard library. It needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
tsp-heuristics
```

This opens an interactive menu that reads its choices from standard input. The prompts and reports are in Portuguese.

- **1**: a demonstration on a random 6-vertex graph with weights between 10 and 50. It prints the distance matrix, then the tour, length and time of each heuristic. For the 2-opt variants it also prints the percentage improvement.
- **2**: a quick benchmark on sizes 20, 50, 100 and 150, with 5 instances per size.
- **3**: a full benchmark on sizes 50, 100, 200, 300, 500, 750, 1000 and 2000, with 10 instances per size. It asks for confirmation (`s`/`S`) first. It saves the results to `resultados_tsp.csv` in the current directory.
- **0**: quit.

After each action the menu waits for ENTER. An error raised during an action is reported, and the menu keeps running. The screen is cleared with the platform's `clear` / `cls` command.

## Library use

### Graphs

```python
import random

from tsp_heuristics.graph import Graph

graph = Graph(8)
graph.generate_random_complete(1.0, 100.0, random.Random(42))
print(graph.num_vertices, graph.distance(0, 1))
```

- `Graph(vertices)` creates an all-zero matrix. It raises `ValueError` if `vertices` is not positive.
- `generate_random_complete(min_weight=1.0, max_weight=100.0, rng=None)` fills the matrix with uniformly random symmetric weights. The diagonal is set to zero.
- `distance(source, target)` reads one weight. `set_distance(source, target, weight)` sets one weight in both directions. Both raise `IndexError` for vertices out of range.
- `Graph.from_matrix(matrix)` builds a graph from a square matrix. It raises `ValueError` if the matrix is not square.
- `matrix` returns a copy of the distance matrix.

### Solving

```python
from tsp_heuristics.solver import TSPSolver

solver = TSPSolver(graph)
result = solver.solve_cheapest_insertion_two_opt()
print(result.tour, result.total_distance, result.execution_time)
```

`TSPSolver` needs a graph with at least 3 vertices and raises `ValueError` otherwise. It provides:

- `nearest_neighbor(start=0)`, `cheapest_insertion()` and `two_opt(tour)`, which return tours as lists of vertex indices
- `tour_distance(tour)`, which gives the length of the closed tour, including the return to the first vertex
- `solve_nearest_neighbor()`, `solve_nearest_neighbor_two_opt()`, `solve_cheapest_insertion()` and `solve_cheapest_insertion_two_opt()`

Each `solve_*` method returns a `TSPResult` with the fields `tour`, `total_distance` and `execution_time`. The time is in milliseconds.

### Benchmarking

```python
import random

from tsp_heuristics.analyzer import analyze_all, print_results, print_report, save_results

results = analyze_all([20, 50], 5, random.Random(1))
print_results(results)
print_report(results)
save_results(results, "results.csv")
```

The benchmarking functions are:

- `analyze_all(sizes, instances=10, rng=None, out=None)` runs every algorithm in `ALGORITHMS` on every size. It writes progress lines to `out`, which is stdout by default, and returns a list of `PerformanceResult`.
- `analyze_algorithm(graph_size, name, algorithm, instances=10, rng=None)` measures a single algorithm. The `algorithm` argument is any callable that takes a `Graph` and returns a `TSPResult`.
- `PerformanceResult` holds the mean time and distance and their population standard deviations. `standard_deviation(values, mean)` computes the same measure on its own.
- `format_results` and `format_report` return the results table and the per-size comparison as strings. `print_results` and `print_report` write them to a stream.
- `save_results(results, path="performance_results.csv")` writes a CSV file with these columns:
  `Algoritmo,Tamanho,Tempo_Medio(ms),Distancia_Media,Desvio_Tempo,Desvio_Distancia`

## What it does not do

- The package does not read instance files. Graphs are either generated at random or built from a matrix in code.
- The solvers are heuristics only. No solver gives optimal tours or lower bounds.