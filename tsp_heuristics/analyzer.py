"""Repeated-trial performance measurement of the TSP heuristics."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from tsp_heuristics.graph import Graph
from tsp_heuristics.solver import TSPResult, TSPSolver

DEFAULT_INSTANCES = 10

Algorithm = Callable[[Graph], TSPResult]

_SEPARATOR = "-" * 82
_CSV_HEADER = (
    "Algoritmo,Tamanho,Tempo_Medio(ms),Distancia_Media,Desvio_Tempo,Desvio_Distancia"
)

# Kept in name order, which is the order the algorithms are run and reported in.
ALGORITHMS: dict[str, Algorithm] = dict(
    sorted(
        {
            "Vizinho Mais Proximo": lambda g: TSPSolver(g).solve_nearest_neighbor(),
            "VMP + 2-opt": lambda g: TSPSolver(g).solve_nearest_neighbor_two_opt(),
            "Insercao Mais Barata": lambda g: TSPSolver(g).solve_cheapest_insertion(),
            "IMB + 2-opt": lambda g: TSPSolver(g).solve_cheapest_insertion_two_opt(),
        }.items()
    )
)


@dataclass
class PerformanceResult:
    """Averaged measurements of one algorithm on graphs of one size."""

    graph_size: int
    avg_time: float
    avg_distance: float
    time_std_dev: float
    distance_std_dev: float
    algorithm: str


def standard_deviation(values: Sequence[float], mean: float) -> float:
    """Population standard deviation of ``values`` around ``mean``."""
    if not values:
        return 0.0
    variance = sum((value - mean) ** 2 for value in values) / len(values)
    return math.sqrt(variance)


def analyze_algorithm(
    graph_size: int,
    name: str,
    algorithm: Algorithm,
    instances: int = DEFAULT_INSTANCES,
    rng: random.Random | None = None,
) -> PerformanceResult:
    """Run ``algorithm`` on ``instances`` random complete graphs and average the results."""
    if instances <= 0:
        raise ValueError("number of instances must be positive")
    rng = rng if rng is not None else random.Random()

    times: list[float] = []
    distances: list[float] = []
    for _ in range(instances):
        graph = Graph(graph_size)
        graph.generate_random_complete(rng=rng)
        result = algorithm(graph)
        times.append(result.execution_time)
        distances.append(result.total_distance)

    avg_time = sum(times) / instances
    avg_distance = sum(distances) / instances
    return PerformanceResult(
        graph_size,
        avg_time,
        avg_distance,
        standard_deviation(times, avg_time),
        standard_deviation(distances, avg_distance),
        name,
    )


def analyze_all(
    sizes: Sequence[int],
    instances: int = DEFAULT_INSTANCES,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> list[PerformanceResult]:
    """Measure every known algorithm on every graph size, reporting progress to ``out``."""
    out = out if out is not None else sys.stdout
    rng = rng if rng is not None else random.Random()

    out.write("Executando analise de desempenho...\n")
    out.write("Tamanhos de grafo: " + "".join(f"{size} " for size in sizes) + "\n")
    out.write(f"Instancias por tamanho: {instances}\n\n")

    total = len(sizes) * len(ALGORITHMS)
    results: list[PerformanceResult] = []
    step = 0
    for size in sizes:
        for name, algorithm in ALGORITHMS.items():
            step += 1
            out.write(f"Progresso: {step}/{total} - Testando {name} (n={size})...\n")
            out.flush()
            results.append(analyze_algorithm(size, name, algorithm, instances, rng))
    return results


def save_results(
    results: Iterable[PerformanceResult], path: str | Path = "performance_results.csv"
) -> None:
    """Write the results as CSV to ``path``."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(_CSV_HEADER + "\n")
        for r in results:
            handle.write(
                f"{r.algorithm},{r.graph_size},{r.avg_time:.3f},{r.avg_distance:.2f},"
                f"{r.time_std_dev:.3f},{r.distance_std_dev:.2f}\n"
            )


def format_results(results: Iterable[PerformanceResult]) -> str:
    """Render the results as a fixed-width table."""
    header = (
        f"{'Algoritmo':>20}{'Tamanho':>8}{'Tempo(ms)':>12}"
        f"{'Distancia':>15}{'Desv.Tempo':>12}{'Desv.Dist':>15}"
    )
    rows = [
        f"{r.algorithm:>20}{r.graph_size:>8}{r.avg_time:>12.2f}"
        f"{r.avg_distance:>15.1f}{r.time_std_dev:>12.2f}{r.distance_std_dev:>15.1f}"
        for r in results
    ]
    lines = [
        "",
        "=== RESULTADOS DA ANALISE DE DESEMPENHO ===",
        _SEPARATOR,
        header,
        _SEPARATOR,
        *rows,
        _SEPARATOR,
    ]
    return "\n".join(lines) + "\n"


def format_report(results: Iterable[PerformanceResult]) -> str:
    """Render a per-size comparison marking the fastest and shortest algorithms."""
    by_size: dict[int, list[PerformanceResult]] = {}
    for result in results:
        by_size.setdefault(result.graph_size, []).append(result)

    lines = ["", "=== RELATORIO COMPARATIVO ==="]
    for size in sorted(by_size):
        group = by_size[size]
        lines += ["", f"Tamanho do grafo: {size} vertices", "-" * 50]
        best_time = min(group, key=lambda r: r.avg_time)
        best_distance = min(group, key=lambda r: r.avg_distance)
        for r in group:
            marks = ""
            if r.algorithm == best_time.algorithm:
                marks += "(MELHOR TEMPO) "
            if r.algorithm == best_distance.algorithm:
                marks += "(MELHOR DISTANCIA) "
            lines.append(
                f"{r.algorithm:>20}: {marks}"
                f"Tempo: {r.avg_time:.2f}ms, Distancia: {r.avg_distance:.1f}"
            )
    return "\n".join(lines) + "\n"


def print_results(results: Iterable[PerformanceResult], out: TextIO | None = None) -> None:
    """Write the results table to ``out``."""
    (out if out is not None else sys.stdout).write(format_results(results))


def print_report(results: Iterable[PerformanceResult], out: TextIO | None = None) -> None:
    """Write the comparative report to ``out``."""
    (out if out is not None else sys.stdout).write(format_report(results))