"""Interactive menu for demonstrating and benchmarking the TSP heuristics."""

from __future__ import annotations

import argparse
import os
import random
import subprocess
import sys
from collections.abc import Sequence
from typing import TextIO

from tsp_heuristics.analyzer import analyze_all, print_report, print_results, save_results
from tsp_heuristics.analyzer import PerformanceResult
from tsp_heuristics.graph import Graph
from tsp_heuristics.solver import TSPResult, TSPSolver

QUICK_SIZES = (20, 50, 100, 150)
QUICK_INSTANCES = 5
FULL_SIZES = (50, 100, 200, 300, 500, 750, 1000, 2000)
FULL_INSTANCES = 10
DEMO_SIZE = 6

_RULE = "=" * 58
_HEADER = (
    f"{_RULE}\n"
    "         TRABALHO FINAL - TEORIA E APLICACOES EM GRAFOS\n"
    "       Problema do Caixeiro Viajante Simetrico\n"
    f"{_RULE}\n"
    "\n"
    "Heuristicas Implementadas:\n"
    "  - Vizinho Mais Proximo (Construtiva)\n"
    "  - Insercao Mais Barata (Construtiva)\n"
    "  - 2-opt (Busca Local)\n"
    "\n"
)
_MENU = (
    "\n=== MENU PRINCIPAL ===\n"
    "  1. Demonstracao com Grafo Pequeno\n"
    "  2. Teste Rapido\n"
    "  3. Analise Completa\n"
    "  0. Sair\n"
    "\n"
    "Escolha uma opcao: "
)


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def format_tour(tour: Sequence[int]) -> str:
    """Render a closed tour as ``a -> b -> ... -> a``."""
    if not tour:
        return ""
    return " -> ".join(str(v) for v in [*tour, tour[0]])


def format_matrix(graph: Graph) -> str:
    """Render the distance matrix with ``---`` on the diagonal."""
    n = graph.num_vertices
    lines = ["     " + "".join(f"{i:>8}" for i in range(n))]
    for i in range(n):
        cells = "".join(
            f"{'---':>8}" if i == j else f"{graph.distance(i, j):>8.1f}" for j in range(n)
        )
        lines.append(f"{i:>3}: {cells}")
    return "\n".join(lines)


def _show_header(out: TextIO) -> None:
    clear_screen()
    out.write(_HEADER)


def _pause(inp: TextIO, out: TextIO) -> None:
    out.write("\nPressione ENTER para continuar...")
    out.flush()
    inp.readline()


def _write_result(
    out: TextIO, label: str, result: TSPResult, baseline: TSPResult | None = None
) -> None:
    out.write(f"\n{label}:\n")
    out.write(f"   Tour: {format_tour(result.tour)}\n")
    out.write(f"   Distancia: {result.total_distance:.2f}\n")
    out.write(f"   Tempo: {result.execution_time:.3f} ms\n")
    if baseline is not None:
        gain = (baseline.total_distance - result.total_distance) / baseline.total_distance
        out.write(f"   Melhoria: {gain * 100:.1f}%\n")


def _write_sizes(out: TextIO, sizes: Sequence[int]) -> None:
    out.write("Tamanhos de grafos: " + "".join(f"{s} " for s in sizes) + "\n\n")


def demonstrate_small_example(
    out: TextIO | None = None, rng: random.Random | None = None
) -> list[TSPResult]:
    """Solve a random 6-vertex instance with every heuristic and show the tours."""
    out = out if out is not None else sys.stdout
    out.write("\n=== DEMONSTRACAO COM GRAFO PEQUENO ===\n")
    out.write(f"Gerando grafo completo com {DEMO_SIZE} vertices para visualizacao...\n")

    graph = Graph(DEMO_SIZE)
    graph.generate_random_complete(10.0, 50.0, rng)
    out.write("\nMatriz de Distancias Gerada:\n")
    out.write(format_matrix(graph) + "\n")

    solver = TSPSolver(graph)
    out.write("\n=== APLICANDO HEURISTICAS ===\n")

    nn = solver.solve_nearest_neighbor()
    _write_result(out, "1. VIZINHO MAIS PROXIMO", nn)
    nn_opt = solver.solve_nearest_neighbor_two_opt()
    _write_result(out, "2. VIZINHO MAIS PROXIMO + 2-OPT", nn_opt, nn)
    ci = solver.solve_cheapest_insertion()
    _write_result(out, "3. INSERCAO MAIS BARATA", ci)
    ci_opt = solver.solve_cheapest_insertion_two_opt()
    _write_result(out, "4. INSERCAO MAIS BARATA + 2-OPT", ci_opt, ci)
    return [nn, nn_opt, ci, ci_opt]


def run_quick_analysis(
    out: TextIO | None = None, rng: random.Random | None = None
) -> list[PerformanceResult]:
    """Benchmark every heuristic on a few small sizes and print the tables."""
    out = out if out is not None else sys.stdout
    out.write("\n=== TESTE RAPIDO ===\n")
    out.write(f"Executando teste com {QUICK_INSTANCES} instancias por tamanho...\n")
    _write_sizes(out, QUICK_SIZES)
    results = analyze_all(QUICK_SIZES, QUICK_INSTANCES, rng, out)
    print_results(results, out)
    print_report(results, out)
    return results


def run_full_analysis(
    inp: TextIO | None = None,
    out: TextIO | None = None,
    rng: random.Random | None = None,
    path: str = "resultados_tsp.csv",
) -> list[PerformanceResult] | None:
    """Ask for confirmation, then benchmark all sizes and save the results as CSV."""
    inp = inp if inp is not None else sys.stdin
    out = out if out is not None else sys.stdout
    out.write("\n=== ANALISE COMPLETA ===\n")
    out.write(f"Executando analise com {FULL_INSTANCES} instancias por dimensao...\n")
    _write_sizes(out, FULL_SIZES)
    out.write("AVISO: Esta analise pode levar varios minutos para completar.\n")
    out.write("Continuar? (s/n): ")
    out.flush()

    answer = inp.readline().strip()
    if answer[:1] not in ("s", "S"):
        out.write("Analise cancelada.\n")
        return None

    results = analyze_all(FULL_SIZES, FULL_INSTANCES, rng, out)
    print_results(results, out)
    print_report(results, out)
    save_results(results, path)
    out.write(f"\nAnalise concluida. Resultados salvos em '{path}'\n")
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu until the user chooses to leave."""
    parser = argparse.ArgumentParser(
        prog="tsp-heuristics",
        description="Interactive demonstration and benchmark of symmetric TSP heuristics.",
    )
    parser.parse_args(argv)

    inp, out = sys.stdin, sys.stdout
    rng = random.Random()
    actions = {
        1: lambda: demonstrate_small_example(out, rng),
        2: lambda: run_quick_analysis(out, rng),
        3: lambda: run_full_analysis(inp, out, rng),
    }

    while True:
        _show_header(out)
        out.write(_MENU)
        out.flush()
        line = inp.readline()
        if not line:
            return 0
        try:
            option = int(line.strip())
        except ValueError:
            option = None

        if option == 0:
            clear_screen()
            out.write("Programa finalizado.\n")
            return 0

        action = actions.get(option)
        if action is None:
            out.write("ERRO: Opcao invalida! Pressione ENTER para tentar novamente...")
            out.flush()
            inp.readline()
            continue

        _show_header(out)
        try:
            action()
        except Exception as exc:  # the menu reports any failure and keeps running
            out.write(f"ERRO: Erro durante a execucao: {exc}\n")
        _pause(inp, out)


if __name__ == "__main__":
    sys.exit(main())