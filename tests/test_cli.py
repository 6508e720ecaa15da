import io
import random
import re
from unittest.mock import patch

from tsp_heuristics.cli import (
    demonstrate_small_example,
    format_matrix,
    format_tour,
    main,
    run_full_analysis,
)
from tsp_heuristics.graph import Graph


def test_format_tour_closes_the_cycle():
    assert format_tour([2, 0, 1]) == "2 -> 0 -> 1 -> 2"


def test_format_tour_empty():
    assert format_tour([]) == ""


def test_format_matrix_layout():
    graph = Graph.from_matrix([[0, 12.5, 3], [12.5, 0, 7], [3, 7, 0]])
    lines = format_matrix(graph).splitlines()
    assert len(lines) == 4
    assert lines[0].split() == ["0", "1", "2"]
    assert all(len(line) == 5 + 8 * 3 for line in lines)
    assert lines[1].split() == ["0:", "---", "12.5", "3.0"]
    assert lines[3].split()[-1] == "---"


def test_main_clears_screen_with_clear_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    with patch("tsp_heuristics.cli.subprocess.run") as run:
        code = main([])
    assert code == 0
    assert "Programa finalizado." in capsys.readouterr().out
    assert run.call_count >= 1
    assert run.call_args.args[0] in (["clear"], "cls")


def test_main_tolerates_missing_clear_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    with patch("tsp_heuristics.cli.subprocess.run", side_effect=FileNotFoundError):
        code = main([])
    assert code == 0
    assert "Programa finalizado." in capsys.readouterr().out


def test_demonstration_reports_valid_tours():
    out = io.StringIO()
    results = demonstrate_small_example(out, random.Random(5))
    text = out.getvalue()
    assert "Matriz de Distancias Gerada:" in text
    assert len(results) == 4

    tour_lines = re.findall(r"^   Tour: (.*)$", text, flags=re.MULTILINE)
    assert len(tour_lines) == 4
    for line in tour_lines:
        vertices = [int(v) for v in line.split(" -> ")]
        assert len(vertices) == 7
        assert sorted(vertices[:6]) == list(range(6))
        assert vertices[-1] == vertices[0]

    distances = [float(d) for d in re.findall(r"^   Distancia: (\S+)$", text, re.MULTILINE)]
    assert len(distances) == 4
    assert distances[1] <= distances[0] + 0.01
    assert distances[3] <= distances[2] + 0.01
    assert text.count("Melhoria:") == 2


def test_full_analysis_can_be_cancelled(tmp_path):
    path = tmp_path / "results.csv"
    out = io.StringIO()
    result = run_full_analysis(io.StringIO("n\n"), out, random.Random(0), str(path))
    assert result is None
    assert "Analise cancelada." in out.getvalue()
    assert not path.exists()


def test_main_exits_on_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    with patch("tsp_heuristics.cli.subprocess.run"):
        code = main([])
    assert code == 0
    assert "Programa finalizado." in capsys.readouterr().out


def test_main_reports_invalid_option(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n\nabc\n\n0\n"))
    with patch("tsp_heuristics.cli.subprocess.run"):
        code = main([])
    text = capsys.readouterr().out
    assert code == 0
    assert text.count("ERRO: Opcao invalida!") == 2
    assert "Programa finalizado." in text


def test_main_runs_demonstration_then_pauses(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n\n0\n"))
    with patch("tsp_heuristics.cli.subprocess.run"):
        code = main([])
    text = capsys.readouterr().out
    assert code == 0
    assert "=== DEMONSTRACAO COM GRAFO PEQUENO ===" in text
    assert "Pressione ENTER para continuar..." in text


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with patch("tsp_heuristics.cli.subprocess.run"):
        code = main([])
    assert code == 0
    assert "=== MENU PRINCIPAL ===" in capsys.readouterr().out