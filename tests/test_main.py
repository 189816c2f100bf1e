import os

import pandas as pd

from graphpaths.main import main
from graphpaths.visualize import draw_graph_with_path


def test_main_prints_all_graphs(data_file, capsys):
    assert main([data_file, "--pair", "1", "3"]) == 0
    out = capsys.readouterr().out
    assert out.count("Description") == 2
    assert "Aurora and 85th" in out
    assert "1   3   7     1 2 3" in out


def test_main_reports_invalid_pair(data_file, capsys):
    assert main([data_file, "--pair", "1", "9"]) == 0
    out = capsys.readouterr().out
    assert "[ERROR] Invalid vertex 9" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "Cannot read" in capsys.readouterr().err


def test_main_capacity(data_file, capsys):
    assert main([data_file, "--max-vertices", "4"]) == 1


def test_main_csv_and_matrix(data_file, tmp_path, capsys):
    out_csv = tmp_path / "paths.csv"
    assert main([data_file, "--csv", str(out_csv), "--matrix"]) == 0
    assert "inf" in capsys.readouterr().out

    first = pd.read_csv(tmp_path / "paths_1.csv")
    second = pd.read_csv(tmp_path / "paths_2.csv")
    assert len(first) == 20
    assert len(second) == 6
    row = second[(second.source == 1) & (second.dest == 3)].iloc[0]
    assert row.distance == 7


def test_main_plot(data_file, tmp_path):
    out = tmp_path / "plots" / "g.png"
    assert main([data_file, "--pair", "1", "4", "--plot", str(out)]) == 0
    assert os.path.exists(tmp_path / "plots" / "g_1.png")
    assert os.path.exists(tmp_path / "plots" / "g_2.png")


def test_draw_graph_with_path(abc_graph, tmp_path):
    abc_graph.find_shortest_paths()
    path = [1] + abc_graph.reconstruct_path(1, 3)
    out = draw_graph_with_path(abc_graph, path, str(tmp_path / "abc.png"), layout="circular")
    assert os.path.getsize(out) > 0
