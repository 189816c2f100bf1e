import pandas as pd
import pytest

from graphpaths.display import HEADER, format_all, format_pair, path_frame
from graphpaths.errors import InvalidVertex, StaleTable
from graphpaths.graph import Graph


def rows(text):
    return [line.split() for line in text.splitlines()]


def test_format_all(campus_graph):
    campus_graph.find_shortest_paths()
    text = format_all(campus_graph)
    lines = text.splitlines()

    assert lines[0] == HEADER
    assert lines[0].split() == ["Description", "From", "To", "Dist", "Path"]
    assert lines[1] == "Aurora and 85th"
    assert ["1", "4", "40", "1", "3", "2", "4"] in rows(text)
    assert ["2", "1", "--"] in rows(text)
    # every vertex has a label line and n-1 destination rows
    assert len(lines) == 1 + 5 * 5


def test_format_all_source_without_edges(abc_graph):
    abc_graph.find_shortest_paths()
    table_rows = rows(format_all(abc_graph))
    assert ["1", "3", "7", "1", "2", "3"] in table_rows
    assert ["3", "1", "--"] in table_rows
    assert ["3", "2", "--"] in table_rows


def test_format_all_empty_graph():
    assert format_all(Graph()) == "No graph to print. Please enter graph."


def test_format_all_requires_table(abc_graph):
    with pytest.raises(StaleTable):
        format_all(abc_graph)


def test_format_pair(campus_graph):
    campus_graph.find_shortest_paths()
    lines = format_pair(campus_graph, 1, 4).splitlines()
    assert lines[0].split() == ["1", "4", "40", "1", "3", "2", "4"]
    assert lines[1:] == ["Aurora and 85th", "Woodland Park Zoo",
                         "Green Lake Starbucks", "Troll under bridge"]


def test_format_pair_unreachable(campus_graph):
    campus_graph.find_shortest_paths()
    assert format_pair(campus_graph, 2, 1).split() == ["2", "1", "--"]


def test_format_pair_invalid_vertex(campus_graph):
    campus_graph.find_shortest_paths()
    with pytest.raises(InvalidVertex):
        format_pair(campus_graph, 1, 6)


def test_path_frame(abc_graph):
    abc_graph.find_shortest_paths()
    df = path_frame(abc_graph)
    assert list(df.columns) == ["source", "dest", "distance", "path"]
    assert len(df) == 6

    row = df[(df.source == 1) & (df.dest == 3)].iloc[0]
    assert row.distance == 7
    assert row.path == "1 2 3"

    unreachable = df[(df.source == 2) & (df.dest == 1)].iloc[0]
    assert pd.isna(unreachable.distance)
    assert unreachable.path == "--"
