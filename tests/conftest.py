import os

import matplotlib
import pytest

matplotlib.use("Agg")

from graphpaths.graph import Graph

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


@pytest.fixture
def data_file():
    return os.path.join(DATA_DIR, "graphs.txt")


@pytest.fixture
def abc_graph():
    # 1:A -> 2:B (5), 2:B -> 3:C (2), 1:A -> 3:C (10)
    graph = Graph()
    for label in "ABC":
        graph.add_vertex(label)
    graph.insert_edge(1, 2, 5)
    graph.insert_edge(2, 3, 2)
    graph.insert_edge(1, 3, 10)
    return graph


@pytest.fixture
def campus_graph():
    graph = Graph()
    for label in ["Aurora and 85th", "Green Lake Starbucks", "Woodland Park Zoo",
                  "Troll under bridge", "PCC"]:
        graph.add_vertex(label)
    edges = [(1, 2, 50), (1, 3, 20), (1, 5, 30), (2, 4, 10), (3, 2, 10),
             (3, 4, 50), (5, 2, 20), (5, 4, 25), (4, 3, 25)]
    for src, dst, w in edges:
        graph.insert_edge(src, dst, w)
    return graph
