import pandas as pd

from graphpaths.config import UNREACHABLE
from graphpaths.pathfinding.path import full_path

HEADER = f"{'Description':<29}{'From':<6}{'To':<6}{'Dist':<6}Path"
INDENT = " " * 29


def _path_text(path):
    return " ".join(str(v) for v in path)


def format_all(graph):
    """
    Every vertex by its description, followed by one row per destination
    with the shortest distance and the path to it.
    """
    if len(graph) == 0:
        return "No graph to print. Please enter graph."

    table = graph.table
    lines = [HEADER]
    for src in graph.vertices():
        lines.append(str(graph.label(src)))
        for dst in graph.vertices():
            if dst == src:
                continue
            row = f"{INDENT}{src:<6}{dst:<6}"
            path = full_path(table, src, dst) if graph.has_edges(src) else None
            # if there is a path, print distance and shortest path
            if path is not None:
                row += f"{table.distance(src, dst):<6}{_path_text(path)}"
            else:
                row += UNREACHABLE
            lines.append(row.rstrip())
    return "\n".join(lines)


def format_pair(graph, src, dst):
    """Distance and path between two vertices, then the description of
    each vertex along the path."""
    graph.validate(src, dst)
    table = graph.table
    path = full_path(table, src, dst)
    if path is None or (src == dst and not graph.has_edges(src)):
        return f"{src:<4}{dst:<4}{UNREACHABLE}"

    lines = [f"{src:<4}{dst:<4}{table.distance(src, dst):<6}{_path_text(path)}"]
    # now print order of destinations
    lines.extend(str(graph.label(v)) for v in path)
    return "\n".join(lines)


def path_frame(graph):
    """One row per ordered pair of distinct vertices."""
    table = graph.table
    rows = []
    for src in graph.vertices():
        for dst in graph.vertices():
            if dst == src:
                continue
            path = full_path(table, src, dst)
            rows.append({
                "source": src,
                "dest": dst,
                "distance": table.distance(src, dst) if path is not None else None,
                "path": _path_text(path) if path is not None else UNREACHABLE,
            })
    return pd.DataFrame(rows, columns=["source", "dest", "distance", "path"])
