"""Reading graphs from their text description.

A description is a vertex count on its own line, one label line per vertex
(ids 1..N in that order), then ``source dest weight`` triples terminated by a
triple whose source is 0 or by the end of the input. A file may hold several
descriptions back to back.
"""

import logging

from graphpaths.config import MAX_VERTICES
from graphpaths.errors import CapacityExceeded, GraphError, GraphFormatError
from graphpaths.graph import Graph
from graphpaths.vertex import VertexLabel

logger = logging.getLogger(__name__)


def _parse_int(token, what):
    try:
        return int(token)
    except ValueError:
        raise GraphFormatError(f"expected an integer {what}, got {token!r}") from None


def _read_count(lines):
    for line in lines:
        if line.strip():
            return _parse_int(line.strip(), "vertex count")
    return None


def _read_triples(lines):
    tokens = []
    for line in lines:
        tokens.extend(line.split())
        while len(tokens) >= 3:
            src, dst, weight = (_parse_int(t, "in edge") for t in tokens[:3])
            del tokens[:3]
            if src == 0:
                # rest of the terminating line is ignored
                return
            yield src, dst, weight
    if tokens:
        logger.warning("incomplete edge at end of input ignored: %s", " ".join(tokens))


def read_graph(stream, max_vertices=MAX_VERTICES):
    """Read one graph from ``stream``. Returns None at end of input."""
    lines = iter(stream)
    size = _read_count(lines)
    if size is None:
        return None
    if size < 0:
        raise GraphFormatError(f"vertex count can not be negative: {size}")
    if size > max_vertices:
        raise CapacityExceeded(max_vertices)

    graph = Graph(max_vertices)
    # get descriptions of vertices
    for v in range(1, size + 1):
        line = next(lines, None)
        if line is None:
            raise GraphFormatError(f"expected {size} vertex labels, got {v - 1}")
        graph.add_vertex(VertexLabel.from_line(line))

    # fill edges
    for src, dst, weight in _read_triples(lines):
        try:
            graph.insert_edge(src, dst, weight)
        except GraphError as e:
            logger.warning("edge %d %d %d skipped: %s", src, dst, weight, e)

    logger.info("read graph with %d vertices", size)
    return graph


def read_graphs(stream, max_vertices=MAX_VERTICES):
    """Yield every graph described in ``stream``."""
    lines = iter(stream)
    while True:
        graph = read_graph(lines, max_vertices)
        if graph is None:
            return
        yield graph


def load_graphs(path, max_vertices=MAX_VERTICES):
    with open(path, "r", encoding="utf-8") as f:
        return list(read_graphs(f, max_vertices))
