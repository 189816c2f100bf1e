import heapq
import itertools
import logging

from graphpaths.config import INF
from graphpaths.pathfinding.table import PathTable

logger = logging.getLogger(__name__)


def dijkstra(graph, table, src):
    """
    Single-source Dijkstra from ``src``, written into row ``src`` of ``table``.

    The frontier keeps stale entries (lazy deletion): a vertex whose distance
    improves is pushed again and the outdated entry is skipped when popped.
    Ties on distance are broken by insertion order.
    """
    n = len(graph)
    row = table.row(src)
    row[src - 1].distance = 0

    counter = itertools.count()
    # (distance, insertion order, vertex)
    pq = [(0, next(counter), src)]
    for node in graph.vertices():
        if node != src:
            pq.append((INF, next(counter), node))
    heapq.heapify(pq)

    # repeat n-1 times
    for _ in range(n - 1):
        node = None
        while pq:
            _, _, candidate = heapq.heappop(pq)
            # skip outdated elements
            if not row[candidate - 1].visited:
                node = candidate
                break
        if node is None:
            # frontier exhausted, nothing else is reachable
            break

        current = row[node - 1]
        current.visited = True

        for edge in graph.edges(node):
            target = row[edge.dest - 1]
            new_dist = current.distance + edge.weight
            if not target.visited and new_dist < target.distance:  # dv > du + w
                target.distance = new_dist
                target.predecessor = node
                heapq.heappush(pq, (new_dist, next(counter), edge.dest))


def compute_all_pairs(graph):
    """Shortest paths between every pair of vertices of ``graph``.

    Only vertices with at least one outgoing edge are used as sources, the
    rows of the others stay unreachable.
    """
    table = PathTable(len(graph))
    for src in graph.vertices():
        # ensure source vertex is connected to another vertex
        if graph.has_edges(src):
            dijkstra(graph, table, src)
    logger.debug("computed shortest paths for %d vertices", len(graph))
    return table
