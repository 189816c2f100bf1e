import logging
import numbers
from dataclasses import dataclass, field

import networkx as nx

from graphpaths.config import MAX_VERTICES
from graphpaths.errors import CapacityExceeded, InvalidVertex, InvalidWeight, NegativeWeight, StaleTable
from graphpaths.pathfinding.dijkstra import compute_all_pairs
from graphpaths.pathfinding.path import reconstruct_path
from graphpaths.vertex import VertexLabel

logger = logging.getLogger(__name__)


@dataclass
class Edge:
    dest: int  # id of the adjacent vertex
    weight: int  # weight of the edge


@dataclass
class Vertex:
    label: VertexLabel
    # outgoing edges, most recently inserted first
    edges: list = field(default_factory=list)


class Graph:
    """
    Directed, weighted graph stored as adjacency lists.

    Vertices get the ids 1..N in the order they are added. Shortest paths
    between all pairs are computed on request by :meth:`find_shortest_paths`;
    any change to the edges afterwards makes the table stale until the next
    computation.
    """

    def __init__(self, max_vertices=MAX_VERTICES):
        self.max_vertices = max_vertices
        self._vertices = []
        self._table = None
        self._stale = True

    def __len__(self):
        return len(self._vertices)

    def __repr__(self):
        n_edges = sum(len(v.edges) for v in self._vertices)
        return f"Graph(vertices={len(self)}, edges={n_edges})"

    # ---------------------------------------------------------------
    # vertices
    # ---------------------------------------------------------------
    def add_vertex(self, label):
        if len(self._vertices) >= self.max_vertices:
            raise CapacityExceeded(self.max_vertices)
        if not isinstance(label, VertexLabel):
            label = VertexLabel(str(label))
        self._vertices.append(Vertex(label))
        self._invalidate()
        return len(self._vertices)

    def is_valid_vertex(self, vertex):
        # bool is an int subclass but never a vertex id
        return (isinstance(vertex, numbers.Integral) and not isinstance(vertex, bool)
                and 1 <= vertex <= len(self._vertices))

    def validate(self, *vertices):
        """Check the ids and return them as plain ints."""
        for v in vertices:
            if not self.is_valid_vertex(v):
                raise InvalidVertex(v, len(self._vertices))
        return tuple(int(v) for v in vertices)

    def vertices(self):
        return range(1, len(self._vertices) + 1)

    def label(self, vertex):
        self.validate(vertex)
        return self._vertices[vertex - 1].label

    def edges(self, vertex):
        self.validate(vertex)
        return self._vertices[vertex - 1].edges

    def has_edges(self, vertex):
        return bool(self.edges(vertex))

    # ---------------------------------------------------------------
    # edges
    # ---------------------------------------------------------------
    def find_edge(self, source, dest):
        self.validate(source, dest)
        for edge in self._vertices[source - 1].edges:
            if edge.dest == dest:
                return edge
        return None

    def insert_edge(self, source, dest, weight):
        """Add the edge source -> dest, or overwrite its weight if it exists."""
        source, dest = self.validate(source, dest)
        if not isinstance(weight, numbers.Integral) or isinstance(weight, bool):
            raise InvalidWeight(weight)
        if weight < 0:
            raise NegativeWeight(weight)
        weight = int(weight)

        edge = self.find_edge(source, dest)
        if edge is not None:
            edge.weight = weight
        else:
            self._vertices[source - 1].edges.insert(0, Edge(dest, weight))
        self._invalidate()

    def remove_edge(self, source, dest):
        """Remove the edge source -> dest. Returns whether there was one."""
        self.validate(source, dest)
        edges = self._vertices[source - 1].edges
        for i, edge in enumerate(edges):
            if edge.dest == dest:
                del edges[i]
                self._invalidate()
                return True
        return False

    # ---------------------------------------------------------------
    # shortest paths
    # ---------------------------------------------------------------
    def _invalidate(self):
        if not self._stale:
            logger.debug("graph changed, shortest-path table is stale")
        self._stale = True

    @property
    def is_stale(self):
        return self._stale

    def find_shortest_paths(self):
        self._table = compute_all_pairs(self)
        self._stale = False
        return self._table

    @property
    def table(self):
        if self._table is None:
            raise StaleTable("shortest paths have not been computed yet")
        if self._stale:
            raise StaleTable("graph changed since shortest paths were computed")
        return self._table

    def distance(self, source, dest):
        self.validate(source, dest)
        return self.table.distance(source, dest)

    def reconstruct_path(self, source, dest):
        self.validate(source, dest)
        return reconstruct_path(self.table, source, dest)

    # ---------------------------------------------------------------
    # copies / export
    # ---------------------------------------------------------------
    def copy(self):
        other = Graph(self.max_vertices)
        other._vertices = [
            Vertex(v.label, [Edge(e.dest, e.weight) for e in v.edges])
            for v in self._vertices
        ]
        if self._table is not None:
            other._table = self._table.copy()
        other._stale = self._stale
        return other

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def to_networkx(self):
        G = nx.DiGraph()
        for v in self.vertices():
            G.add_node(v, label=str(self.label(v)))
        for v in self.vertices():
            for edge in self.edges(v):
                G.add_edge(v, edge.dest, weight=edge.weight)
        return G
