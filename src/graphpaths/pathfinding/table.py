from dataclasses import dataclass

import numpy as np

from graphpaths.config import INF


@dataclass
class PathEntry:
    visited: bool = False  # whether the destination has been settled
    distance: float = INF  # shortest known distance from the source
    predecessor: int = None  # previous vertex on that path, None if none


class PathTable:
    """
    Dense table of shortest-path entries, one row per source vertex.
    Vertex ids are 1-based, the same ids the graph hands out.
    """

    def __init__(self, size):
        self.size = size
        self._rows = []
        self.reset()

    def reset(self):
        # every entry back to unvisited / INF / no predecessor
        self._rows = [[PathEntry() for _ in range(self.size)] for _ in range(self.size)]

    def _check(self, vertex):
        if not 1 <= vertex <= self.size:
            raise IndexError(f"vertex {vertex} outside table of size {self.size}")

    def entry(self, source, dest):
        self._check(source)
        self._check(dest)
        return self._rows[source - 1][dest - 1]

    def row(self, source):
        self._check(source)
        return self._rows[source - 1]

    def distance(self, source, dest):
        return self.entry(source, dest).distance

    def predecessor(self, source, dest):
        return self.entry(source, dest).predecessor

    def is_reachable(self, source, dest):
        return self.entry(source, dest).distance != INF

    def distance_matrix(self):
        """Distances as a float matrix, ``np.inf`` where there is no path.

        Row and column ``i`` belong to vertex ``i + 1``.
        """
        matrix = np.full((self.size, self.size), np.inf)
        for i, row in enumerate(self._rows):
            for j, e in enumerate(row):
                if e.distance != INF:
                    matrix[i, j] = e.distance
        return matrix

    def copy(self):
        other = PathTable(0)
        other.size = self.size
        other._rows = [
            [PathEntry(e.visited, e.distance, e.predecessor) for e in row]
            for row in self._rows
        ]
        return other

    def __eq__(self, other):
        if not isinstance(other, PathTable):
            return NotImplemented
        return self.size == other.size and self._rows == other._rows

    def __repr__(self):
        return f"PathTable(size={self.size})"
