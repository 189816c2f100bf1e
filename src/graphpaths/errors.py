class GraphError(Exception):
    """Base class for every recoverable graph error."""


class InvalidVertex(GraphError):
    def __init__(self, vertex, size):
        super().__init__(f"Invalid vertex {vertex!r}: expected an id between 1 and {size}")
        self.vertex = vertex
        self.size = size


class InvalidWeight(GraphError):
    def __init__(self, weight, reason="must be a non-negative integer"):
        super().__init__(f"Invalid weight {weight!r}: {reason}")
        self.weight = weight


class NegativeWeight(InvalidWeight):
    def __init__(self, weight):
        super().__init__(weight, "can not be negative")


class CapacityExceeded(GraphError):
    def __init__(self, capacity):
        super().__init__(f"Graph can hold at most {capacity} vertices")
        self.capacity = capacity


class StaleTable(GraphError):
    """Shortest paths were queried before being computed, or after a mutation."""


class GraphFormatError(GraphError):
    """The graph description could not be parsed."""
