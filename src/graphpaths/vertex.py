from dataclasses import dataclass


@dataclass(frozen=True)
class VertexLabel:
    """Description of a vertex, read from one line of the graph file."""

    text: str = ""

    @classmethod
    def from_line(cls, line):
        # keep the line as written, only the line terminator goes away
        return cls(line.rstrip("\r\n"))

    def __str__(self):
        return self.text
