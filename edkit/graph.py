"""An undirected weighted graph stored as an adjacency matrix."""

from __future__ import annotations

from dataclasses import dataclass

from edkit.queues import LinkedQueue


@dataclass(frozen=True)
class Vertex:
    """A graph vertex identified by its name."""

    name: str = ""

    def __str__(self) -> str:
        return self.name


class Graph:
    """A graph of at most ``max_vertices`` vertices with symmetric weighted edges."""

    def __init__(self, max_vertices: int = 50, null_edge: int = 0) -> None:
        if max_vertices < 1:
            raise ValueError("a graph needs room for at least one vertex")
        self.max_vertices = max_vertices
        self.null_edge = null_edge
        self._vertices: list[Vertex] = []
        self._marks: list[bool] = []
        self._edges = [[null_edge] * max_vertices for _ in range(max_vertices)]

    def _index(self, vertex: Vertex) -> int:
        for index, known in enumerate(self._vertices):
            if known.name == vertex.name:
                return index
        raise KeyError(vertex.name)

    def add_vertex(self, vertex: Vertex) -> None:
        """Append ``vertex``; raises OverflowError when the graph is full."""
        if len(self._vertices) >= self.max_vertices:
            raise OverflowError("graph already holds its maximum number of vertices")
        self._vertices.append(vertex)
        self._marks.append(False)

    def add_edge(self, from_vertex: Vertex, to_vertex: Vertex, weight: int) -> None:
        """Connect two vertices in both directions with ``weight``."""
        row = self._index(from_vertex)
        col = self._index(to_vertex)
        self._edges[row][col] = weight
        self._edges[col][row] = weight

    def weight(self, from_vertex: Vertex, to_vertex: Vertex) -> int:
        """Return the weight between two vertices, or the null edge value."""
        return self._edges[self._index(from_vertex)][self._index(to_vertex)]

    def adjacents(self, vertex: Vertex) -> LinkedQueue:
        """Return a queue of the vertices joined to ``vertex``, in insertion order."""
        row = self._edges[self._index(vertex)]
        queue = LinkedQueue()
        for other, weight in zip(self._vertices, row):
            if weight != self.null_edge:
                queue.enqueue(other)
        return queue

    def clear_marks(self) -> None:
        """Unmark every vertex."""
        self._marks = [False] * len(self._vertices)

    def mark(self, vertex: Vertex) -> None:
        """Mark ``vertex`` as visited."""
        self._marks[self._index(vertex)] = True

    def is_marked(self, vertex: Vertex) -> bool:
        """Tell whether ``vertex`` is marked."""
        return self._marks[self._index(vertex)]

    def matrix_text(self) -> str:
        """Render the adjacency matrix of the added vertices, one row per line."""
        count = len(self._vertices)
        return "".join(
            "".join(f"{weight}," for weight in row[:count]) + "\n"
            for row in self._edges[:count]
        )