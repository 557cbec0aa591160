"""Undirected graph kept as adjacency lists, with a tree test."""

from __future__ import annotations


class DuplicateEdgeError(ValueError):
    """Raised when an edge that already exists is added again."""

    def __init__(self, number_1: int, number_2: int) -> None:
        super().__init__(f"edge {number_1} -- {number_2} already exists")
        self.number_1 = number_1
        self.number_2 = number_2


class Graph:
    """Undirected graph on vertices numbered from zero.

    Each vertex lists its neighbours with the most recently added first.
    """

    def __init__(self, number_vertices: int) -> None:
        if number_vertices < 0:
            raise ValueError("the number of vertices must not be negative")
        self._adjacency: dict[int, list[int]] = {
            number: [] for number in range(number_vertices)
        }

    @property
    def number_vertices(self) -> int:
        return len(self._adjacency)

    @property
    def number_edges(self) -> int:
        return sum(len(adjacent) for adjacent in self._adjacency.values()) // 2

    def _require(self, number: int) -> list[int]:
        try:
            return self._adjacency[number]
        except KeyError:
            raise KeyError(f"no vertex {number}") from None

    def add_edge(self, number_1: int, number_2: int) -> None:
        """Join two distinct vertices; DuplicateEdgeError if already joined."""
        adjacent_1 = self._require(number_1)
        adjacent_2 = self._require(number_2)
        if number_1 == number_2:
            raise ValueError("a loop is not allowed in an undirected graph")
        if number_2 in adjacent_1 or number_1 in adjacent_2:
            raise DuplicateEdgeError(number_1, number_2)
        adjacent_1.insert(0, number_2)
        adjacent_2.insert(0, number_1)

    def vertices(self) -> list[int]:
        """Vertex numbers in order."""
        return list(self._adjacency)

    def neighbours(self, number: int) -> list[int]:
        """Neighbours of a vertex, most recently joined first."""
        return list(self._require(number))

    def is_tree(self, vertex_to_del: int = -1) -> bool:
        """Whether the graph, without ``vertex_to_del`` and its edges, is a tree.

        A number that is not a vertex removes nothing.
        """
        remaining = [number for number in self._adjacency if number != vertex_to_del]
        if not remaining:
            return False
        start = remaining[0]
        visited = {start}
        stack = [start]
        while stack:
            vertex = stack.pop()
            for neighbour in self._adjacency[vertex]:
                if neighbour != vertex_to_del and neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        if len(visited) != len(remaining):
            return False
        edges = self.number_edges - len(self._adjacency.get(vertex_to_del, ()))
        return edges + 1 == len(remaining)

    def delete_vertex(self, number: int) -> None:
        """Remove a vertex together with its edges."""
        adjacent = self._require(number)
        del self._adjacency[number]
        for neighbour in adjacent:
            self._adjacency[neighbour].remove(number)