"""Reading a graph description from a text stream or file."""

from __future__ import annotations

import re
from pathlib import Path
from typing import TextIO, Union

from dslabs.graphs.graph import DuplicateEdgeError, Graph

MAX_COUNT = 1000000

FILE_ERROR = "Ошибка чтения файла!"

_DIGITS = re.compile(r"[0-9]+")


class GraphFormatError(ValueError):
    """Raised when a graph description is malformed."""


def parse_int(text: str, maximum: int) -> int:
    """Parse a whole decimal number in the range 0..maximum-1."""
    if not _DIGITS.fullmatch(text):
        raise GraphFormatError(f"not a non-negative integer: {text!r}")
    value = int(text)
    if value >= maximum:
        raise GraphFormatError(f"{value} is outside 0..{maximum - 1}")
    return value


def _read_int(stream: TextIO, maximum: int, message: str) -> int:
    text = stream.readline().split("\n", 1)[0]
    if not text:
        raise GraphFormatError(message)
    try:
        return parse_int(text, maximum)
    except GraphFormatError:
        raise GraphFormatError(message) from None


def read_graph(stream: TextIO) -> Graph:
    """Read the vertex count, the edge count and the edges.

    Each edge is a blank line followed by its two vertex numbers, one per line.
    """
    number_vertices = _read_int(stream, MAX_COUNT, "Ошибка чтения файла")
    if number_vertices < 2:
        raise GraphFormatError("Слишком мало вершин в графе!")
    number_edges = _read_int(stream, MAX_COUNT, FILE_ERROR)

    graph = Graph(number_vertices)
    for _ in range(number_edges):
        if stream.read(1) != "\n":
            raise GraphFormatError(FILE_ERROR)
        vertex_1 = _read_int(stream, number_vertices, FILE_ERROR)
        vertex_2 = _read_int(stream, number_vertices, FILE_ERROR)
        if vertex_1 == vertex_2:
            raise GraphFormatError("Петля невозможна в неорграфе!")
        try:
            graph.add_edge(vertex_1, vertex_2)
        except DuplicateEdgeError as exc:
            raise GraphFormatError("Ребро уже есть в графе!") from exc
    return graph


def load_graph(path: Union[str, Path]) -> Graph:
    """Read a graph from a file; OSError if it cannot be opened."""
    with open(path, encoding="utf-8") as stream:
        return read_graph(stream)