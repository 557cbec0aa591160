"""Command that checks whether removing one vertex turns a graph into a tree."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from dslabs.graphs.dot import show_graph
from dslabs.graphs.graph import Graph
from dslabs.graphs.reader import FILE_ERROR, GraphFormatError, load_graph

ALREADY_TREE = 5


def find_removable_vertex(graph: Graph) -> Optional[int]:
    """First vertex whose removal leaves a tree, or None."""
    return next((vertex for vertex in graph.vertices() if graph.is_tree(vertex)), None)


def main(argv=None) -> int:
    """Read a graph file named on standard input and report the vertex to remove."""
    parser = argparse.ArgumentParser(
        prog="dslabs-graph",
        description="Find a vertex whose removal turns an undirected graph into a tree.",
    )
    parser.parse_args(argv)
    out = sys.stdout

    out.write("Программа для работы с графом\n")
    out.write("Введите имя файла с описанием графа:\n")
    name = sys.stdin.readline().split("\n", 1)[0]
    if not name:
        out.write("Ошибка ввода имени файла!\n")
        return 1
    try:
        graph = load_graph(name)
    except GraphFormatError as exc:
        out.write(f"{exc}\n")
        return 1
    except (OSError, UnicodeDecodeError):
        out.write(f"{FILE_ERROR}\n")
        return 1
    out.write("Граф успешно считан\n")

    show_graph(graph, "graph_before.png")
    if graph.is_tree(-1):
        out.write("Граф уже является деревом!\n")
        return ALREADY_TREE

    vertex = find_removable_vertex(graph)
    if vertex is None:
        out.write("Граф нельзя превратить в дерево удалением одной вершины\n")
        return 0
    out.write(f"Граф можно превратить в дерево удалением вершины {vertex}\n")
    graph.delete_vertex(vertex)
    show_graph(graph, "graph_after.png")
    return 0


if __name__ == "__main__":
    sys.exit(main())