"""DOT description of a graph and its rendering with Graphviz."""

from __future__ import annotations

import subprocess
from pathlib import Path

from dslabs.graphs.graph import Graph

DOT_FILE = "./graph.gv"


def graph_to_dot(graph: Graph, graph_name: str) -> str:
    """Describe the graph as a strict undirected DOT graph."""
    lines = [f'strict graph "{graph_name}" {{\n', '  node [fontname="Arial"];\n']
    for vertex in graph.vertices():
        lines.append(f"  {vertex};\n")
        lines.extend(f"  {vertex} -- {neighbour};\n" for neighbour in graph.neighbours(vertex))
    lines.append("}\n")
    return "".join(lines)


def show_graph(graph: Graph, graph_name: str) -> Path:
    """Write graph.gv in the working directory, render it to ``graph_name`` and open it.

    Returns the path of the DOT file. Missing tools are ignored.
    """
    path = Path(DOT_FILE)
    path.write_text(graph_to_dot(graph, graph_name), encoding="utf-8")
    for command in (["dot", "-Tpng", "-o", graph_name, DOT_FILE], ["open", graph_name]):
        try:
            subprocess.run(command, check=False)
        except OSError:
            pass
    return path