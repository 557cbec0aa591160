import io
from unittest.mock import patch

from dslabs.graphs.cli import find_removable_vertex, main
from dslabs.graphs.graph import Graph


def build(count, edges):
    graph = Graph(count)
    for first, second in edges:
        graph.add_edge(first, second)
    return graph


def describe(count, edges):
    parts = [f"{count}\n{len(edges)}\n"]
    parts.extend(f"\n{first}\n{second}\n" for first, second in edges)
    return "".join(parts)


def run_main(tmp_path, monkeypatch, content, name="g.txt"):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "g.txt").write_text(content, encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{name}\n"))
    with patch("dslabs.graphs.dot.subprocess.run") as runner:
        code = main([])
    return code, [call.args[0] for call in runner.call_args_list]


def test_removable_vertex_in_triangle():
    graph = build(3, [(0, 1), (1, 2), (2, 0)])
    vertex = find_removable_vertex(graph)
    assert vertex in graph.vertices()
    assert graph.is_tree(vertex)


def test_no_removable_vertex_for_two_triangles():
    graph = build(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])
    assert find_removable_vertex(graph) is None


def test_removable_vertex_is_the_first_that_works():
    graph = build(4, [(0, 1), (1, 2), (2, 3), (3, 0), (1, 3)])
    vertex = find_removable_vertex(graph)
    assert graph.is_tree(vertex)
    assert not any(graph.is_tree(v) for v in graph.vertices() if v < vertex)


def test_main_reports_tree(tmp_path, monkeypatch, capsys):
    code, commands = run_main(tmp_path, monkeypatch, describe(3, [(0, 1), (1, 2)]))
    assert code == 5
    assert "Граф уже является деревом!" in capsys.readouterr().out
    assert ["open", "graph_before.png"] in commands


def test_main_removes_vertex(tmp_path, monkeypatch, capsys):
    code, commands = run_main(tmp_path, monkeypatch, describe(3, [(0, 1), (1, 2), (2, 0)]))
    text = capsys.readouterr().out
    assert code == 0
    assert "Граф успешно считан" in text
    assert "Граф можно превратить в дерево удалением вершины 0" in text
    assert ["open", "graph_after.png"] in commands
    assert "  0;\n" not in (tmp_path / "graph.gv").read_text(encoding="utf-8")


def test_main_reports_impossible(tmp_path, monkeypatch, capsys):
    edges = [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)]
    code, _ = run_main(tmp_path, monkeypatch, describe(6, edges))
    assert code == 0
    assert "Граф нельзя превратить в дерево удалением одной вершины" in capsys.readouterr().out


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    code, commands = run_main(tmp_path, monkeypatch, "", name="absent.txt")
    assert code == 1
    assert commands == []
    assert "Ошибка чтения файла!" in capsys.readouterr().out


def test_main_bad_format(tmp_path, monkeypatch, capsys):
    code, _ = run_main(tmp_path, monkeypatch, "3\n1\n\n1\n1\n")
    assert code == 1
    assert "Петля невозможна в неорграфе!" in capsys.readouterr().out


def test_main_empty_file_name(tmp_path, monkeypatch, capsys):
    code, _ = run_main(tmp_path, monkeypatch, "", name="")
    assert code == 1
    assert "Ошибка ввода имени файла!" in capsys.readouterr().out