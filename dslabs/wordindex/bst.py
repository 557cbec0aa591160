"""Unbalanced binary search tree of reserved words."""

from __future__ import annotations

from typing import Iterator, Optional

from dslabs.wordindex.common import AssocArray, DuplicateWordError, WordInfo, dot_null


class _Node:
    __slots__ = ("info", "left", "right")

    def __init__(self, info: WordInfo) -> None:
        self.info = info
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


def _in_order(root) -> Iterator:
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def tree_to_dot(root, graph_name: str) -> str:
    """Describe a tree of nodes with ``info``, ``left`` and ``right`` in DOT."""
    lines = [f"digraph {graph_name} {{\n", '  node [fontname="Arial"];\n']
    if root is None:
        lines.append("\n")
    elif root.left is None and root.right is None:
        lines.append(f"  {root.info.word};\n")
    else:
        null_count = 0
        stack = [("visit", root)]
        while stack:
            action, node = stack.pop()
            if action == "visit":
                if node.left is None and node.right is None:
                    continue
                stack.append(("right", node))
                stack.append(("left", node))
                continue
            child = node.left if action == "left" else node.right
            if child is not None:
                lines.append(f"  {node.info.word} -> {child.info.word};\n")
                stack.append(("visit", child))
            else:
                null_count += 1
                lines.append(dot_null(node.info.word, null_count))
    lines.append("}\n")
    return "".join(lines)


class BstTree(AssocArray):
    """Binary search tree ordered by word, without balancing."""

    graph_name = "bst_tree"

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def __len__(self) -> int:
        return sum(1 for _ in _in_order(self._root))

    def insert(self, info: WordInfo) -> int:
        new = _Node(WordInfo(info.word, info.help))
        if self._root is None:
            self._root = new
            return 0
        comparisons = 0
        node = self._root
        while True:
            comparisons += 1
            if info.word < node.info.word:
                if node.left is None:
                    node.left = new
                    return comparisons
                node = node.left
            elif info.word > node.info.word:
                if node.right is None:
                    node.right = new
                    return comparisons
                node = node.right
            else:
                raise DuplicateWordError(info.word, comparisons)

    def find(self, word: str) -> tuple[Optional[str], int]:
        comparisons = 0
        node = self._root
        while node is not None:
            comparisons += 1
            if word == node.info.word:
                return node.info.help, comparisons
            node = node.left if word < node.info.word else node.right
        return None, comparisons

    def remove(self, word: str) -> tuple[bool, int]:
        comparisons = 0
        parent: Optional[_Node] = None
        node = self._root
        while node is not None:
            comparisons += 1
            if word < node.info.word:
                parent, node = node, node.left
            elif word > node.info.word:
                parent, node = node, node.right
            else:
                break
        if node is None:
            return False, comparisons

        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            comparisons += 1
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
                comparisons += 1
            node.info = WordInfo(succ.info.word, succ.info.help)
            if succ_parent is node:
                node.right = succ.right
            else:
                succ_parent.left = succ.right
            return True, comparisons

        child = node.right if node.left is None else node.left
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return True, comparisons

    def render(self) -> str:
        return tree_to_dot(self._root, self.graph_name)

    def words(self) -> list[str]:
        """Stored words in sorted order."""
        return [node.info.word for node in _in_order(self._root)]