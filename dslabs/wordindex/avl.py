"""Height-balanced (AVL) search tree of reserved words."""

from __future__ import annotations

from typing import Optional

from dslabs.wordindex.bst import tree_to_dot
from dslabs.wordindex.common import AssocArray, DuplicateWordError, WordInfo


class _Node:
    __slots__ = ("info", "height", "left", "right")

    def __init__(self, info: WordInfo) -> None:
        self.info = info
        self.height = 1
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class _Tally:
    __slots__ = ("count",)

    def __init__(self) -> None:
        self.count = 0


def _height(node: Optional[_Node]) -> int:
    return 0 if node is None else node.height


def _b_factor(node: _Node) -> int:
    return _height(node.right) - _height(node.left)


def _fix_height(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(node: _Node) -> _Node:
    left = node.left
    node.left = left.right
    left.right = node
    _fix_height(node)
    _fix_height(left)
    return left


def _rotate_left(node: _Node) -> _Node:
    right = node.right
    node.right = right.left
    right.left = node
    _fix_height(node)
    _fix_height(right)
    return right


def _balance(node: _Node) -> _Node:
    _fix_height(node)
    if _b_factor(node) == 2:
        if _b_factor(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if _b_factor(node) == -2:
        if _b_factor(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _insert(node: Optional[_Node], info: WordInfo, tally: _Tally) -> _Node:
    if node is None:
        return _Node(WordInfo(info.word, info.help))
    tally.count += 1
    if info.word < node.info.word:
        node.left = _insert(node.left, info, tally)
    elif info.word > node.info.word:
        node.right = _insert(node.right, info, tally)
    else:
        raise DuplicateWordError(info.word, tally.count)
    return _balance(node)


def _find_min(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _remove_min(node: _Node) -> Optional[_Node]:
    if node.left is None:
        return node.right
    node.left = _remove_min(node.left)
    return _balance(node)


def _remove(node: Optional[_Node], word: str, tally: _Tally) -> tuple[Optional[_Node], bool]:
    if node is None:
        return None, False
    tally.count += 1
    if word < node.info.word:
        node.left, found = _remove(node.left, word, tally)
        if not found:
            return node, False
    elif word > node.info.word:
        node.right, found = _remove(node.right, word, tally)
        if not found:
            return node, False
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        smallest = _find_min(node.right)
        smallest.right = _remove_min(node.right)
        smallest.left = node.left
        return _balance(smallest), True
    return _balance(node), True


class AvlTree(AssocArray):
    """Search tree ordered by word that keeps itself height-balanced."""

    graph_name = "avl_tree"

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def __len__(self) -> int:
        return len(self.words())

    def insert(self, info: WordInfo) -> int:
        tally = _Tally()
        self._root = _insert(self._root, info, tally)
        return tally.count

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
        tally = _Tally()
        self._root, found = _remove(self._root, word, tally)
        return found, tally.count

    def render(self) -> str:
        return tree_to_dot(self._root, self.graph_name)

    def words(self) -> list[str]:
        """Stored words in sorted order."""
        result: list[str] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.info.word)
            node = node.right
        return result

    def height(self) -> int:
        """Height of the tree; zero when empty."""
        return _height(self._root)