"""Binary search tree of file records keyed by name or by access date."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional


@dataclass(frozen=True)
class Date:
    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day:02d}.{self.month:02d}.{self.year:04d}"


@dataclass(frozen=True)
class FileRecord:
    name: str
    date: Date
    hidden: bool = False
    system: bool = False


@dataclass(eq=False)
class Node:
    record: FileRecord
    left: Optional[Node] = None
    right: Optional[Node] = None


class DuplicateRecordError(Exception):
    """Raised when a record with the same key is already in the tree."""


class RecordNotFoundError(KeyError):
    """Raised when no record has the requested name."""


Comparator = Callable[[FileRecord, FileRecord], int]


def compare_names(a: FileRecord, b: FileRecord) -> int:
    """Negative, zero or positive as a's name sorts before, with or after b's."""
    return (a.name > b.name) - (a.name < b.name)


def compare_dates(a: FileRecord, b: FileRecord) -> int:
    """Difference of the access dates: year first, then month, then day."""
    return _date_diff(a.date, b.date)


def _date_diff(a: Date, b: Date) -> int:
    if a.year != b.year:
        return a.year - b.year
    if a.month != b.month:
        return a.month - b.month
    return a.day - b.day


def _insert(root: Optional[Node], record: FileRecord, cmp: Comparator) -> Node:
    new = Node(record)
    if root is None:
        return new
    node = root
    while True:
        diff = cmp(record, node.record)
        if diff == 0:
            raise DuplicateRecordError(record.name)
        if diff < 0:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def _bst_delete(node: Optional[Node], key: FileRecord, cmp: Comparator) -> Optional[Node]:
    if node is None:
        return None
    diff = cmp(node.record, key)
    if diff > 0:
        node.left = _bst_delete(node.left, key, cmp)
    elif diff < 0:
        node.right = _bst_delete(node.right, key, cmp)
    else:
        return _remove_root(node, cmp)
    return node


def _remove_root(node: Node, cmp: Comparator) -> Optional[Node]:
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.record = successor.record
    node.right = _bst_delete(node.right, successor.record, cmp)
    return node


def _pre_order(root: Optional[Node]) -> Iterator[Node]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def format_record(record: FileRecord) -> str:
    """Human-readable description of a record, ending with a blank line."""
    hidden = "" if record.hidden else "не "
    system = "" if record.system else "не "
    return (
        f"Название: {record.name}\n"
        f"Дата обращения: {record.date}\n"
        f"Файл {hidden}скрытый\n"
        f"Файл {system}системный\n"
        "\n"
    )


def _dot_label(record: FileRecord) -> str:
    return f' "{record.name}\\n{record.date}"'


def export_to_dot(root: Optional[Node], tree_name: str) -> str:
    """Describe the tree in the Graphviz DOT language."""
    lines = [f"digraph {tree_name} {{\n", '  node [fontname="Arial"];\n']
    null_count = 0

    def null_edge(record: FileRecord) -> None:
        nonlocal null_count
        null_count += 1
        lines.append(f"  null{null_count} [shape=point];\n")
        lines.append(f"  {_dot_label(record)} -> null{null_count};\n")

    def visit(node: Node) -> None:
        if node.left is None and node.right is None:
            return
        for child in (node.left, node.right):
            if child is not None:
                lines.append(f"  {_dot_label(node.record)} -> {_dot_label(child.record)};\n")
                visit(child)
            else:
                null_edge(node.record)

    if root is None:
        lines.append("\n")
    elif root.left is None and root.right is None:
        lines.append(f"  {_dot_label(root.record)};\n")
    else:
        visit(root)
    lines.append("}\n")
    return "".join(lines)


def wrong_del_old_files(root: Optional[Node], sample: Date) -> Optional[Node]:
    """Remove records older than ``sample`` from a name-ordered tree, visiting every node."""
    if root is None:
        return None
    root.left = wrong_del_old_files(root.left, sample)
    root.right = wrong_del_old_files(root.right, sample)
    if _date_diff(root.record.date, sample) < 0:
        return _remove_root(root, compare_names)
    return root


def correct_del_old_files(root: Optional[Node], sample: Date) -> Optional[Node]:
    """Remove records older than ``sample`` from a date-ordered tree, pruning newer subtrees."""
    if root is None:
        return None
    diff = _date_diff(root.record.date, sample)
    root.left = correct_del_old_files(root.left, sample)
    if diff < 0:
        root.right = correct_del_old_files(root.right, sample)
        return _remove_root(root, compare_dates)
    return root


class FileTree:
    """Search tree of file records ordered by name or, after resorting, by date."""

    def __init__(self, sorted_by_date: bool = False) -> None:
        self.root: Optional[Node] = None
        self.sorted_by_date = sorted_by_date

    @property
    def _comparator(self) -> Comparator:
        return compare_dates if self.sorted_by_date else compare_names

    def __len__(self) -> int:
        return sum(1 for _ in _pre_order(self.root))

    def insert(self, record: FileRecord) -> None:
        """Add a record; DuplicateRecordError if its key is taken."""
        self.root = _insert(self.root, record, self._comparator)

    def find(self, name: str) -> FileRecord:
        """Return the record with the given name; RecordNotFoundError if absent."""
        if not self.sorted_by_date:
            node = self.root
            while node is not None:
                if name == node.record.name:
                    return node.record
                node = node.left if name < node.record.name else node.right
        else:
            for node in _pre_order(self.root):
                if node.record.name == name:
                    return node.record
        raise RecordNotFoundError(name)

    def delete(self, name: str) -> None:
        """Remove the record with the given name; RecordNotFoundError if absent."""
        record = self.find(name)
        self.root = _bst_delete(self.root, record, self._comparator)

    def pre_order(self) -> Iterator[FileRecord]:
        for node in _pre_order(self.root):
            yield node.record

    def in_order(self) -> Iterator[FileRecord]:
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.record
            node = node.right

    def post_order(self) -> Iterator[FileRecord]:
        reversed_nodes = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            reversed_nodes.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        for node in reversed(reversed_nodes):
            yield node.record

    def change_sort(self) -> None:
        """Rebuild the tree under the other key.

        Raises DuplicateRecordError, leaving the tree as it was, when two
        records share the new key.
        """
        cmp = compare_names if self.sorted_by_date else compare_dates
        new_root: Optional[Node] = None
        for record in self.pre_order():
            new_root = _insert(new_root, record, cmp)
        self.root = new_root
        self.sorted_by_date = not self.sorted_by_date

    def delete_older_than(self, date: Date) -> None:
        """Remove every record accessed before ``date``."""
        if self.sorted_by_date:
            self.root = correct_del_old_files(self.root, date)
        else:
            self.root = wrong_del_old_files(self.root, date)