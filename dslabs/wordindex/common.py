"""Shared pieces of the word indexes: records, hashing and the common interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

MAX_WORD_LEN = 16
MAX_COMPARISONS = 3
INITIAL_SIZE = 10

_HASH_SEED = 5381
_MASK = (1 << 64) - 1
_NOT_FOR_TREE = "Данное действие не применимо к дереву!"


@dataclass
class WordInfo:
    """A reserved word and its help text."""

    word: str
    help: str = ""

    def __post_init__(self) -> None:
        if not self.word or len(self.word.encode("utf-8")) >= MAX_WORD_LEN:
            raise ValueError(f"word must be 1..{MAX_WORD_LEN - 1} bytes long: {self.word!r}")


class DuplicateWordError(Exception):
    """Raised when a word cannot be inserted; carries the comparisons made."""

    def __init__(self, word: str, comparisons: int = 0) -> None:
        super().__init__(word)
        self.word = word
        self.comparisons = comparisons


def hash_function(word: str, size: int) -> int:
    """Multiplicative string hash reduced to the range 0..size-1."""
    if size <= 0:
        raise ValueError("size must be positive")
    value = _HASH_SEED
    for byte in word.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (value * 33 + signed) & _MASK
    return value % size


def is_prime(num: int) -> bool:
    """True when no number from 2 to num // 2 divides num."""
    return all(num % divisor for divisor in range(2, num // 2 + 1))


def find_next_size(size: int) -> int:
    """Smallest prime not below one and a half times ``size`` (and not below 10)."""
    size = max(int(size * 1.5), INITIAL_SIZE)
    while not is_prime(size):
        size += 1
    return size


def dot_null(name: str, null_count: int) -> str:
    """DOT lines for an empty child drawn as a point."""
    return f"  null{null_count} [shape=point];\n  {name} -> null{null_count};\n"


class AssocArray(ABC):
    """Word index that counts the comparisons each operation makes.

    ``graph_name`` is set by indexes whose ``render`` produces a DOT graph.
    ``supports_max_comparisons`` is set by indexes that restructure themselves.
    """

    graph_name: Optional[str] = None
    supports_max_comparisons = False

    @abstractmethod
    def insert(self, info: WordInfo) -> int:
        """Add a word and return the comparisons made; DuplicateWordError if it cannot."""

    @abstractmethod
    def find(self, word: str) -> tuple[Optional[str], int]:
        """Return the help text (None if absent) and the comparisons made."""

    @abstractmethod
    def remove(self, word: str) -> tuple[bool, int]:
        """Remove a word; return whether it was present and the comparisons made."""

    @abstractmethod
    def render(self) -> str:
        """Text picture of the index."""

    def reset(self, size: int) -> None:
        """Prepare for about ``size`` words; indexes without a size keep their contents."""

    def maybe_restructure(self, comparisons: int) -> bool:
        """Restructure when ``comparisons`` is too large; True when that happened."""
        return False

    def set_max_comparisons(self, value: int) -> None:
        """Set the comparison limit that triggers restructuring."""
        raise TypeError(_NOT_FOR_TREE)