"""Hash table of reserved words with separate chaining (open hashing)."""

from __future__ import annotations

from typing import Optional

from dslabs.wordindex.common import (
    INITIAL_SIZE,
    MAX_COMPARISONS,
    AssocArray,
    DuplicateWordError,
    WordInfo,
    find_next_size,
    hash_function,
)


class OpenHashTable(AssocArray):
    """Hash table whose buckets are chains of entries."""

    supports_max_comparisons = True

    def __init__(self) -> None:
        self._size = find_next_size(INITIAL_SIZE)
        self._buckets: list[list[WordInfo]] = [[] for _ in range(self._size)]
        self.max_comparisons = MAX_COMPARISONS

    @property
    def size(self) -> int:
        """Number of buckets."""
        return self._size

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def words(self) -> list[str]:
        """Stored words in bucket and chain order."""
        return [info.word for chain in self._buckets for info in chain]

    def _chain(self, word: str) -> list[WordInfo]:
        return self._buckets[hash_function(word, self._size)]

    def insert(self, info: WordInfo) -> int:
        chain = self._chain(info.word)
        comparisons = 1
        for entry in chain:
            comparisons += 1
            if entry.word == info.word:
                raise DuplicateWordError(info.word, comparisons)
        chain.append(WordInfo(info.word, info.help))
        return comparisons

    def find(self, word: str) -> tuple[Optional[str], int]:
        comparisons = 0
        for entry in self._chain(word):
            comparisons += 1
            if entry.word == word:
                return entry.help, comparisons
        return None, comparisons

    def remove(self, word: str) -> tuple[bool, int]:
        chain = self._chain(word)
        for position, entry in enumerate(chain):
            if entry.word == word:
                del chain[position]
                return True, position + 1
        return False, len(chain)

    def render(self) -> str:
        lines = []
        for chain in self._buckets:
            if not chain:
                lines.append("NULL\n")
            else:
                lines.append("".join(f"{entry.word} -> " for entry in chain) + "\n")
        return "".join(lines)

    def restructure(self, new_size: int) -> None:
        """Rehash every stored word into ``new_size`` buckets."""
        if new_size < 1:
            raise ValueError("size must be positive")
        entries = [entry for chain in self._buckets for entry in chain]
        self._size = new_size
        self._buckets = [[] for _ in range(new_size)]
        for entry in entries:
            self.insert(entry)

    def reset(self, size: int) -> None:
        self._size = find_next_size(size)
        self._buckets = [[] for _ in range(self._size)]

    def maybe_restructure(self, comparisons: int) -> bool:
        if comparisons <= self.max_comparisons:
            return False
        self.restructure(find_next_size(self._size))
        return True

    def set_max_comparisons(self, value: int) -> None:
        if value < 0:
            raise ValueError("the comparison limit must not be negative")
        self.max_comparisons = value