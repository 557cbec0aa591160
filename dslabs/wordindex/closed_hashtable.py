"""Hash table of reserved words with linear probing (closed hashing)."""

from __future__ import annotations

from enum import Enum
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


class _State(Enum):
    FREE = "free"
    USED = "used"
    DELETED = "deleted"


class _Slot:
    __slots__ = ("state", "info")

    def __init__(self) -> None:
        self.state = _State.FREE
        self.info: Optional[WordInfo] = None


class ClosedHashTable(AssocArray):
    """Open-addressing hash table; removed entries stay as tombstones."""

    supports_max_comparisons = True

    def __init__(self) -> None:
        self._size = find_next_size(INITIAL_SIZE)
        self._slots = [_Slot() for _ in range(self._size)]
        self.max_comparisons = MAX_COMPARISONS

    @property
    def size(self) -> int:
        """Number of slots in the table."""
        return self._size

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot.state is _State.USED)

    def words(self) -> list[str]:
        """Stored words in slot order."""
        return [slot.info.word for slot in self._slots if slot.state is _State.USED]

    def insert(self, info: WordInfo) -> int:
        start = hash_function(info.word, self._size)
        index = start
        comparisons = 1
        while self._slots[index].state is _State.USED:
            comparisons += 1
            if self._slots[index].info.word == info.word:
                raise DuplicateWordError(info.word, comparisons)
            index = (index + 1) % self._size
            if index == start:
                raise DuplicateWordError(info.word, comparisons)
        slot = self._slots[index]
        slot.state = _State.USED
        slot.info = WordInfo(info.word, info.help)
        return comparisons

    def _probe(self, word: str):
        """Yield used slots along the probe sequence of ``word``."""
        index = hash_function(word, self._size)
        for _ in range(self._size):
            slot = self._slots[index]
            if slot.state is _State.FREE:
                return
            if slot.state is _State.USED:
                yield slot
            index = (index + 1) % self._size

    def find(self, word: str) -> tuple[Optional[str], int]:
        comparisons = 0
        for slot in self._probe(word):
            comparisons += 1
            if slot.info.word == word:
                return slot.info.help, comparisons
        return None, comparisons

    def remove(self, word: str) -> tuple[bool, int]:
        comparisons = 0
        for slot in self._probe(word):
            comparisons += 1
            if slot.info.word == word:
                slot.state = _State.DELETED
                return True, comparisons
        return False, comparisons

    def render(self) -> str:
        lines = ["Индекс | Хеш | Слово\n"]
        for index, slot in enumerate(self._slots):
            if slot.state is _State.FREE:
                lines.append(f" {index:5d} |  -  | -\n")
            else:
                code = hash_function(slot.info.word, self._size)
                text = slot.info.word if slot.state is _State.USED else "Элемент удален"
                lines.append(f" {index:5d} | {code:3d} | {text}\n")
        return "".join(lines)

    def restructure(self, new_size: int) -> None:
        """Move every stored word into a fresh table of ``new_size`` slots."""
        entries = [slot.info for slot in self._slots if slot.state is _State.USED]
        if new_size < 1 or len(entries) > new_size:
            raise ValueError(f"cannot hold {len(entries)} words in {new_size} slots")
        self._size = new_size
        self._slots = [_Slot() for _ in range(new_size)]
        for info in entries:
            self.insert(info)

    def reset(self, size: int) -> None:
        self._size = find_next_size(size)
        self._slots = [_Slot() for _ in range(self._size)]

    def maybe_restructure(self, comparisons: int) -> bool:
        if comparisons <= self.max_comparisons:
            return False
        self.restructure(find_next_size(self._size))
        return True

    def set_max_comparisons(self, value: int) -> None:
        if value < 0:
            raise ValueError("the comparison limit must not be negative")
        self.max_comparisons = value