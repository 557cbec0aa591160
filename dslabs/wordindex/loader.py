"""Reading reserved words and their help texts from a text stream."""

from __future__ import annotations

import re
from typing import Optional, TextIO

from dslabs.wordindex.common import MAX_WORD_LEN, AssocArray, DuplicateWordError, WordInfo

MAX_WORDS = 100000

_DIGITS = re.compile(r"[0-9]+")


class WordFileError(ValueError):
    """Raised when a word file is malformed."""


def parse_int(text: str, maximum: int) -> int:
    """Parse a whole decimal number in the range 1..maximum-1."""
    if not _DIGITS.fullmatch(text):
        raise WordFileError(f"not a positive integer: {text!r}")
    value = int(text)
    if not 0 < value < maximum:
        raise WordFileError(f"{value} is outside 1..{maximum - 1}")
    return value


def _read_line(stream: TextIO) -> Optional[str]:
    text = stream.readline().split("\n", 1)[0]
    return text or None


def read_words(index: AssocArray, stream: TextIO) -> int:
    """Read a word count and that many word/help line pairs into ``index``.

    The index is reset for the count first. Returns the number of words
    read; raises WordFileError on malformed data or a repeated word, with
    the words read before the error left in the index.
    """
    text = _read_line(stream)
    if text is None:
        raise WordFileError("missing word count")
    count = parse_int(text, MAX_WORDS)
    index.reset(count)

    for number in range(1, count + 1):
        word = _read_line(stream)
        if word is None or len(word.encode("utf-8")) >= MAX_WORD_LEN:
            raise WordFileError(f"bad word at entry {number}")
        help_text = _read_line(stream)
        if help_text is None:
            raise WordFileError(f"missing help text at entry {number}")
        try:
            index.insert(WordInfo(word, help_text))
        except DuplicateWordError as exc:
            raise WordFileError(f"repeated word {word!r}") from exc
    return count