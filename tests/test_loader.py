import io

import pytest

from dslabs.wordindex.bst import BstTree
from dslabs.wordindex.common import AssocArray, DuplicateWordError, WordInfo
from dslabs.wordindex.loader import WordFileError, parse_int, read_words


class RecordingIndex(AssocArray):
    def __init__(self):
        self.data = {}
        self.reset_sizes = []

    def insert(self, info):
        if info.word in self.data:
            raise DuplicateWordError(info.word, 1)
        self.data[info.word] = info.help
        return 1

    def find(self, word):
        return self.data.get(word), 1

    def remove(self, word):
        return self.data.pop(word, None) is not None, 1

    def render(self):
        return ""

    def reset(self, size):
        self.reset_sizes.append(size)
        self.data.clear()


@pytest.mark.parametrize("text,maximum,expected", [("1", 10, 1), ("9", 10, 9), ("042", 100, 42)])
def test_parse_int_valid(text, maximum, expected):
    assert parse_int(text, maximum) == expected


@pytest.mark.parametrize("text", ["0", "10", "-1", "abc", "", "1a", " 3", "3 "])
def test_parse_int_invalid(text):
    with pytest.raises(WordFileError):
        parse_int(text, 10)


def test_read_words_into_tree():
    stream = io.StringIO("2\nint\nInteger type\nchar\nCharacter type\n")
    tree = BstTree()
    assert read_words(tree, stream) == 2
    assert tree.find("int")[0] == "Integer type"
    assert tree.find("char")[0] == "Character type"
    assert tree.words() == ["char", "int"]


def test_read_words_resets_index_with_count():
    index = RecordingIndex()
    index.data["old"] = "gone"
    read_words(index, io.StringIO("1\nfor\nLoop\n"))
    assert index.reset_sizes == [1]
    assert index.data == {"for": "Loop"}


def test_last_line_without_newline_is_accepted():
    tree = BstTree()
    read_words(tree, io.StringIO("1\nvoid\nNo value"))
    assert tree.find("void")[0] == "No value"


@pytest.mark.parametrize("content", [
    "",
    "0\n",
    "x\n",
    "2\nint\nInteger\n",
    "1\nint\n",
    "1\nint\n\n",
    "1\n\nhelp\n",
    "1\nabcdefghijklmnop\nhelp\n",
])
def test_read_words_rejects_malformed(content):
    with pytest.raises(WordFileError):
        read_words(BstTree(), io.StringIO(content))


def test_read_words_rejects_repeated_word_keeping_earlier():
    tree = BstTree()
    with pytest.raises(WordFileError):
        read_words(tree, io.StringIO("3\nint\na\nlong\nb\nint\nc\n"))
    assert tree.words() == ["int", "long"]


def test_fifteen_byte_word_is_accepted():
    word = "abcdefghijklmno"
    tree = BstTree()
    read_words(tree, io.StringIO(f"1\n{word}\nhelp\n"))
    assert tree.find(word)[0] == "help"
    assert WordInfo(word).word == word