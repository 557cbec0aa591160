"""Generator of random data files with file records."""

from __future__ import annotations

import argparse
import random
import string
import sys
from typing import Optional, TextIO

from dslabs.filetree.tree import Date, FileRecord

DEFAULT_COUNT = 1000
DUPLICATE_YEAR = 2040

_LETTERS = string.ascii_lowercase


def _random_name(rng: random.Random) -> str:
    letters = "".join(_LETTERS[rng.randrange(26)] for _ in range(5))
    cut_at_four = rng.random() < 0.1
    sixth = _LETTERS[rng.randrange(25)]
    cut_at_five = rng.random() < 1 / 3
    if cut_at_four:
        return letters[:4]
    if cut_at_five:
        return letters
    return letters + sixth


def generate_records(count: int = DEFAULT_COUNT,
                     rng: Optional[random.Random] = None) -> list[FileRecord]:
    """Return ``count`` random records.

    A date already given to an earlier record is moved to the year 2040.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if rng is None:
        rng = random.Random()
    seen: set[Date] = set()
    records = []
    for _ in range(count):
        name = _random_name(rng)
        date = Date(rng.randrange(30) or 30, rng.randrange(12) + 1, rng.randrange(70) + 1970)
        if date in seen:
            date = Date(date.day, date.month, DUPLICATE_YEAR)
        seen.add(date)
        hidden = rng.random() < 1 / 3
        system = rng.random() < 0.1
        records.append(FileRecord(name, date, hidden, system))
    return records


def write_dataset(stream: TextIO, count: int = DEFAULT_COUNT,
                  rng: Optional[random.Random] = None) -> None:
    """Write a record count followed by that many random records, one field per line."""
    records = generate_records(count, rng)
    stream.write(f"{count}\n")
    for record in records:
        stream.write(
            f"{record.name}\n{record.date.day}\n{record.date.month}\n{record.date.year}\n"
            f"{2 if record.hidden else 1}\n{2 if record.system else 1}\n"
        )


def main(argv=None) -> int:
    """Write a random data file to standard output or to a file."""
    parser = argparse.ArgumentParser(prog="dslabs-datagen",
                                     description="Generate a random file-record data set.")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("-o", "--output", default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    if args.output is None:
        write_dataset(sys.stdout, args.count, rng)
    else:
        with open(args.output, "w", encoding="utf-8") as stream:
            write_dataset(stream, args.count, rng)
    return 0


if __name__ == "__main__":
    sys.exit(main())