"""Count how often each word occurs in a file."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import BinaryIO

from hwkit.hashmap import MAX_KEY_LENGTH, StrIntMap
from hwkit.pearson import pearson_hash32

_CHUNK_SIZE = 64 * 1024


def _is_word_byte(byte: int) -> bool:
    # Printable ASCII that is not a space.
    return 0x21 <= byte <= 0x7E


def count_words(stream: BinaryIO) -> StrIntMap:
    """Count the words read from the binary ``stream``.

    A word is a run of printable, non-space ASCII bytes. A word counts only
    once a separator follows it, so a word at the very end of the data is not
    counted. Reading stops when a word reaches MAX_KEY_LENGTH - 1 bytes.
    """
    counts = StrIntMap(pearson_hash32)
    word = bytearray()
    while chunk := stream.read(_CHUNK_SIZE):
        for byte in chunk:
            if len(word) >= MAX_KEY_LENGTH - 1:
                return counts
            if _is_word_byte(byte):
                word.append(byte)
            elif word:
                key = word.decode("ascii")
                counts[key] = counts.get(key, 0) + 1
                word.clear()
    return counts


def main(argv: Sequence[str] | None = None) -> int:
    """List every word of a text file with the number of times it occurs."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(
            "Count amount of each word in text file and list it.\n"
            "Usage:\t wordcount <path_to_archive>\n\n"
        )
        return 1

    try:
        with open(args[0], "rb") as stream:
            counts = count_words(stream)
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return 1

    for word, count in counts.items():
        print(f"{word} -> {count} ")
    print("-----------------------------------------------------")
    print(f"Total unique words: {len(counts)}")
    return 0