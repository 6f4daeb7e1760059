"""An open-addressing hash map from strings to integers."""

from __future__ import annotations

from collections.abc import Callable, Iterator, MutableMapping
from dataclasses import dataclass

from hwkit.pearson import pearson_hash32

MAX_KEY_LENGTH = 8096
INIT_SIZE = 32
LOAD_FACTOR = 0.45
RESIZE_FACTOR = 2

HashFunc = Callable[[str], int]


class DuplicateKeyError(KeyError):
    """The key is already stored in the map."""


@dataclass
class _Entry:
    key: str
    value: int


class _Removed:
    """Marks a slot whose entry was deleted."""

    def __repr__(self) -> str:
        return "<removed>"


_REMOVED = _Removed()

_Slot = "_Entry | _Removed | None"


def _normalize(key: str) -> str:
    # Keys are stored and compared on their first MAX_KEY_LENGTH characters.
    return key[:MAX_KEY_LENGTH]


def _probe(hashcode: int, size: int) -> Iterator[int]:
    """Yield the double-hashing probe sequence, one full cycle at most."""
    h1 = hashcode % size
    h2 = hashcode % (size - 1) + 1
    seen: set[int] = set()
    for probe in range(size):
        index = (h1 + probe * h2) % size
        if index in seen:
            return
        seen.add(index)
        yield index


class StrIntMap(MutableMapping[str, int]):
    """Map of strings to integers using double hashing and deletion markers.

    Iteration yields keys in slot order.
    """

    def __init__(self, hash_func: HashFunc = pearson_hash32) -> None:
        if not callable(hash_func):
            raise TypeError("hash_func must be callable")
        self._hash_func = hash_func
        self._slots: list[_Entry | _Removed | None] = [None] * INIT_SIZE
        self._stored = 0
        self._used = 0  # live entries plus deletion markers left since the last rehash
        self._limit = int(INIT_SIZE * LOAD_FACTOR)

    def _hash(self, key: str) -> int:
        return self._hash_func(key) & 0xFFFFFFFF

    def _find_index(self, key: str) -> int | None:
        for index in _probe(self._hash(key), len(self._slots)):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _REMOVED and slot.key == key:  # type: ignore[union-attr]
                return index
        return None

    def _rehash(self, new_size: int) -> None:
        slots: list[_Entry | _Removed | None] = [None] * new_size
        for slot in self._slots:
            if isinstance(slot, _Entry):
                placed = False
                for index in _probe(self._hash(slot.key), new_size):
                    if slots[index] is None:
                        slots[index] = slot
                        placed = True
                        break
                if not placed:
                    self._rehash(new_size * RESIZE_FACTOR)
                    return
        self._slots = slots
        self._limit = int(new_size * LOAD_FACTOR)
        self._used = self._stored

    def insert(self, key: str, value: int) -> None:
        """Add ``key`` with ``value``; raise DuplicateKeyError if it is present."""
        key = _normalize(key)
        if self._used > self._limit:
            self._rehash(len(self._slots) * RESIZE_FACTOR)

        while True:
            first_removed: int | None = None
            empty: int | None = None
            for index in _probe(self._hash(key), len(self._slots)):
                slot = self._slots[index]
                if slot is None:
                    empty = index
                    break
                if slot is _REMOVED:
                    if first_removed is None:
                        first_removed = index
                elif slot.key == key:  # type: ignore[union-attr]
                    raise DuplicateKeyError(key)
            if empty is not None or first_removed is not None:
                break
            self._rehash(len(self._slots) * RESIZE_FACTOR)

        entry = _Entry(key, value)
        if first_removed is not None:
            # Reuse the earliest deleted slot; the marker moves to the empty one.
            self._slots[first_removed] = entry
            if empty is not None:
                self._slots[empty] = _REMOVED
        else:
            self._slots[empty] = entry  # type: ignore[index]
        self._used += 1
        self._stored += 1

    def __getitem__(self, key: str) -> int:
        index = self._find_index(_normalize(key))
        if index is None:
            raise KeyError(key)
        return self._slots[index].value  # type: ignore[union-attr]

    def __setitem__(self, key: str, value: int) -> None:
        index = self._find_index(_normalize(key))
        if index is None:
            self.insert(key, value)
        else:
            self._slots[index].value = value  # type: ignore[union-attr]

    def __delitem__(self, key: str) -> None:
        index = self._find_index(_normalize(key))
        if index is None:
            raise KeyError(key)
        self._slots[index] = _REMOVED
        self._stored -= 1

    def __iter__(self) -> Iterator[str]:
        for slot in self._slots:
            if isinstance(slot, _Entry):
                yield slot.key

    def __len__(self) -> int:
        return self._stored

    def __repr__(self) -> str:
        items = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{items}}})"