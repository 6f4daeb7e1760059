"""A last-in, first-out stack and a filtering copy of it."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

DATA = (4, 8, 15, 16, 23, 42)


class Stack(Generic[T]):
    """A stack whose iteration runs from the top element down."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for value in values:
            self.push(value)

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


def is_odd(value: int) -> bool:
    """Return True when ``value`` is odd."""
    return bool(value & 1)


def filtered(stack: Stack[T], predicate: Callable[[T], bool]) -> Stack[T]:
    """Return a new stack of the matching values, pushed in top-down order.

    The matching values therefore come out of the new stack reversed.
    """
    return Stack(value for value in stack if predicate(value))


def _format(stack: Stack[int]) -> str:
    return "".join(f"{value} " for value in stack)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample stack and its odd values."""
    numbers = Stack(reversed(DATA))
    print(_format(numbers))
    print(_format(filtered(numbers, is_odd)))
    return 0