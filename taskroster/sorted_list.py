"""A list that keeps its elements in descending order."""

from __future__ import annotations

from itertools import islice
from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class SortedList(Generic[T]):
    """A list kept in descending order by the elements' ``>`` operator.

    Elements only need to support ``>``; the greatest element comes first.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for item in items:
            self.insert(item)

    def insert(self, value: T) -> None:
        """Insert ``value`` at its place in the descending order."""
        items = self._items
        if not items or value > items[0]:
            items.insert(0, value)
            return
        position = next(
            (
                index
                for index, item in enumerate(islice(items, 1, None), start=1)
                if not item > value
            ),
            len(items),
        )
        items.insert(position, value)

    def remove(self, value: T) -> None:
        """Remove the first element equal to ``value``; do nothing if absent."""
        try:
            self._items.remove(value)
        except ValueError:
            pass

    def first(self) -> T:
        """Return the greatest element.

        Raises IndexError if the list is empty.
        """
        if not self._items:
            raise IndexError("Iterator out of range")
        return self._items[0]

    def filter(self, predicate: Callable[[T], bool]) -> SortedList[T]:
        """Return a new list of the elements that satisfy ``predicate``."""
        return SortedList(item for item in self._items if predicate(item))

    def apply(self, operation: Callable[[T], T]) -> SortedList[T]:
        """Return a new list of ``operation`` applied to every element."""
        return SortedList(operation(item) for item in self._items)

    def copy(self) -> SortedList[T]:
        """Return an independent copy of this list."""
        duplicate: SortedList[T] = SortedList()
        duplicate._items = list(self._items)
        return duplicate

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"SortedList({self._items!r})"