"""An unordered bag of items kept as a chain with new entries at the front."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class LinkedBag(Generic[T]):
    """A bag that keeps entries in chain order, newest first.

    Position 0 is the front of the chain. ``add`` puts an entry at the
    front; ``append_k`` puts one at a given position; ``reverse_find_kth``
    counts positions from the back of the chain.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._chain: list[T] = []
        for item in items or ():
            self.add(item)

    def __len__(self) -> int:
        return len(self._chain)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._chain))

    def __contains__(self, entry: object) -> bool:
        return any(entry == item for item in self._chain)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedBag):
            return NotImplemented
        return self._chain == other._chain

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._chain!r})"

    def is_empty(self) -> bool:
        """Return True if the bag holds no entries."""
        return not self._chain

    def add(self, entry: T) -> bool:
        """Put ``entry`` at the front of the chain."""
        self._chain.insert(0, entry)
        return True

    def append_k(self, entry: T, k: int) -> bool:
        """Insert ``entry`` at position ``k`` from the front.

        When ``k`` is not positive or not less than the current size, the
        entry goes to the front, as with ``add``.
        """
        if k <= 0 or k >= len(self._chain):
            return self.add(entry)
        self._chain.insert(k, entry)
        return True

    def reverse_find_kth(self, k: int) -> T:
        """Return the entry ``k`` positions from the back of the chain.

        Raises IndexError when ``k`` is negative or not less than the size.
        """
        size = len(self._chain)
        if k < 0 or k >= size:
            raise IndexError(
                f"index {k} out of range for bag of size {size}"
            )
        return self._chain[size - k - 1]

    def remove(self, entry: T) -> bool:
        """Remove one occurrence of ``entry``.

        The front entry takes the removed entry's place, so the order of the
        remaining entries changes. Returns False if ``entry`` is absent.
        """
        for position, item in enumerate(self._chain):
            if entry == item:
                self._chain[position] = self._chain[0]
                del self._chain[0]
                return True
        return False

    def clear(self) -> None:
        """Remove every entry."""
        self._chain.clear()

    def frequency_of(self, entry: T) -> int:
        """Count how many entries equal ``entry``."""
        return sum(1 for item in self._chain if entry == item)

    def to_list(self) -> list[T]:
        """Return the entries in chain order, front first."""
        return list(self._chain)

    def copy(self) -> LinkedBag[T]:
        """Return a new bag holding the same entries in the same order."""
        duplicate: LinkedBag[T] = LinkedBag()
        duplicate._chain = list(self._chain)
        return duplicate