"""
Iterator pattern: cursor-based traversal over an append-only collection.

The iterators expose an explicit pull surface (``next()`` returning an
:class:`IteratorResult`, and ``reset()``) and also speak the Python iterator
protocol, so they can be driven either by hand or by a ``for`` loop.

Examples:
    >>> collection = OrderedCollection(["A", "B", "C"])
    >>> it = collection.reverse_iterator()
    >>> it.next()
    IteratorResult(value='C', done=False)
    >>> list(it)
    ['B', 'A']
    >>> it.next().done
    True
    >>> it.reset()
    >>> [item for item in it]
    ['C', 'B', 'A']
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class IteratorResult:
    """One step of a traversal; ``done`` is authoritative, ``value`` is None when done."""

    value: str | None
    done: bool


class OrderedCollection:
    """Append-only ordered sequence of string items."""

    def __init__(self, items: Iterable[str] | None = None) -> None:
        self._items: list[str] = list(items or [])

    @property
    def items(self) -> tuple[str, ...]:
        return tuple(self._items)

    def add(self, item: str) -> None:
        self._items.append(item)

    def size(self) -> int:
        return len(self._items)

    def get(self, index: int) -> str | None:
        """Return the item at ``index``, or None when out of bounds (no negative wrap)."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def iterator(self) -> ForwardIterator:
        return ForwardIterator(self)

    def reverse_iterator(self) -> ReverseIterator:
        return ReverseIterator(self)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(ForwardIterator(self))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"


class SequenceIterator(ABC):
    """
    Cursor over an :class:`OrderedCollection`.

    The collection is shared, never mutated. Subclasses define the start
    sentinel and the step direction; each ``next()`` moves the cursor one
    step and reads the collection at the new position.
    """

    def __init__(self, collection: OrderedCollection) -> None:
        self._collection = collection
        self._position = self._start()
        self._exhausted = False

    @property
    def position(self) -> int:
        return self._position

    @abstractmethod
    def _start(self) -> int:
        """Sentinel position before the first step."""

    @abstractmethod
    def _step(self) -> int:
        """Signed distance moved by each ``next()``."""

    def reset(self) -> None:
        self._position = self._start()
        self._exhausted = False

    def next(self) -> IteratorResult:
        # once done, stay done until reset()
        if self._exhausted:
            return IteratorResult(value=None, done=True)
        self._position += self._step()
        if not 0 <= self._position < self._collection.size():
            self._exhausted = True
            return IteratorResult(value=None, done=True)
        return IteratorResult(value=self._collection.get(self._position), done=False)

    def __iter__(self) -> SequenceIterator:
        return self

    def __next__(self) -> str:
        result = self.next()
        if result.done:
            raise StopIteration
        return result.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(position={self._position}, size={self._collection.size()})"


class ReverseIterator(SequenceIterator):
    """Walks from the last item down to the first."""

    def _start(self) -> int:
        # one past the last index; size is read lazily so reset() sees appends
        return self._collection.size()

    def _step(self) -> int:
        return -1


class ForwardIterator(SequenceIterator):
    """Walks from the first item up to the last."""

    def _start(self) -> int:
        return -1

    def _step(self) -> int:
        return 1


__all__ = [
    "IteratorResult",
    "OrderedCollection",
    "SequenceIterator",
    "ReverseIterator",
    "ForwardIterator",
]
