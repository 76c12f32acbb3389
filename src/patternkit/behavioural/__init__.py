"""Behavioural patterns: iterator and template method."""

from patternkit.behavioural.iterator import (
    ForwardIterator,
    IteratorResult,
    OrderedCollection,
    ReverseIterator,
    SequenceIterator,
)

__all__ = [
    "IteratorResult",
    "OrderedCollection",
    "SequenceIterator",
    "ReverseIterator",
    "ForwardIterator",
]
