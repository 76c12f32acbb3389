"""Tests for patternkit.behavioural.iterator module."""

import pytest

from patternkit.behavioural.iterator import (
    ForwardIterator,
    IteratorResult,
    OrderedCollection,
    ReverseIterator,
)


@pytest.fixture
def collection() -> OrderedCollection:
    return OrderedCollection(["A", "B", "C", "D"])


def drain(iterator) -> list[IteratorResult]:
    """Call next() until done, keeping the terminal result."""
    results = []
    while True:
        result = iterator.next()
        results.append(result)
        if result.done:
            return results


class TestOrderedCollection:
    """Test the backing collection."""

    def test_size_tracks_appends(self):
        collection = OrderedCollection()
        assert collection.size() == 0
        collection.add("A")
        collection.add("A")
        assert collection.size() == 2
        assert len(collection) == 2

    def test_items_keep_insertion_order(self, collection):
        collection.add("E")
        assert collection.items == ("A", "B", "C", "D", "E")

    def test_get_out_of_bounds_returns_none(self, collection):
        """Negative indices are not wrapped."""
        assert collection.get(-1) is None
        assert collection.get(4) is None
        assert collection.get(0) == "A"

    def test_iterating_collection_is_forward(self, collection):
        assert list(collection) == ["A", "B", "C", "D"]


class TestReverseIterator:
    """Test reverse traversal."""

    def test_visits_every_item_in_descending_order(self, collection):
        results = drain(collection.reverse_iterator())

        assert len(results) == collection.size() + 1
        assert [r.value for r in results[:-1]] == ["D", "C", "B", "A"]
        assert all(r.done is False for r in results[:-1])
        assert results[-1].done is True

    def test_terminal_value_is_none(self, collection):
        results = drain(ReverseIterator(collection))
        assert results[-1].value is None

    def test_calls_after_terminal_stay_done(self, collection):
        iterator = ReverseIterator(collection)
        drain(iterator)
        assert iterator.next().done is True
        assert iterator.next().done is True

    def test_empty_collection_is_immediately_done(self):
        iterator = ReverseIterator(OrderedCollection())
        assert iterator.next() == IteratorResult(value=None, done=True)

    def test_reset_restarts_traversal(self, collection):
        fresh = [r.value for r in drain(ReverseIterator(collection))]

        iterator = ReverseIterator(collection)
        iterator.next()
        iterator.next()
        iterator.reset()
        assert [r.value for r in drain(iterator)] == fresh

    def test_reset_after_terminal(self, collection):
        iterator = ReverseIterator(collection)
        drain(iterator)
        iterator.next()
        iterator.reset()
        assert iterator.next() == IteratorResult(value="D", done=False)

    def test_reset_does_not_mutate_collection(self, collection):
        iterator = ReverseIterator(collection)
        iterator.next()
        iterator.reset()
        assert collection.items == ("A", "B", "C", "D")

    def test_reset_picks_up_appended_items(self, collection):
        iterator = ReverseIterator(collection)
        drain(iterator)
        collection.add("E")
        iterator.reset()
        assert iterator.next().value == "E"

    def test_python_protocol(self, collection):
        assert list(collection.reverse_iterator()) == ["D", "C", "B", "A"]


class TestForwardIterator:
    """Test forward traversal."""

    def test_visits_every_item_in_ascending_order(self, collection):
        results = drain(ForwardIterator(collection))

        assert [r.value for r in results[:-1]] == ["A", "B", "C", "D"]
        assert results[-1].done is True
        assert len(results) == collection.size() + 1

    def test_starts_before_first_index(self, collection):
        iterator = collection.iterator()
        assert iterator.position == -1
        iterator.next()
        assert iterator.position == 0

    def test_reset_restarts_traversal(self, collection):
        iterator = ForwardIterator(collection)
        iterator.next()
        iterator.reset()
        assert [item for item in iterator] == ["A", "B", "C", "D"]

    def test_independent_iterators_do_not_share_cursor(self, collection):
        first = collection.iterator()
        second = collection.iterator()
        first.next()
        first.next()
        assert second.next().value == "A"

    def test_stays_done_when_items_appended_after_terminal(self):
        collection = OrderedCollection(["A"])
        iterator = collection.iterator()
        assert iterator.next().value == "A"
        assert iterator.next().done is True

        collection.add("B")
        collection.add("C")
        assert iterator.next() == IteratorResult(value=None, done=True)
        assert list(iterator) == []

        iterator.reset()
        assert list(iterator) == ["A", "B", "C"]
