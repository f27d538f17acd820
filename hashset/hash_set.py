import logging
import math

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

# Internal imports
from hashset.hashing import (
    DEFAULT_INITIAL_CAPACITY,
    DEFAULT_MAX_LOAD_FACTOR,
    MAXIMUM_CAPACITY,
    bucket_index,
    trim_to_power_of_2,
)
from hashset.utils.error_strings import (
    CAPACITY_EXCEEDED_STRING,
    INVALID_LOAD_FACTOR_STRING,
    ITERATOR_REMOVE_BEFORE_NEXT,
    ITERATOR_REMOVE_TWICE,
    MAXIMUM_CAPACITY_NOT_POWER_OF_2,
)

E = TypeVar("E", bound=Hashable)


class CapacityExceededError(RuntimeError):
    def __init__(self, capacity: int):
        super().__init__(f"{CAPACITY_EXCEEDED_STRING}: {capacity}")
        self.capacity = capacity


class InvalidLoadFactorError(ValueError):
    def __init__(self, load_factor_threshold):
        super().__init__(f"{INVALID_LOAD_FACTOR_STRING}, got {load_factor_threshold!r}")


class IteratorStateError(RuntimeError):
    pass


class HashSet(Generic[E]):
    """
    A set backed by a hash table with separate chaining.

    The table is a list of buckets, each bucket being a list of the elements whose hash maps to it.
    Buckets are only allocated on the first insertion into their slot, so a slot is either None or a list.

    Note:
    1. Elements must keep a consistent __hash__ and __eq__ for as long as they are in the set.
       Nothing checks this, a mutated element just stops being found.
    2. Not thread safe.
    3. Capacity never shrinks, not even on clear().
    """

    # Lower this in a subclass to cap the table size. Must be a power of two
    MAXIMUM_CAPACITY: int = MAXIMUM_CAPACITY

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.MAXIMUM_CAPACITY != trim_to_power_of_2(cls.MAXIMUM_CAPACITY):
            raise ValueError(f"{MAXIMUM_CAPACITY_NOT_POWER_OF_2}, got {cls.MAXIMUM_CAPACITY}")

    def __init__(
        self,
        capacity: int = DEFAULT_INITIAL_CAPACITY,
        load_factor_threshold: float = DEFAULT_MAX_LOAD_FACTOR,
    ):
        # NaN fails both comparisons
        if not 0 < load_factor_threshold < math.inf:
            raise InvalidLoadFactorError(load_factor_threshold)

        self._capacity: int = min(trim_to_power_of_2(capacity), self.MAXIMUM_CAPACITY)

        self._load_factor_threshold: float = load_factor_threshold
        self._size: int = 0
        self._table: list[list[E] | None] = [None] * self._capacity

    ############################################### Helpers ####################################################

    def _index(self, e: E) -> int:
        return bucket_index(hash(e), self._capacity)

    def _snapshot(self) -> list[E]:
        """
        Flatten the table into a list, bucket by bucket, each bucket in chain order.
        """
        elements: list[E] = []
        for bucket in self._table:
            if bucket is not None:
                elements.extend(bucket)
        return elements

    def _rehash(self) -> None:
        """
        Double the capacity and re-add every element into a fresh table.

        A re-add can itself trigger a resize (small load factors). If that one hits MAXIMUM_CAPACITY,
        the old table is put back before the error propagates, so no element is lost.
        """
        elements = self._snapshot()
        old_capacity, old_table, old_size = self._capacity, self._table, self._size

        self._capacity <<= 1
        self._table = [None] * self._capacity
        self._size = 0

        try:
            for e in elements:
                self.add(e)
        except CapacityExceededError:
            self._capacity, self._table, self._size = old_capacity, old_table, old_size
            logging.error(f"Resize from {old_capacity} buckets failed, kept the old table")
            raise

        logging.info(f"Resized hash set from {old_capacity} to {self._capacity} buckets ({self._size} elements)")

    ############################################### Core #######################################################

    def contains(self, e: E) -> bool:
        bucket = self._table[self._index(e)]
        if bucket is not None:
            for element in bucket:
                if element == e:
                    return True
        return False

    def add(self, e: E) -> bool:
        """
        Add an element if it's not already present.

        Return True if the element was inserted, False if an equal element was already stored.

        The load check uses the size from before this insertion, so the table grows on the add after
        the one that crosses the threshold.

        Raises CapacityExceededError (with the set unchanged) if the table has to grow but is already at
        MAXIMUM_CAPACITY.
        """
        if self.contains(e):
            logging.debug(f"Duplicate element not stored: {e!r}")
            return False

        if self._size > self._capacity * self._load_factor_threshold:
            if self._capacity >= self.MAXIMUM_CAPACITY:
                logging.error(f"Cannot grow hash set past {self._capacity} buckets")
                raise CapacityExceededError(self._capacity)

            self._rehash()

        # Index has to be computed after a possible resize
        index = self._index(e)

        bucket = self._table[index]
        if bucket is None:
            bucket = []
            self._table[index] = bucket

        bucket.append(e)
        self._size += 1
        logging.debug(f"Added {e!r} to bucket {index}")

        return True

    def remove(self, e: E) -> bool:
        """
        Remove an element if it exists.

        Return True if it was removed, False if it was not in the set.
        """
        bucket = self._table[self._index(e)]
        if bucket is not None:
            for i, element in enumerate(bucket):
                if element == e:
                    del bucket[i]
                    self._size -= 1
                    logging.debug(f"Removed {e!r}")
                    return True

        logging.debug(f"Element not found for removal: {e!r}")
        return False

    def clear(self) -> None:
        """
        Empty every allocated bucket in place. Capacity is kept.
        """
        for bucket in self._table:
            if bucket is not None:
                bucket.clear()
        self._size = 0
        logging.info(f"Cleared hash set ({self._capacity} buckets kept)")

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def iterator(self) -> "HashSetIterator[E]":
        return HashSetIterator(self)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor_threshold(self) -> float:
        return self._load_factor_threshold

    ############################################### Bulk #######################################################

    def update(self, items: Iterable[E]) -> int:
        """
        Add all items from the iterable. Return how many were actually inserted.
        """
        added = 0
        for item in items:
            if self.add(item):
                added += 1
        return added

    def difference_update(self, items: Iterable[E]) -> int:
        """
        Remove all items in the iterable. Return how many were actually removed.
        """
        removed = 0
        for item in items:
            if self.remove(item):
                removed += 1
        return removed

    ############################################### Protocols ##################################################

    def __contains__(self, e) -> bool:
        return self.contains(e)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> "HashSetIterator[E]":
        return self.iterator()

    def __eq__(self, other):
        """
        Equal to another HashSet, set or frozenset holding the same elements
        """
        if isinstance(other, HashSet):
            return len(self) == len(other) and all(other.contains(e) for e in self._snapshot())
        elif isinstance(other, (set, frozenset)):
            return len(self) == len(other) and all(e in other for e in self._snapshot())
        return NotImplemented

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self._snapshot()) + "]"

    def __repr__(self) -> str:
        return f"HashSet([{', '.join(repr(e) for e in self._snapshot())}])"


class HashSetIterator(Generic[E]):
    """
    Walks a snapshot of the set taken when the iterator was created.

    Adds and removes made directly on the set afterwards are not seen. remove() is the exception:
    it drops the element last returned by next() from both the set and the snapshot.
    """

    def __init__(self, hash_set: HashSet[E]):
        self._set = hash_set
        self._elements: list[E] = hash_set._snapshot()
        self._current: int = 0
        self._can_remove: bool = False

    def __iter__(self) -> "HashSetIterator[E]":
        return self

    def __next__(self) -> E:
        if self._current >= len(self._elements):
            raise StopIteration

        e = self._elements[self._current]
        self._current += 1
        self._can_remove = True
        return e

    def has_next(self) -> bool:
        return self._current < len(self._elements)

    def remove(self) -> None:
        if not self._can_remove:
            if self._current == 0:
                raise IteratorStateError(ITERATOR_REMOVE_BEFORE_NEXT)
            raise IteratorStateError(ITERATOR_REMOVE_TWICE)

        # Step back so the element after the removed one is returned next
        self._current -= 1
        e = self._elements.pop(self._current)
        self._set.remove(e)
        self._can_remove = False
