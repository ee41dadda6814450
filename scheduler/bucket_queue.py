"""
Bounded priority queue (a.k.a. bucket queue).

A priority queue that only supports 6 priority levels (0..5, 0 = served
first), but in exchange every operation is O(1):

    priority:   0        1        2        3        4        5
              ┌────┐   ┌────┐   ┌────┐   ┌────┐   ┌────┐   ┌────┐
    buckets:  │ B C│   │ D  │   │ A  │   │    │   │    │   │    │
              └────┘   └────┘   └────┘   └────┘   └────┘   └────┘
                ▲
                └── min_priority = 0, head = "B"

Data structure: one FIFO "bucket" per priority level
- enqueue:    append to bucket tail            → O(1)
- dequeue:    pop from the min bucket's front  → O(1), plus at most a
              6-bucket scan when that bucket runs dry
- try_remove: unlink any element by its handle → O(1)

Compare with heapq (see scheduler/heap_priority.py): O(log n) per operation
and no real way to remove from the middle. When the priority domain is small
and fixed, buckets win.

Why the cached minimum is cheap to maintain:
- On enqueue the minimum can only move DOWN, and if it does it lands exactly
  on the bucket we just inserted into. No scan needed.
- On removal the minimum can only move UP, and only when the min bucket
  empties. Then we scan forward, but never past 6 buckets.

Each bucket is an arena of slots linked into a doubly linked list. A Handle
is (queue_id, priority, slot, generation). Removing an element bumps its
slot's generation, so an old handle stops matching even after the slot is
reused for a new element. That's how stale handles get rejected.

This class is NOT thread-safe. Wrap it in your own lock if several threads
share one instance.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from scheduler.exceptions import EmptyQueueError, InvalidPriorityError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# 6 priorities is plenty for task triage. Anything wider should use a heap.
NUMBER_OF_BUCKETS = 6
MAX_PRIORITY = NUMBER_OF_BUCKETS - 1

_queue_ids = itertools.count()


@dataclass(frozen=True)
class Handle:
    """
    Opaque token returned by enqueue(), used later by try_remove().

    Treat it as a ticket: it designates one element, and only while that
    element is still in the queue it came from.
    """
    queue_id: int
    priority: int
    slot: int
    generation: int


@dataclass
class _Slot:
    value: object = None
    generation: int = 0
    prev: Optional[int] = None
    next: Optional[int] = None
    live: bool = False


class _Bucket:
    """FIFO of slots at one priority level, with O(1) unlink by slot index."""

    def __init__(self):
        self.slots: list[_Slot] = []
        self.free: list[int] = []   # removed slots waiting to be reused
        self.first: Optional[int] = None
        self.last: Optional[int] = None
        self.size: int = 0

    def append(self, value) -> int:
        """Link value in at the tail and return its slot index."""
        if self.free:
            index = self.free.pop()
            slot = self.slots[index]
        else:
            index = len(self.slots)
            slot = _Slot()
            self.slots.append(slot)

        slot.value = value
        slot.live = True
        slot.prev = self.last
        slot.next = None

        if self.last is None:
            self.first = index
        else:
            self.slots[self.last].next = index
        self.last = index
        self.size += 1
        return index

    def holds(self, index: int, generation: int) -> bool:
        """True if slot `index` is live and still on the given generation."""
        if not 0 <= index < len(self.slots):
            return False
        slot = self.slots[index]
        return slot.live and slot.generation == generation

    def remove(self, index: int):
        """Unlink slot `index`, retire its generation and return its value."""
        slot = self.slots[index]

        if slot.prev is None:
            self.first = slot.next
        else:
            self.slots[slot.prev].next = slot.next
        if slot.next is None:
            self.last = slot.prev
        else:
            self.slots[slot.next].prev = slot.prev

        value = slot.value
        slot.value = None
        slot.prev = slot.next = None
        slot.live = False
        slot.generation += 1
        self.free.append(index)
        self.size -= 1
        return value


def check_priority(priority) -> int:
    """Return priority as a plain int, or raise InvalidPriorityError."""
    # bool is an int subclass, but True/False are never meant as priorities
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise InvalidPriorityError(priority, MAX_PRIORITY)
    if not 0 <= priority <= MAX_PRIORITY:
        raise InvalidPriorityError(priority, MAX_PRIORITY)
    return int(priority)


class BoundedPriorityQueue(Generic[T]):
    """
    FIFO-within-priority queue over the fixed range 0..5.

    Invariants after every public call:
    - count == total size of all buckets
    - non-empty: min_priority is the lowest non-empty bucket, and the head
      slot is that bucket's front
    - empty: min_priority and head are both None
    """

    def __init__(self):
        self._id = next(_queue_ids)
        self._buckets: list[_Bucket] = [_Bucket() for _ in range(NUMBER_OF_BUCKETS)]
        self._min_priority: Optional[int] = None
        self._head: Optional[int] = None  # slot index inside the min bucket
        self._count: int = 0

    @property
    def count(self) -> int:
        """Number of elements currently queued."""
        return self._count

    @property
    def min_priority(self) -> Optional[int]:
        """Priority of the element the next dequeue() returns, or None if empty."""
        return self._min_priority

    @property
    def head(self) -> Optional[Handle]:
        """Handle of the element the next dequeue() returns, or None if empty."""
        if self._head is None:
            return None
        slot = self._buckets[self._min_priority].slots[self._head]
        return Handle(self._id, self._min_priority, self._head, slot.generation)

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __repr__(self) -> str:
        sizes = [bucket.size for bucket in self._buckets]
        return (
            f"{type(self).__name__}(count={self._count}, "
            f"min_priority={self._min_priority}, buckets={sizes})"
        )

    def peek(self) -> T:
        """Return the next value without removing it. Raises EmptyQueueError."""
        if self._head is None:
            raise EmptyQueueError()
        return self._buckets[self._min_priority].slots[self._head].value

    def enqueue(self, value: T, priority: int) -> Handle:
        """
        Add `value` at the tail of bucket `priority` and return its handle.

        Raises InvalidPriorityError (before touching anything) if priority
        isn't an int in 0..5.
        """
        priority = check_priority(priority)

        bucket = self._buckets[priority]
        index = bucket.append(value)
        self._count += 1

        if self._min_priority is None or priority < self._min_priority:
            self._min_priority = priority
            self._head = index

        return Handle(self._id, priority, index, bucket.slots[index].generation)

    def dequeue(self) -> T:
        """Remove and return the next value. Raises EmptyQueueError."""
        if self._head is None:
            raise EmptyQueueError()

        bucket = self._buckets[self._min_priority]
        value = bucket.remove(self._head)
        self._count -= 1

        self._recalculate_head(bucket)
        return value

    def try_remove(self, handle: Handle, priority: int) -> bool:
        """
        Remove the element `handle` points at, if it's still queued at `priority`.

        Returns False (and changes nothing) when the handle is stale, came
        from another queue, or was issued for a different priority.
        Raises InvalidPriorityError if priority isn't an int in 0..5.
        """
        priority = check_priority(priority)

        if not isinstance(handle, Handle) or handle.queue_id != self._id:
            logger.debug(f"Rejected foreign handle: {handle!r}")
            return False
        if handle.priority != priority:
            logger.debug(f"Rejected handle {handle!r}: priority mismatch ({priority})")
            return False

        bucket = self._buckets[priority]
        if not bucket.holds(handle.slot, handle.generation):
            logger.debug(f"Rejected stale handle: {handle!r}")
            return False

        was_head = priority == self._min_priority and handle.slot == self._head
        bucket.remove(handle.slot)
        self._count -= 1

        if was_head:
            self._recalculate_head(bucket)
        return True

    def _recalculate_head(self, bucket: _Bucket) -> None:
        """
        Called after the head left `bucket` (the min bucket).

        If the bucket still has elements, its new front is the head.
        Otherwise scan the higher priorities for the next non-empty bucket.
        """
        if bucket.first is not None:
            self._head = bucket.first
            return

        for priority in range(self._min_priority + 1, NUMBER_OF_BUCKETS):
            candidate = self._buckets[priority]
            if candidate.first is not None:
                self._min_priority = priority
                self._head = candidate.first
                return

        self._min_priority = None
        self._head = None
