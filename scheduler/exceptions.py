"""
Errors raised by the bucket queue.

Two failure kinds, both raised synchronously and never after a partial
mutation:

- EmptyQueueError: peek()/dequeue() on an empty queue. Recoverable — check
  `count` first, or catch it and try again later.
- InvalidPriorityError: enqueue()/try_remove() with a priority outside
  [0, NUMBER_OF_BUCKETS - 1]. That's a caller bug, not a runtime condition.

A stale handle is NOT an error: try_remove() just returns False.
"""


class QueueError(Exception):
    """Base class for bucket queue errors."""


class EmptyQueueError(QueueError, IndexError):
    """Raised when reading from a queue that holds no elements."""

    def __init__(self, message: str = "There are no elements in the queue."):
        super().__init__(message)


class InvalidPriorityError(QueueError, ValueError):
    """Raised when a priority falls outside the supported range."""

    def __init__(self, priority, max_priority: int):
        self.priority = priority
        self.max_priority = max_priority
        super().__init__(
            f"Invalid priority {priority!r}: must be an int in the range 0 to {max_priority}"
        )
