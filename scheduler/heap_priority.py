"""
Heap-based priority scheduler — the baseline the bucket policy is measured
against.

Jobs with the lowest priority NUMBER run first (0 = highest, 5 = lowest).
Ties are broken by insertion order via a monotonic counter.

Data structure: min-heap
- enqueue: heappush → O(log n)
- dequeue: heappop  → O(log n)
- cancel:  O(1) mark + lazy skip on the way out

heapq can't remove from the middle of the heap, so cancel() only marks the
entry as dead. Dead entries are popped and thrown away the next time they
reach the top. That's the classic "lazy deletion" trick — correct, but the
heap keeps carrying the garbage until it surfaces.

Priorities are validated with the same check as the bucket queue, so both
policies accept and reject exactly the same jobs.
"""

import heapq
import logging
from typing import Optional

from scheduler.base import AbstractScheduler, SchedulableJob
from scheduler.bucket_queue import check_priority

logger = logging.getLogger(__name__)


class _Entry:
    __slots__ = ("priority", "counter", "job", "cancelled")

    def __init__(self, priority: int, counter: int, job: SchedulableJob):
        self.priority = priority
        self.counter = counter
        self.job = job
        self.cancelled = False

    def __lt__(self, other: "_Entry") -> bool:
        return (self.priority, self.counter) < (other.priority, other.counter)


class HeapPriorityScheduler(AbstractScheduler):

    def __init__(self):
        self._heap: list[_Entry] = []
        self._entries: dict[str, _Entry] = {}
        self._counter: int = 0  # monotonic tiebreaker for heap stability

    def enqueue(self, job: SchedulableJob) -> None:
        priority = check_priority(job.priority)
        if job.job_id in self._entries:
            raise ValueError(f"Job {job.job_id} is already queued")

        entry = _Entry(priority, self._counter, job)
        self._counter += 1
        heapq.heappush(self._heap, entry)
        self._entries[job.job_id] = entry

    def dequeue(self) -> Optional[SchedulableJob]:
        self._discard_cancelled()
        if not self._heap:
            return None
        entry = heapq.heappop(self._heap)
        del self._entries[entry.job.job_id]
        return entry.job

    def peek(self) -> Optional[SchedulableJob]:
        self._discard_cancelled()
        return self._heap[0].job if self._heap else None

    def cancel(self, job_id: str) -> bool:
        entry = self._entries.pop(job_id, None)
        if entry is None:
            return False
        entry.cancelled = True
        logger.info(f"Cancelled job {job_id} (priority {entry.priority})")
        return True

    def size(self) -> int:
        return len(self._entries)

    @property
    def policy_name(self) -> str:
        return "heap"

    def _discard_cancelled(self) -> None:
        """Pop dead entries off the top until a live one (or nothing) is left."""
        while self._heap and self._heap[0].cancelled:
            heapq.heappop(self._heap)
