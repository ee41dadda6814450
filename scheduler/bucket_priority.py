"""
Bucket priority scheduler.

Same ordering as the heap policy — lowest priority number first, ties in
arrival order — but backed by BoundedPriorityQueue, so every operation is
O(1) instead of O(log n).

Cancellation is where buckets really pay off: enqueue() hands back a
Handle, we remember it by job_id, and cancel() unlinks the job straight
out of its bucket. No scanning, no tombstones left behind.

Tradeoff: only priorities 0..5 are accepted. A job outside that range
raises InvalidPriorityError at enqueue time.
"""

import logging
from typing import Optional

from scheduler.base import AbstractScheduler, SchedulableJob
from scheduler.bucket_queue import BoundedPriorityQueue, Handle

logger = logging.getLogger(__name__)


class BucketPriorityScheduler(AbstractScheduler):

    def __init__(self):
        self._queue: BoundedPriorityQueue[SchedulableJob] = BoundedPriorityQueue()
        self._handles: dict[str, Handle] = {}

    def enqueue(self, job: SchedulableJob) -> None:
        if job.job_id in self._handles:
            raise ValueError(f"Job {job.job_id} is already queued")
        self._handles[job.job_id] = self._queue.enqueue(job, job.priority)

    def dequeue(self) -> Optional[SchedulableJob]:
        if not self._queue:
            return None
        job = self._queue.dequeue()
        del self._handles[job.job_id]
        return job

    def peek(self) -> Optional[SchedulableJob]:
        return self._queue.peek() if self._queue else None

    def cancel(self, job_id: str) -> bool:
        handle = self._handles.get(job_id)
        if handle is None:
            return False

        removed = self._queue.try_remove(handle, handle.priority)
        del self._handles[job_id]
        if removed:
            logger.info(f"Cancelled job {job_id} (priority {handle.priority})")
        return removed

    def size(self) -> int:
        return self._queue.count

    @property
    def policy_name(self) -> str:
        return "bucket"
