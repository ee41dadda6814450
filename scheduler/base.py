"""
Abstract base class for all scheduling policies (Strategy pattern).

The benchmark and any dispatcher only know about AbstractScheduler —
they call enqueue(), dequeue() and cancel() without caring whether the
jobs sit in buckets or in a heap.

To add a new scheduling policy:
1. Create a new class that inherits AbstractScheduler
2. Implement all abstract methods
3. Register it in scheduler/registry.py

SchedulableJob is a lightweight data transfer object (DTO) — just the fields
the scheduler needs to make decisions.
"""

from abc import ABC, abstractmethod
from typing import Optional
from dataclasses import dataclass, field


@dataclass
class SchedulableJob:
    """
    Lightweight representation of a job for scheduling decisions.

    priority follows the bucket queue convention: 0 = most urgent,
    5 = least urgent (see models.enums.Priority).
    """
    job_id: str
    job_type: str
    priority: int              # 0 = highest, 5 = lowest
    enqueued_at: float = 0.0   # timestamp when handed to the scheduler
    payload: dict = field(default_factory=dict)


class AbstractScheduler(ABC):
    """
    Interface that all scheduling policies implement.

    - enqueue: add a job
    - dequeue: remove and return the next job (None if empty)
    - peek: look at the next job without removing it (None if empty)
    - cancel: drop a queued job by id (False if it isn't queued)
    - size: how many jobs are queued
    """

    @abstractmethod
    def enqueue(self, job: SchedulableJob) -> None:
        """Add a job to this scheduler's internal queue."""
        ...

    @abstractmethod
    def dequeue(self) -> Optional[SchedulableJob]:
        """Remove and return the next job to execute, or None if empty."""
        ...

    @abstractmethod
    def peek(self) -> Optional[SchedulableJob]:
        """View the next job without removing it. Returns None if empty."""
        ...

    @abstractmethod
    def cancel(self, job_id: str) -> bool:
        """Remove a queued job by id. Returns False if it isn't queued."""
        ...

    @abstractmethod
    def size(self) -> int:
        """Return the number of jobs currently in the queue."""
        ...

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this policy (e.g., 'bucket', 'heap')."""
        ...
