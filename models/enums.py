"""
Shared enumerations used across the project.

Priority inherits from int, so a member can go anywhere a plain priority
number is expected (bucket index, comparisons, heap keys). SchedulingPolicy
inherits from str, so it round-trips through env vars and CLI flags as
"bucket" / "heap", and typos become immediate errors instead of silent bugs.
"""

import enum


class Priority(enum.IntEnum):
    CRITICAL = 0      # served first: pages, payments, alerts
    HIGH = 1
    ELEVATED = 2
    NORMAL = 3        # default for most work
    LOW = 4
    BACKGROUND = 5    # reports, cleanups, anything that can wait


class SchedulingPolicy(str, enum.Enum):
    BUCKET = "bucket"  # BoundedPriorityQueue — O(1), fixed priorities 0..5
    HEAP = "heap"      # heapq baseline — O(log n), lazy cancellation
