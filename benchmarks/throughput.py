"""
Throughput benchmark — measures scheduler operations/sec under each policy.

How it works:
1. Build a deterministic workload: N jobs with random priorities 0..5,
   plus a random subset (cancel_ratio) picked for cancellation
2. Enqueue all N jobs, cancel the chosen subset, then drain the rest
3. Check the drain order never goes back to a more urgent priority
4. Calculate: throughput = total operations / wall clock time

Everything runs in-process — no network, no sleeps — so the number you
get is the cost of the data structure itself. Same seed → same workload
for every policy, so the comparison is apples to apples.
"""

import logging
import random
import time

from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.base import SchedulableJob
from scheduler.bucket_queue import NUMBER_OF_BUCKETS
from scheduler.registry import create_scheduler

logger = logging.getLogger(__name__)


class ThroughputBenchmark:

    def __init__(
        self,
        num_jobs: int = settings.BENCHMARK_NUM_JOBS,
        cancel_ratio: float = settings.BENCHMARK_CANCEL_RATIO,
        seed: int = settings.BENCHMARK_SEED,
    ):
        if num_jobs < 0:
            raise ValueError(f"num_jobs must be >= 0, got {num_jobs}")
        if not 0.0 <= cancel_ratio <= 1.0:
            raise ValueError(f"cancel_ratio must be in [0, 1], got {cancel_ratio}")
        self.num_jobs = num_jobs
        self.cancel_ratio = cancel_ratio
        self.seed = seed

    def build_workload(self) -> tuple[list[SchedulableJob], list[str]]:
        """Return (jobs to enqueue, job_ids to cancel). Deterministic per seed."""
        rng = random.Random(self.seed)
        jobs = [
            SchedulableJob(
                job_id=f"bench-{i}",
                job_type="bench",
                priority=rng.randrange(NUMBER_OF_BUCKETS),
                enqueued_at=float(i),
            )
            for i in range(self.num_jobs)
        ]
        num_cancel = int(self.num_jobs * self.cancel_ratio)
        to_cancel = [job.job_id for job in rng.sample(jobs, num_cancel)]
        return jobs, to_cancel

    def run(self, policy: str) -> dict:
        """Run the benchmark for a single policy."""
        jobs, to_cancel = self.build_workload()
        scheduler = create_scheduler(SchedulingPolicy(policy))

        start = time.perf_counter()
        for job in jobs:
            scheduler.enqueue(job)
        cancelled = sum(1 for job_id in to_cancel if scheduler.cancel(job_id))

        drained = 0
        last_priority = -1
        while (job := scheduler.dequeue()) is not None:
            if job.priority < last_priority:
                raise RuntimeError(
                    f"{policy}: job {job.job_id} (priority {job.priority}) "
                    f"dequeued after priority {last_priority}"
                )
            last_priority = job.priority
            drained += 1
        elapsed = time.perf_counter() - start

        if drained + cancelled != len(jobs):
            raise RuntimeError(
                f"{policy}: lost jobs ({drained} drained + {cancelled} cancelled "
                f"!= {len(jobs)} enqueued)"
            )

        total_ops = len(jobs) + len(to_cancel) + drained
        throughput = total_ops / elapsed if elapsed > 0 else 0.0
        logger.info(
            f"{policy}: {total_ops} ops in {elapsed:.4f}s "
            f"({cancelled} cancelled, {drained} drained)"
        )

        return {
            "policy": SchedulingPolicy(policy).value,
            "num_jobs": self.num_jobs,
            "cancelled": cancelled,
            "wall_clock_sec": round(elapsed, 6),
            "throughput_ops_per_sec": round(throughput, 2),
        }

    def run_all_policies(self) -> list[dict]:
        """Benchmark every registered policy on the same workload."""
        results = []
        for policy in SchedulingPolicy:
            logger.info(f"Benchmarking {policy.value}")
            results.append(self.run(policy.value))
        return results
