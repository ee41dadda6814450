"""
CLI entry point for running throughput benchmarks.

Usage:
    python -m benchmarks.run_benchmark                          # all policies
    python -m benchmarks.run_benchmark --policy bucket          # single policy
    python -m benchmarks.run_benchmark --num-jobs 100000        # bigger workload
    python -m benchmarks.run_benchmark --cancel-ratio 0.5 --seed 7

Defaults come from config/settings.py (BENCHMARK_* env vars).
"""

import argparse
import json
import logging

from benchmarks.throughput import ThroughputBenchmark
from config.settings import settings
from models.enums import SchedulingPolicy

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bucket Queue Throughput Benchmark")
    parser.add_argument(
        "--num-jobs", type=int, default=settings.BENCHMARK_NUM_JOBS,
        help=f"Number of jobs to enqueue (default: {settings.BENCHMARK_NUM_JOBS})",
    )
    parser.add_argument(
        "--policy", type=str, default="all",
        choices=[p.value for p in SchedulingPolicy] + ["all"],
        help="Which policy to benchmark (default: all)",
    )
    parser.add_argument(
        "--cancel-ratio", type=float, default=settings.BENCHMARK_CANCEL_RATIO,
        help=f"Fraction of jobs cancelled before draining "
             f"(default: {settings.BENCHMARK_CANCEL_RATIO})",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.BENCHMARK_SEED,
        help=f"Workload RNG seed (default: {settings.BENCHMARK_SEED})",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    print("=== Bucket Queue Throughput Benchmark ===")
    print(f"Jobs: {args.num_jobs} | Policy: {args.policy} | Cancel ratio: {args.cancel_ratio}\n")

    bench = ThroughputBenchmark(
        num_jobs=args.num_jobs, cancel_ratio=args.cancel_ratio, seed=args.seed,
    )

    if args.policy == "all":
        results = bench.run_all_policies()
    else:
        results = [bench.run(args.policy)]

    print("\n=== RESULTS ===")
    print(json.dumps(results, indent=2))

    # Summary table
    print("\n{:<10} {:>12} {:>20}".format("Policy", "Time (s)", "Throughput"))
    print("-" * 44)
    for r in results:
        print("{:<10} {:>12.6f} {:>14.2f} ops/s".format(
            r["policy"], r["wall_clock_sec"], r["throughput_ops_per_sec"]
        ))
    return results


if __name__ == "__main__":
    main()
