"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., LOG_LEVEL env var → Settings.LOG_LEVEL)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

The queue itself has no knobs (6 priorities, fixed). What's configurable
is everything around it: logging, which policy the CLI uses by default,
and the benchmark workload.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Scheduler ───────────────────────────────────────────────
    DEFAULT_SCHEDULING_POLICY: str = "bucket"

    # ── Benchmark ───────────────────────────────────────────────
    BENCHMARK_NUM_JOBS: int = 10_000
    BENCHMARK_CANCEL_RATIO: float = 0.1  # fraction of jobs cancelled before drain
    BENCHMARK_SEED: int = 42             # same seed → same workload for every policy

    # ── App ─────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this everywhere
settings = Settings()
