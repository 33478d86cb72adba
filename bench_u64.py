#!/usr/bin/env python3
"""
Benchmark six ways of building a random unsigned 64-bit integer from a source
that natively draws signed 32-bit integers.

Each method runs a fixed 100,000 times; elapsed wall time is printed after
each method, then the methods are ranked fastest -> slowest.

Run examples:
  uv run bench_u64.py
  uv run --with psutil bench_u64.py --mem-sample --env --no-pause
  uv run bench_u64.py --seed 42
"""

from __future__ import annotations

import argparse
import platform
import sys
from dataclasses import dataclass
from typing import List, Optional

from benchmark_engine import ITERATIONS, BenchmarkRunner, TimingRecord, rank
from common import RandomSource, SplitMix64Source, SystemRandomSource

SEPARATOR = "--------------------------------------------"


@dataclass(frozen=True)
class BenchConfig:
    seed: Optional[int]  # None -> unseeded system source
    pause: bool
    show_env: bool
    mem_sample: bool


# ----------------------------
# Reporting
# ----------------------------


def _gil_enabled_best_effort() -> Optional[bool]:
    fn = getattr(sys, "_is_gil_enabled", None)
    if callable(fn):
        return bool(fn())
    return None


def _print_env(cfg: BenchConfig) -> None:
    print("=== environment ===")
    print(f"Python ({sys.implementation.name}): {sys.version}")
    print(f"OS: {platform.platform()}, arch {platform.machine()}")
    gil = _gil_enabled_best_effort()
    if gil is not None:
        print(f"gil_enabled: {gil}")
    print(f"seed: {'none' if cfg.seed is None else cfg.seed}  mem_sample: {cfg.mem_sample}")
    print("===================")


def _fmt_val(x: Optional[int]) -> str:
    return "n/a" if x is None else str(x)


def print_record(record: TimingRecord) -> None:
    print(SEPARATOR)
    print(f"Running {record.name}()")
    print(f"Elapsed time: {record.elapsed_ms} milliseconds")
    if record.rss_before is not None or record.rss_after is not None:
        print(
            f"rss_before: {_fmt_val(record.rss_before)}  rss_after: {_fmt_val(record.rss_after)}"
        )


def format_ranking(records: List[TimingRecord]) -> str:
    order = ", ".join(str(n) for n in rank(records))
    return f"Methods in order of speed (fastest -> slowest): {order}"


def _wait_for_enter() -> None:
    try:
        input()
    except EOFError:
        pass


# ----------------------------
# CLI
# ----------------------------


def parse_args(argv: Optional[List[str]] = None) -> BenchConfig:
    ap = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    ap.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Use a deterministic SplitMix64 source with this seed.",
    )
    ap.add_argument("--no-pause", dest="pause", action="store_false")
    ap.add_argument("--env", dest="show_env", action="store_true")
    ap.add_argument("--mem-sample", action="store_true")

    ns = ap.parse_args(argv)

    if ns.seed is not None and ns.seed < 0:
        raise SystemExit("--seed must be >= 0")

    return BenchConfig(
        seed=ns.seed,
        pause=bool(ns.pause),
        show_env=bool(ns.show_env),
        mem_sample=bool(ns.mem_sample),
    )


def make_source(cfg: BenchConfig) -> RandomSource:
    if cfg.seed is None:
        return SystemRandomSource()
    return SplitMix64Source(cfg.seed)


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_args(argv)

    if cfg.mem_sample:
        try:
            import psutil  # noqa: F401
        except ImportError:
            raise SystemExit("psutil is required for memory sampling.")

    if cfg.show_env:
        _print_env(cfg)

    runner = BenchmarkRunner(make_source(cfg), sample_mem=cfg.mem_sample)

    print(f"{ITERATIONS} iterations for each method.")
    records = runner.run(on_record=print_record)

    print()
    print(format_ranking(records))

    if cfg.pause:
        _wait_for_enter()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
