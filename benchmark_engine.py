#!/usr/bin/env python3
"""
Timing harness and ranking for the u64 generator methods.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

from common import RandomSource
from generators import METHODS, Method

ITERATIONS = 100_000

Clock = Callable[[], float]


@dataclass(frozen=True)
class TimingRecord:
    number: int
    name: str
    elapsed_ms: float
    rss_before: Optional[int] = None
    rss_after: Optional[int] = None


def run_benchmark(
    generator: Callable[[], int],
    iterations: int,
    clock: Clock = time.perf_counter,
) -> float:
    """Call `generator` `iterations` times; return elapsed milliseconds."""
    t0 = clock()
    for _ in range(iterations):
        generator()
    return (clock() - t0) * 1000.0


def rss_bytes() -> int:
    import psutil

    return int(psutil.Process().memory_info().rss)


def rank(records: Iterable[TimingRecord]) -> List[int]:
    """Method numbers, fastest first. sorted() is stable, so ties keep run order."""
    return [r.number for r in sorted(records, key=lambda r: r.elapsed_ms)]


class BenchmarkRunner:
    def __init__(
        self,
        source: RandomSource,
        methods: Sequence[Method] = METHODS,
        iterations: int = ITERATIONS,
        clock: Clock = time.perf_counter,
        sample_mem: bool = False,
    ):
        self.source = source
        self.methods = methods
        self.iterations = iterations
        self.clock = clock
        self.sample_mem = sample_mem

    def run(
        self, on_record: Optional[Callable[[TimingRecord], None]] = None
    ) -> List[TimingRecord]:
        records: List[TimingRecord] = []
        for method in self.methods:
            record = self._run_method(method)
            records.append(record)
            if on_record is not None:
                on_record(record)
        return records

    def _run_method(self, method: Method) -> TimingRecord:
        rss_before = rss_bytes() if self.sample_mem else None
        elapsed_ms = run_benchmark(
            method.bind(self.source), self.iterations, clock=self.clock
        )
        rss_after = rss_bytes() if self.sample_mem else None

        return TimingRecord(
            number=method.number,
            name=method.name,
            elapsed_ms=elapsed_ms,
            rss_before=rss_before,
            rss_after=rss_after,
        )
