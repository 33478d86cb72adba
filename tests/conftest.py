from __future__ import annotations

from collections import deque
from typing import Iterable

import pytest


class ScriptedSource:
    """RandomSource replaying fixed draws; raises IndexError when exhausted."""

    def __init__(
        self,
        ints: Iterable[int] = (),
        doubles: Iterable[float] = (),
        data: bytes = b"",
    ):
        self.ints = deque(ints)
        self.doubles = deque(doubles)
        self.data = bytearray(data)
        self.int_calls = []

    def next_int(self, low: int, high: int) -> int:
        self.int_calls.append((low, high))
        return self.ints.popleft()

    def next_double(self) -> float:
        return self.doubles.popleft()

    def next_bytes(self, n: int) -> bytes:
        if len(self.data) < n:
            raise IndexError("scripted bytes exhausted")
        out, self.data = bytes(self.data[:n]), self.data[n:]
        return out


class StepClock:
    """Fake perf_counter: each method run takes the next scripted duration."""

    def __init__(self, durations_s: Iterable[float]):
        self._durations = deque(durations_s)
        self._now = 0.0
        self._started = False

    def __call__(self) -> float:
        if self._started:
            self._now += self._durations.popleft()
        self._started = not self._started
        return self._now


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def step_clock():
    return StepClock
