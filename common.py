from __future__ import annotations

import random
import struct
from typing import Optional, Protocol

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
U32_MASK = 0xFFFFFFFF
U64_MASK = 0xFFFFFFFFFFFFFFFF


class RandomSource(Protocol):
    """Randomness capability shared by all generator methods."""

    def next_int(self, low: int, high: int) -> int: ...
    def next_double(self) -> float: ...
    def next_bytes(self, n: int) -> bytes: ...


class SystemRandomSource:
    """
    Production source. Unseeded by default, so successive runs differ.

    next_int() treats `high` as exclusive, returns `low` when `high == low`
    and raises ValueError when `high < low`.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_int(self, low: int, high: int) -> int:
        if high < low:
            raise ValueError(f"empty range for next_int({low}, {high})")
        if high == low:
            return low
        return self._rng.randrange(low, high)

    def next_double(self) -> float:
        return self._rng.random()

    def next_bytes(self, n: int) -> bytes:
        return self._rng.randbytes(n)


class SplitMix64Source:
    """
    Seeded, reproducible source behind `--seed`; also the fixed stream used by
    the tests. Same RandomSource contract as SystemRandomSource.
    """

    __slots__ = ("state",)

    def __init__(self, seed: int):
        self.state = seed & U64_MASK

    def next_u64(self) -> int:
        self.state = (self.state + 0x9E3779B97F4A7C15) & U64_MASK
        z = self.state
        z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & U64_MASK
        z = (z ^ (z >> 27)) * 0x94D049BB133111EB & U64_MASK
        return z ^ (z >> 31)

    def next_int(self, low: int, high: int) -> int:
        if high < low:
            raise ValueError(f"empty range for next_int({low}, {high})")
        if high == low:
            return low
        return low + self.next_u64() % (high - low)

    def next_double(self) -> float:
        # top 53 bits -> [0, 1)
        return (self.next_u64() >> 11) * (1.0 / (1 << 53))

    def next_bytes(self, n: int) -> bytes:
        out = bytearray()
        while len(out) < n:
            out += self.next_u64().to_bytes(8, "little")
        return bytes(out[:n])


def as_uint32(value: int) -> int:
    """Reinterpret a signed 32-bit value's bit pattern as unsigned (mask)."""
    return value & U32_MASK


def reinterpret_int32(value: int) -> int:
    """Same reinterpretation as as_uint32(), done through the 4-byte storage."""
    return struct.unpack("<I", struct.pack("<i", value))[0]
