"""
Six ways to build an unsigned 64-bit random integer from a source whose
native integer draw is a signed 32-bit value.

Every generator takes the shared RandomSource and returns an int in
[0, 2**64 - 1]. The only side effect is advancing the source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from common import INT32_MAX, INT32_MIN, RandomSource, as_uint32, reinterpret_int32


def method1(rng: RandomSource) -> int:
    """Sum of 32 unsigned 32-bit draws. Biased toward the low end, < 2**37."""
    result = 0
    for _ in range(32):
        result += as_uint32(rng.next_int(INT32_MIN, INT32_MAX))
    return result


def method2(rng: RandomSource) -> int:
    """High 32 bits from the first draw, low 32 bits from the second."""
    x1 = rng.next_int(INT32_MIN, INT32_MAX)
    x2 = rng.next_int(INT32_MIN, INT32_MAX)

    y = as_uint32(x1)
    y <<= 32
    y |= as_uint32(x2)
    return y


def method3(rng: RandomSource) -> int:
    """One float draw per bit; the bit is set on a draw strictly above 0.5."""
    result = 0
    for power in range(64):
        if rng.next_double() > 0.5:
            result |= 1 << power
    return result


def method4(rng: RandomSource) -> int:
    # next_int(0, 1) excludes 1, so no bit is ever set.
    result = 0
    for power in range(64):
        if rng.next_int(0, 1) == 1:
            result |= 1 << power
    return result


def method5(rng: RandomSource) -> int:
    """Eight random bytes read as a little-endian unsigned 64-bit integer."""
    return int.from_bytes(rng.next_bytes(8), "little", signed=False)


def method6(rng: RandomSource) -> int:
    result = reinterpret_int32(rng.next_int(INT32_MIN, INT32_MAX))
    result <<= 32
    result |= reinterpret_int32(rng.next_int(INT32_MIN, INT32_MAX))
    return result


@dataclass(frozen=True)
class Method:
    number: int
    name: str
    fn: Callable[[RandomSource], int]

    def bind(self, rng: RandomSource) -> Callable[[], int]:
        """Zero-argument callable for the timing harness."""
        fn = self.fn
        return lambda: fn(rng)


METHODS: Tuple[Method, ...] = (
    Method(1, "Method1", method1),
    Method(2, "Method2", method2),
    Method(3, "Method3", method3),
    Method(4, "Method4", method4),
    Method(5, "Method5", method5),
    Method(6, "Method6", method6),
)
