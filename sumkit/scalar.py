"""Scalar helpers, angle constants and random ranges."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

PI = 3.1415926535
HALF_PI = PI * 0.5
TWO_PI = PI * 2.0
DEG_TO_RAD = PI / 180.0
RAD_TO_DEG = 180.0 / PI

T = TypeVar("T")


def clamp(value, low, high):
    """Limit ``value`` to the closed interval ``[low, high]``."""
    return max(low, min(high, value))


def lerp(a, b, t: float):
    """Linear interpolation from ``a`` (t=0) to ``b`` (t=1)."""
    return a + (b - a) * t


def sqr(value):
    """Return ``value`` multiplied by itself."""
    return value * value


def _generator(rng: Optional[random.Random]) -> Any:
    return random if rng is None else rng


@dataclass(frozen=True)
class RangeInt:
    """An integer range from ``low`` to ``high``."""

    low: int = 0
    high: int = 0

    def random(self, rng: Optional[random.Random] = None) -> int:
        """A random integer in ``[low, high)``; raises ValueError on an empty range."""
        return _generator(rng).randrange(self.low, self.high)

    def random_inclusive(self, rng: Optional[random.Random] = None) -> int:
        """A random integer in ``[low, high]``."""
        return _generator(rng).randrange(self.low, self.high + 1)


@dataclass(frozen=True)
class Range(Generic[T]):
    """A range between two values of any type that supports ``+``, ``-`` and scaling."""

    low: T
    high: T

    def random(self, rng: Optional[random.Random] = None) -> T:
        """A random value on the segment from ``low`` to ``high``."""
        t = _generator(rng).random()
        return self.low + (self.high - self.low) * t