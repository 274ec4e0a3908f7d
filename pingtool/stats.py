"""Round-trip statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Stats:
    """Running totals of round-trip times, in microseconds."""

    count: int = 0
    success_count: int = 0
    acc: int = 0
    acc2: int = 0
    minimum: int = 0
    maximum: int = 0
    start: int = 0
    end: int = 0

    def gather(self, elapsed: int, success: bool) -> None:
        """Record one probe taking ``elapsed`` microseconds."""
        self.acc += elapsed
        self.acc2 += elapsed * elapsed
        if self.minimum > elapsed or self.minimum == 0:
            self.minimum = elapsed
        if self.maximum < elapsed:
            self.maximum = elapsed
        self.count += 1
        if success:
            self.success_count += 1

    def average(self) -> float:
        """Mean round-trip time in milliseconds over successful probes."""
        if not self.success_count:
            return math.nan
        return to_ms(self.acc) / self.success_count

    def mdev(self) -> float:
        """Standard deviation of round-trip times in milliseconds."""
        if not self.count:
            return math.nan
        mean = self.acc / self.count
        mean_square = self.acc2 / self.count
        return to_ms(math.sqrt(max(mean_square - mean * mean, 0.0)))


def subtract_time(after: int, before: int) -> int:
    """Return microseconds between two nanosecond timestamps."""
    return (after - before) // 1000


def to_ms(elapsed: float) -> float:
    """Convert microseconds to milliseconds."""
    return elapsed / 1000