"""Time-value pairs and paired time/value series."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class TimeValue:
    """A single observation: value ``v`` at time ``t``."""

    t: float
    v: float


class Series:
    """Parallel sequences of times and values, iterated as TimeValue pairs."""

    def __init__(self, times: Sequence[float], values: Sequence[float]) -> None:
        if len(times) != len(values):
            raise ValueError(
                f"times and values differ in length: {len(times)} != {len(values)}"
            )
        self.times = tuple(float(t) for t in times)
        self.values = tuple(float(v) for v in values)

    def __iter__(self) -> Iterator[TimeValue]:
        return (TimeValue(t, v) for t, v in zip(self.times, self.values))

    def __len__(self) -> int:
        return len(self.times)

    def __repr__(self) -> str:
        return f"Series(times={list(self.times)!r}, values={list(self.values)!r})"