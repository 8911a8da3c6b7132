"""Summation with wall-clock timing."""

from __future__ import annotations

import time
from collections.abc import Iterable
from typing import NamedTuple


class TimedSum(NamedTuple):
    """The sum of some values and the seconds it took to compute."""

    total: int
    seconds: float


def timed_sum(values: Iterable[int]) -> TimedSum:
    """Sum ``values`` and measure how long the summation takes."""
    start = time.perf_counter()
    total = 0
    for value in values:
        total += value
    elapsed = time.perf_counter() - start
    return TimedSum(total, elapsed)