"""A calibrated radiocarbon date."""

from __future__ import annotations

import math
import random
from bisect import bisect_right
from dataclasses import dataclass, field
from itertools import accumulate, groupby

from .sigma_range import SigmaRange

SIGMA_LEVEL = 0.954
SAMPLE_RUNS = 5000


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class CalDate:
    """Probabilities over calibrated years for one dated sample."""

    name: str = ""
    probabilities: list[float] = field(default_factory=list)
    bp: list[int] = field(default_factory=list)
    uncal_bp: int = 0
    uncal_error: int = 0
    full_bp: list[int] = field(default_factory=list)
    full_probabilities: list[float] = field(default_factory=list)
    sigma_ranges: list[SigmaRange] = field(default_factory=list)

    def to_json(self) -> dict:
        """Return the date as a JSON-ready mapping."""
        return {
            "uncal_bp": self.uncal_bp,
            "uncal_error": self.uncal_error,
            "probabilities": list(self.probabilities),
            "bp": list(self.bp),
            "sigma_ranges": self.sigma_ranges_to_json(),
        }

    def sigma_ranges_to_json(self) -> list[dict] | None:
        """The sigma ranges as a list, or None when there are none."""
        if not self.sigma_ranges:
            return None
        return [r.to_json() for r in self.sigma_ranges]

    def calculate_sigma_ranges(self, rng: random.Random | None = None) -> None:
        """Estimate the highest density ranges and add them to ``sigma_ranges``."""
        tail = 1 - SIGMA_LEVEL
        ends = self._range_ends(tail, rng or random.Random())
        for begin, end in zip(ends[::2], ends[1::2]):
            self.sigma_ranges.append(SigmaRange(begin, end, 1 - tail))

    def _range_ends(self, tail: float, rng: random.Random) -> list[int]:
        probs = self.probabilities
        if not probs:
            return []
        cum_sum = list(accumulate(probs))
        total = cum_sum[-1]
        last = len(probs) - 1
        samples = sorted(
            probs[min(bisect_right(cum_sum, rng.random() * total), last)]
            for _ in range(SAMPLE_RUNS)
        )
        threshold = samples[math.floor((len(samples) - 1) * tail)]

        crossings: list[int] = []
        start = 0
        while start < len(probs):
            lower = next(
                (k for k in range(start, len(probs)) if probs[k] > threshold),
                len(probs),
            )
            upper = next(
                (k for k in range(lower, len(probs)) if probs[k] < threshold),
                len(probs),
            )
            if upper == len(probs):
                break
            crossings.extend((lower, upper))
            start = upper + 1

        ends = [self._interpolate_crossing(a, threshold) for a in crossings]
        return [value for value, _ in groupby(ends)]

    def _interpolate_crossing(self, a: int, threshold: float) -> int:
        if a == 0:
            return self.bp[0]
        b = a - 1
        mu = (threshold - self.probabilities[a]) / (
            self.probabilities[b] - self.probabilities[a]
        )
        return _round_half_away(self.bp[a] * (1 - mu) + self.bp[b] * mu)

    def to_csv(self) -> str:
        """One ``name,bp,probability`` line per calibrated year."""
        return "".join(
            f"{self.name},{year},{prob:g}\n"
            for year, prob in zip(self.bp, self.probabilities)
        )