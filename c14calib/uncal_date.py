"""An uncalibrated radiocarbon date and its calibration."""

from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass

from .cal_curve import CalCurve
from .cal_date import CalDate

GRID_STEP = 5
DEGREES_OF_FREEDOM = 100
MIN_PROBABILITY = 1.0e-05


def student_t_pdf(x: float, df: float) -> float:
    """Density of Student's t distribution with ``df`` degrees of freedom at ``x``."""
    if df <= 0:
        raise ValueError("degrees of freedom must be positive")
    log_norm = (
        math.lgamma((df + 1) / 2)
        - math.lgamma(df / 2)
        - 0.5 * math.log(df * math.pi)
    )
    return math.exp(log_norm - (df + 1) / 2 * math.log1p(x * x / df))


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _interpolate(y1: int, y2: int, mu: float) -> int:
    return _round_half_away(y1 * (1 - mu) + y2 * mu)


@dataclass
class UncalDate:
    """A radiocarbon age in 14C years BP with its standard deviation."""

    name: str = ""
    bp: int = 0
    std: int = 0

    def calibrate(self, curve: CalCurve) -> CalDate:
        """Calibrate this date against ``curve`` on a 5-year grid."""
        full_bp, full_c14, full_error = self._date_grid(curve)
        probs = self._probabilities(full_error, full_c14)
        kept = [(year, p) for year, p in zip(full_bp, probs) if p > MIN_PROBABILITY]
        return CalDate(
            self.name,
            [p for _, p in kept],
            [year for year, _ in kept],
            self.bp,
            self.std,
            full_bp,
            probs,
        )

    def _probabilities(self, errors: list[int], c14_values: list[int]) -> list[float]:
        variance = self.std**2
        probs = [
            student_t_pdf((self.bp - c14) / math.sqrt(variance + err), DEGREES_OF_FREEDOM)
            for err, c14 in zip(errors, c14_values)
        ]
        norm = sum(probs) * GRID_STEP
        return [p / norm for p in probs]

    @staticmethod
    def _date_grid(curve: CalCurve) -> tuple[list[int], list[int], list[int]]:
        max_bp = curve.max_bp()
        count = (max_bp - curve.min_bp()) // GRID_STEP
        position = {}
        for idx, year in enumerate(curve.cal_bp):
            position.setdefault(year, idx)
        working_bp = curve.cal_bp[::-1]
        working_c14 = curve.c14_bp[::-1]
        working_error = curve.error[::-1]

        full_bp: list[int] = []
        full_c14: list[int] = []
        full_error: list[int] = []
        for step in range(count):
            year = max_bp - step * GRID_STEP
            idx = position.get(year)
            if idx is not None:
                c14 = curve.c14_bp[idx]
                err = curve.error[idx]
            else:
                upper = bisect_right(working_bp, year)
                if upper <= 0 or upper >= len(working_bp):
                    raise ValueError(f"year {year} lies outside the calibration curve")
                lower = upper - 1
                mu = (year - working_bp[lower]) / (working_bp[upper] - working_bp[lower])
                c14 = _interpolate(working_c14[lower], working_c14[upper], mu)
                err = _interpolate(working_error[lower], working_error[upper], mu)
            full_bp.append(year)
            full_c14.append(c14)
            full_error.append(err)
        return full_bp, full_c14, full_error