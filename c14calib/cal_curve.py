"""The radiocarbon calibration curve."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike

HEADER_LINES = 11

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse the leading integer of ``text``; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class CalCurve:
    """Calibrated years BP, matching 14C years BP and the curve's standard deviation."""

    cal_bp: list[int] = field(default_factory=list)
    c14_bp: list[int] = field(default_factory=list)
    error: list[int] = field(default_factory=list)

    @classmethod
    def from_file(cls, path: str | PathLike) -> "CalCurve":
        """Read a comma separated curve file, skipping its header.

        Reading stops at the first line that does not hold at least three
        comma-terminated fields. Raises ``FileNotFoundError`` if the file
        does not exist.
        """
        curve = cls()
        with open(path, encoding="utf-8", errors="replace") as handle:
            for lineno, line in enumerate(handle):
                if lineno < HEADER_LINES:
                    continue
                parts = line.rstrip("\n").split(",")
                if len(parts) < 4:
                    break
                curve.cal_bp.append(_atoi(parts[0]))
                curve.c14_bp.append(_atoi(parts[1]))
                curve.error.append(_atoi(parts[2]))
        return curve

    def rows(self) -> int:
        """Number of rows in the curve."""
        return len(self.cal_bp)

    def max_bp(self) -> int:
        """Largest calibrated BP value; ValueError on an empty curve."""
        return max(self.cal_bp)

    def min_bp(self) -> int:
        """Smallest calibrated BP value; ValueError on an empty curve."""
        return min(self.cal_bp)