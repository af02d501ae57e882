"""A sigma range of a calibrated date."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SigmaRange:
    """A contiguous range of calibrated years at a given probability level."""

    begin: int
    end: int
    sigma_level: float

    def to_json(self) -> dict:
        """Return the range as a JSON-ready mapping."""
        return {
            "sigma_level": self.sigma_level,
            "begin": self.begin,
            "end": self.end,
        }