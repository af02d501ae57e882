"""A collection of calibrated dates."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from .cal_date import CalDate

MIN_PROBABILITY = 1e-5


class CalDateList:
    """An ordered list of calibrated dates with JSON and CSV export."""

    def __init__(self, dates: Iterable[CalDate] = ()) -> None:
        self.dates: list[CalDate] = list(dates)

    def __iter__(self) -> Iterator[CalDate]:
        return iter(self.dates)

    def __len__(self) -> int:
        return len(self.dates)

    def append(self, date: CalDate) -> None:
        """Add a date to the end of the list."""
        self.dates.append(date)

    def to_json(self) -> dict | None:
        """Map each date's name to its JSON form; None for an empty list."""
        if not self.dates:
            return None
        return {date.name: date.to_json() for date in self.dates}

    def to_csv(self) -> str:
        """CSV with a header row followed by every date's rows."""
        return "name,bp,probability\n" + "".join(d.to_csv() for d in self.dates)

    def sum(self) -> None:
        """Append a date named ``sum`` holding the summed full probabilities."""
        if not self.dates:
            return
        totals: dict[int, float] = {}
        for date in self.dates:
            for year, prob in zip(date.full_bp, date.full_probabilities):
                totals[year] = totals.get(year, 0.0) + prob
        kept = [(y, p) for y, p in sorted(totals.items()) if p >= MIN_PROBABILITY]
        if not kept:
            print("Filtered probs or full_bp is empty", file=sys.stderr)
            return
        years = [y for y, _ in kept]
        probs = [p for _, p in kept]
        self.dates.append(CalDate("sum", probs, years, 0, 0, list(years), list(probs)))