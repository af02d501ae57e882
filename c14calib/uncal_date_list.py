"""A collection of uncalibrated dates."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .cal_curve import CalCurve
from .cal_date_list import CalDateList
from .uncal_date import UncalDate


class UncalDateList:
    """An ordered list of uncalibrated dates."""

    def __init__(self, dates: Iterable[UncalDate] = ()) -> None:
        self.dates: list[UncalDate] = list(dates)

    def __iter__(self) -> Iterator[UncalDate]:
        return iter(self.dates)

    def __len__(self) -> int:
        return len(self.dates)

    def append(self, date: UncalDate) -> None:
        """Add a date to the end of the list."""
        self.dates.append(date)

    def calibrate(self, curve: CalCurve) -> CalDateList:
        """Calibrate every date against ``curve``, keeping the order."""
        return CalDateList(date.calibrate(curve) for date in self.dates)