"""
Calendar grid for one year of a daily count chart.

Each day becomes a cell positioned by week column and weekday row, the way
a contribution graph lays out a year: columns run left to right, Sunday is
the top row and Saturday the bottom.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Iterable

from dailycountchart.year_partitioner import (
    ElementTime,
    default_element_time,
    element_date,
    last_occupied_date,
)

SATURDAY = 5  # date.weekday() value


@dataclass
class DayCell:
    """
    One calendar day in a year's grid.

    The bucket is fixed when the grid is built; only the color is assigned
    afterwards, by the colorizer.
    """

    date: date
    week_column: int
    bucket: tuple[Any, ...] = ()
    color: str = ""

    @property
    def weekday_row(self) -> int:
        """Row index from Sunday=1 to Saturday=7."""
        return self.date.isoweekday() % 7 + 1

    @property
    def count(self) -> int:
        """Number of elements on this day."""
        return len(self.bucket)


def build_grid(
    year: int,
    elements: Iterable[Any],
    element_time: ElementTime = default_element_time,
) -> list[DayCell]:
    """
    Build the day cells for a year and bucket elements into them.

    The grid starts on January 1 and stops at the last date in the year that
    has an element. The week column starts at 1 and advances after every
    Saturday.

    Args:
        year: Calendar year to build
        elements: Elements to bucket; elements from other years are ignored
        element_time: Function returning an element's timestamp

    Returns:
        Day cells in ascending date order, empty if no element falls in the year
    """
    elements = list(elements)
    last_date = last_occupied_date(year, elements, element_time)
    if last_date is None:
        return []

    jan_first = date(year, 1, 1)

    # Single pass: every element lands in the bucket for its own date
    buckets: list[list[Any]] = [[] for _ in range((last_date - jan_first).days + 1)]
    for element in elements:
        day = element_date(element_time(element))
        if day.year != year:
            continue
        buckets[(day - jan_first).days].append(element)

    days = []
    week_column = 1
    current = jan_first
    for bucket in buckets:
        days.append(DayCell(date=current, week_column=week_column, bucket=tuple(bucket)))
        if current.weekday() == SATURDAY:
            week_column += 1
        current += timedelta(days=1)

    return days
