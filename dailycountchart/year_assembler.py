"""
Build per-year daily count grids from timestamped elements.

This is the entry point of the engine: elements go in, one colored grid per
year comes out, ready for a renderer.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from dailycountchart.colorizer import colorize
from dailycountchart.configuration import Configuration
from dailycountchart.grid_builder import DayCell, build_grid
from dailycountchart.year_partitioner import distinct_years, group_by_year


@dataclass(frozen=True)
class YearResult:
    """A year's grid and the number of elements in it."""

    year: int
    total: int
    days: tuple[DayCell, ...]


def build_years(
    elements: Iterable[Any],
    configuration: Optional[Configuration] = None,
) -> list[YearResult]:
    """
    Build colored grids for every year present in the elements.

    Args:
        elements: Timestamped elements in any order
        configuration: Options; None means all defaults

    Returns:
        One YearResult per distinct year, ascending by year
    """
    if configuration is None:
        configuration = Configuration()

    elements = list(elements)
    element_time = configuration.time_fn()
    empty_color = configuration.empty_color()
    color_fn = configuration.color_fn()

    # Group once so each grid only scans its own year
    by_year = group_by_year(elements, element_time)

    results = []
    for year in distinct_years(elements, element_time):
        days = build_grid(year, by_year[year], element_time)
        colorize(days, empty_color, color_fn)
        results.append(
            YearResult(
                year=year,
                total=sum(day.count for day in days),
                days=tuple(days),
            )
        )

    return results
