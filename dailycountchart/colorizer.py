"""
Assign colors to a year's day cells from their counts.
"""

import sys

from dailycountchart.color_scale import ColorFunction
from dailycountchart.grid_builder import DayCell


def colorize(days: list[DayCell], empty_color: str, color_fn: ColorFunction) -> None:
    """
    Color each day cell in place.

    The scale runs from the smallest to the largest count across every cell
    in the grid, empty cells included. Empty cells always get empty_color.

    Args:
        days: Day cells for one year
        empty_color: Color for days without elements
        color_fn: Function taking (min_count, max_count, count)
    """
    min_count = sys.maxsize
    max_count = 0
    for day in days:
        min_count = min(min_count, day.count)
        max_count = max(max_count, day.count)

    # Nothing to scale when every cell is empty
    if max_count == 0:
        for day in days:
            day.color = empty_color
        return

    for day in days:
        if day.count == 0:
            day.color = empty_color
        else:
            day.color = color_fn(min_count, max_count, day.count)
