"""
Per-call options for building and rendering daily count charts.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from dailycountchart.color_scale import DEFAULT_HUE, ColorFunction, color_func
from dailycountchart.year_partitioner import ElementTime, default_element_time

EMPTY_DAY_COLOR = "#EAEAEA"


@dataclass
class Configuration:
    """
    Options for building and rendering daily count charts.

    Every field is optional; unset fields fall back to fixed defaults
    (a light grey empty day and the green scale).
    """

    empty_day_color: str = ""
    color_function: Optional[ColorFunction] = None
    # Labels receive a DayCell
    data_value_label: Optional[Callable[[Any], str]] = None
    title_label: Optional[Callable[[Any], str]] = None
    chart_heading_title: Optional[Callable[[int], str]] = None
    element_time: Optional[ElementTime] = None

    def empty_color(self) -> str:
        return self.empty_day_color or EMPTY_DAY_COLOR

    def color_fn(self) -> ColorFunction:
        return self.color_function or color_func(DEFAULT_HUE)

    def time_fn(self) -> ElementTime:
        return self.element_time or default_element_time

    def data_value(self, day) -> str:
        """Value for a cell's data-value attribute (the count by default)."""
        if self.data_value_label is None:
            return str(day.count)
        return self.data_value_label(day)

    def title(self, day) -> str:
        """Tooltip text for a cell, "<ISO date> [<count>]" by default."""
        if self.title_label is None:
            return f"{day.date.isoformat()} [{day.count}]"
        return self.title_label(day)

    def heading(self, year: int) -> Optional[str]:
        """Heading for a year's chart, or None when no heading is configured."""
        if self.chart_heading_title is None:
            return None
        return self.chart_heading_title(year)
