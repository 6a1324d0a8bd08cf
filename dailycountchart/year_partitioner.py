"""
Group timestamped elements by calendar year.
"""

from datetime import date, datetime, timezone
from typing import Any, Callable, Iterable, Optional

ElementTime = Callable[[Any], date | datetime]


def default_element_time(element: Any) -> date | datetime:
    """Read the element's timestamp attribute."""
    return element.timestamp


def element_date(timestamp: date | datetime) -> date:
    """
    Get the UTC calendar date for a timestamp.

    Aware datetimes are converted to UTC first. Naive datetimes are assumed
    to already be in UTC, and plain dates are returned unchanged.
    """
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is not None:
            timestamp = timestamp.astimezone(timezone.utc)
        return timestamp.date()
    return timestamp


def distinct_years(
    elements: Iterable[Any],
    element_time: ElementTime = default_element_time,
) -> list[int]:
    """
    Find the years present in the elements.

    Returns:
        Sorted list of unique years (ascending)
    """
    years = {element_date(element_time(element)).year for element in elements}
    return sorted(years)


def group_by_year(
    elements: Iterable[Any],
    element_time: ElementTime = default_element_time,
) -> dict[int, list[Any]]:
    """
    Partition elements by calendar year.

    Returns:
        Mapping of year to that year's elements, each list in input order
    """
    groups: dict[int, list[Any]] = {}
    for element in elements:
        year = element_date(element_time(element)).year
        groups.setdefault(year, []).append(element)
    return groups


def last_occupied_date(
    year: int,
    elements: Iterable[Any],
    element_time: ElementTime = default_element_time,
) -> Optional[date]:
    """
    Find the latest date within a year that has at least one element.

    Returns:
        The latest occupied date, or None if no element falls in the year
    """
    last = None
    for element in elements:
        current = element_date(element_time(element))
        if current.year == year and (last is None or current > last):
            last = current
    return last
