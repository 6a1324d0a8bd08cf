"""
Random sample records for demonstrating the charts.
"""

import random
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

# Records are spread over roughly two years after the start time
SPREAD_DAYS = 365 * 2


@dataclass(frozen=True)
class Record:
    """A sample element with an index and a timestamp."""

    index: int
    timestamp: datetime


def make_random_records(
    start: datetime,
    count: int,
    rng: Optional[random.Random] = None,
) -> list[Record]:
    """
    Generate records on random days after start.

    Args:
        start: Earliest timestamp
        count: Number of records to generate
        rng: Random source, for reproducible samples

    Returns:
        List of Record objects in index order
    """
    if rng is None:
        rng = random.Random()

    return [
        Record(index=i, timestamp=start + timedelta(days=rng.randrange(SPREAD_DAYS)))
        for i in range(count)
    ]
