"""
Configuration management for the dailycountchart web app.

Loads chart color defaults from environment variables. The chart engine
never reads these; the app passes them in through a Configuration.
"""

import os

from dotenv import load_dotenv

from dailycountchart import configuration
from dailycountchart.color_scale import DEFAULT_HUE, color_func
from dailycountchart.configuration import Configuration

# Load .env file from project root
load_dotenv()

EMPTY_DAY_COLOR = os.getenv("DAILY_COUNT_CHART_EMPTY_DAY_COLOR", configuration.EMPTY_DAY_COLOR)
CHART_HUE = os.getenv("DAILY_COUNT_CHART_HUE", str(DEFAULT_HUE))

MIN_HUE = 0
MAX_HUE = 360


def _parse_hue(value) -> int | None:
    """Return the hue as an int, or None if it is not an integer in range."""
    try:
        hue = int(value)
    except (TypeError, ValueError):
        return None
    if not MIN_HUE <= hue <= MAX_HUE:
        return None
    return hue


def validate_config():
    """Validate that the environment settings are usable."""
    problems = []

    if not EMPTY_DAY_COLOR or not EMPTY_DAY_COLOR.strip():
        problems.append("DAILY_COUNT_CHART_EMPTY_DAY_COLOR must not be empty")

    try:
        hue = int(CHART_HUE)
    except (TypeError, ValueError):
        problems.append(f"DAILY_COUNT_CHART_HUE must be an integer, got {CHART_HUE!r}")
    else:
        if not MIN_HUE <= hue <= MAX_HUE:
            problems.append(
                f"DAILY_COUNT_CHART_HUE must be between {MIN_HUE} and {MAX_HUE}, got {hue}"
            )

    if problems:
        raise ValueError(
            f"Invalid configuration: {'; '.join(problems)}\n"
            "Check your environment or .env file."
        )


def default_hue() -> int:
    """Return the configured hue, falling back to the built-in green."""
    hue = _parse_hue(CHART_HUE)
    if hue is None:
        return DEFAULT_HUE
    return hue


def chart_configuration(**options) -> Configuration:
    """
    Build a Configuration from the environment defaults.

    Args:
        **options: Other Configuration fields, e.g. chart_heading_title

    Returns:
        Configuration with the configured empty color and hue
    """
    empty_day_color = EMPTY_DAY_COLOR.strip() if EMPTY_DAY_COLOR else ""
    return Configuration(
        empty_day_color=empty_day_color or configuration.EMPTY_DAY_COLOR,
        color_function=color_func(default_hue()),
        **options,
    )
