"""
Fixed-hue color scale for daily counts.

Lighter colors for quiet days, darker colors for busy ones.
"""

from typing import Callable

from dailycountchart.scale_mapper import map_range

DEFAULT_HUE = 127

# Lightness (percent) at the low and high ends of the scale
PALE_LIGHTNESS = 80
VIVID_LIGHTNESS = 20
SATURATION = 50

ColorFunction = Callable[[int, int, int], str]


def lightness_for(min_count: int, max_count: int, count: int) -> float:
    """
    Calculate the lightness percentage for a day's count.

    When min_count == max_count there is no range to scale across, so every
    qualifying day gets the vivid end of the scale.
    """
    if min_count == max_count:
        return float(VIVID_LIGHTNESS)
    return map_range(min_count, max_count, PALE_LIGHTNESS, VIVID_LIGHTNESS, count)


def color_func(hue: int = DEFAULT_HUE) -> ColorFunction:
    """
    Build a color function for the given hue.

    Args:
        hue: HSL hue in degrees (127 is a green)

    Returns:
        Function taking (min_count, max_count, count) and returning a CSS
        hsl() color string
    """

    def color(min_count: int, max_count: int, count: int) -> str:
        lightness = lightness_for(min_count, max_count, count)
        return f"hsl({hue}, {SATURATION}%, {lightness:.4f}%)"

    return color
