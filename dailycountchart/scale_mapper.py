"""
Linear mapping between numeric ranges.
"""


def map_range(
    from_low: float,
    from_high: float,
    to_low: float,
    to_high: float,
    value: float,
) -> float:
    """
    Map a value from one range onto another.

    Values outside [from_low, from_high] extrapolate linearly; nothing is
    clamped.

    Args:
        from_low: Low end of the source range
        from_high: High end of the source range
        to_low: Value that from_low maps to
        to_high: Value that from_high maps to
        value: Value to map

    Returns:
        The mapped value

    Raises:
        ZeroDivisionError: If from_low == from_high
    """
    return to_low + (to_high - to_low) / (from_high - from_low) * (value - from_low)
