"""Plain numeric tick label formatting."""

import math


def decimals_for_step(step: float) -> int:
    """Number of decimals needed to tell adjacent ticks apart.

    Args:
        step: Distance between ticks

    Returns:
        0 for whole steps, otherwise enough digits to show the fraction
    """
    if step <= 0 or not math.isfinite(step):
        return 0
    decimals = 0
    while decimals < 12 and not math.isclose(round(step, decimals), step, rel_tol=0, abs_tol=1e-12):
        decimals += 1
    return decimals


def format_tick_label(value: float, step: float) -> str:
    """Format a tick label with the precision its step needs.

    Args:
        value: The tick value to format
        step: Distance between ticks on the axis

    Returns:
        Formatted string for the tick label
    """
    decimals = decimals_for_step(step)
    text = f"{value:.{decimals}f}"
    # avoid "-0"
    if float(text) == 0:
        text = text.lstrip("-")
    return text
