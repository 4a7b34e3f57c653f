"""Configuration constants and the step multiplier table."""

from typing import NamedTuple


class StepMultiplier(NamedTuple):
    """One row of the step table: a minor multiplier and its major partner."""

    minor: float
    major: float


# Allowed multipliers within one order of magnitude. Each minor step is paired
# with the major multiplier on the same row; the pairing is fixed.
STEP_TABLE: tuple[StepMultiplier, ...] = (
    StepMultiplier(0.25, 1),
    StepMultiplier(0.5, 2),
    StepMultiplier(1, 5),
    StepMultiplier(2, 10),
)

# Row used when the step is not picked from the lattice (default day, forced step)
UNIT_STEP_INDEX = 2


class DEFAULTS:
    """Default configuration values."""

    # One calendar day in milliseconds, the step used when no hint is given
    DAY_UNIT = 86_400_000

    # Range padding applied before deriving the required step
    SAFETY_PADDING = 1.1

    # On-screen extent (pixels) used by the CLI when none is given
    DEFAULT_EXTENT = 400

    # Marker printed next to major ticks
    MAJOR_MARK = "*"
