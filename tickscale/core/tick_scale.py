"""Nice-number tick scale for time-series axes.

A TickScale picks a step from the lattice ``10^i x m`` (``m`` taken from
STEP_TABLE), snaps the visible range outward to multiples of that step and
keeps a cursor that walks from the last tick down to the first.

Typical rendering loop:
    scale = TickScale(start_ms, end_ms, minimum_step=60, container_extent=400)
    while scale.has_next():
        draw_gridline(scale.current_value(), bold=scale.is_major())
        scale.advance()

All remainders use Python's floored ``%``: ``v % step`` is always in
``[0, step)``, so values before the origin snap and classify the same way as
values after it.
"""

import logging
import math
from typing import Iterator, NamedTuple, Optional

import numpy as np
import pandas as pd

from tickscale.core.config import DEFAULTS, STEP_TABLE, UNIT_STEP_INDEX
from tickscale.core.events import EventBus, EventType

logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    """Raised when a range, hint or step cannot produce a positive tick step."""


class Tick(NamedTuple):
    """A tick position and whether it deserves emphasis."""

    value: float
    major: bool


def snap_to_step(value: float, step: float) -> float:
    """Round a value to the nearest multiple of step.

    A remainder of exactly half a step rounds down, larger remainders round up.

    Args:
        value: Value to snap
        step: Tick step, must be positive

    Returns:
        The nearest multiple of step
    """
    if not step > 0:
        raise InvalidConfiguration(f"Step must be positive, got {step}")
    remainder = value % step
    rounded = value - remainder
    if remainder > 0.5 * step:
        return rounded + step
    return rounded


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def select_scale(
    start: float,
    end: float,
    minimum_step: float,
    container_extent: float,
) -> tuple[int, float]:
    """Pick the smallest lattice step that still honours the minimum step.

    The minimum step is expressed in screen units; it is converted to data
    units by how much of the (padded) range one screen unit covers.

    Args:
        start: Range start
        end: Range end
        minimum_step: Minimum on-screen distance between ticks
        container_extent: On-screen size of the axis, same unit as minimum_step

    Returns:
        Tuple of (multiplier_index, magnitude)

    Raises:
        InvalidConfiguration: If the extent is degenerate, the range is empty,
            or no lattice step up to the range's order of magnitude qualifies
    """
    if container_extent is None or not math.isfinite(container_extent) or container_extent <= 0:
        raise InvalidConfiguration(f"Container extent must be positive, got {container_extent}")

    safe_size = (end - start) * DEFAULTS.SAFETY_PADDING
    if safe_size <= 0:
        raise InvalidConfiguration(f"Cannot select a scale for the empty range [{start}, {end}]")
    if not math.isfinite(safe_size):
        raise InvalidConfiguration(f"Range [{start}, {end}] is too wide to measure")

    required = minimum_step * (safe_size / container_extent)
    if not math.isfinite(required):
        raise InvalidConfiguration(f"Required step overflows for minimum step {minimum_step}")
    upper = _round_half_up(math.log10(safe_size))

    for exponent in range(upper + 1):
        magnitude = 10.0**exponent
        for index, row in enumerate(STEP_TABLE):
            if magnitude * row.minor >= required:
                return index, magnitude

    raise InvalidConfiguration(
        f"No step up to 2e{upper} covers the required step {required:g} "
        f"(range [{start}, {end}], minimum step {minimum_step}, extent {container_extent})"
    )


def decompose_step(step: float) -> tuple[int, float]:
    """Split a step into (multiplier_index, magnitude).

    Steps on the lattice keep their natural row so major ticks follow the
    table; any other step uses itself as magnitude on the unit row.
    """
    for index, row in enumerate(STEP_TABLE):
        magnitude = step / row.minor
        if not math.isfinite(magnitude):
            continue
        exponent = round(math.log10(magnitude))
        if exponent >= 0 and magnitude == 10.0**exponent:
            return index, magnitude
    return UNIT_STEP_INDEX, float(step)


def _check_finite(name: str, value: float) -> None:
    if value is None or not math.isfinite(value):
        raise InvalidConfiguration(f"{name} must be a finite number, got {value}")


class TickScale:
    """Axis scale plus a cursor over its ticks.

    The cursor starts at ``margin_end`` and moves down with advance() until it
    falls below ``margin_start``. retreat() moves it back up, and also grows
    ``margin_end`` by one step: it extends the window rather than undoing a
    read. Re-ranging (or first()) restores the snapped margins.

    Instances are not shared between consumers; every iteration call mutates
    the cursor in place.

    Attributes:
        auto_scale: When False, set_range() keeps the current step
        clamp_count: Number of times advance() could not move the cursor
        events: EventBus receiving RANGE_CHANGED and CURSOR_CLAMPED
    """

    def __init__(
        self,
        start: float,
        end: float,
        minimum_step: Optional[float] = None,
        container_extent: Optional[float] = None,
        forced_step: Optional[float] = None,
        *,
        day_unit: float = DEFAULTS.DAY_UNIT,
        event_bus: Optional[EventBus] = None,
    ):
        """Create a scale and snap it to the given range.

        Args:
            start: Range start (e.g. milliseconds since epoch)
            end: Range end, not before start
            minimum_step: Minimum on-screen tick distance; None selects one day
            container_extent: On-screen axis size, required with minimum_step
            forced_step: Fixed step in data units, bypasses scale selection
            day_unit: Length of one day in the caller's unit
            event_bus: Bus for diagnostics (a private one is created if None)
        """
        _check_finite("Day unit", day_unit)
        if day_unit <= 0:
            raise InvalidConfiguration(f"Day unit must be positive, got {day_unit}")

        self.day_unit = day_unit
        self.events = event_bus if event_bus is not None else EventBus()
        self.auto_scale = True
        self.clamp_count = 0

        self._start = 0.0
        self._end = 0.0
        self._multiplier_index = UNIT_STEP_INDEX
        self._magnitude = float(day_unit)
        self._margin_start = 0.0
        self._margin_end = 0.0
        self._margin_range = 0.0
        self._current = 0.0

        self.set_range(start, end, minimum_step, container_extent, forced_step)

    def __repr__(self) -> str:
        return (
            f"TickScale(start={self._start!r}, end={self._end!r}, step={self.step!r}, "
            f"margin_start={self._margin_start!r}, margin_end={self._margin_end!r})"
        )

    # ========== RANGE ==========

    def set_range(
        self,
        start: float,
        end: float,
        minimum_step: Optional[float] = None,
        container_extent: Optional[float] = None,
        forced_step: Optional[float] = None,
    ) -> None:
        """Set a new range, reselect the scale and rewind the cursor.

        Inputs are validated before anything changes, so a rejected call
        leaves the previous scale in place.

        Raises:
            InvalidConfiguration: On degenerate inputs or when no step qualifies
        """
        _check_finite("Start", start)
        _check_finite("End", end)
        if start > end:
            raise InvalidConfiguration(f"Start {start} is after end {end}")

        if forced_step is not None:
            scale = self._check_forced_step(forced_step)
        elif not self.auto_scale:
            scale = (self._multiplier_index, self._magnitude)
        elif minimum_step is None:
            scale = (UNIT_STEP_INDEX, float(self.day_unit))
        else:
            _check_finite("Minimum step", minimum_step)
            if minimum_step < 0:
                raise InvalidConfiguration(f"Minimum step must not be negative, got {minimum_step}")
            scale = select_scale(start, end, minimum_step, container_extent)

        self._start = start
        self._end = end
        self._multiplier_index, self._magnitude = scale
        logger.debug(
            "Selected step %s (magnitude %s, row %d) for range [%s, %s]",
            self.step,
            self._magnitude,
            self._multiplier_index,
            start,
            end,
        )
        self.first()
        self.events.emit(EventType.RANGE_CHANGED, scale=self)

    def set_scale(self, step: float) -> None:
        """Set the step by hand and keep it across later set_range() calls."""
        self._multiplier_index, self._magnitude = self._check_forced_step(step)
        self.auto_scale = False
        self.first()
        self.events.emit(EventType.RANGE_CHANGED, scale=self)

    @staticmethod
    def _check_forced_step(step: float) -> tuple[int, float]:
        _check_finite("Forced step", step)
        if step <= 0:
            raise InvalidConfiguration(f"Forced step must be positive, got {step}")
        return decompose_step(step)

    def first(self) -> None:
        """Snap the margins one step outside the range and rewind the cursor."""
        step = self.step
        self._margin_end = snap_to_step(self._end + step, step)
        self._margin_start = snap_to_step(self._start - step, step)
        self._margin_range = self._margin_end - self._margin_start
        self._current = self._margin_end
        logger.debug("Margins [%s, %s] with step %s", self._margin_start, self._margin_end, step)

    # ========== READ ACCESS ==========

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    @property
    def multiplier_index(self) -> int:
        return self._multiplier_index

    @property
    def magnitude(self) -> float:
        return self._magnitude

    @property
    def step(self) -> float:
        """Distance between consecutive ticks."""
        return self._magnitude * STEP_TABLE[self._multiplier_index].minor

    @property
    def major_step(self) -> float:
        """Distance between major ticks."""
        return self._magnitude * STEP_TABLE[self._multiplier_index].major

    @property
    def margin_start(self) -> float:
        return self._margin_start

    @property
    def margin_end(self) -> float:
        return self._margin_end

    @property
    def margin_range(self) -> float:
        return self._margin_range

    @property
    def current(self) -> float:
        return self._current

    # ========== CURSOR ==========

    def has_next(self) -> bool:
        """True while the cursor has not passed margin_start."""
        return self._current >= self._margin_start

    def advance(self) -> None:
        """Move the cursor one step down.

        If the step is too small to change the cursor at its magnitude, the
        cursor jumps down to the range end when that is below it, and is
        exhausted otherwise, so the cursor never moves up. The clamp is
        counted, logged and emitted.
        """
        previous = self._current
        self._current -= self.step

        if self._current == previous:
            self.clamp_count += 1
            logger.warning(
                "Step %s does not move the cursor at %s; clamping to range end %s",
                self.step,
                previous,
                self._end,
            )
            self._current = self._end if self._end < previous else -math.inf
            self.events.emit(EventType.CURSOR_CLAMPED, scale=self, value=previous)

    def retreat(self) -> None:
        """Move the cursor one step up and grow margin_end by the same step.

        Unlike advance(), this changes the margins: use it to extend the
        iteration window upwards.
        """
        step = self.step
        self._current += step
        self._margin_end += step
        self._margin_range = self._margin_end - self._margin_start

    def current_value(self) -> float:
        """Return the tick under the cursor."""
        return self._current

    def is_major(self) -> bool:
        """True if the tick under the cursor is a whole multiple of the major step.

        Off-lattice steps such as 0.1 are not exact in binary, so the cursor
        drifts as it walks; remainders within a billionth of a step of a
        major tick still count.
        """
        major_step = self.major_step
        remainder = self._current % major_step
        tolerance = self.step * 1e-9
        return remainder <= tolerance or major_step - remainder <= tolerance

    def snap(self, value: float) -> float:
        """Round a value to the nearest tick of this scale."""
        return snap_to_step(value, self.step)

    # ========== BULK ACCESS ==========

    def iter_ticks(self) -> Iterator[Tick]:
        """Rewind and yield every tick from margin_end down to margin_start."""
        self.first()
        while self.has_next():
            yield Tick(self._current, self.is_major())
            self.advance()

    def __iter__(self) -> Iterator[Tick]:
        return self.iter_ticks()

    def to_array(self) -> np.ndarray:
        """Tick values, descending, as a float array."""
        return np.array([tick.value for tick in self.iter_ticks()], dtype=float)

    def to_frame(self) -> pd.DataFrame:
        """Ticks as a DataFrame with ``value`` and ``major`` columns."""
        return pd.DataFrame(list(self.iter_ticks()), columns=list(Tick._fields))
