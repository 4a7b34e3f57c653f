"""Coordinate transformation utilities for pixel <-> value conversion."""

from typing import Iterator

from tickscale.core.tick_scale import Tick, TickScale


class AxisTransform:
    """Maps tick values onto an axis of a given on-screen extent.

    The axis spans the scale's snapped margins, so the first and last ticks
    sit exactly on the container edges. By default pixel 0 is margin_end, as
    for a vertical axis drawn top-down; with invert=False pixel 0 is
    margin_start.
    """

    def __init__(self, scale: TickScale, extent: float, invert: bool = True):
        """Initialize transformer.

        Args:
            scale: TickScale supplying the margins
            extent: Axis length in pixels
            invert: If True, larger values map to smaller pixels
        """
        self.scale = scale
        self.extent = extent
        self.invert = invert

    def value_to_pixel(self, value: float) -> float:
        """Convert a data value to a pixel offset along the axis.

        Args:
            value: Data value (same unit as the scale)

        Returns:
            Pixel offset from the axis origin, 0 if the margins are empty
        """
        margin_range = self.scale.margin_range
        if margin_range == 0:
            return 0.0

        if self.invert:
            return self.extent * (self.scale.margin_end - value) / margin_range
        return self.extent * (value - self.scale.margin_start) / margin_range

    def pixel_to_value(self, pixel: float) -> float:
        """Convert a pixel offset to a data value.

        Args:
            pixel: Pixel offset, clamped to [0, extent]

        Returns:
            Data value at that pixel
        """
        pixel = max(0, min(self.extent, pixel))
        frac = pixel / self.extent if self.extent else 0.0

        if self.invert:
            return self.scale.margin_end - frac * self.scale.margin_range
        return self.scale.margin_start + frac * self.scale.margin_range

    def tick_positions(self) -> Iterator[tuple[float, Tick]]:
        """Yield (pixel, tick) for every tick of the scale, top tick first."""
        for tick in self.scale.iter_ticks():
            yield self.value_to_pixel(tick.value), tick
