"""Tests for the tickscale layout and label helpers."""

import pytest

from tickscale.core.tick_scale import Tick, TickScale
from tickscale.utils.coordinate_transform import AxisTransform
from tickscale.utils.tick_formatter import decimals_for_step, format_tick_label


class TestAxisTransform:
    """Tests for mapping tick values onto the container."""

    @pytest.fixture
    def scale(self):
        """Margins [-200, 10200], 10400 units across."""
        return TickScale(0, 10_000, 1, 100)

    @pytest.fixture
    def transform(self, scale):
        """520px vertical axis: 20 units per pixel."""
        return AxisTransform(scale, extent=520)

    def test_margins_sit_on_edges(self, transform):
        assert transform.value_to_pixel(10_200) == 0
        assert transform.value_to_pixel(-200) == 520

    def test_value_to_pixel_middle(self, transform):
        assert transform.value_to_pixel(5000) == pytest.approx(260)

    def test_not_inverted(self, scale):
        transform = AxisTransform(scale, extent=520, invert=False)
        assert transform.value_to_pixel(-200) == 0
        assert transform.value_to_pixel(10_200) == 520
        assert transform.pixel_to_value(0) == -200

    def test_pixel_to_value_roundtrip(self, transform):
        assert transform.pixel_to_value(260) == pytest.approx(5000)
        assert transform.pixel_to_value(transform.value_to_pixel(7_400)) == pytest.approx(7_400)

    def test_pixel_to_value_clamped(self, transform):
        assert transform.pixel_to_value(-10) == 10_200
        assert transform.pixel_to_value(1000) == pytest.approx(-200)

    def test_tick_positions(self, transform):
        positions = list(transform.tick_positions())
        assert len(positions) == 53
        assert positions[0] == (0.0, Tick(10_200, False))
        assert positions[1][0] == pytest.approx(10)
        assert positions[-1][0] == pytest.approx(520)

    def test_follows_retreat(self, scale, transform):
        scale.retreat()
        assert transform.value_to_pixel(10_400) == 0


class TestTickFormatter:
    """Tests for tick label formatting."""

    @pytest.mark.parametrize(
        "step,decimals",
        [(200, 0), (1, 0), (0.5, 1), (0.25, 2), (2.5, 1), (86_400_000, 0)],
    )
    def test_decimals_for_step(self, step, decimals):
        assert decimals_for_step(step) == decimals

    def test_whole_values(self):
        assert format_tick_label(10_200.0, 200) == "10200"
        assert format_tick_label(-200.0, 200) == "-200"

    def test_fractional_values(self):
        assert format_tick_label(1.5, 0.25) == "1.50"
        assert format_tick_label(0.75, 0.25) == "0.75"

    def test_negative_zero(self):
        assert format_tick_label(-0.0, 1) == "0"
        assert format_tick_label(-0.001, 0.25) == "0.00"
