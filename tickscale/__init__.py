"""
tickscale: nice-number tick scales for time-series chart axes.

Picks a step from 0.25/0.5/1/2 x 10^n, snaps the visible range to it and
walks the ticks from the last one back to the first.
"""

__version__ = "0.1.0"

from tickscale.cli import main
from tickscale.core.events import EventBus, EventType
from tickscale.core.tick_scale import InvalidConfiguration, Tick, TickScale, snap_to_step

__all__ = [
    "TickScale",
    "Tick",
    "InvalidConfiguration",
    "snap_to_step",
    "EventBus",
    "EventType",
    "main",
    "__version__",
]
