"""Core modules for tickscale: the scale itself, events, and configuration."""

from tickscale.core.config import DEFAULTS, STEP_TABLE, StepMultiplier
from tickscale.core.events import EventBus, EventType
from tickscale.core.tick_scale import (
    InvalidConfiguration,
    Tick,
    TickScale,
    decompose_step,
    select_scale,
    snap_to_step,
)

__all__ = [
    "TickScale",
    "Tick",
    "InvalidConfiguration",
    "select_scale",
    "decompose_step",
    "snap_to_step",
    "EventBus",
    "EventType",
    "DEFAULTS",
    "STEP_TABLE",
    "StepMultiplier",
]
