"""Engine input capture modules."""

from gridplane.api.input_events import PointerEvent, WheelEvent
from gridplane.input.input_controller import InputController

__all__ = ["InputController", "PointerEvent", "WheelEvent"]
