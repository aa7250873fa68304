"""Engine rendering modules."""

from gridplane.rendering.recording import DrawCall, RecordingTarget
from gridplane.rendering.renderer import GridRenderer

__all__ = ["DrawCall", "GridRenderer", "RecordingTarget"]
