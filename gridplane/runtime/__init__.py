"""Engine runtime: transform, scene, animation and the engine facade."""

from gridplane.runtime.animation import AnimationDriver, AnimationTask, ManualFrameScheduler
from gridplane.runtime.grid import Grid
from gridplane.runtime.scene import Scene
from gridplane.runtime.transform import CoordinateTransform
from gridplane.runtime.z_index import ZIndex

__all__ = [
    "AnimationDriver",
    "AnimationTask",
    "CoordinateTransform",
    "Grid",
    "ManualFrameScheduler",
    "Scene",
    "ZIndex",
]
