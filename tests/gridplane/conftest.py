from __future__ import annotations

import pytest

from gridplane.rendering.recording import RecordingTarget
from gridplane.runtime.animation import ManualFrameScheduler
from gridplane.runtime.grid import Grid


class FakeClock:
    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def target() -> RecordingTarget:
    return RecordingTarget(width=400.0, height=300.0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler() -> ManualFrameScheduler:
    return ManualFrameScheduler()


@pytest.fixture
def grid(target: RecordingTarget, scheduler: ManualFrameScheduler, clock: FakeClock) -> Grid:
    return Grid(target, schedule_frame=scheduler, clock=clock)
