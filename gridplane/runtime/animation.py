"""Frame-driven animation of a scalar parameter."""

from __future__ import annotations

import logging
from collections.abc import Callable
from time import monotonic

from gridplane.api.errors import InvalidArgumentError
from gridplane.api.render_target import FrameCallback, FrameScheduler

logger = logging.getLogger(__name__)

AnimationCallback = Callable[[float], object]


class ManualFrameScheduler:
    """Frame scheduler driven explicitly by the host, one frame per `run_frame`.

    Callbacks requested while a frame runs are deferred to the next frame,
    matching display-refresh semantics.
    """

    def __init__(self) -> None:
        self._pending: list[FrameCallback] = []
        self._frame_index = 0

    def __call__(self, callback: FrameCallback) -> None:
        self.request_frame(callback)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    def run_frame(self) -> int:
        """Run every callback queued before this frame; returns how many ran."""
        due = self._pending
        self._pending = []
        self._frame_index += 1
        for callback in due:
            callback()
        return len(due)

    def run_until_idle(self, max_frames: int = 10_000) -> int:
        """Run frames until nothing is queued; returns the number of frames."""
        frames = 0
        while self._pending:
            if frames >= max_frames:
                raise RuntimeError(f"frame queue still busy after {max_frames} frames")
            self.run_frame()
            frames += 1
        return frames


class AnimationTask:
    """Loop state of one running animation.

    Advances `value` by `speed * elapsed_seconds` per frame. Once `value`
    reaches `end` it issues one last `callback(end)` plus redraw and stops,
    so the boundary value is drawn exactly once.
    """

    def __init__(
        self,
        *,
        callback: AnimationCallback,
        start: float,
        end: float,
        speed: float,
        schedule_frame: FrameScheduler,
        redraw: Callable[[], object],
        clock: Callable[[], float],
    ) -> None:
        self._callback = callback
        self._end = end
        self._speed = speed
        self._schedule_frame = schedule_frame
        self._redraw = redraw
        self._clock = clock
        self.value = start
        self.frames = 0
        self.finished = False
        self.cancelled = False
        self._then = clock()

    def start(self) -> None:
        self._schedule_frame(self._step)

    def cancel(self) -> None:
        """Stop issuing frames; the terminal frame is not drawn."""
        if not self.finished:
            self.cancelled = True
            logger.debug("animation_cancelled value=%g frames=%d", self.value, self.frames)

    def _step(self) -> None:
        if self.cancelled:
            return
        now = self._clock()
        elapsed = now - self._then
        self._then = now
        self.value += self._speed * elapsed
        self.frames += 1

        if self.value < self._end:
            self._callback(self.value)
            self._redraw()
            self._schedule_frame(self._step)
            return

        self.value = self._end
        self.finished = True
        self._callback(self._end)
        self._redraw()
        logger.debug("animation_finished end=%g frames=%d", self._end, self.frames)


class AnimationDriver:
    """Start independent animations against one frame scheduler."""

    def __init__(
        self,
        *,
        schedule_frame: FrameScheduler,
        redraw: Callable[[], object],
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._schedule_frame = schedule_frame
        self._redraw = redraw
        self._clock = clock or monotonic

    def run(
        self,
        callback: AnimationCallback,
        start: float,
        end: float,
        speed: float,
    ) -> AnimationTask:
        """Drive `callback(n)` from `start` to `end` at `speed` units per second."""
        if speed <= 0.0:
            raise InvalidArgumentError("speed must be > 0")
        task = AnimationTask(
            callback=callback,
            start=float(start),
            end=float(end),
            speed=float(speed),
            schedule_frame=self._schedule_frame,
            redraw=self._redraw,
            clock=self._clock,
        )
        logger.debug("animation_started start=%g end=%g speed=%g", start, end, speed)
        task.start()
        return task


__all__ = ["AnimationCallback", "AnimationDriver", "AnimationTask", "ManualFrameScheduler"]
