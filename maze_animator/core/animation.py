import logging
from typing import Callable, Optional
from maze_animator.algo.base import Generator
from maze_animator.core.grid import GridSnapshot

logger = logging.getLogger(__name__)

RenderCallback = Callable[[Optional[GridSnapshot]], None]


class AnimationController:
    """
    Drives a Generator from a fixed-period timer.

    The timer is any object with start(interval_ms) and cancel(). It must call
    tick() once per period; the controller arms it on start() and cancels it
    when the maze is finished or a new run replaces the current one.
    """

    def __init__(self, generator: Generator, timer, fps: float, on_render: RenderCallback = None):
        if fps <= 0:
            raise ValueError(f"Frame rate must be positive, got {fps}")
        self.generator = generator
        self.timer = timer
        self.fps = fps
        self.on_render = on_render
        self.interval_ms = max(1, round(1000 / fps))
        self.runs = 0
        self._running = False
        self._in_tick = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self):
        # Never let two loops mutate the same grid
        if self._running:
            logger.debug("Cancelling in-flight run %d", self.runs)
        self.cancel()

        self.generator.start()
        self.runs += 1
        logger.info(f"Run {self.runs}: generating {self.generator.rows}x{self.generator.cols} maze at {self.fps} ticks/s")

        self.timer.start(self.interval_ms)
        self._running = True
        self.render()

    def cancel(self):
        self.timer.cancel()
        self._running = False

    def tick(self) -> bool:
        if not self._running:
            logger.debug("Ignoring tick: no active run")
            return False
        if self._in_tick:
            logger.debug("Ignoring re-entrant tick")
            return False

        self._in_tick = True
        try:
            alive = self.generator.step()
            self.render()
        finally:
            self._in_tick = False

        if not alive:
            self.cancel()
            logger.info(f"Run {self.runs} complete after {self.generator.step_count} steps")
        return alive

    def render(self):
        if self.on_render is not None:
            self.on_render(self.generator.snapshot())
