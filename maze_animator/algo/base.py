from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, Optional
from maze_animator.core.grid import GridSnapshot


class GeneratorState(Enum):
    IDLE = "Idle"
    GENERATING = "Generating"
    DONE = "Done"


class Generator(ABC):
    def __init__(self, rows: int, cols: int, seed: int = None):
        self.rows = rows
        self.cols = cols
        self.seed = seed
        self.state = GeneratorState.IDLE
        self.step_count = 0

    @abstractmethod
    def initialize(self, rows: int, cols: int):
        """Discards any previous run and prepares a fresh grid."""
        pass

    @abstractmethod
    def step(self) -> bool:
        """
        Advances the generation by one tick.
        Returns False once there is nothing left to do.
        """
        pass

    @abstractmethod
    def snapshot(self) -> Optional[GridSnapshot]:
        pass

    @property
    def done(self) -> bool:
        return self.state is GeneratorState.DONE

    def start(self):
        self.initialize(self.rows, self.cols)

    def run(self) -> Iterator[str]:
        """
        Yields once per step so a driver can pace the animation.
        The actual grid modifications happen in-place on the generator's grid.
        """
        if self.state is GeneratorState.IDLE:
            self.start()
        while self.step():
            yield f"{self.state.value}... Step: {self.step_count}"
        yield "Done"

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
