import logging
import pygame
from maze_animator.algo.base import Generator
from maze_animator.core.animation import AnimationController
from maze_animator.core.cell import BOTTOM, LEFT, RIGHT, TOP

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class PygameTimer:
    """Fixed-period timer that posts TICK_EVENT into the pygame event queue."""

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.interval_ms = 0

    def start(self, interval_ms: int):
        self.interval_ms = interval_ms
        pygame.time.set_timer(self.event_type, interval_ms)

    def cancel(self):
        pygame.time.set_timer(self.event_type, 0)
        # Drop ticks still in the queue; ones already fetched by event.get() are
        # skipped by Renderer.handle_input
        if pygame.display.get_init():
            pygame.event.clear(self.event_type)
        self.interval_ms = 0


class Renderer:
    COLOR_BG = (0, 0, 0)
    COLOR_WALL = (255, 255, 255)
    COLOR_VISITED = (54, 69, 79)     # #36454F
    COLOR_CURSOR = (202, 44, 146)    # #CA2C92
    COLOR_TEXT = (255, 255, 255)

    # Display loop cap; at most one video frame is captured per loop
    MAX_FPS = 60

    def __init__(self, generator: Generator, cell_size: int, fps: float, record=False, autostart=False):
        self.generator = generator
        self.cell_size = cell_size
        self.screen_width = generator.cols * cell_size
        self.screen_height = generator.rows * cell_size
        self.autostart = autostart

        self.timer = PygameTimer()
        self.controller = AnimationController(generator, self.timer, fps, on_render=self.update_snapshot)

        from maze_animator.viz.recorder import VideoRecorder, recording_path
        self.recorder = VideoRecorder(recording_path(generator.rows, generator.cols),
                                      fps=max(1, min(int(round(fps)), self.MAX_FPS)), active=record)

        self.snapshot = None
        self.dirty = False
        self.show_hud = True
        self.font = None
        self.running = True
        self.clock = None
        self.surface = None

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Animator - {self.generator.rows}x{self.generator.cols} (SPACE to generate)")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 14)

        # Eager first frame; nothing to draw until the first run starts
        self.controller.render()
        if self.autostart:
            self.controller.start()

    def update_snapshot(self, snapshot):
        self.snapshot = snapshot
        self.dirty = True

    def handle_input(self):
        restarted = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == TICK_EVENT:
                # Ticks fetched in the same batch as a restart belong to the old timer
                if not restarted:
                    self.controller.tick()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    self.controller.start()
                    restarted = True
                elif event.key == pygame.K_h:
                    self.show_hud = not self.show_hud
                elif event.key == pygame.K_ESCAPE:
                    self.running = False

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)

        snapshot = self.snapshot
        if snapshot is None:
            return

        size = self.cell_size
        cur_row, cur_col = snapshot.cursor

        for row, cells in enumerate(snapshot.cells):
            for col, cell in enumerate(cells):
                x = col * size
                y = row * size

                if row == cur_row and col == cur_col:
                    pygame.draw.rect(self.surface, self.COLOR_CURSOR, (x, y, size, size))
                elif cell.visited:
                    pygame.draw.rect(self.surface, self.COLOR_VISITED, (x, y, size, size))

                walls = cell.walls
                if walls[TOP]:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (x, y), (x + size, y), 1)
                if walls[RIGHT]:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (x + size - 1, y), (x + size - 1, y + size), 1)
                if walls[BOTTOM]:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (x, y + size - 1), (x + size, y + size - 1), 1)
                if walls[LEFT]:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (x, y), (x, y + size), 1)

    def draw_hud(self):
        if not self.show_hud:
            return

        state = self.snapshot.state if self.snapshot else "Idle - press SPACE"
        info = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Size: {self.generator.rows}x{self.generator.cols}",
            f"Status: {state}",
            f"Steps: {self.generator.step_count}",
            "REC" if self.recorder.active else "",
        ]

        for i, text in enumerate(info):
            if not text:
                continue
            lbl = self.font.render(text, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (6, 6 + i * 16))

    def run_loop(self):
        while self.running:
            self.handle_input()

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            # One video frame per generator tick
            if self.recorder.active and self.dirty:
                self.recorder.capture_frame(self.surface)
            self.dirty = False

            self.clock.tick(self.MAX_FPS)

        self.controller.cancel()
        self.recorder.stop()
        pygame.quit()
