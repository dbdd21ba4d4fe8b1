import unittest
import sys
import os

# Headless SDL so the window can be opened without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pygame

from maze_animator.algo.backtracker import RecursiveBacktracker
from maze_animator.viz.renderer import Renderer, TICK_EVENT


def space_event():
    return pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)


class TestRenderer(unittest.TestCase):
    def setUp(self):
        self.gen = RecursiveBacktracker(3, 3, seed=4)
        # Slow timer so real ticks never land in the queue mid-test
        self.renderer = Renderer(self.gen, cell_size=10, fps=1)
        self.renderer.init_window()

    def tearDown(self):
        self.renderer.controller.cancel()
        pygame.quit()

    def test_eager_render_before_start(self):
        self.assertIsNone(self.renderer.snapshot)
        self.assertTrue(self.renderer.dirty)
        self.renderer.draw_grid()
        self.renderer.draw_hud()

    def test_cancel_discards_queued_ticks(self):
        self.renderer.controller.start()
        pygame.event.post(pygame.event.Event(TICK_EVENT))
        pygame.event.post(pygame.event.Event(TICK_EVENT))

        self.renderer.timer.cancel()
        self.assertEqual(pygame.event.get(TICK_EVENT), [])
        self.assertEqual(self.renderer.timer.interval_ms, 0)

    def test_space_restarts_run(self):
        self.renderer.controller.start()
        for _ in range(6):
            self.renderer.controller.tick()
        self.assertGreater(self.gen.step_count, 0)

        pygame.event.post(space_event())
        self.renderer.handle_input()

        snap = self.renderer.snapshot
        visited = [(r, c) for r in range(3) for c in range(3) if snap.cell(r, c).visited]
        self.assertEqual(visited, [(0, 0)])
        self.assertEqual(snap.cursor, (0, 0))
        self.assertEqual(self.gen.step_count, 0)
        self.assertEqual(self.renderer.controller.runs, 2)

    def test_tick_behind_space_is_skipped(self):
        self.renderer.controller.start()
        self.renderer.controller.tick()

        pygame.event.post(space_event())
        pygame.event.post(pygame.event.Event(TICK_EVENT))
        self.renderer.handle_input()

        self.assertEqual(self.gen.step_count, 0)
        self.assertTrue(self.renderer.controller.running)

    def test_tick_events_step_generator(self):
        self.renderer.controller.start()
        pygame.event.post(pygame.event.Event(TICK_EVENT))
        self.renderer.handle_input()
        self.assertEqual(self.gen.step_count, 1)

    def test_draws_finished_maze(self):
        ctrl = self.renderer.controller
        ctrl.start()
        while ctrl.running:
            ctrl.tick()

        self.renderer.draw_grid()
        self.assertEqual(self.renderer.snapshot.state, "Done")
        self.assertEqual(self.renderer.snapshot.cursor, (0, 0))
        # Cursor cell is painted in the cursor colour
        self.assertEqual(tuple(self.renderer.surface.get_at((5, 5)))[:3], Renderer.COLOR_CURSOR)
        self.renderer.draw_hud()


class TestRecorderSetup(unittest.TestCase):
    def test_output_named_after_grid(self):
        renderer = Renderer(RecursiveBacktracker(4, 5), cell_size=10, fps=30, record=True)
        recorder = renderer.recorder
        self.assertTrue(recorder.active)
        self.assertEqual(os.path.dirname(recorder.output_file), "recordings")
        self.assertTrue(os.path.basename(recorder.output_file).startswith("animate_4x5_"))
        self.assertTrue(recorder.output_file.endswith(".mp4"))
        # Nothing is written until the first frame
        self.assertIsNone(recorder.writer)

    def test_fps_matches_captured_frames(self):
        gen = RecursiveBacktracker(3, 3)
        self.assertEqual(Renderer(gen, cell_size=10, fps=24, record=True).recorder.fps, 24)
        self.assertEqual(Renderer(gen, cell_size=10, fps=240, record=True).recorder.fps, Renderer.MAX_FPS)
        self.assertEqual(Renderer(gen, cell_size=10, fps=0.2, record=True).recorder.fps, 1)

    def test_inactive_recorder_ignores_frames(self):
        renderer = Renderer(RecursiveBacktracker(2, 2), cell_size=10, fps=30)
        renderer.recorder.capture_frame(pygame.Surface((20, 20)))
        renderer.recorder.stop()
        self.assertEqual(renderer.recorder.frame_count, 0)


if __name__ == '__main__':
    unittest.main()
