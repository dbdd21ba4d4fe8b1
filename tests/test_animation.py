import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_animator.algo.backtracker import RecursiveBacktracker
from maze_animator.core.animation import AnimationController


class FakeTimer:
    def __init__(self):
        self.starts = []
        self.cancels = 0
        self.armed = False

    def start(self, interval_ms):
        self.starts.append(interval_ms)
        self.armed = True

    def cancel(self):
        self.cancels += 1
        self.armed = False


class TestAnimationController(unittest.TestCase):
    def setUp(self):
        self.frames = []
        self.timer = FakeTimer()
        self.gen = RecursiveBacktracker(3, 3, seed=8)
        self.ctrl = AnimationController(self.gen, self.timer, fps=60, on_render=self.frames.append)

    def drive(self):
        ticks = 0
        while self.timer.armed:
            self.ctrl.tick()
            ticks += 1
        return ticks

    def test_render_before_start(self):
        self.ctrl.render()
        self.assertEqual(self.frames, [None])
        self.assertFalse(self.ctrl.tick())
        self.assertFalse(self.ctrl.running)

    def test_start_arms_timer(self):
        self.ctrl.start()
        self.assertEqual(self.timer.starts, [17])
        self.assertTrue(self.timer.armed)
        self.assertTrue(self.ctrl.running)
        self.assertEqual(len(self.frames), 1)
        self.assertEqual(self.frames[0].cursor, (0, 0))

    def test_runs_to_completion_and_cancels(self):
        self.ctrl.start()
        ticks = self.drive()

        # 2 * (N - 1) working steps plus the one that detects completion
        self.assertEqual(ticks, 2 * 8 + 1)
        self.assertEqual(len(self.frames), 1 + ticks)
        self.assertTrue(self.gen.done)
        self.assertFalse(self.ctrl.running)
        self.assertEqual(self.frames[-1].state, "Done")

        # Late ticks are ignored
        self.assertFalse(self.ctrl.tick())
        self.assertEqual(len(self.frames), 1 + ticks)

    def test_restart_cancels_previous_run(self):
        self.ctrl.start()
        for _ in range(5):
            self.ctrl.tick()
        cancels = self.timer.cancels

        self.ctrl.start()
        self.assertEqual(self.timer.cancels, cancels + 1)
        self.assertEqual(len(self.timer.starts), 2)
        self.assertEqual(self.ctrl.runs, 2)

        snap = self.frames[-1]
        visited = [(r, c) for r in range(3) for c in range(3) if snap.cell(r, c).visited]
        self.assertEqual(visited, [(0, 0)])
        self.assertTrue(all(cell.walls == (True, True, True, True) for row in snap.cells for cell in row))

    def test_reentrant_tick_ignored(self):
        inner = []

        def render(snapshot):
            if snapshot is not None and snapshot.state == "Generating" and not inner and self.ctrl.running:
                if self.gen.step_count == 1:
                    inner.append(self.ctrl.tick())

        self.ctrl.on_render = render
        self.ctrl.start()
        self.assertTrue(self.ctrl.tick())

        self.assertEqual(inner, [False])
        self.assertEqual(self.gen.step_count, 1)

    def test_invalid_fps(self):
        with self.assertRaises(ValueError):
            AnimationController(self.gen, self.timer, fps=0)

    def test_interval_floor(self):
        ctrl = AnimationController(self.gen, self.timer, fps=5000)
        self.assertEqual(ctrl.interval_ms, 1)


if __name__ == '__main__':
    unittest.main()
