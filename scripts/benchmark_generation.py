import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_animator.algo.backtracker import RecursiveBacktracker
from maze_animator.core.stats import calculate_stats, is_perfect_maze


def benchmark_size(rows: int, cols: int):
    print(f"\n--- Benchmarking {rows}x{cols} ({rows*cols:,} cells) ---")

    algo = RecursiveBacktracker(rows, cols, seed=42)

    gen_start = time.time()
    algo.run_all()
    gen_time = time.time() - gen_start

    print(f"Generation Time: {gen_time:.4f}s ({algo.step_count:,} steps)")
    print(f"Speed: {algo.step_count / gen_time:,.0f} steps/sec")

    snapshot_start = time.time()
    snapshot = algo.snapshot()
    print(f"Snapshot Time: {time.time() - snapshot_start:.4f}s")

    print(f"Perfect maze: {is_perfect_maze(snapshot)}")
    print(f"Stats: {calculate_stats(snapshot)}")


if __name__ == "__main__":
    for n in (30, 100, 300):
        benchmark_size(n, n)
