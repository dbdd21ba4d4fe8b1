import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_animator' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_animator import config


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def add_size_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--cell-size", type=int, default=config.CELL_SIZE, help="Cell size in pixels")
    parser.add_argument("--window-size", type=int, default=config.WINDOW_SIZE, help="Canvas width/height in pixels")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Animator: randomized depth-first maze generation, one step per frame")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Animate Command
    anim_parser = subparsers.add_parser("animate", help="Open a window and animate generation (SPACE starts/restarts)")
    add_size_arguments(anim_parser)
    anim_parser.add_argument("--fps", type=float, default=config.FRAMERATE, help="Generator ticks per second")
    anim_parser.add_argument("--autostart", action="store_true", help="Start generating without waiting for SPACE")
    anim_parser.add_argument("--record", action="store_true", help="Record the animation to an mp4 file")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze headless and print it as text")
    add_size_arguments(gen_parser)
    gen_parser.add_argument("--stats", action="store_true", help="Log dead-end/corridor statistics")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_animator")

    if args.command is None:
        parser.print_help()
        return

    try:
        rows, cols = config.grid_dimensions(args.window_size, args.cell_size)
    except ValueError as e:
        parser.error(str(e))

    from maze_animator.algo.backtracker import RecursiveBacktracker
    generator = RecursiveBacktracker(rows, cols, seed=args.seed)

    logger.info(f"Running command: {args.command} ({rows}x{cols} grid, seed={args.seed})")

    if args.command == "animate":
        if args.fps <= 0:
            parser.error(f"--fps must be positive, got {args.fps}")

        from maze_animator.viz.renderer import Renderer
        renderer = Renderer(generator, cell_size=args.cell_size, fps=args.fps,
                            record=args.record, autostart=args.autostart)

        renderer.init_window()
        renderer.run_loop()

    elif args.command == "generate":
        from maze_animator.viz.ascii import render_ascii
        import time

        t0 = time.time()
        generator.run_all()
        logger.info(f"Generation complete in {time.time() - t0:.4f}s ({generator.step_count} steps)")

        snapshot = generator.snapshot()
        print(render_ascii(snapshot))

        if args.stats:
            from maze_animator.core.stats import calculate_stats
            logger.info(f"Stats: {calculate_stats(snapshot)}")


if __name__ == "__main__":
    main()
