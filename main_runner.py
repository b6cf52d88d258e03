"""
Main Runner for the Maze + A* Visualization
Generates a perfect maze and shows the A* search, in a pygame window or on the console
"""

import sys
import argparse

from mazestar.mazestar_algorithm.constants import WIDTH, HEIGHT, CELL_SIZE
from mazestar.mazestar_algorithm.errors import InvalidConfigurationError


def print_banner():
    """Print application banner"""
    print("=" * 70)
    print("    MAZE GENERATION + A* SHORTEST PATH - VISUALIZATION")
    print("=" * 70)
    print()


def run_console(args):
    """Run the console demo (ASCII maze)"""
    from mazestar.mazestar_algorithm.main import run_console_test
    cols = args.width // args.cell_size
    rows = args.height // args.cell_size
    run_console_test(cols, rows, args.seed)


def run_pygame(args):
    """Run the pygame visualization"""
    print("Starting A* Maze with Pygame visualization...")
    try:
        from mazestar.mazestar_pygame.visualizer_app import MazePygameVisualizer
    except ImportError as e:
        print(f"Error importing Pygame visualization: {e}")
        print("Please install pygame with: pip install pygame")
        return
    visualizer = MazePygameVisualizer(
        width=args.width, height=args.height, cell_size=args.cell_size,
        step_size=args.step_size, seed=args.seed, hold_seconds=args.hold,
        events_per_frame=args.events_per_frame,
    )
    results = visualizer.run()
    print(f"Visited cells: {results['visited_count']}")


def build_parser():
    parser = argparse.ArgumentParser(description='Generate a maze and solve it with A*')
    parser.add_argument('--mode', choices=['pygame', 'console'], default='pygame',
                        help='Render in a pygame window or as ASCII on the console')
    parser.add_argument('--width', type=int, default=WIDTH, help='Canvas width in pixels')
    parser.add_argument('--height', type=int, default=HEIGHT, help='Canvas height in pixels')
    parser.add_argument('--cell-size', type=int, default=CELL_SIZE, help='Cell size in pixels')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for the maze')
    parser.add_argument('--step-size', type=float, default=0.0,
                        help='Delay in seconds between search events (pygame mode)')
    parser.add_argument('--events-per-frame', type=int, default=1,
                        help='Search events drawn per display update (pygame mode)')
    parser.add_argument('--hold', type=float, default=5.0,
                        help='Seconds to keep the window open after the path is drawn')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    print_banner()
    if args.cell_size <= 0:
        print("Error: cell size must be positive")
        return 2
    try:
        if args.mode == 'console':
            run_console(args)
        else:
            run_pygame(args)
    except InvalidConfigurationError as e:
        print(f"Error: {e}")
        return 2
    except KeyboardInterrupt:
        print("\nGoodbye!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
