from .astar import AStar
from .envs import create_test_maze
from .utils import render_ascii

def run_console_test(cols: int = 16, rows: int = 8, seed=None):
    print("=== Maze + A* Console Test ===")
    grid = create_test_maze(cols, rows, seed)
    astar = AStar(grid)
    path = astar.run()
    results = astar.results()
    print(render_ascii(grid, path))
    print(f"\nFinal Results:")
    if results['found']:
        print(f"Path length: {results['path_length']}")
    else:
        print("No path exists")
    print(f"Visited cells: {results['visited_count']}")
    print(f"Frontier pushes: {results['frontier_pushes']}")
    return path

if __name__ == "__main__":
    run_console_test()
