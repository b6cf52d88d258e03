import random
from typing import List, Optional, Tuple
from .constants import DIR4
from .errors import InvalidConfigurationError
from .grid import Grid


class MazeGenerator:
    """
    Randomized depth-first backtracker.

    Dùng stack tường minh thay cho đệ quy: mỗi frame là (x, y, các hướng còn lại
    đã xáo trộn). Thứ tự đào giống hệt bản đệ quy, nhưng độ sâu không bị giới hạn
    bởi call stack của Python (lưới 256x144 có thể sâu tới 36864 ô).
    """

    def __init__(self, grid: Grid, seed: Optional[int] = None):
        self.grid = grid
        self.seed = seed
        self.rng = random.Random(seed)
        # Nhật ký các lần đào: (x, y, direction), theo đúng thứ tự
        self.carved: List[Tuple[int, int, int]] = []

        # Callback cho visualization (nếu có)
        self.on_carve_callback = None

    def set_callbacks(self, carve_callback=None):
        """Set callback functions for visualization"""
        self.on_carve_callback = carve_callback

    def _shuffled_directions(self) -> List[int]:
        directions = list(DIR4)
        self.rng.shuffle(directions)
        return directions

    def generate(self, origin: Tuple[int, int] = (0, 0), verbose: bool = False) -> Grid:
        ox, oy = origin
        if not self.grid.in_bounds(ox, oy):
            raise InvalidConfigurationError(f"Origin {origin} is outside the grid")

        self.grid.cell(ox, oy).visited = True
        stack = [(ox, oy, self._shuffled_directions())]

        while stack:
            x, y, directions = stack[-1]
            if not directions:
                # không còn hướng nào → quay lui
                stack.pop()
                continue

            direction = directions.pop(0)
            nx, ny = self.grid.neighbor_coords(x, y, direction)
            if not self.grid.in_bounds(nx, ny) or self.grid.cell(nx, ny).visited:
                continue

            self.grid.carve(x, y, direction)
            self.carved.append((x, y, direction))
            if self.on_carve_callback:
                self.on_carve_callback(x, y, direction)

            self.grid.cell(nx, ny).visited = True
            stack.append((nx, ny, self._shuffled_directions()))

        if verbose:
            print(f"Maze {self.grid.cols}x{self.grid.rows} generated from {origin} "
                  f"(seed={self.seed}): {len(self.carved)} passages carved")
        return self.grid


def generate_maze(cols: int, rows: int, seed: Optional[int] = None,
                  origin: Tuple[int, int] = (0, 0)) -> Grid:
    grid = Grid(cols, rows)
    MazeGenerator(grid, seed).generate(origin)
    return grid
