from typing import Optional
from .constants import SOUTH, EAST
from .generator import MazeGenerator
from .grid import Grid


def create_test_maze(cols: int = 4, rows: int = 4, seed: Optional[int] = 42) -> Grid:
    """Mê cung hoàn hảo nhỏ, sinh với seed cố định"""
    grid = Grid(cols, rows)
    MazeGenerator(grid, seed).generate((0, 0))
    return grid


def create_open_grid(cols: int, rows: int) -> Grid:
    """Lưới không có tường bên trong (có chu trình, khoảng cách = Manhattan)"""
    grid = Grid(cols, rows)
    for y in range(rows):
        for x in range(cols):
            if x + 1 < cols:
                grid.carve(x, y, EAST)
            if y + 1 < rows:
                grid.carve(x, y, SOUTH)
    return grid


def create_disconnected_grid(cols: int = 6, rows: int = 4) -> Grid:
    """Hai nửa trái/phải, mỗi nửa mở hoàn toàn, ngăn bởi một hàng tường dọc còn nguyên"""
    grid = Grid(cols, rows)
    split = cols // 2
    for y in range(rows):
        for x in range(cols):
            if x + 1 < cols and x + 1 != split:
                grid.carve(x, y, EAST)
            if y + 1 < rows:
                grid.carve(x, y, SOUTH)
    return grid
