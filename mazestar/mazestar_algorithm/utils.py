from collections import deque
from typing import Optional, Sequence, Tuple
import numpy as np
from .constants import NORTH, SOUTH, WEST, EAST
from .grid import Grid


def bfs_distances(grid: Grid, source: Tuple[int, int]) -> np.ndarray:
    """Số bước từ source đến mọi ô (mảng [y, x]), -1 nếu không tới được"""
    dist = np.full((grid.rows, grid.cols), -1, dtype=int)
    sx, sy = source
    dist[sy, sx] = 0
    queue = deque([source])
    while queue:
        x, y = queue.popleft()
        for nx, ny in grid.passable_neighbors(x, y):
            if dist[ny, nx] == -1:
                dist[ny, nx] = dist[y, x] + 1
                queue.append((nx, ny))
    return dist


def is_spanning_tree(grid: Grid) -> bool:
    """Perfect maze: liên thông và đúng cols*rows - 1 cạnh (không có chu trình)"""
    if grid.passage_count() != len(grid) - 1:
        return False
    return bool((bfs_distances(grid, (0, 0)) >= 0).all())


def render_ascii(grid: Grid, path: Optional[Sequence[Tuple[int, int]]] = None) -> str:
    """Vẽ mê cung bằng ký tự, ô thuộc đường đi được đánh dấu 'o'"""
    on_path = set(path or [])
    lines = []
    top = "+"
    for x in range(grid.cols):
        top += ("---" if grid.cell(x, 0).walls[NORTH] else "   ") + "+"
    lines.append(top)

    for y in range(grid.rows):
        row = "|" if grid.cell(0, y).walls[WEST] else " "
        bottom = "+"
        for x in range(grid.cols):
            cell = grid.cell(x, y)
            row += " o " if (x, y) in on_path else "   "
            row += "|" if cell.walls[EAST] else " "
            bottom += ("---" if cell.walls[SOUTH] else "   ") + "+"
        lines.append(row)
        lines.append(bottom)
    return "\n".join(lines)
