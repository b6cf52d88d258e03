"""
Drawable primitives handed to the render sink.

Lõi thuật toán không vẽ gì cả: nó chỉ tạo ra các đoạn tường, ô tô màu và
đoạn đường đi (tọa độ pixel), phần pygame chịu trách nhiệm biến chúng thành pixel.
"""

from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple
from .constants import NORTH, SOUTH, WEST, EAST, START, GOAL, VISITED, FRONTIER
from .grid import Cell, Grid


class WallSegment(NamedTuple):
    sx: int
    sy: int
    ex: int
    ey: int
    exist: bool = True


class CellHighlight(NamedTuple):
    x: int          # pixel góc trên-trái
    y: int
    size: int
    role: str


class PathSegment(NamedTuple):
    x1: int         # tâm pixel của hai ô liên tiếp
    y1: int
    x2: int
    y2: int


def cell_walls(cell: Cell, cell_size: int) -> List[WallSegment]:
    """All four wall segments of a cell in N, S, W, E order"""
    rel_x = cell.x * cell_size
    rel_y = cell.y * cell_size
    ends = {
        NORTH: (rel_x, rel_y, rel_x + cell_size, rel_y),
        SOUTH: (rel_x, rel_y + cell_size, rel_x + cell_size, rel_y + cell_size),
        WEST: (rel_x, rel_y, rel_x, rel_y + cell_size),
        EAST: (rel_x + cell_size, rel_y, rel_x + cell_size, rel_y + cell_size),
    }
    return [WallSegment(*ends[d], exist=cell.walls[d]) for d in (NORTH, SOUTH, WEST, EAST)]


def wall_segments(grid: Grid, cell_size: int) -> List[WallSegment]:
    # Tường giữa hai ô được lưu hai lần nên cũng được vẽ hai lần (trùng khít)
    segments = []
    for cell in grid:
        segments.extend(s for s in cell_walls(cell, cell_size) if s.exist)
    return segments


def pixel_center(pos: Tuple[int, int], cell_size: int) -> Tuple[int, int]:
    x, y = pos
    return (x * cell_size + cell_size // 2, y * cell_size + cell_size // 2)


def cell_highlight(x: int, y: int, cell_size: int, role: str) -> CellHighlight:
    return CellHighlight(x * cell_size, y * cell_size, cell_size, role)


def start_goal_highlights(start: Tuple[int, int], goal: Tuple[int, int],
                          cell_size: int) -> List[CellHighlight]:
    return [
        cell_highlight(start[0], start[1], cell_size, START),
        cell_highlight(goal[0], goal[1], cell_size, GOAL),
    ]


def path_segments(path: Sequence[Tuple[int, int]], cell_size: int) -> List[PathSegment]:
    segments = []
    for i in range(1, len(path)):
        x1, y1 = pixel_center(path[i - 1], cell_size)
        x2, y2 = pixel_center(path[i], cell_size)
        segments.append(PathSegment(x1, y1, x2, y2))
    return segments


def highlight_for_event(event, cell_size: int) -> Optional[CellHighlight]:
    """Map a SearchEvent to the cell highlight it asks for (None for terminal events)"""
    if event.kind not in (VISITED, FRONTIER):
        return None
    x, y = event.position
    return cell_highlight(x, y, cell_size, event.kind)


def highlights_for_events(events: Iterable, cell_size: int) -> List[CellHighlight]:
    highlights = []
    for event in events:
        highlight = highlight_for_event(event, cell_size)
        if highlight is not None:
            highlights.append(highlight)
    return highlights
