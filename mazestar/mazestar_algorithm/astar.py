"""
A* search over a carved maze grid.

Đồ thị được suy ra từ lưới: hai ô kề nhau nếu không có tường ngăn cách
(Grid.is_passable). Mỗi bước có chi phí 1, heuristic là khoảng cách Manhattan,
nên lần đầu goal được lấy ra khỏi hàng đợi thì đường đi là ngắn nhất.

Quá trình tìm kiếm được phát ra dưới dạng một chuỗi SearchEvent lười (generator),
để phần hiển thị tự quyết định tốc độ tiêu thụ.
"""

import heapq
import itertools
import numpy as np
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple
from .constants import DIR4, VISITED, FRONTIER
from .errors import InvalidConfigurationError
from .grid import Grid
from .node import Node

FOUND = 'found'
EXHAUSTED = 'exhausted'


class PriorityQueue:
    """Hàng đợi ưu tiên cho thuật toán A* (hòa f_cost thì theo thứ tự chèn)."""
    def __init__(self):
        self.elements = []
        self._counter = itertools.count()

    def empty(self):
        return not self.elements

    def put(self, priority, item):
        heapq.heappush(self.elements, (priority, next(self._counter), item))

    def get(self):
        return heapq.heappop(self.elements)[2]

    def __len__(self):
        return len(self.elements)


class SearchEvent(NamedTuple):
    kind: str                        # 'visited' | 'frontier' | 'found' | 'exhausted'
    position: Optional[Tuple[int, int]]
    g_cost: int = 0
    path: Tuple[Tuple[int, int], ...] = ()

    @property
    def is_terminal(self) -> bool:
        return self.kind in (FOUND, EXHAUSTED)


def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """Ước tính khoảng cách Manhattan (cho heuristic A*)."""
    (x1, y1) = a
    (x2, y2) = b
    return abs(x1 - x2) + abs(y1 - y2)


class AStar:
    """A* shortest path from start to goal on a maze grid"""

    def __init__(self, grid: Grid, start: Optional[Tuple[int, int]] = None,
                 goal: Optional[Tuple[int, int]] = None):
        self.grid = grid
        self.start = tuple(start) if start is not None else (0, 0)
        self.goal = tuple(goal) if goal is not None else (grid.cols - 1, grid.rows - 1)
        for name, pos in (('start', self.start), ('goal', self.goal)):
            if not grid.in_bounds(*pos):
                raise InvalidConfigurationError(
                    f"{name.capitalize()} {pos} is outside the {grid.cols}x{grid.rows} grid")

        # Trạng thái của lần chạy gần nhất
        self.path: List[Tuple[int, int]] = []
        self.came_from: Dict[Tuple[int, int], Tuple[int, int]] = {}
        self.visited_count = 0
        self.frontier_pushes = 0
        self.found = False

        # Callback cho visualization (nếu có)
        self.on_visit_callback = None
        self.on_frontier_callback = None
        self.on_path_callback = None

    def set_callbacks(self, visit_callback=None, frontier_callback=None, path_callback=None):
        """Set callback functions for visualization"""
        self.on_visit_callback = visit_callback
        self.on_frontier_callback = frontier_callback
        self.on_path_callback = path_callback

    def heuristic(self, x: int, y: int) -> int:
        return manhattan((x, y), self.goal)

    def search(self) -> Iterator[SearchEvent]:
        """
        Generator các SearchEvent theo thứ tự khám phá.

        - 'visited': node vừa được lấy ra và đóng lại
        - 'frontier': hàng xóm vừa được cải thiện g_cost và đẩy vào hàng đợi
        - 'found' / 'exhausted': sự kiện cuối cùng, kèm đường đi (rỗng nếu không có)
        """
        rows, cols = self.grid.rows, self.grid.cols
        g_cost = np.full((rows, cols), np.inf)
        closed = np.zeros((rows, cols), dtype=bool)
        self.came_from = {}
        self.path = []
        self.visited_count = 0
        self.frontier_pushes = 0
        self.found = False

        sx, sy = self.start
        open_set = PriorityQueue()
        start_node = Node(sx, sy, 0, self.heuristic(sx, sy))
        open_set.put(start_node.f_cost, start_node)
        g_cost[sy, sx] = 0

        while not open_set.empty():
            current = open_set.get()
            cx, cy = current.x, current.y

            # Bản sao cũ trong hàng đợi (đã có g tốt hơn) → bỏ qua
            if closed[cy, cx]:
                continue
            closed[cy, cx] = True
            self.visited_count += 1
            yield SearchEvent(VISITED, (cx, cy), current.g_cost)

            if (cx, cy) == self.goal:
                self.path = self.reconstruct_path((cx, cy))
                self.found = True
                yield SearchEvent(FOUND, (cx, cy), current.g_cost, tuple(self.path))
                return

            for direction in DIR4:
                if not self.grid.is_passable(cx, cy, direction):
                    continue
                nx, ny = self.grid.neighbor_coords(cx, cy, direction)
                if not self.grid.in_bounds(nx, ny):
                    continue

                new_g_cost = current.g_cost + 1
                if new_g_cost < g_cost[ny, nx]:
                    g_cost[ny, nx] = new_g_cost
                    self.came_from[(nx, ny)] = (cx, cy)
                    node = Node(nx, ny, new_g_cost, self.heuristic(nx, ny))
                    open_set.put(node.f_cost, node)
                    self.frontier_pushes += 1
                    yield SearchEvent(FRONTIER, (nx, ny), new_g_cost)

        yield SearchEvent(EXHAUSTED, None)

    def reconstruct_path(self, goal: Tuple[int, int]) -> List[Tuple[int, int]]:
        path = []
        current = goal
        while current != self.start:
            path.append(current)
            current = self.came_from[current]
        path.append(self.start)
        path.reverse()
        return path

    def run(self, verbose: bool = False) -> List[Tuple[int, int]]:
        for event in self.search():
            if event.kind == VISITED and self.on_visit_callback:
                self.on_visit_callback(event.position)
            elif event.kind == FRONTIER and self.on_frontier_callback:
                self.on_frontier_callback(event.position)
            elif event.is_terminal and self.on_path_callback:
                self.on_path_callback(list(event.path))

        if verbose:
            if self.found:
                print(f"A* {self.start} -> {self.goal}: {len(self.path) - 1} steps, "
                      f"{self.visited_count} cells visited")
            else:
                print(f"A* {self.start} -> {self.goal}: no path exists "
                      f"({self.visited_count} cells visited)")
        return self.path

    def results(self) -> Dict[str, object]:
        return {
            'found': self.found,
            'path_length': len(self.path) - 1 if self.path else 0,
            'visited_count': self.visited_count,
            'frontier_pushes': self.frontier_pushes,
        }


def find_path(grid: Grid, start: Optional[Tuple[int, int]] = None,
              goal: Optional[Tuple[int, int]] = None) -> List[Tuple[int, int]]:
    return AStar(grid, start, goal).run()
