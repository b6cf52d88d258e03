from typing import List, Tuple
from .constants import DIR4, DX, DY, OPPOSITE, SOUTH, EAST
from .errors import InvalidConfigurationError


class Cell:
    """One maze cell: visited flag + four wall flags (True = tường còn)"""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.visited = False            # chỉ dùng khi sinh mê cung
        self.walls = [True, True, True, True]   # N, S, W, E

    def remove_wall(self, direction: int):
        self.walls[direction] = False

    def has_wall(self, direction: int) -> bool:
        return self.walls[direction]

    def __repr__(self):
        return f"Cell({self.x}, {self.y}, walls={self.walls})"


class Grid:
    """Fixed-size rectangular grid of cells, indexed (x, y)"""

    def __init__(self, cols: int, rows: int):
        if cols <= 0 or rows <= 0:
            raise InvalidConfigurationError(
                f"Grid dimensions must be positive, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        # Lưu theo hàng: cells[y][x]
        self.cells = [[Cell(x, y) for x in range(cols)] for y in range(rows)]

    @classmethod
    def create(cls, cols: int, rows: int) -> 'Grid':
        return cls(cols, rows)

    @classmethod
    def from_canvas(cls, width: int, height: int, cell_size: int) -> 'Grid':
        """COLS = width // cell_size, ROWS = height // cell_size"""
        if cell_size <= 0:
            raise InvalidConfigurationError(f"Cell size must be positive, got {cell_size}")
        return cls(width // cell_size, height // cell_size)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.cols, self.rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def __iter__(self):
        for row in self.cells:
            yield from row

    def __len__(self):
        return self.cols * self.rows

    def remove_wall(self, cell: Cell, direction: int):
        """Chỉ gỡ tường phía `cell`; ô hàng xóm do caller tự xử lý"""
        cell.remove_wall(direction)

    def neighbor_coords(self, x: int, y: int, direction: int) -> Tuple[int, int]:
        return (x + DX[direction], y + DY[direction])

    def carve(self, x: int, y: int, direction: int) -> Tuple[int, int]:
        """Mở lối đi giữa (x, y) và hàng xóm, gỡ tường ở cả hai phía"""
        nx, ny = self.neighbor_coords(x, y, direction)
        if not (self.in_bounds(x, y) and self.in_bounds(nx, ny)):
            raise InvalidConfigurationError(
                f"Cannot carve from {(x, y)} towards {(nx, ny)}: outside the grid")
        self.remove_wall(self.cell(x, y), direction)
        self.remove_wall(self.cell(nx, ny), OPPOSITE[direction])
        return (nx, ny)

    def is_passable(self, x: int, y: int, direction: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return not self.cells[y][x].walls[direction]

    def passable_neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        neighbors = []
        for direction in DIR4:
            if not self.is_passable(x, y, direction):
                continue
            nx, ny = self.neighbor_coords(x, y, direction)
            if self.in_bounds(nx, ny):
                neighbors.append((nx, ny))
        return neighbors

    def passages(self) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
        """Mỗi cặp tường đã gỡ (một cạnh) được liệt kê đúng một lần"""
        edges = []
        for cell in self:
            # chỉ xét S và E để không đếm trùng
            for direction in (SOUTH, EAST):
                if cell.walls[direction]:
                    continue
                nx, ny = self.neighbor_coords(cell.x, cell.y, direction)
                if self.in_bounds(nx, ny):
                    edges.append(((cell.x, cell.y), (nx, ny)))
        return edges

    def passage_count(self) -> int:
        return len(self.passages())

    def is_symmetric(self) -> bool:
        """Tường gỡ ở một phía thì phía đối diện của hàng xóm cũng phải gỡ"""
        for cell in self:
            for direction in DIR4:
                nx, ny = self.neighbor_coords(cell.x, cell.y, direction)
                if not self.in_bounds(nx, ny):
                    continue
                if cell.walls[direction] != self.cell(nx, ny).walls[OPPOSITE[direction]]:
                    return False
        return True

    def reset_visited(self):
        for cell in self:
            cell.visited = False
