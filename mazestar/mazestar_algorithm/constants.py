# --- Hướng của tường / bước đi trong lưới ---
NORTH = 0
SOUTH = 1
WEST = 2
EAST = 3

DIR4 = [NORTH, SOUTH, WEST, EAST]
DIR_NAMES = ['N', 'S', 'W', 'E']

OPPOSITE = {
    NORTH: SOUTH,
    SOUTH: NORTH,
    WEST: EAST,
    EAST: WEST,
}

# (dx, dy) theo thứ tự N, S, W, E; trục y hướng xuống
DX = [0, 0, -1, 1]
DY = [-1, 1, 0, 0]

# --- Kích thước canvas mặc định (pixel) ---
WIDTH = 1280
HEIGHT = 720
CELL_SIZE = 5

# --- Vai trò của ô khi tô màu ---
VISITED = 'visited'
FRONTIER = 'frontier'
START = 'start'
GOAL = 'goal'
PATH = 'path'
