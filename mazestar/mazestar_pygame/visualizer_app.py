"""
App chính: sinh mê cung, vẽ tường, chạy A* từng sự kiện và vẽ đường đi cuối cùng
"""

import time
import pygame
from ..mazestar_algorithm.astar import AStar
from ..mazestar_algorithm.constants import WIDTH, HEIGHT, CELL_SIZE
from ..mazestar_algorithm.generator import MazeGenerator
from ..mazestar_algorithm.grid import Grid

from .visualizer_render import draw_maze, draw_start_goal, draw_highlight, draw_path_segment
from .visualizer_callbacks import apply_search_event, wait_step
from ..mazestar_algorithm.primitives import path_segments


class MazePygameVisualizer:
    def __init__(self, width=WIDTH, height=HEIGHT, cell_size=CELL_SIZE, step_size=0.0,
                 seed=None, hold_seconds=5.0, start=None, goal=None, events_per_frame=1):
        # ---------- cấu hình ----------
        self.cell_size = cell_size
        self.step_size = step_size
        self.seed = seed
        self.hold_seconds = hold_seconds
        self.events_per_frame = max(1, events_per_frame)

        # Kiểm tra cấu hình trước khi mở cửa sổ
        self.grid = Grid.from_canvas(width, height, cell_size)
        self.generator = MazeGenerator(self.grid, seed)
        self.astar = AStar(self.grid, start, goal)
        self.width = self.grid.cols * cell_size
        self.height = self.grid.rows * cell_size

        # ---------- trạng thái ----------
        self.is_running = False
        self.search_done = False
        self.cancelled = False
        self.current_pos = self.astar.start
        self.current_path = []
        self.visited_count = 0
        self.frontier_count = 0

        # ---------- màu ----------
        self.colors = {
            'background': (0, 0, 0),
            'wall': (255, 255, 255),
            'visited': (0, 255, 0),
            'frontier': (0, 0, 255),
            'start': (0, 255, 0),
            'goal': (255, 0, 0),
            'path': (255, 0, 255),
        }

        # ---------- pygame ----------
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("A* Visualization")
        self.clock = pygame.time.Clock()

    # ---------- events ----------
    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
                self.cancelled = True
                return False
        return self.is_running

    # ---------- draw ----------
    def draw_background(self):
        self.screen.fill(self.colors['background'])
        draw_maze(self.screen, self.grid, self.cell_size, self.colors)
        draw_start_goal(self.screen, self.astar.start, self.astar.goal,
                        self.cell_size, self.colors)

    def draw_final_path(self):
        self.draw_background()
        pygame.display.flip()
        for segment in path_segments(self.current_path, self.cell_size):
            if not self.handle_events():
                return
            draw_path_segment(self.screen, segment, self.colors)
            pygame.display.flip()

    def hold(self):
        deadline = time.monotonic() + self.hold_seconds
        while self.is_running and time.monotonic() < deadline:
            self.handle_events()
            self.clock.tick(30)

    # ---------- main loop ----------
    def run_search(self):
        pending = 0
        for event in self.astar.search():
            if not self.handle_events():
                print("Search cancelled")
                return
            highlight = apply_search_event(self, event)
            if highlight is not None:
                draw_highlight(self.screen, highlight, self.colors)
                pending += 1
                if pending >= self.events_per_frame:
                    pygame.display.flip()
                    pending = 0
            if event.is_terminal:
                break
            wait_step(self)
        pygame.display.flip()

    def run(self):
        self.is_running = True
        print(f"Grid Size: {self.grid.cols}x{self.grid.rows} (cell {self.cell_size}px)")
        self.generator.generate(verbose=True)

        self.draw_background()
        pygame.display.flip()

        self.run_search()
        if self.is_running:
            if self.current_path:
                print(f"Path length: {len(self.current_path) - 1}")
                self.draw_final_path()
            else:
                print("No path exists")
            self.hold()

        pygame.quit()
        return self.astar.results()


if __name__ == '__main__':
    print("--- A* Maze Visualization (Pygame) ---")
    visualizer = MazePygameVisualizer()
    visualizer.run()
