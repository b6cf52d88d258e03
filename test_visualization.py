"""
Tests for drawable primitives and the pygame render sink
Drawing goes to off-screen surfaces; the app test uses SDL's dummy video driver
"""

from types import SimpleNamespace

import pygame
import pytest

from mazestar.mazestar_algorithm.astar import AStar, SearchEvent
from mazestar.mazestar_algorithm.constants import EAST, VISITED, FRONTIER, START, GOAL
from mazestar.mazestar_algorithm.envs import create_test_maze
from mazestar.mazestar_algorithm.grid import Cell, Grid
from mazestar.mazestar_algorithm.primitives import (
    CellHighlight, PathSegment, WallSegment, cell_walls, wall_segments, path_segments,
    start_goal_highlights, highlight_for_event, highlights_for_events,
)
from mazestar.mazestar_pygame.visualizer_callbacks import apply_search_event
from mazestar.mazestar_pygame.visualizer_render import (
    draw_walls, draw_highlight, draw_path, draw_start_goal,
)

COLORS = {
    'background': (0, 0, 0),
    'wall': (255, 255, 255),
    'visited': (0, 255, 0),
    'frontier': (0, 0, 255),
    'start': (0, 255, 0),
    'goal': (255, 0, 0),
    'path': (255, 0, 255),
}


def _rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


# ---------- primitives ----------

def test_cell_walls_geometry():
    segments = cell_walls(Cell(1, 2), 10)
    assert segments == [
        WallSegment(10, 20, 20, 20, True),   # N
        WallSegment(10, 30, 20, 30, True),   # S
        WallSegment(10, 20, 10, 30, True),   # W
        WallSegment(20, 20, 20, 30, True),   # E
    ]


def test_wall_segments_only_present_walls():
    grid = Grid(2, 2)
    assert len(wall_segments(grid, 10)) == 16
    grid.carve(0, 0, EAST)
    segments = wall_segments(grid, 10)
    assert len(segments) == 14
    assert all(s.exist for s in segments)
    assert WallSegment(10, 0, 10, 10) not in segments


def test_wall_segments_after_generation():
    grid = create_test_maze(4, 4, seed=42)
    # 4 tường mỗi ô, mỗi lối đi gỡ 2 tường
    assert len(wall_segments(grid, 5)) == 4 * 16 - 2 * 15


def test_path_segments_use_pixel_centers():
    assert path_segments([(0, 0), (1, 0), (1, 1)], 10) == [
        PathSegment(5, 5, 15, 5),
        PathSegment(15, 5, 15, 15),
    ]
    assert path_segments([(0, 0)], 10) == []
    assert path_segments([], 10) == []


def test_start_goal_highlights():
    assert start_goal_highlights((0, 0), (3, 2), 5) == [
        CellHighlight(0, 0, 5, START),
        CellHighlight(15, 10, 5, GOAL),
    ]


def test_highlight_for_event():
    assert highlight_for_event(SearchEvent(VISITED, (2, 1), 3), 10) == CellHighlight(20, 10, 10, VISITED)
    assert highlight_for_event(SearchEvent(FRONTIER, (0, 4), 1), 10) == CellHighlight(0, 40, 10, FRONTIER)
    assert highlight_for_event(SearchEvent('found', (0, 0), 0, ((0, 0),)), 10) is None
    assert highlight_for_event(SearchEvent('exhausted', None), 10) is None


def test_highlights_for_whole_search():
    grid = create_test_maze(5, 5, seed=1)
    astar = AStar(grid)
    events = list(astar.search())
    highlights = highlights_for_events(events, 4)
    assert len(highlights) == len(events) - 1
    assert highlights[0] == CellHighlight(0, 0, 4, VISITED)


# ---------- render ----------

def test_draw_highlight_fills_cell():
    surface = pygame.Surface((20, 20))
    surface.fill(COLORS['background'])
    draw_highlight(surface, CellHighlight(10, 10, 10, GOAL), COLORS)
    assert _rgb(surface, (15, 15)) == COLORS['goal']
    assert _rgb(surface, (10, 10)) == COLORS['goal']
    assert _rgb(surface, (5, 5)) == COLORS['background']


def test_draw_walls_and_path():
    surface = pygame.Surface((20, 20))
    surface.fill(COLORS['background'])
    draw_walls(surface, [WallSegment(0, 0, 19, 0)], COLORS)
    draw_path(surface, [(0, 1), (1, 1)], 10, COLORS)
    assert _rgb(surface, (10, 0)) == COLORS['wall']
    assert _rgb(surface, (10, 15)) == COLORS['path']
    assert _rgb(surface, (10, 10)) == COLORS['background']


def test_draw_start_goal():
    surface = pygame.Surface((30, 20))
    surface.fill(COLORS['background'])
    draw_start_goal(surface, (0, 0), (2, 1), 10, COLORS)
    assert _rgb(surface, (5, 5)) == COLORS['start']
    assert _rgb(surface, (25, 15)) == COLORS['goal']


# ---------- callbacks ----------

def test_apply_search_event_updates_state():
    app = SimpleNamespace(cell_size=10, visited_count=0, frontier_count=0,
                          current_pos=None, current_path=[], search_done=False)
    highlight = apply_search_event(app, SearchEvent(VISITED, (1, 1), 2))
    assert highlight == CellHighlight(10, 10, 10, VISITED)
    assert app.visited_count == 1
    assert app.current_pos == (1, 1)

    apply_search_event(app, SearchEvent(FRONTIER, (1, 2), 3))
    assert app.frontier_count == 1

    assert apply_search_event(app, SearchEvent('found', (1, 2), 3, ((0, 0), (1, 2)))) is None
    assert app.search_done
    assert app.current_path == [(0, 0), (1, 2)]


# ---------- app ----------

def test_visualizer_runs_headless(monkeypatch):
    monkeypatch.setenv('SDL_VIDEODRIVER', 'dummy')
    monkeypatch.setenv('SDL_AUDIODRIVER', 'dummy')
    from mazestar.mazestar_pygame.visualizer_app import MazePygameVisualizer

    visualizer = MazePygameVisualizer(width=60, height=40, cell_size=10,
                                      seed=3, hold_seconds=0)
    assert (visualizer.grid.cols, visualizer.grid.rows) == (6, 4)
    results = visualizer.run()
    assert results['found']
    assert visualizer.current_path[0] == (0, 0)
    assert visualizer.current_path[-1] == (5, 3)
    assert visualizer.visited_count == results['visited_count']


def test_visualizer_rejects_bad_goal_before_opening_window():
    from mazestar.mazestar_algorithm.errors import InvalidConfigurationError
    from mazestar.mazestar_pygame.visualizer_app import MazePygameVisualizer

    with pytest.raises(InvalidConfigurationError):
        MazePygameVisualizer(width=60, height=40, cell_size=10, goal=(6, 0))
