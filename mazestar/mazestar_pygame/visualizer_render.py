import pygame

from ..mazestar_algorithm.constants import VISITED, FRONTIER, START, GOAL, PATH
from ..mazestar_algorithm.primitives import (
    wall_segments, start_goal_highlights, path_segments,
)

# vai trò của ô → khóa màu trong bảng colors
ROLE_COLORS = {
    VISITED: 'visited',
    FRONTIER: 'frontier',
    START: 'start',
    GOAL: 'goal',
    PATH: 'path',
}


def draw_walls(surface, segments, colors):
    for seg in segments:
        pygame.draw.line(surface, colors['wall'], (seg.sx, seg.sy), (seg.ex, seg.ey))


def draw_highlight(surface, highlight, colors):
    rect = pygame.Rect(highlight.x, highlight.y, highlight.size, highlight.size)
    pygame.draw.rect(surface, colors[ROLE_COLORS[highlight.role]], rect)
    return rect


def draw_path_segment(surface, segment, colors, width=1):
    pygame.draw.line(surface, colors['path'],
                     (segment.x1, segment.y1), (segment.x2, segment.y2), width)


def draw_maze(surface, grid, cell_size, colors):
    draw_walls(surface, wall_segments(grid, cell_size), colors)


def draw_start_goal(surface, start, goal, cell_size, colors):
    for highlight in start_goal_highlights(start, goal, cell_size):
        draw_highlight(surface, highlight, colors)


def draw_path(surface, path, cell_size, colors, width=1):
    for segment in path_segments(path, cell_size):
        draw_path_segment(surface, segment, colors, width)
