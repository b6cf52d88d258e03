import time
from ..mazestar_algorithm.constants import VISITED, FRONTIER
from ..mazestar_algorithm.primitives import highlight_for_event


def apply_search_event(app, event):
    # app: instance MazePygameVisualizer (ở file app)
    if event.kind == VISITED:
        app.visited_count += 1
        app.current_pos = event.position
    elif event.kind == FRONTIER:
        app.frontier_count += 1
    elif event.is_terminal:
        app.current_path = list(event.path)
        app.search_done = True
    return highlight_for_event(event, app.cell_size)


def wait_step(app):
    """Chờ step_size giây giữa hai sự kiện, vẫn xử lý event của cửa sổ"""
    if app.step_size <= 0:
        return
    deadline = time.monotonic() + app.step_size
    while app.is_running and time.monotonic() < deadline:
        app.handle_events()
        time.sleep(min(0.005, app.step_size))
