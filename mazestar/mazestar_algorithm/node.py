class Node:
    """Search node for A* (chỉ tồn tại trong một lần tìm đường)"""

    def __init__(self, x: int, y: int, g_cost: int, h_cost: int):
        self.x = x
        self.y = y
        # Chi phí g (số bước từ start → node này)
        self.g_cost = g_cost
        # Chi phí heuristic (Manhattan đến goal)
        self.h_cost = h_cost

    @property
    def position(self):
        return (self.x, self.y)

    @property
    def f_cost(self) -> int:
        """Tổng chi phí f = g + h (dùng cho heapq)"""
        return self.g_cost + self.h_cost

    def __lt__(self, other):
        """So sánh node theo chi phí f_cost (cho heapq sắp xếp)"""
        return self.f_cost < other.f_cost

    def __repr__(self):
        return f"Node({self.x}, {self.y}, g={self.g_cost}, h={self.h_cost})"
