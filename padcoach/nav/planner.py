from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .graph import NavGraph


@dataclass
class PathStats:
    found: bool
    length: int
    cost: float
    visited_count: int


class Planner:
    """
    Shortest-path search over the pad graph.

    Both strategies share one best-first loop. With ``use_heuristic=False``
    the frontier is ordered by accumulated cost (Dijkstra). With
    ``use_heuristic=True`` the straight-line distance to the goal is added
    (A*). Edge costs are straight-line distances too, so the heuristic is
    admissible and consistent and both modes return optimal routes.

    Frontier entries are ``(priority, index)`` and relaxation only replaces
    a cost that is strictly worse, so among routes of equal cost the one
    reached through the lowest-index node is kept.
    """

    def __init__(self, graph: NavGraph):
        self.graph = graph

    def find_path(self, start: int, goal: int, use_heuristic: bool = False) -> tuple[list[int], PathStats]:
        graph = self.graph
        if not graph.is_valid(start) or not graph.is_valid(goal):
            return [], PathStats(False, 0, 0.0, 0)

        if start == goal:
            return [start], PathStats(True, 1, 0.0, 1)

        def heuristic(index: int) -> float:
            if not use_heuristic:
                return 0.0
            return graph.edge_cost(index, goal)

        frontier: list[tuple[float, int]] = [(heuristic(start), start)]
        came_from: dict[int, int | None] = {start: None}
        cost_so_far: dict[int, float] = {start: 0.0}
        closed: set[int] = set()

        visited = 0
        found = False

        while frontier:
            _, current = heapq.heappop(frontier)
            if current in closed:
                continue
            closed.add(current)
            visited += 1

            if current == goal:
                found = True
                break

            for nxt in graph.neighbors[current]:
                if nxt in closed:
                    continue
                new_cost = cost_so_far[current] + graph.edge_cost(current, nxt)
                if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                    cost_so_far[nxt] = new_cost
                    came_from[nxt] = current
                    heapq.heappush(frontier, (new_cost + heuristic(nxt), nxt))

        if not found:
            return [], PathStats(False, 0, 0.0, visited)

        path = []
        cur: int | None = goal
        while cur is not None:
            path.append(cur)
            cur = came_from[cur]
        path.reverse()

        return path, PathStats(True, len(path), cost_so_far[goal], visited)
