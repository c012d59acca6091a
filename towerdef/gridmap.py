"""Grid map with walls, a spawner, a target and a flow field towards the target."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from towerdef.geometry import Vector2D

PIXELS_PER_CELL = 48
SCREEN_WIDTH = PIXELS_PER_CELL * 15
SCREEN_HEIGHT = PIXELS_PER_CELL * 11
FLOW_DISTANCE_MAX = 255

_BFS_NEIGHBORS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_FLOW_NEIGHBORS = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass
class Cell:
    """One grid cell with its type and flow-field data."""

    x: int = 0
    y: int = 0
    is_wall: bool = False
    is_spawner: bool = False
    is_target: bool = False
    flow_direction_x: int = 0
    flow_direction_y: int = 0
    flow_distance: int = FLOW_DISTANCE_MAX


class FlowMap:
    """A rectangular grid whose flow field leads every reachable cell to the target."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells = [Cell(x, y) for y in range(height) for x in range(width)]
        self.set_target(width // 2, height // 2)

    def __iter__(self):
        return iter(self._cells)

    def cell(self, x: int, y: int) -> Cell:
        if not self.is_in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self._cells[x + y * self.width]

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_wall(self, x: int, y: int) -> bool:
        return self.is_in_bounds(x, y) and self.cell(x, y).is_wall

    def set_wall(self, x: int, y: int, wall: bool) -> None:
        """Set or clear a wall; targets, spawners and outside cells are left alone."""
        if self.is_in_bounds(x, y) and not self.is_target(x, y) and not self.is_spawner(x, y):
            self.cell(x, y).is_wall = wall
            self._calculate_flow_field()

    def is_target(self, x: int, y: int) -> bool:
        return self.is_in_bounds(x, y) and self.cell(x, y).is_target

    def set_target(self, x: int, y: int) -> None:
        """Make the cell the single target, clearing any wall or spawner on it."""
        if not self.is_in_bounds(x, y):
            return
        for cell in self._cells:
            cell.is_target = False
        chosen = self.cell(x, y)
        chosen.is_target = True
        chosen.is_wall = False
        chosen.is_spawner = False
        self._calculate_flow_field()

    def is_spawner(self, x: int, y: int) -> bool:
        return self.is_in_bounds(x, y) and self.cell(x, y).is_spawner

    def set_spawner(self, x: int, y: int) -> None:
        """Make the cell the single spawner; the target cell cannot be one."""
        if not self.is_in_bounds(x, y) or self.is_target(x, y):
            return
        for cell in self._cells:
            cell.is_spawner = False
        chosen = self.cell(x, y)
        chosen.is_spawner = True
        chosen.is_wall = False
        self._calculate_flow_field()

    def target_position(self) -> Vector2D:
        """Cell coordinates of the first target, placing one at the centre if none."""
        for cell in self._cells:
            if cell.is_target:
                return Vector2D(float(cell.x), float(cell.y))
        cx, cy = self.width // 2, self.height // 2
        self.set_target(cx, cy)
        return Vector2D(float(cx), float(cy))

    def flow_normal(self, x: int, y: int) -> Vector2D:
        """Unit flow direction of the cell, or the zero vector outside the map."""
        if not self.is_in_bounds(x, y):
            return Vector2D()
        cell = self.cell(x, y)
        return Vector2D(float(cell.flow_direction_x), float(cell.flow_direction_y)).normalize()

    def has_valid_path(self) -> bool:
        """True when a spawner exists and can reach the target."""
        spawner = next((cell for cell in self._cells if cell.is_spawner), None)
        return spawner is not None and spawner.flow_distance != FLOW_DISTANCE_MAX

    def _calculate_flow_field(self) -> None:
        for cell in self._cells:
            cell.flow_direction_x = 0
            cell.flow_direction_y = 0
            cell.flow_distance = FLOW_DISTANCE_MAX
        self._calculate_distances()
        self._calculate_flow_directions()

    def _calculate_distances(self) -> None:
        queue: deque[Cell] = deque()
        for cell in self._cells:
            if cell.is_target:
                cell.flow_distance = 0
                queue.append(cell)

        while queue:
            current = queue.popleft()
            for dx, dy in _BFS_NEIGHBORS:
                nx, ny = current.x + dx, current.y + dy
                if not self.is_in_bounds(nx, ny):
                    continue
                neighbor = self.cell(nx, ny)
                if not neighbor.is_wall and neighbor.flow_distance == FLOW_DISTANCE_MAX:
                    # Distances are stored in a single byte.
                    neighbor.flow_distance = (current.flow_distance + 1) & 0xFF
                    queue.append(neighbor)

    def _calculate_flow_directions(self) -> None:
        for cell in self._cells:
            if cell.flow_distance == FLOW_DISTANCE_MAX:
                continue
            best = cell.flow_distance
            for dx, dy in _FLOW_NEIGHBORS:
                nx, ny = cell.x + dx, cell.y + dy
                if not self.is_in_bounds(nx, ny):
                    continue
                neighbor = self.cell(nx, ny)
                if neighbor.flow_distance < best:
                    best = neighbor.flow_distance
                    cell.flow_direction_x = dx
                    cell.flow_direction_y = dy