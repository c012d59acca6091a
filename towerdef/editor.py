"""Interactive map editing: walls, target and spawner placed with the mouse."""

from __future__ import annotations

import enum

from towerdef.gridmap import PIXELS_PER_CELL, SCREEN_HEIGHT, SCREEN_WIDTH, FlowMap


class MouseButton(enum.IntEnum):
    NONE = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


class MapEditor:
    """Edits a flow map while a mouse button is held.

    Left places a wall, right removes one; with shift held, left sets the
    target and right sets the spawner.
    """

    def __init__(
        self,
        width: int = SCREEN_WIDTH // PIXELS_PER_CELL,
        height: int = SCREEN_HEIGHT // PIXELS_PER_CELL,
    ) -> None:
        self.map = FlowMap(width, height)
        self.held = MouseButton.NONE

    def press(self, button: MouseButton) -> bool:
        """Record a button press; return True if no button was held before."""
        first = self.held == MouseButton.NONE
        if button in (MouseButton.LEFT, MouseButton.RIGHT):
            self.held = MouseButton(button)
        return first

    def release(self) -> None:
        self.held = MouseButton.NONE

    def drag(self, pixel_x: float, pixel_y: float, shift: bool = False) -> None:
        """Apply the held button's action to the cell under the pointer."""
        if self.held == MouseButton.NONE:
            return
        x = int(pixel_x / PIXELS_PER_CELL)
        y = int(pixel_y / PIXELS_PER_CELL)
        if self.held == MouseButton.LEFT:
            if shift:
                self.map.set_target(x, y)
            else:
                self.map.set_wall(x, y, True)
        elif self.held == MouseButton.RIGHT:
            if shift:
                self.map.set_spawner(x, y)
            else:
                self.map.set_wall(x, y, False)

    def status_text(self) -> str:
        """The path-validity line shown on screen."""
        return "Valid Path: " + ("TRUE" if self.map.has_valid_path() else "FALSE")