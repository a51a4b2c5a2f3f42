import pygame

from core.geometry import Point
from settings import WIDTH, HEIGHT


class Camera:
    """Translates between world space (origin at the viewport center) and screen pixels."""

    def __init__(self, viewport=(WIDTH, HEIGHT)):
        self.offset = pygame.Vector2(0, 0)
        self.set_viewport(*viewport)

    # -------------------------
    # Public API
    # -------------------------

    def set_viewport(self, width, height):
        """Re-center the world origin for a viewport of the given size."""
        self.offset.update(width / 2, height / 2)

    def to_screen(self, point):
        """
        World Point -> screen (x, y).
        """
        return (point.x + self.offset.x, point.y + self.offset.y)

    def from_screen(self, position):
        """
        Screen (x, y) -> world Point.
        """
        x, y = position
        return Point(x - self.offset.x, y - self.offset.y)
