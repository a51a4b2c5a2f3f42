import math
from dataclasses import dataclass


class GeometryError(ValueError):
    """Raised when a primitive is built from invalid values."""


def degrees(value):
    """Convert an angle in degrees to radians."""
    return value / 180 * math.pi


def normalize_angle(angle):
    """Map any real angle into [-pi, pi)."""
    return (angle + math.pi) % (2 * math.pi) - math.pi


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other):
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Vector:
    """Polar displacement: ``length`` units in direction ``angle`` (radians)."""

    length: float
    angle: float

    def __post_init__(self):
        # NaN fails this comparison too
        if not self.length >= 0:
            raise GeometryError(f"vector length must be >= 0, got {self.length!r}")

    def as_cartesian(self):
        return Point(self.length * math.cos(self.angle),
                     self.length * math.sin(self.angle))

    def adjust(self, delta):
        return Vector(self.length, self.angle + delta)

    @classmethod
    def between(cls, p1, p2):
        dx = p2.x - p1.x
        dy = p2.y - p1.y
        return cls(math.hypot(dx, dy), math.atan2(dy, dx))


@dataclass(frozen=True)
class Line:
    """Directed segment starting at ``position``. Walls and rays are both Lines."""

    position: Point
    vector: Vector

    def end(self):
        return self.position + self.vector.as_cartesian()

    def adjust(self, delta):
        return Line(self.position, self.vector.adjust(delta))

    def direction(self):
        """Unit direction of the line, independent of its length."""
        return Point(math.cos(self.vector.angle), math.sin(self.vector.angle))


def line_between(p1, p2):
    return Line(p1, Vector.between(p1, p2))
