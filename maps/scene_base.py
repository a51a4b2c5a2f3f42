import json
import logging
import math

import pygame

from core.draw_utils import draw_dashed_line, draw_thick_segment
from core.geometry import GeometryError, Line, Point, Vector, degrees
from core.visibility import DEFAULT_JITTER, compute_visibility
from data.scene_style import SCENE_STYLE

logger = logging.getLogger(__name__)


class SceneFormatError(ValueError):
    """Raised when a scene file is missing data or holds invalid values."""


def _finite(value, name):
    """float(value), rejecting the NaN and Infinity that json accepts."""
    number = float(value)
    if not math.isfinite(number):
        raise SceneFormatError(f"{name} must be finite, got {value!r}")
    return number


class SceneBase:
    """Wall set plus observer, centered on the world origin.

    ``width``/``height`` give the scene extent. Unless ``enclosed`` is False,
    that rectangle is added as bounding walls to every visibility computation.
    """

    def __init__(self, width, height, jitter=DEFAULT_JITTER, enclosed=True):
        self.width = width
        self.height = height
        self.jitter = jitter
        self.enclosed = enclosed
        self.walls = []
        self.observer = Point(0, 0)
        self.visibility = None
        self._visibility_key = None

    @classmethod
    def from_json(cls, path, **kwargs):
        """Construct a SceneBase from a JSON scene file."""
        with open(path, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise SceneFormatError(f"{path}: invalid JSON: {exc}") from exc

        try:
            scene = cls(width=_finite(data["width"], "width"),
                        height=_finite(data["height"], "height"), **kwargs)
            for i, wd in enumerate(data["walls"]):
                try:
                    wall = Line(
                        Point(_finite(wd["x"], f"wall {i} x"), _finite(wd["y"], f"wall {i} y")),
                        Vector(_finite(wd["length"], f"wall {i} length"),
                               degrees(_finite(wd["angle"], f"wall {i} angle"))),
                    )
                except GeometryError as exc:
                    raise SceneFormatError(f"wall {i}: {exc}") from exc
                scene.add_wall(wall)
            if "observer" in data:
                ox, oy = data["observer"]
                scene.observer = Point(_finite(ox, "observer x"), _finite(oy, "observer y"))
        except KeyError as exc:
            raise SceneFormatError(f"{path}: missing key {exc}") from exc
        except SceneFormatError:
            raise
        except (TypeError, ValueError) as exc:
            raise SceneFormatError(f"{path}: {exc}") from exc

        logger.info("Loaded %d walls from %s", len(scene.walls), path)
        return scene

    def to_json(self, path):
        data = {
            "width": self.width,
            "height": self.height,
            "observer": [self.observer.x, self.observer.y],
            "walls": [
                {
                    "x": w.position.x,
                    "y": w.position.y,
                    "length": w.vector.length,
                    "angle": math.degrees(w.vector.angle),
                }
                for w in self.walls
            ],
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
        logger.info("Saved %d walls to %s", len(self.walls), path)

    def add_wall(self, wall):
        self.walls.append(wall)

    def bounds(self):
        """World-space (left, top, right, bottom) of the scene."""
        return (-self.width / 2, -self.height / 2, self.width / 2, self.height / 2)

    def move_observer(self, point):
        self.observer = point

    def update_visibility(self):
        """Compute and cache the visibility polygon for the current frame.

        Recomputes only when the observer moved or walls were added.
        """
        key = (self.observer, len(self.walls))
        if key == self._visibility_key:
            return self.visibility
        self.visibility = compute_visibility(
            self.observer, tuple(self.walls), self.jitter,
            bounds=self.bounds() if self.enclosed else None,
        )
        self._visibility_key = key
        return self.visibility

    def is_visible(self, point):
        """Check if a world-space point is inside the cached visibility polygon."""
        if self.visibility is None:
            return True
        return self.visibility.contains(point)

    # -------------------------
    # Drawing
    # -------------------------

    def draw(self, screen, camera, show_rays=False, pending_wall=None):
        self.draw_visibility(screen, camera)
        if show_rays:
            self.draw_rays(screen, camera)
        self.draw_walls(screen, camera)
        if pending_wall is not None:
            style = SCENE_STYLE["pending_wall"]
            draw_dashed_line(
                screen, style["color"],
                camera.to_screen(pending_wall.position),
                camera.to_screen(pending_wall.end()),
                style["width"], style["dash_length"],
            )
        self.draw_observer(screen, camera)

    def draw_visibility(self, screen, camera):
        """Fill the visibility polygon as a fan of triangles around the observer."""
        if self.visibility is None:
            return
        color = SCENE_STYLE["polygon"]["color"]
        for triangle in self.visibility.triangles():
            pygame.draw.polygon(screen, color, [camera.to_screen(p) for p in triangle])

    def draw_rays(self, screen, camera):
        """Draw each clipped probe ray, the debug view of the cast."""
        if self.visibility is None:
            return
        style = SCENE_STYLE["ray"]
        start = camera.to_screen(self.observer)
        for ray in self.visibility.rays:
            pygame.draw.line(screen, style["color"], start, camera.to_screen(ray.end()), style["width"])

    def draw_walls(self, screen, camera):
        style = SCENE_STYLE["wall"]
        for wall in self.walls:
            draw_thick_segment(
                screen, style["color"],
                camera.to_screen(wall.position), camera.to_screen(wall.end()),
                style["width"],
            )

    def draw_observer(self, screen, camera):
        style = SCENE_STYLE["observer"]
        pygame.draw.circle(screen, style["color"], camera.to_screen(self.observer), style["radius"])
