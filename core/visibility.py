import logging
import math
from dataclasses import dataclass

from core.geometry import (
    GeometryError,
    Line,
    Point,
    Vector,
    degrees,
    line_between,
    normalize_angle,
)

logger = logging.getLogger(__name__)

# Angular offset of the sibling rays cast either side of each wall endpoint
DEFAULT_JITTER = degrees(0.5)

# Slack on the segment-bound and forward checks of intersect()
EPSILON = 1e-9

# Cross products below this are treated as parallel
PARALLEL_EPSILON = 1e-12

# Endpoints equal to this many decimals are cast once
ENDPOINT_DECIMALS = 6


def intersect(ray, wall, tolerance=EPSILON):
    """Intersect ``ray`` with the segment ``wall``.

    Solves ``rp + rm*rd = sp + sm*sd`` for the distances ``rm`` along the ray
    and ``sm`` along the wall. Returns the ray truncated to length ``rm``, or
    None when the lines are parallel, the hit is behind the ray origin, or it
    falls outside the wall segment.
    """
    rp = ray.position
    sp = wall.position
    rd = ray.direction()
    sd = wall.direction()

    denom = sd.x * rd.y - sd.y * rd.x
    if abs(denom) < PARALLEL_EPSILON:
        return None

    sm = (rp.x * rd.y - rp.y * rd.x + sp.y * rd.x - sp.x * rd.y) / denom
    # Solve on the dominant axis so vertical rays never divide by ~0
    if abs(rd.x) >= abs(rd.y):
        rm = (sp.x - rp.x + sd.x * sm) / rd.x
    else:
        rm = (sp.y - rp.y + sd.y * sm) / rd.y

    if math.isnan(sm) or math.isnan(rm):
        return None
    if sm < -tolerance or sm > wall.vector.length + tolerance:
        return None
    if rm < -tolerance:
        return None

    return Line(ray.position, Vector(max(rm, 0.0), ray.vector.angle))


def cast_rays(observer, walls, jitter=DEFAULT_JITTER):
    """Build probe rays from ``observer`` toward every wall endpoint.

    Each endpoint gets a base ray plus two siblings rotated by +/- ``jitter``
    radians (just the base ray when ``jitter`` is 0). Endpoints shared by
    several walls are cast once.
    """
    if jitter < 0:
        raise GeometryError(f"jitter must be >= 0, got {jitter!r}")

    rays = []
    seen = set()
    for wall in walls:
        for corner in (wall.position, wall.end()):
            key = (round(corner.x, ENDPOINT_DECIMALS),
                   round(corner.y, ENDPOINT_DECIMALS))
            if key in seen:
                continue
            seen.add(key)

            base = line_between(observer, corner)
            if base.vector.length == 0:
                continue
            rays.append(base)
            if jitter:
                rays.append(base.adjust(jitter))
                rays.append(base.adjust(-jitter))
    return rays


def clip_ray(ray, walls):
    """Return ``ray`` cut at its nearest wall hit, or None if nothing is hit."""
    closest = None
    for wall in walls:
        hit = intersect(ray, wall)
        if hit is not None and (closest is None or hit.vector.length < closest.vector.length):
            closest = hit
    return closest


def clip_rays(rays, walls):
    clipped = (clip_ray(ray, walls) for ray in rays)
    return [ray for ray in clipped if ray is not None]


def sort_rays(rays):
    """Order rays counter-clockwise by angle in [-pi, pi). Ties keep input order."""
    return sorted(rays, key=lambda ray: normalize_angle(ray.vector.angle))


def bounding_walls(bounds):
    """Four walls around the rectangle ``(left, top, right, bottom)``."""
    left, top, right, bottom = bounds
    corners = [Point(left, top), Point(right, top),
               Point(right, bottom), Point(left, bottom)]
    return [line_between(corners[i], corners[(i + 1) % 4]) for i in range(4)]


def point_in_polygon(point, polygon):
    """Even-odd test: count polygon edges crossed by a ray going +x from ``point``."""
    inside = False
    for a, b in zip(polygon, polygon[-1:] + polygon[:-1]):
        if (a.y > point.y) == (b.y > point.y):
            continue
        crossing_x = a.x + (point.y - a.y) * (b.x - a.x) / (b.y - a.y)
        if point.x < crossing_x:
            inside = not inside
    return inside


@dataclass(frozen=True)
class VisibilityPolygon:
    """Angle-sorted clipped rays around ``observer``.

    ``dropped`` counts probe rays that hit no wall. A non-zero count means the
    scene is not enclosed and the polygon may be missing a sector.
    """

    observer: Point
    rays: tuple
    dropped: int = 0

    @property
    def is_complete(self):
        return self.dropped == 0

    def points(self):
        return [ray.end() for ray in self.rays]

    def triangles(self):
        """Fan triangles ``(observer, a, b)`` for consecutive rays, wrapping around."""
        if len(self.rays) < 2:
            return []
        ends = self.points()
        return [(self.observer, ends[i], ends[(i + 1) % len(ends)])
                for i in range(len(ends))]

    def contains(self, point):
        if len(self.rays) < 3:
            return False
        return point_in_polygon(point, self.points())


def compute_visibility(observer, walls, jitter=DEFAULT_JITTER, bounds=None):
    """Cast, clip and sort rays for ``observer`` against a snapshot of ``walls``.

    When ``bounds`` is given, the rectangle's four edges are added as walls so
    that every probe ray is guaranteed a hit inside it.
    """
    walls = tuple(walls)
    if bounds is not None:
        walls += tuple(bounding_walls(bounds))

    rays = cast_rays(observer, walls, jitter)
    clipped = clip_rays(rays, walls)
    dropped = len(rays) - len(clipped)
    if dropped:
        logger.debug("%d of %d rays from (%.1f, %.1f) hit no wall",
                     dropped, len(rays), observer.x, observer.y)

    return VisibilityPolygon(observer, tuple(sort_rays(clipped)), dropped)
