import logging

from core.geometry import line_between

logger = logging.getLogger(__name__)


class WallPlacer:
    """Two-click wall placement: the first click anchors, the second finishes."""

    def __init__(self):
        self.start = None

    @property
    def pending(self):
        return self.start is not None

    def click(self, point):
        """Register a click at world ``point``. Returns the new wall, or None."""
        if self.start is None:
            self.start = point
            return None

        start, self.start = self.start, None
        if start.distance_to(point) == 0:
            logger.warning("Ignoring zero-length wall at (%.1f, %.1f)", point.x, point.y)
            return None
        return line_between(start, point)

    def cancel(self):
        self.start = None

    def preview(self, point):
        """Segment from the anchored point to ``point`` while a wall is pending."""
        if self.start is None:
            return None
        return line_between(self.start, point)
