"""
Arena Boundaries - immutable line segments that rays collide with
"""

import logging
from dataclasses import dataclass

from pygame.math import Vector2

from utils.colors import COLOR_BOUNDARY
from utils.constants import BOUNDARY_WEIGHT

logger = logging.getLogger(__name__)


class DegenerateBoundaryError(ValueError):
    """Raised when a boundary would have zero length"""


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in world coordinates"""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def from_size(cls, width, height):
        """
        Rectangle of the given size centred on the world origin

        Args:
            width, height: Window dimensions in pixels
        """
        return cls(-width / 2, width / 2, -height / 2, height / 2)


@dataclass(frozen=True)
class Boundary:
    """
    Finite segment from origin to origin + length * dir

    Build instances with make_boundary(); dir is always unit length.
    """

    origin: Vector2
    dir: Vector2
    length: float

    @property
    def end(self):
        return self.origin + self.dir * self.length


def make_boundary(start, end):
    """
    Create a boundary between two points

    Args:
        start, end: Segment endpoints (anything Vector2 accepts)

    Returns:
        Boundary

    Raises:
        DegenerateBoundaryError: if start and end coincide
    """
    start = Vector2(start)
    end = Vector2(end)
    span = end - start
    if start == end or span.length_squared() == 0:
        raise DegenerateBoundaryError(
            f"boundary from {tuple(start)} to {tuple(end)} has zero length"
        )
    return Boundary(origin=start, dir=span.normalize(), length=span.length())


def boundaries_from_rect(rect):
    """
    Build the four edges of a rectangle

    Order is left, top, right, bottom. Winding is not consistent between
    edges; it only changes the stroke direction in the overhead view.

    Args:
        rect: Rect to outline

    Returns:
        list of four Boundary values
    """
    edges = [
        make_boundary((rect.min_x, rect.min_y), (rect.min_x, rect.max_y)),
        make_boundary((rect.min_x, rect.min_y), (rect.max_x, rect.min_y)),
        make_boundary((rect.max_x, rect.max_y), (rect.max_x, rect.min_y)),
        make_boundary((rect.max_x, rect.max_y), (rect.min_x, rect.max_y)),
    ]
    logger.debug("Built %d arena edges for %s", len(edges), rect)
    return edges


def draw_boundary(surface, boundary):
    """Draw a boundary as a thick line"""
    surface.line(boundary.origin, boundary.end, BOUNDARY_WEIGHT, COLOR_BOUNDARY)
