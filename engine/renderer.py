"""
Frame Renderer - one ray per screen column, drawn as an overhead
wireframe or as projected pseudo-3D wall strips
"""

import math
import logging
from dataclasses import dataclass
from enum import Enum, auto

from utils.colors import COLOR_BG, gray
from utils.constants import SHADE_CEILING, AMBIENT_LUMINOSITY
from utils.helpers import map_range
from .boundary import draw_boundary
from .player import draw_player
from .raycaster import Raycaster, draw_ray

logger = logging.getLogger(__name__)


class RenderMode(Enum):
    """Render modes"""
    OVERHEAD_2D = auto()
    PROJECTED_3D = auto()

    def toggled(self):
        if self is RenderMode.OVERHEAD_2D:
            return RenderMode.PROJECTED_3D
        return RenderMode.OVERHEAD_2D


@dataclass(frozen=True)
class ColumnSample:
    """One screen column: its ray and the ray's nearest hit (None on a miss)"""

    index: int
    angle: float
    ray: object
    hit: object


def column_range(viewport, resolution):
    """
    Column indices spanning the viewport

    Edges are truncated toward zero, so a centred viewport gives a
    symmetric range.
    """
    return range(int(viewport.min_x / resolution), int(viewport.max_x / resolution))


def column_angle(index, viewport, resolution, fov):
    """
    Angular offset of a column from straight ahead

    Args:
        index: Column index from column_range()
        viewport: Rect of the screen in world coordinates
        resolution: Pixels per column
        fov: Field of view in degrees

    Returns:
        Offset in radians, in [-fov/2, fov/2]
    """
    half_fov = math.radians(fov) / 2
    offset = index / (viewport.max_x / resolution)
    return map_range(offset, -1.0, 1.0, -half_fov, half_fov)


def column_height(hit, angle, projection):
    """
    Projected wall height of a column; 0 when the ray hits nothing

    Dividing by cos(angle) turns ray distance into distance from the view
    plane, removing fish-eye distortion.
    """
    if hit is None:
        return 0.0
    depth = hit.length * math.cos(angle)
    if depth == 0:
        return math.inf
    return projection / depth


def column_shade(hit):
    """Gray level of a column, capped below pure white"""
    if hit is None:
        return 0.0
    return min(hit.luminosity, SHADE_CEILING)


def column_alpha(shade):
    """
    Opacity of a column: SHADE_CEILING -> 1.0, ambient floor -> 0.0

    Not clamped; the drawing surface clamps out-of-range alpha.
    """
    return map_range(shade, SHADE_CEILING, AMBIENT_LUMINOSITY, 1.0, 0.0)


class RenderPipeline:
    """
    Traces and draws a frame from a FrameState
    """

    def __init__(self, config):
        """
        Args:
            config: EngineConfig with resolution, fov, projection and use_jit
        """
        self.resolution = config.resolution
        self.fov = config.fov
        self.projection = config.projection
        self.raycaster = Raycaster(use_jit=config.use_jit)
        logger.debug("Render pipeline: resolution=%s fov=%s jit=%s",
                     self.resolution, self.fov, config.use_jit)

    def trace(self, frame):
        """
        Cast every column's ray for the current player pose

        Returns:
            list of ColumnSample, left to right
        """
        indices = list(column_range(frame.viewport, self.resolution))
        angles = [column_angle(i, frame.viewport, self.resolution, self.fov) for i in indices]
        cast = self.raycaster.cast_all_rays(frame.player, angles, frame.boundaries)
        return [
            ColumnSample(index=i, angle=angle, ray=ray, hit=hit)
            for i, angle, (ray, hit) in zip(indices, angles, cast)
        ]

    def render(self, frame, surface):
        """
        Draw one frame in the frame's current mode

        Args:
            frame: FrameState to draw
            surface: Drawing surface (fill/rect/line/ellipse)

        Returns:
            The traced columns
        """
        surface.fill(COLOR_BG)
        columns = self.trace(frame)

        if frame.mode is RenderMode.OVERHEAD_2D:
            self._draw_overhead(frame, surface, columns)
        else:
            self._draw_projected(surface, columns)
        return columns

    def _draw_overhead(self, frame, surface, columns):
        """Rays, then boundaries, then the player marker"""
        for column in columns:
            draw_ray(surface, column.ray, column.hit)

        for boundary in frame.boundaries:
            draw_boundary(surface, boundary)

        draw_player(surface, frame.player)

    def _draw_projected(self, surface, columns):
        """One vertical strip per column, centred on the horizon"""
        for column in columns:
            height = column_height(column.hit, column.angle, self.projection)
            shade = column_shade(column.hit)
            surface.rect(
                (column.index * self.resolution, 0.0),
                (self.resolution, height),
                gray(shade, column_alpha(shade)),
            )
