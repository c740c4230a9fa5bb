"""
Raycaster Engine - ray/segment intersection against arena boundaries
Scalar reference path plus a Numba JIT batch path for whole frames
"""

import math
import logging
from dataclasses import dataclass

import numpy as np
from numba import njit, float64
from pygame.math import Vector2

from utils.colors import COLOR_RAY
from utils.constants import (
    LUMINOSITY_SCALE, LUMINOSITY_DISTANCE_UNIT, AMBIENT_LUMINOSITY,
    UNBOUNDED_RAY_LENGTH, RAY_WEIGHT
)

logger = logging.getLogger(__name__)

# Columns of the batch result array
COL_HIT_X = 1
COL_HIT_Y = 2
COL_LENGTH = 3
COL_LUMINOSITY = 4


@dataclass(frozen=True)
class Ray:
    """Probe cast from the player's eye; dir is unit length"""

    origin: Vector2
    dir: Vector2


@dataclass(frozen=True)
class RayHit:
    """Nearest boundary hit of a ray"""

    point: Vector2
    length: float
    luminosity: float


def make_ray(player, d_theta):
    """
    Build a ray at the player's position

    Args:
        player: Player the ray is cast from
        d_theta: Angular offset from look_dir in radians
    """
    return Ray(origin=Vector2(player.pos), dir=player.look_dir.rotate_rad(d_theta).normalize())


def luminosity(lam):
    """
    Inverse-square brightness of a hit at distance lam, over an ambient floor

    A hit at distance 0 is infinitely bright.
    """
    if lam == 0:
        return math.inf
    scaled = lam / LUMINOSITY_DISTANCE_UNIT
    return LUMINOSITY_SCALE / (scaled * scaled) + AMBIENT_LUMINOSITY


def intersect(ray, boundary):
    """
    Intersect a ray with a boundary segment (Cramer's rule)

    k runs along the boundary (valid in [0, length)), lam runs along the
    ray (valid when >= 0).

    Returns:
        (hit point, lam, luminosity) or None for parallel lines and misses
    """
    determinant = (ray.dir.x * boundary.dir.y) - (boundary.dir.x * ray.dir.y)
    if determinant == 0:
        return None

    dx = ray.origin.x - boundary.origin.x
    dy = ray.origin.y - boundary.origin.y
    k = ((ray.dir.x * dy) - (ray.dir.y * dx)) / determinant
    lam = ((boundary.dir.x * dy) - (boundary.dir.y * dx)) / determinant

    if lam >= 0 and k >= 0 and k < boundary.length:
        return boundary.origin + boundary.dir * k, lam, luminosity(lam)
    return None


def resolve_nearest_hit(ray, boundaries):
    """
    Find the closest boundary hit of a ray

    A later hit only replaces the current best when it is strictly closer.

    Returns:
        RayHit or None when no boundary is hit
    """
    best = None
    for boundary in boundaries:
        found = intersect(ray, boundary)
        if found is None:
            continue
        point, _, lum = found
        length = (point - ray.origin).length()
        if best is None or length < best.length:
            best = RayHit(point=point, length=length, luminosity=lum)
    return best


def draw_ray(surface, ray, hit):
    """Draw a ray up to its hit point, or far along its direction on a miss"""
    if hit is not None:
        end = hit.point
    else:
        end = ray.origin + ray.dir * UNBOUNDED_RAY_LENGTH
    surface.line(ray.origin, end, RAY_WEIGHT, COLOR_RAY)


def boundaries_to_array(boundaries):
    """Pack boundaries into a (n, 5) float64 array [ox, oy, dx, dy, length]"""
    arr = np.empty((len(boundaries), 5), dtype=np.float64)
    for i, boundary in enumerate(boundaries):
        arr[i] = (boundary.origin.x, boundary.origin.y,
                  boundary.dir.x, boundary.dir.y, boundary.length)
    return arr


@njit(cache=True)
def _numba_cast_columns(segments, px, py, look_x, look_y, angles,
                        lum_scale, lum_unit, ambient):
    """
    Cast one ray per angle against every segment (Numba JIT compiled)

    Args:
        segments: numpy array (n, 5) from boundaries_to_array
        px, py: Ray origin
        look_x, look_y: Unit look direction
        angles: 1D numpy float64 array of offsets from look direction
        lum_scale, lum_unit, ambient: Luminosity constants

    Returns:
        results: numpy array shape (num_rays, 5)
                 [angle, hit_x, hit_y, length, luminosity], NaN on a miss
    """
    num_rays = angles.shape[0]
    results = np.empty((num_rays, 5), dtype=np.float64)

    for i in range(num_rays):
        angle = angles[i]
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        dir_x = look_x * cos_a - look_y * sin_a
        dir_y = look_x * sin_a + look_y * cos_a
        norm = math.sqrt(dir_x * dir_x + dir_y * dir_y)
        dir_x = dir_x / norm
        dir_y = dir_y / norm

        best = math.inf
        hit_x = math.nan
        hit_y = math.nan
        best_lum = math.nan

        for j in range(segments.shape[0]):
            ox = segments[j, 0]
            oy = segments[j, 1]
            bx = segments[j, 2]
            by = segments[j, 3]
            length = segments[j, 4]

            determinant = dir_x * by - bx * dir_y
            if determinant == 0.0:
                continue

            dx = px - ox
            dy = py - oy
            k = (dir_x * dy - dir_y * dx) / determinant
            lam = (bx * dy - by * dx) / determinant

            if lam >= 0.0 and k >= 0.0 and k < length:
                cx = ox + k * bx
                cy = oy + k * by
                dist = math.sqrt((cx - px) * (cx - px) + (cy - py) * (cy - py))
                if dist < best:
                    best = dist
                    hit_x = cx
                    hit_y = cy
                    if lam == 0.0:
                        best_lum = math.inf
                    else:
                        scaled = lam / lum_unit
                        best_lum = lum_scale / (scaled * scaled) + ambient

        results[i, 0] = angle
        results[i, 1] = hit_x
        results[i, 2] = hit_y
        if best == math.inf:
            results[i, 3] = math.nan
        else:
            results[i, 3] = best
        results[i, 4] = best_lum

    return results


class Raycaster:
    """
    Casts the per-column rays of a frame against the arena boundaries
    """

    def __init__(self, use_jit=True):
        """
        Args:
            use_jit: Resolve hits with the Numba batch kernel instead of
                     the per-ray Python loop
        """
        self.use_jit = use_jit

        # Cached boundary array, keyed on the boundaries it was packed from
        self._segments_cache = None
        self._segments_key = None

    def _get_segments_array(self, boundaries):
        """Convert boundaries to a numpy array (with caching)"""
        key = tuple(boundaries)
        if self._segments_key != key or self._segments_cache is None:
            self._segments_cache = boundaries_to_array(key)
            self._segments_key = key
            logger.debug("Packed %d boundaries for the JIT caster", len(boundaries))
        return self._segments_cache

    def cast_all_rays(self, player, angles, boundaries):
        """
        Cast one ray per angle offset

        Args:
            player: Player the rays start from
            angles: Sequence of offsets from look_dir in radians
            boundaries: Arena boundaries

        Returns:
            list of (Ray, RayHit or None), in the order of angles
        """
        rays = [make_ray(player, angle) for angle in angles]
        if not self.use_jit:
            return [(ray, resolve_nearest_hit(ray, boundaries)) for ray in rays]

        results = cast_columns(player, angles, self._get_segments_array(boundaries))
        return [(ray, _row_to_hit(row)) for ray, row in zip(rays, results)]


def cast_columns(player, angles, segments):
    """
    Batch cast with the JIT kernel

    Args:
        player: Player the rays start from
        angles: Sequence of offsets from look_dir in radians
        segments: Array from boundaries_to_array

    Returns:
        numpy array shape (len(angles), 5), see _numba_cast_columns
    """
    return _numba_cast_columns(
        segments,
        float64(player.pos.x), float64(player.pos.y),
        float64(player.look_dir.x), float64(player.look_dir.y),
        np.asarray(angles, dtype=np.float64),
        float64(LUMINOSITY_SCALE), float64(LUMINOSITY_DISTANCE_UNIT),
        float64(AMBIENT_LUMINOSITY),
    )


def _row_to_hit(row):
    if math.isnan(row[COL_LENGTH]):
        return None
    return RayHit(
        point=Vector2(float(row[COL_HIT_X]), float(row[COL_HIT_Y])),
        length=float(row[COL_LENGTH]),
        luminosity=float(row[COL_LUMINOSITY]),
    )
