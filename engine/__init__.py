"""
Ray Arena Engine - line-segment raycasting with overhead and pseudo-3D views
"""

from .boundary import (Boundary, Rect, DegenerateBoundaryError, make_boundary,
                       boundaries_from_rect, draw_boundary)
from .player import (Player, Moves, perp, movement_delta, apply_moves,
                     translate_player, rotate_player, draw_player)
from .raycaster import (Ray, RayHit, Raycaster, make_ray, intersect, luminosity,
                        resolve_nearest_hit, cast_columns, boundaries_to_array, draw_ray)
from .renderer import (RenderMode, RenderPipeline, ColumnSample, column_range, column_angle,
                       column_height, column_shade, column_alpha)
from .surface import PygameSurface

__all__ = ['Boundary', 'Rect', 'DegenerateBoundaryError', 'make_boundary',
           'boundaries_from_rect', 'draw_boundary',
           'Player', 'Moves', 'perp', 'movement_delta', 'apply_moves',
           'translate_player', 'rotate_player', 'draw_player',
           'Ray', 'RayHit', 'Raycaster', 'make_ray', 'intersect', 'luminosity',
           'resolve_nearest_hit', 'cast_columns', 'boundaries_to_array', 'draw_ray',
           'RenderMode', 'RenderPipeline', 'ColumnSample', 'column_range', 'column_angle',
           'column_height', 'column_shade', 'column_alpha',
           'PygameSurface']
