"""
Frame State - everything the per-tick update and render read or mutate
"""

import logging

from engine import RenderMode, Player, Moves, apply_moves, boundaries_from_rect

logger = logging.getLogger(__name__)


class FrameState:
    """
    Mutable state owned by the frame loop

    The player, the held intents and the render mode change between
    frames; the boundaries are fixed once the arena is built.
    """

    def __init__(self, player, moves, boundaries, viewport, mode=RenderMode.PROJECTED_3D):
        self.player = player
        self.moves = moves
        self.boundaries = boundaries
        self.viewport = viewport
        self.mode = mode

    @classmethod
    def for_viewport(cls, viewport, mode=RenderMode.PROJECTED_3D):
        """
        Build a fresh arena enclosed by the viewport's edges

        Args:
            viewport: Rect of the window in world coordinates
            mode: Initial RenderMode
        """
        boundaries = boundaries_from_rect(viewport)
        logger.debug("Arena ready: %d boundaries, mode %s", len(boundaries), mode.name)
        return cls(Player(), Moves(), boundaries, viewport, mode)


def update(frame, config):
    """Apply one tick of held movement intents to the player"""
    apply_moves(frame.moves, frame.player, config.move_step, config.turn_step)


def toggle_render_mode(frame):
    """Switch between the overhead and projected views"""
    frame.mode = frame.mode.toggled()
    logger.info("Render mode: %s", frame.mode.name)
    return frame.mode
