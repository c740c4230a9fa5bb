"""
Player - first-person pose and per-tick movement integration
"""

from pygame.math import Vector2

from utils.colors import COLOR_PLAYER, COLOR_LOOK_DIR
from utils.constants import (
    MOVE_STEP, TURN_STEP, ACTIONS,
    PLAYER_MARKER_SIZE, LOOK_LINE_LENGTH, LOOK_LINE_WEIGHT
)


def perp(v):
    """Vector rotated by 90 degrees (-y, x)"""
    return Vector2(-v.y, v.x)


class Player:
    """
    Player position and unit look direction
    """

    def __init__(self, pos=(0.0, 0.0), look_dir=(1.0, 0.0)):
        """
        Args:
            pos: Starting world position
            look_dir: Starting facing direction (normalized on entry)
        """
        self.pos = Vector2(pos)
        self.look_dir = Vector2(look_dir).normalize()

    def __repr__(self):
        return (f"Player(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), "
                f"look_dir=({self.look_dir.x:.3f}, {self.look_dir.y:.3f}))")


def translate_player(player, vel):
    """Move the player by a velocity vector"""
    player.pos += vel


def rotate_player(player, d_theta):
    """
    Rotate the look direction

    Args:
        player: Player to rotate
        d_theta: Angle change in radians
    """
    # Renormalize every time so repeated rotations do not drift
    player.look_dir = player.look_dir.rotate_rad(d_theta).normalize()


class Moves:
    """
    Held movement intents, one flag per action

    Flags are toggled by key press/release and persist between frames.
    """

    def __init__(self):
        self.up = False
        self.down = False
        self.left = False
        self.right = False
        self.clock = False
        self.anti_clock = False

    def set_action(self, action, pressed):
        """
        Set one intent flag

        Args:
            action: One of utils.constants.ACTIONS
            pressed: True on key press, False on release
        """
        if action not in ACTIONS:
            raise ValueError(f"unknown action: {action!r}")
        setattr(self, action, bool(pressed))

    def any_active(self):
        return any(getattr(self, action) for action in ACTIONS)

    def __repr__(self):
        active = [action for action in ACTIONS if getattr(self, action)]
        return f"Moves({', '.join(active) or 'idle'})"


def movement_delta(moves, look_dir, step=MOVE_STEP, rot_step=TURN_STEP):
    """
    Sum every active intent into one translation and one rotation

    Opposite intents cancel instead of overriding each other.

    Returns:
        (Vector2 translation, float angle in radians)
    """
    update_vec = Vector2(0.0, 0.0)
    update_theta = 0.0

    if moves.up:
        update_vec += look_dir * step
    if moves.down:
        update_vec -= look_dir * step
    if moves.left:
        update_vec -= perp(look_dir) * step
    if moves.right:
        update_vec += perp(look_dir) * step
    if moves.clock:
        update_theta += rot_step
    if moves.anti_clock:
        update_theta -= rot_step

    return update_vec, update_theta


def apply_moves(moves, player, step=MOVE_STEP, rot_step=TURN_STEP):
    """Run one integration tick: translate first, then rotate"""
    update_vec, update_theta = movement_delta(moves, player.look_dir, step, rot_step)
    translate_player(player, update_vec)
    rotate_player(player, update_theta)


def draw_player(surface, player):
    """Draw the player marker and its facing line"""
    surface.ellipse(player.pos, (PLAYER_MARKER_SIZE, PLAYER_MARKER_SIZE), COLOR_PLAYER)
    surface.line(
        player.pos,
        player.pos + player.look_dir * LOOK_LINE_LENGTH,
        LOOK_LINE_WEIGHT,
        COLOR_LOOK_DIR,
    )
