"""
Input Bindings - maps key codes to movement intents
"""

import pygame

from utils.constants import (
    ACTION_UP, ACTION_DOWN, ACTION_LEFT, ACTION_RIGHT,
    ACTION_CLOCK, ACTION_ANTI_CLOCK
)

KEY_BINDINGS = {
    pygame.K_w: ACTION_UP,
    pygame.K_a: ACTION_LEFT,
    pygame.K_s: ACTION_DOWN,
    pygame.K_d: ACTION_RIGHT,
    pygame.K_RIGHT: ACTION_CLOCK,
    pygame.K_LEFT: ACTION_ANTI_CLOCK,
}

KEY_TOGGLE_MODE = pygame.K_TAB
KEY_QUIT = pygame.K_ESCAPE


def handle_key(moves, key, pressed):
    """
    Update movement intents for a key press or release

    Args:
        moves: Moves to update
        key: pygame key code
        pressed: True on KEYDOWN, False on KEYUP

    Returns:
        True if the key is bound to a movement action
    """
    action = KEY_BINDINGS.get(key)
    if action is None:
        return False
    moves.set_action(action, pressed)
    return True
