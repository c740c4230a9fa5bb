"""
Color palette for Ray Arena
Colors are float RGB(A) tuples in the 0-1 range; the drawing surface converts them.
"""

# Background colors
COLOR_BG = (221 / 255, 160 / 255, 221 / 255)   # Plum

# Overhead view colors
COLOR_BOUNDARY = (0.0, 0.0, 0.0)     # Arena walls
COLOR_RAY = (0.0, 0.0, 1.0)          # Cast rays
COLOR_PLAYER = (1.0, 1.0, 1.0)       # Player marker
COLOR_LOOK_DIR = (1.0, 0.0, 0.0)     # Facing line


def gray(value, alpha=1.0):
    """Gray color with the same value on every channel"""
    return (value, value, value, alpha)
