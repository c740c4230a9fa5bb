"""
Global constants for Ray Arena
"""

# Screen settings
WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
FPS = 60

# Column renderer
RESOLUTION = 5          # Pixels per column
FOV = 60.0              # Field of view (degrees)
PROJECTION_CONSTANT = 100000.0   # Distance-to-screen-plane scale

# Shading
LUMINOSITY_SCALE = 5000.0
LUMINOSITY_DISTANCE_UNIT = 5.0
AMBIENT_LUMINOSITY = 0.2
SHADE_CEILING = 0.9     # No surface is rendered perfectly white

# Player settings
MOVE_STEP = 2.5         # Units per tick
TURN_STEP = 0.05        # Radians per tick

# 2D overhead view
UNBOUNDED_RAY_LENGTH = 1000.0
BOUNDARY_WEIGHT = 4.0
RAY_WEIGHT = 1.0
PLAYER_MARKER_SIZE = 10.0
LOOK_LINE_LENGTH = 50.0
LOOK_LINE_WEIGHT = 2.0

# Player actions (one per movement flag)
ACTION_UP = 'up'
ACTION_DOWN = 'down'
ACTION_LEFT = 'left'
ACTION_RIGHT = 'right'
ACTION_CLOCK = 'clock'
ACTION_ANTI_CLOCK = 'anti_clock'

ACTIONS = (
    ACTION_UP, ACTION_DOWN, ACTION_LEFT, ACTION_RIGHT,
    ACTION_CLOCK, ACTION_ANTI_CLOCK,
)
