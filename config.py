"""
Configuration for Ray Arena
Defaults come from utils.constants; a JSON file and environment variables
can override them at startup.
"""

import json
import logging
import os
from pathlib import Path

from engine import RenderMode
from utils.constants import (
    WINDOW_WIDTH, WINDOW_HEIGHT, FPS, RESOLUTION, FOV, PROJECTION_CONSTANT,
    MOVE_STEP, TURN_STEP
)

GAME_TITLE = "Ray Arena"
GAME_VERSION = "1.0.0"

ENV_PREFIX = "RAY_ARENA_"

logger = logging.getLogger(__name__)

CONFIG_KEYS = (
    'width', 'height', 'fps', 'resolution', 'fov', 'projection',
    'mode', 'use_jit', 'move_step', 'turn_step',
)

MODE_NAMES = {
    '2d': RenderMode.OVERHEAD_2D,
    '3d': RenderMode.PROJECTED_3D,
}


class ConfigError(ValueError):
    """Raised for an invalid configuration value"""


class EngineConfig:
    """Startup configuration for the engine and its host window"""
    def __init__(self, **kwargs):
        # Window
        self.width = kwargs.get('width', WINDOW_WIDTH)
        self.height = kwargs.get('height', WINDOW_HEIGHT)
        self.fps = kwargs.get('fps', FPS)

        # Column renderer
        self.resolution = kwargs.get('resolution', RESOLUTION)
        self.fov = kwargs.get('fov', FOV)
        self.projection = kwargs.get('projection', PROJECTION_CONSTANT)
        self.mode = kwargs.get('mode', RenderMode.PROJECTED_3D)
        self.use_jit = kwargs.get('use_jit', True)

        # Movement
        self.move_step = kwargs.get('move_step', MOVE_STEP)
        self.turn_step = kwargs.get('turn_step', TURN_STEP)

        self.validate()

    def validate(self):
        """Check value ranges, raising ConfigError on the first bad key"""
        for key in ('width', 'height', 'fps', 'resolution'):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{key} must be a positive integer, got {value!r}")
        if isinstance(self.fov, bool) or not isinstance(self.fov, (int, float)) or not 0 < self.fov < 180:
            raise ConfigError(f"fov must be between 0 and 180 degrees, got {self.fov!r}")
        for key in ('projection', 'move_step', 'turn_step'):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{key} must be a number, got {value!r}")
        if self.projection <= 0:
            raise ConfigError(f"projection must be positive, got {self.projection!r}")
        if not isinstance(self.use_jit, bool):
            raise ConfigError(f"use_jit must be a boolean, got {self.use_jit!r}")
        if not isinstance(self.mode, RenderMode):
            raise ConfigError(f"mode must be a RenderMode, got {self.mode!r}")

    def to_dict(self):
        return {
            'width': self.width,
            'height': self.height,
            'fps': self.fps,
            'resolution': self.resolution,
            'fov': self.fov,
            'projection': self.projection,
            'mode': self.mode.name,
            'use_jit': self.use_jit,
            'move_step': self.move_step,
            'turn_step': self.turn_step,
        }

    def __repr__(self):
        return f"EngineConfig({self.to_dict()})"


def parse_mode(value):
    """Parse '2d' / '3d' (any case) into a RenderMode"""
    if isinstance(value, RenderMode):
        return value
    mode = MODE_NAMES.get(str(value).strip().lower())
    if mode is None:
        raise ConfigError(f"mode must be one of {sorted(MODE_NAMES)}, got {value!r}")
    return mode


def parse_bool(value):
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ('1', 'true', 'yes', 'on'):
        return True
    if text in ('0', 'false', 'no', 'off'):
        return False
    raise ConfigError(f"expected a boolean, got {value!r}")


def _coerce(key, value, kind):
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key}: {e}") from e


def _env_overrides(environ):
    overrides = {}
    if ENV_PREFIX + 'RESOLUTION' in environ:
        overrides['resolution'] = _coerce('resolution', environ[ENV_PREFIX + 'RESOLUTION'], int)
    if ENV_PREFIX + 'FOV' in environ:
        overrides['fov'] = _coerce('fov', environ[ENV_PREFIX + 'FOV'], float)
    if ENV_PREFIX + 'MODE' in environ:
        overrides['mode'] = parse_mode(environ[ENV_PREFIX + 'MODE'])
    if ENV_PREFIX + 'JIT' in environ:
        overrides['use_jit'] = parse_bool(environ[ENV_PREFIX + 'JIT'])
    return overrides


def load_config(path=None, environ=None):
    """
    Build the startup configuration

    Args:
        path: Optional JSON file with any EngineConfig keys
        environ: Mapping to read RAY_ARENA_* overrides from (default os.environ)

    Returns:
        EngineConfig
    """
    values = {}

    if path is not None:
        path = Path(path)
        with open(path, 'r') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"{path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a JSON object")
        unknown = sorted(set(data) - set(CONFIG_KEYS))
        if unknown:
            raise ConfigError(f"{path}: unknown keys {unknown}")
        values.update(data)
        if 'mode' in values:
            values['mode'] = parse_mode(values['mode'])
        if 'use_jit' in values:
            values['use_jit'] = parse_bool(values['use_jit'])
        logger.debug("Loaded config file %s", path)

    values.update(_env_overrides(os.environ if environ is None else environ))

    config = EngineConfig(**values)
    logger.info("Config: %s", config)
    return config
