"""
Helper utility functions for Ray Arena
"""


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def lerp(a, b, t):
    """Linear interpolation between a and b by factor t (0-1)"""
    return a + (b - a) * t


def map_range(value, in_min, in_max, out_min, out_max):
    """
    Linearly remap value from [in_min, in_max] to [out_min, out_max]

    The result is not clamped: values outside the input range extrapolate.
    """
    return lerp(out_min, out_max, (value - in_min) / (in_max - in_min))


def to_byte(channel):
    """Convert a 0-1 color channel to a 0-255 int, clamping out-of-range values"""
    return int(round(clamp(channel, 0.0, 1.0) * 255))
