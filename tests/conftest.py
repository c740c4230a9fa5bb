import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')

import pytest  # noqa: E402

from engine import Rect, Player, boundaries_from_rect  # noqa: E402


class RecordingSurface:
    """Drawing surface that records every primitive instead of drawing it"""

    def __init__(self):
        self.calls = []

    def fill(self, color):
        self.calls.append(('fill', color))

    def rect(self, center, size, color):
        self.calls.append(('rect', tuple(center), tuple(size), color))

    def line(self, start, end, width, color):
        self.calls.append(('line', tuple(start), tuple(end), width, color))

    def ellipse(self, center, size, color):
        self.calls.append(('ellipse', tuple(center), tuple(size), color))

    def of_kind(self, kind):
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def square():
    """Square arena with corners (0, 0) and (100, 100)"""
    return Rect(0.0, 100.0, 0.0, 100.0)


@pytest.fixture
def square_boundaries(square):
    return boundaries_from_rect(square)


@pytest.fixture
def centred_player():
    return Player(pos=(50.0, 50.0), look_dir=(1.0, 0.0))
