"""
Drawing Surface - pygame backend for the frame renderer
World coordinates are centred on the window; colors are 0-1 float tuples
"""

import pygame

from utils.helpers import to_byte


def to_rgba(color):
    """Convert a 0-1 RGB(A) tuple to clamped 0-255 RGBA"""
    if len(color) == 3:
        r, g, b = color
        a = 1.0
    else:
        r, g, b, a = color
    return (to_byte(r), to_byte(g), to_byte(b), to_byte(a))


class PygameSurface:
    """
    Adapts a pygame display surface to the primitives the renderer draws

    Primitives go to a per-pixel-alpha layer that present() blends onto
    the screen, so translucent columns show the background through them.
    """

    def __init__(self, screen):
        """
        Args:
            screen: pygame.Surface to render to
        """
        self.screen = screen
        self.width, self.height = screen.get_size()
        self.layer = pygame.Surface((self.width, self.height), pygame.SRCALPHA)

    def to_screen(self, point):
        """World point -> pixel coordinates"""
        return (round(point[0] + self.width / 2), round(point[1] + self.height / 2))

    def fill(self, color):
        """Clear the screen to a color and reset the drawing layer"""
        self.screen.fill(to_rgba(color)[:3])
        self.layer.fill((0, 0, 0, 0))

    def rect(self, center, size, color):
        """
        Filled rectangle

        Args:
            center: World center point
            size: (width, height); heights beyond the screen are clipped
        """
        w = min(size[0], self.width * 2)
        h = min(size[1], self.height * 2)
        if w <= 0 or h <= 0:
            return
        cx, cy = self.to_screen(center)
        pygame.draw.rect(self.layer, to_rgba(color),
                         (round(cx - w / 2), round(cy - h / 2), round(w), round(h)))

    def line(self, start, end, width, color):
        pygame.draw.line(self.layer, to_rgba(color),
                         self.to_screen(start), self.to_screen(end), max(1, round(width)))

    def ellipse(self, center, size, color):
        cx, cy = self.to_screen(center)
        w, h = size
        pygame.draw.ellipse(self.layer, to_rgba(color),
                            (round(cx - w / 2), round(cy - h / 2), round(w), round(h)))

    def present(self):
        """Blend the drawing layer onto the screen"""
        self.screen.blit(self.layer, (0, 0))
