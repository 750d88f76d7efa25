# surface.py

import pygame

from color import Color


class PygameSurface:
    """
    Drawing adapter over a pygame.Surface.

    Data Contract:
    - Inputs: surface (pygame.Surface). Use an SRCALPHA surface when pixels
      written by set_pixel should keep their alpha.
    - Outputs: None.
    - Side Effects: Draws onto the wrapped surface.
    - Invariants: Coordinates outside the surface are clipped or ignored here,
      never by the painters. pygame errors propagate to the caller.
    """
    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color, opacity: float = 1.0):
        """
        Fills a rectangle. Opaque fills replace the pixels; translucent ones
        are blended over what is already there.
        """
        if w <= 0 or h <= 0:
            return

        rgba = color.rgba(opacity)
        if rgba[3] >= 255:
            self.surface.fill(color.rgb(), pygame.Rect(x, y, w, h))
            return

        patch = pygame.Surface((w, h), pygame.SRCALPHA)
        patch.fill(rgba)
        self.surface.blit(patch, (x, y))

    def set_pixel(self, x: int, y: int, color: Color, alpha: float = 1.0):
        """Writes one RGBA pixel as-is, without blending."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.surface.set_at((x, y), color.rgba(alpha))

    def clear(self, color: Color):
        self.surface.fill(color.rgba(1.0))
