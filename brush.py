# brush.py

import logging

import constants
from color import Color

logger = logging.getLogger(constants.LOGGER_NAME)


class Brush:
    """
    The mutable drawing state of the random walk: blob size and running color.
    """
    def __init__(self, width: int, height: int, color: Color):
        self.width = width
        self.height = height
        # The brush owns its color outright; never share a palette entry here.
        self.color = color.clone()

        logger.debug(f"Brush created: size={self.width}x{self.height}, color={self.color}")

    def resize(self, rng, config):
        """Draws a fresh blob size from the configured [min, max) ranges."""
        self.width = rng.uniform_range(config.blob_width_min, config.blob_width_max)
        self.height = rng.uniform_range(config.blob_height_min, config.blob_height_max)

    def drift_color(self, rng):
        """
        Random-walks the color by one of {-1, 0, 1} per channel.
        Channels are clamped to [0, 255] by Color.shift.
        """
        d_red = -1 + rng.uniform_int(constants.COLOR_DRIFT_DRAW) % 3
        d_green = -1 + rng.uniform_int(constants.COLOR_DRIFT_DRAW) % 3
        d_blue = -1 + rng.uniform_int(constants.COLOR_DRIFT_DRAW) % 3
        self.color.shift(d_red, d_green, d_blue)

    def reset_color(self, base: Color):
        self.color = base.clone()

    def stamp(self, surface, x: int, y: int, opacity: float):
        """
        Draws one blob at (x, y) and the identical blob at its horizontal
        mirror (surface.width - x, y).
        """
        surface.fill_rect(x, y, self.width, self.height, self.color, opacity)
        surface.fill_rect(surface.width - x, y, self.width, self.height, self.color, opacity)


class Position:
    """
    The current blob location. Kept inside the left half of the canvas by
    teleporting back to a random coordinate whenever a step leaves it.
    """
    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def jitter(self, rng, radius: int):
        """Moves each axis by an integer step in [-radius, radius]."""
        span = 2 * radius + 1
        self.x += -radius + rng.uniform_int(constants.JITTER_DRAW) % span
        self.y += -radius + rng.uniform_int(constants.JITTER_DRAW) % span

    def constrain(self, rng, width: int, height: int):
        """
        Resamples an axis that left [0, width / 2] x [0, height].
        This is a teleport, not a clip to the boundary.
        """
        if self.x < 0 or self.x > width / 2:
            self.x = rng.uniform_int(width // 2)

        if self.y < 0 or self.y > height:
            self.y = rng.uniform_int(height)

    def __repr__(self):
        return f"Position({self.x}, {self.y})"
