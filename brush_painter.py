# brush_painter.py

import logging

import constants
from brush import Brush, Position
from painter_config import PainterConfig
from random_source import RandomSource

logger = logging.getLogger(constants.LOGGER_NAME)


class RandomWalkBrushPainter:
    """
    Paints a symmetric blot by dropping small rectangles along a random walk.

    Data Contract:
    - Inputs:
        - config (PainterConfig): Palette, ink amount, blob size ranges,
          color range threshold, jitter and opacity.
        - rng (RandomSource): Source of every random draw. A seeded source
          makes paint() fully deterministic.
    - Outputs: paint() returns the number of blobs drawn.
    - Side Effects: Draws onto the surface passed to paint().
    - Invariants: Every blob is drawn twice, at (x, y) and (width - x, y),
      with the same color and size. Palette entries are never mutated.
    """
    def __init__(self, config: PainterConfig = None, rng: RandomSource = None):
        self.config = config if config is not None else PainterConfig()
        self.rng = rng if rng is not None else RandomSource()

    def paint(self, surface) -> int:
        """
        Runs the whole walk synchronously. Each step stamps the brush, drifts
        its color, jitters the position, redraws the blob size, re-seeds the
        color from the palette once it strays past the threshold, and finally
        teleports the position back into the left half if it left it.
        """
        config = self.config
        rng = self.rng
        width, height = surface.width, surface.height

        base_color = config.palette.pick(rng)
        brush = Brush(
            rng.uniform_range(config.blob_width_min, config.blob_width_max),
            rng.uniform_range(config.blob_height_min, config.blob_height_max),
            base_color,
        )
        position = Position(rng.uniform_int(width // 2), rng.uniform_int(height))
        ink_amount = rng.uniform_range(config.ink_amount_min, config.ink_amount_max)

        logger.info(f"Brush painter starting: {ink_amount} blobs on {width}x{height}, base color {base_color}.")

        reseeds = 0
        for step in range(ink_amount):
            brush.stamp(surface, position.x, position.y, config.opacity)

            brush.drift_color(rng)
            position.jitter(rng, config.jitter)
            brush.resize(rng, config)

            if brush.color.distance_squared(base_color) > config.color_range_threshold:
                base_color = config.palette.pick(rng)
                brush.reset_color(base_color)
                reseeds += 1

            position.constrain(rng, width, height)

            if step % constants.LOG_EVERY_BLOBS == 0:
                logger.debug(f"Blob={step}, Position={position}, Color={brush.color}, Reseeds={reseeds}")

        logger.info(f"Brush painter finished: {ink_amount} blobs, {reseeds} palette reseeds.")
        return ink_amount
