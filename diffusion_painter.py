# diffusion_painter.py

import logging

import numba
import numpy as np

import constants
from color import BLACK_COLOR
from painter_config import PainterConfig
from random_source import RandomSource

logger = logging.getLogger(constants.LOGGER_NAME)

# --- JIT-Compiled Grid Kernels ---
# Kept outside the painter class so Numba's nopython mode only sees NumPy
# arrays and scalars.

@numba.jit(nopython=True)
def _blur_in_place_jit(grid):
    """
    One 9-cell box-average pass over a single buffer, row-major.
    Cells later in the pass read neighbours already updated earlier in the
    same pass, so the blur leans towards the bottom-right. Missing neighbours
    count as 0, which fades the field towards the edges.
    """
    height, width = grid.shape
    for y in range(height):
        for x in range(width):
            total = 0.0
            for dy in range(-1, 2):
                ny = y + dy
                if ny < 0 or ny >= height:
                    continue
                for dx in range(-1, 2):
                    nx = x + dx
                    if 0 <= nx < width:
                        total += grid[ny, nx]
            grid[y, x] = total / 9.0


def _blur_buffered(grid: np.ndarray):
    """
    One symmetric 9-cell box-average pass: every cell reads the previous
    generation. Written back into grid so both modes share one buffer.
    """
    height, width = grid.shape
    padded = np.pad(grid, 1)
    total = np.zeros_like(grid)
    for dy in range(3):
        for dx in range(3):
            total += padded[dy:dy + height, dx:dx + width]
    grid[:, :] = total / 9.0


class DiffusionFieldPainter:
    """
    Paints a symmetric blot by diffusing a seeded intensity field.

    Data Contract:
    - Inputs:
        - config (PainterConfig): blots, iterations, width multiplier, seed walk
          spread and probability, threshold factor and blur mode.
        - rng (RandomSource): Source of every random draw.
    - Outputs: paint() returns the final intensity grid, shape (H, W).
    - Side Effects: Sets every pixel of the left grid columns, and their
      mirrors, on the surface passed to paint().
    - Invariants: The grid holds non-negative floats. Reads and writes outside
      the grid are no-ops returning 0.
    """
    def __init__(self, config: PainterConfig = None, rng: RandomSource = None):
        self.config = config if config is not None else PainterConfig(engine=constants.ENGINE_DIFFUSION)
        self.rng = rng if rng is not None else RandomSource()

    def paint(self, surface, on_pass=None) -> np.ndarray:
        """
        Seeds, diffuses, thresholds and rasterizes the field.
        on_pass(pass_index), if given, is called after each blur pass.
        """
        grid_width = int(np.floor(surface.width * self.config.width_multiplier))
        grid = np.zeros((surface.height, grid_width), dtype=np.float64)

        blots = self.config.blots
        if blots is None:
            blots = self.rng.uniform_range(constants.BLOTS_MIN, constants.BLOTS_MAX)

        logger.info(
            f"Diffusion painter starting: grid {grid_width}x{surface.height}, "
            f"{blots} blots, {self.config.iterations} passes ({self.config.blur_mode})."
        )

        self.seed(grid, blots)
        self.diffuse(grid, on_pass)
        self.threshold(grid)
        self.rasterize(grid, surface)

        logger.info(f"Diffusion painter finished: {int(np.count_nonzero(grid))} inked cells.")
        return grid

    def seed(self, grid: np.ndarray, blots: int):
        """
        Walks a seed point across the grid, writing a large random value at
        each stop. Mostly small steps, with the occasional jump anywhere.
        """
        height, width = grid.shape
        rng = self.rng
        spread = self.config.seed_spread
        peak = self.config.iterations ** 4

        x = rng.uniform_int(width)
        y = rng.uniform_int(height)
        for _ in range(blots):
            if rng.uniform() < self.config.seed_move_probability:
                x += rng.uniform_range(-spread, spread + 1)
                y += rng.uniform_range(-spread, spread + 1)
            else:
                x = rng.uniform_int(width)
                y = rng.uniform_int(height)

            value = rng.uniform_range(1, peak)
            if 0 <= x < width and 0 <= y < height:
                grid[y, x] = value

    def diffuse(self, grid: np.ndarray, on_pass=None):
        in_place = self.config.blur_mode == constants.BLUR_IN_PLACE
        for pass_index in range(self.config.iterations):
            if in_place:
                _blur_in_place_jit(grid)
            else:
                _blur_buffered(grid)

            if pass_index % constants.LOG_EVERY_PASSES == 0:
                logger.debug(f"Pass={pass_index}, MaxIntensity={grid.max():.3f}, Total={grid.sum():.1f}")
            if on_pass is not None:
                on_pass(pass_index)

    def threshold(self, grid: np.ndarray):
        """Clears faint cells so the blot gets a defined edge."""
        grid[grid < self.config.iterations * self.config.threshold_factor] = 0.0

    def rasterize(self, grid: np.ndarray, surface):
        """
        Maps intensity to black with alpha = value / iterations, clipped to
        [0, 1], and writes each pixel together with its mirror column.
        """
        alpha = np.clip(grid / self.config.iterations, 0.0, 1.0)
        height, grid_width = alpha.shape
        columns = min(grid_width, surface.width)
        last_column = surface.width - 1

        for y in range(height):
            row = alpha[y]
            for x in range(columns):
                value = float(row[x])
                surface.set_pixel(x, y, BLACK_COLOR, value)
                surface.set_pixel(last_column - x, y, BLACK_COLOR, value)
