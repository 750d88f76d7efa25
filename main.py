# main.py

import pygame
import constants
import json
import logging
import logger_setup
import numpy as np
from brush_painter import RandomWalkBrushPainter
from diffusion_painter import DiffusionFieldPainter
from painter_config import PainterConfig
from random_source import RandomSource
from surface import PygameSurface

# Get the application's dedicated logger
logger = logging.getLogger(constants.LOGGER_NAME)


def build_painter(painter_config: PainterConfig, rng: RandomSource):
    """Returns the painter selected by the 'engine' option."""
    if painter_config.engine == constants.ENGINE_DIFFUSION:
        return DiffusionFieldPainter(painter_config, rng)
    return RandomWalkBrushPainter(painter_config, rng)


def paint_blot(painter, canvas: pygame.Surface):
    """
    Clears the transparent canvas and paints one blot onto it.
    Diffusion passes pump the event queue so the window stays responsive.
    """
    canvas.fill((0, 0, 0, 0))
    surface = PygameSurface(canvas)
    if isinstance(painter, DiffusionFieldPainter):
        painter.paint(surface, on_pass=lambda _: pygame.event.pump())
    else:
        painter.paint(surface)


def present(screen, canvas, background):
    screen.fill(background)
    screen.blit(canvas, (0, 0))
    pygame.display.flip()


def main():
    """
    Main function to open the window and paint blots.
    SPACE paints a new blot, ESC or closing the window quits.
    """
    # --- Setup ---
    logger_setup.setup_logging()

    with open('config.json', 'r') as f:
        config = json.load(f)
    canvas_config = config.get('canvas', {})
    painter_config = PainterConfig.from_dict(config.get('painter', {}))

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {painter_config}")

    # Initialize the master random number generator (RNG)
    seed = config.get('master_seed')
    rng = RandomSource(np.random.default_rng(seed))
    logger.info(f"Master RNG initialized with seed: {seed}")

    # --- Initialization ---
    width = canvas_config.get('width', constants.WIDTH)
    height = canvas_config.get('height', constants.HEIGHT)
    background = tuple(canvas_config.get('background', constants.WHITE))

    pygame.init()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    # Painters draw onto a transparent layer that is composited over the background.
    canvas = pygame.Surface((width, height), pygame.SRCALPHA)
    painter = build_painter(painter_config, rng)

    paint_blot(painter, canvas)
    present(screen, canvas, background)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    logger.info("Repainting.")
                    paint_blot(painter, canvas)
                    present(screen, canvas, background)
        clock.tick(constants.FPS)

    logger.info("Application shutting down.")
    pygame.quit()

if __name__ == "__main__":
    main()
