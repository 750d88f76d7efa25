# constants.py

"""
Application Constants

This module defines static default values for the blot painters and the
display window. Every painter default can be overridden from the 'painter'
section of config.json; these are the values used when a key is absent.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Window defaults (overridden by the 'canvas' section of config.json)
WIDTH = 800  # Pixels
HEIGHT = 600  # Pixels
FPS = 30  # Frames per second while idling on a finished blot
TITLE = "Rorschach"

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# Logger name shared by every module
LOGGER_NAME = "rorschach"

# --- Engine selection ---
ENGINE_BRUSH = "brush"
ENGINE_DIFFUSION = "diffusion"
ENGINES = (ENGINE_BRUSH, ENGINE_DIFFUSION)

# --- Random walk brush ---
DEFAULT_PALETTE = [BLACK]
INK_AMOUNT_MIN = 1000  # Blobs
INK_AMOUNT_MAX = 5000  # Blobs (exclusive)
BLOB_WIDTH_MIN = 1  # Pixels
BLOB_WIDTH_MAX = 10  # Pixels (exclusive)
BLOB_HEIGHT_MIN = 1  # Pixels
BLOB_HEIGHT_MAX = 10  # Pixels (exclusive)
COLOR_RANGE_THRESHOLD = 64  # Squared RGB distance (8^2)
JITTER = 5  # Max per-axis position step in pixels
BLOB_OPACITY = 0.6666  # 0 = invisible, 1 = opaque

# Channel drift: each step adds -1 + (draw % 3), i.e. one of {-1, 0, 1}
COLOR_DRIFT_DRAW = 100
JITTER_DRAW = 100

# --- Diffusion field ---
BLOTS_MIN = 10  # Used when 'blots' is not configured
BLOTS_MAX = 100  # Exclusive
ITERATIONS = 50  # Blur passes
WIDTH_MULTIPLIER = 0.525  # Grid covers slightly over half the canvas
SEED_SPREAD = 25  # Max per-axis step of the seed walk in cells
SEED_MOVE_PROBABILITY = 0.9  # Otherwise the seed walk jumps anywhere
THRESHOLD_FACTOR = 0.25  # Cells below iterations * factor are cleared

BLUR_IN_PLACE = "in_place"
BLUR_BUFFERED = "buffered"
BLUR_MODES = (BLUR_IN_PLACE, BLUR_BUFFERED)

# Progress logging cadence
LOG_EVERY_BLOBS = 1000
LOG_EVERY_PASSES = 10
