# painter_config.py

import logging

import constants
from color import InvalidConfiguration, Palette

logger = logging.getLogger(constants.LOGGER_NAME)


class PainterConfig:
    """
    Validated settings shared by both painters.

    Data Contract:
    - Inputs: keyword options matching the keys of the 'painter' section of
      config.json. Every option is optional; missing ones take the defaults
      in constants.py.
    - Outputs: None. Attributes are read by the painters.
    - Side Effects: None.
    - Invariants: The palette is non-empty, iterations >= 1, blots (when set)
      >= 0, opacity is within [0, 1]. Violations raise InvalidConfiguration
      before anything is drawn.
    """
    KEYS = (
        'engine', 'palette',
        'ink_amount_min', 'ink_amount_max',
        'blob_width_min', 'blob_width_max',
        'blob_height_min', 'blob_height_max',
        'color_range_threshold', 'jitter', 'opacity',
        'blots', 'iterations', 'width_multiplier',
        'seed_spread', 'seed_move_probability', 'threshold_factor', 'blur_mode',
    )

    def __init__(self, engine: str = constants.ENGINE_BRUSH, palette: Palette = None,
                 ink_amount_min: int = constants.INK_AMOUNT_MIN, ink_amount_max: int = constants.INK_AMOUNT_MAX,
                 blob_width_min: int = constants.BLOB_WIDTH_MIN, blob_width_max: int = constants.BLOB_WIDTH_MAX,
                 blob_height_min: int = constants.BLOB_HEIGHT_MIN, blob_height_max: int = constants.BLOB_HEIGHT_MAX,
                 color_range_threshold: int = constants.COLOR_RANGE_THRESHOLD,
                 jitter: int = constants.JITTER, opacity: float = constants.BLOB_OPACITY,
                 blots: int = None, iterations: int = constants.ITERATIONS,
                 width_multiplier: float = constants.WIDTH_MULTIPLIER,
                 seed_spread: int = constants.SEED_SPREAD,
                 seed_move_probability: float = constants.SEED_MOVE_PROBABILITY,
                 threshold_factor: float = constants.THRESHOLD_FACTOR,
                 blur_mode: str = constants.BLUR_IN_PLACE):
        self.engine = engine
        self.palette = palette if isinstance(palette, Palette) else Palette.from_config(palette)
        self.ink_amount_min = int(ink_amount_min)
        self.ink_amount_max = int(ink_amount_max)
        self.blob_width_min = int(blob_width_min)
        self.blob_width_max = int(blob_width_max)
        self.blob_height_min = int(blob_height_min)
        self.blob_height_max = int(blob_height_max)
        self.color_range_threshold = color_range_threshold
        self.jitter = int(jitter)
        self.opacity = float(opacity)
        self.blots = None if blots is None else int(blots)
        self.iterations = int(iterations)
        self.width_multiplier = float(width_multiplier)
        self.seed_spread = int(seed_spread)
        self.seed_move_probability = float(seed_move_probability)
        self.threshold_factor = float(threshold_factor)
        self.blur_mode = blur_mode
        self._validate()

    @classmethod
    def from_dict(cls, config: dict):
        """
        Builds a config from the 'painter' section of config.json.
        Unrecognized keys are ignored.
        """
        config = dict(config or {})
        unknown = sorted(set(config) - set(cls.KEYS))
        if unknown:
            logger.debug(f"Ignoring unrecognized painter options: {unknown}")
        options = {key: config[key] for key in cls.KEYS if key in config}
        return cls(**options)

    def _validate(self):
        if self.engine not in constants.ENGINES:
            raise InvalidConfiguration(f"Unknown engine {self.engine!r}; expected one of {constants.ENGINES}.")
        if self.blur_mode not in constants.BLUR_MODES:
            raise InvalidConfiguration(f"Unknown blur_mode {self.blur_mode!r}; expected one of {constants.BLUR_MODES}.")
        if self.iterations < 1:
            raise InvalidConfiguration(f"iterations must be at least 1, got {self.iterations}.")
        if self.blots is not None and self.blots < 0:
            raise InvalidConfiguration(f"blots must not be negative, got {self.blots}.")
        if self.jitter < 0:
            raise InvalidConfiguration(f"jitter must not be negative, got {self.jitter}.")
        if not 0.0 <= self.opacity <= 1.0:
            raise InvalidConfiguration(f"opacity must be within [0, 1], got {self.opacity}.")
        if self.blob_width_max < 1 or self.blob_height_max < 1:
            raise InvalidConfiguration("blob_width_max and blob_height_max must be positive.")
        if self.width_multiplier <= 0:
            raise InvalidConfiguration(f"width_multiplier must be positive, got {self.width_multiplier}.")

    def __repr__(self):
        fields = ", ".join(f"{key}={getattr(self, key)!r}" for key in self.KEYS)
        return f"PainterConfig({fields})"
