"""
Unit tests for the random walk brush painter, Brush and Position.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

import pygame

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from brush import Brush, Position
from brush_painter import RandomWalkBrushPainter
from color import Color, Palette
from fakes import RecordingSurface, ScriptedRandom
from painter_config import PainterConfig
from random_source import RandomSource
from surface import PygameSurface


def _paint(config, seed, width=100, height=50):
    surface = RecordingSurface(width, height)
    RandomWalkBrushPainter(config, RandomSource.from_seed(seed)).paint(surface)
    return surface


class TestRandomWalkBrushPainter(unittest.TestCase):

    def test_single_blob_draws_original_and_mirror(self):
        config = PainterConfig(palette=Palette([Color(0, 0, 0)]), ink_amount_min=1, ink_amount_max=1)
        for seed in range(20):
            with self.subTest(seed=seed):
                surface = _paint(config, seed)
                self.assertEqual(len(surface.fills), 2)
                (x, y, w, h, rgb, opacity), (mx, my, mw, mh, mrgb, mopacity) = surface.fills
                self.assertEqual((mx, my), (100 - x, y))
                self.assertEqual((w, h, rgb, opacity), (mw, mh, mrgb, mopacity))
                self.assertEqual(rgb, (0, 0, 0))
                self.assertTrue(0 <= x <= 50)
                self.assertTrue(0 <= y <= 50)

    def test_every_blob_is_mirrored(self):
        config = PainterConfig(ink_amount_min=200, ink_amount_max=400)
        surface = _paint(config, seed=4, width=120, height=80)
        self.assertEqual(len(surface.fills) % 2, 0)
        for original, mirror in zip(surface.fills[0::2], surface.fills[1::2]):
            x, y, w, h, rgb, opacity = original
            self.assertEqual(mirror, (120 - x, y, w, h, rgb, opacity))

    def test_positions_stay_in_left_half_and_blob_sizes_in_range(self):
        config = PainterConfig(ink_amount_min=500, ink_amount_max=501, blob_width_max=6, blob_height_max=3)
        surface = _paint(config, seed=11, width=80, height=60)
        for x, y, w, h, _, _ in surface.fills[0::2]:
            self.assertTrue(0 <= x <= 40)
            self.assertTrue(0 <= y <= 60)
            self.assertTrue(1 <= w < 6)
            self.assertTrue(1 <= h < 3)

    def test_channels_stay_clamped(self):
        palette = Palette([Color(255, 255, 255), Color(0, 0, 0), Color(0, 255, 0)])
        config = PainterConfig(palette=palette, ink_amount_min=2000, ink_amount_max=2001,
                               color_range_threshold=10 ** 6)
        surface = _paint(config, seed=8)
        for fill in surface.fills:
            self.assertTrue(all(0 <= channel <= 255 for channel in fill[4]))

    def test_colors_stay_near_base_under_threshold(self):
        palette = Palette([Color(128, 128, 128)])
        config = PainterConfig(palette=palette, ink_amount_min=1000, ink_amount_max=1001, color_range_threshold=64)
        surface = _paint(config, seed=21)
        base = Color(128, 128, 128)
        for fill in surface.fills:
            self.assertLessEqual(Color(*fill[4]).distance_squared(base), 64)

    def test_same_seed_same_draws(self):
        config = PainterConfig(palette=Palette([Color(10, 0, 0), Color(0, 90, 0)]),
                               ink_amount_min=300, ink_amount_max=600)
        self.assertEqual(_paint(config, seed=5).fills, _paint(config, seed=5).fills)
        self.assertNotEqual(_paint(config, seed=5).fills, _paint(config, seed=6).fills)

    def test_same_seed_same_raster(self):
        config = PainterConfig(palette=Palette([Color(200, 30, 30), Color(20, 20, 90)]),
                               ink_amount_min=400, ink_amount_max=800)

        def render(seed):
            canvas = pygame.Surface((64, 48), pygame.SRCALPHA)
            RandomWalkBrushPainter(config, RandomSource.from_seed(seed)).paint(PygameSurface(canvas))
            return pygame.image.tobytes(canvas, "RGBA")

        self.assertEqual(render(13), render(13))

    def test_reseed_resets_to_palette_clone_without_mutating_palette(self):
        palette = Palette([Color(10, 10, 10), Color(200, 200, 200)])
        config = PainterConfig(palette=palette, color_range_threshold=2, jitter=5)
        rng = ScriptedRandom([
            # base index, brush width, brush height, x, y, ink amount
            0, 3, 4, 10, 10, 2,
            # step 1: drift +1 per channel, no jitter, resize, reseed to entry 1
            2, 2, 2, 5, 5, 3, 4, 1,
            # step 2: drift +1 per channel, no jitter, resize, reseed to entry 0
            2, 2, 2, 5, 5, 3, 4, 0,
        ])
        surface = RecordingSurface(100, 50)

        drawn = RandomWalkBrushPainter(config, rng).paint(surface)

        self.assertEqual(drawn, 2)
        self.assertEqual(rng.values, [])
        self.assertEqual([fill[4] for fill in surface.fills],
                         [(10, 10, 10), (10, 10, 10), (200, 200, 200), (200, 200, 200)])
        self.assertEqual([fill[:4] for fill in surface.fills],
                         [(10, 10, 3, 4), (90, 10, 3, 4), (10, 10, 3, 4), (90, 10, 3, 4)])
        self.assertEqual(palette[0], Color(10, 10, 10))
        self.assertEqual(palette[1], Color(200, 200, 200))


class TestBrushAndPosition(unittest.TestCase):

    def test_brush_owns_a_clone(self):
        base = Color(50, 50, 50)
        brush = Brush(2, 2, base)
        brush.drift_color(ScriptedRandom([2, 0, 1]))
        self.assertEqual(brush.color.rgb(), (51, 49, 50))
        self.assertEqual(base.rgb(), (50, 50, 50))

    def test_jitter_steps_within_radius(self):
        position = Position(20, 20)
        position.jitter(ScriptedRandom([0, 10]), 5)
        self.assertEqual((position.x, position.y), (15, 25))
        position.jitter(ScriptedRandom([99, 11]), 5)
        # 99 % 11 == 0 and 11 % 11 == 0
        self.assertEqual((position.x, position.y), (10, 20))

    def test_constrain_teleports_out_of_range_axes(self):
        position = Position(-1, 51)
        position.constrain(ScriptedRandom([7, 8]), 100, 50)
        self.assertEqual((position.x, position.y), (7, 8))

        position = Position(51, 3)
        position.constrain(ScriptedRandom([30]), 100, 50)
        self.assertEqual((position.x, position.y), (30, 3))

    def test_constrain_keeps_inclusive_bounds(self):
        rng = ScriptedRandom([])
        position = Position(50, 50)
        position.constrain(rng, 100, 50)
        self.assertEqual((position.x, position.y), (50, 50))
        position = Position(0, 0)
        position.constrain(rng, 100, 50)
        self.assertEqual((position.x, position.y), (0, 0))


if __name__ == "__main__":
    unittest.main()
