import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from snake_apple.config import GameConfig
from snake_apple.glyphs import Glyph


class BlockFont:
    """Every character is the same solid block."""

    def __init__(self, coverage=255, width=3, height=4, advance=5, left=0, top=0):
        self.glyph = Glyph(
            coverage=np.full((height, width), coverage, dtype=np.uint8),
            left=left,
            top=top,
            advance=advance,
        )

    def rasterize(self, text):
        return [self.glyph for _ in text]


class FirstChoice:
    """Stands in for random.Random: always picks the first candidate."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def block_font():
    return BlockFont()


@pytest.fixture
def small_config():
    # 10x10 cells of 20px; the playfield is cells 1..8
    return GameConfig(width=200, height=200, cell_size=20)


@pytest.fixture
def first_choice():
    return FirstChoice()
