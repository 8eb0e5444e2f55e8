"""
config.py - Game settings.

Defaults describe the stock 1300x900 board of 40px cells. Any field can be
overridden from the environment as SNAKE_APPLE_<FIELD>, e.g.
SNAKE_APPLE_MUSIC_PATH=assets/study.mp3 or SNAKE_APPLE_TICK_MS=80.
"""

import os
from dataclasses import dataclass, fields
from typing import Optional

from snake_apple.color import Color
from snake_apple.snake import INITIAL_LENGTH

ENV_PREFIX = "SNAKE_APPLE_"

# Wall ring on both sides plus room for the starting snake centred in the playfield
MIN_COLUMNS = INITIAL_LENGTH + 3
MIN_ROWS = 3

# Colors
COLOR_BG = Color(0, 0, 0)
COLOR_SNAKE = Color(44, 86, 176)
COLOR_APPLE = Color(129, 45, 214)  # Grape
COLOR_BORDER = Color(144, 12, 63)
COLOR_CHECKER_A = Color(230, 176, 170)
COLOR_CHECKER_B = Color(215, 189, 226)
COLOR_TEXT = Color(255, 255, 255)


@dataclass(frozen=True)
class GameConfig:
    width: int = 1300
    height: int = 900
    cell_size: int = 40
    tick_ms: int = 100
    window_scale: float = 1.3
    title: str = "Snake - Apple"
    font_path: Optional[str] = None
    font_size: int = 24
    high_score_path: str = "high_score.txt"
    music_path: Optional[str] = None
    music_volume: float = 0.3
    log_level: str = "INFO"

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.columns < MIN_COLUMNS or self.rows < MIN_ROWS:
            raise ValueError(
                f"board must be at least {MIN_COLUMNS}x{MIN_ROWS} cells to fit the wall and the {INITIAL_LENGTH}-cell starting snake, "
                f"got {self.columns}x{self.rows}"
            )
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")

    @property
    def columns(self):
        return self.width // self.cell_size

    @property
    def rows(self):
        return self.height // self.cell_size

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from SNAKE_APPLE_* variables, falling back to the defaults."""
        environ = os.environ if environ is None else environ
        overrides = {}
        for field in fields(cls):
            raw = environ.get(ENV_PREFIX + field.name.upper())
            if raw is None:
                continue
            default = field.default
            if isinstance(default, int):
                overrides[field.name] = int(raw)
            elif isinstance(default, float):
                overrides[field.name] = float(raw)
            else:
                # str and Optional[str] fields; an empty value clears an optional path
                overrides[field.name] = (raw or None) if default is None else raw
        return cls(**overrides)
