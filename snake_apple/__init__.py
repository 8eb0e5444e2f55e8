"""
snake_apple - a grid snake game drawn into a software framebuffer.

  color        - Color value with 24-bit pack/unpack.
  framebuffer  - numpy pixel grid: rectangles, clearing, blended glyph text.
  glyphs       - pygame font rasterizer producing per-character coverage.
  snake        - Snake state machine and Direction.
  game         - SnakeGame rules: ticking, apples, score, drawing.
  env          - gymnasium wrapper around SnakeGame.
  app          - windowed real-time loop.
"""

from snake_apple.color import Color
from snake_apple.config import GameConfig
from snake_apple.framebuffer import Framebuffer
from snake_apple.game import SnakeGame, TickResult
from snake_apple.snake import Direction, Snake

__all__ = [
    "Color",
    "Direction",
    "Framebuffer",
    "GameConfig",
    "Snake",
    "SnakeGame",
    "TickResult",
]

__version__ = "0.1.0"
