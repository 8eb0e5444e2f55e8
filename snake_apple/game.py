"""
game.py - Rules of a round and drawing of a frame.

SnakeGame knows nothing about windows, keys or files. It is driven one tick
at a time with an optional direction request and reports what happened in a
TickResult; the caller decides what to persist and what to show.
"""

import logging
import random
from dataclasses import dataclass

from snake_apple.config import (
    COLOR_APPLE,
    COLOR_BG,
    COLOR_BORDER,
    COLOR_CHECKER_A,
    COLOR_CHECKER_B,
    COLOR_SNAKE,
    COLOR_TEXT,
    GameConfig,
)
from snake_apple.framebuffer import Framebuffer
from snake_apple.snake import Snake

logger = logging.getLogger(__name__)

SCORE_PER_APPLE = 1
TEXT_MARGIN = 10


@dataclass(frozen=True)
class TickResult:
    ate_apple: bool = False
    game_over: bool = False
    new_high_score: bool = False


class SnakeGame:
    def __init__(self, config=None, high_score=0, font=None, rng=None):
        self.config = config or GameConfig()
        self.cell_size = self.config.cell_size
        self.columns = self.config.columns
        self.rows = self.config.rows
        self.rng = rng or random.Random()

        self.framebuffer = Framebuffer(self.config.width, self.config.height, font=font)
        self.framebuffer.set_background_color(COLOR_BG)

        self.high_score = high_score
        self.score = 0
        self.ticks = 0
        self.game_over = False
        self.snake = None
        self.apple = None

        self.reset()

    def reset(self):
        """Start a new round. The high score carries over."""
        self.snake = Snake(self.columns // 2, self.rows // 2, COLOR_SNAKE)
        self.score = 0
        self.ticks = 0
        self.game_over = False
        self.apple = self.spawn_apple()
        logger.debug("New round, snake at %s, apple at %s", self.snake.head_position(), self.apple)
        self.render()

    def interior_cells(self):
        return {(x, y) for x in range(1, self.columns - 1) for y in range(1, self.rows - 1)}

    def spawn_apple(self):
        """Pick an interior cell the snake does not cover, or None if there is none."""
        free = sorted(self.interior_cells() - set(self.snake.body))
        if not free:
            logger.info("No free cell left for an apple")
            return None
        return self.rng.choice(free)

    def hits_wall(self, cell):
        x, y = cell
        return not (1 <= x < self.columns - 1 and 1 <= y < self.rows - 1)

    def tick(self, direction=None):
        """Advance the round by one step. Does nothing once the round is over."""
        if self.game_over:
            return TickResult(game_over=True)

        self.ticks += 1
        if direction is not None:
            self.snake.set_direction(direction)

        self.snake.advance()

        head = self.snake.head_position()
        if self.hits_wall(head) or self.snake.check_collision():
            # The last drawn frame stays on screen
            self.game_over = True
            logger.info("Round over after %d ticks with score %d", self.ticks, self.score)
            return TickResult(game_over=True)

        ate_apple = False
        new_high_score = False
        if head == self.apple:
            ate_apple = True
            self.snake.grow()
            self.score += SCORE_PER_APPLE
            if self.score > self.high_score:
                self.high_score = self.score
                new_high_score = True
            self.apple = self.spawn_apple()
            logger.debug("Apple eaten, score %d, next apple at %s", self.score, self.apple)

        self.render()
        return TickResult(ate_apple=ate_apple, new_high_score=new_high_score)

    def render(self):
        fb = self.framebuffer
        fb.clear()
        self._render_arena()

        # Draw apple
        if self.apple is not None:
            ax, ay = self.apple
            fb.fill_rect(ax * self.cell_size, ay * self.cell_size, self.cell_size, self.cell_size, COLOR_APPLE)

        # Draw snake
        self.snake.draw(fb, self.cell_size)

        if fb.font is not None:
            self._render_scores()

    def _render_arena(self):
        fb = self.framebuffer
        size = self.cell_size

        # Border ring
        for x in range(self.columns):
            fb.fill_rect(x * size, 0, size, size, COLOR_BORDER)
            fb.fill_rect(x * size, (self.rows - 1) * size, size, size, COLOR_BORDER)
        for y in range(self.rows):
            fb.fill_rect(0, y * size, size, size, COLOR_BORDER)
            fb.fill_rect((self.columns - 1) * size, y * size, size, size, COLOR_BORDER)

        # Checkerboard inside the border
        for y in range(1, self.rows - 1):
            for x in range(1, self.columns - 1):
                color = COLOR_CHECKER_A if (x + y) % 2 == 0 else COLOR_CHECKER_B
                fb.fill_rect(x * size, y * size, size, size, color)

    def _render_scores(self):
        fb = self.framebuffer
        fb.draw_text(f"Score: {self.score}", TEXT_MARGIN, TEXT_MARGIN, COLOR_TEXT)

        high_score_text = f"High Score: {self.high_score}"
        x = fb.width - fb.text_width(high_score_text) - TEXT_MARGIN
        fb.draw_text(high_score_text, x, TEXT_MARGIN, COLOR_TEXT)
