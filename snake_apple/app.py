"""
app.py - Windowed, real-time game loop.

The loop polls the window every iteration and only ticks the game once
`tick_ms` has elapsed since the previous tick.
"""

import logging
import sys

import pygame

from snake_apple.audio import BackgroundMusic
from snake_apple.config import GameConfig
from snake_apple.display import Display, Key
from snake_apple.errors import SnakeAppleError
from snake_apple.game import SnakeGame
from snake_apple.glyphs import PygameGlyphRasterizer
from snake_apple.highscore import HighScoreStore
from snake_apple.snake import choose_direction

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _present(display, framebuffer):
    display.present(framebuffer.to_packed_buffer(), framebuffer.width, framebuffer.height)


def play(game, display, store, tick_ms, clock=pygame.time.get_ticks):
    """
    Run rounds until the player quits. Returns the final high score.

    `clock` returns milliseconds; it is a parameter so the loop can be
    driven without a real timer.
    """
    last_tick = clock()
    _present(display, game.framebuffer)

    while display.is_open():
        display.update()
        if display.is_key_down(Key.ESCAPE):
            break

        if game.game_over:
            # Wait for a restart request
            if display.is_key_down(Key.ENTER) or display.is_key_down(Key.SPACE):
                game.reset()
                _present(display, game.framebuffer)
                last_tick = clock()
            continue

        now = clock()
        if now - last_tick < tick_ms:
            continue
        last_tick = now

        direction = choose_direction(display.held_directions(), game.snake.direction)
        result = game.tick(direction)
        if result.new_high_score:
            logger.info("New high score: %d", game.high_score)
            store.save(game.high_score)
        if not result.game_over:
            _present(display, game.framebuffer)

    return game.high_score


def run(config):
    display = None
    music = None
    try:
        pygame.init()
        display = Display(config.width, config.height, config.title, config.window_scale)
        if config.music_path:
            music = BackgroundMusic(config.music_path, config.music_volume)
            music.start()

        store = HighScoreStore(config.high_score_path)
        font = PygameGlyphRasterizer(config.font_path, config.font_size)
        game = SnakeGame(config, high_score=store.load(), font=font)
        return play(game, display, store, config.tick_ms)
    finally:
        if music is not None:
            music.stop()
        if display is not None:
            display.close()
        pygame.quit()


def main():
    try:
        config = GameConfig.from_env()
    except ValueError:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.exception("Invalid configuration")
        return 1
    logging.basicConfig(level=getattr(logging, config.log_level.upper(), logging.INFO), format=LOG_FORMAT)
    try:
        high_score = run(config)
    except SnakeAppleError:
        logger.exception("Startup failed")
        return 1
    logger.info("Bye. High score: %d", high_score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
