"""
display.py - pygame window and keyboard.

The game hands over a flat buffer of 0xRRGGBB values; the window unpacks it,
scales it down to the window size and flips.
"""

import enum
import logging

import numpy as np
import pygame

from snake_apple.errors import DisplayError
from snake_apple.snake import Direction

logger = logging.getLogger(__name__)


class Key(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"
    ENTER = "enter"
    SPACE = "space"


KEY_MAP = {
    Key.UP: (pygame.K_UP,),
    Key.DOWN: (pygame.K_DOWN,),
    Key.LEFT: (pygame.K_LEFT,),
    Key.RIGHT: (pygame.K_RIGHT,),
    Key.ESCAPE: (pygame.K_ESCAPE,),
    Key.ENTER: (pygame.K_RETURN, pygame.K_KP_ENTER),
    Key.SPACE: (pygame.K_SPACE,),
}

DIRECTION_KEYS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


def unpack_buffer(packed, width, height):
    """Turn a flat 0xRRGGBB buffer into a (height, width, 3) uint8 array."""
    packed = np.asarray(packed, dtype=np.uint32)
    if packed.size != width * height:
        raise ValueError(f"Buffer has {packed.size} pixels, expected {width}x{height}")
    rgb = np.stack(((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF), axis=-1)
    return rgb.astype(np.uint8).reshape(height, width, 3)


class Display:
    def __init__(self, width, height, title="Snake - Apple", scale=1.0):
        self.window_size = (int(width / scale), int(height / scale))
        try:
            pygame.display.init()
            self.screen = pygame.display.set_mode(self.window_size)
        except pygame.error as exc:
            raise DisplayError(f"Could not open a {self.window_size[0]}x{self.window_size[1]} window: {exc}") from exc
        pygame.display.set_caption(title)
        self._open = True
        logger.debug("Opened %dx%d window", *self.window_size)

    def update(self):
        """Pump window events; a close request marks the display closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._open = False

    def is_open(self):
        return self._open

    def is_key_down(self, key):
        pressed = pygame.key.get_pressed()
        return any(pressed[code] for code in KEY_MAP[key])

    def held_directions(self):
        return {direction for key, direction in DIRECTION_KEYS.items() if self.is_key_down(key)}

    def present(self, packed, width, height):
        rgb = unpack_buffer(packed, width, height)
        surf = pygame.surfarray.make_surface(np.transpose(rgb, (1, 0, 2)))
        if surf.get_size() != self.window_size:
            surf = pygame.transform.smoothscale(surf, self.window_size)
        self.screen.blit(surf, (0, 0))
        pygame.display.flip()

    def close(self):
        self._open = False
        pygame.display.quit()
