"""
env.py - gymnasium interface to SnakeGame.

Runs headless: every step advances the round by one tick and the
observation is the framebuffer itself.
"""

import os
import random

import gymnasium as gym
import numpy as np
import pygame

from snake_apple.config import GameConfig
from snake_apple.game import SnakeGame
from snake_apple.glyphs import PygameGlyphRasterizer
from snake_apple.snake import Direction

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# Action index -> requested direction; 0 keeps the current heading
ACTION_DIRECTIONS = {
    0: None,
    1: Direction.UP,
    2: Direction.DOWN,
    3: Direction.LEFT,
    4: Direction.RIGHT,
}


class SnakeAppleEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    user_guide = "Controls: Arrow keys steer the snake. Enter or Space restarts after a crash, Escape quits."
    game_description = "Classic snake on a checkered board. Eat apples to grow; the border and your own body are fatal."

    REWARD_APPLE = 1.0
    REWARD_CRASH = -1.0

    def __init__(self, render_mode="rgb_array", config=None, max_steps=1000, draw_text=True):
        super().__init__()
        self.render_mode = render_mode
        self.config = config or GameConfig()
        self.max_steps = max_steps

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.config.height, self.config.width, 3), dtype=np.uint8
        )
        self.action_space = gym.spaces.Discrete(len(ACTION_DIRECTIONS))

        font = None
        if draw_text:
            pygame.init()
            font = PygameGlyphRasterizer(self.config.font_path, self.config.font_size)

        self.game = SnakeGame(self.config, font=font)
        self.steps = 0

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        # Derive the apple RNG from gymnasium's seeded generator
        self.game.rng = random.Random(int(self.np_random.integers(2**32)))
        self.game.reset()
        self.steps = 0
        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.game.game_over:
            return self._get_observation(), 0.0, True, False, self._get_info()

        self.steps += 1
        result = self.game.tick(ACTION_DIRECTIONS[int(action)])

        reward = 0.0
        if result.ate_apple:
            reward += self.REWARD_APPLE
        if result.game_over:
            reward = self.REWARD_CRASH

        terminated = result.game_over
        truncated = not terminated and self.steps >= self.max_steps
        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        return self.game.framebuffer.to_rgb_array()

    def _get_info(self):
        return {
            "score": self.game.score,
            "high_score": self.game.high_score,
            "steps": self.steps,
            "length": len(self.game.snake),
            "apple_pos": self.game.apple,
            "direction": self.game.snake.direction.name,
        }

    def close(self):
        pygame.quit()
