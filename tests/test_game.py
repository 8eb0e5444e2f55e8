import random

import pytest

from snake_apple.config import (
    COLOR_APPLE,
    COLOR_BORDER,
    COLOR_CHECKER_A,
    COLOR_CHECKER_B,
    COLOR_SNAKE,
    GameConfig,
)
from snake_apple.game import SnakeGame
from snake_apple.snake import Direction


def test_round_starts_in_the_middle():
    game = SnakeGame()
    assert (game.columns, game.rows) == (32, 22)
    assert game.snake.head_position() == (16, 11)
    assert len(game.snake) == 3
    assert game.score == 0
    assert not game.game_over


def test_five_ticks_right_without_food(first_choice):
    game = SnakeGame(rng=first_choice)
    start_x, start_y = game.snake.head_position()
    for _ in range(5):
        result = game.tick()
        assert not result.game_over
    assert game.snake.head_position() == (start_x + 5, start_y)
    assert len(game.snake) == 3
    assert game.score == 0


def test_eating_once_grows_and_scores(first_choice):
    game = SnakeGame(rng=first_choice)
    start_x, start_y = game.snake.head_position()
    game.apple = (start_x + 2, start_y)

    results = [game.tick() for _ in range(5)]

    assert [r.ate_apple for r in results] == [False, True, False, False, False]
    assert game.snake.head_position() == (start_x + 5, start_y)
    assert len(game.snake) == 4
    assert game.score == 1
    assert game.apple == (1, 1)


def test_new_high_score_is_reported_once_exceeded(first_choice):
    game = SnakeGame(high_score=1, rng=first_choice)
    x, y = game.snake.head_position()
    game.apple = (x + 1, y)
    assert not game.tick().new_high_score
    assert game.high_score == 1

    game.apple = (x + 2, y)
    result = game.tick()
    assert result.ate_apple and result.new_high_score
    assert game.high_score == 2


def test_reversal_request_is_ignored():
    game = SnakeGame()
    x, y = game.snake.head_position()
    result = game.tick(Direction.LEFT)
    assert not result.game_over
    assert game.snake.direction is Direction.RIGHT
    assert game.snake.head_position() == (x + 1, y)


def test_turn_request_is_applied():
    game = SnakeGame()
    x, y = game.snake.head_position()
    game.tick(Direction.UP)
    assert game.snake.head_position() == (x, y - 1)


def test_hitting_the_border_ends_the_round(small_config, first_choice):
    game = SnakeGame(small_config, rng=first_choice)
    assert game.snake.head_position() == (5, 5)
    assert not game.tick().game_over
    assert not game.tick().game_over
    assert not game.tick().game_over
    result = game.tick()
    assert result.game_over
    assert game.game_over
    assert game.snake.head_position() == (9, 5)


def test_ticking_after_game_over_does_nothing(small_config, first_choice):
    game = SnakeGame(small_config, rng=first_choice)
    while not game.tick().game_over:
        pass
    body = list(game.snake.body)
    assert game.tick(Direction.UP).game_over
    assert game.snake.body == body


def test_running_into_itself_ends_the_round(first_choice):
    game = SnakeGame(rng=first_choice)
    x, y = game.snake.head_position()
    # A hook shape whose segment above the head stays put after the tail moves
    game.snake.body = [(x, y), (x - 1, y), (x - 1, y - 1), (x, y - 1), (x + 1, y - 1), (x + 1, y - 2)]
    assert game.tick(Direction.UP).game_over
    assert game.snake.check_collision()


def test_walls():
    game = SnakeGame(GameConfig(width=200, height=200, cell_size=20))
    assert game.hits_wall((0, 5))
    assert game.hits_wall((9, 5))
    assert game.hits_wall((5, -1))
    assert game.hits_wall((5, 9))
    assert not game.hits_wall((1, 1))
    assert not game.hits_wall((8, 8))


def test_apples_spawn_on_free_interior_cells(small_config):
    game = SnakeGame(small_config, rng=random.Random(7))
    for _ in range(200):
        apple = game.spawn_apple()
        assert not game.hits_wall(apple)
        assert not game.snake.occupies(apple)


def test_no_apple_when_board_is_full(small_config):
    game = SnakeGame(small_config)
    game.snake.body = sorted(game.interior_cells())
    assert game.spawn_apple() is None


def test_seeded_rng_is_reproducible(small_config):
    a = SnakeGame(small_config, rng=random.Random(3))
    b = SnakeGame(small_config, rng=random.Random(3))
    assert a.apple == b.apple


def test_reset_keeps_high_score(first_choice):
    game = SnakeGame(rng=first_choice)
    x, y = game.snake.head_position()
    game.apple = (x + 1, y)
    game.tick()
    game.reset()
    assert game.score == 0
    assert game.high_score == 1
    assert len(game.snake) == 3


def test_render_draws_arena_apple_and_snake(small_config, first_choice):
    game = SnakeGame(small_config, rng=first_choice)
    fb = game.framebuffer
    size = small_config.cell_size
    assert fb.get_pixel(0, 0) == COLOR_BORDER
    assert fb.get_pixel(199, 199) == COLOR_BORDER
    # Apple sits on cell (1, 1)
    assert fb.get_pixel(size + 3, size + 3) == COLOR_APPLE
    assert fb.get_pixel(2 * size, size) == COLOR_CHECKER_B
    assert fb.get_pixel(2 * size, 2 * size) == COLOR_CHECKER_A
    assert fb.get_pixel(5 * size + 1, 5 * size + 1) == COLOR_SNAKE


def test_render_draws_scores(block_font):
    game = SnakeGame(GameConfig(width=400, height=200, cell_size=20), font=block_font)
    fb = game.framebuffer
    # "Score: 0" starts at the top-left margin
    assert fb.get_pixel(10, 10) == (255, 255, 255)
    # "High Score: 0" is 13 glyphs of 5px, right-aligned with a 10px margin
    assert fb.get_pixel(400 - 10 - 13 * 5, 10) == (255, 255, 255)


@pytest.mark.parametrize("cell_size", [0, 500])
def test_config_rejects_bad_boards(cell_size):
    with pytest.raises(ValueError):
        GameConfig(cell_size=cell_size)


def test_config_rejects_boards_too_narrow_for_the_starting_snake():
    # 5x3 cells would put the tail inside the left wall
    with pytest.raises(ValueError, match="starting snake"):
        GameConfig(width=100, height=60, cell_size=20)


def test_narrowest_board_starts_inside_the_playfield(first_choice):
    game = SnakeGame(GameConfig(width=120, height=60, cell_size=20), rng=first_choice)
    assert not any(game.hits_wall(cell) for cell in game.snake.body)
    assert not game.tick().game_over
