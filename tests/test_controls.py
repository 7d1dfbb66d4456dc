import pygame

from wrapsnake.config import UP, DOWN, LEFT, RIGHT
from wrapsnake.controls import change_direction, difficulty_for_key, direction_for_key
from wrapsnake.game import GameState


def make_state(snake):
    return GameState(snake=snake, direction=RIGHT, food=(0, 0), obstacles=[])


def test_arrow_and_wasd_keys():
    assert direction_for_key(pygame.K_UP) == UP
    assert direction_for_key(pygame.K_w) == UP
    assert direction_for_key(pygame.K_s) == DOWN
    assert direction_for_key(pygame.K_a) == LEFT
    assert direction_for_key(pygame.K_RIGHT) == RIGHT
    assert direction_for_key(pygame.K_q) is None


def test_digit_keys_pick_levels():
    assert difficulty_for_key(pygame.K_1) == "novice"
    assert difficulty_for_key(pygame.K_2) == "intermediate"
    assert difficulty_for_key(pygame.K_3) == "expert"
    assert difficulty_for_key(pygame.K_4) is None


def test_reversal_rejected_for_long_snake():
    state = make_state([(9, 9), (8, 9), (7, 9)])
    assert not change_direction(state, LEFT)
    assert state.direction == RIGHT


def test_reversal_allowed_for_single_cell():
    state = make_state([(9, 9)])
    assert change_direction(state, LEFT)
    assert state.direction == LEFT


def test_turn_applies_immediately():
    state = make_state([(9, 9), (8, 9), (7, 9)])
    assert change_direction(state, UP)
    assert state.direction == UP
    # the check is against the current direction, so a second turn is judged from UP
    assert not change_direction(state, DOWN)
    assert change_direction(state, LEFT)
