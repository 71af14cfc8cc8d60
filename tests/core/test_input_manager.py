"""
test_input_manager.py
---------------------
Tests for pygame event to KeyEvent translation.
"""

import pygame
import pytest

from catch_game.core.services.input_manager import InputManager, KeyCode, KeyEvent


@pytest.fixture
def input_manager():
    return InputManager()


@pytest.mark.parametrize(
    "pygame_key, expected",
    [
        (pygame.K_LEFT, KeyCode.LEFT_ARROW),
        (pygame.K_RIGHT, KeyCode.RIGHT_ARROW),
        (pygame.K_RETURN, KeyCode.RETURN),
        (pygame.K_KP_ENTER, KeyCode.RETURN),
        (pygame.K_SPACE, KeyCode.SPACE),
        (pygame.K_a, KeyCode.OTHER),
    ]
)
def test_code_for(input_manager, pygame_key, expected):
    assert input_manager.code_for(pygame_key) == expected


def test_keydown_printable(input_manager):
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a, unicode="a")
    assert input_manager.translate(event) == KeyEvent(key="a", code=KeyCode.OTHER)


def test_space_carries_space_character(input_manager):
    event = pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE)
    assert input_manager.translate(event) == KeyEvent(key=" ", code=KeyCode.SPACE)


def test_non_printable_key_has_empty_character(input_manager):
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN, unicode="\r")
    assert input_manager.translate(event) == KeyEvent(key="", code=KeyCode.RETURN)


def test_non_key_event_ignored(input_manager):
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))
    assert input_manager.translate(event) is None


def test_custom_bindings():
    manager = InputManager({KeyCode.LEFT_ARROW: [pygame.K_a]})
    assert manager.code_for(pygame.K_a) == KeyCode.LEFT_ARROW
    assert manager.code_for(pygame.K_LEFT) == KeyCode.OTHER
