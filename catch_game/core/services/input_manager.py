"""
input_manager.py
----------------
Translates pygame keyboard events into engine key events.

Provides:
- KeyCode: directional/confirm codes the game reacts to
- KeyEvent: printable character plus code of a key-down/key-up
- InputManager: binding table lookup from pygame keys to KeyCode
"""

from dataclasses import dataclass
from enum import Enum

import pygame

from catch_game.core.debug.debug_logger import DebugLogger


class KeyCode(Enum):
    """Key codes with a meaning in the game."""
    LEFT_ARROW = "left_arrow"
    RIGHT_ARROW = "right_arrow"
    RETURN = "return"
    SPACE = "space"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """
    Discrete key-down or key-up.

    Attributes:
        key: Printable character ("" for non-printable keys)
        code: KeyCode of the physical key
    """
    key: str = ""
    code: KeyCode = KeyCode.OTHER


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    KeyCode.LEFT_ARROW: [pygame.K_LEFT],
    KeyCode.RIGHT_ARROW: [pygame.K_RIGHT],
    KeyCode.RETURN: [pygame.K_RETURN, pygame.K_KP_ENTER],
    KeyCode.SPACE: [pygame.K_SPACE],
}


class InputManager:
    """
    Converts pygame KEYDOWN/KEYUP events to KeyEvent.

    Usage:
        key_event = input_manager.translate(event)
        if key_event is not None:
            sketch.key_pressed(key_event)
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {KeyCode: [pygame key, ...]} (DEFAULT_KEY_BINDINGS if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._key_to_code = {}
        for code, keys in self.key_bindings.items():
            for key in keys:
                self._key_to_code[key] = code

        DebugLogger.init_entry("InputManager")
        DebugLogger.init_sub(f"Bound {len(self._key_to_code)} keys", level=1)

    def code_for(self, pygame_key) -> KeyCode:
        return self._key_to_code.get(pygame_key, KeyCode.OTHER)

    def translate(self, event):
        """
        Build a KeyEvent from a pygame event.

        Returns:
            KeyEvent | None: None for non-keyboard events
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return None

        code = self.code_for(event.key)
        # KEYUP carries no unicode attribute
        char = getattr(event, "unicode", "") or ""
        if not char.isprintable():
            char = ""
        if code == KeyCode.SPACE:
            char = " "

        key_event = KeyEvent(key=char, code=code)
        direction = "down" if event.type == pygame.KEYDOWN else "up"
        DebugLogger.trace(f"Key {direction} -> {key_event}", category="input")
        return key_event
