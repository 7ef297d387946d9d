"""The main menu: a column of buttons, one per game mode."""

from __future__ import annotations

import enum
from typing import List, Optional

from .button import MenuButton
from .interface_object import FontLike, GraphicsLike, HoverSound, MouseEvent
from .vec2 import Vec2

__all__ = ["GameState", "SelectionMenu"]

_ENTRIES = (
    ("Solo", "SOLO"),
    ("Duo", "DUO"),
    ("Editor", "EDITOR_MODE"),
    ("Ranking", "RANKING"),
)
_PADDING_Y = 20


class GameState(enum.Enum):
    MAIN_MENU = enum.auto()
    SOLO = enum.auto()
    DUO = enum.auto()
    EDITOR_MODE = enum.auto()
    RANKING = enum.auto()
    INVALID = enum.auto()


class SelectionMenu:
    """Buttons stacked downward from ``pos``, each centred on it horizontally."""

    def __init__(
        self, font: FontLike, pos: Vec2, hover_sound: Optional[HoverSound] = None
    ) -> None:
        self.buttons: List[MenuButton[GameState]] = []
        widest = max(len(text) for text, _ in _ENTRIES) * font.char_width
        center = pos
        for text, state_name in _ENTRIES:
            state = GameState[state_name]
            button = MenuButton(font, center, state, text, hover_sound)
            button.disabled = state is GameState.DUO
            button.position_center = True
            button.dynamic_size = False
            button.size_width = widest
            self.buttons.append(button)
            center = center + Vec2(0, button.height + _PADDING_Y)

    def process_mouse(self, event: MouseEvent) -> GameState:
        """Return the state of the clicked entry, or GameState.INVALID."""
        for button in self.buttons:
            button.process_mouse(event)
            if button.is_clicked():
                return button.option
        return GameState.INVALID

    def draw(self, gfx: GraphicsLike) -> None:
        for button in self.buttons:
            button.draw(gfx)