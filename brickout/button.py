"""Buttons: plain, option-carrying and two-state toggles."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from .colors import LIGHT_CORAL, LIGHT_GREEN, Color
from .interface_object import FontLike, HoverSound, InterfaceObject, MouseEvent
from .vec2 import Vec2

__all__ = ["Button", "MenuButton", "StateButton"]

Button = InterfaceObject

O = TypeVar("O")
T = TypeVar("T")


class MenuButton(InterfaceObject, Generic[O]):
    """A button that stands for one option of a menu."""

    def __init__(
        self,
        font: FontLike,
        pos: Vec2,
        option: O,
        text: str,
        hover_sound: Optional[HoverSound] = None,
    ) -> None:
        super().__init__(font, text, pos, hover_sound)
        self.option = option


class StateButton(InterfaceObject, Generic[T]):
    """A toggle that switches between two values, labels and colours on each click."""

    def __init__(
        self,
        font: FontLike,
        pos: Vec2,
        first_value: T,
        second_value: T,
        first_string: str,
        second_string: str,
        first_color: Color = LIGHT_GREEN,
        second_color: Color = LIGHT_CORAL,
        hover_sound: Optional[HoverSound] = None,
    ) -> None:
        super().__init__(font, first_string, pos, hover_sound)
        self.first_value = first_value
        self.second_value = second_value
        self.first_string = first_string
        self.second_string = second_string
        self.first_color = first_color
        self.second_color = second_color
        self._second = False
        self.set_background(True, first_color)
        longest = max(len(first_string), len(second_string))
        self.dynamic_size = False
        self.size_width = longest * font.char_width

    @property
    def active_value(self) -> T:
        return self.second_value if self._second else self.first_value

    def process_mouse(self, event: MouseEvent) -> None:
        super().process_mouse(event)
        if self.is_clicked():
            self._second = not self._second
            self.set_text(self.second_string if self._second else self.first_string)
            self.set_background(
                True, self.second_color if self._second else self.first_color
            )