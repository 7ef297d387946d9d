"""A single-line text input field."""

from __future__ import annotations

from typing import Optional

from .colors import GREEN
from .interface_object import FontLike, HoverSound, InterfaceObject, MouseEvent, MouseEventType
from .vec2 import Vec2

__all__ = ["TextBox", "BACKSPACE"]

BACKSPACE = "\b"


class TextBox(InterfaceObject):
    """Takes typed characters while focused; a click inside focuses it, outside unfocuses."""

    border_color_focused = GREEN

    def __init__(
        self,
        font: FontLike,
        pos: Vec2,
        text: str = "",
        hover_sound: Optional[HoverSound] = None,
    ) -> None:
        super().__init__(font, text, pos, hover_sound)
        self.text_align_center = False
        self.limited = False
        self.limit = 10
        self.focused = False

    def process_mouse(self, event: MouseEvent) -> None:
        self._update_hover(event)
        if self.hovered:
            self.clicked = event.type is MouseEventType.L_PRESS
            if self.clicked:
                self.active = True
                self.focused = True
        elif event.type is MouseEventType.L_PRESS:
            self.active = False
            self.focused = False

    def interact(self, character: str) -> None:
        """Append a character, or delete the last one for a backspace."""
        if not self.focused:
            return
        within_limit = not self.limited or len(self.text) < self.limit
        if not (within_limit or character == BACKSPACE):
            return
        if character == BACKSPACE:
            if self.text:
                self.text = self.text[:-1]
                if self.dynamic_size:
                    self.size_width -= self.font.char_width
        else:
            self.text += character
            if self.dynamic_size:
                self.size_width += self.font.char_width

    def set_limit(self, limited: bool, limit: int) -> None:
        self.limited = limited
        self.limit = limit