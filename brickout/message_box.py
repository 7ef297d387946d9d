"""A modal message with Yes/No or Ok buttons over a darkened screen."""

from __future__ import annotations

import enum
from typing import Optional, Protocol

from .button import Button
from .colors import GRAY, WHITE
from .interface_object import FontLike, GraphicsLike, HoverSound, MouseEvent
from .rect import Rect
from .vec2 import Vec2

__all__ = ["MessageButtons", "ValueButton", "MessageBox"]

_PADDING_BETWEEN = 20


class MessageFont(FontLike, Protocol):
    def number_of_lines(self, text: str) -> int: ...

    def longest_line_size(self, text: str) -> int: ...


class MessageButtons(enum.Enum):
    YES_NO = enum.auto()
    OK = enum.auto()


class ValueButton(enum.Enum):
    YES = enum.auto()
    NO = enum.auto()
    OK = enum.auto()


class MessageBox:
    """Shows ``text`` with the chosen ``buttons`` in the middle of the screen."""

    def __init__(
        self,
        font: MessageFont,
        screen_width: int,
        screen_height: int,
        hover_sound: Optional[HoverSound] = None,
    ) -> None:
        self.font = font
        self.screen_rect = Rect(0, screen_width, 0, screen_height)
        self.screen_center = Vec2(screen_width // 2, screen_height // 2)
        self.rect = Rect(
            screen_width // 5,
            screen_width // 5 * 4,
            screen_height // 5,
            screen_height // 5 * 4,
        )
        self.text = "Default"
        self.buttons = MessageButtons.YES_NO

        buttons_pos = self.screen_center + Vec2(0, screen_height // 8)
        self.button_yes = Button(font, "yes", buttons_pos, hover_sound)
        self.button_no = Button(font, "no", buttons_pos, hover_sound)
        self.button_ok = Button(font, "ok", buttons_pos, hover_sound)
        for button in (self.button_yes, self.button_no, self.button_ok):
            button.position_center = True
        self.button_no.size_width = font.char_width * 3
        half_gap = _PADDING_BETWEEN // 2
        self.button_no.pos = self.button_no.pos - Vec2(
            self.button_no.rect.width // 2 + half_gap, 0
        )
        self.button_yes.pos = self.button_yes.pos + Vec2(
            self.button_yes.rect.width // 2 + half_gap, 0
        )

    def draw(self, gfx: GraphicsLike) -> None:
        gfx.draw_disabled(self.screen_rect)
        gfx.draw_rect(self.rect, GRAY)

        cw = self.font.char_width
        if self.font.number_of_lines(self.text) == 1:
            text_pos = Vec2(
                self.screen_center.x, self.rect.top + self.rect.height // 4
            ) - Vec2(len(self.text) * cw // 2, 0)
        else:
            text_pos = Vec2(
                self.screen_center.x, self.rect.top + self.rect.height // 5
            ) - Vec2(self.font.longest_line_size(self.text) * cw // 2, 0)
        self.font.draw_text(self.text, text_pos, WHITE, gfx)

        if self.buttons is MessageButtons.YES_NO:
            self.button_yes.draw(gfx)
            self.button_no.draw(gfx)
        else:
            self.button_ok.draw(gfx)

    def process_mouse(self, event: MouseEvent) -> Optional[ValueButton]:
        """Return the button clicked by this event, or None."""
        if self.buttons is MessageButtons.YES_NO:
            self.button_yes.process_mouse(event)
            self.button_no.process_mouse(event)
            if self.button_yes.is_clicked():
                return ValueButton.YES
            if self.button_no.is_clicked():
                return ValueButton.NO
            return None
        self.button_ok.process_mouse(event)
        if self.button_ok.is_clicked():
            return ValueButton.OK
        return None