"""Clickable, styled boxes of text that react to mouse events."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Protocol

from .colors import BLACK, BLUE, GRAY, GREEN, WHITE, Color
from .rect import Rect
from .vec2 import Vec2

__all__ = [
    "MouseEventType",
    "MouseEvent",
    "FontLike",
    "GraphicsLike",
    "HoverSound",
    "InterfaceObject",
]


class MouseEventType(enum.Enum):
    L_PRESS = enum.auto()
    L_RELEASE = enum.auto()
    R_PRESS = enum.auto()
    R_RELEASE = enum.auto()
    WHEEL_UP = enum.auto()
    WHEEL_DOWN = enum.auto()
    MOVE = enum.auto()
    ENTER = enum.auto()
    LEAVE = enum.auto()
    INVALID = enum.auto()


@dataclass(frozen=True)
class MouseEvent:
    """One mouse event: its kind, where it happened and the button state."""

    type: MouseEventType
    pos: Vec2
    left_is_pressed: bool = False
    right_is_pressed: bool = False


class FontLike(Protocol):
    @property
    def char_width(self) -> int: ...

    @property
    def char_height(self) -> int: ...

    def draw_text(self, text: str, pos: Vec2, color: Color, gfx: "GraphicsLike") -> None: ...


class GraphicsLike(Protocol):
    def draw_rect(self, rect: Rect, color: Color) -> None: ...

    def draw_disabled(self, rect: Rect) -> None: ...


class HoverSound(Protocol):
    def play(self) -> None: ...


def _half(n: int) -> int:
    """Halve an integer, truncating toward zero."""
    return n // 2 if n >= 0 else -(-n // 2)


class InterfaceObject:
    """A box of text with padding, border and background (content-box sizing).

    Changing the text resizes the box unless ``dynamic_size`` is off.
    """

    def __init__(
        self,
        font: FontLike,
        text: str,
        pos: Vec2,
        hover_sound: Optional[HoverSound] = None,
    ) -> None:
        self.font = font
        self.text = text
        self.pos = pos
        self.hover_sound = hover_sound

        self.hovered = False
        self.clicked = False
        self.clicked_in = False
        self.active = False
        self._hovered_already = False

        self.disabled = False
        self.dynamic_size = True
        self.darker = 20
        self.position_center = False
        self.font_color: Color = BLACK
        self.font_hover_darker = True
        self.text_align_center = True
        self.size_width = len(text) * font.char_width
        self.size_height = font.char_height
        self.padding_x = 12
        self.padding_y = 8
        self.has_border = True
        self.border_color: Color = GRAY
        self.border_color_hovered: Color = BLUE
        self.border_color_active: Color = GREEN
        self.border_size = 5
        self.has_background = True
        self.background_color: Color = WHITE
        self.background_hover_darker = True

    def _effective_border(self) -> int:
        return self.border_size if self.has_border else 0

    def draw(self, gfx: GraphicsLike) -> None:
        border = self._effective_border()
        rect = self.rect

        if self.has_border:
            if self.active:
                color = self.border_color_active
            elif self.hovered:
                color = self.border_color_hovered
            else:
                color = self.border_color
            gfx.draw_rect(rect, color)

        if self.has_background:
            background = self.background_color
            if self.background_hover_darker and self.hovered:
                background = background.darker(self.darker)
            gfx.draw_rect(rect.expanded(-border), background)

        text_pos = self.pos + Vec2(border + self.padding_x, border + self.padding_y)
        if self.position_center:
            text_pos = text_pos - Vec2(
                _half(self.size_width) + border + self.padding_x,
                _half(self.size_height) + border + self.padding_y,
            )
        if self.text_align_center:
            text_width = len(self.text) * self.font.char_width
            text_pos = text_pos + Vec2(
                _half(self.size_width - text_width),
                _half(self.size_height - self.font.char_height),
            )
        self.font.draw_text(self.text, text_pos, self.font_color, gfx)

        if self.disabled:
            gfx.draw_disabled(rect)

    @property
    def rect(self) -> Rect:
        border = self._effective_border()
        if not self.position_center:
            return Rect.from_size(
                self.pos,
                self.size_width + self.padding_x * 2 + border * 2,
                self.size_height + self.padding_y * 2 + border * 2,
            )
        return Rect.from_center(
            self.pos,
            _half(self.size_width) + self.padding_x + border,
            _half(self.size_height) + self.padding_y + border,
        )

    @property
    def height(self) -> int:
        return self.padding_y * 2 + self.border_size * 2 + self.font.char_height

    def _update_hover(self, event: MouseEvent) -> None:
        self.hovered = self.rect.contains(event.pos) and not self.disabled
        if self.hovered and not self._hovered_already:
            if self.hover_sound is not None:
                self.hover_sound.play()
            self._hovered_already = True
        elif not self.hovered:
            self._hovered_already = False

    def process_mouse(self, event: MouseEvent) -> None:
        self._update_hover(event)
        if self.hovered:
            if event.type is MouseEventType.L_PRESS:
                self.clicked_in = True
            self.clicked = self.clicked_in and event.type is MouseEventType.L_RELEASE
            self.active = self.clicked_in and event.left_is_pressed
        else:
            self.active = False
            self.clicked_in = False

    def is_clicked(self) -> bool:
        return self.hovered and self.clicked and not self.disabled

    def set_text(self, text: str) -> None:
        self.text = text
        if self.dynamic_size:
            self.size_width = len(text) * self.font.char_width

    def set_size(self, width: int, height: int) -> None:
        """Set the content size, never smaller than the text needs."""
        self.size_width = max(width, self.font.char_width * len(self.text))
        self.size_height = max(height, self.font.char_height)

    def set_size_width_border_box(self, width: int) -> None:
        self.size_width = width - self.padding_x * 2 - self.border_size * 2

    def set_size_height_border_box(self, height: int) -> None:
        self.size_height = height - self.padding_y * 2 - self.border_size * 2

    def set_padding(self, padding_x: int = 12, padding_y: int = 8) -> None:
        self.padding_x = padding_x
        self.padding_y = padding_y

    def set_border(
        self,
        enabled: bool = True,
        size: int = 5,
        color: Color = GRAY,
        color_hovered: Color = BLUE,
        color_active: Color = GREEN,
    ) -> None:
        self.has_border = enabled
        self.border_size = size
        self.border_color = color
        self.border_color_hovered = color_hovered
        self.border_color_active = color_active

    def set_background(
        self, enabled: bool = True, color: Color = WHITE, hover_darker: bool = True
    ) -> None:
        self.has_background = enabled
        self.background_color = color
        self.background_hover_darker = hover_darker

    def to_naked(self) -> None:
        """Plain white text with no border or background."""
        self.dynamic_size = False
        self.font_color = WHITE
        self.font_hover_darker = False
        self.text_align_center = True
        self.has_border = False
        self.has_background = False

    def to_default(self) -> None:
        """Restore the default look."""
        self.dynamic_size = True
        self.darker = 20
        self.position_center = False
        self.font_color = BLACK
        self.font_hover_darker = True
        self.text_align_center = True
        self.has_border = True
        self.border_color = GRAY
        self.border_size = 5
        self.has_background = True
        self.background_color = WHITE
        self.background_hover_darker = True