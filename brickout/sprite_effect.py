"""Per-pixel effects applied while drawing a sprite onto a target."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .colors import MAGENTA, Color

__all__ = ["PixelTarget", "Chroma", "Substitution", "Copy", "Ghost"]


class PixelTarget(Protocol):
    def put_pixel(self, x: int, y: int, color: Color) -> None: ...

    def get_pixel(self, x: int, y: int) -> Color: ...


@dataclass(frozen=True)
class Chroma:
    """Copy every pixel except those of the key colour."""

    chroma: Color

    def __call__(self, src: Color, x_dest: int, y_dest: int, target: PixelTarget) -> None:
        if src != self.chroma:
            target.put_pixel(x_dest, y_dest, src)


@dataclass(frozen=True)
class Substitution:
    """Paint every non-key pixel with a single substitute colour."""

    chroma: Color = MAGENTA
    sub: Color = Color()

    def __call__(self, src: Color, x_dest: int, y_dest: int, target: PixelTarget) -> None:
        if src != self.chroma:
            target.put_pixel(x_dest, y_dest, self.sub)


@dataclass(frozen=True)
class Copy:
    """Copy every pixel unchanged."""

    def __call__(self, src: Color, x_dest: int, y_dest: int, target: PixelTarget) -> None:
        target.put_pixel(x_dest, y_dest, src)


@dataclass(frozen=True)
class Ghost:
    """Blend non-key pixels half and half with what is already on the target."""

    chroma: Color

    def __call__(self, src: Color, x_dest: int, y_dest: int, target: PixelTarget) -> None:
        if src == self.chroma:
            return
        dest = target.get_pixel(x_dest, y_dest)
        target.put_pixel(
            x_dest,
            y_dest,
            Color.from_rgb(
                (src.r + dest.r) // 2,
                (src.g + dest.g) // 2,
                (src.b + dest.b) // 2,
            ),
        )