"""Axis-aligned rectangles given by their four edges."""

from __future__ import annotations

from dataclasses import dataclass

from .vec2 import Number, Vec2

__all__ = ["Rect"]


@dataclass(frozen=True)
class Rect:
    """A rectangle; ``right`` and ``bottom`` are exclusive for point tests."""

    left: Number
    right: Number
    top: Number
    bottom: Number

    @classmethod
    def from_corners(cls, top_left: Vec2, bottom_right: Vec2) -> Rect:
        return cls(top_left.x, bottom_right.x, top_left.y, bottom_right.y)

    @classmethod
    def from_size(cls, top_left: Vec2, width: Number, height: Number) -> Rect:
        return cls.from_corners(top_left, top_left + Vec2(width, height))

    @classmethod
    def from_center(cls, center: Vec2, half_width: Number, half_height: Number) -> Rect:
        half = Vec2(half_width, half_height)
        return cls.from_corners(center - half, center + half)

    def rounded(self) -> Rect:
        """Round every edge, halves away from zero."""
        return Rect.from_corners(
            Vec2(self.left, self.top).rounded(),
            Vec2(self.right, self.bottom).rounded(),
        )

    @property
    def sizes(self) -> Vec2:
        return Vec2(self.right - self.left, self.bottom - self.top)

    def overlaps(self, other: Rect) -> bool:
        return (
            self.right > other.left
            and self.left < other.right
            and self.bottom > other.top
            and self.top < other.bottom
        )

    def is_contained_by(self, other: Rect) -> bool:
        return (
            self.left >= other.left
            and self.right <= other.right
            and self.top >= other.top
            and self.bottom <= other.bottom
        )

    def contains(self, point: Vec2) -> bool:
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom

    def expanded(self, offset: Number) -> Rect:
        return Rect(
            self.left - offset,
            self.right + offset,
            self.top - offset,
            self.bottom + offset,
        )

    def expanded_sides(self, top: Number, right: Number, bottom: Number, left: Number) -> Rect:
        """Grow each side by its own offset.

        The left edge moves by ``top``, matching the engine's layout code,
        which always passes equal top and left offsets.
        """
        return Rect(self.left - top, self.right + right, self.top - top, self.bottom + bottom)

    def expanded_width(self, offset: Number) -> Rect:
        return Rect(self.left - offset, self.right + offset, self.top, self.bottom)

    @property
    def center(self) -> Vec2:
        return Vec2(self.left + self.right, self.top + self.bottom) / 2

    @property
    def pos(self) -> Vec2:
        return Vec2(self.left, self.top)

    @property
    def width(self) -> Number:
        return self.right - self.left

    @property
    def height(self) -> Number:
        return self.bottom - self.top