"""In-memory pixel surfaces and loading them from BMP files."""

from __future__ import annotations

import struct
from os import PathLike
from pathlib import Path
from typing import Iterable, Optional, Union

from .colors import Color
from .rect import Rect

__all__ = ["Surface", "Sprite"]

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHI")
_BI_RGB = 0


class Surface:
    """A width by height grid of colours, stored row by row."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        pixels: Optional[Iterable[Color]] = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"surface size must not be negative, got {width}x{height}")
        self.width = width
        self.height = height
        if pixels is None:
            self._pixels = [Color()] * (width * height)
        else:
            self._pixels = list(pixels)
            if len(self._pixels) != width * height:
                raise ValueError(
                    f"expected {width * height} pixels, got {len(self._pixels)}"
                )

    @classmethod
    def from_bitmap(cls, path: Union[str, PathLike]) -> Surface:
        """Load an uncompressed 24- or 32-bit BMP file."""
        data = Path(path).read_bytes()
        header_size = _FILE_HEADER.size + _INFO_HEADER.size
        if len(data) < header_size:
            raise ValueError(f"{path}: file too small to be a bitmap")
        _, _, _, _, off_bits = _FILE_HEADER.unpack_from(data, 0)
        _, width, height, _, bit_count, compression = _INFO_HEADER.unpack_from(
            data, _FILE_HEADER.size
        )
        if bit_count not in (24, 32):
            raise ValueError(f"{path}: unsupported bit depth {bit_count}")
        if compression != _BI_RGB:
            raise ValueError(f"{path}: compressed bitmaps are not supported")
        if width < 0:
            raise ValueError(f"{path}: negative width {width}")

        top_down = height < 0
        height = abs(height)
        bytes_per_pixel = bit_count // 8
        padding = (4 - (width * 3) % 4) % 4 if bit_count == 24 else 0
        stride = width * bytes_per_pixel + padding
        if off_bits + stride * height > len(data):
            raise ValueError(f"{path}: pixel data is truncated")

        surface = cls(width, height)
        for row in range(height):
            y = row if top_down else height - 1 - row
            start = off_bits + row * stride
            for x in range(width):
                offset = start + x * bytes_per_pixel
                b, g, r = data[offset : offset + 3]
                surface._pixels[y * width + x] = Color.from_rgb(r, g, b)
        return surface

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} surface")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        self._pixels[self._index(x, y)] = color

    def get_pixel(self, x: int, y: int) -> Color:
        return self._pixels[self._index(x, y)]

    @property
    def rect(self) -> Rect:
        return Rect(0, self.width, 0, self.height)

    def fill(self, color: Color) -> None:
        self._pixels = [color] * (self.width * self.height)

    def copy(self) -> Surface:
        return Surface(self.width, self.height, self._pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Surface):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._pixels == other._pixels
        )

    def __repr__(self) -> str:
        return f"Surface(width={self.width}, height={self.height})"


Sprite = Surface