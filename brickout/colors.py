"""32-bit XRGB colours and the named colour palette."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Color", "make_rgb"]


def _byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} component must be in 0..255, got {value}")
    return value


@dataclass(frozen=True)
class Color:
    """A colour packed as ``0xXXRRGGBB`` in a single 32-bit word."""

    dword: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.dword <= 0xFFFFFFFF:
            raise ValueError(f"dword must fit in 32 bits, got {self.dword:#x}")

    @classmethod
    def from_argb(cls, x: int, r: int, g: int, b: int) -> Color:
        """Build a colour from the extra (alpha) byte and the three channels."""
        return cls(
            (_byte("x", x) << 24)
            | (_byte("r", r) << 16)
            | (_byte("g", g) << 8)
            | _byte("b", b)
        )

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Build a colour with a zero extra byte."""
        return cls.from_argb(0, r, g, b)

    @property
    def x(self) -> int:
        return self.dword >> 24

    @property
    def a(self) -> int:
        return self.x

    @property
    def r(self) -> int:
        return (self.dword >> 16) & 0xFF

    @property
    def g(self) -> int:
        return (self.dword >> 8) & 0xFF

    @property
    def b(self) -> int:
        return self.dword & 0xFF

    def with_x(self, x: int) -> Color:
        return Color((self.dword & 0x00FFFFFF) | (_byte("x", x) << 24))

    def with_a(self, a: int) -> Color:
        return self.with_x(a)

    def with_r(self, r: int) -> Color:
        return Color((self.dword & 0xFF00FFFF) | (_byte("r", r) << 16))

    def with_g(self, g: int) -> Color:
        return Color((self.dword & 0xFFFF00FF) | (_byte("g", g) << 8))

    def with_b(self, b: int) -> Color:
        return Color((self.dword & 0xFFFFFF00) | _byte("b", b))

    def darker(self, amount: int) -> Color:
        """Subtract ``amount`` from each channel, clamping at zero.

        The extra byte is dropped, as in the engine.
        """
        return Color.from_rgb(
            max(self.r - amount, 0),
            max(self.g - amount, 0),
            max(self.b - amount, 0),
        )


def make_rgb(r: int, g: int, b: int) -> Color:
    """Pack three channels into a colour."""
    return Color.from_rgb(r, g, b)


RED_ORANGE = make_rgb(255, 77, 0)
GRAPEFRUIT = make_rgb(255, 20, 60)

ALICE_BLUE = make_rgb(240, 248, 255)
ANTIQUE_WHITE = make_rgb(250, 235, 215)
AQUA = make_rgb(0, 255, 255)
AQUAMARINE = make_rgb(127, 255, 212)
AZURE = make_rgb(240, 255, 255)
BEIGE = make_rgb(245, 245, 220)
BISQUE = make_rgb(255, 228, 196)
BLACK = make_rgb(0, 0, 0)
BLANCHED_ALMOND = make_rgb(255, 235, 205)
BLUE = make_rgb(0, 0, 255)
BLUE_VIOLET = make_rgb(138, 43, 226)
BROWN = make_rgb(165, 42, 42)
BURLY_WOOD = make_rgb(222, 184, 135)
CADET_BLUE = make_rgb(95, 158, 160)
CHARTREUSE = make_rgb(127, 255, 0)
CHOCOLATE = make_rgb(210, 105, 30)
CORAL = make_rgb(255, 127, 80)
CORNFLOWER_BLUE = make_rgb(100, 149, 237)
CORNSILK = make_rgb(255, 248, 220)
CRIMSON = make_rgb(220, 20, 60)
CYAN = make_rgb(0, 255, 255)
DARK_BLUE = make_rgb(0, 0, 139)
DARK_CYAN = make_rgb(0, 139, 139)
DARK_GOLDEN_ROD = make_rgb(184, 134, 11)
DARK_GRAY = make_rgb(169, 169, 169)
DARK_GREY = make_rgb(169, 169, 169)
DARK_GREEN = make_rgb(0, 100, 0)
DARK_KHAKI = make_rgb(189, 183, 107)
DARK_MAGENTA = make_rgb(139, 0, 139)
DARK_OLIVE_GREEN = make_rgb(85, 107, 47)
DARK_ORANGE = make_rgb(255, 140, 0)
DARK_ORCHID = make_rgb(153, 50, 204)
DARK_RED = make_rgb(139, 0, 0)
DARK_SALMON = make_rgb(233, 150, 122)
DARK_SEA_GREEN = make_rgb(143, 188, 143)
DARK_SLATE_BLUE = make_rgb(72, 61, 139)
DARK_SLATE_GRAY = make_rgb(47, 79, 79)
DARK_SLATE_GREY = make_rgb(47, 79, 79)
DARK_TURQUOISE = make_rgb(0, 206, 209)
DARK_VIOLET = make_rgb(148, 0, 211)
DEEP_PINK = make_rgb(255, 20, 147)
DEEP_SKY_BLUE = make_rgb(0, 191, 255)
DIM_GRAY = make_rgb(105, 105, 105)
DIM_GREY = make_rgb(105, 105, 105)
DODGER_BLUE = make_rgb(30, 144, 255)
FIRE_BRICK = make_rgb(178, 34, 34)
FLORAL_WHITE = make_rgb(255, 250, 240)
FOREST_GREEN = make_rgb(34, 139, 34)
FUCHSIA = make_rgb(255, 0, 255)
GAINSBORO = make_rgb(220, 220, 220)
GHOST_WHITE = make_rgb(248, 248, 255)
GOLD = make_rgb(255, 215, 0)
GOLDEN_ROD = make_rgb(218, 165, 32)
GRAY = make_rgb(128, 128, 128)
GREY = make_rgb(128, 128, 128)
GREEN = make_rgb(0, 128, 0)
GREEN_YELLOW = make_rgb(173, 255, 47)
HONEY_DEW = make_rgb(240, 255, 240)
HOT_PINK = make_rgb(255, 105, 180)
INDIAN_RED = make_rgb(205, 92, 92)
INDIGO = make_rgb(75, 0, 130)
IVORY = make_rgb(255, 255, 240)
KHAKI = make_rgb(240, 230, 140)
LAVENDER = make_rgb(230, 230, 250)
LAVENDER_BLUSH = make_rgb(255, 240, 245)
LAWN_GREEN = make_rgb(124, 252, 0)
LEMON_CHIFFON = make_rgb(255, 250, 205)
LIGHT_BLUE = make_rgb(173, 216, 230)
LIGHT_CORAL = make_rgb(240, 128, 128)
LIGHT_CYAN = make_rgb(224, 255, 255)
LIGHT_GOLDEN_ROD_YELLOW = make_rgb(250, 250, 210)
LIGHT_GRAY = make_rgb(211, 211, 211)
LIGHT_GREY = make_rgb(211, 211, 211)
LIGHT_GREEN = make_rgb(144, 238, 144)
LIGHT_PINK = make_rgb(255, 182, 193)
LIGHT_SALMON = make_rgb(255, 160, 122)
LIGHT_SEA_GREEN = make_rgb(32, 178, 170)
LIGHT_SKY_BLUE = make_rgb(135, 206, 250)
LIGHT_SLATE_GRAY = make_rgb(119, 136, 153)
LIGHT_SLATE_GREY = make_rgb(119, 136, 153)
LIGHT_STEEL_BLUE = make_rgb(176, 196, 222)
LIGHT_YELLOW = make_rgb(255, 255, 224)
LIME = make_rgb(0, 255, 0)
LIME_GREEN = make_rgb(50, 205, 50)
LINEN = make_rgb(250, 240, 230)
MAGENTA = make_rgb(255, 0, 255)
MAROON = make_rgb(128, 0, 0)
MEDIUM_AQUA_MARINE = make_rgb(102, 205, 170)
MEDIUM_BLUE = make_rgb(0, 0, 205)
MEDIUM_ORCHID = make_rgb(186, 85, 211)
MEDIUM_PURPLE = make_rgb(147, 112, 219)
MEDIUM_SEA_GREEN = make_rgb(60, 179, 113)
MEDIUM_SLATE_BLUE = make_rgb(123, 104, 238)
MEDIUM_SPRING_GREEN = make_rgb(0, 250, 154)
MEDIUM_TURQUOISE = make_rgb(72, 209, 204)
MEDIUM_VIOLET_RED = make_rgb(199, 21, 133)
MIDNIGHT_BLUE = make_rgb(25, 25, 112)
MINT_CREAM = make_rgb(245, 255, 250)
MISTY_ROSE = make_rgb(255, 228, 225)
MOCCASIN = make_rgb(255, 228, 181)
NAVAJO_WHITE = make_rgb(255, 222, 173)
NAVY = make_rgb(0, 0, 128)
OLD_LACE = make_rgb(253, 245, 230)
OLIVE = make_rgb(128, 128, 0)
OLIVE_DRAB = make_rgb(107, 142, 35)
ORANGE = make_rgb(255, 165, 0)
ORANGE_RED = make_rgb(255, 69, 0)
ORCHID = make_rgb(218, 112, 214)
PALE_GOLDEN_ROD = make_rgb(238, 232, 170)
PALE_GREEN = make_rgb(152, 251, 152)
PALE_TURQUOISE = make_rgb(175, 238, 238)
PALE_VIOLET_RED = make_rgb(219, 112, 147)
PAPAYA_WHIP = make_rgb(255, 239, 213)
PEACH_PUFF = make_rgb(255, 218, 185)
PERU = make_rgb(205, 133, 63)
PINK = make_rgb(255, 192, 203)
PLUM = make_rgb(221, 160, 221)
POWDER_BLUE = make_rgb(176, 224, 230)
PURPLE = make_rgb(128, 0, 128)
REBECCA_PURPLE = make_rgb(102, 51, 153)
RED = make_rgb(255, 0, 0)
ROSY_BROWN = make_rgb(188, 143, 143)
ROYAL_BLUE = make_rgb(65, 105, 225)
SADDLE_BROWN = make_rgb(139, 69, 19)
SALMON = make_rgb(250, 128, 114)
SANDY_BROWN = make_rgb(244, 164, 96)
SEA_GREEN = make_rgb(46, 139, 87)
SEA_SHELL = make_rgb(255, 245, 238)
SIENNA = make_rgb(160, 82, 45)
SILVER = make_rgb(192, 192, 192)
SKY_BLUE = make_rgb(135, 206, 235)
SLATE_BLUE = make_rgb(106, 90, 205)
SLATE_GRAY = make_rgb(112, 128, 144)
SLATE_GREY = make_rgb(112, 128, 144)
SNOW = make_rgb(255, 250, 250)
SPRING_GREEN = make_rgb(0, 255, 127)
STEEL_BLUE = make_rgb(70, 130, 180)
TAN = make_rgb(210, 180, 140)
TEAL = make_rgb(0, 128, 128)
THISTLE = make_rgb(216, 191, 216)
TOMATO = make_rgb(255, 99, 71)
TURQUOISE = make_rgb(64, 224, 208)
VIOLET = make_rgb(238, 130, 238)
WHEAT = make_rgb(245, 222, 179)
WHITE = make_rgb(255, 255, 255)
WHITE_SMOKE = make_rgb(245, 245, 245)
YELLOW = make_rgb(255, 255, 0)
YELLOW_GREEN = make_rgb(154, 205, 50)