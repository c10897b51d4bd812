"""Colour schemes for the terminal interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from rich.color import Color


class ColorType(Enum):
    """Palette a theme colour is drawn from."""

    DEFAULT = "default"
    PALETTE16 = "palette16"
    PALETTE256 = "palette256"
    RGB = "rgb"


class Palette16(IntEnum):
    """The sixteen standard terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    GRAY_LIGHT = 7
    GRAY_DARK = 8
    RED_LIGHT = 9
    GREEN_LIGHT = 10
    YELLOW_LIGHT = 11
    BLUE_LIGHT = 12
    MAGENTA_LIGHT = 13
    CYAN_LIGHT = 14
    WHITE = 15


def _byte(value: int, what: str) -> int:
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be in 0..255, got {value}")
    return value


@dataclass(frozen=True)
class ThemeColor:
    """A single colour: terminal default, palette index, or RGB triple."""

    type: ColorType = ColorType.DEFAULT
    red: int = 0
    green: int = 0
    blue: int = 0
    palette: int = 0

    @classmethod
    def palette16(cls, index: int) -> ThemeColor:
        if not 0 <= int(index) <= 15:
            raise ValueError(f"16-colour index must be in 0..15, got {index}")
        return cls(type=ColorType.PALETTE16, palette=int(index))

    @classmethod
    def palette256(cls, index: int) -> ThemeColor:
        return cls(type=ColorType.PALETTE256, palette=_byte(index, "palette index"))

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> ThemeColor:
        return cls(
            type=ColorType.RGB,
            red=_byte(red, "red"),
            green=_byte(green, "green"),
            blue=_byte(blue, "blue"),
        )

    def to_rich(self) -> Color:
        """Return the equivalent ``rich`` colour."""
        if self.type is ColorType.PALETTE16 or self.type is ColorType.PALETTE256:
            return Color.from_ansi(self.palette)
        if self.type is ColorType.RGB:
            return Color.from_rgb(self.red, self.green, self.blue)
        return Color.default()


_WHITE = ThemeColor.palette16(Palette16.WHITE)
_GRAY_LIGHT = ThemeColor.palette16(Palette16.GRAY_LIGHT)
_GRAY_DARK = ThemeColor.palette16(Palette16.GRAY_DARK)
_BLACK = ThemeColor.palette16(Palette16.BLACK)
_BLUE = ThemeColor.palette16(Palette16.BLUE)
_ORANGE1 = ThemeColor.palette256(214)
_DARK_BLUE = ThemeColor.palette256(18)


@dataclass(eq=False)
class Theme:
    """A named colour scheme. Themes are identified by name alone."""

    name: str = "Default"

    text_base: ThemeColor = _WHITE
    text_primary: ThemeColor = _GRAY_LIGHT
    text_secondary: ThemeColor = _GRAY_DARK
    text_error: ThemeColor = field(default_factory=lambda: ThemeColor.palette16(Palette16.RED_LIGHT))
    text_success: ThemeColor = field(default_factory=lambda: ThemeColor.palette16(Palette16.GREEN_LIGHT))
    text_warning: ThemeColor = field(default_factory=lambda: ThemeColor.palette16(Palette16.YELLOW_LIGHT))
    text_info: ThemeColor = field(default_factory=lambda: ThemeColor.palette16(Palette16.BLUE_LIGHT))
    text_accent: ThemeColor = _ORANGE1

    bg_base: ThemeColor = _BLACK
    bg_primary: ThemeColor = _BLACK
    bg_secondary: ThemeColor = _GRAY_DARK
    bg_selected: ThemeColor = _BLUE
    bg_active: ThemeColor = _DARK_BLUE

    border_window: ThemeColor = _WHITE
    border_primary: ThemeColor = _GRAY_LIGHT
    border_focused: ThemeColor = _BLUE

    text_window_header: ThemeColor = _WHITE
    border_window_header: ThemeColor = _WHITE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Theme):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def empty(self) -> bool:
        """True when the theme has no name."""
        return not self.name