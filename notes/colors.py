"""Color tags and the custom-color hex codec."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_HEX_RE = re.compile(r"#?([0-9A-Fa-f]{6})")


@dataclass(frozen=True)
class RGB:
    """An sRGB color with one byte per channel."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{name} channel must be an int in 0..255, got {value!r}")

    @classmethod
    def from_unit(cls, red: float, green: float, blue: float) -> RGB:
        """Build a color from 0.0–1.0 float channels (clamped, truncated)."""

        def _scale(x: float) -> int:
            return int(min(max(x, 0.0), 1.0) * 255)

        return cls(_scale(red), _scale(green), _scale(blue))


BLACK = RGB(0, 0, 0)


def parse_hex(text: str | None) -> RGB | None:
    """Decode ``RRGGBB`` or ``#RRGGBB``. Returns None for anything else."""
    if not text:
        return None
    match = _HEX_RE.fullmatch(text.strip())
    if match is None:
        return None
    value = int(match.group(1), 16)
    return RGB((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def to_hex(color: RGB) -> str:
    """Encode a color as six uppercase hex digits, no leading ``#``."""
    return f"{color.red:02X}{color.green:02X}{color.blue:02X}"


class ColorTag(str, Enum):
    """Visual category attached to a note."""

    NONE = "none"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    CUSTOM = "custom"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def rgb(self) -> RGB | None:
        """Fixed display color. ``NONE`` is transparent; ``CUSTOM`` is the fallback."""
        return _PALETTE[self]


_DISPLAY_NAMES: dict[ColorTag, str] = {
    ColorTag.NONE: "No Tag",
    ColorTag.RED: "Red",
    ColorTag.ORANGE: "Orange",
    ColorTag.YELLOW: "Yellow",
    ColorTag.GREEN: "Green",
    ColorTag.BLUE: "Blue",
    ColorTag.PURPLE: "Purple",
    ColorTag.PINK: "Pink",
    ColorTag.CUSTOM: "Custom",
}

# System palette (light appearance)
_PALETTE: dict[ColorTag, RGB | None] = {
    ColorTag.NONE: None,
    ColorTag.RED: RGB(255, 59, 48),
    ColorTag.ORANGE: RGB(255, 149, 0),
    ColorTag.YELLOW: RGB(255, 204, 0),
    ColorTag.GREEN: RGB(52, 199, 89),
    ColorTag.BLUE: RGB(0, 122, 255),
    ColorTag.PURPLE: RGB(175, 82, 222),
    ColorTag.PINK: RGB(255, 45, 85),
    ColorTag.CUSTOM: BLACK,
}
