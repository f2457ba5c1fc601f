"""Theme colors."""

import re
from dataclasses import dataclass
from typing import NamedTuple

from brandset.config.defaults import DEFAULT_MAIN_COLOR, SECONDARY_LIGHTEN

_HEX_RE = re.compile(r"#?([0-9A-Fa-f]{6})")


class Color(NamedTuple):
    """An RGB color with 0-255 channels."""

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a 6-digit hex string, with or without a leading '#'."""
        match = _HEX_RE.fullmatch(value.strip())
        if not match:
            raise ValueError(f"Invalid hex color: {value!r}")
        digits = match.group(1)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def lighten(self, factor: float) -> "Color":
        """Move every channel toward white by `factor` (0..1)."""
        return Color(*(round(c + (255 - c) * factor) for c in self))

    def to_hex(self) -> str:
        return "#{:02X}{:02X}{:02X}".format(*self)

    def to_css(self) -> str:
        return self.to_hex()


@dataclass(frozen=True)
class Theme:
    """Primary color and the secondary color derived from it."""

    primary: Color

    @property
    def secondary(self) -> Color:
        return self.primary.lighten(SECONDARY_LIGHTEN)

    @classmethod
    def from_hex(cls, value: str = DEFAULT_MAIN_COLOR) -> "Theme":
        return cls(primary=Color.from_hex(value))


def css_color(value) -> str:
    """Format a Color or a hex string for CSS."""
    if isinstance(value, Color):
        return value.to_css()
    if isinstance(value, str) and _HEX_RE.fullmatch(value.strip()):
        return Color.from_hex(value).to_css()
    return str(value)
