"""RGB and HSL colour values, their CSS-like formatting and format detection."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

_PRECISION = 9
_FUNC_RE = re.compile(r"^\s*([a-zA-Z]+)\s*\((.*)\)\s*$")
_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _split_args(string: str, names: tuple[str, ...]) -> list[str]:
    match = _FUNC_RE.match(string)
    if match is None or match.group(1).lower() not in names:
        raise ValueError(f"invalid color string: {string!r}")
    parts = [p.strip() for p in match.group(2).split(",")]
    if len(parts) not in (3, 4):
        raise ValueError(f"invalid color string: {string!r}")
    return parts


def _number(text: str, string: str) -> float:
    try:
        return float(text.rstrip("%").strip())
    except ValueError:
        raise ValueError(f"invalid color string: {string!r}") from None


def _clean(x: float) -> float:
    return round(x, _PRECISION)


@dataclass(frozen=True)
class Rgb:
    """An RGB colour with channels 0-255 and an alpha value."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_hex_str(cls, string: str) -> Rgb:
        """Parse ``#rgb``, ``#rrggbb`` or the same without ``#``."""
        match = _HEX_RE.match(string.strip())
        if match is None:
            raise ValueError(f"invalid hex color: {string!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        return cls(float(r), float(g), float(b))

    @classmethod
    def parse(cls, string: str) -> Rgb:
        """Parse ``rgb(r, g, b)`` or ``rgba(r, g, b, a)``."""
        parts = [_number(p, string) for p in _split_args(string, ("rgb", "rgba"))]
        return cls(*parts)

    def to_hex_string(self) -> str:
        channels = (
            int(min(255.0, max(0.0, math.floor(c + 0.5))))
            for c in (self.red, self.green, self.blue)
        )
        return "#" + "".join(f"{c:02x}" for c in channels)

    def to_hsl(self) -> Hsl:
        r, g, b = self.red / 255.0, self.green / 255.0, self.blue / 255.0
        mx, mn = max(r, g, b), min(r, g, b)
        lightness = (mx + mn) / 2.0
        if mx == mn:
            hue = saturation = 0.0
        else:
            d = mx - mn
            saturation = d / (2.0 - mx - mn) if lightness > 0.5 else d / (mx + mn)
            if mx == r:
                hue = (g - b) / d + (6.0 if g < b else 0.0)
            elif mx == g:
                hue = (b - r) / d + 2.0
            else:
                hue = (r - g) / d + 4.0
            hue *= 60.0
        return Hsl(
            _clean(hue), _clean(saturation * 100.0), _clean(lightness * 100.0), self.alpha
        )

    def grayscale_simple(self) -> Rgb:
        avg = (self.red + self.green + self.blue) / 3.0
        return replace(self, red=avg, green=avg, blue=avg)

    def invert(self) -> Rgb:
        return replace(
            self, red=255.0 - self.red, green=255.0 - self.green, blue=255.0 - self.blue
        )

    def adjust_hue(self, amount: float) -> Rgb:
        return self.to_hsl().adjust_hue(amount).to_rgb()

    def lighten(self, amount: float) -> Rgb:
        return self.to_hsl().lighten(amount).to_rgb()


@dataclass(frozen=True)
class Hsl:
    """An HSL colour: hue in degrees, saturation and lightness in percent."""

    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0

    @classmethod
    def parse(cls, string: str) -> Hsl:
        """Parse ``hsl(h, s%, l%)`` or ``hsla(h, s%, l%, a)``."""
        parts = [_number(p, string) for p in _split_args(string, ("hsl", "hsla"))]
        return cls(*parts)

    def to_rgb(self) -> Rgb:
        h = (self.hue % 360.0) / 360.0
        s = self.saturation / 100.0
        l = self.lightness / 100.0
        if s == 0.0:
            r = g = b = l
        else:
            q = l * (1.0 + s) if l < 0.5 else l + s - l * s
            p = 2.0 * l - q
            r = _hue_to_channel(p, q, h + 1.0 / 3.0)
            g = _hue_to_channel(p, q, h)
            b = _hue_to_channel(p, q, h - 1.0 / 3.0)
        return Rgb(_clean(r * 255.0), _clean(g * 255.0), _clean(b * 255.0), self.alpha)

    def grayscale_simple(self) -> Hsl:
        return self.to_rgb().grayscale_simple().to_hsl()

    def invert(self) -> Hsl:
        return self.to_rgb().invert().to_hsl()

    def adjust_hue(self, amount: float) -> Hsl:
        return replace(self, hue=(self.hue + amount) % 360.0)

    def lighten(self, amount: float) -> Hsl:
        return replace(self, lightness=min(100.0, max(0.0, self.lightness + amount)))


def _hue_to_channel(p: float, q: float, t: float) -> float:
    t %= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def _as_u8(x: float) -> int:
    """Truncate toward zero and saturate to 0-255."""
    if math.isnan(x):
        return 0
    return int(min(255.0, max(0.0, math.trunc(x))))


def rgb_from_argb(color: Sequence[int]) -> Rgb:
    """Build an Rgb from an ARGB tuple ``(alpha, red, green, blue)``."""
    a, r, g, b = color
    return Rgb(float(r), float(g), float(b), float(a))


def format_hex(color: Rgb) -> str:
    return color.to_hex_string()


def format_hex_stripped(color: Rgb) -> str:
    return color.to_hex_string()[1:]


def format_rgb(color: Rgb) -> str:
    return f"rgb({_as_u8(color.red)}, {_as_u8(color.green)}, {_as_u8(color.blue)})"


def format_rgba(color: Rgb, divide: bool) -> str:
    alpha = color.alpha / 255.0 if divide else color.alpha
    return (
        f"rgba({_as_u8(color.red)}, {_as_u8(color.green)}, "
        f"{_as_u8(color.blue)}, {alpha:.1f})"
    )


def format_hsl(color: Hsl) -> str:
    return (
        f"hsl({_as_u8(color.hue)}, {_as_u8(color.saturation)}%, "
        f"{_as_u8(color.lightness)}%)"
    )


def format_hsla(color: Hsl, divide: bool) -> str:
    alpha = color.alpha / 255.0 if divide else color.alpha
    return (
        f"hsla({_as_u8(color.hue)}, {_as_u8(color.saturation)}%, "
        f"{_as_u8(color.lightness)}%, {alpha:.1f})"
    )


def parse_color(string: str) -> str | None:
    """Detect the notation of a colour string.

    Returns ``"hex"``, ``"hex_stripped"``, the function name of a
    ``name(...)`` notation, or None.
    """
    if string.startswith("#"):
        return "hex"
    index = string.find("(")
    if index != -1 and string.endswith(")"):
        return string[:-1][:index].rstrip()
    if len(string.encode("utf-8")) == 6:
        return "hex_stripped"
    return None


def check_string_value(value: Any) -> str | None:
    """Return ``value`` if it is a string, otherwise None."""
    return value if isinstance(value, str) else None