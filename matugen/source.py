"""Source colours, custom colour definitions and colour distance."""

from __future__ import annotations

import enum
import logging
import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .colormath import Argb, lab_from_argb
from .format import Hsl, Rgb

log = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class ColorFormat(enum.Enum):
    """Notations a source colour may be given in."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"


@dataclass(frozen=True)
class ImageSource:
    """Use an image file as the colour source."""

    path: str | Path


@dataclass(frozen=True)
class ColorSource:
    """Use a colour string in the given notation as the colour source."""

    format: ColorFormat
    string: str


@dataclass(frozen=True)
class ColorDefinition:
    """A named colour that other colours may be compared against."""

    name: str
    color: str


@dataclass(frozen=True)
class CustomColor:
    """A user colour resolved to ARGB, with whether to blend it with the source."""

    name: str
    value: Argb
    blend: bool


def argb_from_str(string: str) -> Argb:
    """Parse a hex colour (``#rgb``, ``#rrggbb`` or without ``#``) as opaque ARGB."""
    match = _HEX_RE.match(string.strip())
    if match is None:
        raise ValueError(f"invalid hex color: {string!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return (255, r, g, b)


@dataclass(frozen=True)
class OwnCustomColor:
    """A custom colour as written in the configuration."""

    color: str
    blend: bool = True

    @classmethod
    def from_value(cls, value: Any) -> OwnCustomColor:
        """Accept either a colour string or a table with ``color`` and ``blend``."""
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, Mapping):
            color = value.get("color")
            blend = value.get("blend")
            if isinstance(color, str) and isinstance(blend, bool):
                return cls(color, blend)
        raise ValueError(f"invalid custom color: {value!r}")

    def to_custom_color(self, name: str) -> CustomColor:
        return CustomColor(name=name, value=argb_from_str(self.color), blend=self.blend)


def _as_u8(x: float) -> int:
    if math.isnan(x):
        return 0
    return int(min(255.0, max(0.0, math.trunc(x))))


def get_source_color_from_color(kind: ColorFormat | str, string: str) -> Argb:
    """Resolve a colour string in the given notation to opaque ARGB."""
    match ColorFormat(kind):
        case ColorFormat.HEX:
            return argb_from_str(string)
        case ColorFormat.RGB:
            rgb = Rgb.parse(string)
        case ColorFormat.HSL:
            rgb = Hsl.parse(string).to_rgb()
    return (255, _as_u8(rgb.red), _as_u8(rgb.green), _as_u8(rgb.blue))


def get_color_distance_lab(c1: str, c2: str) -> float:
    """Euclidean distance between two hex colours in L*a*b*."""
    l1, a1, b1 = lab_from_argb(argb_from_str(c1))
    l2, a2, b2 = lab_from_argb(argb_from_str(c2))
    return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def get_color_distance(c1: Rgb, c2: Rgb) -> float:
    """Weighted RGB distance.

    The first colour's green and blue are read in swapped order.
    """
    r1, g1, b1 = int(c1.red), int(c1.blue), int(c1.green)
    r2, g2, b2 = int(c2.red), int(c2.green), int(c2.blue)
    rmean = float(int((r1 + r2) / 2))
    weight_r = 2.0 + rmean / 256.0
    weight_g = 4.0
    weight_b = 2.0 + (255.0 - rmean) / 256.0
    return math.sqrt(
        weight_r * (r1 - r2) ** 2 + weight_g * (g1 - g2) ** 2 + weight_b * (b1 - b2) ** 2
    )


def color_to_string(colors_to_compare: Iterable[ColorDefinition], compare_to: str) -> str:
    """Name of the colour closest to ``compare_to``; the first wins ties."""
    closest_distance: float | None = None
    closest_color = ""
    for definition in colors_to_compare:
        distance = get_color_distance_lab(definition.color, compare_to)
        if closest_distance is None or closest_distance > distance:
            closest_distance = distance
            closest_color = definition.name
        log.debug("distance: %s, name: %s", distance, definition.name)
    log.debug("closest distance: %s, closest color: %s", closest_distance, closest_color)
    return closest_color