"""Show generated colours as a terminal table or dump them as JSON."""

from __future__ import annotations

import enum
import json
import re
from typing import Any

from .colormath import Argb
from .format import Rgb, rgb_from_argb
from .scheme import Schemes

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
_SWATCH = "  "


class Format(enum.Enum):
    """Notations colours can be dumped in."""

    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    STRIP = "strip"


def _num(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _css_hsl(color: Rgb, with_alpha: bool) -> str:
    hsl = color.to_hsl()
    h, s, l = (round(float(v)) for v in (hsl.hue, hsl.saturation, hsl.lightness))
    if with_alpha:
        return f"hsla({h},{s}%,{l}%,{_num(color.alpha)})"
    return f"hsl({h},{s}%,{l}%)"


def _formatter(fmt: Format):
    match fmt:
        case Format.RGB:
            return lambda c: f"rgb({float(c.red)!r}, {float(c.green)!r}, {float(c.blue)!r})"
        case Format.RGBA:
            return lambda c: (
                f"rgba({float(c.red)!r}, {float(c.green)!r}, "
                f"{float(c.blue)!r}, {float(c.alpha)!r})"
            )
        case Format.HSL:
            return lambda c: _css_hsl(c, False)
        case Format.HSLA:
            return lambda c: _css_hsl(c, True)
        case Format.HEX:
            return lambda c: c.to_hex_string()
        case Format.STRIP:
            return lambda c: c.to_hex_string().replace("#", "")
    raise ValueError(f"unknown format {fmt!r}")


def dump_json(schemes: Schemes, source_color: Argb, fmt: Format | str) -> dict[str, Any]:
    """Print the colours as JSON in the given notation and return the document."""
    formatter = _formatter(Format(fmt))
    light: dict[str, str] = {}
    dark: dict[str, str] = {}
    for (field, color_light), (_, color_dark) in zip(schemes.light, schemes.dark):
        light[field] = formatter(rgb_from_argb(color_light))
        dark[field] = formatter(rgb_from_argb(color_dark))
    light["source_color"] = formatter(rgb_from_argb(source_color))
    document = {"colors": {"light": light, "dark": dark}}
    print(json.dumps(document))
    return document


def _swatch(color: Rgb) -> str:
    r, g, b = int(color.red), int(color.green), int(color.blue)
    foreground = 30 if r + g + b > 500 else 37
    return f"\x1b[{foreground};48;2;{r};{g};{b}m{_SWATCH}\x1b[0m"


def _visible_len(text: str) -> int:
    return len(_ANSI_RE.sub("", text))


def _pad(text: str, width: int, center: bool) -> str:
    gap = width - _visible_len(text)
    if not center:
        return text + " " * gap
    left = gap // 2
    return " " * left + text + " " * (gap - left)


def _row(field: str, light: Rgb, dark: Rgb) -> list[str]:
    return [
        field,
        light.to_hex_string().upper(),
        _swatch(light),
        dark.to_hex_string().upper(),
        _swatch(dark),
    ]


def render_table(schemes: Schemes, source_color: Argb) -> str:
    """The colour table as text with ANSI colour swatches."""
    titles = ["NAME", "LIGHT", "LIGHT", "DARK", "DARK"]
    rows = [
        _row(field, rgb_from_argb(light), rgb_from_argb(dark))
        for (field, light), (_, dark) in zip(schemes.light, schemes.dark)
    ]
    source = rgb_from_argb(source_color)
    rows.append(_row("source_color", source, source))

    widths = [
        max(_visible_len(cells[i]) for cells in [titles, *rows]) for i in range(len(titles))
    ]

    def rule(left: str, middle: str, right: str) -> str:
        return left + middle.join("─" * (w + 2) for w in widths) + right

    def line(cells: list[str], centered: list[bool]) -> str:
        parts = (
            f" {_pad(cell, w, c)} " for cell, w, c in zip(cells, widths, centered)
        )
        return "│" + "│".join(parts) + "│"

    row_align = [False, True, True, True, True]
    lines = [
        rule("╭", "┬", "╮"),
        line(titles, [True] * len(titles)),
        rule("├", "┼", "┤"),
        *(line(cells, row_align) for cells in rows),
        rule("╰", "┴", "╯"),
    ]
    return "\n".join(lines)


def show_color(schemes: Schemes, source_color: Argb) -> None:
    """Print the colour table."""
    print(render_table(schemes, source_color))