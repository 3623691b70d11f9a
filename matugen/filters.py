"""Template filters that transform colour strings in place of their notation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .format import (
    Hsl,
    Rgb,
    check_string_value,
    format_hex,
    format_hex_stripped,
    format_hsl,
    format_hsla,
    format_rgb,
    format_rgba,
    parse_color,
)

log = logging.getLogger(__name__)


class FilterError(ValueError):
    """A filter was given a value it cannot work with."""


def _require_string(value: Any) -> str:
    string = check_string_value(value)
    if string is None:
        raise FilterError(f"expected a string value, got {type(value).__name__}")
    return string


def _transform(
    string: str,
    fmt: str,
    rgb_op: Callable[[Rgb], Rgb],
    hsl_op: Callable[[Hsl], Hsl],
    divide: bool = False,
) -> str:
    match fmt:
        case "hex":
            return format_hex(rgb_op(Rgb.from_hex_str(string)))
        case "hex_stripped":
            return format_hex_stripped(rgb_op(Rgb.from_hex_str(string)))
        case "rgb":
            return format_rgb(rgb_op(Rgb.parse(string)))
        case "rgba":
            return format_rgba(rgb_op(Rgb.parse(string)), divide)
        case "hsl":
            return format_hsl(hsl_op(Hsl.parse(string)))
        case "hsla":
            return format_hsla(hsl_op(Hsl.parse(string)), divide)
        case other:
            return other


def set_alpha(value: Any, amount: float) -> str:
    """Replace the alpha of an ``rgba`` or ``hsla`` colour."""
    string = _require_string(value)
    fmt = parse_color(string)
    log.debug("Setting alpha on string %s by %s", string, amount)
    if fmt is None:
        return string
    if not 0.0 <= amount <= 1.0:
        raise FilterError("alpha must be in range [0.0 to 1.0]")
    match fmt:
        case "hex" | "hex_stripped":
            raise FilterError("cannot set alpha on hex color")
        case "rgb":
            raise FilterError("cannot set alpha on rgb color, use rgba")
        case "hsl":
            raise FilterError("cannot set alpha on hsl color, use hsla")
        case "rgba":
            return format_rgba(Rgb.parse(string).__class__(
                **{**Rgb.parse(string).__dict__, "alpha": amount}), False)
        case "hsla":
            return format_hsla(Hsl.parse(string).__class__(
                **{**Hsl.parse(string).__dict__, "alpha": amount}), False)
        case other:
            return other


def grayscale(value: Any) -> str:
    """Desaturate a colour, keeping its notation."""
    string = _require_string(value)
    fmt = parse_color(string)
    if fmt is None:
        return string
    return _transform(string, fmt, Rgb.grayscale_simple, Hsl.grayscale_simple)


def set_hue(value: Any, amount: float) -> str:
    """Rotate the hue of a colour by ``amount`` degrees."""
    string = _require_string(value)
    fmt = parse_color(string)
    log.debug("Setting hue on string %s by %s", string, amount)
    if fmt is None:
        log.error("Could not detect the format for string %r", string)
        return string
    if not -360.0 <= amount <= 360.0:
        raise FilterError("alpha must be in range [-360.0 to 360.0]")
    return _transform(
        string, fmt, lambda c: c.adjust_hue(amount), lambda c: c.adjust_hue(amount)
    )


def invert(value: Any) -> str:
    """Invert a colour, keeping its notation."""
    string = _require_string(value)
    fmt = parse_color(string)
    if fmt is None:
        return string
    return _transform(string, fmt, Rgb.invert, Hsl.invert)


def set_lightness(value: Any, amount: float) -> str:
    """Change the HSL lightness of a colour by ``amount`` percent."""
    string = _require_string(value)
    fmt = parse_color(string)
    log.debug("Setting lightness on string %s by %s", string, amount)
    if fmt is None:
        return string
    return _transform(
        string,
        fmt,
        lambda c: c.lighten(amount),
        lambda c: c.lighten(amount),
        divide=True,
    )