"""Render data built from colour schemes, and the standard template filters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .colormath import Argb
from .engine import Engine, TemplateError
from .filters import grayscale, invert, set_alpha, set_hue, set_lightness
from .format import (
    format_hex,
    format_hex_stripped,
    format_hsl,
    format_hsla,
    format_rgb,
    format_rgba,
    rgb_from_argb,
)
from .scheme import Schemes, SchemesEnum


def _require_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, found {type(value).__name__}")
    return value


def _to_upper(value: Any) -> str:
    return _require_str(value).upper()


def _to_lower(value: Any) -> str:
    return _require_str(value).lower()


def _replace(value: Any, old: Any, new: Any) -> str:
    return _require_str(value).replace(_require_str(old), _require_str(new))


def add_engine_filters(engine: Engine) -> None:
    """Register the colour and string filters on ``engine``."""
    engine.add_filter("set_lightness", set_lightness)
    engine.add_filter("set_alpha", set_alpha)
    engine.add_filter("set_hue", set_hue)
    engine.add_filter("grayscale", grayscale)
    engine.add_filter("invert", invert)
    engine.add_filter("to_upper", _to_upper)
    engine.add_filter("to_lower", _to_lower)
    engine.add_filter("replace", _replace)


def render_template(engine: Engine, name: str, render_data: Any, path: str | None = None) -> str:
    """Render a stored template, prefixing errors with its name and path."""
    try:
        return engine.render(name, render_data)
    except TemplateError as error:
        raise TemplateError(f"[{name} - {path or ''}]\n{error}") from error


def generate_color_strings(color: Argb) -> dict[str, str]:
    """Every notation of one colour, as strings."""
    base = rgb_from_argb(color)
    hsl = base.to_hsl()
    return {
        "hex": format_hex(base),
        "hex_stripped": format_hex_stripped(base),
        "rgb": format_rgb(base),
        "rgba": format_rgba(base, True),
        "hsl": format_hsl(hsl),
        "hsla": format_hsla(hsl, True),
        "red": str(int(base.red)),
        "green": str(int(base.green)),
        "blue": str(int(base.blue)),
        "alpha": str(int(base.alpha)),
        "hue": repr(float(hsl.hue)),
        "saturation": repr(float(hsl.saturation)),
        "lightness": repr(float(hsl.lightness)),
    }


def generate_single_color(
    field: str,
    source_color: Argb,
    default_scheme: SchemesEnum | str,
    color_light: Argb,
    color_dark: Argb,
) -> dict[str, dict[str, str]]:
    """Light, dark and default notations of one colour role."""
    if field == "source_color":
        strings = generate_color_strings(source_color)
        return {"default": dict(strings), "light": dict(strings), "dark": dict(strings)}
    default = color_light if SchemesEnum(default_scheme) is SchemesEnum.LIGHT else color_dark
    return {
        "default": generate_color_strings(default),
        "light": generate_color_strings(color_light),
        "dark": generate_color_strings(color_dark),
    }


def generate_colors(
    schemes: Schemes, source_color: Argb, default_scheme: SchemesEnum | str
) -> dict[str, dict[str, dict[str, str]]]:
    """Notations of every role in the schemes, plus the source colour."""
    colors = {
        field: generate_single_color(field, source_color, default_scheme, light, dark)
        for (field, light), (_, dark) in zip(schemes.light, schemes.dark)
    }
    colors["source_color"] = generate_single_color(
        "source_color", source_color, default_scheme, source_color, source_color
    )
    return colors


def get_render_data(
    schemes: Schemes,
    source_color: Argb,
    default_scheme: SchemesEnum | str,
    custom_keywords: Mapping[str, str] | None,
    image: Any,
) -> dict[str, Any]:
    """The data templates are rendered against."""
    custom = {str(name): str(value) for name, value in (custom_keywords or {}).items()}
    return {
        "colors": generate_colors(schemes, source_color, default_scheme),
        "image": None if image is None else str(image),
        "custom": custom,
    }