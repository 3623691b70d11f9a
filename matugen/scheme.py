"""Light and dark colour schemes, including user-defined custom colours."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .colormath import Argb
from .source import CustomColor


class SchemeTypes(enum.Enum):
    """The kinds of dynamic scheme a source colour can be turned into."""

    SCHEME_CONTENT = "scheme-content"
    SCHEME_EXPRESSIVE = "scheme-expressive"
    SCHEME_FIDELITY = "scheme-fidelity"
    SCHEME_FRUIT_SALAD = "scheme-fruit-salad"
    SCHEME_MONOCHROME = "scheme-monochrome"
    SCHEME_NEUTRAL = "scheme-neutral"
    SCHEME_RAINBOW = "scheme-rainbow"
    SCHEME_TONAL_SPOT = "scheme-tonal-spot"


class SchemesEnum(enum.Enum):
    """The two scheme variants."""

    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class ColorGroup:
    """The four roles generated for one custom colour in one variant."""

    color: Argb
    on_color: Argb
    color_container: Argb
    on_color_container: Argb


@dataclass(frozen=True)
class CustomColorGroup:
    """A custom colour with its (possibly harmonized) value and role groups."""

    color: CustomColor
    value: Argb
    light: ColorGroup
    dark: ColorGroup


SchemeEntries = list[tuple[str, Argb]]


@dataclass
class Schemes:
    """Role names paired with colours, sorted by name, for both variants."""

    light: SchemeEntries = field(default_factory=list)
    dark: SchemeEntries = field(default_factory=list)


def _scheme_items(scheme: Any) -> Iterable[tuple[str, Argb]]:
    if dataclasses.is_dataclass(scheme) and not isinstance(scheme, type):
        return ((f.name, getattr(scheme, f.name)) for f in dataclasses.fields(scheme))
    if isinstance(scheme, Mapping):
        return scheme.items()
    return iter(scheme)


def custom_color_entries(
    group: CustomColorGroup, variant: SchemesEnum | str
) -> SchemeEntries:
    """The six named entries a custom colour contributes to one variant."""
    variant = SchemesEnum(variant)
    roles = group.light if variant is SchemesEnum.LIGHT else group.dark
    name = group.color.name
    raw = group.color.value
    return [
        (f"{name}_source", raw),
        (f"{name}_value", raw),
        (name, roles.color),
        (f"on_{name}", roles.on_color),
        (f"{name}_container", roles.color_container),
        (f"on_{name}_container", roles.on_color_container),
    ]


def get_custom_color_schemes(
    scheme_dark: Any,
    scheme_light: Any,
    custom_groups: Iterable[CustomColorGroup] | None,
) -> Schemes:
    """Merge the base schemes with custom colours into sorted, de-duplicated sets."""
    groups = list(custom_groups or ())
    dark = set(_scheme_items(scheme_dark))
    light = set(_scheme_items(scheme_light))
    for group in groups:
        dark.update(custom_color_entries(group, SchemesEnum.DARK))
        light.update(custom_color_entries(group, SchemesEnum.LIGHT))
    return Schemes(light=sorted(light), dark=sorted(dark))