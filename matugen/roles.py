"""Material colour roles derived from the tonal palettes of a core palette."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Protocol

from .colormath import Argb, format_argb_as_rgb

_BLANK: Argb = (0, 0, 0, 0)


class TonalPalette(Protocol):
    """A palette that yields an ARGB colour for a tone between 0 and 100."""

    def tone(self, tone: int) -> Argb: ...


class CorePalette(Protocol):
    """The six key palettes a colour scheme is built from."""

    a1: TonalPalette
    a2: TonalPalette
    a3: TonalPalette
    n1: TonalPalette
    n2: TonalPalette
    error: TonalPalette


RoleSpec = dict[str, tuple[str, int]]


def _resolve(core: CorePalette, spec: RoleSpec) -> dict[str, Argb]:
    return {
        role: getattr(core, palette).tone(tone) for role, (palette, tone) in spec.items()
    }


def _as_rgb_dict(instance: object) -> dict[str, str]:
    return {f.name: format_argb_as_rgb(getattr(instance, f.name)) for f in fields(instance)}


_SCHEME_LIGHT: RoleSpec = {
    "primary": ("a1", 40),
    "primary_fixed": ("a1", 90),
    "primary_fixed_dim": ("a1", 80),
    "on_primary": ("a1", 100),
    "on_primary_fixed": ("a1", 10),
    "on_primary_fixed_variant": ("a1", 30),
    "primary_container": ("a1", 90),
    "on_primary_container": ("a1", 10),
    "secondary": ("a2", 40),
    "secondary_fixed": ("a2", 90),
    "secondary_fixed_dim": ("a2", 80),
    "on_secondary": ("a2", 100),
    "on_secondary_fixed": ("a2", 10),
    "on_secondary_fixed_variant": ("a2", 30),
    "secondary_container": ("a2", 90),
    "on_secondary_container": ("a2", 10),
    "tertiary": ("a3", 40),
    "tertiary_fixed": ("a3", 90),
    "tertiary_fixed_dim": ("a3", 80),
    "on_tertiary": ("a3", 100),
    "on_tertiary_fixed": ("a3", 10),
    "on_tertiary_fixed_variant": ("a3", 30),
    "tertiary_container": ("a3", 90),
    "on_tertiary_container": ("a3", 10),
    "error": ("error", 40),
    "on_error": ("error", 100),
    "error_container": ("error", 90),
    "on_error_container": ("error", 10),
    "surface": ("n1", 98),
    "on_surface": ("n1", 10),
    "on_surface_variant": ("n2", 30),
    "outline": ("n2", 50),
    "outline_variant": ("n2", 80),
    "shadow": ("n1", 0),
    "scrim": ("n1", 0),
    "inverse_surface": ("n1", 20),
    "inverse_on_surface": ("n1", 95),
    "inverse_primary": ("a1", 80),
    "surface_dim": ("n1", 87),
    "surface_bright": ("n1", 98),
    "surface_container_lowest": ("n1", 100),
    "surface_container_low": ("n1", 96),
    "surface_container": ("n1", 94),
    "surface_container_high": ("n1", 92),
    "surface_container_highest": ("n1", 90),
}

_SCHEME_DARK: RoleSpec = {
    "primary": ("a1", 80),
    "primary_fixed": ("a1", 90),
    "primary_fixed_dim": ("a1", 80),
    "on_primary": ("a1", 20),
    "on_primary_fixed": ("a1", 10),
    "on_primary_fixed_variant": ("a1", 30),
    "primary_container": ("a1", 30),
    "on_primary_container": ("a1", 90),
    "secondary": ("a2", 80),
    "secondary_fixed": ("a2", 90),
    "secondary_fixed_dim": ("a2", 80),
    "on_secondary": ("a2", 20),
    "on_secondary_fixed": ("a2", 10),
    "on_secondary_fixed_variant": ("a2", 30),
    "secondary_container": ("a2", 30),
    "on_secondary_container": ("a2", 90),
    "tertiary": ("a3", 80),
    "tertiary_fixed": ("a3", 90),
    "tertiary_fixed_dim": ("a3", 80),
    "on_tertiary": ("a3", 20),
    "on_tertiary_fixed": ("a3", 10),
    "on_tertiary_fixed_variant": ("a3", 30),
    "tertiary_container": ("a3", 30),
    "on_tertiary_container": ("a3", 90),
    "error": ("error", 80),
    "on_error": ("error", 20),
    "error_container": ("error", 30),
    "on_error_container": ("error", 80),
    "surface": ("n1", 6),
    "on_surface": ("n1", 90),
    "on_surface_variant": ("n2", 80),
    "outline": ("n2", 60),
    "outline_variant": ("n2", 30),
    "shadow": ("n1", 0),
    "scrim": ("n1", 0),
    "inverse_surface": ("n1", 90),
    "inverse_on_surface": ("n1", 20),
    "inverse_primary": ("a1", 40),
    "surface_dim": ("n1", 6),
    "surface_bright": ("n1", 24),
    "surface_container_lowest": ("n1", 4),
    "surface_container_low": ("n1", 10),
    "surface_container": ("n1", 12),
    "surface_container_high": ("n1", 17),
    "surface_container_highest": ("n1", 22),
}

_SCHEME_PURE_DARK: RoleSpec = {
    **_SCHEME_DARK,
    "surface": ("n1", 0),
    "surface_dim": ("n1", 87),
    "surface_bright": ("n1", 98),
    "surface_container_lowest": ("n1", 100),
    "surface_container_low": ("n1", 96),
    "surface_container": ("n1", 94),
    "surface_container_high": ("n1", 92),
    "surface_container_highest": ("n1", 90),
}

_ANDROID_LIGHT: RoleSpec = {
    "color_accent_primary": ("a1", 90),
    "color_accent_primary_variant": ("a1", 40),
    "color_accent_secondary": ("a2", 90),
    "color_accent_secondary_variant": ("a2", 40),
    "color_accent_tertiary": ("a3", 90),
    "color_accent_tertiary_variant": ("a3", 40),
    "text_color_primary": ("n1", 10),
    "text_color_secondary": ("n2", 30),
    "text_color_tertiary": ("n2", 50),
    "text_color_primary_inverse": ("n1", 95),
    "text_color_secondary_inverse": ("n1", 80),
    "text_color_tertiary_inverse": ("n1", 60),
    "color_background": ("n1", 95),
    "color_background_floating": ("n1", 98),
    "color_surface": ("n1", 98),
    "color_surface_variant": ("n1", 90),
    "color_surface_highlight": ("n1", 100),
    "surface_header": ("n1", 90),
    "under_surface": ("n1", 0),
    "off_state": ("n1", 20),
    "accent_surface": ("a2", 95),
    "text_primary_on_accent": ("n1", 10),
    "text_secondary_on_accent": ("n2", 30),
    "volume_background": ("n1", 25),
    "scrim": ("n1", 80),
}

_ANDROID_DARK: RoleSpec = {
    "color_accent_primary": ("a1", 90),
    "color_accent_primary_variant": ("a1", 70),
    "color_accent_secondary": ("a2", 90),
    "color_accent_secondary_variant": ("a2", 70),
    "color_accent_tertiary": ("a3", 90),
    "color_accent_tertiary_variant": ("a3", 70),
    "text_color_primary": ("n1", 95),
    "text_color_secondary": ("n2", 80),
    "text_color_tertiary": ("n2", 60),
    "text_color_primary_inverse": ("n1", 10),
    "text_color_secondary_inverse": ("n1", 30),
    "text_color_tertiary_inverse": ("n1", 50),
    "color_background": ("n1", 10),
    "color_background_floating": ("n1", 10),
    "color_surface": ("n1", 20),
    "color_surface_variant": ("n1", 30),
    "color_surface_highlight": ("n1", 35),
    "surface_header": ("n1", 30),
    "under_surface": ("n1", 0),
    "off_state": ("n1", 20),
    "accent_surface": ("a2", 95),
    "text_primary_on_accent": ("n1", 10),
    "text_secondary_on_accent": ("n2", 30),
    "volume_background": ("n1", 25),
    "scrim": ("n1", 80),
}

_ANDROID_PURE_DARK: RoleSpec = {
    **_ANDROID_DARK,
    "color_background": ("n1", 0),
    "color_background_floating": ("n1", 0),
    "color_surface": ("n1", 5),
    "color_surface_variant": ("n1", 15),
    "color_surface_highlight": ("n1", 10),
    "surface_header": ("n1", 10),
    "volume_background": ("n1", 0),
}


@dataclass(frozen=True)
class Scheme:
    """A Material colour scheme: a mapping of colour roles to ARGB colours."""

    primary: Argb = _BLANK
    primary_fixed: Argb = _BLANK
    primary_fixed_dim: Argb = _BLANK
    on_primary: Argb = _BLANK
    on_primary_fixed: Argb = _BLANK
    on_primary_fixed_variant: Argb = _BLANK
    primary_container: Argb = _BLANK
    on_primary_container: Argb = _BLANK
    secondary: Argb = _BLANK
    secondary_fixed: Argb = _BLANK
    secondary_fixed_dim: Argb = _BLANK
    on_secondary: Argb = _BLANK
    on_secondary_fixed: Argb = _BLANK
    on_secondary_fixed_variant: Argb = _BLANK
    secondary_container: Argb = _BLANK
    on_secondary_container: Argb = _BLANK
    tertiary: Argb = _BLANK
    tertiary_fixed: Argb = _BLANK
    tertiary_fixed_dim: Argb = _BLANK
    on_tertiary: Argb = _BLANK
    on_tertiary_fixed: Argb = _BLANK
    on_tertiary_fixed_variant: Argb = _BLANK
    tertiary_container: Argb = _BLANK
    on_tertiary_container: Argb = _BLANK
    error: Argb = _BLANK
    on_error: Argb = _BLANK
    error_container: Argb = _BLANK
    on_error_container: Argb = _BLANK
    surface: Argb = _BLANK
    on_surface: Argb = _BLANK
    on_surface_variant: Argb = _BLANK
    outline: Argb = _BLANK
    outline_variant: Argb = _BLANK
    shadow: Argb = _BLANK
    scrim: Argb = _BLANK
    inverse_surface: Argb = _BLANK
    inverse_on_surface: Argb = _BLANK
    inverse_primary: Argb = _BLANK
    surface_dim: Argb = _BLANK
    surface_bright: Argb = _BLANK
    surface_container_lowest: Argb = _BLANK
    surface_container_low: Argb = _BLANK
    surface_container: Argb = _BLANK
    surface_container_high: Argb = _BLANK
    surface_container_highest: Argb = _BLANK

    @classmethod
    def light_from_core_palette(cls, core: CorePalette) -> Scheme:
        return cls(**_resolve(core, _SCHEME_LIGHT))

    @classmethod
    def dark_from_core_palette(cls, core: CorePalette) -> Scheme:
        return cls(**_resolve(core, _SCHEME_DARK))

    @classmethod
    def pure_dark_from_core_palette(cls, core: CorePalette) -> Scheme:
        return cls(**_resolve(core, _SCHEME_PURE_DARK))

    def to_dict(self) -> dict[str, str]:
        """Every role mapped to its ``#rrggbb`` string, in declaration order."""
        return _as_rgb_dict(self)


@dataclass(frozen=True)
class SchemeAndroid:
    """Android system colour roles mapped to ARGB colours."""

    color_accent_primary: Argb = _BLANK
    color_accent_primary_variant: Argb = _BLANK
    color_accent_secondary: Argb = _BLANK
    color_accent_secondary_variant: Argb = _BLANK
    color_accent_tertiary: Argb = _BLANK
    color_accent_tertiary_variant: Argb = _BLANK
    text_color_primary: Argb = _BLANK
    text_color_secondary: Argb = _BLANK
    text_color_tertiary: Argb = _BLANK
    text_color_primary_inverse: Argb = _BLANK
    text_color_secondary_inverse: Argb = _BLANK
    text_color_tertiary_inverse: Argb = _BLANK
    color_background: Argb = _BLANK
    color_background_floating: Argb = _BLANK
    color_surface: Argb = _BLANK
    color_surface_variant: Argb = _BLANK
    color_surface_highlight: Argb = _BLANK
    surface_header: Argb = _BLANK
    under_surface: Argb = _BLANK
    off_state: Argb = _BLANK
    accent_surface: Argb = _BLANK
    text_primary_on_accent: Argb = _BLANK
    text_secondary_on_accent: Argb = _BLANK
    volume_background: Argb = _BLANK
    scrim: Argb = _BLANK

    @classmethod
    def light_from_core_palette(cls, core: CorePalette) -> SchemeAndroid:
        return cls(**_resolve(core, _ANDROID_LIGHT))

    @classmethod
    def dark_from_core_palette(cls, core: CorePalette) -> SchemeAndroid:
        return cls(**_resolve(core, _ANDROID_DARK))

    @classmethod
    def pure_dark_from_core_palette(cls, core: CorePalette) -> SchemeAndroid:
        return cls(**_resolve(core, _ANDROID_PURE_DARK))

    def to_dict(self) -> dict[str, str]:
        """Every role mapped to its ``#rrggbb`` string, in declaration order."""
        return _as_rgb_dict(self)