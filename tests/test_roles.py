from dataclasses import fields

import pytest

from matugen.colormath import format_argb_as_rgb
from matugen.roles import Scheme, SchemeAndroid

PALETTES = ("a1", "a2", "a3", "n1", "n2", "error")


class FakeTonalPalette:
    def __init__(self, index):
        self.index = index

    def tone(self, tone):
        return (255, self.index, tone, 0)


class FakeCore:
    def __init__(self):
        for index, name in enumerate(PALETTES, start=1):
            setattr(self, name, FakeTonalPalette(index))


def decode(argb):
    """Return (palette name, tone) that produced a fake colour."""
    _, index, tone, _ = argb
    return PALETTES[index - 1], tone


@pytest.fixture
def core():
    return FakeCore()


def test_default_scheme_is_blank():
    scheme = Scheme()
    assert all(getattr(scheme, f.name) == (0, 0, 0, 0) for f in fields(scheme))


@pytest.mark.parametrize(
    "role, expected",
    [
        ("primary", ("a1", 40)),
        ("on_primary", ("a1", 100)),
        ("secondary_container", ("a2", 90)),
        ("tertiary", ("a3", 40)),
        ("error", ("error", 40)),
        ("surface", ("n1", 98)),
        ("on_surface_variant", ("n2", 30)),
        ("inverse_primary", ("a1", 80)),
        ("surface_container_highest", ("n1", 90)),
    ],
)
def test_light_scheme_roles(core, role, expected):
    scheme = Scheme.light_from_core_palette(core)
    assert decode(getattr(scheme, role)) == expected


@pytest.mark.parametrize(
    "role, expected",
    [
        ("primary", ("a1", 80)),
        ("on_primary", ("a1", 20)),
        ("primary_container", ("a1", 30)),
        ("on_error_container", ("error", 80)),
        ("surface", ("n1", 6)),
        ("outline", ("n2", 60)),
        ("surface_bright", ("n1", 24)),
        ("surface_container_lowest", ("n1", 4)),
    ],
)
def test_dark_scheme_roles(core, role, expected):
    scheme = Scheme.dark_from_core_palette(core)
    assert decode(getattr(scheme, role)) == expected


def test_pure_dark_differs_from_dark_only_in_surfaces(core):
    dark = Scheme.dark_from_core_palette(core)
    pure = Scheme.pure_dark_from_core_palette(core)
    changed = {
        f.name for f in fields(Scheme) if getattr(dark, f.name) != getattr(pure, f.name)
    }
    assert changed == {
        "surface",
        "surface_dim",
        "surface_bright",
        "surface_container_lowest",
        "surface_container_low",
        "surface_container",
        "surface_container_high",
        "surface_container_highest",
    }
    assert decode(pure.surface) == ("n1", 0)


def test_scheme_to_dict_round_trip(core):
    scheme = Scheme.light_from_core_palette(core)
    result = scheme.to_dict()
    assert list(result) == [f.name for f in fields(Scheme)]
    assert result == {
        f.name: format_argb_as_rgb(getattr(scheme, f.name)) for f in fields(Scheme)
    }


def test_scheme_to_dict_known_value():
    scheme = Scheme(primary=(255, 0xFF, 0xB4, 0xA8))
    assert scheme.to_dict()["primary"] == "#ffb4a8"
    assert scheme.to_dict()["shadow"] == "#000000"


def test_scheme_is_frozen(core):
    scheme = Scheme.light_from_core_palette(core)
    with pytest.raises(AttributeError):
        scheme.primary = (0, 0, 0, 0)
    assert decode(scheme.primary) == ("a1", 40)


@pytest.mark.parametrize(
    "role, expected",
    [
        ("color_accent_primary", ("a1", 90)),
        ("color_accent_primary_variant", ("a1", 40)),
        ("text_color_secondary", ("n2", 30)),
        ("color_surface_highlight", ("n1", 100)),
        ("accent_surface", ("a2", 95)),
        ("scrim", ("n1", 80)),
    ],
)
def test_android_light_roles(core, role, expected):
    scheme = SchemeAndroid.light_from_core_palette(core)
    assert decode(getattr(scheme, role)) == expected


@pytest.mark.parametrize(
    "role, expected",
    [
        ("color_accent_tertiary_variant", ("a3", 70)),
        ("text_color_primary", ("n1", 95)),
        ("color_background", ("n1", 10)),
        ("color_surface_highlight", ("n1", 35)),
        ("volume_background", ("n1", 25)),
    ],
)
def test_android_dark_roles(core, role, expected):
    scheme = SchemeAndroid.dark_from_core_palette(core)
    assert decode(getattr(scheme, role)) == expected


def test_android_pure_dark_changes(core):
    dark = SchemeAndroid.dark_from_core_palette(core)
    pure = SchemeAndroid.pure_dark_from_core_palette(core)
    changed = {
        f.name
        for f in fields(SchemeAndroid)
        if getattr(dark, f.name) != getattr(pure, f.name)
    }
    assert changed == {
        "color_background",
        "color_background_floating",
        "color_surface",
        "color_surface_variant",
        "color_surface_highlight",
        "surface_header",
        "volume_background",
    }
    assert decode(pure.color_surface) == ("n1", 5)
    assert decode(pure.volume_background) == ("n1", 0)


def test_android_to_dict_round_trip(core):
    scheme = SchemeAndroid.dark_from_core_palette(core)
    result = scheme.to_dict()
    assert len(result) == 25
    assert list(result)[0] == "color_accent_primary"
    assert list(result)[-1] == "scrim"
    assert all(
        result[name] == format_argb_as_rgb(getattr(scheme, name)) for name in result
    )
    assert all(value.startswith("#") and len(value) == 7 for value in result.values())