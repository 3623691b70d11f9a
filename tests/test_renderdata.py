import pytest

from matugen.engine import Engine, TemplateError
from matugen.filters import invert
from matugen.format import format_hex, format_hsl, format_rgb, rgb_from_argb
from matugen.renderdata import (
    add_engine_filters,
    generate_color_strings,
    generate_colors,
    generate_single_color,
    get_render_data,
    render_template,
)
from matugen.scheme import Schemes, SchemesEnum

LIGHT = (255, 10, 20, 30)
DARK = (255, 200, 100, 50)
SOURCE = (255, 66, 133, 244)

FIELDS = {
    "hex", "hex_stripped", "rgb", "rgba", "hsl", "hsla", "red", "green",
    "blue", "alpha", "hue", "saturation", "lightness",
}


def make_schemes():
    return Schemes(light=[("primary", LIGHT)], dark=[("primary", DARK)])


def test_color_strings_fields_and_consistency():
    strings = generate_color_strings(SOURCE)
    base = rgb_from_argb(SOURCE)
    assert set(strings) == FIELDS
    assert strings["hex"] == format_hex(base)
    assert strings["hex"] == "#" + strings["hex_stripped"]
    assert strings["rgb"] == format_rgb(base)
    assert strings["hsl"] == format_hsl(base.to_hsl())
    assert (strings["alpha"], strings["red"], strings["green"], strings["blue"]) == (
        "255", "66", "133", "244",
    )


def test_opaque_alpha_is_divided():
    assert generate_color_strings(SOURCE)["rgba"].endswith(", 1.0)")


@pytest.mark.parametrize("mode,expected", [(SchemesEnum.LIGHT, LIGHT), (SchemesEnum.DARK, DARK)])
def test_default_follows_mode(mode, expected):
    variants = generate_single_color("primary", SOURCE, mode, LIGHT, DARK)
    assert variants["default"] == generate_color_strings(expected)
    assert variants["light"] == generate_color_strings(LIGHT)
    assert variants["dark"] == generate_color_strings(DARK)


def test_source_color_field_ignores_roles():
    variants = generate_single_color("source_color", SOURCE, SchemesEnum.DARK, LIGHT, DARK)
    expected = generate_color_strings(SOURCE)
    assert variants["light"] == variants["dark"] == variants["default"] == expected


def test_generate_colors_adds_source():
    colors = generate_colors(make_schemes(), SOURCE, SchemesEnum.DARK)
    assert set(colors) == {"primary", "source_color"}
    assert colors["source_color"]["default"]["hex"] == generate_color_strings(SOURCE)["hex"]


def test_render_data_shape():
    data = get_render_data(make_schemes(), SOURCE, "light", {"k": "v"}, "/tmp/img.png")
    assert data["image"] == "/tmp/img.png"
    assert data["custom"] == {"k": "v"}
    assert data["colors"]["primary"]["default"] == generate_color_strings(LIGHT)


def test_render_data_without_extras():
    data = get_render_data(make_schemes(), SOURCE, SchemesEnum.DARK, None, None)
    assert data["custom"] == {}
    assert data["image"] is None


def filtered_engine():
    engine = Engine()
    add_engine_filters(engine)
    return engine


def test_string_filters():
    engine = filtered_engine()
    template = engine.compile('{{ s | to_upper }} {{ s | to_lower }} {{ s | replace: "-", "_" }}')
    assert template.render({"s": "aB-c"}) == "AB-C ab-c aB_c"


def test_color_filter_matches_direct_call():
    engine = filtered_engine()
    assert engine.compile("{{ c | invert }}").render({"c": "#102030"}) == invert("#102030")


def test_filter_error_becomes_template_error():
    engine = filtered_engine()
    with pytest.raises(TemplateError):
        engine.compile("{{ c | set_alpha: 0.5 }}").render({"c": "#102030"})


def test_full_template_render():
    engine = filtered_engine()
    engine.add_template("t", "{{ colors.primary.dark.hex }}")
    data = get_render_data(make_schemes(), SOURCE, SchemesEnum.DARK, None, None)
    assert render_template(engine, "t", data, "/x/t") == generate_color_strings(DARK)["hex"]


def test_render_template_error_is_prefixed():
    engine = filtered_engine()
    engine.add_template("t", "{{ nothing }}")
    with pytest.raises(TemplateError) as info:
        render_template(engine, "t", {}, "/path/t.txt")
    assert str(info.value).startswith("[t - /path/t.txt]\n")