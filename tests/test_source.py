import pytest

from matugen.format import Rgb
from matugen.source import (
    ColorDefinition,
    ColorFormat,
    ColorSource,
    CustomColor,
    ImageSource,
    OwnCustomColor,
    argb_from_str,
    color_to_string,
    get_color_distance,
    get_color_distance_lab,
    get_source_color_from_color,
)


def test_argb_from_str_with_and_without_hash():
    assert argb_from_str("#ff0000") == (255, 255, 0, 0)
    assert argb_from_str("00ff00") == (255, 0, 255, 0)
    assert argb_from_str("#00f") == (255, 0, 0, 255)


@pytest.mark.parametrize("bad", ["", "#12", "zzzzzz", "#1234567"])
def test_argb_from_str_rejects_invalid(bad):
    with pytest.raises(ValueError):
        argb_from_str(bad)


def test_source_from_hex():
    assert get_source_color_from_color(ColorFormat.HEX, "#0000ff") == (255, 0, 0, 255)


def test_source_from_rgb_string_kind():
    assert get_source_color_from_color("rgb", "rgb(10, 20, 30)") == (255, 10, 20, 30)


def test_source_from_hsl():
    assert get_source_color_from_color("hsl", "hsl(0, 100%, 50%)") == (255, 255, 0, 0)


def test_source_from_invalid_rgb_raises():
    with pytest.raises(ValueError):
        get_source_color_from_color(ColorFormat.RGB, "not a color")


def test_source_dataclasses_hold_values():
    src = ColorSource(ColorFormat.HEX, "#ffffff")
    assert get_source_color_from_color(src.format, src.string) == (255, 255, 255, 255)
    assert ImageSource("wall.png").path == "wall.png"


def test_own_custom_color_from_string_blends():
    own = OwnCustomColor.from_value("#ff0000")
    assert own == OwnCustomColor("#ff0000", True)
    assert own.to_custom_color("red") == CustomColor("red", (255, 255, 0, 0), True)


def test_own_custom_color_from_table():
    own = OwnCustomColor.from_value({"color": "00ff00", "blend": False})
    custom = own.to_custom_color("green")
    assert custom.blend is False
    assert custom.value == (255, 0, 255, 0)
    assert custom.name == "green"


@pytest.mark.parametrize("bad", [42, {"color": "#ff0000"}, {"blend": True}, None])
def test_own_custom_color_rejects_invalid(bad):
    with pytest.raises(ValueError):
        OwnCustomColor.from_value(bad)


def test_to_custom_color_invalid_hex_raises():
    with pytest.raises(ValueError):
        OwnCustomColor("nope").to_custom_color("x")


def test_lab_distance_identity_and_symmetry():
    assert get_color_distance_lab("#123456", "#123456") == pytest.approx(0.0)
    d1 = get_color_distance_lab("#ff0000", "#00ff00")
    d2 = get_color_distance_lab("#00ff00", "#ff0000")
    assert d1 == pytest.approx(d2)
    assert d1 > 0


def test_lab_distance_black_white():
    assert get_color_distance_lab("#000000", "#ffffff") == pytest.approx(100.0, abs=0.01)


def test_rgb_distance_grey_identity():
    assert get_color_distance(Rgb(50, 50, 50), Rgb(50, 50, 50)) == 0.0


def test_rgb_distance_reads_first_green_blue_swapped():
    assert get_color_distance(Rgb(0, 0, 100), Rgb(0, 100, 0)) == 0.0
    assert get_color_distance(Rgb(0, 100, 0), Rgb(0, 100, 0)) > 0


def test_color_to_string_picks_nearest():
    colors = [
        ColorDefinition("red", "#ff0000"),
        ColorDefinition("green", "#00ff00"),
        ColorDefinition("blue", "#0000ff"),
    ]
    assert color_to_string(colors, "#f01010") == "red"
    assert color_to_string(colors, "#1010f0") == "blue"


def test_color_to_string_first_wins_ties():
    colors = [ColorDefinition("one", "#ffffff"), ColorDefinition("two", "#ffffff")]
    assert color_to_string(colors, "#eeeeee") == "one"


def test_color_to_string_empty():
    assert color_to_string([], "#ffffff") == ""