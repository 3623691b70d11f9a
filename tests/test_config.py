from pathlib import Path
from unittest import mock

import pytest

from matugen.config import (
    DEFAULT_CONFIG,
    ERROR_TEXT,
    Apps,
    Config,
    ConfigError,
    ConfigFile,
    WallpaperTool,
)
from matugen.scheme import SchemesEnum
from matugen.source import OwnCustomColor
from matugen.template import Template

FULL = """
[config]
reload_apps = true
set_wallpaper = false
wallpaper_tool = "Feh"
feh_options = ["--bg-fill"]
prefix = "/tmp"

[config.reload_apps_list]
kitty = true
waybar = false

[config.custom_keywords]
font = "Sans"

[config.custom_colors]
green = "#00ff00"
red = { color = "#ff0000", blend = false }

[templates.kitty]
input_path = "~/in.conf"
output_path = "~/out.conf"
mode = "Dark"
post_hook = "echo done"
"""


def test_default_config_is_empty():
    assert ConfigFile.from_toml(DEFAULT_CONFIG) == ConfigFile()


def test_full_config():
    parsed = ConfigFile.from_toml(FULL)
    config = parsed.config
    assert config.reload_apps is True
    assert config.set_wallpaper is False
    assert config.version_check is None
    assert config.wallpaper_tool is WallpaperTool.FEH
    assert config.feh_options == ["--bg-fill"]
    assert config.swww_options is None
    assert config.prefix == "/tmp"
    assert config.reload_apps_list == Apps(kitty=True, waybar=False)
    assert config.custom_keywords == {"font": "Sans"}
    assert config.custom_colors == {
        "green": OwnCustomColor("#00ff00", True),
        "red": OwnCustomColor("#ff0000", False),
    }
    assert parsed.templates == {
        "kitty": Template(
            Path("~/in.conf"), Path("~/out.conf"),
            mode=SchemesEnum.DARK, post_hook="echo done",
        )
    }


@pytest.mark.parametrize("text", [
    "[config]\n",
    "[templates]\n",
    "[config\n[templates]\n",
    '[config]\nreload_apps = "yes"\n[templates]\n',
    '[config]\nwallpaper_tool = "Hyprpaper"\n[templates]\n',
    '[config]\nfeh_options = [1]\n[templates]\n',
    "[config]\n[config.custom_colors]\nbad = 5\n[templates]\n",
    '[config]\n[templates.t]\ninput_path = "a"\n',
])
def test_invalid_documents(text):
    with pytest.raises(ConfigError) as info:
        ConfigFile.from_toml(text)
    assert ERROR_TEXT in str(info.value)


def test_read_explicit_path(tmp_path):
    path = tmp_path / "custom.toml"
    path.write_text(FULL, encoding="utf-8")
    parsed, source = ConfigFile.read(path)
    assert source == path
    assert parsed == ConfigFile.from_toml(FULL)


def test_read_missing_explicit_path(tmp_path):
    with pytest.raises(ConfigError):
        ConfigFile.read(tmp_path / "missing.toml")


def test_read_falls_back_to_defaults(tmp_path):
    with mock.patch("platformdirs.user_config_path", return_value=tmp_path):
        parsed, source = ConfigFile.read(None)
    assert source is None
    assert parsed == ConfigFile(Config(), {})


def test_read_user_config_file(tmp_path):
    (tmp_path / "config.toml").write_text(FULL, encoding="utf-8")
    with mock.patch("platformdirs.user_config_path", return_value=tmp_path):
        parsed, source = ConfigFile.read()
    assert source == tmp_path / "config.toml"
    assert parsed.config.reload_apps is True