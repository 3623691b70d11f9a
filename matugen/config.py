"""The TOML configuration file: global options and templates."""

from __future__ import annotations

import enum
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import platformdirs

from .source import OwnCustomColor
from .template import Template

ERROR_TEXT = (
    "Error reading config file, check the configuration section of the "
    "documentation for help"
)

DEFAULT_CONFIG = """
[config]
[templates]
"""


class ConfigError(Exception):
    """The configuration file could not be read or is invalid."""


class WallpaperTool(enum.Enum):
    """Programs that can set the wallpaper."""

    SWAYBG = "Swaybg"
    SWWW = "Swww"
    NITROGEN = "Nitrogen"
    FEH = "Feh"


@dataclass(frozen=True)
class Apps:
    """Which applications to reload after generating."""

    kitty: bool | None = None
    waybar: bool | None = None
    gtk_theme: bool | None = None
    dunst: bool | None = None
    mako: bool | None = None


@dataclass
class Config:
    """The ``[config]`` table."""

    reload_apps: bool | None = None
    version_check: bool | None = None
    reload_apps_list: Apps | None = None
    set_wallpaper: bool | None = None
    wallpaper_tool: WallpaperTool | None = None
    swww_options: list[str] | None = None
    feh_options: list[str] | None = None
    prefix: str | None = None
    custom_keywords: dict[str, str] | None = None
    custom_colors: dict[str, OwnCustomColor] | None = None


def _table(data: Mapping[str, Any], key: str, required: bool = False) -> dict | None:
    value = data.get(key)
    if value is None:
        if required:
            raise ValueError(f"missing field `{key}`")
        return None
    if not isinstance(value, dict):
        raise ValueError(f"`{key}` must be a table")
    return value


def _opt_bool(table: Mapping[str, Any], key: str) -> bool | None:
    value = table.get(key)
    if value is not None and not isinstance(value, bool):
        raise ValueError(f"`{key}` must be a boolean")
    return value


def _opt_str(table: Mapping[str, Any], key: str) -> str | None:
    value = table.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"`{key}` must be a string")
    return value


def _opt_str_list(table: Mapping[str, Any], key: str) -> list[str] | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"`{key}` must be a list of strings")
    return list(value)


def _opt_str_map(table: Mapping[str, Any], key: str) -> dict[str, str] | None:
    value = _table(table, key)
    if value is None:
        return None
    if not all(isinstance(v, str) for v in value.values()):
        raise ValueError(f"`{key}` must map names to strings")
    return dict(value)


def _parse_apps(table: Mapping[str, Any] | None) -> Apps | None:
    if table is None:
        return None
    return Apps(
        kitty=_opt_bool(table, "kitty"),
        waybar=_opt_bool(table, "waybar"),
        gtk_theme=_opt_bool(table, "gtk_theme"),
        dunst=_opt_bool(table, "dunst"),
        mako=_opt_bool(table, "mako"),
    )


def _parse_tool(value: Any) -> WallpaperTool | None:
    if value is None:
        return None
    try:
        return WallpaperTool(value)
    except ValueError:
        raise ValueError(f"unknown wallpaper tool {value!r}") from None


def _parse_config(table: Mapping[str, Any]) -> Config:
    colors = _table(table, "custom_colors")
    return Config(
        reload_apps=_opt_bool(table, "reload_apps"),
        version_check=_opt_bool(table, "version_check"),
        reload_apps_list=_parse_apps(_table(table, "reload_apps_list")),
        set_wallpaper=_opt_bool(table, "set_wallpaper"),
        wallpaper_tool=_parse_tool(table.get("wallpaper_tool")),
        swww_options=_opt_str_list(table, "swww_options"),
        feh_options=_opt_str_list(table, "feh_options"),
        prefix=_opt_str(table, "prefix"),
        custom_keywords=_opt_str_map(table, "custom_keywords"),
        custom_colors=None if colors is None else {
            name: OwnCustomColor.from_value(value) for name, value in colors.items()
        },
    )


def _parse_templates(table: Mapping[str, Any]) -> dict[str, Template]:
    templates = {}
    for name, spec in table.items():
        try:
            templates[name] = Template.from_dict(spec)
        except ValueError as exc:
            raise ValueError(f"template `{name}`: {exc}") from exc
    return templates


@dataclass
class ConfigFile:
    """The whole configuration file."""

    config: Config = field(default_factory=Config)
    templates: dict[str, Template] = field(default_factory=dict)

    @classmethod
    def from_toml(cls, text: str) -> ConfigFile:
        """Parse a configuration document."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{exc}\n{ERROR_TEXT}") from exc
        try:
            return cls(
                config=_parse_config(_table(data, "config", required=True)),
                templates=_parse_templates(_table(data, "templates", required=True)),
            )
        except ValueError as exc:
            raise ConfigError(f"{exc}\n{ERROR_TEXT}") from exc

    @classmethod
    def read(cls, config_path: str | Path | None = None) -> tuple[ConfigFile, Path | None]:
        """Read the given file, or the user's config file, or the defaults.

        Returns the configuration and the path it came from, if any.
        """
        if config_path is not None:
            path = Path(config_path)
            try:
                content = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise ConfigError("Could not find the provided config file.") from exc
            return cls.from_toml(content), path

        config_file = platformdirs.user_config_path("matugen", appauthor=False) / "config.toml"
        if not config_file.exists():
            return cls.from_toml(DEFAULT_CONFIG), None
        return cls.from_toml(config_file.read_text(encoding="utf-8")), config_file