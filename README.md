# matugen

Material color scheme roles, colour-string filters and a small template
renderer for writing colours into your own configuration files.

Given the light and dark colour roles of a scheme, `matugen` turns every
role into all of its notations (hex, rgb, rgba, hsl, hsla, ...) and renders
the templates listed in a TOML configuration with them, running shell hooks
before and after each one.

## Modules

- `matugen.colormath`: conversions between ARGB tuples
  `(alpha, red, green, blue)`, linear RGB, XYZ, L\*a\*b\* and L\*
  (`lab_from_argb`, `argb_from_lab`, `lstar_from_argb`, `y_from_lstar`,
  ...), `format_argb_as_rgb`, and angle helpers such as
  `difference_degrees`, `rotation_direction` and `sanitize_degrees_double`.
- `matugen.format`: the immutable `Rgb` and `Hsl` types, parsing of
  `#rgb`/`#rrggbb`/`rrggbb`, `rgb(...)`, `rgba(...)`, `hsl(...)` and
  `hsla(...)`, the transforms `invert`, `grayscale_simple`, `adjust_hue`
  and `lighten`, the formatters `format_hex`, `format_hex_stripped`,
  `format_rgb`, `format_rgba`, `format_hsl`, `format_hsla`, and
  `parse_color`, which reports the notation of a string.
- `matugen.filters`: `set_alpha`, `set_hue`, `set_lightness`, `grayscale`
  and `invert`. Each keeps the notation of the string it is given; strings
  whose notation cannot be detected are returned unchanged. Invalid
  requests raise `FilterError`.
- `matugen.roles`: the `Scheme` and `SchemeAndroid` role sets, built from a
  core palette with `light_from_core_palette`, `dark_from_core_palette` and
  `pure_dark_from_core_palette`; `to_dict()` gives every role as `#rrggbb`.
- `matugen.scheme`: `SchemeTypes`, `SchemesEnum`, `ColorGroup`,
  `CustomColorGroup`, `Schemes`, and `get_custom_color_schemes`, which
  merges base schemes with custom colours (`<name>`, `on_<name>`,
  `<name>_container`, `on_<name>_container`, `<name>_source`,
  `<name>_value`) into sorted, de-duplicated lists.
- `matugen.source`: `ColorFormat`, `ImageSource`, `ColorSource`,
  `ColorDefinition`, `CustomColor`, `OwnCustomColor`, `argb_from_str`,
  `get_source_color_from_color`, `get_color_distance_lab` and
  `color_to_string`, which names the closest of a list of colours.
- `matugen.engine`: the template `Engine` with configurable delimiters
  (`Syntax`), filters, `if` / `else if` / `else`, `for`, `with` and
  `include` blocks. Errors raise `TemplateError`.
- `matugen.renderdata`: `add_engine_filters` (the colour filters plus
  `to_upper`, `to_lower` and `replace`), `get_render_data`,
  `generate_colors` and `render_template`.
- `matugen.hook`: `format_hook`, which renders a hook and runs it with the
  shell, exposing `closest_color` to it.
- `matugen.template`: the `Template` entry of a configuration and
  `generate`, which renders every template, writes it out (under an
  optional path prefix) and runs its hooks.
- `matugen.config`: `ConfigFile`, `Config`, `Apps`, `WallpaperTool` and
  `ConfigError`.
- `matugen.display`: `render_table` / `show_color` for a terminal table
  with colour swatches, and `dump_json` in a chosen `Format`.

## Quick look

```python
from matugen.colormath import format_argb_as_rgb, difference_degrees
from matugen.engine import Engine
from matugen.filters import set_alpha, FilterError
from matugen.renderdata import add_engine_filters

format_argb_as_rgb((255, 255, 0, 0))   # '#ff0000'
difference_degrees(350.0, 10.0)        # 20.0

try:
    set_alpha("#ff0000", 0.5)
except FilterError as error:
    print(error)                       # cannot set alpha on hex color

engine = Engine()
add_engine_filters(engine)
engine.add_template("t", "{{ color | invert }}")
engine.render("t", {"color": "#ff0000"})   # '#00ffff'
```

## Configuration

A configuration is a TOML document with a `[config]` table and a
`[templates]` table, read by `matugen.config.ConfigFile.read`. Without an
explicit path the file `config.toml` in your user configuration directory
is used, and an empty configuration when that does not exist.
`ConfigFile.from_toml` parses a document from a string.

```toml
[config]
reload_apps = true
set_wallpaper = true
wallpaper_tool = "Swww"

[config.reload_apps_list]
waybar = true
kitty = true

[config.custom_keywords]
font = "Iosevka"

[config.custom_colors]
green = "#00ff00"
red = { color = "#ff0000", blend = false }

[templates.kitty]
input_path = "templates/kitty.conf"
output_path = "~/.config/kitty/colors.conf"
post_hook = "echo {{colors.primary.default.hex}}"
```

Relative template paths are resolved against the directory of the
configuration file (or the working directory when there is none), and `~`
is expanded. Each template may override its delimiters with
`expr_prefix`, `expr_postfix`, `block_prefix` and `block_postfix`, and may
pick the closest of a list of named colours with `colors_to_compare` and
`compare_to`; the result is available to hooks as `closest_color`.
Templates whose input file does not exist are skipped with a warning.

Inside a template every colour role is reachable as
`colors.<role>.<light|dark|default>.<format>`, where the format is one of
`hex`, `hex_stripped`, `rgb`, `rgba`, `hsl`, `hsla`, `red`, `green`,
`blue`, `alpha`, `hue`, `saturation` or `lightness`. `colors.source_color`
holds the source colour, `image` the image path (for an `ImageSource`) and
`custom` the custom keywords. Filters are applied with a pipe, for example
`{{ colors.primary.default.rgba | set_alpha: 0.5 }}`.

## What this package does not do

- There is no command-line program; everything is used as a library.
- It does not extract a source colour from an image, and it does not
  compute dynamic schemes, tonal palettes or harmonized custom colours
  from a source colour. The role colours, core palettes and
  `CustomColorGroup` values have to be supplied by the caller.
- The `reload_apps`, `reload_apps_list`, `set_wallpaper`,
  `wallpaper_tool`, `swww_options` and `feh_options` settings are read
  and validated, but nothing in the package reloads applications or sets
  the wallpaper.