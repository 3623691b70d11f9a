"""Templates: files rendered with the colour data and written to disk."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .colormath import Argb
from .engine import Engine, Syntax, TemplateError
from .hook import format_hook
from .renderdata import add_engine_filters, get_render_data, render_template
from .scheme import Schemes, SchemesEnum
from .source import ColorDefinition, ImageSource

log = logging.getLogger(__name__)

_OPTIONAL_STRINGS = (
    "compare_to",
    "pre_hook",
    "post_hook",
    "expr_prefix",
    "expr_postfix",
    "block_prefix",
    "block_postfix",
)


def _expect_str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"`{key}` must be a string")
    return value


def _parse_mode(value: Any) -> SchemesEnum:
    if isinstance(value, SchemesEnum):
        return value
    if isinstance(value, str):
        try:
            return SchemesEnum(value.lower())
        except ValueError:
            pass
    raise ValueError(f"unknown mode {value!r}")


def _parse_definitions(value: Any) -> list[ColorDefinition]:
    if not isinstance(value, list):
        raise ValueError("`colors_to_compare` must be a list")
    definitions = []
    for item in value:
        if not isinstance(item, Mapping):
            raise ValueError("each entry of `colors_to_compare` must be a table")
        name, color = item.get("name"), item.get("color")
        if not isinstance(name, str) or not isinstance(color, str):
            raise ValueError("each entry of `colors_to_compare` needs a `name` and a `color`")
        definitions.append(ColorDefinition(name=name, color=color))
    return definitions


@dataclass
class Template:
    """One template: where it is read from, where it goes, and its options."""

    input_path: Path
    output_path: Path
    mode: SchemesEnum | None = None
    colors_to_compare: list[ColorDefinition] | None = None
    compare_to: str | None = None
    pre_hook: str | None = None
    post_hook: str | None = None
    expr_prefix: str | None = None
    expr_postfix: str | None = None
    block_prefix: str | None = None
    block_postfix: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Template:
        """Build a template from a configuration table."""
        if not isinstance(data, Mapping):
            raise ValueError("a template must be a table")
        for key in ("input_path", "output_path"):
            if key not in data:
                raise ValueError(f"missing field `{key}`")
        kwargs: dict[str, Any] = {
            "input_path": Path(_expect_str(data, "input_path")),
            "output_path": Path(_expect_str(data, "output_path")),
        }
        if data.get("mode") is not None:
            kwargs["mode"] = _parse_mode(data["mode"])
        if data.get("colors_to_compare") is not None:
            kwargs["colors_to_compare"] = _parse_definitions(data["colors_to_compare"])
        for key in _OPTIONAL_STRINGS:
            if data.get(key) is not None:
                kwargs[key] = _expect_str(data, key)
        return cls(**kwargs)


def _or_default(value: str | None, default: str) -> str:
    return default if value is None else value


def _resolve_in(path: Path, base: Path) -> Path:
    expanded = Path(path).expanduser()
    return expanded if expanded.is_absolute() else base / expanded


def get_absolute_paths(config_path: str | Path | None, template: Template) -> tuple[Path, Path]:
    """Input and output paths of a template, with ``~`` expanded.

    Relative paths are taken relative to the configuration file's directory
    when there is one, otherwise to the working directory.
    """
    if config_path is not None:
        base = Path(config_path).resolve(strict=True)
        if base.is_file():
            base = base.parent
    else:
        base = Path.cwd()
    return _resolve_in(template.input_path, base), _resolve_in(template.output_path, base)


def create_missing_folders(path: str | Path) -> None:
    """Create the parent directories of ``path`` if they are missing."""
    path = Path(path)
    parent = path.parent
    if parent == path:
        raise ValueError("Could not get the parent of the output path.")
    if not parent.exists():
        log.error("The %s folder doesnt exist, trying to create...", parent)
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            log.error("Failed to create the %s folders: %s", path, exc)


def export_template(
    engine: Engine,
    name: str,
    render_data: Any,
    path_prefix: str | Path | None,
    output_path: str | Path,
    input_path: str | Path,
    index: int,
    total: int,
) -> Path:
    """Render template ``name`` and write it out; return the path written."""
    data = render_template(engine, name, render_data, str(input_path))
    output_path = Path(output_path)
    if path_prefix is not None and os.name != "nt":
        if not output_path.is_absolute():
            raise ValueError(f"output path {output_path} is not an absolute path.")
        out = Path(path_prefix) / output_path.relative_to(output_path.anchor)
    else:
        out = output_path

    create_missing_folders(out)
    log.debug("out: %s", out)
    if out.exists() and not os.access(out, os.W_OK):
        log.error("The %s file is Read-Only", output_path)
    out.write_bytes(data.encode("utf-8"))
    log.info("[%d/%d] Exported the %s template to %s", index + 1, total, name, output_path)
    return out


def generate(
    schemes: Schemes,
    templates: Mapping[str, Template],
    source: Any,
    source_color: Argb,
    default_scheme: SchemesEnum | str,
    custom_keywords: Mapping[str, str] | None,
    path_prefix: str | Path | None,
    config_path: str | Path | None,
) -> list[Path]:
    """Render every template, running its hooks; return the paths written."""
    log.info("Loaded %d templates.", len(templates))
    image = source.path if isinstance(source, ImageSource) else None
    render_data = get_render_data(schemes, source_color, default_scheme, custom_keywords, image)
    total = len(templates)
    written: list[Path] = []

    for index, (name, template) in enumerate(templates.items()):
        syntax = Syntax(
            expr_start=_or_default(template.expr_prefix, "{{"),
            expr_end=_or_default(template.expr_postfix, "}}"),
            block_start=_or_default(template.block_prefix, "<*"),
            block_end=_or_default(template.block_postfix, "*>"),
        )
        engine = Engine(syntax)
        add_engine_filters(engine)

        input_path, output_path = get_absolute_paths(config_path, template)

        if template.pre_hook is not None:
            format_hook(
                engine, render_data, template.pre_hook,
                template.colors_to_compare, template.compare_to,
            )

        if not input_path.exists():
            log.warning(
                "The %s template in %s doesnt exist, skipping...", name, input_path
            )
            continue

        try:
            text = input_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateError(
                f"Could not read the {name} template. "
                "Try converting the file to use UTF-8 encoding."
            ) from exc

        try:
            engine.add_template(name, text)
        except TemplateError as error:
            raise TemplateError(f"[{name} - {input_path}]\n{error}") from error

        log.debug("Trying to write the %s template to %s", name, output_path)
        written.append(
            export_template(
                engine, name, render_data, path_prefix,
                output_path, input_path, index, total,
            )
        )

        if template.post_hook is not None:
            format_hook(
                engine, render_data, template.post_hook,
                template.colors_to_compare, template.compare_to,
            )
    return written