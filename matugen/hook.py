"""Hooks: shell commands rendered from templates and run around exports."""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Iterable
from typing import Any

from .engine import CompiledTemplate, Engine
from .source import ColorDefinition, color_to_string

log = logging.getLogger(__name__)


def format_hook_text(
    render_data: Any, closest_color: str | None, template: CompiledTemplate
) -> str:
    """Render a hook, exposing ``closest_color`` to it through the render data."""
    if isinstance(render_data, dict):
        render_data["closest_color"] = closest_color
    else:
        log.debug("not map")
    return template.render(render_data)


def format_hook(
    engine: Engine,
    render_data: Any,
    hook: str,
    colors_to_compare: Iterable[ColorDefinition] | None,
    compare_to: str | None,
) -> str:
    """Render ``hook`` and run it in the shell; return the command that ran."""
    closest_color = None
    if colors_to_compare is not None and compare_to is not None:
        target = engine.compile(compare_to).render(render_data)
        closest_color = color_to_string(colors_to_compare, target)

    command = format_hook_text(render_data, closest_color, engine.compile(hook))
    result = subprocess.run(command, shell=True, check=False)
    if result.returncode < 0:
        print("Interrupted!", file=sys.stderr)
    elif result.returncode != 0:
        log.error("Failed executing command: %r", command)
    return command