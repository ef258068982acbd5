# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/bootcfg/server/units.py

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from ..errors import BootstrapError
from ..ignition.constants import (
    PIVOT_REBOOT_NEEDED_PATH,
    PIVOT_REBOOT_UNIT_NAME,
    PIVOT_RUN_DIR,
)
from ..ignition.models import Unit

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class UnitTemplateError(BootstrapError):
    pass


_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    undefined=StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)


def render_unit(template_name: str, context: Dict[str, Any]) -> str:
    try:
        tmpl = _env.get_template(template_name)
    except TemplateNotFound as e:
        raise UnitTemplateError(f"Missing unit template: {template_name}") from e
    return tmpl.render(**context)


def pivot_reboot_unit() -> Unit:
    """
    One-shot unit that creates the pivot reboot marker on first boot.

    The marker lives under /run, which Ignition writes to the real root
    rather than the runtime tmpfs, so it has to come from a unit that
    runs later in boot.
    """
    contents = render_unit(
        "pivot-reboot.service.j2",
        {"run_dir": PIVOT_RUN_DIR, "marker_path": PIVOT_REBOOT_NEEDED_PATH},
    )
    return Unit(name=PIVOT_REBOOT_UNIT_NAME, enabled=True, contents=contents)
