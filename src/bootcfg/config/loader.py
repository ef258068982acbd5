# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/bootcfg/config/loader.py

import logging
import os
import yaml
from pathlib import Path
from .models import BootstrapSettings

log = logging.getLogger("bootcfg")


def _deep_merge(base: dict, override: dict) -> dict:
    """
    Recursively merge *override* into *base* (mutates base).
    Only overwrites when the override value is non-empty.
    """
    for key, value in override.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            _deep_merge(base[key], value)
        else:
            if value not in (None, ""):
                base[key] = value
    return base


def _find_overrides_file(settings_path: Path) -> Path | None:
    """
    Locate an overrides file:

    1. BOOTCFG_OVERRIDES_FILE environment variable
    2. overrides.yaml in the same directory as the settings file
    """
    env = os.environ.get("BOOTCFG_OVERRIDES_FILE")
    if env:
        p = Path(env)
        if p.is_file():
            return p
        log.warning("BOOTCFG_OVERRIDES_FILE=%s does not exist, skipping", env)
        return None

    p = settings_path.parent / "overrides.yaml"
    if p.is_file():
        return p

    return None


def _load_yaml(path: Path) -> dict:
    """Load a YAML file, expanding ${ENV_VAR} references."""
    raw = path.read_text()
    expanded = os.path.expandvars(raw)
    return yaml.safe_load(expanded) or {}


def load_settings(path: str | Path) -> BootstrapSettings:
    """
    Load and validate bootstrap settings from YAML.

    ``${ENV_VAR}`` placeholders are expanded at load time, and an
    overrides file (see ``_find_overrides_file``) is deep-merged on top
    before validation.
    """
    path = Path(path)
    data = _load_yaml(path)

    overrides_path = _find_overrides_file(path)
    if overrides_path:
        log.debug("Merging overrides from %s", overrides_path)
        _deep_merge(data, _load_yaml(overrides_path))

    return BootstrapSettings.model_validate(data)
