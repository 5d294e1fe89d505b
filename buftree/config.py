"""Picker configuration: defaults, overrides, and the optional JSON file.

Configuration is layered (defaults, the user's JSON file, per-call overrides)
and then decoded once into a frozen ``PickerConfig`` that is passed explicitly
to every build. The JSON file is only ever read.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from .decorations import DiagnosticsConfig, DiagnosticsConfigError, parse_diagnostics_config
from .decorations.icons import ICON_BACKENDS
from .ui_theme import available_theme_names, normalize_theme_name

APP_NAME = "buftree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

STYLE_TREE = "tree"
STYLE_FLAT = "flat"
VIEW_STYLES = (STYLE_TREE, STYLE_FLAT)

DEFAULTS: dict[str, object] = {
    # View shown when the picker opens.
    "initial_style": STYLE_TREE,
    # Switch to the flat list while the caller is in text-filtering mode.
    "switch_on_filter": True,
    # Close the picker before running a custom action.
    "action_close": True,
    # False, True, or {"signs": {"error": ["E", "DiagnosticError"], ...}}.
    "diagnostics": False,
    # Icon backend name, or "none".
    "icons": "pygments",
    "theme": "default",
    # Custom actions: key -> callable(picker, row).
    "actions": {},
    # Called with the directory path when a directory row is selected.
    "on_folder_select": None,
}


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""


def load_config() -> dict[str, object]:
    """Load the user's JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def deep_merge(base: Mapping[str, object], override: Mapping[str, object]) -> dict[str, object]:
    """Return ``base`` updated by ``override``, merging nested mappings key by key."""
    merged: dict[str, object] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def merge_config(*layers: Mapping[str, object] | None) -> dict[str, object]:
    """Merge ``layers`` over a copy of ``DEFAULTS``; later layers win."""
    merged: dict[str, object] = copy.deepcopy(DEFAULTS)
    for layer in layers:
        if layer:
            merged = deep_merge(merged, layer)
    return merged


def _expect_bool(mapping: Mapping[str, object], key: str) -> bool:
    value = mapping.get(key)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be a boolean, got {value!r}")
    return value


@dataclass(frozen=True)
class PickerConfig:
    """Decoded, validated picker options."""

    initial_style: str = STYLE_TREE
    switch_on_filter: bool = True
    action_close: bool = True
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    icons: str = "pygments"
    theme: str = "default"
    actions: Mapping[str, Callable[..., object]] = field(default_factory=dict)
    on_folder_select: Callable[[str], object] | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> PickerConfig:
        """Validate a merged mapping and decode it into a ``PickerConfig``."""
        style = mapping.get("initial_style", STYLE_TREE)
        if style not in VIEW_STYLES:
            raise ConfigError(f"initial_style must be one of {', '.join(VIEW_STYLES)}, got {style!r}")

        icons = mapping.get("icons", "pygments")
        if icons is False or icons is None:
            icons = "none"
        if icons not in ICON_BACKENDS:
            raise ConfigError(f"icons must be one of {', '.join(ICON_BACKENDS)}, got {icons!r}")

        theme = mapping.get("theme", "default")
        if not isinstance(theme, str) or theme.strip().lower() not in available_theme_names():
            raise ConfigError(f"unknown theme {theme!r}")

        try:
            diagnostics = parse_diagnostics_config(mapping.get("diagnostics"))
        except DiagnosticsConfigError as exc:
            raise ConfigError(str(exc)) from exc

        raw_actions = mapping.get("actions") or {}
        if not isinstance(raw_actions, Mapping):
            raise ConfigError("actions must be a mapping of key to callable")
        actions = {
            key: action
            for key, action in raw_actions.items()
            if isinstance(key, str) and key and callable(action)
        }

        on_folder_select = mapping.get("on_folder_select")
        if on_folder_select is not None and not callable(on_folder_select):
            raise ConfigError("on_folder_select must be callable")

        return cls(
            initial_style=str(style),
            switch_on_filter=_expect_bool(mapping, "switch_on_filter") if "switch_on_filter" in mapping else True,
            action_close=_expect_bool(mapping, "action_close") if "action_close" in mapping else True,
            diagnostics=diagnostics,
            icons=str(icons),
            theme=normalize_theme_name(theme),
            actions=actions,
            on_folder_select=on_folder_select,
        )


def resolve_config(overrides: Mapping[str, object] | None = None, *, use_file: bool = True) -> PickerConfig:
    """Defaults, then the JSON config file, then ``overrides``, decoded."""
    file_layer = load_config() if use_file else {}
    return PickerConfig.from_mapping(merge_config(file_layer, overrides))


__all__ = [
    "CONFIG_PATH",
    "ConfigError",
    "DEFAULTS",
    "PickerConfig",
    "STYLE_FLAT",
    "STYLE_TREE",
    "VIEW_STYLES",
    "deep_merge",
    "load_config",
    "merge_config",
    "resolve_config",
]
