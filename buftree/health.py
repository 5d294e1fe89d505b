"""Environment health report.

Checks the interpreter, the icon backend, and the user's config file and
reports each finding as ``ok``, ``info``, ``warn``, or ``error``.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from importlib import metadata

from . import config
from .ui_theme import DEFAULT_THEME, UITheme

MIN_PYTHON = (3, 10)

LEVEL_OK = "ok"
LEVEL_INFO = "info"
LEVEL_WARN = "warn"
LEVEL_ERROR = "error"


@dataclass(frozen=True)
class HealthCheck:
    level: str
    message: str


def _distribution_version(name: str) -> str | None:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return None


def check_health(version_info: tuple[int, ...] | None = None) -> list[HealthCheck]:
    """Run every check and return the findings in display order."""
    checks: list[HealthCheck] = []

    version = tuple(version_info or sys.version_info[:3])
    shown = ".".join(str(part) for part in version)
    required = ".".join(str(part) for part in MIN_PYTHON)
    if version[:2] >= MIN_PYTHON:
        checks.append(HealthCheck(LEVEL_OK, f"Python {shown} (>= {required})"))
    else:
        checks.append(HealthCheck(LEVEL_ERROR, f"Python >= {required} is required, found {shown}"))

    pygments_version = _distribution_version("pygments")
    if pygments_version is not None:
        checks.append(HealthCheck(LEVEL_OK, f"pygments {pygments_version} is installed (file icons enabled)"))
    else:
        checks.append(HealthCheck(LEVEL_WARN, "pygments metadata not found (file icons may be unavailable)"))

    checks.append(_check_config_file())
    return checks


def _check_config_file() -> HealthCheck:
    path = config.CONFIG_PATH
    if not path.exists():
        return HealthCheck(LEVEL_INFO, f"No config file at {path} (using defaults)")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        return HealthCheck(LEVEL_ERROR, f"Unreadable config {path}: {exc}")
    if not isinstance(data, dict):
        return HealthCheck(LEVEL_ERROR, f"Invalid config {path}: expected a JSON object, got {type(data).__name__}")
    try:
        config.resolve_config()
    except config.ConfigError as exc:
        return HealthCheck(LEVEL_ERROR, f"Invalid config {path}: {exc}")
    return HealthCheck(LEVEL_OK, f"Config loaded from {path}")


def format_health(checks: list[HealthCheck], theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    colors = {
        LEVEL_OK: active_theme.health_ok,
        LEVEL_WARN: active_theme.health_warn,
        LEVEL_ERROR: active_theme.health_error,
    }
    lines = ["buftree"]
    for check in checks:
        color = colors.get(check.level, "")
        reset = active_theme.reset if color else ""
        lines.append(f"- {color}{check.level.upper()}{reset} {check.message}")
    return "\n".join(lines) + "\n"


def has_errors(checks: list[HealthCheck]) -> bool:
    return any(check.level == LEVEL_ERROR for check in checks)
