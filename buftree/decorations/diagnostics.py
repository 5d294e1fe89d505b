"""Diagnostic sign tables and severity lookup.

Severity ranks follow the usual LSP numbering: 1 error, 2 warn, 3 info,
4 hint. Lower is worse.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field

from ..tree_model.types import Decoration

SEVERITY_ERROR = 1
SEVERITY_WARN = 2
SEVERITY_INFO = 3
SEVERITY_HINT = 4

SEVERITY_NAMES: dict[int, str] = {
    SEVERITY_ERROR: "error",
    SEVERITY_WARN: "warn",
    SEVERITY_INFO: "info",
    SEVERITY_HINT: "hint",
}
SEVERITY_BY_NAME: dict[str, int] = {name: rank for rank, name in SEVERITY_NAMES.items()}

DEFAULT_DIAGNOSTIC_SIGNS: dict[str, Decoration] = {
    "error": Decoration("E", "DiagnosticError"),
    "warn": Decoration("W", "DiagnosticWarn"),
    "info": Decoration("I", "DiagnosticInfo"),
    "hint": Decoration("H", "DiagnosticHint"),
}

SeverityLookup = Callable[[int], int | None]


class DiagnosticsConfigError(ValueError):
    """Raised when a diagnostics option has an unusable shape."""


@dataclass(frozen=True)
class DiagnosticsConfig:
    """Decoded diagnostics option: an enabled flag plus caller sign overrides."""

    enabled: bool = False
    signs: Mapping[str, Decoration] = field(default_factory=dict)

    def sign_for(self, severity: int | None) -> Decoration | None:
        """Return the caller sign for ``severity``, else the built-in default."""
        key = SEVERITY_NAMES.get(severity) if severity is not None else None
        if key is None:
            return None
        return self.signs.get(key) or DEFAULT_DIAGNOSTIC_SIGNS.get(key)


DIAGNOSTICS_DISABLED = DiagnosticsConfig()


def _coerce_sign(key: str, value: object) -> Decoration:
    if isinstance(value, Decoration):
        return value
    if isinstance(value, str):
        return Decoration(value, DEFAULT_DIAGNOSTIC_SIGNS[key].style)
    if isinstance(value, (list, tuple)) and value and isinstance(value[0], str):
        style = value[1] if len(value) > 1 and isinstance(value[1], str) else None
        return Decoration(value[0], style)
    raise DiagnosticsConfigError(f"invalid sign for {key!r}: {value!r}")


def parse_signs(raw: object) -> dict[str, Decoration]:
    """Decode a ``{severity: glyph | [glyph, style]}`` table."""
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise DiagnosticsConfigError(f"diagnostic signs must be a mapping, got {type(raw).__name__}")
    signs: dict[str, Decoration] = {}
    for key, value in raw.items():
        if key not in DEFAULT_DIAGNOSTIC_SIGNS:
            raise DiagnosticsConfigError(f"unknown diagnostic severity {key!r}")
        signs[key] = _coerce_sign(key, value)
    return signs


def parse_diagnostics_config(value: object) -> DiagnosticsConfig:
    """Decode ``True``, ``{"signs": {...}}``, or a falsy value into a config."""
    if isinstance(value, DiagnosticsConfig):
        return value
    if value is True:
        return DiagnosticsConfig(enabled=True)
    if isinstance(value, Mapping):
        return DiagnosticsConfig(enabled=True, signs=parse_signs(value.get("signs")))
    if not value:
        return DIAGNOSTICS_DISABLED
    raise DiagnosticsConfigError(f"diagnostics must be a bool or a mapping, got {value!r}")


def worst_severity(severities: Iterable[int]) -> int | None:
    """Return the most severe rank in ``severities`` (lowest number)."""
    ranks = [rank for rank in severities if rank in SEVERITY_NAMES]
    return min(ranks) if ranks else None


class DiagnosticIndex:
    """Per-item severity store exposing the worst-severity lookup."""

    def __init__(self, severities: Mapping[int, Iterable[int]] | None = None) -> None:
        self._by_item: dict[int, list[int]] = {}
        for item_id, ranks in (severities or {}).items():
            self._by_item[item_id] = list(ranks)

    def add(self, item_id: int, severity: int) -> None:
        self._by_item.setdefault(item_id, []).append(severity)

    def __call__(self, item_id: int) -> int | None:
        return worst_severity(self._by_item.get(item_id, ()))


__all__ = [
    "DEFAULT_DIAGNOSTIC_SIGNS",
    "DIAGNOSTICS_DISABLED",
    "DiagnosticIndex",
    "DiagnosticsConfig",
    "DiagnosticsConfigError",
    "SEVERITY_BY_NAME",
    "SEVERITY_ERROR",
    "SEVERITY_HINT",
    "SEVERITY_INFO",
    "SEVERITY_NAMES",
    "SEVERITY_WARN",
    "SeverityLookup",
    "parse_diagnostics_config",
    "parse_signs",
    "worst_severity",
]
