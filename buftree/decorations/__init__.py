"""Icon and diagnostic decoration providers.

Renderers ask a ``Decorations`` value for row glyphs. Every provider is
optional: a missing backend yields no glyph rather than an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..tree_model.types import KIND_FILE, Decoration
from .diagnostics import (
    DEFAULT_DIAGNOSTIC_SIGNS,
    DIAGNOSTICS_DISABLED,
    DiagnosticIndex,
    DiagnosticsConfig,
    DiagnosticsConfigError,
    SeverityLookup,
    parse_diagnostics_config,
)
from .icons import IconProvider, PygmentsIconProvider, icon_provider_for


@dataclass(frozen=True)
class Decorations:
    """Everything a renderer needs to decorate rows for one pass."""

    icons: IconProvider | None = None
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    severity_for: SeverityLookup | None = None

    def icon(self, kind: str, name: str) -> Decoration | None:
        if self.icons is None:
            return None
        return self.icons.get_icon(kind, name)

    def diagnostic(self, kind: str, item_id: int | None) -> Decoration | None:
        if kind != KIND_FILE or item_id is None:
            return None
        if not self.diagnostics.enabled or self.severity_for is None:
            return None
        return self.diagnostics.sign_for(self.severity_for(item_id))


NO_DECORATIONS = Decorations()

__all__ = [
    "DEFAULT_DIAGNOSTIC_SIGNS",
    "DIAGNOSTICS_DISABLED",
    "DiagnosticIndex",
    "DiagnosticsConfig",
    "DiagnosticsConfigError",
    "Decorations",
    "IconProvider",
    "NO_DECORATIONS",
    "PygmentsIconProvider",
    "icon_provider_for",
    "parse_diagnostics_config",
]
