"""UI theme definitions and selection helpers.

Themes are ANSI palettes for rendered rows and health output. ``plain`` is the
colorless palette used when color output is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    tree_connector: str
    tree_dir: str
    tree_file: str
    tree_placeholder: str
    tree_icon: str
    diag_error: str
    diag_warn: str
    diag_info: str
    diag_hint: str
    health_ok: str
    health_warn: str
    health_error: str

    def for_style_hint(self, style: str | None) -> str:
        """Map a diagnostic highlight-group hint onto this palette."""
        return {
            "DiagnosticError": self.diag_error,
            "DiagnosticWarn": self.diag_warn,
            "DiagnosticInfo": self.diag_info,
            "DiagnosticHint": self.diag_hint,
            "Directory": self.tree_dir,
        }.get(style or "", self.tree_icon)


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_connector="\033[2m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    tree_placeholder="\033[3;38;5;245m",
    tree_icon="\033[38;5;110m",
    diag_error="\033[38;5;203m",
    diag_warn="\033[38;5;214m",
    diag_info="\033[38;5;75m",
    diag_hint="\033[38;5;108m",
    health_ok="\033[38;5;42m",
    health_warn="\033[38;5;214m",
    health_error="\033[38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_connector="\033[2;38;5;31m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    tree_placeholder="\033[3;38;5;110m",
    tree_icon="\033[38;5;117m",
    diag_error="\033[38;5;210m",
    diag_warn="\033[38;5;215m",
    diag_info="\033[38;5;39m",
    diag_hint="\033[38;5;73m",
    health_ok="\033[38;5;84m",
    health_warn="\033[38;5;215m",
    health_error="\033[38;5;210m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_connector="",
    tree_dir="",
    tree_file="",
    tree_placeholder="",
    tree_icon="",
    diag_error="",
    diag_warn="",
    diag_info="",
    diag_hint="",
    health_ok="",
    health_warn="",
    health_error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES.get(normalize_theme_name(name), DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
