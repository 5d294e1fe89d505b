"""ANSI text for rendered rows.

Tree rows are laid out as ``connector, [icon], label, [diagnostic]``; flat rows
show the display path only.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..tree_model.types import KIND_DIR, NO_NAME_LABEL, RenderedRow
from ..ui_theme import DEFAULT_THEME, UITheme


def format_row(row: RenderedRow, theme: UITheme | None = None, *, show_icons: bool = True) -> str:
    """Render one tree-mode row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    parts: list[str] = []
    if row.tree_prefix:
        parts.append(f"{active_theme.tree_connector}{row.tree_prefix}{reset}")
    if show_icons:
        icon = row.icon
        glyph = icon.glyph if icon is not None else ""
        color = active_theme.for_style_hint(icon.style) if icon is not None else ""
        parts.append(f"{color}{glyph}{reset if color else ''} ")

    if row.kind == KIND_DIR:
        label_color = active_theme.tree_dir
    elif row.label == NO_NAME_LABEL:
        label_color = active_theme.tree_placeholder
    else:
        label_color = active_theme.tree_file
    parts.append(f"{label_color}{row.label}{reset}")

    if row.diagnostic is not None:
        sign_color = active_theme.for_style_hint(row.diagnostic.style)
        parts.append(f" {sign_color}{row.diagnostic.glyph}{reset}")
    return "".join(parts)


def format_flat_row(row: RenderedRow) -> str:
    return row.path or row.label


def format_rows(
    rows: Iterable[RenderedRow],
    theme: UITheme | None = None,
    *,
    flat: bool = False,
    show_icons: bool = True,
) -> list[str]:
    if flat:
        return [format_flat_row(row) for row in rows]
    return [format_row(row, theme, show_icons=show_icons) for row in rows]
