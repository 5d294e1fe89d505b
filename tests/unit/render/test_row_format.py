"""ANSI row formatting tests."""

from __future__ import annotations

import unittest

from buftree.render import format_flat_row, format_row, format_rows
from buftree.tree_model.types import KIND_DIR, KIND_FILE, NO_NAME_LABEL, Decoration, RenderedRow
from buftree.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _row(kind: str, label: str, *, prefix: str = "", icon=None, diagnostic=None, path: str = "") -> RenderedRow:
    return RenderedRow(
        kind=kind,
        id=None if kind == KIND_DIR else 1,
        path=path or label,
        ordinal=f"{path or label} 1",
        tree_prefix=prefix,
        label=label,
        icon=icon,
        diagnostic=diagnostic,
    )


class FormatRowTests(unittest.TestCase):
    def test_plain_layout_is_prefix_icon_label_sign(self) -> None:
        row = _row(
            KIND_FILE,
            "a.py",
            prefix="│   └── ",
            icon=Decoration("py", "Python"),
            diagnostic=Decoration("E", "DiagnosticError"),
        )

        self.assertEqual(format_row(row, PLAIN_THEME), "│   └── py a.py E")

    def test_missing_icon_keeps_column_alignment(self) -> None:
        row = _row(KIND_FILE, "a.py", prefix="├── ")

        self.assertEqual(format_row(row, PLAIN_THEME), "├──  a.py")
        self.assertEqual(format_row(row, PLAIN_THEME, show_icons=False), "├── a.py")

    def test_directory_and_diagnostic_colors_follow_theme(self) -> None:
        dir_text = format_row(_row(KIND_DIR, "src/"), DEFAULT_THEME, show_icons=False)
        diag_text = format_row(
            _row(KIND_FILE, "a.py", diagnostic=Decoration("W", "DiagnosticWarn")),
            DEFAULT_THEME,
            show_icons=False,
        )

        self.assertIn(f"{DEFAULT_THEME.tree_dir}src/{DEFAULT_THEME.reset}", dir_text)
        self.assertIn(f"{DEFAULT_THEME.diag_warn}W{DEFAULT_THEME.reset}", diag_text)

    def test_placeholder_label_uses_placeholder_color(self) -> None:
        text = format_row(_row(KIND_FILE, NO_NAME_LABEL), DEFAULT_THEME, show_icons=False)

        self.assertTrue(text.startswith(DEFAULT_THEME.tree_placeholder))


class FormatFlatRowTests(unittest.TestCase):
    def test_flat_rows_show_path_only(self) -> None:
        row = _row(KIND_FILE, "src/a.py", diagnostic=Decoration("E", "DiagnosticError"))

        self.assertEqual(format_flat_row(row), "src/a.py")
        self.assertEqual(format_rows([row], DEFAULT_THEME, flat=True), ["src/a.py"])


if __name__ == "__main__":
    unittest.main()
