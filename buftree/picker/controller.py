"""Headless buffer-picker controller over ``PickerState``.

The controller owns the tree/flat view state machine and the item-level
actions (open, delete, folder select, custom actions). Drawing, key handling,
and text matching belong to the host UI, which calls into these methods and
reads ``state.rows`` back. Host side effects are injected through
``BufferPickerDeps`` so the logic stays deterministic and testable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .._logging import resolve_logger
from ..config import STYLE_FLAT, STYLE_TREE, VIEW_STYLES, PickerConfig
from ..decorations import Decorations, IconProvider, icon_provider_for
from ..decorations.diagnostics import SeverityLookup
from ..tree_model import BufferSource, build_flat_rows, build_tree_rows, collect_items
from ..tree_model.types import KIND_DIR, RenderedRow
from .state import PickerState

CANNOT_DELETE_CURRENT = "Cannot delete current buffer"


def find_file_row_index(rows: Sequence[RenderedRow], item_id: int | None) -> int | None:
    """Return the index of the file row for ``item_id``, if any."""
    if item_id is None:
        return None
    for idx, row in enumerate(rows):
        if row.is_file and row.id == item_id:
            return idx
    return None


@dataclass(frozen=True)
class BufferPickerDeps:
    """Host hooks required by :class:`BufferPicker`."""

    source: BufferSource
    open_buffer: Callable[[int], object]
    delete_buffer: Callable[[int], object] | None = None
    severity_for: SeverityLookup | None = None
    icon_provider: IconProvider | None = None
    current_buffer_id: int | None = None
    cwd: str | None = None
    home: str | None = None


class BufferPicker:
    """State-bound picker operations used by a host list UI."""

    def __init__(
        self,
        deps: BufferPickerDeps,
        config: PickerConfig | None = None,
        *,
        logger: logging.Logger | None = None,
        log: bool = False,
    ) -> None:
        self.deps = deps
        self.config = config or PickerConfig()
        self.log = resolve_logger(logger, enabled=log, name=__name__)
        self.decorations = Decorations(
            icons=deps.icon_provider or icon_provider_for(self.config.icons),
            diagnostics=self.config.diagnostics,
            severity_for=deps.severity_for,
        )
        self.state = PickerState(style=self.config.initial_style)
        self.rebuild()
        self.state.selected_idx = self.default_selection_index()

    def rebuild(self) -> None:
        """Re-collect buffers and regenerate both row lists; keeps the view style."""
        items = collect_items(self.deps.source, cwd=self.deps.cwd, home=self.deps.home)
        self.state.items = items
        self.state.tree_rows = build_tree_rows(items, self.decorations)
        self.state.flat_rows = build_flat_rows(items)
        self._clamp_selection()
        self.log.debug(
            "rebuilt %d items into %d tree rows",
            len(items),
            len(self.state.tree_rows),
        )

    def _clamp_selection(self) -> None:
        count = len(self.state.rows)
        self.state.selected_idx = max(0, min(self.state.selected_idx, count - 1)) if count else 0

    def default_selection_index(self) -> int:
        """Index of the current buffer's row in the active view, else ``0``."""
        idx = find_file_row_index(self.state.rows, self.deps.current_buffer_id)
        return 0 if idx is None else idx

    def select_index(self, idx: int) -> None:
        self.state.selected_idx = idx
        self._clamp_selection()

    def restore_selection(self, item_id: int | None) -> bool:
        """Move the selection onto ``item_id``'s row; unknown ids leave it as is."""
        idx = find_file_row_index(self.state.rows, item_id)
        if idx is None:
            return False
        self.state.selected_idx = idx
        return True

    def _selected_file_id(self) -> int | None:
        row = self.state.selected_row()
        if row is not None and row.is_file and row.id in self.state.item_ids():
            return row.id
        return None

    def switch_to(self, style: str) -> None:
        """Change the view, keeping the selected buffer (or the current one) selected."""
        if style not in VIEW_STYLES:
            raise ValueError(f"unknown view style {style!r}")
        if style == self.state.style:
            return
        keep_id = self._selected_file_id()
        if keep_id is None:
            keep_id = self.deps.current_buffer_id
        self.state.style = style
        if not self.restore_selection(keep_id):
            self._clamp_selection()

    def enter_filter_mode(self) -> None:
        """Start filtering; repeated calls keep any view chosen since."""
        if self.state.filter_active:
            return
        self.state.filter_active = True
        if self.config.switch_on_filter:
            self.switch_to(STYLE_FLAT)

    def leave_filter_mode(self) -> None:
        if not self.state.filter_active:
            return
        self.state.filter_active = False
        if self.config.switch_on_filter:
            self.switch_to(STYLE_TREE)

    def close(self) -> None:
        self.state.closed = True

    def select(self) -> bool:
        """Open the selected buffer, or hand a directory to ``on_folder_select``."""
        row = self.state.selected_row()
        if row is None:
            return False
        if row.is_file and row.id is not None:
            if row.id not in self.state.item_ids():
                return False
            self.close()
            self.deps.open_buffer(row.id)
            return True
        if row.kind == KIND_DIR and self.config.on_folder_select is not None:
            self.close()
            self.config.on_folder_select(row.path)
            return True
        return False

    def _row_after_removal(self, idx: int) -> RenderedRow | None:
        rows = self.state.rows
        if idx + 1 < len(rows):
            return rows[idx + 1]
        if idx - 1 >= 0:
            return rows[idx - 1]
        return None

    def delete_selected(self) -> bool:
        """Delete the selected buffer and rebuild, dropping emptied directories.

        The buffer that was current when the picker opened is never deleted.
        Closes the picker once no buffers remain.
        """
        row = self.state.selected_row()
        if row is None or not row.is_file or row.id not in self.state.item_ids():
            return False
        if row.id == self.deps.current_buffer_id:
            self.state.message = CANNOT_DELETE_CURRENT
            self.log.warning("%s (id %s)", CANNOT_DELETE_CURRENT, row.id)
            return False

        neighbour = self._row_after_removal(self.state.selected_idx)
        stay_on_id = neighbour.id if neighbour is not None and neighbour.is_file else None

        delete = self.deps.delete_buffer or getattr(self.deps.source, "delete_buffer", None)
        if delete is None:
            raise TypeError("buffer source does not support deletion and no delete_buffer hook was given")
        delete(row.id)
        self.state.message = ""
        self.log.debug("deleted buffer %s", row.id)

        self.rebuild()
        if not self.state.items:
            self.close()
            return True
        self.restore_selection(stay_on_id)
        return True

    def run_action(self, key: str) -> bool:
        """Run the custom action bound to ``key`` with the selected row."""
        action = self.config.actions.get(key)
        if action is None:
            return False
        row = self.state.selected_row()
        if self.config.action_close:
            self.close()
        action(self, row)
        return True


__all__ = [
    "BufferPicker",
    "BufferPickerDeps",
    "CANNOT_DELETE_CURRENT",
    "find_file_row_index",
]
