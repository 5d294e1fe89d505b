from __future__ import annotations

from dataclasses import dataclass, field

from ..config import STYLE_FLAT, STYLE_TREE
from ..tree_model.types import BufferItem, RenderedRow


@dataclass
class PickerState:
    style: str = STYLE_TREE
    items: list[BufferItem] = field(default_factory=list)
    tree_rows: list[RenderedRow] = field(default_factory=list)
    flat_rows: list[RenderedRow] = field(default_factory=list)
    selected_idx: int = 0
    filter_active: bool = False
    closed: bool = False
    message: str = ""

    @property
    def rows(self) -> list[RenderedRow]:
        """Rows of the active view."""
        return self.flat_rows if self.style == STYLE_FLAT else self.tree_rows

    def selected_row(self) -> RenderedRow | None:
        rows = self.rows
        if not rows or not 0 <= self.selected_idx < len(rows):
            return None
        return rows[self.selected_idx]

    def item_ids(self) -> set[int]:
        return {item.id for item in self.items}
