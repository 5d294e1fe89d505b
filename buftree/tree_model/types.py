"""Item and row datatypes shared by the collector and renderers."""

from __future__ import annotations

from dataclasses import dataclass

KIND_ROOT = "root"
KIND_DIR = "dir"
KIND_FILE = "file"

NO_NAME_LABEL = "[No Name]"


@dataclass(frozen=True)
class BufferItem:
    """One open buffer with its display path split into segments."""

    id: int
    name: str
    path: str
    segments: tuple[str, ...]

    @property
    def has_path(self) -> bool:
        return self.path != NO_NAME_LABEL


@dataclass(frozen=True)
class Decoration:
    """Glyph plus an optional style hint (highlight group or lexer name)."""

    glyph: str
    style: str | None = None


@dataclass(frozen=True)
class RenderedRow:
    """One display row produced by the tree or flat renderer."""

    kind: str
    id: int | None
    path: str
    ordinal: str
    tree_prefix: str
    label: str
    icon: Decoration | None = None
    diagnostic: Decoration | None = None

    @property
    def is_file(self) -> bool:
        return self.kind == KIND_FILE
