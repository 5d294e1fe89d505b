"""Buffer collection, tree construction, compression, and row flattening.

Defines ``BufferItem``/``RenderedRow`` and the pipeline that turns a buffer
snapshot into tree-mode or flat-mode display rows.
"""

from __future__ import annotations

from .build import NodeTree, TreeNode, build_tree
from .collect import BufferRecord, BufferSource, StaticBufferSource, base_sort_key, collect_items
from .compress import compress_directory
from .paths import join, make_ordinal, path_for_buffer, segments_for_path
from .rendering import build_flat_rows, build_tree_rows, render_flat_rows, render_tree_rows
from .types import KIND_DIR, KIND_FILE, KIND_ROOT, NO_NAME_LABEL, BufferItem, Decoration, RenderedRow

__all__ = [
    "BufferItem",
    "BufferRecord",
    "BufferSource",
    "Decoration",
    "KIND_DIR",
    "KIND_FILE",
    "KIND_ROOT",
    "NO_NAME_LABEL",
    "NodeTree",
    "RenderedRow",
    "StaticBufferSource",
    "TreeNode",
    "base_sort_key",
    "build_flat_rows",
    "build_tree",
    "build_tree_rows",
    "collect_items",
    "compress_directory",
    "join",
    "make_ordinal",
    "path_for_buffer",
    "render_flat_rows",
    "render_tree_rows",
    "segments_for_path",
]
