"""Flatten buffer trees and item lists into display rows.

Tree mode sorts each directory's children right before walking them, then
compresses single-child directory chains, so the visual order never depends on
the order buffers were collected in.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .build import NodeTree, TreeNode, build_tree
from .compress import compress_directory
from .paths import HOME_MARKER, ROOT_MARKER, ROOT_MARKERS, make_ordinal
from .types import KIND_DIR, KIND_FILE, BufferItem, RenderedRow

if TYPE_CHECKING:
    from ..decorations import Decorations

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_INDENT = "│   "
BLANK_INDENT = "    "


def child_sort_key(node: TreeNode, at_root: bool) -> tuple[int, str]:
    """Directories first, root markers after other top-level directories, then name."""
    if node.kind == KIND_DIR:
        rank = 2 if at_root and node.name in ROOT_MARKERS else 0
    else:
        rank = 1
    return (rank, node.name)


def sort_children(tree: NodeTree, node: TreeNode, at_root: bool) -> list[TreeNode]:
    return sorted(tree.children_of(node), key=lambda child: child_sort_key(child, at_root))


def directory_label(name: str) -> str:
    if name == ROOT_MARKER:
        return ROOT_MARKER
    if name == HOME_MARKER:
        return HOME_MARKER + "/"
    return name + "/"


def render_tree_rows(tree: NodeTree, decorations: Decorations | None = None) -> list[RenderedRow]:
    """Walk ``tree`` depth-first and return one row per directory and file."""
    rows: list[RenderedRow] = []

    def walk(node: TreeNode, prefix: str, at_root: bool) -> None:
        children = sort_children(tree, node, at_root)
        count = len(children)
        for idx, child in enumerate(children):
            if child.kind == KIND_DIR:
                child = compress_directory(tree, child)

            last = idx == count - 1
            connector = "" if at_root else (LAST_BRANCH if last else BRANCH)
            next_prefix = "" if at_root else prefix + (BLANK_INDENT if last else PIPE_INDENT)
            label = directory_label(child.name) if child.kind == KIND_DIR else child.name

            rows.append(
                RenderedRow(
                    kind=child.kind,
                    id=child.item_id,
                    path=child.path,
                    ordinal=make_ordinal(child.path, child.name, child.item_id),
                    tree_prefix=prefix + connector,
                    label=label,
                    icon=decorations.icon(child.kind, child.name) if decorations is not None else None,
                    diagnostic=decorations.diagnostic(child.kind, child.item_id) if decorations is not None else None,
                )
            )

            if child.kind == KIND_DIR:
                walk(child, next_prefix, False)

    walk(tree.root, "", True)
    return rows


def render_flat_rows(items: Iterable[BufferItem]) -> list[RenderedRow]:
    """Return one undecorated file row per item, labelled with its full path."""
    return [
        RenderedRow(
            kind=KIND_FILE,
            id=item.id,
            path=item.path,
            ordinal=make_ordinal(item.path, None, item.id),
            tree_prefix="",
            label=item.path,
        )
        for item in items
    ]


def build_tree_rows(items: Iterable[BufferItem], decorations: Decorations | None = None) -> list[RenderedRow]:
    """Build and flatten the directory tree for ``items``."""
    return render_tree_rows(build_tree(items), decorations)


def build_flat_rows(items: Iterable[BufferItem]) -> list[RenderedRow]:
    return render_flat_rows(items)


__all__ = [
    "BLANK_INDENT",
    "BRANCH",
    "LAST_BRANCH",
    "PIPE_INDENT",
    "build_flat_rows",
    "build_tree_rows",
    "child_sort_key",
    "directory_label",
    "render_flat_rows",
    "render_tree_rows",
    "sort_children",
]
