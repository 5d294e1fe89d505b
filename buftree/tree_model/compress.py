"""Single-child directory chain compression."""

from __future__ import annotations

from dataclasses import replace

from .build import NodeTree, TreeNode
from .paths import ROOT_MARKERS
from .types import KIND_DIR


def compress_directory(tree: NodeTree, node: TreeNode) -> TreeNode:
    """Merge ``node`` with its only-child directories into one ``a/b/c`` node.

    Root markers and files come back unchanged. The arena is not modified; the
    merged node takes the deepest directory's path key and children.
    """
    if node.kind != KIND_DIR or node.name in ROOT_MARKERS:
        return node

    while len(node.children) == 1:
        child = tree.node(node.children[0])
        if child.kind != KIND_DIR:
            break
        node = replace(node, name=f"{node.name}/{child.name}", path=child.path, children=child.children)
    return node


__all__ = ["compress_directory"]
