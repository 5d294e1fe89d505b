"""Directory tree construction over collected buffer items.

Nodes live in an arena (``NodeTree.nodes``). A directory owns its children by
arena index; a child refers back to its parent only by path key. Directory
nodes are created at most once per key, so the structure is a tree by
construction.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from .paths import join
from .types import KIND_DIR, KIND_FILE, KIND_ROOT, BufferItem

ROOT_KEY = ""


@dataclass(frozen=True)
class TreeNode:
    """One root, directory, or file node.

    ``children`` holds arena indices in first-discovery order. ``parent_key`` is
    the path key of the owning directory, ``None`` for the root.
    """

    kind: str
    name: str
    path: str
    children: tuple[int, ...] = ()
    parent_key: str | None = None
    item_id: int | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind != KIND_FILE


@dataclass
class NodeTree:
    """Arena of nodes plus the path-key index for directories."""

    nodes: list[TreeNode] = field(default_factory=list)
    dir_index: dict[str, int] = field(default_factory=dict)

    @property
    def root(self) -> TreeNode:
        return self.nodes[self.dir_index[ROOT_KEY]]

    def node(self, index: int) -> TreeNode:
        return self.nodes[index]

    def children_of(self, node: TreeNode) -> list[TreeNode]:
        return [self.nodes[idx] for idx in node.children]

    def directory(self, key: str) -> TreeNode | None:
        idx = self.dir_index.get(key)
        return None if idx is None else self.nodes[idx]

    def parent_of(self, node: TreeNode) -> TreeNode | None:
        if node.parent_key is None:
            return None
        return self.directory(node.parent_key)

    def file_nodes(self) -> list[TreeNode]:
        return [node for node in self.nodes if node.kind == KIND_FILE]

    def _add(self, node: TreeNode) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def _append_child(self, parent_idx: int, child_idx: int) -> None:
        parent = self.nodes[parent_idx]
        self.nodes[parent_idx] = replace(parent, children=parent.children + (child_idx,))

    def ensure_dir(self, key: str, name: str, parent_idx: int) -> int:
        """Return the directory index for ``key``, creating it under ``parent_idx`` once."""
        existing = self.dir_index.get(key)
        if existing is not None:
            return existing
        parent_key = self.nodes[parent_idx].path
        idx = self._add(TreeNode(KIND_DIR, name, key, parent_key=parent_key))
        self.dir_index[key] = idx
        self._append_child(parent_idx, idx)
        return idx

    def add_file(self, item: BufferItem, parent_idx: int) -> int:
        segments = item.segments
        file_name = segments[-1] if segments else item.path
        idx = self._add(
            TreeNode(
                KIND_FILE,
                file_name,
                item.path,
                parent_key=self.nodes[parent_idx].path,
                item_id=item.id,
            )
        )
        self._append_child(parent_idx, idx)
        return idx


def new_tree() -> NodeTree:
    tree = NodeTree()
    tree.dir_index[ROOT_KEY] = tree._add(TreeNode(KIND_ROOT, "", ROOT_KEY))
    return tree


def build_tree(items: Iterable[BufferItem]) -> NodeTree:
    """Build the raw directory tree for ``items`` in their given order."""
    tree = new_tree()
    root_idx = tree.dir_index[ROOT_KEY]
    for item in items:
        segments = item.segments
        parent_idx = root_idx
        for depth in range(1, len(segments)):
            parent_idx = tree.ensure_dir(join(segments, depth), segments[depth - 1], parent_idx)
        tree.add_file(item, parent_idx)
    return tree


__all__ = ["NodeTree", "ROOT_KEY", "TreeNode", "build_tree", "new_tree"]
