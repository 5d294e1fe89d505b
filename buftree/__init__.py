"""Public package surface for buftree.

Exposes the row builders and the picker controller. ``main`` lazily imports
the CLI entrypoint to keep package imports lightweight.
"""

from __future__ import annotations

from .config import PickerConfig, resolve_config
from .decorations import Decorations
from .picker import BufferPicker, BufferPickerDeps
from .tree_model import (
    BufferRecord,
    RenderedRow,
    StaticBufferSource,
    build_flat_rows,
    build_tree_rows,
    collect_items,
)


def main(*args, **kwargs):
    """Lazily import CLI entrypoint."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "BufferPicker",
    "BufferPickerDeps",
    "BufferRecord",
    "Decorations",
    "PickerConfig",
    "RenderedRow",
    "StaticBufferSource",
    "build_flat_rows",
    "build_tree_rows",
    "collect_items",
    "main",
    "resolve_config",
]
