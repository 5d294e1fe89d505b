"""Buffer collection and base ordering.

The collector snapshots an external buffer source once per pass. It never
writes back to the source.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from .._logging import resolve_logger
from .paths import basename, path_for_buffer, segments_for_path
from .types import BufferItem


@dataclass(frozen=True)
class BufferRecord:
    """Raw buffer as reported by a source: id, full name, listed flag."""

    id: int
    name: str
    listed: bool = True


class BufferSource(Protocol):
    def list_buffers(self) -> Iterable[BufferRecord]:
        ...


class StaticBufferSource:
    """In-memory buffer registry used by the CLI and tests."""

    def __init__(self, records: Iterable[BufferRecord] = ()) -> None:
        self._records: list[BufferRecord] = list(records)

    @classmethod
    def from_names(cls, names: Iterable[str], start_id: int = 1) -> StaticBufferSource:
        """Number ``names`` consecutively from ``start_id``."""
        return cls(BufferRecord(idx, name) for idx, name in enumerate(names, start=start_id))

    def list_buffers(self) -> list[BufferRecord]:
        return list(self._records)

    def delete_buffer(self, buffer_id: int) -> bool:
        """Remove ``buffer_id``; return whether it was present."""
        before = len(self._records)
        self._records = [record for record in self._records if record.id != buffer_id]
        return len(self._records) != before


def base_sort_key(item: BufferItem) -> tuple[bool, int, str]:
    """Placeholder paths last, then shallower paths, then lexical path."""
    return (not item.has_path, item.path.count("/"), item.path)


def make_item(record: BufferRecord, cwd: str | None = None, home: str | None = None) -> BufferItem:
    path = path_for_buffer(record.name, cwd=cwd, home=home)
    return BufferItem(
        id=record.id,
        name=basename(path),
        path=path,
        segments=tuple(segments_for_path(path)),
    )


def collect_items(
    source: BufferSource,
    *,
    cwd: str | None = None,
    home: str | None = None,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> list[BufferItem]:
    """Snapshot listed buffers from ``source`` in canonical base order."""
    lg = resolve_logger(logger, enabled=log, name=__name__)
    items = [make_item(record, cwd=cwd, home=home) for record in source.list_buffers() if record.listed]
    items.sort(key=base_sort_key)
    lg.debug("collected %d listed buffers", len(items))
    return items


__all__ = [
    "BufferRecord",
    "BufferSource",
    "StaticBufferSource",
    "base_sort_key",
    "collect_items",
    "make_item",
]
