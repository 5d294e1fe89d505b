"""Display-path segmentation and reconstruction.

A display path is split on ``/`` into segments. Absolute paths keep a leading
``"/"`` marker segment and home-relative paths a leading ``"~"`` marker, so
``join`` can rebuild the exact prefix for any depth.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

from .types import NO_NAME_LABEL

ROOT_MARKER = "/"
HOME_MARKER = "~"
ROOT_MARKERS = frozenset({ROOT_MARKER, HOME_MARKER})


def split_path(path: str) -> list[str]:
    """Split on ``/`` and drop empty segments from repeated separators."""
    return [segment for segment in path.split("/") if segment]


def segments_for_path(path: str | None) -> list[str]:
    """Parse ``path`` into segments, keeping ``/`` and ``~`` prefixes as markers."""
    if not path:
        return []
    if path == HOME_MARKER:
        return [HOME_MARKER]

    prefix: str | None = None
    rest = path
    if path.startswith("/"):
        prefix, rest = ROOT_MARKER, path[1:]
    elif path.startswith("~/"):
        prefix, rest = HOME_MARKER, path[2:]

    segments = split_path(rest)
    if prefix is not None:
        segments.insert(0, prefix)
    return segments


def join(segments: Sequence[str], n: int | None = None) -> str:
    """Rebuild the path formed by the first ``n`` segments (all by default)."""
    if n is None:
        n = len(segments)
    if n <= 0 or not segments:
        return ""

    first = segments[0]
    if n == 1:
        return first

    rest = "/".join(segments[1:n])
    if first == ROOT_MARKER:
        return "/" + rest
    if first == HOME_MARKER:
        return "~/" + rest
    return "/".join(segments[:n])


def path_for_buffer(name: str | None, cwd: str | None = None, home: str | None = None) -> str:
    """Return the display path for a buffer name.

    Paths under ``cwd`` become relative to it, other paths under ``home`` get a
    ``~`` prefix, and buffers without a name get the ``[No Name]`` placeholder.
    """
    if not name:
        return NO_NAME_LABEL

    cwd = cwd if cwd is not None else os.getcwd()
    home = home if home is not None else os.path.expanduser("~")
    full = os.path.normpath(os.path.join(cwd, os.path.expanduser(name)))

    cwd_norm = os.path.normpath(cwd)
    if full.startswith(cwd_norm.rstrip("/") + "/"):
        return full[len(cwd_norm.rstrip("/")) + 1 :]

    home_norm = os.path.normpath(home)
    if home_norm not in ("", "/"):
        if full == home_norm:
            return HOME_MARKER
        if full.startswith(home_norm + "/"):
            return "~/" + full[len(home_norm) + 1 :]
    return full


def basename(path: str) -> str:
    """Return the last segment of ``path`` (the path itself when it has none)."""
    segments = segments_for_path(path)
    return segments[-1] if segments else path


def make_ordinal(path: str | None, name: str | None, item_id: int | None) -> str:
    """Return the filter key for a row: display path, a space, then the id."""
    return f"{path or name or ''} {'' if item_id is None else item_id}"


__all__ = [
    "HOME_MARKER",
    "ROOT_MARKER",
    "ROOT_MARKERS",
    "basename",
    "join",
    "make_ordinal",
    "path_for_buffer",
    "segments_for_path",
    "split_path",
]
