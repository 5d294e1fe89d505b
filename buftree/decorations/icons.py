"""Icon providers for tree and flat rows.

The pygments provider picks a file glyph from the lexer registered for the
file name, so any language pygments knows about gets a short tag such as
``py`` or ``rs``. Unknown names get the generic file glyph.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Protocol

from pygments.lexers import find_lexer_class_for_filename

from ..tree_model.types import KIND_FILE, Decoration

DIRECTORY_ICON = Decoration("▸", "Directory")
DEFAULT_FILE_ICON = Decoration("·", None)
ICON_GLYPH_WIDTH = 2

ICON_BACKENDS = ("pygments", "none")


class IconProvider(Protocol):
    def get_icon(self, kind: str, name: str) -> Decoration | None:
        ...


@lru_cache(maxsize=1024)
def lexer_icon_for_filename(name: str) -> Decoration | None:
    """Return a glyph derived from the pygments lexer for ``name``."""
    lexer_cls = find_lexer_class_for_filename(name)
    if lexer_cls is None:
        return None
    aliases = [alias for alias in getattr(lexer_cls, "aliases", ()) if alias]
    if not aliases:
        return Decoration(lexer_cls.name[:ICON_GLYPH_WIDTH].lower(), lexer_cls.name)
    shortest = min(aliases, key=lambda alias: (len(alias), alias))
    return Decoration(shortest[:ICON_GLYPH_WIDTH], lexer_cls.name)


class PygmentsIconProvider:
    """File icons from the pygments lexer registry, one glyph for directories."""

    def __init__(
        self,
        directory_icon: Decoration = DIRECTORY_ICON,
        default_file_icon: Decoration | None = DEFAULT_FILE_ICON,
    ) -> None:
        self.directory_icon = directory_icon
        self.default_file_icon = default_file_icon

    def get_icon(self, kind: str, name: str) -> Decoration | None:
        if kind != KIND_FILE:
            return self.directory_icon
        return lexer_icon_for_filename(name) or self.default_file_icon


def icon_provider_for(backend: str | None) -> IconProvider | None:
    """Return the provider for a backend name; ``None`` means no icons."""
    if backend == "pygments":
        return PygmentsIconProvider()
    return None


__all__ = [
    "DEFAULT_FILE_ICON",
    "DIRECTORY_ICON",
    "ICON_BACKENDS",
    "IconProvider",
    "PygmentsIconProvider",
    "icon_provider_for",
    "lexer_icon_for_filename",
]
