"""Command-line front door for buftree.

Treats each path argument (or each stdin line) as an open buffer, numbered
from 1 in the order given, and prints the tree or flat view of them.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ._logging import configure_cli_logging
from .config import STYLE_FLAT, ConfigError, PickerConfig, resolve_config
from .decorations import DiagnosticIndex, Decorations, icon_provider_for
from .decorations.diagnostics import SEVERITY_BY_NAME
from .health import check_health, format_health, has_errors
from .render import format_rows
from .tree_model import StaticBufferSource, build_flat_rows, build_tree_rows, collect_items, path_for_buffer
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _diagnostic_arg(value: str) -> tuple[str, int]:
    """argparse type for ``PATH=SEVERITY`` values."""
    path, sep, severity = value.rpartition("=")
    if not sep or not path:
        raise argparse.ArgumentTypeError(f"expected PATH=SEVERITY, got {value!r}")
    rank = SEVERITY_BY_NAME.get(severity.strip().lower())
    if rank is None:
        choices = ", ".join(SEVERITY_BY_NAME)
        raise argparse.ArgumentTypeError(f"unknown severity {severity!r} (choose from {choices})")
    return path, rank


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buftree",
        description="Show a list of open files as a directory tree or a flat list.",
    )
    parser.add_argument("paths", nargs="*", help="Buffer paths. Read from stdin, one per line, when omitted.")
    parser.add_argument("--flat", action="store_true", help="Print the flat list instead of the tree.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--no-icons", action="store_true", help="Do not show file icons.")
    parser.add_argument(
        "--diagnostic",
        action="append",
        default=[],
        type=_diagnostic_arg,
        metavar="PATH=SEVERITY",
        help="Attach a diagnostic (error, warn, info, hint) to a buffer. Repeatable.",
    )
    parser.add_argument("--cwd", default=None, help="Directory display paths are made relative to.")
    parser.add_argument("--no-config", action="store_true", help="Ignore the user config file.")
    parser.add_argument("--health", action="store_true", help="Report backend availability and exit.")
    parser.add_argument("--debug", action="store_true", help="Log debug output to stderr.")
    return parser


def _read_stdin_paths() -> list[str]:
    if sys.stdin is None or sys.stdin.isatty():
        return []
    return [line.strip() for line in sys.stdin if line.strip()]


def _cli_overrides(args: argparse.Namespace) -> dict[str, object]:
    overrides: dict[str, object] = {}
    if args.flat:
        overrides["initial_style"] = STYLE_FLAT
    if args.theme is not None:
        overrides["theme"] = args.theme
    if args.no_icons:
        overrides["icons"] = "none"
    if args.diagnostic:
        overrides["diagnostics"] = True
    return overrides


def render_listing(
    names: Sequence[str],
    picker_config: PickerConfig,
    *,
    diagnostics: Sequence[tuple[str, int]] = (),
    cwd: str | None = None,
    no_color: bool = False,
    log: bool = False,
) -> str:
    """Render ``names`` as buffers using the configured view style."""
    source = StaticBufferSource.from_names(names)
    items = collect_items(source, cwd=cwd, log=log)
    theme = resolve_theme(picker_config.theme, no_color=no_color)

    if picker_config.initial_style == STYLE_FLAT:
        lines = format_rows(build_flat_rows(items), theme, flat=True)
    else:
        index = DiagnosticIndex()
        ids_by_path: dict[str, list[int]] = {}
        for item in items:
            ids_by_path.setdefault(item.path, []).append(item.id)
        for name, rank in diagnostics:
            for item_id in ids_by_path.get(path_for_buffer(name, cwd=cwd), []):
                index.add(item_id, rank)
        icons = icon_provider_for(picker_config.icons)
        decorations = Decorations(icons=icons, diagnostics=picker_config.diagnostics, severity_for=index)
        rows = build_tree_rows(items, decorations)
        lines = format_rows(rows, theme, show_icons=icons is not None)
    return "".join(line + "\n" for line in lines)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and print the buffer listing."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_cli_logging(args.debug)

    if args.health:
        checks = check_health()
        sys.stdout.write(format_health(checks, resolve_theme(args.theme, no_color=args.no_color)))
        if has_errors(checks):
            raise SystemExit(1)
        return

    try:
        picker_config = resolve_config(_cli_overrides(args), use_file=not args.no_config)
    except ConfigError as exc:
        raise SystemExit(f"buftree: {exc}") from exc

    names = list(args.paths) or _read_stdin_paths()
    logger.debug("rendering %d buffers as %s", len(names), picker_config.initial_style)
    sys.stdout.write(
        render_listing(
            names,
            picker_config,
            diagnostics=args.diagnostic,
            cwd=args.cwd,
            no_color=args.no_color,
            log=args.debug,
        )
    )


if __name__ == "__main__":
    main()
