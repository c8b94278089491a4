"""CLI entry point for ptrack."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ptrack import __version__
from ptrack.errors import ScanError
from ptrack.scanner import scan_directory


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich."""
    from rich.console import Console
    from rich.logging import RichHandler

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def _find(scan_path: str, *, sort: bool = False) -> list[str]:
    projects = scan_directory(scan_path)
    return sorted(projects) if sort else projects


def print_summary(scan_path: str, *, sort: bool = False) -> None:
    """Print found projects as a Rich table to stdout."""
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
    from rich.text import Text

    from ptrack.theme import CYAN, GREEN, MUTED, RED, SURFACE, project_label, render_banner

    console = Console()
    console.print(render_banner())

    projects = _find(scan_path, sort=sort)
    if not projects:
        console.print(f"[{RED}]No git projects found.[/{RED}] Try: ptrack ~/code")
        return

    table = Table(border_style=SURFACE, show_edge=True, pad_edge=True)
    table.add_column("#", justify="right", style=MUTED)
    table.add_column("Project")
    table.add_column("Path", style=MUTED, overflow="fold")

    for i, path in enumerate(projects, 1):
        table.add_row(str(i), project_label(path, scan_path), Text(path))

    console.print(table)
    console.print(
        f"  [bold {GREEN}]{len(projects)}[/bold {GREEN}]"
        f" [{MUTED}]projects under[/{MUTED}] [{CYAN}]{escape(scan_path)}[/{CYAN}]"
    )


def print_json(scan_path: str, *, sort: bool = False) -> None:
    """Dump found projects as JSON to stdout."""
    projects = _find(scan_path, sort=sort)
    data = {
        "root": scan_path,
        "projects": projects,
        "count": len(projects),
    }
    print(json.dumps(data, indent=2))


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ptrack CLI."""
    parser = argparse.ArgumentParser(
        prog="ptrack",
        description="Find every git project under a directory.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory to scan for git projects (default: current directory)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output found projects as JSON",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort projects by path instead of walk order",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each discovered project to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"ptrack {__version__}",
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.json_output:
            print_json(args.path, sort=args.sort)
        else:
            print_summary(args.path, sort=args.sort)
    except ScanError as exc:
        from rich.console import Console
        from rich.markup import escape

        from ptrack.theme import RED

        Console(stderr=True).print(f"[{RED}]{escape(str(exc))}[/{RED}]", highlight=False)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
