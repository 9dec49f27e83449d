"""Command-line interface for checking and previewing themes."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from tint.colors import to_hex, to_rich_color
from tint.errors import ThemeError
from tint.logger import get_logger
from tint.settings import THEME_KEY, get_config_path, load_config_document
from tint.themes import load_theme, theme_fields, theme_schema, validate_theme_document

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1


def get_version() -> str:
    """Get the installed package version.

    Returns:
        Version string, or 'unknown' if it cannot be determined.
    """
    from importlib.metadata import version

    try:
        return version("tint")
    except Exception:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(prog="tint", description="Check and preview terminal UI themes.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("check", "Validate the theme in a configuration file"),
        ("show", "Print the resolved theme"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "path",
            nargs="?",
            type=Path,
            default=None,
            help="Configuration file (default: the user configuration file)",
        )
        sub.add_argument("--lenient", action="store_true", help="Ignore unknown theme fields")

    subparsers.add_parser("schema", help="Print the JSON schema of the theme document")
    return parser


def _check(path: Path | None, strict: bool, console: Console) -> int:
    config_path = path if path is not None else get_config_path()
    try:
        document = load_config_document(config_path)
    except ThemeError as exc:
        logger.warning(str(exc))
        console.print(Text.assemble(("error: ", "bold red"), str(exc)))
        return EXIT_INVALID

    errors = validate_theme_document(document.get(THEME_KEY), strict=strict)
    for error in errors:
        logger.warning(f"{config_path}: {error}")
        console.print(Text.assemble(("error: ", "bold red"), str(error)))

    if errors:
        console.print(f"{len(errors)} error(s) in {config_path}", highlight=False)
        return EXIT_INVALID
    console.print(Text(f"{config_path}: theme is valid", style="green"))
    return EXIT_OK


def _show(path: Path | None, strict: bool, console: Console) -> int:
    try:
        theme = load_theme(load_config_document(path).get(THEME_KEY), strict=strict)
    except ThemeError as exc:
        logger.warning(str(exc))
        console.print(Text.assemble(("error: ", "bold red"), str(exc)))
        return EXIT_INVALID

    table = Table(title="Theme")
    table.add_column("Field")
    table.add_column("Color")
    table.add_column("Hex")
    table.add_column("Swatch")
    for field_path, spec in theme_fields(theme):
        hex_value = to_hex(spec)
        table.add_row(
            field_path,
            str(spec),
            hex_value or "(terminal default)",
            Text("    ", style=Style(bgcolor=to_rich_color(spec))),
        )
    console.print(table)
    return EXIT_OK


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments, without the program name. Defaults to sys.argv.
        console: Console to print to.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    console = console if console is not None else Console()

    if args.command == "schema":
        console.print_json(data=theme_schema())
        return EXIT_OK
    if args.command == "check":
        return _check(args.path, not args.lenient, console)
    return _show(args.path, not args.lenient, console)
