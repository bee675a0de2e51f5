"""Command-line entry point glue around argbind: read argv, bind, print."""
import sys
from datetime import datetime
from decimal import Decimal

from rich.console import Console

from argbind import ArgumentError, UInt16, argument, parse, render_help, schema
from argbind.utils import setup_logging

console = Console()


@schema(description="Copy a directory tree.")
class CopyArgs:
    path: str = argument("--path|-p", help="Source directory.")
    enable: bool = argument("--enable", optional=True, help="Actually copy files.")
    index: int = argument("-i|--index", help="Index of the first file\nto copy.")
    port: UInt16 = argument(optional=True, default=8080, help="Port to report to.")
    budget: Decimal | None = argument("--budget|-b", optional=True)
    since: datetime | None = argument(optional=True, help="Only newer files.")
    help: bool = argument("--help|-h", optional=True, is_help=True, help="Show help.")


def main(argv: list[str]) -> int:
    try:
        args = parse(CopyArgs, argv)
    except ArgumentError as error:
        console.print(f"[bold red]error:[/] {error}", highlight=False)
        return 2
    if args.help:
        render_help(CopyArgs, console=console)
        return 0
    console.print(args)
    return 0


if __name__ == "__main__":
    setup_logging()
    sys.exit(main(sys.argv[1:]))
