# Argbind Argument Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders the aligned usage listing for a definition table.

Each argument gets one row: the long tag, the short tag and the help text, with the
tag columns padded to the widest entry across the whole listing:

    Copy files around.
      --path       -p    Source path.
      --verbose    -v    (Optional) Chatty output.
      --retries          (Optional) Retry count.

Continuation lines of multi-line help text are indented under the help column.
"""
from typing import Sequence

from argbind.config import DEFAULT_CONFIG, BindConfig
from argbind.parser.argument import ArgumentDefinition


def format_help(
    definitions: Sequence[ArgumentDefinition],
    description: str | None = None,
    config: BindConfig = DEFAULT_CONFIG,
) -> str:
    """
    Render the help text for `definitions`.

    Args:
        definitions (Sequence[ArgumentDefinition]): Definitions in declaration order.
        description (str | None): Type-level description line. Falls back to
            `config.default_description`.
        config (BindConfig): Layout settings.

    Returns:
        str: The rendered help text, one line per definition after the description.
    """
    long_width = max((len(arg.long_tag or "") for arg in definitions), default=0)
    short_width = max((len(arg.short_tag or "") for arg in definitions), default=0)
    gutter = " " * config.gutter

    lines = [description or config.default_description]
    for arg in definitions:
        columns = []
        if long_width:
            columns.append(f"{arg.long_tag or '':<{long_width}}")
        if short_width:
            columns.append(f"{arg.short_tag or '':<{short_width}}")
        lead = " " * config.indent + gutter.join(columns) + gutter

        help_text = arg.help or ""
        if arg.optional:
            help_text = f"{config.optional_prefix}{help_text}"
        first, *rest = help_text.splitlines() or [""]
        lines.append(f"{lead}{first}".rstrip())
        padding = " " * len(lead)
        lines.extend(f"{padding}{line}".rstrip() for line in rest)

    return "\n".join(lines)
