# Argbind Argument Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Per-parse state models for the argbind scanner.

`ArgumentState` pairs an immutable `ArgumentDefinition` with the mutable
"has been set" flag for a single parse call. A fresh list of states is built at the
start of every parse, so definition tables can be cached and shared while each
call tracks its own progress.
"""
from dataclasses import dataclass

from argbind.parser.argument import ArgumentDefinition


@dataclass
class ArgumentState:
    """Tracks an argument and whether it has been set during one scan."""

    arg: ArgumentDefinition
    is_set: bool = False
    set_position: int | None = None

    def set(self, position: int | None = None) -> None:
        """Mark this argument as set, optionally recording the token position."""
        self.is_set = True
        self.set_position = position
