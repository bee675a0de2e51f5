# Argbind Argument Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentDefinition` dataclass, the resolved metadata for one bindable
schema field.

Definitions are built by the schema introspector from `argument()` field metadata
and are immutable once built, so a cached definition table can be shared between
concurrent parses. Per-parse state such as "has this tag been seen" lives in
`ArgumentState` instead.

Key Attributes:
- `dest`: Name of the schema field the bound value is written to
- `field_type`: Semantic type the value token is converted to
- `short_tag` / `long_tag`: Normalized `-x` / `--name` forms, at least one present
- `optional`: Whether the argument may be omitted
- `is_help`: Whether giving this argument requests help and skips required checks
- `help`: Help text shown by the help formatter
"""
from dataclasses import dataclass
from typing import Any

from argbind.exceptions import InvalidTagFormatError
from argbind.parser.value_kind import FieldType


@dataclass(frozen=True)
class ArgumentDefinition:
    """
    Represents one bindable schema field.

    Attributes:
        dest (str): The schema field the value is written to.
        field_type (FieldType): The semantic type of the field.
        short_tag (str | None): Normalized short tag, e.g. `-p`.
        long_tag (str | None): Normalized long tag, e.g. `--path`.
        optional (bool): True if the argument may be omitted.
        is_help (bool): True if this argument is a help request trigger.
        help (str): Help text for the argument.
    """

    dest: str
    field_type: FieldType
    short_tag: str | None = None
    long_tag: str | None = None
    optional: bool = False
    is_help: bool = False
    help: str = ""

    def __post_init__(self) -> None:
        if not self.short_tag and not self.long_tag:
            raise InvalidTagFormatError(
                "", "argument must have a short or long tag", self.dest
            )

    @property
    def tags(self) -> tuple[str, ...]:
        """All tags of this argument, short tag first."""
        return tuple(tag for tag in (self.short_tag, self.long_tag) if tag)

    @property
    def preferred_tag(self) -> str:
        """The long tag if present, else the short tag."""
        return self.long_tag or self.short_tag  # type: ignore[return-value]

    @property
    def takes_value(self) -> bool:
        """True when a value token must follow the tag."""
        return not self.field_type.is_bool

    def matches(self, token: str) -> bool:
        """Check a normalized token against this argument's tags."""
        return token == self.short_tag or token == self.long_tag

    def to_dict(self) -> dict[str, Any]:
        return {
            "dest": self.dest,
            "short_tag": self.short_tag,
            "long_tag": self.long_tag,
            "type": str(self.field_type),
            "optional": self.optional,
            "is_help": self.is_help,
            "help": self.help,
        }
