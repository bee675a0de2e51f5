# Argbind Argument Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `SchemaParser`, which binds a flat list of command-line
tokens onto the fields of a schema dataclass.

A parse runs in two phases. The scanner walks the tokens once, matching each one
case-insensitively against the short and long tags of the schema's definitions.
A boolean field is set to True by its bare tag; any other field consumes the next
token and converts it to the field's semantic type. Tokens matching no tag are
ignored unless `BindConfig.reject_unknown` is set. After the scan the validator
checks that every required argument was given, unless a help argument was given,
in which case the call succeeds straight away.

Every failure aborts the parse with a single `ArgumentError`. By default fields
bound before the failing token keep their new values; with `BindConfig.atomic`
the target is only written once the whole parse has succeeded.

Public Interface:
- `SchemaParser(schema_type)`: Parser bound to one schema type.
- `parse(schema_type, tokens)`: Bind onto a fresh instance.
- `parse_into(tokens, target)`: Bind onto an existing instance.
- `get_help_text(schema_type)`: Render the aligned help listing.
- `render_help(schema_type)`: Print the help listing with rich.

Example Usage:
    @schema
    class Args:
        path: str = argument("--path|-p", help="Target path.")
        enable: bool = argument("--enable", optional=True)
        index: int = argument("-i|--index")

    args = parse(Args, ["-p", "C:\\\\Windows", "--enable", "--index", "5"])
    # Args(path='C:\\\\Windows', enable=True, index=5)
"""
from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from rich.console import Console
from rich.markup import escape

from argbind.config import DEFAULT_CONFIG, BindConfig
from argbind.console import console as default_console
from argbind.exceptions import (
    DuplicateArgumentError,
    MissingArgumentValueError,
    MissingRequiredArgumentError,
    UnknownArgumentError,
)
from argbind.logger import logger
from argbind.parser.argument import ArgumentDefinition
from argbind.parser.help_formatter import format_help
from argbind.parser.parser_types import ArgumentState
from argbind.parser.schema import get_definitions, get_description
from argbind.parser.tags import normalize_tag
from argbind.parser.utils import convert_value

T = TypeVar("T")


class SchemaParser(Generic[T]):
    """
    Token binder for one schema type.

    The definition table is resolved once, on construction, and shared with every
    other parser of the same schema type. Each call to `parse`/`parse_into` keeps its
    own scan state, so one parser may be used from several threads as long as they
    bind onto different target instances.

    Features:
    - Case-insensitive short (`-p`) and long (`--path`) tags.
    - Boolean presence flags.
    - Typed conversion for sized integers, floats, decimals, chars and datetimes.
    - Duplicate and missing-value detection during the scan.
    - Required-argument validation with a help short-circuit.
    - Aligned plain-text and rich help rendering.
    """

    def __init__(self, schema_type: type[T], config: BindConfig | None = None) -> None:
        self.schema_type: type[T] = schema_type
        self.config: BindConfig = config or DEFAULT_CONFIG
        self._definitions: tuple[ArgumentDefinition, ...] = get_definitions(schema_type)
        self.description: str | None = get_description(schema_type)

    @property
    def definitions(self) -> tuple[ArgumentDefinition, ...]:
        return self._definitions

    def _match(self, token: str, states: list[ArgumentState]) -> ArgumentState | None:
        """Return the first state whose definition carries `token`, in declaration order."""
        for state in states:
            if state.arg.matches(token):
                return state
        return None

    def _read_value(
        self, spec: ArgumentDefinition, tag: str, tokens: Sequence[str], i: int
    ) -> Any:
        if i + 1 >= len(tokens):
            raise MissingArgumentValueError(tag)
        return convert_value(tokens[i + 1], spec.field_type, tag=tag)

    def _scan(self, tokens: Sequence[str], target: T) -> tuple[list[ArgumentState], dict]:
        states = [ArgumentState(arg) for arg in self._definitions]
        pending: dict[str, Any] = {}

        for position, token in enumerate(tokens):
            if not isinstance(token, str):
                raise TypeError(
                    f"Token at position {position} must be a string, got {token!r}"
                )

        i = 0
        while i < len(tokens):
            token = tokens[i]
            tag = normalize_tag(token)
            state = self._match(tag, states)
            if state is None:
                if self.config.reject_unknown:
                    raise UnknownArgumentError(token)
                logger.debug("Ignoring unrecognized token %r at position %d", token, i)
                i += 1
                continue

            spec = state.arg
            if state.is_set:
                raise DuplicateArgumentError(tag, state.set_position)

            if spec.takes_value:
                value = self._read_value(spec, tag, tokens, i)
                step = 2
            else:
                value = True
                step = 1

            if self.config.atomic:
                pending[spec.dest] = value
            else:
                setattr(target, spec.dest, value)
            state.set(i)
            i += step

        return states, pending

    def _validate(self, states: list[ArgumentState]) -> None:
        """Check required arguments unless a help argument was given."""
        if any(state.is_set and state.arg.is_help for state in states):
            logger.debug(
                "Help requested for %s, skipping required checks",
                self.schema_type.__name__,
            )
            return
        for state in states:
            if not state.arg.optional and not state.is_set:
                raise MissingRequiredArgumentError(state.arg.preferred_tag, state.arg.help)

    def parse_into(self, tokens: Sequence[str], target: T) -> T:
        """
        Bind `tokens` onto an existing schema instance.

        Args:
            tokens (Sequence[str]): The command-line tokens, without the program name.
            target (T): The instance to write into; fields keep their current values
                unless their argument is given.

        Returns:
            T: `target`, after binding.

        Raises:
            ArgumentError: On a duplicate, missing value, conversion failure, missing
                required argument or, in strict mode, an unknown token.
        """
        if not isinstance(target, self.schema_type):
            raise TypeError(
                f"Target must be a {self.schema_type.__name__} instance, "
                f"got {type(target).__name__}"
            )
        try:
            states, pending = self._scan(tokens, target)
            self._validate(states)
        except Exception as error:
            logger.debug("Binding %s failed: %s", self.schema_type.__name__, error)
            raise

        for dest, value in pending.items():
            setattr(target, dest, value)
        return target

    def parse(self, tokens: Sequence[str]) -> T:
        """Bind `tokens` onto a fresh instance of the schema type."""
        return self.parse_into(tokens, self.schema_type())

    def get_help_text(self) -> str:
        """Return the aligned help listing as plain text."""
        return format_help(self._definitions, self.description, self.config)

    def render_help(self, console: Console | None = None) -> None:
        """
        Print the help listing using Rich output.

        The description is printed in bold; rows are escaped so tags and help text
        are never read as markup.
        """
        console = console or default_console
        header, *rows = self.get_help_text().splitlines()
        console.print(f"[bold]{escape(header)}[/bold]")
        for row in rows:
            console.print(escape(row), highlight=False)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """Return the definition table as a list of plain dictionaries."""
        return [arg.to_dict() for arg in self._definitions]

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        required = sum(not arg.optional for arg in self._definitions)
        helpers = sum(arg.is_help for arg in self._definitions)
        return (
            f"SchemaParser(schema={self.schema_type.__name__}, "
            f"args={len(self._definitions)}, required={required}, help={helpers})"
        )

    def __repr__(self) -> str:
        return str(self)


def parse(
    schema_type: type[T], tokens: Sequence[str], config: BindConfig | None = None
) -> T:
    """Construct a fresh `schema_type` instance and bind `tokens` onto it."""
    return SchemaParser(schema_type, config).parse(tokens)


def parse_into(tokens: Sequence[str], target: T, config: BindConfig | None = None) -> T:
    """Bind `tokens` onto a caller-provided schema instance and return it."""
    return SchemaParser(type(target), config).parse_into(tokens, target)


def get_help_text(schema_type: type, config: BindConfig | None = None) -> str:
    """Render the aligned help listing for `schema_type`."""
    return SchemaParser(schema_type, config).get_help_text()


def render_help(
    schema_type: type,
    config: BindConfig | None = None,
    console: Console | None = None,
) -> None:
    """Print the help listing for `schema_type` with rich."""
    SchemaParser(schema_type, config).render_help(console)
