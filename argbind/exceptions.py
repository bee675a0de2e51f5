# Argbind Argument Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by argbind.

Two families exist. `SchemaError` subclasses report a malformed schema declaration
and are raised while argument definitions are built. `ArgumentError` subclasses
report a problem with the tokens being bound and are raised by the scanner or the
validator. Every failure aborts the current call immediately.

Exception Hierarchy:
- ArgBindError
    ├── SchemaError
    │   ├── InvalidTagFormatError
    │   └── DuplicateDefinitionError
    └── ArgumentError
        ├── DuplicateArgumentError
        ├── MissingArgumentValueError
        ├── ConversionError
        ├── MissingRequiredArgumentError
        └── UnknownArgumentError

Each concrete class exposes an `ErrorKind` through its `kind` attribute so callers
can switch on a single value when rendering messages or choosing exit codes.
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Stable identifiers for every failure argbind can raise."""

    INVALID_TAG_FORMAT = "invalid_tag_format"
    DUPLICATE_DEFINITION = "duplicate_definition"
    DUPLICATE_ARGUMENT = "duplicate_argument"
    MISSING_ARGUMENT_VALUE = "missing_argument_value"
    CONVERSION_ERROR = "conversion_error"
    MISSING_REQUIRED_ARGUMENT = "missing_required_argument"
    UNKNOWN_ARGUMENT = "unknown_argument"

    def __str__(self) -> str:
        return self.value


class ArgBindError(Exception):
    """Base exception for argbind."""

    kind: ErrorKind | None = None


class SchemaError(ArgBindError):
    """Exception raised when a schema declaration cannot be turned into definitions."""


class InvalidTagFormatError(SchemaError):
    """Exception raised when a tag specification does not follow the tag grammar."""

    kind = ErrorKind.INVALID_TAG_FORMAT

    def __init__(self, spec: str, reason: str, field: str | None = None) -> None:
        self.spec = spec
        self.reason = reason
        self.field = field
        where = f" on field '{field}'" if field else ""
        super().__init__(f"Invalid tag specification '{spec}'{where}: {reason}")


class DuplicateDefinitionError(SchemaError):
    """Exception raised when two fields of one schema declare the same tag."""

    kind = ErrorKind.DUPLICATE_DEFINITION

    def __init__(self, tag: str, field: str, existing: str) -> None:
        self.tag = tag
        self.field = field
        self.existing = existing
        super().__init__(
            f"Tag '{tag}' of field '{field}' is already used by field '{existing}'"
        )


class ArgumentError(ArgBindError):
    """Exception raised when the supplied tokens cannot be bound onto a schema."""

    def __init__(self, message: str, tag: str | None = None, token: str | None = None):
        self.tag = tag
        self.token = token
        super().__init__(message)


class DuplicateArgumentError(ArgumentError):
    """Exception raised when a tag appears twice within one token list."""

    kind = ErrorKind.DUPLICATE_ARGUMENT

    def __init__(self, tag: str, first_position: int | None = None) -> None:
        self.first_position = first_position
        message = f"Duplicate argument: '{tag}' was already given"
        if first_position is not None:
            message += f" at position {first_position}"
        super().__init__(message, tag=tag)


class MissingArgumentValueError(ArgumentError):
    """Exception raised when a value-bearing tag is the last token."""

    kind = ErrorKind.MISSING_ARGUMENT_VALUE

    def __init__(self, tag: str) -> None:
        super().__init__(f"Missing value for argument '{tag}'", tag=tag)


class ConversionError(ArgumentError):
    """Exception raised when a value token cannot be converted to the field's type."""

    kind = ErrorKind.CONVERSION_ERROR

    def __init__(
        self,
        token: str,
        target: Any,
        tag: str | None = None,
        reason: str = "",
    ) -> None:
        self.target = target
        self.reason = reason
        where = f" for argument '{tag}'" if tag else ""
        detail = f": {reason}" if reason else ""
        super().__init__(
            f"Cannot convert '{token}' to {target}{where}{detail}", tag=tag, token=token
        )


class MissingRequiredArgumentError(ArgumentError):
    """Exception raised when a required argument was not supplied."""

    kind = ErrorKind.MISSING_REQUIRED_ARGUMENT

    def __init__(self, tag: str, help_text: str = "") -> None:
        help_part = f" help: {help_text}" if help_text else ""
        super().__init__(f"Missing required argument '{tag}'{help_part}", tag=tag)


class UnknownArgumentError(ArgumentError):
    """Exception raised for unrecognized tokens when strict binding is enabled."""

    kind = ErrorKind.UNKNOWN_ARGUMENT

    def __init__(self, token: str) -> None:
        super().__init__(f"Unrecognized argument: '{token}'", token=token)
