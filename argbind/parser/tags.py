# Argbind Argument Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parses tag specifications such as `"--path|-p"` into a short and a long tag.

Grammar:
    <spec> ::= <tag> | <tag> "|" <tag>
    <tag>  ::= "--" <chars> | "-" <chars>

Each part is trimmed before it is classified, and every tag is lower-cased so that
matching against command-line tokens is case-insensitive.
"""
from __future__ import annotations

from typing import NamedTuple

from argbind.exceptions import InvalidTagFormatError

TAG_SEPARATOR = "|"
LONG_PREFIX = "--"
SHORT_PREFIX = "-"


class TagPair(NamedTuple):
    """The short and long form of one argument. Either may be None, not both."""

    short: str | None
    long: str | None


def normalize_tag(token: str) -> str:
    """Normalize a tag or command-line token for comparison."""
    return token.strip().lower()


def default_tag_spec(field_name: str) -> str:
    """Return the tag spec used when a field does not declare one."""
    return f"{LONG_PREFIX}{field_name}"


def parse_tag_spec(spec: str, field: str | None = None) -> TagPair:
    """
    Parse a tag specification into a `TagPair`.

    Args:
        spec (str): The raw tag specification, e.g. `"--path|-p"` or `"-h"`.
        field (str | None): Field name used in error messages.

    Returns:
        TagPair: The normalized short and long tags.

    Raises:
        InvalidTagFormatError: If the spec has more than two parts, a part lacks a
            leading dash, a part has nothing after its dashes, or both parts are of
            the same kind.
    """
    if not isinstance(spec, str):
        raise InvalidTagFormatError(str(spec), "tag specification must be a string", field)

    parts = spec.split(TAG_SEPARATOR)
    if len(parts) > 2:
        raise InvalidTagFormatError(spec, "at most two tags may be given", field)

    short: str | None = None
    long: str | None = None
    for part in parts:
        tag = normalize_tag(part)
        if tag.startswith(LONG_PREFIX):
            if len(tag) == len(LONG_PREFIX):
                raise InvalidTagFormatError(spec, "long tag must have a name", field)
            if long is not None:
                raise InvalidTagFormatError(spec, "only one long tag is allowed", field)
            long = tag
        elif tag.startswith(SHORT_PREFIX):
            if len(tag) == len(SHORT_PREFIX):
                raise InvalidTagFormatError(spec, "short tag must have a name", field)
            if short is not None:
                raise InvalidTagFormatError(spec, "only one short tag is allowed", field)
            short = tag
        else:
            raise InvalidTagFormatError(
                spec, f"tag '{part.strip()}' must start with '-' or '--'", field
            )

    return TagPair(short=short, long=long)
