# Argbind Argument Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the declarative schema layer of argbind: the `argument()` field factory,
the `@schema` class decorator, and the introspector that turns a dataclass into an
ordered tuple of `ArgumentDefinition` objects.

A schema is a dataclass whose bindable fields are declared with `argument()`:

    @schema(description="Copy files around.")
    class CopyArgs:
        path: str = argument("--path|-p", help="Source path.")
        verbose: bool = argument("-v", optional=True, help="Chatty output.")
        retries: UInt8 = argument(optional=True, default=3)

Fields declared without `argument()` are ignored and never touched by a parse.
Definition tables are built once per schema type and cached process-wide; the
cache is populated under a lock so concurrent first use builds a single table.

Functions:
- argument: Declare a bindable dataclass field.
- schema: Class decorator that builds and registers the definition table.
- build_definitions: Introspect a dataclass without touching the cache.
- get_definitions: Cached introspection used by the parser.
- get_description: Type-level description used by the help formatter.
"""
from __future__ import annotations

import dataclasses
import inspect
import sys
import typing
from dataclasses import MISSING, dataclass
from threading import Lock
from typing import Any, Callable

from argbind.exceptions import DuplicateDefinitionError, SchemaError
from argbind.logger import logger
from argbind.parser.argument import ArgumentDefinition
from argbind.parser.tags import default_tag_spec, parse_tag_spec
from argbind.parser.value_kind import ValueKind, resolve_field_type

METADATA_KEY = "argbind"
DESCRIPTION_ATTR = "__argbind_description__"

_cache: dict[type, tuple[ArgumentDefinition, ...]] = {}
_cache_lock = Lock()


@dataclass(frozen=True)
class ArgumentMetadata:
    """Raw per-field declaration stored in `dataclasses.Field.metadata`."""

    tags: str = ""
    optional: bool = False
    help: str = ""
    is_help: bool = False
    kind: ValueKind | str | None = None


def argument(
    tags: str = "",
    *,
    optional: bool = False,
    help: str = "",
    is_help: bool = False,
    kind: ValueKind | str | None = None,
    default: Any = None,
    default_factory: Callable[[], Any] | Any = MISSING,
) -> Any:
    """
    Declare a bindable schema field.

    Args:
        tags (str): Tag specification such as `"--path|-p"`. Defaults to
            `"--" + field_name` when empty.
        optional (bool): True if the argument may be omitted.
        help (str): Help text for the argument.
        is_help (bool): True if giving this argument requests help.
        kind (ValueKind | str | None): Explicit semantic type, overriding the annotation.
        default (Any): Value the field holds when the argument is not given.
        default_factory (Callable | None): Factory for mutable defaults.

    Returns:
        dataclasses.Field: A field carrying the argument metadata.
    """
    metadata = {
        METADATA_KEY: ArgumentMetadata(
            tags=tags,
            optional=optional,
            help=help,
            is_help=is_help,
            kind=kind,
        )
    }
    if default_factory is not MISSING:
        return dataclasses.field(default_factory=default_factory, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def _field_annotation(schema_type: type, field: dataclasses.Field) -> Any:
    """
    Resolve one field's annotation on its own.

    String annotations are evaluated against the namespace of the class that
    declares the field. A name that cannot be found there is treated as an
    unsupported custom type and binds as RAW; a malformed annotation is a
    `SchemaError`.
    """
    annotation = field.type
    if isinstance(annotation, typing.ForwardRef):
        annotation = annotation.__forward_arg__
    if not isinstance(annotation, str):
        return annotation

    owner = next(
        (
            klass
            for klass in schema_type.__mro__
            if field.name in inspect.get_annotations(klass)
        ),
        schema_type,
    )
    module = sys.modules.get(owner.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    try:
        return eval(annotation, globalns, dict(vars(owner)))
    except NameError as error:
        logger.debug(
            "Annotation %r of %s.%s is not resolvable, binding as raw: %s",
            annotation,
            schema_type.__name__,
            field.name,
            error,
        )
        return Any
    except (SyntaxError, TypeError, AttributeError) as error:
        raise SchemaError(
            f"Invalid annotation {annotation!r} on field '{field.name}' "
            f"of {schema_type.__name__}: {error}"
        ) from error


def _type_hints(schema_type: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(schema_type, include_extras=True)
    except (NameError, SyntaxError, TypeError) as error:
        logger.debug(
            "Resolving annotations of %s field by field: %s",
            schema_type.__name__,
            error,
        )
    return {
        field.name: _field_annotation(schema_type, field)
        for field in dataclasses.fields(schema_type)
    }


def build_definitions(schema_type: type) -> tuple[ArgumentDefinition, ...]:
    """
    Introspect a dataclass into an ordered tuple of argument definitions.

    Args:
        schema_type (type): A dataclass type.

    Returns:
        tuple[ArgumentDefinition, ...]: One definition per `argument()` field, in
            field declaration order.

    Raises:
        SchemaError: If `schema_type` is not a dataclass.
        InvalidTagFormatError: If a tag specification is malformed.
        DuplicateDefinitionError: If two fields share a short or a long tag.
    """
    if not (isinstance(schema_type, type) and dataclasses.is_dataclass(schema_type)):
        raise SchemaError(f"{schema_type!r} is not a dataclass type")

    hints = _type_hints(schema_type)
    short_owners: dict[str, str] = {}
    long_owners: dict[str, str] = {}
    definitions: list[ArgumentDefinition] = []

    for field in dataclasses.fields(schema_type):
        metadata = field.metadata.get(METADATA_KEY)
        if not isinstance(metadata, ArgumentMetadata):
            continue

        spec = metadata.tags.strip() or default_tag_spec(field.name)
        tag_pair = parse_tag_spec(spec, field=field.name)

        for tag, owners in ((tag_pair.short, short_owners), (tag_pair.long, long_owners)):
            if tag is None:
                continue
            if tag in owners:
                raise DuplicateDefinitionError(tag, field.name, owners[tag])
            owners[tag] = field.name

        definitions.append(
            ArgumentDefinition(
                dest=field.name,
                field_type=resolve_field_type(hints.get(field.name, Any), metadata.kind),
                short_tag=tag_pair.short,
                long_tag=tag_pair.long,
                optional=metadata.optional,
                is_help=metadata.is_help,
                help=metadata.help,
            )
        )

    logger.debug(
        "Built %d argument definitions for %s", len(definitions), schema_type.__name__
    )
    return tuple(definitions)


def get_definitions(schema: Any) -> tuple[ArgumentDefinition, ...]:
    """
    Return the cached definition table for a schema type or instance.

    The first call for a type builds the table under a lock; later calls read it
    without locking.
    """
    schema_type = schema if isinstance(schema, type) else type(schema)
    definitions = _cache.get(schema_type)
    if definitions is not None:
        return definitions
    with _cache_lock:
        definitions = _cache.get(schema_type)
        if definitions is None:
            definitions = build_definitions(schema_type)
            _cache[schema_type] = definitions
    return definitions


def get_description(schema: Any) -> str | None:
    """Return the description registered with `@schema`, if any."""
    schema_type = schema if isinstance(schema, type) else type(schema)
    return schema_type.__dict__.get(DESCRIPTION_ATTR)


def schema(cls: type | None = None, *, description: str | None = None) -> Any:
    """
    Class decorator that registers a schema and builds its definition table.

    Classes that are not dataclasses yet are converted with `dataclasses.dataclass`.
    Tag errors surface at decoration time, when the class is defined.

    Args:
        cls (type | None): The class, when used as `@schema` without arguments.
        description (str | None): Type-level description shown atop the help text.
    """

    def wrap(schema_type: type) -> type:
        if not dataclasses.is_dataclass(schema_type):
            schema_type = dataclass(schema_type)
        setattr(schema_type, DESCRIPTION_ATTR, description)
        get_definitions(schema_type)
        return schema_type

    if cls is None:
        return wrap
    return wrap(cls)
