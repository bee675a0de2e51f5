# Argbind Argument Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueKind`, the closed set of semantic types a schema field can bind to,
and `FieldType`, which pairs a kind with its optional (nullable) wrapper.

Field annotations are resolved into a `FieldType` by `resolve_field_type()`:

    bool              → ValueKind.BOOL
    int               → ValueKind.INT32
    float             → ValueKind.FLOAT64
    decimal.Decimal   → ValueKind.DECIMAL
    str               → ValueKind.STRING
    datetime          → ValueKind.DATETIME
    X | None          → FieldType(<kind of X>, nullable=True)
    Annotated[T, ValueKind.X] → ValueKind.X

Sized numeric kinds and single characters are declared with the aliases exported
here, e.g. `count: UInt16` or `grade: Char`. Any other annotation resolves to
`ValueKind.RAW`, whose values are passed through as the raw token.

Example:
    ValueKind("int8")    → ValueKind.INT8
    ValueKind("double")  → ValueKind.FLOAT64 (via alias)
"""
from __future__ import annotations

import types
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Union, get_args, get_origin


class ValueKind(Enum):
    """
    Semantic target types supported by the value converter.

    Members:
        BOOL: Presence flag; set to True when its tag appears.
        INT8, INT16, INT32, INT64: Signed integers of the given width.
        UINT8, UINT16, UINT32, UINT64: Unsigned integers of the given width.
        FLOAT32, FLOAT64: Single and double precision floating-point.
        DECIMAL: Fixed-point decimal with 28-29 significant digits.
        STRING: The token unchanged.
        CHAR: A single character.
        DATETIME: A date and time parsed with dateutil.
        RAW: Unsupported target; the token is passed through unchanged.

    Aliases:
        - "int" → "int32"
        - "long" → "int64"
        - "float" → "float32"
        - "double" → "float64"
        - "str" → "string"
    """

    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DECIMAL = "decimal"
    STRING = "string"
    CHAR = "char"
    DATETIME = "datetime"
    RAW = "raw"

    @classmethod
    def choices(cls) -> list[ValueKind]:
        """Return a list of all value kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "int": "int32",
            "long": "int64",
            "float": "float64",
            "single": "float32",
            "double": "float64",
            "str": "string",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


INTEGER_RANGES: dict[ValueKind, tuple[int, int]] = {
    ValueKind.INT8: (-(2**7), 2**7 - 1),
    ValueKind.INT16: (-(2**15), 2**15 - 1),
    ValueKind.INT32: (-(2**31), 2**31 - 1),
    ValueKind.INT64: (-(2**63), 2**63 - 1),
    ValueKind.UINT8: (0, 2**8 - 1),
    ValueKind.UINT16: (0, 2**16 - 1),
    ValueKind.UINT32: (0, 2**32 - 1),
    ValueKind.UINT64: (0, 2**64 - 1),
}


@dataclass(frozen=True)
class FieldType:
    """A value kind plus whether the field is declared nullable (`X | None`)."""

    kind: ValueKind
    nullable: bool = False

    @property
    def is_bool(self) -> bool:
        """True for bool fields, nullable or not; these never consume a value token."""
        return self.kind is ValueKind.BOOL

    def __str__(self) -> str:
        return f"{self.kind}?" if self.nullable else str(self.kind)


Int8 = Annotated[int, ValueKind.INT8]
Int16 = Annotated[int, ValueKind.INT16]
Int32 = Annotated[int, ValueKind.INT32]
Int64 = Annotated[int, ValueKind.INT64]
UInt8 = Annotated[int, ValueKind.UINT8]
UInt16 = Annotated[int, ValueKind.UINT16]
UInt32 = Annotated[int, ValueKind.UINT32]
UInt64 = Annotated[int, ValueKind.UINT64]
Float32 = Annotated[float, ValueKind.FLOAT32]
Float64 = Annotated[float, ValueKind.FLOAT64]
Char = Annotated[str, ValueKind.CHAR]

PYTHON_TYPE_KINDS: dict[Any, ValueKind] = {
    bool: ValueKind.BOOL,
    int: ValueKind.INT32,
    float: ValueKind.FLOAT64,
    Decimal: ValueKind.DECIMAL,
    str: ValueKind.STRING,
    datetime: ValueKind.DATETIME,
}


def _kind_of(annotation: Any) -> ValueKind:
    if get_origin(annotation) is Annotated:
        base, *extras = get_args(annotation)
        for extra in extras:
            if isinstance(extra, ValueKind):
                return extra
        return _kind_of(base)
    return PYTHON_TYPE_KINDS.get(annotation, ValueKind.RAW)


def resolve_field_type(annotation: Any, kind: ValueKind | str | None = None) -> FieldType:
    """
    Resolve a field annotation into a `FieldType`.

    Args:
        annotation (Any): The resolved type hint of the field.
        kind (ValueKind | str | None): Explicit kind overriding the annotation.

    Returns:
        FieldType: The semantic kind and nullability of the field.
    """
    nullable = False
    origin = get_origin(annotation)
    if isinstance(annotation, types.UnionType) or origin is Union:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        nullable = len(members) < len(get_args(annotation))
        annotation = members[0] if len(members) == 1 else Any

    if kind is not None:
        return FieldType(kind=ValueKind(kind), nullable=nullable)
    return FieldType(kind=_kind_of(annotation), nullable=nullable)
