# Argbind Argument Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for argbind.

This module converts a raw command-line token into the semantic type a schema field
declares. Conversion is locale-invariant: numerals use `.` as the decimal separator,
digit-grouping characters are rejected, and dates are read with `dateutil`.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_integer: Convert a string to a range-checked integer.
- coerce_float: Convert a string to a double or single precision float.
- coerce_decimal: Convert a string to a range-checked Decimal.
- coerce_char: Convert a one-character string.
- coerce_datetime: Convert a string to a datetime.
- coerce_value: Dispatch on a `FieldType`, raising ValueError on failure.
- convert_value: Public wrapper raising `ConversionError` on failure.
"""
import math
import re
import struct
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from dateutil import parser as date_parser

from argbind.exceptions import ConversionError
from argbind.parser.value_kind import INTEGER_RANGES, FieldType, ValueKind

DECIMAL_MAX = Decimal("79228162514264337593543950335")
FLOAT32_MAX = struct.unpack("<f", struct.pack("<I", 0x7F7FFFFF))[0]

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")
_INFINITY_PATTERN = re.compile(r"[+-]?(inf|infinity)", re.IGNORECASE)


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Only `true` and `false` are accepted, compared case-insensitively.

    Args:
        value (str): The input string.

    Returns:
        bool: Parsed boolean result.
    """
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise ValueError(f"'{value}' is not a valid boolean (expected true or false)")


def coerce_integer(value: str, kind: ValueKind) -> int:
    """
    Convert a string to an integer of the width `kind` describes.

    Args:
        value (str): The input string, optionally signed.
        kind (ValueKind): One of the integer kinds.

    Returns:
        int: The parsed integer.

    Raises:
        ValueError: If the string is not a plain decimal integer or is out of range.
    """
    text = value.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"'{value}' is not a valid integer")
    number = int(text)
    low, high = INTEGER_RANGES[kind]
    if not low <= number <= high:
        raise ValueError(f"{number} is outside the {kind} range [{low}, {high}]")
    return number


def coerce_float(value: str, kind: ValueKind = ValueKind.FLOAT64) -> float:
    """
    Convert a string to a float, rejecting overflow.

    FLOAT32 values are rounded to single precision.
    """
    text = value.strip()
    if "_" in text:
        raise ValueError(f"'{value}' is not a valid number")
    number = float(text)
    if math.isinf(number) and not _INFINITY_PATTERN.fullmatch(text):
        raise ValueError(f"'{value}' is outside the {kind} range")
    if kind is ValueKind.FLOAT32:
        try:
            return struct.unpack("<f", struct.pack("<f", number))[0]
        except OverflowError as error:
            raise ValueError(f"'{value}' is outside the {kind} range") from error
    return number


def coerce_decimal(value: str) -> Decimal:
    """Convert a plain positional numeral; exponents and NaN/Infinity are rejected."""
    text = value.strip()
    if not _DECIMAL_PATTERN.fullmatch(text):
        raise ValueError(f"'{value}' is not a valid decimal")
    try:
        number = Decimal(text)
    except InvalidOperation as error:
        raise ValueError(f"'{value}' is not a valid decimal") from error
    if number.copy_abs() > DECIMAL_MAX:
        raise ValueError(f"'{value}' is outside the decimal range")
    return number


def coerce_char(value: str) -> str:
    if len(value) != 1:
        raise ValueError(f"'{value}' must be exactly one character")
    return value


def coerce_datetime(value: str) -> datetime:
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ValueError(f"'{value}' could not be parsed as a datetime") from error


def _passthrough(value: str) -> str:
    return value


def _integer(kind: ValueKind) -> Callable[[str], int]:
    return lambda value: coerce_integer(value, kind)


COERCERS: dict[ValueKind, Callable[[str], Any]] = {
    ValueKind.BOOL: coerce_bool,
    **{kind: _integer(kind) for kind in INTEGER_RANGES},
    ValueKind.FLOAT32: lambda value: coerce_float(value, ValueKind.FLOAT32),
    ValueKind.FLOAT64: lambda value: coerce_float(value, ValueKind.FLOAT64),
    ValueKind.DECIMAL: coerce_decimal,
    ValueKind.STRING: _passthrough,
    ValueKind.CHAR: coerce_char,
    ValueKind.DATETIME: coerce_datetime,
    ValueKind.RAW: _passthrough,
}

_missing_kinds = set(ValueKind) - set(COERCERS)
if _missing_kinds:
    raise RuntimeError(f"No coercer registered for {sorted(map(str, _missing_kinds))}")


def coerce_value(value: str, target: FieldType | ValueKind) -> Any:
    """
    Convert a string to the semantic type described by `target`.

    The nullable wrapper is unwrapped first; a nullable field binds the same way as
    its underlying kind.

    Args:
        value (str): The raw token.
        target (FieldType | ValueKind): The desired type.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is out of range.
    """
    kind = target.kind if isinstance(target, FieldType) else target
    return COERCERS[kind](value)


def convert_value(value: str, target: FieldType | ValueKind, tag: str | None = None) -> Any:
    """
    Convert a token, raising `ConversionError` carrying the token and target on failure.
    """
    try:
        return coerce_value(value, target)
    except ValueError as error:
        raise ConversionError(value, target, tag=tag, reason=str(error)) from error
