"""
Argbind Argument Binder

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .config import BindConfig, load_config
from .exceptions import (
    ArgBindError,
    ArgumentError,
    ConversionError,
    DuplicateArgumentError,
    DuplicateDefinitionError,
    ErrorKind,
    InvalidTagFormatError,
    MissingArgumentValueError,
    MissingRequiredArgumentError,
    SchemaError,
    UnknownArgumentError,
)
from .parser import (
    ArgumentDefinition,
    Char,
    FieldType,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    SchemaParser,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    ValueKind,
    argument,
    get_help_text,
    parse,
    parse_into,
    render_help,
    schema,
)

__version__ = "0.1.0"

__all__ = [
    "ArgBindError",
    "ArgumentDefinition",
    "ArgumentError",
    "BindConfig",
    "Char",
    "ConversionError",
    "DuplicateArgumentError",
    "DuplicateDefinitionError",
    "ErrorKind",
    "FieldType",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "InvalidTagFormatError",
    "MissingArgumentValueError",
    "MissingRequiredArgumentError",
    "SchemaError",
    "SchemaParser",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UnknownArgumentError",
    "ValueKind",
    "argument",
    "get_help_text",
    "load_config",
    "parse",
    "parse_into",
    "render_help",
    "schema",
]
