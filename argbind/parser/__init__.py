"""
Argbind Argument Binder

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentDefinition
from .schema import argument, build_definitions, get_definitions, schema
from .schema_parser import SchemaParser, get_help_text, parse, parse_into, render_help
from .tags import TagPair, parse_tag_spec
from .utils import convert_value
from .value_kind import (
    Char,
    FieldType,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    ValueKind,
)

__all__ = [
    "ArgumentDefinition",
    "Char",
    "FieldType",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "SchemaParser",
    "TagPair",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "ValueKind",
    "argument",
    "build_definitions",
    "convert_value",
    "get_definitions",
    "get_help_text",
    "parse",
    "parse_into",
    "parse_tag_spec",
    "render_help",
    "schema",
]
