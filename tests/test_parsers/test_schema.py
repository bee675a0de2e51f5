import dataclasses
import threading
from dataclasses import dataclass
from typing import Optional

import pytest

from argbind.exceptions import (
    DuplicateDefinitionError,
    ErrorKind,
    InvalidTagFormatError,
    SchemaError,
)
from argbind.parser import (
    FieldType,
    UInt16,
    ValueKind,
    argument,
    build_definitions,
    get_definitions,
    parse,
    schema,
)
from argbind.parser.schema import get_description


@dataclass
class SampleArgs:
    path: str = argument("--path|-p", help="Path to use.")
    enable: Optional[bool] = argument("--enable", optional=True)
    index: int = argument("-i|--index")
    untouched: str = "keep"
    Port: UInt16 = argument(optional=True, default=80)


def test_definitions_follow_declaration_order():
    definitions = build_definitions(SampleArgs)
    assert [arg.dest for arg in definitions] == ["path", "enable", "index", "Port"]


def test_fields_without_metadata_are_ignored():
    assert "untouched" not in {arg.dest for arg in build_definitions(SampleArgs)}


def test_definition_contents():
    path, enable, index, port = build_definitions(SampleArgs)
    assert (path.short_tag, path.long_tag) == ("-p", "--path")
    assert path.field_type == FieldType(ValueKind.STRING)
    assert path.help == "Path to use."
    assert not path.optional

    assert enable.field_type == FieldType(ValueKind.BOOL, nullable=True)
    assert enable.optional

    assert (index.short_tag, index.long_tag) == ("-i", "--index")
    assert index.field_type == FieldType(ValueKind.INT32)


def test_default_tag_is_lowercased_field_name():
    port = build_definitions(SampleArgs)[-1]
    assert port.long_tag == "--port"
    assert port.short_tag is None
    assert port.field_type == FieldType(ValueKind.UINT16)


def test_argument_defaults():
    instance = SampleArgs()
    assert instance.path is None
    assert instance.Port == 80
    assert instance.untouched == "keep"


def test_argument_default_factory():
    @dataclass
    class WithFactory:
        names: str = argument(optional=True, default_factory=lambda: "generated")

    assert WithFactory().names == "generated"


def test_explicit_kind_overrides_annotation():
    @dataclass
    class Explicit:
        level: int = argument(kind=ValueKind.INT8)

    assert build_definitions(Explicit)[0].field_type == FieldType(ValueKind.INT8)


def test_invalid_tag_format():
    @dataclass
    class Broken:
        path: str = argument("path")

    with pytest.raises(InvalidTagFormatError) as excinfo:
        build_definitions(Broken)
    assert excinfo.value.field == "path"


def test_too_many_tags():
    @dataclass
    class Broken:
        path: str = argument("--path|-p|-x")

    with pytest.raises(InvalidTagFormatError):
        build_definitions(Broken)


def test_duplicate_long_tag():
    @dataclass
    class Broken:
        first: str = argument("--name")
        second: str = argument("--NAME|-n")

    with pytest.raises(DuplicateDefinitionError) as excinfo:
        build_definitions(Broken)
    error = excinfo.value
    assert error.kind is ErrorKind.DUPLICATE_DEFINITION
    assert (error.tag, error.field, error.existing) == ("--name", "second", "first")


def test_duplicate_short_tag():
    @dataclass
    class Broken:
        first: str = argument("--first|-x")
        second: str = argument("--second|-X")

    with pytest.raises(DuplicateDefinitionError):
        build_definitions(Broken)


def test_duplicate_with_default_tag():
    @dataclass
    class Broken:
        name: str = argument()
        other: str = argument("--name")

    with pytest.raises(DuplicateDefinitionError):
        build_definitions(Broken)


def test_non_dataclass_is_rejected():
    class Plain:
        path = "x"

    with pytest.raises(SchemaError):
        build_definitions(Plain)
    with pytest.raises(SchemaError):
        build_definitions(SampleArgs())


def test_get_definitions_is_cached():
    first = get_definitions(SampleArgs)
    assert get_definitions(SampleArgs) is first
    assert get_definitions(SampleArgs()) is first


def test_get_definitions_concurrent_first_use():
    @dataclass
    class Fresh:
        name: str = argument("--name|-n")

    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(get_definitions(Fresh))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 8
    assert all(result is results[0] for result in results)


def test_schema_decorator_makes_dataclass():
    @schema(description="Demo tool.")
    class Decorated:
        path: str = argument("--path|-p")

    assert dataclasses.is_dataclass(Decorated)
    assert get_description(Decorated) == "Demo tool."
    assert [arg.dest for arg in get_definitions(Decorated)] == ["path"]


def test_schema_decorator_without_arguments():
    @schema
    @dataclass
    class Bare:
        verbose: bool = argument("-v", optional=True)

    assert get_description(Bare) is None
    assert Bare().verbose is None


def test_schema_decorator_fails_at_definition_time():
    with pytest.raises(DuplicateDefinitionError):

        @schema
        class Broken:
            a: str = argument("-a")
            b: str = argument("-a|--b")


def test_unresolvable_annotation_only_affects_its_field():
    class Mode:
        pass

    @dataclass
    class LocalArgs:
        verbose: "bool" = argument("-v", optional=True)
        count: "int" = argument("--count", optional=True)
        mode: "Mode" = argument("--mode", optional=True)

    definitions = {arg.dest: arg for arg in build_definitions(LocalArgs)}
    assert definitions["verbose"].field_type == FieldType(ValueKind.BOOL)
    assert definitions["count"].field_type == FieldType(ValueKind.INT32)
    assert definitions["mode"].field_type == FieldType(ValueKind.RAW)

    args = parse(LocalArgs, ["-v", "--count", "3", "--mode", "fast"])
    assert args.verbose is True
    assert args.count == 3
    assert args.mode == "fast"


def test_string_annotations_resolve_module_names():
    @dataclass
    class LocalArgs:
        port: "UInt16" = argument("--port")
        label: "Optional[str]" = argument("--label", optional=True)
        owner: "Unknown" = argument("--owner", optional=True)  # noqa: F821

    definitions = {arg.dest: arg for arg in build_definitions(LocalArgs)}
    assert definitions["port"].field_type == FieldType(ValueKind.UINT16)
    assert definitions["label"].field_type == FieldType(ValueKind.STRING, nullable=True)
    assert definitions["owner"].field_type == FieldType(ValueKind.RAW)


def test_malformed_annotation_is_schema_error():
    @dataclass
    class Broken:
        count: "int |" = argument("--count")

    with pytest.raises(SchemaError, match="Invalid annotation"):
        build_definitions(Broken)
