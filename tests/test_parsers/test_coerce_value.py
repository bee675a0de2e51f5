from datetime import datetime
from decimal import Decimal

import pytest

from argbind.exceptions import ConversionError, ErrorKind
from argbind.parser import FieldType, ValueKind, convert_value
from argbind.parser.utils import DECIMAL_MAX, FLOAT32_MAX, coerce_value


# --- Tests ---
@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", ValueKind.INT32, 42),
        ("-7", ValueKind.INT8, -7),
        ("+5", ValueKind.UINT8, 5),
        (" 12 ", ValueKind.INT16, 12),
        ("3.14", ValueKind.FLOAT64, 3.14),
        ("1e3", ValueKind.FLOAT64, 1000.0),
        ("0.5", ValueKind.FLOAT32, 0.5),
        ("12.50", ValueKind.DECIMAL, Decimal("12.50")),
        ("-.5", ValueKind.DECIMAL, Decimal("-0.5")),
        ("hello", ValueKind.STRING, "hello"),
        ("", ValueKind.STRING, ""),
        ("x", ValueKind.CHAR, "x"),
        ("True", ValueKind.BOOL, True),
        ("false", ValueKind.BOOL, False),
        ("anything", ValueKind.RAW, "anything"),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


@pytest.mark.parametrize(
    "kind, low, high",
    [
        (ValueKind.INT8, -128, 127),
        (ValueKind.INT16, -32768, 32767),
        (ValueKind.INT32, -2147483648, 2147483647),
        (ValueKind.INT64, -9223372036854775808, 9223372036854775807),
        (ValueKind.UINT8, 0, 255),
        (ValueKind.UINT16, 0, 65535),
        (ValueKind.UINT32, 0, 4294967295),
        (ValueKind.UINT64, 0, 18446744073709551615),
    ],
)
def test_integer_bounds(kind, low, high):
    assert coerce_value(str(low), kind) == low
    assert coerce_value(str(high), kind) == high

    with pytest.raises(ValueError):
        coerce_value(str(low - 1), kind)
    with pytest.raises(ValueError):
        coerce_value(str(high + 1), kind)


@pytest.mark.parametrize(
    "value", ["abc", "1.5", "1_000", "0x10", "", "5 5", "--5", "١٢"]
)
def test_integer_malformed(value):
    with pytest.raises(ValueError):
        coerce_value(value, ValueKind.INT64)


def test_float64_bounds():
    assert coerce_value("1.7976931348623157e308", ValueKind.FLOAT64) == 1.7976931348623157e308
    assert coerce_value("-1.7976931348623157e308", ValueKind.FLOAT64) == -1.7976931348623157e308
    with pytest.raises(ValueError):
        coerce_value("1e309", ValueKind.FLOAT64)
    with pytest.raises(ValueError):
        coerce_value("-1e400", ValueKind.FLOAT64)


def test_float64_explicit_infinity_allowed():
    assert coerce_value("inf", ValueKind.FLOAT64) == float("inf")
    assert coerce_value("-Infinity", ValueKind.FLOAT64) == float("-inf")


def test_float32_bounds():
    assert coerce_value(repr(FLOAT32_MAX), ValueKind.FLOAT32) == FLOAT32_MAX
    assert coerce_value(repr(-FLOAT32_MAX), ValueKind.FLOAT32) == -FLOAT32_MAX
    with pytest.raises(ValueError):
        coerce_value("3.5e38", ValueKind.FLOAT32)
    with pytest.raises(ValueError):
        coerce_value("-1e39", ValueKind.FLOAT32)


def test_float32_rounds_to_single_precision():
    assert coerce_value("0.1", ValueKind.FLOAT32) != 0.1
    assert coerce_value("0.1", ValueKind.FLOAT32) == pytest.approx(0.1, rel=1e-7)


@pytest.mark.parametrize("value", ["abc", "1,5", "1_0.0", ""])
def test_float_malformed(value):
    with pytest.raises(ValueError):
        coerce_value(value, ValueKind.FLOAT64)


def test_decimal_bounds():
    assert coerce_value(str(DECIMAL_MAX), ValueKind.DECIMAL) == DECIMAL_MAX
    minimum = "-79228162514264337593543950335"
    assert coerce_value(minimum, ValueKind.DECIMAL) == Decimal(minimum)
    with pytest.raises(ValueError):
        coerce_value("79228162514264337593543950336", ValueKind.DECIMAL)
    with pytest.raises(ValueError):
        coerce_value("-79228162514264337593543950336", ValueKind.DECIMAL)


@pytest.mark.parametrize(
    "value", ["abc", "NaN", "Infinity", "1_000", "", "1e5", "2.5E-3", "-.", "1,000"]
)
def test_decimal_malformed(value):
    with pytest.raises(ValueError):
        coerce_value(value, ValueKind.DECIMAL)


@pytest.mark.parametrize("value", ["", "ab"])
def test_char_wrong_length(value):
    with pytest.raises(ValueError):
        coerce_value(value, ValueKind.CHAR)


def test_datetime():
    assert coerce_value("2024-03-01T12:30:00", ValueKind.DATETIME) == datetime(
        2024, 3, 1, 12, 30
    )
    assert coerce_value("2024-03-01", ValueKind.DATETIME) == datetime(2024, 3, 1)


@pytest.mark.parametrize("value", ["not a date", "", "2024-13-45"])
def test_datetime_invalid(value):
    with pytest.raises(ValueError):
        coerce_value(value, ValueKind.DATETIME)


def test_bool_invalid():
    with pytest.raises(ValueError):
        coerce_value("yes", ValueKind.BOOL)


def test_nullable_unwraps_to_underlying_kind():
    assert coerce_value("5", FieldType(ValueKind.INT32, nullable=True)) == 5
    with pytest.raises(ValueError):
        coerce_value("five", FieldType(ValueKind.INT32, nullable=True))


def test_string_is_not_transformed():
    assert coerce_value("C:\\Windows", ValueKind.STRING) == "C:\\Windows"
    assert coerce_value("  padded  ", ValueKind.STRING) == "  padded  "


def test_convert_value_raises_conversion_error():
    with pytest.raises(ConversionError) as excinfo:
        convert_value("abc", FieldType(ValueKind.INT32), tag="--index")
    error = excinfo.value
    assert error.kind is ErrorKind.CONVERSION_ERROR
    assert error.token == "abc"
    assert error.tag == "--index"
    assert error.target == FieldType(ValueKind.INT32)
    assert isinstance(error.__cause__, ValueError)
    assert "--index" in str(error)


def test_convert_value_success():
    assert convert_value("255", ValueKind.UINT8) == 255
