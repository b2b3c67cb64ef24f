"""Conversion of raw profile values to primitive types.

The typed accessor only knows a closed set of target types. Each has one
conversion rule; anything that does not fit the rule is a coercion failure.
"""

from enum import Enum
import math
import numbers
import struct
from typing import Any

from profilekit.errors import CoercionError


class ValueType(str, Enum):
    """Primitive types the typed accessor can convert to."""

    BOOL = "bool"
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_RANGES

    @property
    def is_float(self) -> bool:
        return self in (ValueType.FLOAT32, ValueType.FLOAT64)


_INTEGER_RANGES: dict[ValueType, tuple[int, int]] = {
    ValueType.INT8: (-(2**7), 2**7 - 1),
    ValueType.UINT8: (0, 2**8 - 1),
    ValueType.INT16: (-(2**15), 2**15 - 1),
    ValueType.UINT16: (0, 2**16 - 1),
    ValueType.INT32: (-(2**31), 2**31 - 1),
    ValueType.UINT32: (0, 2**32 - 1),
    ValueType.INT64: (-(2**63), 2**63 - 1),
    ValueType.UINT64: (0, 2**64 - 1),
}

_PYTHON_TYPES: dict[type, ValueType] = {
    bool: ValueType.BOOL,
    int: ValueType.INT64,
    float: ValueType.FLOAT64,
}


def resolve_value_type(target: Any) -> ValueType | None:
    """Map a requested target to a ValueType.

    Args:
        target: A ValueType, its string value, or one of ``bool``, ``int``, ``float``

    Returns:
        The matching ValueType or None if the target is not supported
    """
    if isinstance(target, ValueType):
        return target
    if isinstance(target, str):
        try:
            return ValueType(target.lower())
        except ValueError:
            return None
    if isinstance(target, type):
        return _PYTHON_TYPES.get(target)
    return None


def default_for(value_type: ValueType) -> bool | int | float:
    """Get the zero value of a ValueType."""
    if value_type is ValueType.BOOL:
        return False
    if value_type.is_float:
        return 0.0
    return 0


def coerce_value(value: Any, value_type: ValueType) -> bool | int | float:
    """Convert a raw value to a primitive type.

    Args:
        value: The raw value as stored by a profile backend
        value_type: The target type

    Returns:
        The converted value

    Raises:
        CoercionError: If the value has no conversion to the target type
    """
    if value is None:
        raise CoercionError(f"Cannot convert None to {value_type.value}")

    if value_type is ValueType.BOOL:
        return _to_bool(value)
    if value_type.is_integer:
        return _to_integer(value, value_type)
    return _to_float(value, value_type)


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, numbers.Real):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
    raise CoercionError(f"Cannot convert {value!r} to bool")


def _to_integer(value: Any, value_type: ValueType) -> int:
    if isinstance(value, bool):
        result = int(value)
    elif isinstance(value, numbers.Integral):
        result = int(value)
    elif isinstance(value, numbers.Real):
        number = float(value)
        if math.isnan(number) or math.isinf(number):
            raise CoercionError(f"Cannot convert {value!r} to {value_type.value}")
        # round() rounds half to even
        result = round(number)
    elif isinstance(value, str):
        try:
            result = int(value.strip(), 10)
        except ValueError as e:
            raise CoercionError(f"Cannot convert {value!r} to {value_type.value}") from e
    else:
        raise CoercionError(f"Cannot convert {type(value).__name__} to {value_type.value}")

    low, high = _INTEGER_RANGES[value_type]
    if not low <= result <= high:
        raise CoercionError(f"Value {value!r} is out of range for {value_type.value}")
    return result


def _to_float(value: Any, value_type: ValueType) -> float:
    if isinstance(value, bool):
        result = 1.0 if value else 0.0
    elif isinstance(value, numbers.Real):
        try:
            result = float(value)
        except OverflowError as e:
            raise CoercionError(f"Value {value!r} is out of range for {value_type.value}") from e
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError as e:
            raise CoercionError(f"Cannot convert {value!r} to {value_type.value}") from e
    else:
        raise CoercionError(f"Cannot convert {type(value).__name__} to {value_type.value}")

    if value_type is ValueType.FLOAT32:
        try:
            single = struct.unpack("f", struct.pack("f", result))[0]
        except OverflowError as e:
            raise CoercionError(f"Value {value!r} is out of range for float32") from e
        # finite doubles beyond the float32 range pack to inf
        if math.isinf(single) and not math.isinf(result):
            raise CoercionError(f"Value {value!r} is out of range for float32")
        result = single
    return result
