"""Materialised SQL values and their byte encoding."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable

from pedadb.errors import InvalidData, InvalidInput
from pedadb.types import Type

__all__ = ["Field"]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_NUMERIC = (Type.INTEGER, Type.FLOAT)
_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n", "'": "\\'", '"': '\\"', "\\": "\\\\"}


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _int_div(a: int, b: int) -> int | None:
    return None if b == 0 else _trunc_div(a, b)


def _int_rem(a: int, b: int) -> int | None:
    if b == 0 or (a == _I32_MIN and b == -1):
        return None
    return a - b * _trunc_div(a, b)


def _float_div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _float_rem(a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b) or math.isinf(a) or b == 0:
        return math.nan
    return math.fmod(a, b)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _escape(text: str) -> str:
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif 0x20 <= ord(ch) <= 0x7E:
            parts.append(ch)
        else:
            parts.append(f"\\u{{{ord(ch):x}}}")
    return "".join(parts)


@dataclass(frozen=True, eq=False)
class Field:
    """A single SQL value together with its data type.

    Fields of the same type compare by value; NULL sorts before everything and
    NaN floats equal each other and sort before every other float. Comparing
    two non-NULL fields of different types raises TypeError.
    """

    field_type: Type = Type.NULL
    value: Any = None

    def __post_init__(self) -> None:
        ty, value = self.field_type, self.value
        if ty is Type.NULL:
            if value is not None:
                raise InvalidInput("a NULL field holds no value")
        elif ty is Type.BOOLEAN:
            if not isinstance(value, bool):
                raise InvalidInput(f"expected a bool, got {value!r}")
        elif ty is Type.INTEGER:
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInput(f"expected an int, got {value!r}")
            if not _I32_MIN <= value <= _I32_MAX:
                raise InvalidInput(f"integer {value} is out of the 32-bit range")
        elif ty is Type.FLOAT:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInput(f"expected a float, got {value!r}")
            object.__setattr__(self, "value", float(value))
        elif ty is Type.VARCHAR:
            if not isinstance(value, str):
                raise InvalidInput(f"expected a str, got {value!r}")

    @classmethod
    def null(cls) -> Field:
        """The NULL field."""
        return cls(Type.NULL, None)

    @classmethod
    def of(cls, value: Any) -> Field:
        """Wrap a Python value in the field of the matching type."""
        if value is None:
            return cls.null()
        if isinstance(value, bool):
            return cls(Type.BOOLEAN, value)
        if isinstance(value, int):
            return cls(Type.INTEGER, value)
        if isinstance(value, float):
            return cls(Type.FLOAT, value)
        if isinstance(value, str):
            return cls(Type.VARCHAR, value)
        raise TypeError(f"no field type for {type(value).__name__}")

    def to_bytes(self) -> bytes:
        """Encode the value; numbers are little-endian."""
        ty = self.field_type
        if ty is Type.NULL:
            return b""
        if ty is Type.BOOLEAN:
            return bytes([int(self.value)])
        if ty is Type.INTEGER:
            return struct.pack("<i", self.value)
        if ty is Type.FLOAT:
            return struct.pack("<d", self.value)
        return self.value.encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes, field_type: Type) -> Field:
        """Decode bytes produced by :meth:`to_bytes` for the given type."""
        data = bytes(data)
        if field_type is not Type.VARCHAR and len(data) != field_type.size():
            raise InvalidData(
                f"{field_type} needs {field_type.size()} bytes, got {len(data)}"
            )
        if field_type is Type.NULL:
            return cls.null()
        if field_type is Type.BOOLEAN:
            return cls(Type.BOOLEAN, data[0] == 1)
        if field_type is Type.INTEGER:
            return cls(Type.INTEGER, struct.unpack("<i", data)[0])
        if field_type is Type.FLOAT:
            return cls(Type.FLOAT, struct.unpack("<d", data)[0])
        try:
            return cls(Type.VARCHAR, data.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise InvalidData(str(exc)) from exc

    def _is_nan(self) -> bool:
        return self.field_type is Type.FLOAT and math.isnan(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        if self.field_type is not other.field_type:
            return False
        if self._is_nan() and other._is_nan():
            return True
        return self.value == other.value

    def __hash__(self) -> int:
        if self._is_nan():
            return hash((Type.FLOAT, "nan"))
        return hash((self.field_type, self.value))

    def _compare(self, other: Field) -> int:
        a, b = self.field_type, other.field_type
        if a is Type.NULL or b is Type.NULL:
            return (a is not Type.NULL) - (b is not Type.NULL)
        if a is not b:
            raise TypeError(
                "Different value types should not be compared, with the exception of NULL."
            )
        if a is Type.FLOAT:
            left_nan, right_nan = self._is_nan(), other._is_nan()
            if left_nan or right_nan:
                return right_nan - left_nan
        x, y = self.value, other.value
        return (x > y) - (x < y)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self._compare(other) >= 0

    def _arithmetic(
        self,
        other: object,
        int_op: Callable[[int, int], int | None],
        float_op: Callable[[float, float], float],
    ) -> Field:
        if not isinstance(other, Field):
            return NotImplemented
        a, b = self.field_type, other.field_type
        if a is Type.INTEGER and b is Type.INTEGER:
            result = int_op(self.value, other.value)
            if result is None or not _I32_MIN <= result <= _I32_MAX:
                return Field.null()
            return Field(Type.INTEGER, result)
        if a in _NUMERIC and b in _NUMERIC:
            return Field(Type.FLOAT, float_op(float(self.value), float(other.value)))
        return Field.null()

    def __add__(self, other: object) -> Field:
        return self._arithmetic(other, lambda x, y: x + y, lambda x, y: x + y)

    def __sub__(self, other: object) -> Field:
        return self._arithmetic(other, lambda x, y: x - y, lambda x, y: x - y)

    def __mul__(self, other: object) -> Field:
        return self._arithmetic(other, lambda x, y: x * y, lambda x, y: x * y)

    def __truediv__(self, other: object) -> Field:
        return self._arithmetic(other, _int_div, _float_div)

    def __mod__(self, other: object) -> Field:
        return self._arithmetic(other, _int_rem, _float_rem)

    def __str__(self) -> str:
        ty = self.field_type
        if ty is Type.NULL:
            return "NULL"
        if ty is Type.BOOLEAN:
            return "TRUE" if self.value else "FALSE"
        if ty is Type.INTEGER:
            return str(self.value)
        if ty is Type.FLOAT:
            return _format_float(self.value)
        return _escape(self.value)