"""Fixed-width numeric primitives.

Python's ``int`` and ``float`` carry no width, so garbling them cannot know
which range a replacement should come from. These subclasses pin the width
down. They behave as ordinary numbers (arithmetic returns plain ``int`` or
``float``) and range-check on construction.

Each garble call consumes exactly one decision.
"""

import math
from typing import Any

from garble.capability import Garble
from garble.config.constants import NUMERIC
from garble.garbler.base import Garbler
from garble.utils.bits import round_f32


class Integer(int, Garble):
    """Base class for fixed-width integers."""

    BITS = 64
    SIGNED = True
    NONZERO = False

    def __new__(cls, value: Any = 0):
        value = int(value)
        low, high = NUMERIC.int_range(cls.BITS, cls.SIGNED)
        if not low <= value <= high:
            raise ValueError(f"{value} is out of range for {cls.__name__} [{low}, {high}]")
        if cls.NONZERO and value == 0:
            raise ValueError(f"{cls.__name__} cannot be zero")
        return super().__new__(cls, value)

    def garble(self, garbler: Garbler) -> "Integer":
        if not garbler.decide():
            return self
        replacement = garbler.replace_int(int(self), self.BITS, self.SIGNED)
        if self.NONZERO and replacement == 0:
            replacement = 1
        return type(self)(replacement)

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Convert a plain int to this width when it fits, else return it as is."""
        if type(value) is not int:
            return value
        low, high = NUMERIC.int_range(cls.BITS, cls.SIGNED)
        if not low <= value <= high or (cls.NONZERO and value == 0):
            return value
        return cls(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class Float(float, Garble):
    """Base class for fixed-width floats."""

    BITS = 64

    def __new__(cls, value: Any = 0.0):
        value = float(value)
        if cls.BITS == 32:
            try:
                value = round_f32(value)
            except OverflowError:
                raise ValueError(f"{value} is out of range for {cls.__name__}") from None
        return super().__new__(cls, value)

    def garble(self, garbler: Garbler) -> "Float":
        if not garbler.decide():
            return self
        return type(self)(garbler.replace_float(float(self), self.BITS))

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Convert a plain int or float to this width when it keeps its value.

        Anything else, or a number that would overflow or be rounded, is
        returned as is.
        """
        if type(value) not in (int, float):
            return value
        try:
            converted = cls(value)
        except (ValueError, OverflowError):
            return value
        if converted == value or (math.isnan(converted) and math.isnan(value)):
            return converted
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"


# Unsigned integers

class U8(Integer):
    BITS = 8
    SIGNED = False


class U16(Integer):
    BITS = 16
    SIGNED = False


class U32(Integer):
    BITS = 32
    SIGNED = False


class U64(Integer):
    BITS = 64
    SIGNED = False


class U128(Integer):
    BITS = 128
    SIGNED = False


# Signed integers

class I8(Integer):
    BITS = 8


class I16(Integer):
    BITS = 16


class I32(Integer):
    BITS = 32


class I64(Integer):
    BITS = 64


class I128(Integer):
    BITS = 128


# Non-zero integers: a zero replacement becomes 1

class NonZeroU8(U8):
    NONZERO = True


class NonZeroU16(U16):
    NONZERO = True


class NonZeroU32(U32):
    NONZERO = True


class NonZeroU64(U64):
    NONZERO = True


class NonZeroU128(U128):
    NONZERO = True


class NonZeroI8(I8):
    NONZERO = True


class NonZeroI16(I16):
    NONZERO = True


class NonZeroI32(I32):
    NONZERO = True


class NonZeroI64(I64):
    NONZERO = True


class NonZeroI128(I128):
    NONZERO = True


# Floats

class F32(Float):
    BITS = 32


class F64(Float):
    BITS = 64


def is_width_type(hint: Any) -> bool:
    """Check whether a type annotation names a fixed-width numeric class."""
    return isinstance(hint, type) and issubclass(hint, (Integer, Float))
