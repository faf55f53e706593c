"""Low-level helpers for IEEE floats and Unicode scalar values."""

import math
import struct

from garble.config.constants import UNICODE


def round_f32(value: float) -> float:
    """Round a float to the nearest IEEE single precision value.

    Infinities and NaN pass through unchanged.

    Raises:
        OverflowError: If a finite value rounds outside the single precision range
    """
    rounded = struct.unpack('f', struct.pack('f', value))[0]
    if math.isfinite(value) and not math.isfinite(rounded):
        raise OverflowError(f"{value} is out of range for single precision")
    return rounded


def next_scalar(code_point: int) -> int:
    """Next Unicode scalar value, skipping surrogates and wrapping to 0."""
    code_point += 1
    if code_point == UNICODE.SURROGATE_START:
        code_point = UNICODE.SURROGATE_END + 1
    if code_point > UNICODE.MAX_CODE_POINT:
        code_point = 0
    return code_point


def scalar_from_index(index: int) -> int:
    """Map an index in [0, UNICODE.scalar_count) to a Unicode scalar value."""
    if index >= UNICODE.SURROGATE_START:
        index += UNICODE.SURROGATE_END - UNICODE.SURROGATE_START + 1
    return index
