"""ECMAScript and WebIDL numeric coercions of doubles to integers.

Every conversion works on the bit pattern of its argument and is total:
infinities and NaN convert like any other double. None goes through a
native float-to-int conversion.
"""

from __future__ import annotations

from .fastpath import select_to_int32
from .softfloat import (
    F64_EXP_SHIFT,
    F64_SIGN,
    bits_to_f64,
    decoded_exp_f64,
    f64_ceil,
    f64_floor,
    f64_to_bits,
    is_inf_f64,
    is_nan_f64,
    is_zero_f64,
)

MAX_WIDTH: int = 64


def _check_width(width: int) -> None:
    if width < 1 or width > MAX_WIDTH:
        raise ValueError("width must be between 1 and 64, got " + str(width))


def to_uint_width(d: float, width: int) -> int:
    """Convert d to an unsigned integer of the given bit width, ECMAScript style.

    If d is infinite or NaN, return 0. Otherwise compute
    d2 = sign(d) * floor(abs(d)) and return the value in [0, 2**width)
    congruent to d2 modulo 2**width.
    """
    _check_width(width)
    bits: int = f64_to_bits(d)
    mask: int = (1 << width) - 1
    # Not a real exponent for NaN, infinities and subnormals; the range
    # checks below cover all three.
    exp: int = decoded_exp_f64(bits)
    # abs(d) < 1, including zeros and subnormals.
    if exp < 0:
        return 0
    # Infinite, NaN, or so large that every bit below 2**width is zero. For
    # width 32: 2**84 is exact, and the next double is 2**84 + 2**32.
    if exp >= F64_EXP_SHIFT + width:
        return 0
    # Move the significand bits to their places in floor(abs(d)).
    if exp > F64_EXP_SHIFT:
        result: int = (bits << (exp - F64_EXP_SHIFT)) & mask
    else:
        result = (bits >> (F64_EXP_SHIFT - exp)) & mask
    # Below 2**width the shifted pattern still carries sign/exponent bits and
    # lacks the implicit leading 1. At or above it, both fall off the top.
    if exp < width:
        implicit_one: int = 1 << exp
        result = result & (implicit_one - 1)
        result = result + implicit_one
    if (bits & F64_SIGN) != 0:
        return (~result + 1) & mask
    return result


def to_int_width(d: float, width: int) -> int:
    """Signed counterpart of to_uint_width: same bits, two's-complement value."""
    _check_width(width)
    max_value: int = (1 << (width - 1)) - 1
    min_value: int = -max_value - 1
    u: int = to_uint_width(d, width)
    if u <= max_value:
        return u
    return (min_value + (u - max_value)) - 1


def to_int8(d: float) -> int:
    return to_int_width(d, 8)


def to_uint8(d: float) -> int:
    return to_uint_width(d, 8)


def to_int16(d: float) -> int:
    return to_int_width(d, 16)


def to_uint16(d: float) -> int:
    return to_uint_width(d, 16)


def to_int32_portable(d: float) -> int:
    return to_int_width(d, 32)


_to_int32 = select_to_int32(to_int32_portable)


def to_int32(d: float) -> int:
    """ES5 9.5 ToInt32 (specialized for doubles)."""
    return _to_int32(d)


def to_uint32(d: float) -> int:
    """ES5 9.6 ToUint32 (specialized for doubles)."""
    return to_uint_width(d, 32)


def to_int64(d: float) -> int:
    """WebIDL long long, modular conversion."""
    return to_int_width(d, 64)


def to_uint64(d: float) -> int:
    """WebIDL unsigned long long, modular conversion."""
    return to_uint_width(d, 64)


def to_integer(d: float) -> float:
    """ES5 9.4 ToInteger (specialized for doubles).

    Truncates toward zero. Zeros keep their sign, infinities pass through,
    and NaN becomes +0.
    """
    bits: int = f64_to_bits(d)
    if is_zero_f64(bits):
        return bits_to_f64(bits)
    if is_nan_f64(bits):
        return 0.0
    if is_inf_f64(bits):
        return bits_to_f64(bits)
    if (bits & F64_SIGN) != 0:
        return bits_to_f64(f64_ceil(bits))
    return bits_to_f64(f64_floor(bits))


def int32_path_name() -> str:
    """Name of the ToInt32 implementation selected at import."""
    if _to_int32 is to_int32_portable:
        return "portable"
    return "split-words"
