"""Float64 bit patterns: decomposition and integer-only floor/ceil."""

from __future__ import annotations

import struct
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Layer 1: Constants and bit manipulation
# ---------------------------------------------------------------------------

MASK64: int = 0xFFFFFFFFFFFFFFFF
F64_SIGN: int = 0x8000000000000000
F64_EXP_MASK: int = 0x7FF0000000000000
F64_FRAC_MASK: int = 0x000FFFFFFFFFFFFF
F64_ABS_MASK: int = 0x7FFFFFFFFFFFFFFF
F64_INF: int = 0x7FF0000000000000
F64_ONE: int = 0x3FF0000000000000
F64_NEG_ONE: int = F64_SIGN | F64_ONE

F64_EXP_SHIFT: int = 52
F64_EXP_BIAS: int = 1023


def f64_to_bits(d: float) -> int:
    """Reinterpret a double as its unsigned 64-bit pattern."""
    return struct.unpack("<Q", struct.pack("<d", d))[0]


def bits_to_f64(bits: int) -> float:
    """Reinterpret an unsigned 64-bit pattern as a double."""
    return struct.unpack("<d", struct.pack("<Q", bits & MASK64))[0]


def sign_f64(ui: int) -> int:
    return (ui >> 63) & 1


def exp_f64(ui: int) -> int:
    return (ui & F64_EXP_MASK) >> F64_EXP_SHIFT


def frac_f64(ui: int) -> int:
    return ui & F64_FRAC_MASK


def decoded_exp_f64(ui: int) -> int:
    """Unbiased exponent. Not a true exponent for zero, subnormals, inf or NaN."""
    return exp_f64(ui) - F64_EXP_BIAS


def is_nan_f64(ui: int) -> bool:
    return (ui & F64_ABS_MASK) > F64_INF


def is_inf_f64(ui: int) -> bool:
    return (ui & F64_ABS_MASK) == F64_INF


def is_zero_f64(ui: int) -> bool:
    return (ui & F64_ABS_MASK) == 0


@dataclass(frozen=True)
class Decomposed:
    """The fields of a double, with the exponent both biased and decoded."""

    sign: int
    biased_exponent: int
    exponent: int
    fraction: int

    def describe(self) -> str:
        return (
            "sign=" + str(self.sign)
            + " exp=" + str(self.exponent)
            + " fraction=" + format(self.fraction, "#015x")
        )


def decompose(d: float) -> Decomposed:
    bits: int = f64_to_bits(d)
    return Decomposed(
        sign=sign_f64(bits),
        biased_exponent=exp_f64(bits),
        exponent=decoded_exp_f64(bits),
        fraction=frac_f64(bits),
    )


# ---------------------------------------------------------------------------
# Layer 2: Rounding to integral values
# ---------------------------------------------------------------------------


def _frac_bits_below_point(ui: int) -> int:
    """Mask of the fraction bits that lie below the binary point; 0 <= exp < 52."""
    return F64_FRAC_MASK >> decoded_exp_f64(ui)


def f64_floor(a: int) -> int:
    """Round toward -Infinity. NaN, infinities, zeros and integers pass through."""
    exp: int = decoded_exp_f64(a)
    if exp >= F64_EXP_SHIFT:
        return a
    if exp < 0:
        if is_zero_f64(a):
            return a
        if sign_f64(a) == 0:
            return 0
        return F64_NEG_ONE
    below: int = _frac_bits_below_point(a)
    if (a & below) == 0:
        return a
    if sign_f64(a) != 0:
        # Carry out of the fraction bumps the exponent.
        a = a + below + 1
    return a & ~below & MASK64


def f64_ceil(a: int) -> int:
    """Round toward +Infinity. NaN, infinities, zeros and integers pass through."""
    exp: int = decoded_exp_f64(a)
    if exp >= F64_EXP_SHIFT:
        return a
    if exp < 0:
        if is_zero_f64(a):
            return a
        if sign_f64(a) != 0:
            return F64_SIGN
        return F64_ONE
    below: int = _frac_bits_below_point(a)
    if (a & below) == 0:
        return a
    if sign_f64(a) == 0:
        a = a + below + 1
    return a & ~below & MASK64
