"""Split-word ToInt32 and selection of the ToInt32 implementation.

A 32-bit CPU holds a double in a pair of 32-bit registers: the low word is
the lower mantissa, the high word is the sign, exponent and upper mantissa.
This path converts the two words independently and ORs them together, so
it never needs anything wider than 32 bits. It must agree with the
portable conversion for every input.
"""

from __future__ import annotations

import os
import platform
from typing import Callable

from .softfloat import f64_to_bits

MASK32: int = 0xFFFFFFFF

FAST_PATH_ENV: str = "JSNUM_FAST_PATH"
FAST_PATH_SETTINGS: list[str] = ["auto", "on", "off"]
FAST_PATH_MACHINES: set[str] = {"arm", "armv6l", "armv7l", "armv7", "armv8l"}


class FastPathConfigError(ValueError):
    """Raised for an unrecognized fast path setting."""


def _shift32(word: int, dist: int) -> int:
    """Shift a 32-bit word left (dist > 0) or right (dist < 0); 32+ bits gives 0."""
    if dist >= 32 or dist <= -32:
        return 0
    if dist >= 0:
        return (word << dist) & MASK32
    return word >> (0 - dist)


def to_int32_split_words(d: float) -> int:
    bits: int = f64_to_bits(d)
    lo: int = bits & MASK32
    hi: int = bits >> 32
    exp: int = ((hi >> 20) & 0x7FF) - 1023
    # +/-0, subnormals and anything else below 1.0 in magnitude.
    if exp < 0:
        return 0
    # Set the implicit bit. It clobbers the low exponent bit, already extracted.
    hi = hi | (1 << 20)
    # lo bit 0 has weight 2**(exp-52).
    lower: int = _shift32(lo, exp - 52)
    # Drop sign and exponent; the implicit bit now sits at bit 31, weight 2**exp.
    upper: int = _shift32((hi << 11) & MASK32, exp - 31)
    result: int = lower | upper
    # Infinity and NaN have exp == 1024, so both shifts above already gave 0.
    if (hi >> 31) != 0:
        result = ((result ^ MASK32) + 1) & MASK32
    if result > 0x7FFFFFFF:
        return result - 0x100000000
    return result


def use_fast_path(machine: str | None = None, setting: str | None = None) -> bool:
    """Decide whether the split-word path replaces the portable ToInt32."""
    if setting is None:
        setting = os.environ.get(FAST_PATH_ENV, "auto")
    setting = setting.strip().lower()
    if setting not in FAST_PATH_SETTINGS:
        raise FastPathConfigError(
            FAST_PATH_ENV + " must be one of auto, on, off; got '" + setting + "'"
        )
    if setting == "on":
        return True
    if setting == "off":
        return False
    if machine is None:
        machine = platform.machine()
    return machine.lower() in FAST_PATH_MACHINES


def select_to_int32(
    portable: Callable[[float], int],
    machine: str | None = None,
    setting: str | None = None,
) -> Callable[[float], int]:
    if use_fast_path(machine, setting):
        return to_int32_split_words
    return portable
