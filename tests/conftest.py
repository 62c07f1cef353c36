"""Pytest configuration for the jsnum test suite."""

import random
import struct
import sys
from pathlib import Path

import pytest

# Make the jsnum package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

DEFAULT_ROUNDS = 100_000
DEFAULT_SEED = 0xF64


def pytest_addoption(parser):
    """Add --rounds and --seed options for the randomized property tests."""
    parser.addoption(
        "--rounds",
        action="store",
        type=int,
        default=DEFAULT_ROUNDS,
        help="Random bit patterns generated per property test",
    )
    parser.addoption(
        "--seed",
        action="store",
        type=int,
        default=DEFAULT_SEED,
        help="Seed for the weighted bit-pattern generator",
    )


@pytest.fixture
def rounds(request) -> int:
    return request.config.getoption("rounds")


@pytest.fixture
def rng(request) -> random.Random:
    return random.Random(request.config.getoption("seed"))


def f2i(f: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", f))[0]


def i2f(i: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", i))[0]


# ---------------------------------------------------------------------------
# Weighted random generation (TestFloat-style)
# ---------------------------------------------------------------------------

# Exponents around the branches of the modular conversions
SPECIAL_EXPS = [
    0x000,  # subnormal / zero
    0x001,  # smallest normal
    0x3FE,  # 0.5 .. 1.0
    0x3FF,  # 1.0 .. 2.0 (decoded exponent 0)
    0x400,
    0x406,  # 2^7: int8 sign boundary
    0x407,  # 2^8: uint8 wraps
    0x40E,  # 2^15
    0x40F,  # 2^16
    0x41E,  # 2^31: int32 sign boundary
    0x41F,  # 2^32: uint32 wraps
    0x420,
    0x432,  # 2^51
    0x433,  # 2^52 (ULP = 1, shift direction flips)
    0x434,  # 2^53 (ULP = 2)
    0x43E,  # 2^63
    0x43F,  # 2^64
    0x452,  # 2^83: last exponent with bits below 2^32
    0x453,  # 2^84: always 0 mod 2^32
    0x472,  # 2^115: last exponent with bits below 2^64
    0x473,  # 2^116
    0x7FE,  # largest finite
    0x7FF,  # inf / NaN
]

# Significands likely to trigger edge cases
SPECIAL_SIGS = [
    0x0000000000000,  # zero
    0x0000000000001,  # smallest
    0x0000000000002,
    0x4000000000000,  # mid-range single bit
    0x8000000000000,  # half (0.5 in the fraction)
    0xFFFFFFFFFFFFE,
    0xFFFFFFFFFFFFF,  # max
    0x0000080000000,  # bit 31 of the low word
    0x0000100000000,  # bit 0 of the high word
    0x00000FFFFFFFF,  # full low word
]


def weighted_f64(rng: random.Random) -> int:
    """Generate a float64 bit pattern weighted toward boundary cases."""
    r: int = rng.randint(0, 99)
    if r < 30:
        # 30%: special exponent + random significand
        exp = rng.choice(SPECIAL_EXPS)
        sig = rng.randint(0, 0xFFFFFFFFFFFFF)
    elif r < 50:
        # 20%: exponent in the interesting range + special significand
        exp = rng.randint(0x3FE, 0x474)
        sig = rng.choice(SPECIAL_SIGS)
    elif r < 60:
        # 10%: special exponent + special significand
        exp = rng.choice(SPECIAL_EXPS)
        sig = rng.choice(SPECIAL_SIGS)
    else:
        # 40%: fully random
        exp = rng.randint(0, 0x7FF)
        sig = rng.randint(0, 0xFFFFFFFFFFFFF)
    sign = rng.randint(0, 1)
    return (sign << 63) | (exp << 52) | sig
