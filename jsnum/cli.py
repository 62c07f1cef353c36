"""jsnum CLI: apply ECMAScript numeric coercions to doubles."""

from __future__ import annotations

import sys
from typing import Callable

from .conversions import (
    to_int8,
    to_int16,
    to_int32,
    to_int32_portable,
    to_int64,
    to_integer,
    to_uint8,
    to_uint16,
    to_uint32,
    to_uint64,
)
from .softfloat import MASK64, bits_to_f64, decompose

OPS: list[str] = [
    "int8",
    "uint8",
    "int16",
    "uint16",
    "int32",
    "uint32",
    "int64",
    "uint64",
    "integer",
]

USAGE: str = """\
jsnum [OPTIONS] [VALUE ...]

Convert each VALUE (or whitespace-separated values read from stdin) with
the ECMAScript/WebIDL numeric coercions.

Options:
  --op OP       Conversion: int8, uint8, int16, uint16, int32, uint32,
                int64, uint64, integer, all (default: all)
  --bits        Read values as hexadecimal 64-bit patterns
  --portable    Use the portable ToInt32 even where a fast path is selected
  --trace       Print sign, exponent and fraction of each value to stderr
  --help        Show this help message
"""

_SPECIAL_VALUES: dict[str, float] = {
    "Infinity": float("inf"),
    "+Infinity": float("inf"),
    "-Infinity": float("-inf"),
    "NaN": float("nan"),
}


class ParseError(Exception):
    """Raised when a command-line value is not a number."""

    def __init__(self, text: str, msg: str = "invalid number"):
        super().__init__(msg + " '" + text + "'")
        self.text = text
        self.msg = msg


def parse_value(text: str, raw_bits: bool) -> float:
    if raw_bits:
        digits = text
        if digits.startswith("0x") or digits.startswith("0X"):
            digits = digits[2:]
        try:
            bits = int(digits, 16)
        except ValueError:
            raise ParseError(text, "invalid bit pattern") from None
        if bits < 0 or bits > MASK64:
            raise ParseError(text, "bit pattern out of range")
        return bits_to_f64(bits)
    if text in _SPECIAL_VALUES:
        return _SPECIAL_VALUES[text]
    try:
        return float(text)
    except ValueError:
        raise ParseError(text) from None


def _is_negative_number(arg: str) -> bool:
    """Negative numbers such as -1, -0.5 and -Infinity are values, not flags."""
    try:
        parse_value(arg, False)
    except ParseError:
        return False
    return True


def format_double(d: float) -> str:
    """Format a double the way JavaScript spells infinities."""
    if d == float("inf"):
        return "Infinity"
    if d == float("-inf"):
        return "-Infinity"
    if d != d:
        return "NaN"
    return repr(d)


def _converters(portable: bool) -> dict[str, Callable[[float], object]]:
    int32 = to_int32_portable if portable else to_int32
    return {
        "int8": to_int8,
        "uint8": to_uint8,
        "int16": to_int16,
        "uint16": to_uint16,
        "int32": int32,
        "uint32": to_uint32,
        "int64": to_int64,
        "uint64": to_uint64,
        "integer": to_integer,
    }


def convert(d: float, op: str, portable: bool = False) -> str:
    """Apply one conversion (or all of them) and format the result."""
    converters = _converters(portable)
    if op != "all":
        result = converters[op](d)
        if isinstance(result, float):
            return format_double(result)
        return str(result)
    parts: list[str] = []
    i = 0
    while i < len(OPS):
        parts.append(OPS[i] + "=" + convert(d, OPS[i], portable))
        i += 1
    return " ".join(parts)


def read_values() -> tuple[list[str], int]:
    """Read values from stdin. Returns (values, exit_code) where exit_code 0 means OK."""
    raw = sys.stdin.buffer.read()
    try:
        text = raw.decode("utf-8")
    except ValueError:
        print("error: invalid utf-8 in input", file=sys.stderr)
        return ([], 1)
    return (text.split(), 0)


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    op = "all"
    raw_bits = False
    portable = False
    trace = False
    values: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "--op":
            if i + 1 >= len(args):
                print("error: --op requires an argument", file=sys.stderr)
                return 2
            op = args[i + 1]
            i += 2
        elif arg == "--bits":
            raw_bits = True
            i += 1
        elif arg == "--portable":
            portable = True
            i += 1
        elif arg == "--trace":
            trace = True
            i += 1
        elif arg.startswith("-") and not _is_negative_number(arg):
            print("error: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        else:
            values.append(arg)
            i += 1
    if op != "all" and op not in OPS:
        print("error: unknown op '" + op + "'", file=sys.stderr)
        return 2
    if len(values) == 0:
        values, err = read_values()
        if err != 0:
            return err
    if len(values) == 0:
        print("error: no input provided", file=sys.stderr)
        return 2
    j = 0
    while j < len(values):
        text = values[j]
        try:
            d = parse_value(text, raw_bits)
        except ParseError as e:
            print("error: " + str(e), file=sys.stderr)
            return 1
        if trace:
            print("trace: " + text + ": " + decompose(d).describe(), file=sys.stderr)
        result = convert(d, op, portable)
        if op == "all":
            print(text + ": " + result)
        else:
            print(result)
        j += 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
