"""ECMAScript/WebIDL numeric coercions of IEEE-754 doubles: public API."""

from __future__ import annotations

from .conversions import (
    int32_path_name,
    to_int8,
    to_int16,
    to_int32,
    to_int32_portable,
    to_int64,
    to_int_width,
    to_integer,
    to_uint8,
    to_uint16,
    to_uint32,
    to_uint64,
    to_uint_width,
)
from .fastpath import FastPathConfigError as FastPathConfigError, to_int32_split_words
from .softfloat import Decomposed, decompose

__all__ = [
    "Decomposed",
    "FastPathConfigError",
    "decompose",
    "int32_path_name",
    "to_int8",
    "to_int16",
    "to_int32",
    "to_int32_portable",
    "to_int32_split_words",
    "to_int64",
    "to_int_width",
    "to_integer",
    "to_uint8",
    "to_uint16",
    "to_uint32",
    "to_uint64",
    "to_uint_width",
]
