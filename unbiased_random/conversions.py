"""Bitwise conversions between the 32-bit number representations.

The three representations carry the same 32 bits of information:

  * uint32: ``0 .. 2**32 - 1``
  * int32: ``-2**31 .. 2**31 - 1`` (two's complement)
  * fract32: ``uint32 / 2**32``, a float in ``[0, 1)``

Conversions truncate toward zero and wrap modulo ``2**32``. The reference
sequences of the seeded algorithms were produced under that rule, so they
only reproduce when every conversion here follows it exactly.

For the same reason strings are consumed as UTF-16 code units, and numbers
mixed in as text are spelled with shortest round-trip digits and the
exponent cut-offs the reference sequences used.
"""

from __future__ import annotations

import math
from decimal import Decimal

from .constants import TWO_POW_31, TWO_POW_32, UINT32_MASK


def to_uint32(value: int | float) -> int:
    return math.trunc(value) & UINT32_MASK


def to_int32(value: int | float) -> int:
    v = math.trunc(value) & UINT32_MASK
    return v - TWO_POW_32 if v >= TWO_POW_31 else v


def uint32_to_int32(uint32: int) -> int:
    return to_int32(uint32)


def uint32_to_fract32(uint32: int) -> float:
    return (uint32 & UINT32_MASK) / TWO_POW_32


def int32_to_uint32(int32: int) -> int:
    return int32 & UINT32_MASK


def int32_to_fract32(int32: int) -> float:
    return (int32 & UINT32_MASK) / TWO_POW_32


def fract32_to_uint32(fract32: float) -> int:
    return to_uint32(fract32 * TWO_POW_32)


def fract32_to_int32(fract32: float) -> int:
    return to_int32(fract32 * TWO_POW_32)


def fract_to_fract32(fract: float) -> float:
    """Drop any precision below ``2**-32``, keeping the sign."""
    divisor = -TWO_POW_32 if fract < 0 else TWO_POW_32
    return to_uint32(abs(fract) * TWO_POW_32) / divisor


def bytes_to_uint32(data: bytes) -> int:
    """Read the first four bytes as a big-endian unsigned integer."""
    return int.from_bytes(bytes(data[:4]), "big")


def uint32_to_bytes(uint32: int) -> bytes:
    return (uint32 & UINT32_MASK).to_bytes(4, "big")


def utf16_code_units(text: str) -> list[int]:
    """UTF-16 code units of ``text``; characters outside the BMP become a
    surrogate pair."""
    raw = text.encode("utf-16-le", "surrogatepass")
    return [raw[k] | (raw[k + 1] << 8) for k in range(0, len(raw), 2)]


def number_to_string(value: int | float) -> str:
    """Spell a number for string seeding.

    Digits are the shortest that round-trip, as ``repr`` gives them. Unlike
    ``repr``, integral floats drop the ``.0``, and exponent notation is used
    only below ``1e-6`` or from ``1e21`` up (``1e-7``, ``1e+21``).
    """
    if isinstance(value, int):
        if abs(value) < 2**53:
            return str(value)
        value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    text = "".join(str(d) for d in digits)
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        return sign + text + "0" * (n - k)
    if 0 < n <= 21:
        return sign + text[:n] + "." + text[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * (-n) + text

    e = n - 1
    exp_text = ("+" if e >= 0 else "-") + str(abs(e))
    if k == 1:
        return f"{sign}{text}e{exp_text}"
    return f"{sign}{text[0]}.{text[1:]}e{exp_text}"
