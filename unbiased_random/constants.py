"""Domain bounds for the three 32-bit representations.

Every range accepted by the ranged wrappers must sit inside one of these
domains:

  * uint32: ``[0, 2**32)``
  * int32: ``[-2**31, 2**31)``
  * fract32: ``[0, 1)`` in steps of ``2**-32``
"""

from __future__ import annotations

UINT32_MASK = 0xFFFFFFFF
TWO_POW_32 = 0x100000000
TWO_POW_31 = 0x80000000

ONE_BIT_AS_FRACT32 = 1 / TWO_POW_32

MIN_SAFE_FRACT32_INCLUSIVE = 0.0
MAX_SAFE_FRACT32_EXCLUSIVE = 1.0
MAX_SAFE_FRACT32_INCLUSIVE = MAX_SAFE_FRACT32_EXCLUSIVE - ONE_BIT_AS_FRACT32

MIN_SAFE_INT32_INCLUSIVE = -TWO_POW_31
MAX_SAFE_INT32_EXCLUSIVE = TWO_POW_31
MAX_SAFE_INT32_INCLUSIVE = MAX_SAFE_INT32_EXCLUSIVE - 1

MIN_SAFE_UINT32_INCLUSIVE = 0
MAX_SAFE_UINT32_EXCLUSIVE = TWO_POW_32
MAX_SAFE_UINT32_INCLUSIVE = MAX_SAFE_UINT32_EXCLUSIVE - 1
