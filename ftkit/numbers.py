"""Small integer helpers: repeated-multiplication power and 32-bit bit reversal."""

from __future__ import annotations

_WORD_BITS = 32
_WORD_LIMIT = 1 << _WORD_BITS


def power(number: int, exponent: int) -> int:
    """Return ``number`` raised to ``exponent`` by repeated multiplication.

    An exponent of 0 gives 1. A negative exponent performs no
    multiplication and gives ``number`` itself.
    """
    if exponent == 0:
        return 1
    result = number
    for _ in range(1, exponent):
        result *= number
    return result


def reverse_bits(num: int) -> int:
    """Reverse the bit order of a 32-bit unsigned integer."""
    if not 0 <= num < _WORD_LIMIT:
        raise ValueError(f"{num} does not fit in an unsigned 32-bit word")
    return int(format(num, f"0{_WORD_BITS}b")[::-1], 2)