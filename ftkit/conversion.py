"""Conversions between integers and their text forms in arbitrary bases.

A base is given as a string of digit characters: its length is the radix
and each character stands for its index. A valid base has at least two
characters, no repeated character and no sign character.
"""

from __future__ import annotations

import re

from ftkit.chars import is_alnum

_C_SPACE = " \t\n\v\f\r"
_SIGNS = "+-"
_DECIMAL_DIGITS = re.compile(r"[0-9]*")


def _check_base(base: str) -> None:
    """Raise ValueError unless ``base`` is a usable digit alphabet."""
    if len(base) < 2:
        raise ValueError(f"base must have at least two digits, got {base!r}")
    if len(set(base)) != len(base):
        raise ValueError(f"base has repeated digits: {base!r}")
    if any(sign in base for sign in _SIGNS):
        raise ValueError(f"base must not contain a sign: {base!r}")


def atoi(text: str) -> int:
    """Parse a decimal integer the way C's ``atoi`` does.

    Leading C whitespace is skipped, one optional sign is read, then as
    many ASCII digits as follow. Text with no digits there gives 0.
    """
    body = text.lstrip(_C_SPACE)
    negative = body.startswith("-")
    if body[:1] in ("+", "-") and body:
        body = body[1:]
    digits = _DECIMAL_DIGITS.match(body).group()
    value = int(digits) if digits else 0
    return -value if negative else value


def atoi_base(text: str, base: str) -> int:
    """Parse the first number written in ``base`` that appears in ``text``.

    Characters before the first letter, digit or sign are skipped. Of the
    characters between there and the next run of letters and digits, the
    last one decides the sign. The run that follows is read as the number;
    if any of its characters is not a digit of ``base`` the result is 0,
    as it is when ``text`` holds no number at all.

    Raises ValueError if ``base`` is not a valid base.
    """
    _check_base(base)
    start = next(
        (i for i, ch in enumerate(text) if is_alnum(ch) or ch in _SIGNS), None
    )
    if start is None:
        return 0
    pos = start
    while pos + 1 < len(text) and not is_alnum(text[pos + 1]):
        pos += 1
    negative = text[pos] == "-"
    if text[pos] in _SIGNS:
        pos += 1
    end = pos
    while end < len(text) and is_alnum(text[end]):
        end += 1
    value = 0
    radix = len(base)
    for ch in text[pos:end]:
        rank = base.find(ch)
        if rank < 0:
            return 0
        value = value * radix + rank
    return -value if negative else value


def itoa(n: int) -> str:
    """Decimal text of ``n``, with a leading '-' when negative."""
    return f"{n:d}"


def itoa_base(n: int, base: str) -> str:
    """Text of ``n`` written with the digits of ``base``.

    Zero is always written as "0". Negative numbers get a leading '-'.
    Raises ValueError if ``base`` is not a valid base.
    """
    _check_base(base)
    if n == 0:
        return "0"
    radix = len(base)
    value = abs(n)
    digits = []
    while value:
        value, rank = divmod(value, radix)
        digits.append(base[rank])
    sign = "-" if n < 0 else ""
    return sign + "".join(reversed(digits))


def convert_base(number: str, base_from: str, base_to: str) -> str:
    """Re-write ``number`` from ``base_from`` into ``base_to``."""
    return itoa_base(atoi_base(number, base_from), base_to)