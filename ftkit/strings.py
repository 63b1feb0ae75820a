"""String utilities with bounded copies, bounded searches and splitting.

Functions that locate a character or substring return its index, or None
when it is absent. Functions that take a single character accept either a
one-character string or an integer character code.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

_NUL = "\0"


def _char(c: str | int) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character finds the end of the string, so its
    index is ``len(s)``. Returns None if ``c`` does not occur.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``; NUL gives ``len(s)``; None if absent."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the codes of the first differing characters,
    where the end of a string counts as code 0, or 0 if they agree.
    """
    _check_size("n", n)
    pairs = zip_longest(s1, s2, fillvalue=_NUL)
    for a, b in islice(pairs, n):
        diff = ord(a) - ord(b)
        if diff or a == _NUL or b == _NUL:
            return diff
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text, at most ``size - 1`` characters long, and the
    full length of ``src`` so that truncation can be detected.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer it is returned unchanged together with
    ``size + len(src)``.
    """
    _check_size("size", size)
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0. Returns None if there is no match.
    """
    _check_size("length", length)
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A plain ``str`` copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from index ``start``.

    A start past the end of ``s`` gives an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: str | int) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty fields runs of ``sep`` leave."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    mapped = []
    for index, ch in enumerate(s):
        result = func(index, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"mapping must return a single character, got {result!r}")
        mapped.append(result)
    return "".join(mapped)