"""Small string, byte and character helpers with C-library semantics.

Searches return indexes, or None where nothing is found. Functions that fill
a caller's buffer return the new string with the length they report.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, TextIO

_WHITESPACE = frozenset(" \t\n\v\f\r")
_LLONG_MAX = 2**63 - 1
_ULLONG_MOD = 2**64


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _single_char(c: str) -> str:
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def atoi(s: str) -> int:
    """Parse a leading decimal integer, with the overflow rules of the library.

    A positive value of at least 2**63 - 1 gives -1, a negative one beyond
    that gives 0; otherwise the result wraps to a signed 32-bit integer.
    """
    pos = 0
    while pos < len(s) and s[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(s) and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(s) and "0" <= s[pos] <= "9":
        result = (result * 10 + ord(s[pos]) - ord("0")) % _ULLONG_MOD
        pos += 1
    if result >= _LLONG_MAX and sign == 1:
        return -1
    if result > _LLONG_MAX and sign == -1:
        return 0
    return _to_int32(_to_int32(result) * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if _to_int32(n) != n:
        raise OverflowError("value does not fit in a signed 32-bit integer")
    return str(n)


def strtrim(s: str, charset: str) -> str:
    """Strip every character of ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters."""
    if not needle:
        return 0
    index = haystack.find(needle)
    if index == -1 or index + len(needle) > length:
        return None
    return index


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the NUL character matches the end."""
    if _single_char(c) == "\0":
        return len(s)
    index = s.find(c)
    return None if index == -1 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the NUL character matches the end."""
    if _single_char(c) == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index == -1 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters, returning the first code difference."""
    for x, y in islice(zip_longest(a, b, fillvalue="\0"), max(n, 0)):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size``; return (copy, len(src))."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size``.

    Returns the new contents and the length the library reports.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dest) >= size:
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(src) + len(dest)


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (mod 256) among the first ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index == -1 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes, returning the first byte difference."""
    if n < 0 or n > len(a) or n > len(b):
        raise ValueError("n exceeds the length of the data")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def is_alnum(c: int) -> bool:
    """True for an ASCII letter or digit code."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: int) -> bool:
    """True for an ASCII letter code."""
    return ord("a") <= c <= ord("z") or ord("A") <= c <= ord("Z")


def is_ascii(c: int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= c <= 127


def is_digit(c: int) -> bool:
    """True for an ASCII digit code."""
    return ord("0") <= c <= ord("9")


def is_print(c: int) -> bool:
    """True for a printable ASCII code, space included."""
    return 32 <= c < 127


def write_number(n: int, stream: TextIO) -> None:
    """Write the decimal text of ``n`` to ``stream``."""
    stream.write(itoa(n))