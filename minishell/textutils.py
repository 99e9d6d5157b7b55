"""String and byte helpers with C-string semantics.

Strings are read up to their first NUL character, as a C string would be.
Search functions return an index, or ``None`` when nothing is found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _cstr(text: str) -> str:
    end = text.find("\0")
    return text if end == -1 else text[:end]


def _wrap_int(value: int) -> int:
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, after blanks and an optional sign.

    Parsing stops at the first non-digit; no digits gives 0. The result
    wraps around to a signed 32-bit integer.
    """
    rest = _cstr(text).lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = ""
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits += ch
    return _wrap_int(sign * int(digits or "0"))


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    return str(int(n))


def split(text: Optional[str], sep: str) -> list[str]:
    """Split on a separator character, dropping empty words."""
    if text is None:
        return []
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in _cstr(text).split(sep) if word]


def strtrim(text: str, charset: Optional[str]) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    text = _cstr(text)
    if not charset:
        return text
    return text.strip(_cstr(charset))


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _cstr(text)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` wholly inside the first ``length`` characters."""
    needle = _cstr(needle)
    if not needle:
        return 0
    found = _cstr(haystack)[:max(length, 0)].find(needle)
    return None if found == -1 else found


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the ordering."""
    pairs = zip_longest(_cstr(s1), _cstr(s2), fillvalue="\0")
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c``; searching for NUL finds the terminator."""
    text = _cstr(text)
    if c == "\0":
        return len(text)
    found = text.find(c)
    return None if found == -1 else found


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c``; searching for NUL finds the terminator."""
    text = _cstr(text)
    if c == "\0":
        return len(text)
    found = text.rfind(c)
    return None if found == -1 else found


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of byte ``c`` (taken modulo 256) in the first ``n`` bytes."""
    found = bytes(data)[:max(n, 0)].find(c & 0xFF)
    return None if found == -1 else found


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first unequal bytes among the first ``n``, else 0."""
    for x, y in zip(bytes(a)[:max(n, 0)], bytes(b)[:max(n, 0)]):
        if x != y:
            return x - y
    return 0