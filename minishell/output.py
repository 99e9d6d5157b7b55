"""Formatted output and small writers for file descriptors.

``format_printf`` understands the conversions ``%c``, ``%s``, ``%p``,
``%d``, ``%i``, ``%u``, ``%x`` and ``%X``. Any other character after a
``%`` is printed as itself, so ``%%`` gives a single percent sign.
Integer conversions behave like their 32-bit C counterparts.
"""

from __future__ import annotations

import os
import sys
from typing import Any, Iterator, Optional

NULL_STR = "(null)"
NULL_PTR = "(nil)"

_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(int(arg) & 0xFF)


def _string(arg: Any) -> str:
    return NULL_STR if arg is None else str(arg)


def _pointer(arg: Any) -> str:
    if arg is None:
        return NULL_PTR
    address = arg if isinstance(arg, int) else id(arg)
    address &= _PTR_MASK
    return NULL_PTR if address == 0 else f"0x{address:x}"


_CONVERSIONS = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda arg: str(_to_int32(int(arg))),
    "i": lambda arg: str(_to_int32(int(arg))),
    "u": lambda arg: str(int(arg) & _UINT_MASK),
    "x": lambda arg: f"{int(arg) & _UINT_MASK:x}",
    "X": lambda arg: f"{int(arg) & _UINT_MASK:X}",
}


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            yield spec
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        yield convert(arg)


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the text."""
    if fmt is None:
        raise ValueError("format must not be None")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered format to standard output; return bytes written."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text.encode())


def _write(fd: int, text: str) -> int:
    data = text.encode()
    written = 0
    while written < len(data):
        written += os.write(fd, data[written:])
    return written


def put_char(c: str, fd: int) -> int:
    """Write one character to ``fd``."""
    return _write(fd, _char(c))


def put_str(s: Optional[str], fd: int) -> int:
    """Write a string to ``fd``; ``None`` writes nothing."""
    return _write(fd, s or "")


def put_endl(s: Optional[str], fd: int) -> int:
    """Write a string followed by a newline to ``fd``."""
    return put_str(s, fd) + _write(fd, "\n")


def put_nbr(n: int, fd: int) -> int:
    """Write a 32-bit signed integer in decimal to ``fd``."""
    return _write(fd, str(_to_int32(int(n))))