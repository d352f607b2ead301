"""Formatted output with a small printf-style mini-language.

Supported conversions are ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%x``,
``%X``, ``%p`` and ``%%``. An unknown conversion produces no output and
consumes no argument; a lone ``%`` at the end of the template is copied
as is.
"""

from __future__ import annotations

import operator
import os
import sys
from collections.abc import Callable, Iterator
from typing import Any

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_NIL = "(nil)"
_NULL_STRING = "(null)"


def _wrap(value: Any, bits: int, signed: bool) -> int:
    """Reduce an integer to a fixed-width machine integer."""
    value = operator.index(value) & ((1 << bits) - 1)
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def to_base(number: int, digits: str) -> str:
    """Write a non-negative integer using ``digits`` as the digit alphabet."""
    number = operator.index(number)
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(out))


def format_pointer(address: int | None) -> str:
    """Render an address as ``0x`` plus lower-case hex, or ``(nil)`` for null."""
    if address is None:
        return _NIL
    address = operator.index(address)
    if address < 0:
        raise ValueError(f"address must not be negative, got {address}")
    if address == 0:
        return _NIL
    return "0x" + to_base(address, _LOWER_HEX)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_wrap(value, 8, signed=False))


def _string(value: Any) -> str:
    return _NULL_STRING if value is None else str(value)


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": lambda value: str(_wrap(value, 32, signed=True)),
    "i": lambda value: str(_wrap(value, 32, signed=True)),
    "u": lambda value: str(_wrap(value, 32, signed=False)),
    "x": lambda value: to_base(_wrap(value, 64, signed=False), _LOWER_HEX),
    "X": lambda value: to_base(_wrap(value, 64, signed=False), _UPPER_HEX),
    "p": lambda value: format_pointer(
        None if value is None else _wrap(value, 64, signed=False)
    ),
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    converter = _CONVERTERS.get(spec)
    if converter is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"missing argument for %{spec}") from None
    return converter(value)


def format(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the resulting text."""
    parts = []
    chars = iter(template)
    values = iter(args)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            parts.append("%")
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(template: str, *args: Any) -> int:
    """Write the expanded template to standard output; return its length."""
    text = format(template, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def put_str(text: str, fd: int) -> None:
    """Write ``text`` to the file descriptor ``fd``."""
    view = memoryview(text.encode())
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_endl(text: str, fd: int) -> None:
    """Write ``text`` followed by a newline to ``fd``."""
    put_str(text + "\n", fd)


def put_nbr(number: int, fd: int) -> None:
    """Write a 32-bit signed integer in decimal to ``fd``."""
    put_str(str(_wrap(number, 32, signed=True)), fd)