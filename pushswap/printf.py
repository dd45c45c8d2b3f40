"""Formatted output supporting the conversions %c %s %p %d %i %u %x %X %%."""

from __future__ import annotations

import sys

_UINT32 = 1 << 32
_UINT64 = 1 << 64
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def _hex(n: int, digits: str) -> str:
    if n < 0:
        raise ValueError(f"cannot render a negative number in hex: {n}")
    if n == 0:
        return "0"
    out = []
    while n:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def to_hex(n: int) -> str:
    """Render a non-negative integer in lower-case hexadecimal."""
    return _hex(n, _HEX_LOWER)


def to_hex_upper(n: int) -> str:
    """Render a non-negative integer in upper-case hexadecimal."""
    return _hex(n, _HEX_UPPER)


def format_decimal(n: int) -> str:
    """Render a signed integer in decimal."""
    return str(n)


def format_unsigned(n: int) -> str:
    """Render an integer as a 32-bit unsigned decimal, wrapping negatives."""
    return str(n % _UINT32)


def format_pointer(address: int) -> str:
    """Render an address as '0x' followed by lower-case hex digits."""
    return "0x" + to_hex(address % _UINT64)


def _as_int32(n: int) -> int:
    n %= _UINT32
    return n - _UINT32 if n >= _UINT32 // 2 else n


def _as_char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value % 256)
    raise TypeError(f"%c expects a character or an int, got {type(value).__name__}")


def _as_str(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _as_number(value: object, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def format_string(fmt: str, *args: object) -> str:
    """Expand the conversions in fmt with args and return the text.

    A '%' followed by an unknown character yields that character alone.
    A '%' at the very end of fmt, or too few arguments, is an error.
    Extra arguments are ignored.
    """
    pending = iter(args)

    def take(spec: str) -> object:
        try:
            return next(pending)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None

    parts: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("incomplete conversion at end of format")
        if spec == "c":
            parts.append(_as_char(take(spec)))
        elif spec == "s":
            parts.append(_as_str(take(spec)))
        elif spec == "p":
            parts.append(format_pointer(_as_number(take(spec), spec)))
        elif spec in ("d", "i"):
            parts.append(format_decimal(_as_int32(_as_number(take(spec), spec))))
        elif spec == "u":
            parts.append(format_unsigned(_as_number(take(spec), spec)))
        elif spec == "x":
            parts.append(to_hex(_as_number(take(spec), spec) % _UINT32))
        elif spec == "X":
            parts.append(to_hex_upper(_as_number(take(spec), spec) % _UINT32))
        else:
            parts.append(spec)
    return "".join(parts)


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)