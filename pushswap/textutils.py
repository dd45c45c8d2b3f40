"""Small character and string helpers used when reading the program input."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def _code(c: int | str) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits yields 0. The
    result is the exact value of the digits, with no fixed-width wrap-around.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) > 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if not sep:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def _codes(s: str | bytes) -> list[int]:
    return list(s) if isinstance(s, (bytes, bytearray)) else [ord(ch) for ch in s]


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most n characters.

    Returns the difference between the first pair of differing character
    codes, or 0 if the strings agree over the compared span. The end of a
    string compares as code 0.
    """
    a, b = _codes(s1), _codes(s2)
    for i in range(n):
        ca = a[i] if i < len(a) else 0
        cb = b[i] if i < len(b) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find needle wholly inside the first length characters of haystack.

    Returns the rest of haystack from the match onward, or None.
    An empty needle matches at the start.
    """
    if not needle:
        return haystack
    limit = max(0, min(length, len(haystack)))
    index = haystack.find(needle, 0, limit)
    return haystack[index:] if index >= 0 else None


def strtrim(text: str, charset: str) -> str:
    """Remove characters in charset from both ends of text."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]