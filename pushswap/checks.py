"""Parsing of the number list and the validity checks applied to it."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pushswap.textutils import atoi, is_digit, split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass(slots=True)
class Element:
    """One number on a stack together with its sorting bookkeeping."""

    value: int
    index: int = 0
    pos: int = 0
    target_pos: int = 0
    cost_a: int = 0
    cost_b: int = 0


def is_valid_numbers(text: str) -> bool:
    """True if text is one or more space-separated integers.

    Each number is an optional '-' followed by at least one digit and must
    be followed by a space or the end of the text. Empty text, or text of
    spaces only, is not valid.
    """
    if not text:
        return False
    length = len(text)
    i = 0
    while i < length:
        while i < length and text[i] == " ":
            i += 1
        if i < length and text[i] == "-":
            i += 1
        if i >= length or not is_digit(text[i]):
            return False
        while i < length and is_digit(text[i]):
            i += 1
        if i < length and text[i] != " ":
            return False
        while i < length and text[i] == " ":
            i += 1
    return True


def is_sorted(elements: Sequence[Element]) -> bool:
    """True if the values never decrease; an empty sequence is not sorted."""
    if not elements:
        return False
    return all(a.value <= b.value for a, b in zip(elements, elements[1:]))


def has_duplicates(elements: Sequence[Element]) -> bool:
    """True if any value occurs more than once."""
    seen: set[int] = set()
    for element in elements:
        if element.value in seen:
            return True
        seen.add(element.value)
    return False


def all_in_int_range(elements: Sequence[Element]) -> bool:
    """True if every value fits in a signed 32-bit integer."""
    return all(INT_MIN <= element.value <= INT_MAX for element in elements)


def parse_elements(text: str) -> list[Element]:
    """Split text on spaces and turn each piece into an Element."""
    return [Element(atoi(token)) for token in split(text, " ")]