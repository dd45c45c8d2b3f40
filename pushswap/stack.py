"""Swap operations on a stack of elements whose top is the first item."""

from __future__ import annotations

from collections.abc import MutableSequence

from pushswap.checks import Element
from pushswap.printf import printf


def swap(stack: MutableSequence[Element]) -> None:
    """Exchange the value and index of the top two elements, if there are two."""
    if len(stack) < 2:
        return
    first, second = stack[0], stack[1]
    first.value, second.value = second.value, first.value
    first.index, second.index = second.index, first.index


def sa(stack_a: MutableSequence[Element]) -> None:
    """Swap the top of stack A and report 'sa'."""
    swap(stack_a)
    printf("sa\n")


def sb(stack_b: MutableSequence[Element]) -> None:
    """Swap the top of stack B and report 'sb'."""
    swap(stack_b)
    printf("sb\n")


def ss(stack_a: MutableSequence[Element], stack_b: MutableSequence[Element]) -> None:
    """Swap the tops of both stacks and report 'ss'."""
    swap(stack_a)
    swap(stack_b)
    printf("ss\n")