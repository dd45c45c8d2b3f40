# pushswap

Checks a single line of space-separated integers before it is handed to a
stack sorter, and provides the swap operations on stacks and a few text
helpers that go with it.

## Install

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Command line

    pushswap "3 1 2"

The command takes exactly one argument: a string of integers separated by
spaces. Each number may carry a leading `-`. The checks run in this order and
the first failure is reported:

| Output           | Meaning                                               |
|------------------|-------------------------------------------------------|
| `Error`          | wrong argument count, or a token is not a number      |
| `Error list`     | no numbers were found in the argument                 |
| `Not int`        | a value lies outside the signed 32-bit range          |
| `Is duplicate!!` | the same value appears more than once                 |
| `Not order`      | the values are not in ascending order                 |

Nothing is printed when the input is valid and already sorted. A wrong number
of arguments exits with status 1; every other case exits with status 0.

## Library

    from pushswap.checks import (
        is_valid_numbers, parse_elements, all_in_int_range,
        has_duplicates, is_sorted,
    )

    text = "4 -2 7"
    if is_valid_numbers(text):
        elements = parse_elements(text)
        print(all_in_int_range(elements), has_duplicates(elements), is_sorted(elements))

- `pushswap.checks`: `is_valid_numbers` accepts one or more numbers made of an
  optional `-` and digits, separated by spaces. `parse_elements` splits the
  text on spaces and returns a list of `Element` records (`value`, `index`,
  `pos`, `target_pos`, `cost_a`, `cost_b`). `is_sorted` treats an empty list
  as not sorted.
- `pushswap.stack`: a stack is a list of `Element` whose first item is the
  top. `swap` exchanges the `value` and `index` of the top two elements (and
  does nothing with fewer than two); `sa`, `sb` and `ss` do the same to stack
  A, stack B or both and print `sa`, `sb` or `ss` on standard output.
- `pushswap.textutils`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strncmp`, `strnstr` and the character tests `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
- `pushswap.printf`: `format_string` and `printf` handle the conversions
  `%c %s %p %d %i %u %x %X %%`; `to_hex`, `to_hex_upper`, `format_decimal`,
  `format_unsigned` and `format_pointer` render single values.

## What it does not do

The package validates input and can swap the tops of stacks, but it does not
sort. There are no push or rotate operations, and no command works out or
prints a sequence of operations that would sort the numbers.