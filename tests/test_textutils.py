import pytest

from pushswap import textutils as tu


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648, 987654321])
def test_atoi_itoa_round_trip(n):
    assert tu.atoi(tu.itoa(n)) == n


def test_atoi_skips_whitespace_and_sign():
    assert tu.atoi(" \t\n\v\f\r-42") == -42
    assert tu.atoi("+17") == 17


def test_atoi_stops_at_non_digit():
    assert tu.atoi("123abc456") == 123
    assert tu.atoi("12 34") == 12


def test_atoi_without_digits_is_zero():
    assert tu.atoi("") == 0
    assert tu.atoi("abc") == 0
    assert tu.atoi("-") == 0
    assert tu.atoi("--5") == 0


def test_atoi_keeps_values_beyond_int():
    assert tu.atoi("2147483648") == 2147483648
    assert tu.atoi("-2147483649") == -2147483649


def test_itoa_negative_has_leading_minus():
    text = tu.itoa(-2147483648)
    assert text == "-2147483648"
    assert text.startswith("-")


@pytest.mark.parametrize("ch", list("azAZ"))
def test_letters(ch):
    assert tu.is_alpha(ch) is True
    assert tu.is_alnum(ch) is True
    assert tu.is_digit(ch) is False


@pytest.mark.parametrize("ch", list("0123456789"))
def test_digits(ch):
    assert tu.is_digit(ch) is True
    assert tu.is_alnum(ch) is True
    assert tu.is_alpha(ch) is False


@pytest.mark.parametrize("ch", ["@", "[", "`", "{", " ", "-"])
def test_neither_letter_nor_digit(ch):
    assert tu.is_alnum(ch) is False


def test_predicates_accept_codes():
    assert tu.is_digit(48) is True
    assert tu.is_digit(57) is True
    assert tu.is_digit(47) is False
    assert tu.is_digit(58) is False


def test_is_ascii_bounds():
    assert tu.is_ascii(0) is True
    assert tu.is_ascii(127) is True
    assert tu.is_ascii(128) is False
    assert tu.is_ascii(-1) is False


def test_is_print_bounds():
    assert tu.is_print(32) is True
    assert tu.is_print(126) is True
    assert tu.is_print(31) is False
    assert tu.is_print(127) is False


def test_predicate_rejects_long_string():
    with pytest.raises(ValueError):
        tu.is_digit("12")


def test_case_conversion_round_trip():
    for ch in "abcdefghijklmnopqrstuvwxyz":
        assert tu.to_lower(tu.to_upper(ch)) == ch
        assert tu.to_upper(ch) == ch.upper()
    for ch in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        assert tu.to_upper(tu.to_lower(ch)) == ch
        assert tu.to_lower(ch) == ch.lower()


def test_case_conversion_leaves_others():
    for ch in "0@[`{ ~":
        assert tu.to_upper(ch) == ch
        assert tu.to_lower(ch) == ch


def test_case_conversion_on_codes():
    assert tu.to_upper(ord("q")) == ord("Q")
    assert tu.to_lower(ord("Q")) == ord("q")


def test_split_drops_empty_pieces():
    assert tu.split("  1 2   3 ", " ") == ["1", "2", "3"]
    assert tu.split("", " ") == []
    assert tu.split("    ", " ") == []


def test_split_join_round_trip():
    words = ["4", "-7", "19", "0"]
    assert tu.split(" ".join(words), " ") == words


def test_split_no_separator_present():
    assert tu.split("hello", ",") == ["hello"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        tu.split("a,b", ",,")


def test_strncmp_equal():
    assert tu.strncmp("abc", "abc", 3) == 0
    assert tu.strncmp("abcX", "abcY", 3) == 0
    assert tu.strncmp("abc", "xyz", 0) == 0


def test_strncmp_order_and_antisymmetry():
    assert tu.strncmp("abc", "abd", 3) < 0
    assert tu.strncmp("abd", "abc", 3) > 0
    assert tu.strncmp("abc", "abd", 3) == -tu.strncmp("abd", "abc", 3)


def test_strncmp_shorter_string_sorts_first():
    assert tu.strncmp("ab", "abc", 5) < 0
    assert tu.strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_bytes():
    assert tu.strncmp(b"\xff", b"\x01", 1) > 0


def test_strnstr_found():
    assert tu.strnstr("lorem ipsum dolor", "ipsum", 17) == "ipsum dolor"


def test_strnstr_must_fit_in_length():
    assert tu.strnstr("lorem ipsum dolor", "ipsum", 10) is None
    assert tu.strnstr("lorem ipsum dolor", "ipsum", 11) == "ipsum dolor"


def test_strnstr_empty_needle_and_missing():
    assert tu.strnstr("haystack", "", 0) == "haystack"
    assert tu.strnstr("haystack", "needle", 100) is None
    assert tu.strnstr("", "a", 5) is None


def test_strtrim():
    assert tu.strtrim("xxhixyx", "xy") == "hi"
    assert tu.strtrim("xyxy", "xy") == ""
    assert tu.strtrim("  keep  ", "") == "  keep  "


def test_strtrim_result_has_no_edge_chars():
    out = tu.strtrim("--==value==--", "-=")
    assert out == "value"
    assert not out.startswith(("-", "="))


def test_substr():
    assert tu.substr("hello world", 6, 5) == "world"
    assert tu.substr("hello", 1, 100) == "ello"
    assert tu.substr("hello", 5, 3) == ""
    assert tu.substr("hello", 10, 3) == ""


def test_substr_concatenation_invariant():
    text = "push swap"
    for cut in range(len(text) + 1):
        assert tu.substr(text, 0, cut) + tu.substr(text, cut, len(text)) == text


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        tu.substr("abc", -1, 2)
    with pytest.raises(ValueError):
        tu.substr("abc", 0, -2)