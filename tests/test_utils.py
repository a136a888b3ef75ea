# tests/test_utils.py
import pytest

from valida_br.rules.utils import only_digits, is_repeated_sequence, mask_value


@pytest.mark.parametrize("raw, expected", [
    ("111.444.777-35", "11144477735"),
    ("(11) 98765-4321", "11987654321"),
    ("abc", ""),
    ("", ""),
    (None, ""),
    (12345, "12345"),
])
def test_only_digits(raw, expected):
    assert only_digits(raw) == expected


@pytest.mark.parametrize("raw", ["11.222.333/0001-81", "  +55 (11) 9 8765-4321 ", "a1b2c3", "", "٣٤"])
def test_only_digits_is_idempotent(raw):
    once = only_digits(raw)
    assert only_digits(once) == once


def test_only_digits_ignores_non_ascii_digits():
    assert only_digits("١٢٣4") == "4"


@pytest.mark.parametrize("digits, min_len, expected", [
    ("00000000000", 11, True),
    ("99999999999999", 14, True),
    ("1111111", 11, False),  # curto demais
    ("11111111112", 11, False),
    ("", 0, False),
    ("7777", 3, True),
])
def test_is_repeated_sequence(digits, min_len, expected):
    assert is_repeated_sequence(digits, min_len) is expected


def test_mask_value_hides_most_of_the_value():
    assert mask_value("11144477735") == "111..."
    assert mask_value("12") == "**"
